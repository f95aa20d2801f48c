"""Collect source files into memory."""

import logging
from pathlib import Path
from typing import Iterable

from parse_bench.models import MemoryBuffer

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".py"


def collect_sources(
    paths: Iterable[str | Path],
    extension: str = DEFAULT_EXTENSION,
) -> list[MemoryBuffer]:
    """Load every source file under ``paths`` into memory.

    Directories are walked recursively; files are kept if their name ends
    with ``extension``. Collection is best effort: files or directories that
    cannot be read are skipped and only logged at debug level.

    The order is stable for an unchanged corpus: input paths in the order
    given, and within a directory a depth-first walk in sorted name order.

    Args:
        paths: Files and/or directories to collect from.
        extension: Source file extension to match.

    Returns:
        Loaded buffers, identified by their path.
    """
    buffers: list[MemoryBuffer] = []

    # Explicit stack instead of recursion, so deep trees are fine.
    pending = [Path(p) for p in reversed(list(paths))]
    while pending:
        path = pending.pop()

        if path.is_dir():
            try:
                entries = sorted(path.iterdir())
            except OSError as e:
                logger.debug(f"Skipping unreadable directory {path}: {e}")
                continue
            pending.extend(reversed(entries))
            continue

        if not path.name.endswith(extension):
            continue

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.debug(f"Skipping unreadable file {path}: {e}")
            continue

        buffers.append(MemoryBuffer(identifier=str(path), data=data))

    logger.debug(f"Collected {len(buffers)} source files")
    return buffers
