"""Parser backed by the LibCST concrete syntax tree library."""

from parse_bench.models import MemoryBuffer, ParseOptions, ParseResult
from parse_bench.parsers.base import BaseParser

try:
    import libcst
except ImportError:  # optional dependency, see the ``libcst`` extra
    libcst = None


def is_available() -> bool:
    """Return whether LibCST is installed."""
    return libcst is not None


class LibCSTParser(BaseParser):
    """Parse each buffer into a full LibCST module tree and drop it.

    LibCST is an optional dependency. Without it the parser stays
    selectable, but every call fails immediately with an "unsupported"
    error and never looks at the buffer.

    The ``skip_bodies`` option is not implemented here; LibCST always
    builds the complete tree.
    """

    @property
    def name(self) -> str:
        """Return the parser name."""
        return "LibCST"

    def parse(self, buffer: MemoryBuffer, options: ParseOptions) -> ParseResult:
        """Parse a buffer with ``libcst.parse_module``.

        Args:
            buffer: Source buffer to parse.
            options: Parse options; ``skip_bodies`` is ignored.

        Returns:
            ParseResult for the call.
        """
        if libcst is None:
            return ParseResult.failure(self.name, None, f"{self.name} is not supported")

        # TODO: honor options.skip_bodies once LibCST can defer function bodies.
        try:
            module = libcst.parse_module(buffer.data)
        except Exception as e:
            return ParseResult.failure(self.name, buffer.identifier, f"{buffer.identifier}: {e}")
        del module

        return ParseResult.ok(self.name, buffer.identifier)
