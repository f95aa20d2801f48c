"""Parser backed by the interpreter's built-in ``ast`` module.

Every call builds a fresh ParseContext, so nothing is shared between calls
and each measurement reflects the cold cost of parsing one file.

With delayed bodies enabled the context does not build syntax trees for the
bodies of top-level functions and classes. The buffer is tokenized, each
such body is replaced by ``...`` and only the resulting skeleton is parsed.
"""

import ast
import io
import tokenize
from dataclasses import dataclass, field

from parse_bench.models import MemoryBuffer, ParseOptions, ParseResult
from parse_bench.parsers.base import BaseParser

# Statements whose indented body can be delayed.
DEFERRABLE_KEYWORDS = frozenset({"def", "class", "async"})


@dataclass
class DeferredBody:
    """Line span (1-based, inclusive) of a body that was not parsed."""
    start_line: int
    end_line: int
    indent: str


@dataclass
class ParseContext:
    """State for parsing a single buffer. Never reused."""
    filename: str
    delay_bodies: bool = False
    deferred: list[DeferredBody] = field(default_factory=list)

    def parse_top_level_items(self, data: bytes) -> list[ast.stmt]:
        """Parse ``data`` and return the module's top-level statements."""
        if not self.delay_bodies:
            return ast.parse(data, filename=self.filename).body

        source = decode_source(data)
        self.deferred = find_deferred_bodies(source)
        skeleton = build_skeleton(source, self.deferred)
        return ast.parse(skeleton, filename=self.filename).body


def decode_source(data: bytes) -> str:
    """Decode source bytes using the PEP 263 coding cookie, if any."""
    encoding, _ = tokenize.detect_encoding(io.BytesIO(data).readline)
    return data.decode(encoding)


def find_deferred_bodies(source: str) -> list[DeferredBody]:
    """Locate the indented bodies of top-level ``def`` and ``class`` statements.

    Single-line bodies (``def f(): pass``) are left in place.

    Args:
        source: Decoded Python source.

    Returns:
        Body spans in source order.
    """
    bodies: list[DeferredBody] = []
    depth = 0
    at_line_start = True
    in_header = False
    pending_start: int | None = None
    body_start: int | None = None
    body_indent = ""

    for tok in tokenize.generate_tokens(io.StringIO(source).readline):
        kind = tok.type
        if kind in (tokenize.COMMENT, tokenize.NL):
            continue

        if kind == tokenize.INDENT:
            depth += 1
            if depth == 1 and pending_start is not None:
                body_start = pending_start
                body_indent = tok.string
            pending_start = None
            continue

        if kind == tokenize.DEDENT:
            depth -= 1
            if depth == 0 and body_start is not None:
                bodies.append(DeferredBody(body_start, tok.start[0] - 1, body_indent))
                body_start = None
            continue

        if kind == tokenize.NEWLINE:
            if in_header:
                pending_start = tok.start[0] + 1
            in_header = False
            at_line_start = True
            continue

        if kind == tokenize.ENDMARKER:
            break

        # Any other token means the header did not open an indented block.
        pending_start = None
        if at_line_start:
            in_header = (
                depth == 0
                and kind == tokenize.NAME
                and tok.string in DEFERRABLE_KEYWORDS
            )
            at_line_start = False

    return bodies


def build_skeleton(source: str, bodies: list[DeferredBody]) -> str:
    """Return ``source`` with every deferred body replaced by ``...``."""
    lines = io.StringIO(source).readlines()
    out: list[str] = []
    next_line = 1
    for body in bodies:
        out.extend(lines[next_line - 1:body.start_line - 1])
        out.append(f"{body.indent}...\n")
        next_line = body.end_line + 1
    out.extend(lines[next_line - 1:])
    return "".join(out)


def describe_error(identifier: str, error: Exception) -> str:
    """Format a parse failure as a one-line message."""
    if isinstance(error, SyntaxError) and error.lineno is not None:
        return f"{identifier}:{error.lineno}: {error.msg}"
    return f"{identifier}: {error}"


class AstParser(BaseParser):
    """Parse buffers with the interpreter's own parser.

    Supports ``skip_bodies`` by delaying the bodies of top-level functions
    and classes (see ParseContext).

    Note that delaying bodies is not free: the whole buffer is first run
    through the pure-Python ``tokenize`` module, which usually costs more
    than the parsing it saves. A ``skip_bodies`` run of this parser is
    typically slower than a full parse and should not be read as the
    speedup a parser with native body skipping would show.
    """

    @property
    def name(self) -> str:
        """Return the parser name."""
        return "ast"

    def parse(self, buffer: MemoryBuffer, options: ParseOptions) -> ParseResult:
        """Parse a buffer to its top-level statements and discard them.

        Args:
            buffer: Source buffer to parse.
            options: Parse options for this call.

        Returns:
            ParseResult for the call.
        """
        context = ParseContext(
            filename=buffer.identifier,
            delay_bodies=options.skip_bodies,
        )

        try:
            items = context.parse_top_level_items(buffer.data)
        except Exception as e:
            return ParseResult.failure(
                self.name, buffer.identifier, describe_error(buffer.identifier, e)
            )
        del items

        return ParseResult.ok(self.name, buffer.identifier)
