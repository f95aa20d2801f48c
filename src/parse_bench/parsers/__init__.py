"""Parser implementations."""

from .base import BaseParser
from .libcst_parser import LibCSTParser
from .ast_parser import AstParser

# Command line identifier -> parser class, in the order shown in --help.
PARSERS: dict[str, type[BaseParser]] = {
    "libcst": LibCSTParser,
    "ast": AstParser,
}

AVAILABLE_PARSERS = list(PARSERS)


def get_parser(identifier: str) -> BaseParser:
    """Create the parser registered under ``identifier``.

    Raises:
        KeyError: If no parser has that identifier.
    """
    try:
        parser_cls = PARSERS[identifier]
    except KeyError:
        raise KeyError(f"Unknown parser '{identifier}'") from None
    return parser_cls()


__all__ = [
    "BaseParser",
    "LibCSTParser",
    "AstParser",
    "PARSERS",
    "AVAILABLE_PARSERS",
    "get_parser",
]
