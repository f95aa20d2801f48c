"""Abstract base class for all parser implementations."""

from abc import ABC, abstractmethod

from parse_bench.models import MemoryBuffer, ParseOptions, ParseResult


class BaseParser(ABC):
    """Abstract base class that all benchmarked parsers must inherit from.

    Defines the single operation the benchmark drives. Implementations must
    not keep any state between calls, so every call has the same cost
    profile no matter how many times it is repeated.

    Example:
        class MyParser(BaseParser):
            @property
            def name(self) -> str:
                return "my-parser"

            def parse(self, buffer: MemoryBuffer, options: ParseOptions) -> ParseResult:
                # Implementation here
                pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of this parser.

        Used in reports and logging.
        """
        pass

    @abstractmethod
    def parse(self, buffer: MemoryBuffer, options: ParseOptions) -> ParseResult:
        """Parse one buffer and discard the result.

        Args:
            buffer: Source buffer to parse.
            options: Parse options for this call.

        Returns:
            ParseResult describing success or failure. Never raises.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
