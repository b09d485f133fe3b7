"""
Exceptions and error reporting for relaxjson.

The transpiler itself never raises. These errors are produced by the facade
when the downstream decoder rejects transpiled text, when security limits are
exceeded, when typed binding fails, or when a configuration is invalid.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.transpiler import Position


@dataclass
class ErrorContext:
    """Snippet of source text surrounding an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class RelaxJSONError(Exception):
    """Base exception for all relaxjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            msg += f"\n\nContext:\n{self.context.line_text}\n{self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ParseError(RelaxJSONError, ValueError):
    """Raised when transpiled text is rejected by the JSON decoder."""


class SecurityError(RelaxJSONError):
    """Raised when input exceeds configured limits."""


class BindingError(RelaxJSONError, TypeError):
    """Raised when decoded data cannot be mapped onto the requested type."""


class ConfigurationError(RelaxJSONError, ValueError):
    """Raised when configuration options are unknown or invalid."""


class ErrorReporter:
    """Builds errors with line context for a given source text."""

    def __init__(self, text: str, context_size: int = 20):
        self.text = text
        self.lines = text.split("\n")
        self.context_size = context_size

    def create_context(self, position: Position) -> ErrorContext:
        """Create error context for a position, clamping out-of-range positions."""
        line_index = min(max(position.line - 1, 0), max(len(self.lines) - 1, 0))
        line_text = self.lines[line_index] if self.lines else ""
        col = min(max(position.column - 1, 0), len(line_text))

        before = line_text[max(0, col - self.context_size) : col]
        after = line_text[col : col + self.context_size]
        error_char = line_text[col] if col < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=before,
            context_after=after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * col + "^",
        )

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create a ParseError with context."""
        return ParseError(message, position, self.create_context(position), suggestions)
