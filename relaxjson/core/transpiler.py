"""
Transpiler for relaxjson - rewrites relaxed JSON5-style text into strict JSON.

The transpiler is purely lexical. It removes comments, quotes unquoted keys,
re-quotes single-quoted strings, joins continued string lines and normalizes
numeric literals. It never builds values and never validates structure;
malformed input yields best-effort output for the downstream decoder to reject.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    HEX_DIGITS,
    HEX_PREFIXES,
    QUOTE_CHARS,
    SPECIAL_NUMBER_LITERALS,
    is_line_terminator,
    is_token_part,
    is_token_start,
)

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Kinds of constructs the transpiler could only handle on a best-effort basis."""

    UNTERMINATED_STRING = "UNTERMINATED_STRING"
    UNTERMINATED_COMMENT = "UNTERMINATED_COMMENT"


@dataclass
class Position:
    """Position in source text (line and column)."""

    line: int
    column: int


@dataclass
class Diagnostic:
    """A note about input the transpiler passed through without closing it."""

    kind: DiagnosticKind
    offset: int
    position: Position

    @property
    def message(self) -> str:
        what = "string" if self.kind is DiagnosticKind.UNTERMINATED_STRING else "comment"
        return (
            f"Unterminated {what} starting at line {self.position.line}, "
            f"column {self.position.column}"
        )


class Transpiler:
    """Single-pass rewriter from relaxed JSON text to standard JSON text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.diagnostics: list[Diagnostic] = []
        self._out: list[str] = []
        self._result: Optional[str] = None

    def transpile(self) -> str:
        """Scan the whole input once and return the strict JSON text."""
        if self._result is not None:
            return self._result

        while self.pos < self.length:
            char = self.text[self.pos]

            if char == "/":
                self._handle_comment()
            elif char in QUOTE_CHARS:
                self._handle_string(char)
            elif is_token_start(char):
                self._handle_token()
            else:
                self._out.append(char)
                self.pos += 1

        self._result = "".join(self._out)
        return self._result

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= self.length:
            return ""
        return self.text[pos]

    def position_of(self, offset: int) -> Position:
        """Translate an input offset into a 1-based line and column."""
        return position_of(self.text, offset)

    def _report(self, kind: DiagnosticKind, offset: int) -> None:
        diagnostic = Diagnostic(kind, offset, self.position_of(offset))
        self.diagnostics.append(diagnostic)
        logger.debug("%s", diagnostic.message)

    def _handle_comment(self) -> None:
        next_char = self.peek(1)

        if next_char == "/":
            self.pos += 2
            # The line terminator is left for the main loop to copy
            while self.pos < self.length and not is_line_terminator(self.text[self.pos]):
                self.pos += 1
        elif next_char == "*":
            start = self.pos
            end = self.text.find("*/", self.pos + 2)
            if end == -1:
                self._report(DiagnosticKind.UNTERMINATED_COMMENT, start)
                self.pos = self.length
            else:
                self.pos = end + 2
        else:
            self._out.append("/")
            self.pos += 1

    def _handle_string(self, quote_char: str) -> None:
        start = self.pos
        self._out.append('"')
        self.pos += 1

        while self.pos < self.length:
            char = self.text[self.pos]

            if char == "\\":
                self._handle_escape(quote_char)
                continue

            if char == quote_char:
                self._out.append('"')
                self.pos += 1
                return

            if char == '"':
                # Only reachable inside a single-quoted string
                self._out.append('\\"')
            else:
                self._out.append(char)
            self.pos += 1

        self._report(DiagnosticKind.UNTERMINATED_STRING, start)

    def _handle_escape(self, quote_char: str) -> None:
        escaped = self.peek(1)

        if not escaped:
            self._out.append("\\")
            self.pos += 1
            return

        if is_line_terminator(escaped):
            self.pos += 1
            self._skip_line_terminator()
            return

        if quote_char == "'" and escaped == "'":
            self._out.append("'")
        else:
            self._out.append("\\" + escaped)
        self.pos += 2

    def _skip_line_terminator(self) -> None:
        if self.peek() == "\r" and self.peek(1) == "\n":
            self.pos += 2
        elif is_line_terminator(self.peek()):
            self.pos += 1

    def _handle_token(self) -> None:
        start = self.pos

        if self.text.startswith(HEX_PREFIXES, self.pos):
            self.pos += 2
            while self.pos < self.length and self.text[self.pos] in HEX_DIGITS:
                self.pos += 1
        else:
            while self.pos < self.length and is_token_part(self.text[self.pos]):
                self.pos += 1

        token = self.text[start:self.pos]
        if self._is_key(self.pos):
            self._out.append(f'"{token}"')
        else:
            self._out.append(normalize_number(token))

    def _is_key(self, index: int) -> bool:
        """Look past whitespace and comments for a colon without moving the cursor."""
        i = index
        while i < self.length:
            char = self.text[i]

            if char.isspace() or is_line_terminator(char):
                i += 1
                continue

            if char == "/" and i + 1 < self.length:
                next_char = self.text[i + 1]
                if next_char == "/":
                    i += 2
                    while i < self.length and not is_line_terminator(self.text[i]):
                        i += 1
                    continue
                if next_char == "*":
                    end = self.text.find("*/", i + 2)
                    if end == -1:
                        return False
                    i = end + 2
                    continue

            return char == ":"
        return False


def position_of(text: str, offset: int) -> Position:
    """
    Translate a character offset into a 1-based line and column.

    Every line terminator starts a new line; CRLF counts as one.
    """
    offset = max(0, min(offset, len(text)))
    line = 1
    line_start = 0
    i = 0
    while i < offset:
        if is_line_terminator(text[i]):
            if text[i] == "\r" and i + 1 < offset and text[i + 1] == "\n":
                i += 1
            line += 1
            line_start = i + 1
        i += 1
    return Position(line, offset - line_start + 1)


def normalize_number(token: str) -> str:
    """
    Rewrite a value token into a form a standard JSON decoder accepts.

    Handles:
    - Infinity/-Infinity/NaN/-NaN -> unchanged
    - Hexadecimal: 0xDECAF -> 912559
    - Explicit plus sign: +5 -> 5
    - Leading decimal point: .5 -> 0.5, -.5 -> -0.5
    - Trailing decimal point: 12. -> 12.0
    """
    if token in SPECIAL_NUMBER_LITERALS:
        return token

    if token.startswith(HEX_PREFIXES):
        try:
            return str(int(token[2:], 16))
        except ValueError:
            return token

    result = token

    if result.startswith("+"):
        result = result[1:]

    if result.startswith("."):
        result = "0" + result
    elif result.startswith("-."):
        result = "-0" + result[1:]

    if result.endswith(".") and not result.endswith(".."):
        result += "0"

    return result


def transpile(text: str) -> str:
    """Convert relaxed JSON text into standard JSON text."""
    return Transpiler(text).transpile()
