"""
Common constants and character classes used across the relaxjson library.
"""

LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")

QUOTE_CHARS = frozenset("\"'")

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

HEX_PREFIXES = ("0x", "0X")

# Extra characters (besides letters and digits) that may start a token
TOKEN_START_EXTRAS = frozenset("$_.+-")

# Extra characters (besides letters and digits) allowed inside a token
TOKEN_PART_EXTRAS = frozenset("$_-+.\\")

# Non-finite literals passed through untouched for the downstream decoder
SPECIAL_NUMBER_LITERALS = frozenset({"Infinity", "-Infinity", "NaN", "-NaN"})


def is_line_terminator(char: str) -> bool:
    """Check whether char ends a line."""
    return char in LINE_TERMINATORS


def is_token_start(char: str) -> bool:
    """Check whether char can begin an unquoted key or literal."""
    return char.isalpha() or char.isdecimal() or char in TOKEN_START_EXTRAS


def is_token_part(char: str) -> bool:
    """Check whether char can continue an unquoted key or literal."""
    return char.isalpha() or char.isdecimal() or char in TOKEN_PART_EXTRAS
