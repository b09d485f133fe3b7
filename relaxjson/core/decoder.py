"""
Downstream decoding of transpiled text.

The transpiler deliberately leaves trailing commas and non-finite literals in
place. This module configures the standard json codec to accept them: trailing
commas are dropped (keeping the surrounding whitespace so line numbers in
decoder errors still match), -NaN is folded into NaN, and non-finite literals
are accepted or rejected according to the configuration.
"""

import json
from typing import Any

from ..security.exceptions import ParseError
from ..utils.config import Json5Config


def prepare_for_decoding(text: str) -> str:
    """Drop trailing commas and fold -NaN into NaN, outside of strings."""
    # Transpiled text only contains double-quoted strings
    result = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        char = text[i]

        if in_string:
            result.append(char)
            if char == "\\" and i + 1 < length:
                result.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
        elif char == ",":
            j = i + 1
            while j < length and text[j].isspace():
                j += 1
            if j < length and text[j] in "}]":
                i += 1
                continue
        elif char == "-" and text.startswith("-NaN", i):
            i += 1
            continue

        result.append(char)
        i += 1

    return "".join(result)


def _reject_constant(name: str) -> Any:
    raise ParseError(
        f"Non-finite number literal '{name}' is not allowed",
        suggestions=["Enable allow_special_floats to accept Infinity and NaN"],
    )


def decode_json(text: str, config: Json5Config) -> Any:
    """
    Decode strict JSON text produced by the transpiler.

    Raises json.JSONDecodeError for syntax errors and ParseError for
    non-finite literals when they are disabled.
    """
    adapters = config.adapters
    if not config.allow_special_floats:
        parse_constant = _reject_constant
    else:
        parse_constant = adapters.parse_constant

    return json.loads(
        prepare_for_decoding(text),
        object_hook=adapters.object_hook,
        object_pairs_hook=adapters.object_pairs_hook,
        parse_float=adapters.parse_float,
        parse_int=adapters.parse_int,
        parse_constant=parse_constant,
    )
