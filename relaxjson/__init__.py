"""
relaxjson - read relaxed, human-friendly JSON with the standard json codec.

relaxjson rewrites JSON5-style text (comments, unquoted keys, single-quoted
strings, trailing commas, hexadecimal numbers, leading/trailing decimal points,
explicit plus signs, Infinity/NaN) into standard JSON, then decodes it with
Python's json module.

Quick Start:
    import relaxjson
    data = relaxjson.loads("{ name: 'Alice', age: 30, }")
    strict = relaxjson.transpile("// c\\n{ a: .5 }")

    # Typed decoding into dataclasses
    user = relaxjson.decode(text, into=User)

    # Custom configuration
    from relaxjson import Json5, make_config
    codec = Json5(make_config(pretty_print=True, ignore_unknown_keys=False))
"""

from .core.engine import (
    Json5,
    decode,
    dump,
    dumps,
    encode,
    load,
    loads,
    parse,
    stringify,
    transpile,
)
from .core.transpiler import Diagnostic, DiagnosticKind, Transpiler
from .security.exceptions import (
    BindingError,
    ConfigurationError,
    ParseError,
    RelaxJSONError,
    SecurityError,
)
from .utils.config import DEFAULT_CONFIG, Json5Config, make_config

__version__ = "0.1.0"
__author__ = "relaxjson contributors"

__all__ = [
    # Functions
    "transpile", "loads", "load", "decode", "parse",
    "dumps", "dump", "encode", "stringify",
    # Codec and transpiler
    "Json5", "Transpiler", "Diagnostic", "DiagnosticKind",
    # Configuration
    "Json5Config", "make_config", "DEFAULT_CONFIG",
    # Exception classes
    "RelaxJSONError", "ParseError", "SecurityError", "BindingError",
    "ConfigurationError",
]
