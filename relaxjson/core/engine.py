"""
Decode/encode facade for relaxjson.

Decoding runs the relaxed text through the transpiler, then hands the strict
result to the json codec. Encoding always produces standard JSON.
"""

import json
import logging
from typing import Any, Optional, TextIO, Union

from ..security.exceptions import ErrorReporter, ParseError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import DEFAULT_CONFIG, Json5Config, make_config
from .binding import from_data, to_data
from .decoder import decode_json
from .transpiler import Diagnostic, Position, Transpiler

logger = logging.getLogger(__name__)


class Json5:
    """
    Relaxed JSON codec bound to one immutable configuration.

    Example:
        codec = Json5(make_config(pretty_print=True))
        user = codec.decode("{ name: 'Alice', age: 30, }", into=User)
        text = codec.dumps(user)
    """

    def __init__(self, config: Optional[Json5Config] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.validator = LimitValidator(self.config.limits)

    def with_options(self, **options: Any) -> "Json5":
        """Create a new codec whose configuration differs by the given options."""
        return Json5(make_config(base=self.config, **options))

    def transpile(self, text: str) -> str:
        """Rewrite relaxed JSON text into standard JSON text."""
        return Transpiler(text).transpile()

    def loads(self, s: Union[str, bytes, bytearray]) -> Any:
        """Deserialize relaxed JSON text into Python values."""
        if isinstance(s, (bytes, bytearray)):
            s = s.decode(json.detect_encoding(s), "surrogatepass")

        self.validator.validate_input_size(s)
        transpiler = Transpiler(s)
        strict_text = transpiler.transpile()

        try:
            value = decode_json(strict_text, self.config)
        except json.JSONDecodeError as e:
            logger.debug("Decoder rejected transpiled text: %s", e)
            raise self._create_decode_error(e, transpiler.diagnostics) from e
        except RecursionError as e:
            raise SecurityError(
                "Input nests deeper than the decoder can handle"
            ) from e

        self.validator.validate_nesting_depth(value)
        return value

    def load(self, fp: TextIO) -> Any:
        """Deserialize relaxed JSON from a file-like object."""
        return self.loads(fp.read())

    def decode(self, text: Union[str, bytes, bytearray], into: Any = None) -> Any:
        """Decode relaxed JSON text, optionally binding the result to a dataclass type."""
        value = self.loads(text)
        if into is None:
            return value
        return from_data(into, value, self.config)

    parse = decode

    def dumps(self, obj: Any) -> str:
        """Serialize obj (dataclasses included) to standard JSON text."""
        formatting = self.config.formatting
        indent = formatting.pretty_print_indent if formatting.pretty_print else None
        separators = None if formatting.pretty_print else (",", ":")

        return json.dumps(
            to_data(obj, self.config.encode_defaults),
            indent=indent,
            separators=separators,
            sort_keys=formatting.sort_keys,
            ensure_ascii=formatting.ensure_ascii,
            allow_nan=self.config.encoding.allow_special_floats,
            default=self.config.adapters.default,
        )

    encode = dumps
    stringify = dumps

    def dump(self, obj: Any, fp: TextIO) -> None:
        """Serialize obj as standard JSON to a file-like object."""
        fp.write(self.dumps(obj))

    @staticmethod
    def _create_decode_error(
        error: json.JSONDecodeError, diagnostics: list[Diagnostic]
    ) -> ParseError:
        reporter = ErrorReporter(error.doc)
        suggestions = [diagnostic.message for diagnostic in diagnostics]
        return reporter.create_parse_error(
            error.msg, Position(error.lineno, error.colno), suggestions
        )


_default_codec = Json5(DEFAULT_CONFIG)


def transpile(text: str) -> str:
    """Rewrite relaxed JSON text into standard JSON text."""
    return _default_codec.transpile(text)


def loads(s: Union[str, bytes, bytearray]) -> Any:
    """Deserialize relaxed JSON text with the default configuration."""
    return _default_codec.loads(s)


def load(fp: TextIO) -> Any:
    """Deserialize relaxed JSON from a file-like object with the default configuration."""
    return _default_codec.load(fp)


def decode(text: Union[str, bytes, bytearray], into: Any = None) -> Any:
    """Decode relaxed JSON text, optionally into a dataclass, with the default configuration."""
    return _default_codec.decode(text, into)


parse = decode


def dumps(obj: Any) -> str:
    """Serialize obj to compact standard JSON with the default configuration."""
    return _default_codec.dumps(obj)


encode = dumps
stringify = dumps


def dump(obj: Any, fp: TextIO) -> None:
    """Serialize obj as standard JSON to a file-like object."""
    _default_codec.dump(obj, fp)
