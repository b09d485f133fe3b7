"""
Configuration and limits for relaxjson.

Configuration values are frozen dataclasses. Build them with make_config(),
which validates flat option names, or use DEFAULT_CONFIG. The transpiler takes
no configuration at all; these settings only drive the decode/encode facade.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Optional

from ..security.exceptions import ConfigurationError


@dataclass(frozen=True)
class FormattingSettings:
    """How encoded output is rendered."""
    pretty_print: bool = False
    pretty_print_indent: str = "    "
    sort_keys: bool = False
    ensure_ascii: bool = False


@dataclass(frozen=True)
class DecodingSettings:
    """How decoded values are mapped onto typed results."""
    ignore_unknown_keys: bool = True
    allow_special_floats: bool = True
    coerce_input_values: bool = False


@dataclass(frozen=True)
class EncodingSettings:
    """How values are serialized."""
    encode_defaults: bool = True
    allow_special_floats: bool = True


@dataclass(frozen=True)
class ParseLimits:
    """Security limits applied before and after decoding."""
    max_input_size: int = 10 * 1024 * 1024
    max_nesting_depth: int = 100


@dataclass(frozen=True)
class TypeAdapters:
    """Custom hooks handed to the json codec."""
    object_hook: Optional[Callable[[dict[str, Any]], Any]] = None
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None
    parse_float: Optional[Callable[[str], Any]] = None
    parse_int: Optional[Callable[[str], Any]] = None
    parse_constant: Optional[Callable[[str], Any]] = None
    default: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class Json5Config:
    """Complete configuration for a Json5 facade instance."""

    formatting: FormattingSettings = field(default_factory=FormattingSettings)
    decoding: DecodingSettings = field(default_factory=DecodingSettings)
    encoding: EncodingSettings = field(default_factory=EncodingSettings)
    limits: ParseLimits = field(default_factory=ParseLimits)
    adapters: TypeAdapters = field(default_factory=TypeAdapters)

    @property
    def pretty_print(self) -> bool:
        """Whether encoded output is indented."""
        return self.formatting.pretty_print

    @property
    def pretty_print_indent(self) -> str:
        """Indent string used when pretty printing."""
        return self.formatting.pretty_print_indent

    @property
    def ignore_unknown_keys(self) -> bool:
        """Whether typed decoding skips keys the target type does not declare."""
        return self.decoding.ignore_unknown_keys

    @property
    def allow_special_floats(self) -> bool:
        """Whether Infinity and NaN are accepted when decoding."""
        return self.decoding.allow_special_floats

    @property
    def coerce_input_values(self) -> bool:
        """Whether null for a non-optional field falls back to its default."""
        return self.decoding.coerce_input_values

    @property
    def encode_defaults(self) -> bool:
        """Whether dataclass fields equal to their default are encoded."""
        return self.encoding.encode_defaults

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        return self.limits.max_input_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth of decoded values."""
        return self.limits.max_nesting_depth

    def with_options(self, **options: Any) -> "Json5Config":
        """Return a copy of this configuration with the given flat options changed."""
        return make_config(base=self, **options)


def _build_option_groups() -> dict[str, str]:
    """Map each flat option name to the settings group that owns it."""
    groups = {"encode_defaults": "encoding"}
    for group_name, group_cls in (
        ("formatting", FormattingSettings),
        ("decoding", DecodingSettings),
        ("limits", ParseLimits),
        ("adapters", TypeAdapters),
    ):
        for group_field in fields(group_cls):
            groups[group_field.name] = group_name
    return groups


_OPTION_GROUPS = _build_option_groups()


def _validate_option(name: str, value: Any) -> None:
    group_name = _OPTION_GROUPS[name]

    if group_name == "adapters":
        if value is not None and not callable(value):
            raise ConfigurationError(f"Option '{name}' must be callable or None")
        return

    if group_name == "limits":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"Option '{name}' must be an integer")
        if value <= 0:
            raise ConfigurationError(f"Option '{name}' must be positive")
        return

    if name == "pretty_print_indent":
        if not isinstance(value, str):
            raise ConfigurationError("Option 'pretty_print_indent' must be a string")
        if value.strip(" \t\r\n"):
            raise ConfigurationError(
                "Option 'pretty_print_indent' may only contain whitespace",
                suggestions=["Use spaces or tabs, for example '  ' or '\\t'"],
            )
        return

    if not isinstance(value, bool):
        raise ConfigurationError(f"Option '{name}' must be a boolean")


def make_config(base: Optional[Json5Config] = None, **options: Any) -> Json5Config:
    """
    Build a validated, immutable configuration from flat option names.

    Example:
        config = make_config(pretty_print=True, ignore_unknown_keys=False)
    """
    base = base or DEFAULT_CONFIG

    unknown = sorted(set(options) - set(_OPTION_GROUPS))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration option(s): {', '.join(unknown)}",
            suggestions=[f"Known options: {', '.join(sorted(_OPTION_GROUPS))}"],
        )

    grouped: dict[str, dict[str, Any]] = {}
    for name, value in options.items():
        _validate_option(name, value)
        group_name = _OPTION_GROUPS[name]
        grouped.setdefault(group_name, {})[name] = value

    # allow_special_floats governs both directions
    if "allow_special_floats" in options:
        grouped.setdefault("encoding", {})["allow_special_floats"] = options[
            "allow_special_floats"
        ]

    updates = {
        group_name: replace(getattr(base, group_name), **values)
        for group_name, values in grouped.items()
    }
    return replace(base, **updates)


DEFAULT_CONFIG = Json5Config()
