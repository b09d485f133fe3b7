"""
Typed binding between decoded JSON values and dataclasses.

Decoding maps dicts onto dataclass instances (recursively through lists, dicts
and optionals); encoding turns dataclass instances back into plain JSON data.
"""

import dataclasses
import types
import typing
from enum import Enum
from typing import Any, Union

from ..security.exceptions import BindingError
from ..utils.config import Json5Config

_MISSING = dataclasses.MISSING


def _describe(path: str) -> str:
    return f" at '{path}'" if path else ""


def _field_default(field: dataclasses.Field) -> Any:
    if field.default is not _MISSING:
        return field.default
    if field.default_factory is not _MISSING:
        return field.default_factory()
    return _MISSING


def _is_optional(tp: Any) -> bool:
    return _is_union(tp) and type(None) in typing.get_args(tp)


def _is_union(tp: Any) -> bool:
    origin = typing.get_origin(tp)
    return origin is Union or origin is getattr(types, "UnionType", None)


def from_data(cls: Any, data: Any, config: Json5Config, path: str = "") -> Any:
    """Convert decoded JSON data into an instance of cls."""
    if cls is Any or cls is object:
        return data

    if dataclasses.is_dataclass(cls) and isinstance(cls, type):
        return _bind_dataclass(cls, data, config, path)

    if _is_union(cls):
        return _bind_union(cls, data, config, path)

    origin = typing.get_origin(cls)
    args = typing.get_args(cls)

    if origin is list or cls is list:
        if not isinstance(data, list):
            raise BindingError(f"Expected an array{_describe(path)}, got {type(data).__name__}")
        item_type = args[0] if args else Any
        return [
            from_data(item_type, item, config, f"{path}[{index}]")
            for index, item in enumerate(data)
        ]

    if origin is dict or cls is dict:
        if not isinstance(data, dict):
            raise BindingError(f"Expected an object{_describe(path)}, got {type(data).__name__}")
        value_type = args[1] if len(args) == 2 else Any
        return {
            key: from_data(value_type, value, config, f"{path}.{key}" if path else key)
            for key, value in data.items()
        }

    if isinstance(cls, type) and issubclass(cls, Enum):
        try:
            return cls(data)
        except ValueError as e:
            raise BindingError(f"Invalid {cls.__name__} value {data!r}{_describe(path)}") from e

    return _bind_scalar(cls, data, path)


def _bind_scalar(cls: Any, data: Any, path: str) -> Any:
    if cls is float and isinstance(data, int) and not isinstance(data, bool):
        return float(data)
    if cls is int and isinstance(data, bool):
        raise BindingError(f"Expected int{_describe(path)}, got bool")
    if isinstance(cls, type) and not isinstance(data, cls):
        raise BindingError(
            f"Expected {cls.__name__}{_describe(path)}, got {type(data).__name__}"
        )
    return data


def _bind_union(cls: Any, data: Any, config: Json5Config, path: str) -> Any:
    args = typing.get_args(cls)
    if data is None:
        if type(None) in args:
            return None
        raise BindingError(f"Unexpected null{_describe(path)}")

    errors = []
    for option in args:
        if option is type(None):
            continue
        try:
            return from_data(option, data, config, path)
        except BindingError as e:
            errors.append(e.message)
    raise BindingError(
        f"No type in {cls} matches{_describe(path)}", suggestions=errors
    )


def _bind_dataclass(cls: type, data: Any, config: Json5Config, path: str) -> Any:
    if not isinstance(data, dict):
        raise BindingError(
            f"Expected an object for {cls.__name__}{_describe(path)}, "
            f"got {type(data).__name__}"
        )

    hints = typing.get_type_hints(cls)
    init_fields = [f for f in dataclasses.fields(cls) if f.init]
    known = {f.name for f in init_fields}

    unknown = [key for key in data if key not in known]
    if unknown and not config.ignore_unknown_keys:
        raise BindingError(
            f"Unknown key(s) {', '.join(repr(k) for k in unknown)} "
            f"for {cls.__name__}{_describe(path)}",
            suggestions=["Enable ignore_unknown_keys to skip undeclared keys"],
        )

    kwargs = {}
    for field in init_fields:
        field_path = f"{path}.{field.name}" if path else field.name
        field_type = hints.get(field.name, Any)

        if field.name not in data:
            if _field_default(field) is _MISSING:
                raise BindingError(
                    f"Missing required field '{field.name}' for {cls.__name__}"
                    f"{_describe(path)}"
                )
            continue

        value = data[field.name]
        if (
            value is None
            and config.coerce_input_values
            and not _is_optional(field_type)
            and _field_default(field) is not _MISSING
        ):
            continue

        kwargs[field.name] = from_data(field_type, value, config, field_path)

    return cls(**kwargs)


def to_data(obj: Any, encode_defaults: bool = True) -> Any:
    """Convert dataclasses (recursively) into plain JSON-compatible data."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result = {}
        for field in dataclasses.fields(obj):
            value = getattr(obj, field.name)
            if not encode_defaults and value == _field_default(field):
                continue
            result[field.name] = to_data(value, encode_defaults)
        return result

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, dict):
        return {key: to_data(value, encode_defaults) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [to_data(item, encode_defaults) for item in obj]

    return obj
