"""Application event sourcing – JSON-friendly encoding of dataclass values.

Events and aggregate state are plain dataclasses.  :func:`encode_value` turns
them into JSON-compatible structures and :func:`decode_value` rebuilds them
from the dataclass field annotations.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from datetime import date, datetime
from typing import Any

from profile_es.kernel.errors.infrastructure import SerializationError
from profile_es.kernel.types.ids import EntityId


def encode_value(value: Any) -> Any:
    """Convert *value* into something :func:`json.dumps` accepts."""
    if isinstance(value, EntityId):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: encode_value(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    # datetime is a date subclass
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): encode_value(v) for k, v in value.items()}
    return value


def decode_dataclass(cls: type[Any], raw: Any) -> Any:
    """Rebuild dataclass *cls* from the output of :func:`encode_value`."""
    if not isinstance(raw, dict):
        raise SerializationError(
            f"Expected an object for {cls.__name__}, got {type(raw).__name__}",
            payload_type=cls.__name__,
        )
    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        if field.name not in raw:
            continue
        kwargs[field.name] = decode_value(hints[field.name], raw[field.name])
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {cls.__name__}: {exc}", payload_type=cls.__name__, cause=exc
        ) from exc


def decode_value(hint: Any, raw: Any) -> Any:  # noqa: PLR0911
    """Decode *raw* according to the type annotation *hint*."""
    if raw is None:
        return None
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        candidates = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(candidates) != 1:
            raise SerializationError(f"Unsupported union annotation {hint!r}")
        return decode_value(candidates[0], raw)
    if origin in (list, tuple):
        (item_hint, *_) = typing.get_args(hint) or (Any,)
        return origin(decode_value(item_hint, v) for v in raw)
    if origin is dict:
        return dict(raw)
    if hint is EntityId:
        return EntityId(raw)
    if hint is datetime:
        return datetime.fromisoformat(raw)
    if hint is date:
        return date.fromisoformat(raw)
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return decode_dataclass(hint, raw)
    return raw


__all__ = ["decode_dataclass", "decode_value", "encode_value"]
