"""MessagePack serialization stage.

This module converts structured Python values to compact MessagePack bytes
and back. Pydantic models, dataclasses and a few common scalar types are
lowered to MessagePack-native values on the way out; on the way in, an
optional target type is rebuilt with a Pydantic ``TypeAdapter``.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
from decimal import Decimal
from typing import Any, TypeVar, overload
from uuid import UUID

import msgpack
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import DeserializeError, SerializeError

T = TypeVar("T")


def _to_builtin(obj: Any) -> Any:
    """Lower objects msgpack cannot pack natively.

    msgpack calls this hook for every unsupported object and packs whatever
    it returns, so nested models are lowered recursively.

    Raises:
        TypeError: If the object type has no MessagePack representation
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="python")

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)

    if isinstance(obj, enum.Enum):
        return obj.value

    if isinstance(obj, (set, frozenset)):
        return list(obj)

    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()

    if isinstance(obj, (Decimal, UUID)):
        return str(obj)

    raise TypeError(f"Cannot serialize object of type {type(obj).__name__}")


def serialize(value: Any) -> bytes:
    """Serialize a value to MessagePack bytes.

    Args:
        value: Value to serialize. Supported: None, bool, int, float, str,
            bytes, lists, tuples, dicts, Pydantic models, dataclasses, enums,
            sets, dates/times, Decimal and UUID.

    Returns:
        MessagePack representation

    Raises:
        SerializeError: If the value (or anything nested in it) cannot be
            represented

    Example:
        >>> serialize([1, 2, 3, 4, 5])
        b'\\x95\\x01\\x02\\x03\\x04\\x05'
    """
    try:
        return msgpack.packb(value, use_bin_type=True, default=_to_builtin)
    except (TypeError, ValueError, OverflowError, RecursionError) as e:
        raise SerializeError(f"Failed to serialize {type(value).__name__}: {e}") from e


@overload
def deserialize(data: bytes, into: None = None) -> Any: ...


@overload
def deserialize(data: bytes, into: type[T]) -> T: ...


def deserialize(data: bytes, into: Any = None) -> Any:
    """Deserialize MessagePack bytes.

    Without ``into`` the raw MessagePack value is returned (dicts, lists,
    str, bytes, numbers, bool, None). With ``into`` the raw value is
    validated into that type. Unions are matched by structure, so decoding
    into ``A | B`` yields whichever member the data fits.

    Args:
        data: MessagePack bytes holding exactly one object
        into: Optional target type (model class, ``list[int]``, union, ...)

    Returns:
        Decoded value

    Raises:
        DeserializeError: If data is truncated, malformed, has trailing bytes,
            or does not validate against ``into``
    """
    try:
        raw = msgpack.unpackb(data, raw=False, strict_map_key=False)
    except (ValueError, TypeError, msgpack.UnpackException) as e:
        raise DeserializeError(f"Malformed MessagePack data: {e}") from e

    if into is None:
        return raw

    try:
        return TypeAdapter(into).validate_python(raw)
    except ValidationError as e:
        raise DeserializeError(f"Data does not match {_type_name(into)}: {e}") from e


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))
