"""Encoded size calculation utilities.

This module reports how large a value is at each stage of the codec
pipeline, which is handy when picking a compression level.
"""

from __future__ import annotations

from typing import Any

from ..codec.codec import Codec
from ..codec.serializer import serialize


def serialized_size(value: Any) -> int:
    """Size in bytes of the MessagePack form of a value.

    Raises:
        SerializeError: If the value cannot be serialized

    Example:
        >>> serialized_size([1, 2, 3, 4, 5])
        6
    """
    return len(serialize(value))


def encoded_size(value: Any, codec: Codec | None = None) -> int:
    """Size in bytes of a value after serialization and compression.

    Args:
        value: Value to measure
        codec: Codec to encode with (default: ``Codec()``, level 1)

    Raises:
        SerializeError: If the value cannot be serialized
    """
    if codec is None:
        codec = Codec()
    return len(codec.encode(value))


def compression_ratio(value: Any, codec: Codec | None = None) -> float:
    """Ratio of encoded size to serialized size.

    Values below 1.0 mean compression paid off; 0.15 corresponds to an 85%
    reduction. Small payloads often come out above 1.0 because of the zstd
    frame header.

    Args:
        value: Value to measure
        codec: Codec to encode with (default: ``Codec()``, level 1)

    Returns:
        ``encoded_size / serialized_size``
    """
    if codec is None:
        codec = Codec()

    serialized = serialize(value)
    compressed = codec.compress(serialized)
    return len(compressed) / len(serialized)
