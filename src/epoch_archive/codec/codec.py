"""Serialize-then-compress pipeline.

Values are first packed with MessagePack and the whole packed buffer is then
compressed with zstd, so the compressor sees all of the structure's
redundancy at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from .compressor import DEFAULT_LEVEL, check_level, compress, decompress
from .serializer import deserialize, serialize

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Codec:
    """MessagePack + zstd codec with a fixed compression level.

    A Codec holds nothing but its level, so one instance can be shared
    freely between threads and reused for any number of calls.

    Attributes:
        level: zstd compression level, 0 (minimal) to 22 (maximum).
            Default 1 is a good balance between size and speed.

    Examples:
        ```python
        from epoch_archive import Codec, Epoch

        codec = Codec()
        data = codec.encode({"ts": Epoch.new(1337).with_millis(42), "values": [1, 2, 3]})
        raw = codec.decode(data)

        # Typed decoding
        blob = codec.encode(Epoch.new(1337).with_millis(42))
        ts = codec.decode(blob, into=Epoch)
        ```
    """

    level: int = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        """Validate the compression level."""
        check_level(self.level)

    def encode(self, value: Any) -> bytes:
        """Serialize a value and compress the result.

        Raises:
            SerializeError: If the value cannot be serialized
            CodecIOError: If compression fails
        """
        serialized = serialize(value)
        encoded = self.compress(serialized)
        logger.debug(
            "Encoded %s: %d serialized bytes, %d encoded bytes",
            type(value).__name__,
            len(serialized),
            len(encoded),
        )
        return encoded

    @overload
    def decode(self, data: bytes, into: None = None) -> Any: ...

    @overload
    def decode(self, data: bytes, into: type[T]) -> T: ...

    def decode(self, data: bytes, into: Any = None) -> Any:
        """Decompress data and deserialize the result.

        Args:
            data: Bytes produced by ``encode``
            into: Optional target type, see ``deserialize``

        Raises:
            CodecIOError: If data is not a valid zstd stream
            DeserializeError: If the decompressed bytes do not deserialize
        """
        return self.deserialize(self.decompress(data), into)

    def compress(self, data: bytes) -> bytes:
        """Compress bytes at this codec's level."""
        return compress(data, self.level)

    def decompress(self, data: bytes) -> bytes:
        """Decompress bytes produced at any level."""
        return decompress(data)

    serialize = staticmethod(serialize)
    deserialize = staticmethod(deserialize)
