"""epoch_archive: compact storage for timestamped data

A small library with two independent building blocks:

- ``Epoch``: an immutable Unix timestamp with optional millisecond,
  microsecond or nanosecond precision and exact text formatting/parsing
- ``Codec``: MessagePack serialization followed by zstd compression, with
  the inverse for decoding

Quick Start:
    >>> from epoch_archive import Codec, Epoch
    >>>
    >>> ts = Epoch.new(1700000000).with_millis(250)
    >>> ts.format()
    '1700000000.250'
    >>>
    >>> codec = Codec(level=3)
    >>> data = codec.encode({ts.format(): [1.5, 2.5, 3.5]})
    >>> codec.decode(data)
    {'1700000000.250': [1.5, 2.5, 3.5]}
"""

from __future__ import annotations

from .codec import (
    DEFAULT_LEVEL,
    MAX_LEVEL,
    MIN_LEVEL,
    Codec,
    compress,
    decompress,
    deserialize,
    serialize,
)
from .exceptions import (
    CodecError,
    CodecIOError,
    DeserializeError,
    EpochArchiveError,
    EpochError,
    InvalidEpochError,
    InvalidSubSecondError,
    SerializeError,
)
from .models import Epoch, Micro, Milli, Nano, NoSubSecond, SubSecond, parse_subsecond
from .utils import compression_ratio, encoded_size, serialized_size

__version__ = "0.1.0"

__all__ = [
    # Timestamps
    "Epoch",
    "SubSecond",
    "NoSubSecond",
    "Milli",
    "Micro",
    "Nano",
    "parse_subsecond",
    # Codec
    "Codec",
    "serialize",
    "deserialize",
    "compress",
    "decompress",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "DEFAULT_LEVEL",
    # Exceptions
    "EpochArchiveError",
    "EpochError",
    "InvalidSubSecondError",
    "InvalidEpochError",
    "CodecError",
    "CodecIOError",
    "SerializeError",
    "DeserializeError",
    # Sizing
    "serialized_size",
    "encoded_size",
    "compression_ratio",
    # Version
    "__version__",
]
