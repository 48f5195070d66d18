"""MessagePack + zstd codec for epoch_archive.

This module provides the ``Codec`` pipeline together with its individual
serialization and compression stages.
"""

from __future__ import annotations

from .codec import Codec
from .compressor import DEFAULT_LEVEL, MAX_LEVEL, MIN_LEVEL, compress, decompress
from .serializer import deserialize, serialize

__all__ = [
    "Codec",
    "serialize",
    "deserialize",
    "compress",
    "decompress",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "DEFAULT_LEVEL",
]
