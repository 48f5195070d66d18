"""Timestamp value types for epoch_archive.

This module provides the immutable ``Epoch`` timestamp and its sub-second
precision variants.
"""

from __future__ import annotations

from .epoch import I64_MAX, I64_MIN, Epoch
from .subsecond import Micro, Milli, Nano, NoSubSecond, SubSecond, parse_subsecond

__all__ = [
    "Epoch",
    "I64_MIN",
    "I64_MAX",
    "SubSecond",
    "NoSubSecond",
    "Milli",
    "Micro",
    "Nano",
    "parse_subsecond",
]
