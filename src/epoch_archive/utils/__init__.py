"""Utility functions for epoch_archive.

This module provides size and compression-ratio calculations.
"""

from __future__ import annotations

from .sizing import compression_ratio, encoded_size, serialized_size

__all__ = [
    "serialized_size",
    "encoded_size",
    "compression_ratio",
]
