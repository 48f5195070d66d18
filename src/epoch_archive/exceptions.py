"""Exception hierarchy for epoch_archive.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from EpochArchiveError for easy catching of any
epoch_archive-specific error.

Out-of-range builder arguments (e.g. ``Epoch.new(0).with_millis(1000)``) and
invalid compression levels are caller bugs, not recoverable failures. Those
raise ``ValueError`` and are intentionally not part of this hierarchy.
"""

from __future__ import annotations


class EpochArchiveError(Exception):
    """Base exception for all epoch_archive errors."""

    pass


class EpochError(EpochArchiveError):
    """Base exception for timestamp parsing errors."""

    pass


class InvalidSubSecondError(EpochError):
    """Raised when sub-second text does not have 3, 6 or 9 characters.

    Examples:
        - Empty string
        - ``"1"`` or ``"1234"`` (no matching precision)
        - ``"3.33"`` (length 4)
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Invalid sub-second {text!r}: expected 3 (milli), 6 (micro) "
            f"or 9 (nano) digits, got {len(text)} characters"
        )


class InvalidEpochError(EpochError):
    """Raised when a numeric timestamp field cannot be parsed as an integer.

    Examples:
        - Non-digit characters (``"00a"``, ``"-33"``)
        - Seconds outside the signed 64-bit range
    """

    pass


class CodecError(EpochArchiveError):
    """Base exception for encode/decode pipeline errors."""

    pass


class CodecIOError(CodecError):
    """Raised when the compression stage fails.

    Examples:
        - Input is not a zstd stream (bad magic number or frame header)
        - Truncated frame
        - Corrupted block or checksum mismatch
    """

    pass


class SerializeError(CodecError):
    """Raised when a value cannot be represented as MessagePack.

    Examples:
        - Unsupported object type
        - Integer outside the 64-bit range
        - Recursive structure
    """

    pass


class DeserializeError(CodecError):
    """Raised when MessagePack data cannot be turned back into a value.

    Examples:
        - Truncated or malformed MessagePack data
        - Trailing bytes after the first object
        - Payload does not validate against the requested type
    """

    pass
