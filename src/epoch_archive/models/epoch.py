"""Fixed-point Unix timestamp value type.

``Epoch`` pairs a signed 64-bit seconds count with an optional sub-second
component. Values are immutable: every ``with_*`` method returns a new
instance and leaves the original untouched.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import InvalidEpochError
from .subsecond import Micro, Milli, Nano, NoSubSecond, SubSecond, parse_subsecond

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_SECONDS_RE = re.compile(r"[+-]?[0-9]+")

# Digits in the largest i64 magnitude
_MAX_SECONDS_DIGITS = len(str(I64_MAX))


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if delimiter in "0123456789":
        raise ValueError(f"delimiter must not be a digit, got {delimiter!r}")


class Epoch(BaseModel):
    """Seconds since the Unix epoch plus an optional sub-second component.

    Negative seconds are kept exactly as given. The sub-second digits are
    always rendered unsigned, so ``-1`` with 500 milliseconds formats as
    ``"-1.500"``.

    Example:
        >>> ts = Epoch.new(1337).with_millis(42)
        >>> ts.format()
        '1337.042'
        >>> ts.format_with_delimiter(":")
        '1337:042'
        >>> Epoch.parse("1337.042") == ts
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    epoch: int = Field(default=0, ge=I64_MIN, le=I64_MAX)
    subsecond: SubSecond = Field(default_factory=NoSubSecond)

    @classmethod
    def new(cls, epoch: int) -> Epoch:
        """Create an Epoch with no sub-second component."""
        return cls(epoch=epoch)

    def with_epoch(self, epoch: int) -> Epoch:
        """Return a copy with the seconds replaced."""
        return type(self)(epoch=epoch, subsecond=self.subsecond)

    def with_millis(self, millis: int) -> Epoch:
        """Return a copy carrying millisecond precision.

        Raises:
            ValueError: If millis is not in 0-999
        """
        return type(self)(epoch=self.epoch, subsecond=Milli(value=millis))

    def with_micros(self, micros: int) -> Epoch:
        """Return a copy carrying microsecond precision.

        Raises:
            ValueError: If micros is not in 0-999999
        """
        return type(self)(epoch=self.epoch, subsecond=Micro(value=micros))

    def with_nanos(self, nanos: int) -> Epoch:
        """Return a copy carrying nanosecond precision.

        Raises:
            ValueError: If nanos is not in 0-999999999
        """
        return type(self)(epoch=self.epoch, subsecond=Nano(value=nanos))

    def format_with_delimiter(self, delimiter: str) -> str:
        """Format as ``{epoch}{delimiter}{digits}``.

        Without a sub-second component only the seconds are rendered and the
        delimiter is omitted.

        Args:
            delimiter: Single separator character

        Raises:
            ValueError: If delimiter is not exactly one non-digit character
        """
        _check_delimiter(delimiter)

        if isinstance(self.subsecond, NoSubSecond):
            return str(self.epoch)
        return f"{self.epoch}{delimiter}{self.subsecond.digits()}"

    def format(self) -> str:
        """Format using ``.`` as the delimiter."""
        return self.format_with_delimiter(".")

    def format_seconds(self) -> str:
        """Format the seconds only, dropping any sub-second component."""
        return str(self.epoch)

    @classmethod
    def parse(cls, text: str, delimiter: str = ".") -> Epoch:
        """Parse text produced by ``format_with_delimiter``.

        A leading sign is never treated as the delimiter, so ``"-1-500"``
        parses with ``delimiter="-"``.

        Args:
            text: Formatted timestamp
            delimiter: Separator between seconds and sub-second digits

        Returns:
            Parsed Epoch

        Raises:
            InvalidEpochError: If the seconds are not a 64-bit signed integer,
                or the sub-second part contains a non-digit
            InvalidSubSecondError: If the sub-second part is not 3, 6 or 9 long
            ValueError: If delimiter is not exactly one non-digit character
        """
        _check_delimiter(delimiter)

        split_at = text.find(delimiter, 1)
        if split_at == -1:
            seconds_text, fraction = text, None
        else:
            seconds_text, fraction = text[:split_at], text[split_at + 1 :]

        if not _SECONDS_RE.fullmatch(seconds_text):
            raise InvalidEpochError(f"Invalid epoch seconds {seconds_text!r}")

        sign = seconds_text[0] if seconds_text[0] in "+-" else ""
        digits = seconds_text[len(sign) :].lstrip("0")
        if len(digits) > _MAX_SECONDS_DIGITS:
            raise InvalidEpochError(f"Epoch seconds {seconds_text!r} out of 64-bit range")

        seconds = int(sign + (digits or "0"))
        if not I64_MIN <= seconds <= I64_MAX:
            raise InvalidEpochError(f"Epoch seconds {seconds_text!r} out of 64-bit range")

        if fraction is None:
            return cls(epoch=seconds)
        return cls(epoch=seconds, subsecond=parse_subsecond(fraction))

    def __str__(self) -> str:
        return self.format()
