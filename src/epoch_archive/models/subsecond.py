"""Sub-second precision variants.

A timestamp carries at most one sub-second component, stored at a fixed
precision: milliseconds (3 digits), microseconds (6 digits) or nanoseconds
(9 digits). Each variant is a frozen Pydantic model tagged with a ``kind``
literal, so an ``Epoch`` survives a trip through the codec unchanged.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import InvalidEpochError, InvalidSubSecondError

_ASCII_DIGITS = frozenset("0123456789")


class _SubSecondBase(BaseModel):
    """Shared configuration for all sub-second variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Number of rendered digits (0 means no suffix at all)
    width: ClassVar[int] = 0

    def digits(self) -> str:
        """Return the zero-padded digits for this precision."""
        return ""

    def __str__(self) -> str:
        return self.digits()


class NoSubSecond(_SubSecondBase):
    """No sub-second component."""

    kind: Literal["none"] = "none"


class _Precision(_SubSecondBase):
    value: int

    def digits(self) -> str:
        return f"{self.value:0{self.width}d}"


class Milli(_Precision):
    """Milliseconds, 0-999, rendered as 3 digits."""

    kind: Literal["milli"] = "milli"
    value: int = Field(ge=0, le=999)

    width: ClassVar[int] = 3


class Micro(_Precision):
    """Microseconds, 0-999999, rendered as 6 digits."""

    kind: Literal["micro"] = "micro"
    value: int = Field(ge=0, le=999_999)

    width: ClassVar[int] = 6


class Nano(_Precision):
    """Nanoseconds, 0-999999999, rendered as 9 digits."""

    kind: Literal["nano"] = "nano"
    value: int = Field(ge=0, le=999_999_999)

    width: ClassVar[int] = 9


SubSecond = Annotated[
    Union[NoSubSecond, Milli, Micro, Nano],
    Field(discriminator="kind"),
]

_BY_WIDTH: dict[int, type[_Precision]] = {
    Milli.width: Milli,
    Micro.width: Micro,
    Nano.width: Nano,
}


def parse_subsecond(text: str) -> Milli | Micro | Nano:
    """Parse a sub-second fragment such as ``"123"`` or ``"000000042"``.

    The precision is chosen by length alone: 3 characters give ``Milli``,
    6 give ``Micro`` and 9 give ``Nano``. Only ASCII digits are accepted;
    signs, whitespace and separators are rejected.

    Args:
        text: Digits following the delimiter of a formatted timestamp

    Returns:
        The matching precision variant

    Raises:
        InvalidSubSecondError: If the length is not 3, 6 or 9
        InvalidEpochError: If the text contains a non-digit character

    Example:
        >>> parse_subsecond("123") == Milli(value=123)
        True
        >>> parse_subsecond("000123") == Micro(value=123)
        True
    """
    variant = _BY_WIDTH.get(len(text))
    if variant is None:
        raise InvalidSubSecondError(text)

    if not _ASCII_DIGITS.issuperset(text):
        raise InvalidEpochError(f"Invalid digit in sub-second {text!r}")

    return variant(value=int(text))
