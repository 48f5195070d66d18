"""Unit tests for the MessagePack serialization stage."""

from __future__ import annotations

import dataclasses
import datetime
import enum
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from epoch_archive import DeserializeError, Epoch, SerializeError, deserialize, serialize


class Color(enum.Enum):
    """Test enum."""

    RED = "red"
    GREEN = "green"


class Reading(BaseModel):
    """Test model."""

    sensor: str
    color: Color
    taken_at: datetime.datetime
    values: list[float]


@dataclasses.dataclass
class Sample:
    """Test dataclass."""

    name: str
    count: int


@dataclasses.dataclass
class Node:
    """Tree node dataclass."""

    children: list[Node]


class TestSerialize:
    """Test serialization."""

    def test_list_of_ints(self) -> None:
        """Test the compact fixarray encoding."""
        assert serialize([1, 2, 3, 4, 5]) == b"\x95\x01\x02\x03\x04\x05"

    def test_bytes_use_bin_type(self) -> None:
        """Test bytes survive as bytes, not str."""
        data = serialize(b"\x00\x01")
        assert deserialize(data) == b"\x00\x01"

    def test_model(self) -> None:
        """Test Pydantic models are lowered to maps."""
        reading = Reading(
            sensor="depth",
            color=Color.GREEN,
            taken_at=datetime.datetime(2024, 1, 2, 3, 4, 5),
            values=[1.5, 2.5],
        )

        raw = deserialize(serialize(reading))

        assert raw == {
            "sensor": "depth",
            "color": "green",
            "taken_at": "2024-01-02T03:04:05",
            "values": [1.5, 2.5],
        }
        assert deserialize(serialize(reading), into=Reading) == reading

    def test_epoch(self) -> None:
        """Test an Epoch round-trips through its tagged sub-second."""
        ts = Epoch.new(-1).with_micros(123123)

        assert deserialize(serialize(ts)) == {
            "epoch": -1,
            "subsecond": {"kind": "micro", "value": 123123},
        }
        assert deserialize(serialize(ts), into=Epoch) == ts

    def test_dataclass(self) -> None:
        """Test dataclasses are lowered to maps."""
        assert deserialize(serialize(Sample(name="a", count=3))) == {"name": "a", "count": 3}
        assert deserialize(serialize(Sample(name="a", count=3)), into=Sample) == Sample("a", 3)

    def test_misc_scalars(self) -> None:
        """Test sets, Decimal and UUID."""
        uid = UUID("12345678-1234-5678-1234-567812345678")

        assert deserialize(serialize({1})) == [1]
        assert deserialize(serialize(Decimal("1.25"))) == "1.25"
        assert deserialize(serialize(uid)) == str(uid)
        assert deserialize(serialize(uid), into=UUID) == uid

    def test_int_keys(self) -> None:
        """Test non-string map keys."""
        assert deserialize(serialize({1: "a", 2: "b"})) == {1: "a", 2: "b"}

    def test_tuple_becomes_list(self) -> None:
        """Test tuples are packed as arrays."""
        assert deserialize(serialize((1, 2))) == [1, 2]
        assert deserialize(serialize((1, 2)), into=tuple[int, int]) == (1, 2)

    def test_unsupported_type(self) -> None:
        """Test arbitrary objects are rejected."""
        with pytest.raises(SerializeError, match="object"):
            serialize(object())

    def test_unsupported_nested(self) -> None:
        """Test unsupported values nested in containers are rejected."""
        with pytest.raises(SerializeError):
            serialize({"ok": [1, 2, {"bad": object()}]})

    def test_integer_overflow(self) -> None:
        """Test integers beyond 64 bits."""
        with pytest.raises(SerializeError):
            serialize(2**64)

    def test_recursive_structure(self) -> None:
        """Test self-referencing containers."""
        data: list[object] = []
        data.append(data)

        with pytest.raises(SerializeError):
            serialize(data)

    def test_recursive_dataclass(self) -> None:
        """Test a dataclass that contains itself."""
        node = Node(children=[])
        node.children.append(node)

        with pytest.raises(SerializeError):
            serialize(node)


class TestDeserialize:
    """Test deserialization."""

    def test_truncated(self) -> None:
        """Test truncated data."""
        data = serialize([1, 2, 3, "hello"])

        with pytest.raises(DeserializeError, match="Malformed"):
            deserialize(data[:-2])

    def test_trailing_bytes(self) -> None:
        """Test extra data after the first object."""
        with pytest.raises(DeserializeError):
            deserialize(serialize(1) + serialize(2))

    def test_reserved_byte(self) -> None:
        """Test the never-used 0xc1 marker."""
        with pytest.raises(DeserializeError):
            deserialize(b"\xc1")

    def test_empty(self) -> None:
        """Test empty input."""
        with pytest.raises(DeserializeError):
            deserialize(b"")

    def test_type_mismatch(self) -> None:
        """Test valid data that does not fit the requested type."""
        with pytest.raises(DeserializeError, match="does not match"):
            deserialize(serialize("text"), into=int)

    def test_model_missing_field(self) -> None:
        """Test a map missing required model fields."""
        with pytest.raises(DeserializeError, match="Reading"):
            deserialize(serialize({"sensor": "depth"}), into=Reading)

    def test_typed_list(self) -> None:
        """Test generic target types."""
        assert deserialize(serialize([1, 2, 3]), into=list[int]) == [1, 2, 3]
