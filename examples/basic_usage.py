#!/usr/bin/env python3
"""Basic usage example for epoch_archive.

This example demonstrates:
1. Building timestamps at different precisions
2. Formatting and parsing them
3. Encoding a timestamp-keyed archive with the codec
4. Decoding it back into typed models
"""

from __future__ import annotations

from pydantic import BaseModel

from epoch_archive import Codec, Epoch, compression_ratio, serialized_size


class Reading(BaseModel):
    """Sensor reading with its capture time."""

    at: Epoch
    depth_cm: int
    temperature_c: float


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("epoch_archive Basic Usage Example")
    print("=" * 60)
    print()

    # Timestamps
    print("1. Building timestamps...")
    base = Epoch.new(1_700_000_000)
    for ts in (base, base.with_millis(250), base.with_micros(250_000), base.with_nanos(250_000_000)):
        print(f"   {ts.format():<24} precision={type(ts.subsecond).__name__}")
    print(f"   Before 1970: {Epoch.new(-1).with_millis(500)}")
    print()

    # Parsing
    print("2. Parsing timestamps...")
    text = base.with_micros(42).format_with_delimiter(":")
    parsed = Epoch.parse(text, delimiter=":")
    print(f"   {text!r} -> epoch={parsed.epoch}, subsecond={parsed.subsecond.digits()}")
    print()

    # Encoding
    print("3. Encoding 1000 readings...")
    readings = [
        Reading(at=base.with_millis(n), depth_cm=1500 + n % 7, temperature_c=11.5)
        for n in range(1000)
    ]

    codec = Codec()
    encoded = codec.encode(readings)
    raw_size = serialized_size(readings)
    json_size = sum(len(r.model_dump_json()) for r in readings)

    print(f"   JSON size:        {json_size} bytes")
    print(f"   MessagePack size: {raw_size} bytes")
    print(f"   Encoded size:     {len(encoded)} bytes")
    print(f"   Ratio:            {compression_ratio(readings, codec):.1%} of MessagePack")
    print()

    # Decoding
    print("4. Decoding...")
    decoded = codec.decode(encoded, into=list[Reading])
    print(f"   First reading at {decoded[0].at}, last at {decoded[-1].at}")
    if decoded == readings:
        print("   ✓ Round-trip successful! Readings match.")
    else:
        print("   ✗ Round-trip failed! Readings don't match.")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
