#!/usr/bin/env python3
"""Compare compression levels on a timestamp-keyed archive.

Prints encoded size and encode/decode time for every zstd level so a level
can be picked for a given workload.
"""

from __future__ import annotations

import time

from epoch_archive import MAX_LEVEL, MIN_LEVEL, Codec, Epoch, serialized_size


def build_archive(count: int = 5000) -> dict[str, list[float]]:
    """Build an archive of readings keyed by microsecond timestamps."""
    start = Epoch.new(1_700_000_000)
    return {
        start.with_epoch(start.epoch + n // 1000).with_micros((n % 1000) * 1000).format(): [
            round(12.0 + (n % 50) * 0.1, 1),
            float(n % 3),
        ]
        for n in range(count)
    }


def main() -> None:
    """Run the comparison."""
    archive = build_archive()
    raw = serialized_size(archive)

    print("=" * 60)
    print(f"MessagePack size: {raw} bytes")
    print("=" * 60)
    print(f"{'level':>5} {'bytes':>10} {'ratio':>8} {'encode ms':>10} {'decode ms':>10}")

    for level in range(MIN_LEVEL, MAX_LEVEL + 1):
        codec = Codec(level)

        began = time.perf_counter()
        encoded = codec.encode(archive)
        encode_ms = (time.perf_counter() - began) * 1000

        began = time.perf_counter()
        codec.decode(encoded)
        decode_ms = (time.perf_counter() - began) * 1000

        print(
            f"{level:>5} {len(encoded):>10} {len(encoded) / raw:>8.1%} "
            f"{encode_ms:>10.2f} {decode_ms:>10.2f}"
        )


if __name__ == "__main__":
    main()
