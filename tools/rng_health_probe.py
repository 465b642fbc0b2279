#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.core.password_engine import RandomSource, SystemRandomSource, assert_csprng_ready


def _estimated_collision_upper_bound(samples: int, alphabet_size: int, block_length: int) -> int:
    # Birthday-bound estimate for expected collisions with a conservative safety margin.
    space_size = alphabet_size**block_length
    expected = (samples * (samples - 1)) / (2.0 * space_size)
    return max(2, int(math.ceil(expected * 20.0 + 5.0)))


def _run_probe(
    *,
    samples: int,
    alphabet_size: int,
    block_length: int,
    min_unique_ratio: float,
    max_frequency_deviation: float,
    source: RandomSource | None = None,
) -> tuple[float, float, int, int]:
    assert_csprng_ready()

    if samples <= 0:
        raise ValueError("samples must be > 0")
    if alphabet_size < 2:
        raise ValueError("alphabet-size must be >= 2")
    if block_length <= 0:
        raise ValueError("block-length must be > 0")
    if not (0.0 < min_unique_ratio <= 1.0):
        raise ValueError("min-unique-ratio must be within (0, 1]")
    if max_frequency_deviation <= 0.0:
        raise ValueError("max-frequency-deviation must be > 0")

    rng = source if source is not None else SystemRandomSource()
    unique_blocks: set[tuple[int, ...]] = set()
    counts = [0] * alphabet_size

    for _ in range(samples):
        block = tuple(rng.randbelow(alphabet_size) for _ in range(block_length))
        unique_blocks.add(block)
        for idx in block:
            counts[idx] += 1

    unique_count = len(unique_blocks)
    collision_count = samples - unique_count
    unique_ratio = unique_count / samples
    expected = samples * block_length / alphabet_size
    deviation = max(abs(count - expected) for count in counts) / expected

    if unique_ratio < min_unique_ratio:
        raise RuntimeError(
            f"RNG health probe failed: unique ratio {unique_ratio:.6f} below threshold {min_unique_ratio:.6f}"
        )
    if deviation > max_frequency_deviation:
        raise RuntimeError(
            f"RNG health probe failed: symbol frequency deviation {deviation:.6f} above {max_frequency_deviation:.6f}"
        )

    collision_upper_bound = _estimated_collision_upper_bound(samples, alphabet_size, block_length)
    if collision_count > collision_upper_bound:
        raise RuntimeError(
            "RNG health probe failed: observed collisions exceed conservative birthday bound "
            f"({collision_count} > {collision_upper_bound})"
        )

    return unique_ratio, deviation, collision_count, collision_upper_bound


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Local health probe for the uniform pick source used by the password generator. "
            "This is a sanity check, not a cryptographic certification."
        )
    )
    parser.add_argument("--samples", type=int, default=4096, help="Number of sampled blocks (default: 4096).")
    parser.add_argument("--alphabet-size", type=int, default=95, help="Pick range per draw (default: 95).")
    parser.add_argument("--block-length", type=int, default=16, help="Draws per sampled block (default: 16).")
    parser.add_argument(
        "--min-unique-ratio",
        type=float,
        default=0.999,
        help="Minimum required unique block ratio (default: 0.999).",
    )
    parser.add_argument(
        "--max-frequency-deviation",
        type=float,
        default=0.25,
        help="Maximum relative deviation of any symbol count from its expectation (default: 0.25).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        unique_ratio, deviation, collisions, collision_bound = _run_probe(
            samples=args.samples,
            alphabet_size=args.alphabet_size,
            block_length=args.block_length,
            min_unique_ratio=args.min_unique_ratio,
            max_frequency_deviation=args.max_frequency_deviation,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"[rng] probe failed: {exc}", file=sys.stderr)
        return 1

    print(f"[rng] samples={args.samples} alphabet_size={args.alphabet_size} block_length={args.block_length}")
    print(f"[rng] unique_ratio={unique_ratio:.6f}")
    print(f"[rng] max_frequency_deviation={deviation:.6f}")
    print(f"[rng] collisions={collisions} (bound={collision_bound})")
    print("[rng] probe ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
