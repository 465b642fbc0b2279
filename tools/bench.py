from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Allow running as `python tools/bench.py` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.core.charsets import CharsetSpec
from yapg.core.models import PasswordRequest
from yapg.core.password_engine import DEFAULT_LENGTH, PasswordGenerator, SeededRandomSource
from yapg.core.password_service import generate_passwords


def _bench_service(count: int, length: int, charsets: str | None) -> None:
    req = PasswordRequest(count=count, length=length, charsets=charsets, quiet=True)
    t0 = time.perf_counter()
    result = generate_passwords(req)
    dt = time.perf_counter() - t0
    rate = (len(result.outputs) / dt) if dt > 0 else 0.0
    print(
        f"[passwords] count={len(result.outputs)} length={length} alphabet={len(result.alphabet)} "
        f"entropy={result.entropy_bits} seconds={dt:.4f} rate={rate:.1f}/s"
    )


def _bench_seeded(count: int, length: int) -> None:
    gen = PasswordGenerator(CharsetSpec.printable_ascii().construct(), length, SeededRandomSource(0))
    t0 = time.perf_counter()
    outputs = gen.generate_n(count)
    dt = time.perf_counter() - t0
    rate = (len(outputs) / dt) if dt > 0 else 0.0
    print(f"[seeded] count={len(outputs)} length={length} seconds={dt:.4f} rate={rate:.1f}/s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="yapg baseline benchmark (stdlib-only).")
    parser.add_argument("--passwords", type=int, default=0, help="Number of passwords to generate.")
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="Password length.")
    parser.add_argument("--charsets", default=None, help="Encoded charset symbols (default: standard 64).")
    parser.add_argument(
        "--seeded",
        action="store_true",
        help="Also bench a generator with a seeded (non-CSPRNG) source for comparison.",
    )
    args = parser.parse_args(argv)

    if args.passwords <= 0:
        parser.error("Set --passwords to a value > 0")

    _bench_service(count=args.passwords, length=args.length, charsets=args.charsets)
    if args.seeded:
        _bench_seeded(count=args.passwords, length=args.length)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
