from __future__ import annotations

import math

# Above this many bits the exact integer power gets expensive; fall back to
# the float estimate, which may be off by one bit at most.
MAX_EXACT_ENTROPY_BITS = 1 << 20


def quality_from_entropy_bits(entropy_bits: float) -> str:
    """Mirror KeePassXC quality bands used by PasswordHealth::quality()."""
    if entropy_bits <= 0:
        return "bad"
    if entropy_bits < 40:
        return "poor"
    if entropy_bits < 75:
        return "weak"
    if entropy_bits < 100:
        return "good"
    return "excellent"


def combinations_for(alphabet_size: int, length: int) -> float:
    """`alphabet_size ** length` as a float; `math.inf` once it overflows."""
    if alphabet_size < 0 or length < 0:
        raise ValueError("alphabet size and length must be >= 0")
    try:
        return float(alphabet_size) ** length
    except OverflowError:
        return math.inf


def entropy_bits_for(alphabet_size: int, length: int) -> int:
    """floor(log2(alphabet_size ** length)) in whole bits."""
    if alphabet_size < 0 or length < 0:
        raise ValueError("alphabet size and length must be >= 0")
    # One possible password (or none at all) carries no information.
    if alphabet_size <= 1 or length == 0:
        return 0
    estimate = length * math.log2(alphabet_size)
    if estimate <= MAX_EXACT_ENTROPY_BITS:
        return (alphabet_size**length).bit_length() - 1
    return math.floor(estimate)
