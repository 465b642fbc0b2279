#!/usr/bin/env python3
r"""
password_engine.py - random passphrase generator over an explicit alphabet

Each `PasswordGenerator` owns its alphabet, a target length and its own random
source. The alphabet is used as given: repeated characters are drawn more
often. Build it through `CharsetSpec.construct()` for a uniform, duplicate-free
alphabet.

    >>> gen = PasswordGenerator.from_string("ab").with_length(10)
    >>> len(gen.generate())
    10
    >>> gen.entropy()
    10
"""
from __future__ import annotations

import os
import random
import secrets
from typing import Iterable, Optional, Protocol

from yapg.core.error_dialect import EmptyAlphabetError, YapgError
from yapg.core.password_entropy import combinations_for, entropy_bits_for

DEFAULT_LENGTH = 20


# ---------------- Random sources ----------------

class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...


class SystemRandomSource:
    """OS CSPRNG backed source (`secrets.SystemRandom`)."""

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


class SeededRandomSource:
    """Reproducible source for tests and benchmarks. Not for real secrets."""

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


def assert_csprng_ready() -> None:
    try:
        probe = os.urandom(1)
    except (NotImplementedError, OSError) as exc:
        raise OSError(f"OS CSPRNG unavailable: {exc}") from exc
    if len(probe) != 1:
        raise OSError("OS CSPRNG returned an unexpected byte count")


# ---------------- Generator ----------------

def _as_alphabet(chars: Iterable[str]) -> list[str]:
    alphabet = list(chars)
    for ch in alphabet:
        if not isinstance(ch, str) or len(ch) != 1:
            raise YapgError(f"alphabet entries must be single characters, got {ch!r}")
    return alphabet


class PasswordGenerator:
    def __init__(
        self,
        alphabet: Iterable[str],
        length: int = DEFAULT_LENGTH,
        source: Optional[RandomSource] = None,
    ) -> None:
        self._alphabet = _as_alphabet(alphabet)
        self._length = _check_length(length)
        self._source: RandomSource = source if source is not None else SystemRandomSource()

    @classmethod
    def from_chars(cls, chars: Iterable[str], source: Optional[RandomSource] = None) -> PasswordGenerator:
        return cls(chars, DEFAULT_LENGTH, source)

    @classmethod
    def from_string(cls, chars: str, source: Optional[RandomSource] = None) -> PasswordGenerator:
        # Literal alphabet: "aab" draws 'a' twice as often as 'b'.
        return cls(list(chars), DEFAULT_LENGTH, source)

    @property
    def alphabet(self) -> tuple[str, ...]:
        return tuple(self._alphabet)

    @property
    def length(self) -> int:
        return self._length

    def with_length(self, length: int) -> PasswordGenerator:
        """Set the password length; returns `self` for chaining."""
        self._length = _check_length(length)
        return self

    def generate(self) -> str:
        self._check_alphabet()
        size = len(self._alphabet)
        return "".join(self._alphabet[self._source.randbelow(size)] for _ in range(self._length))

    def generate_n(self, count: int) -> list[str]:
        """`count` independent passwords; duplicates are not filtered."""
        if count < 0:
            raise YapgError("count must be >= 0")
        return [self.generate() for _ in range(count)]

    def combinations(self) -> float:
        """Number of possible passwords. Loses precision (or hits inf) for huge values."""
        return combinations_for(len(self._alphabet), self._length)

    def entropy(self) -> int:
        """Entropy of the generated passwords in whole bits."""
        return entropy_bits_for(len(self._alphabet), self._length)

    def _check_alphabet(self) -> None:
        if not self._alphabet:
            raise EmptyAlphabetError()

    def __repr__(self) -> str:
        return f"PasswordGenerator(alphabet_size={len(self._alphabet)}, length={self._length})"


def _check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise YapgError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise YapgError("length must be >= 0")
    return length
