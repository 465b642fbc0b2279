"""Character groups and the charset specification builder.

A specification toggles the seven atomic groups and collects extra
characters. `construct()` turns it into the final alphabet: every active
group plus the additions, sorted by code point with duplicates removed.

Symbols accepted by `CharsetSpec.parse`:

  U  upper-case letters       A-Z
  L  lower-case letters       a-z
  N  digits                   0-9
  M  math operators           + - * / = < >
  P  prose punctuation        . : , ; ! ? ' " and space
  D  delimiters               ( ) [ ] { }
  X  miscellaneous symbols    # @ $ % & | \\ ~ ^ _ `
  A  all letters              U + L
  S  all specials             M + P + D + X
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from yapg.core.error_dialect import InvalidCharsetSymbolError, SpecificationConsumedError

CHARSET_ALPHA_LOWER = "abcdefghijklmnopqrstuvwxyz"
CHARSET_ALPHA_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHARSET_NUMERIC = "0123456789"
CHARSET_PROSE = ".:,;!? '\""
CHARSET_MATHOPS = "+-*/=<>"
CHARSET_DELIM = "()[]{}"
CHARSET_MISC_SPECIAL = "#@$%&|\\~^_`"


class CharsetName(Enum):
    ALPHA_LOWER = "L"
    ALPHA_UPPER = "U"
    NUMERIC = "N"
    MATHOPS = "M"
    PROSE = "P"
    DELIM = "D"
    MISC_SPECIAL = "X"
    # compound
    ALPHA = "A"
    SPECIAL = "S"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_compound(self) -> bool:
        return self in _COMPOUND_EXPANSIONS

    def expand(self) -> Tuple[CharsetName, ...]:
        """Atomic groups this name stands for (itself when atomic)."""
        return _COMPOUND_EXPANSIONS.get(self, (self,))


# construct() appends groups in this order; the final sort makes it irrelevant
# to the result but keeps intermediate states reproducible.
ATOMIC_ORDER: Tuple[CharsetName, ...] = (
    CharsetName.ALPHA_UPPER,
    CharsetName.ALPHA_LOWER,
    CharsetName.NUMERIC,
    CharsetName.MATHOPS,
    CharsetName.PROSE,
    CharsetName.DELIM,
    CharsetName.MISC_SPECIAL,
)

GROUP_CHARS: dict[CharsetName, str] = {
    CharsetName.ALPHA_LOWER: CHARSET_ALPHA_LOWER,
    CharsetName.ALPHA_UPPER: CHARSET_ALPHA_UPPER,
    CharsetName.NUMERIC: CHARSET_NUMERIC,
    CharsetName.MATHOPS: CHARSET_MATHOPS,
    CharsetName.PROSE: CHARSET_PROSE,
    CharsetName.DELIM: CHARSET_DELIM,
    CharsetName.MISC_SPECIAL: CHARSET_MISC_SPECIAL,
}

_COMPOUND_EXPANSIONS: dict[CharsetName, Tuple[CharsetName, ...]] = {
    CharsetName.ALPHA: (CharsetName.ALPHA_LOWER, CharsetName.ALPHA_UPPER),
    CharsetName.SPECIAL: (
        CharsetName.MATHOPS,
        CharsetName.PROSE,
        CharsetName.DELIM,
        CharsetName.MISC_SPECIAL,
    ),
}

_NAMES_BY_SYMBOL = {name.value: name for name in CharsetName}

_DISPLAY_NAMES = {
    CharsetName.ALPHA_LOWER: "lower-case letters",
    CharsetName.ALPHA_UPPER: "upper-case letters",
    CharsetName.NUMERIC: "digits",
    CharsetName.MATHOPS: "math operators",
    CharsetName.PROSE: "prose punctuation",
    CharsetName.DELIM: "delimiters",
    CharsetName.MISC_SPECIAL: "miscellaneous symbols",
    CharsetName.ALPHA: "all letters",
    CharsetName.SPECIAL: "all specials",
}


def resolve_charset_name(symbol: str) -> CharsetName:
    name = _NAMES_BY_SYMBOL.get(symbol) if len(symbol) == 1 else None
    if name is None:
        raise InvalidCharsetSymbolError(symbol)
    return name


def describe_charsets() -> Tuple[Tuple[str, str, str], ...]:
    """Rows of (symbol, display name, contents) for every charset name."""
    rows = []
    for name in CharsetName:
        if name.is_compound:
            contents = " + ".join(part.symbol for part in name.expand())
        else:
            contents = " ".join(GROUP_CHARS[name])
        rows.append((name.symbol, _DISPLAY_NAMES[name], contents))
    return tuple(rows)


class CharsetSpec:
    """Mutable builder for an alphabet.

    Supports `spec += CharsetName`, `spec += "chars"` and `spec -= CharsetName`.
    Removing a name always clears its atomic groups, however they were set.
    `construct()` is terminal: the spec refuses any use afterwards.
    """

    def __init__(self, active: Iterable[CharsetName] = (), additions: Iterable[str] = ()) -> None:
        self._active: set[CharsetName] = set()
        self._additions: list[str] = []
        self._consumed = False
        for name in active:
            self.add_name(name)
        self.add_string(additions)

    @classmethod
    def empty(cls) -> CharsetSpec:
        return cls()

    @classmethod
    def std64(cls) -> CharsetSpec:
        """Letters, digits, `-` and `_`: 64 characters."""
        return cls(active=(CharsetName.ALPHA, CharsetName.NUMERIC), additions="-_")

    @classmethod
    def printable_ascii(cls) -> CharsetSpec:
        """All seven groups: the 95 printable ASCII characters."""
        return cls(active=ATOMIC_ORDER)

    @classmethod
    def parse(cls, encoded: str) -> CharsetSpec:
        spec = cls()
        for symbol in encoded:
            spec.add_name(resolve_charset_name(symbol))
        return spec

    @property
    def additions(self) -> Tuple[str, ...]:
        return tuple(self._additions)

    @property
    def active_groups(self) -> frozenset[CharsetName]:
        return frozenset(self._active)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def is_active(self, name: CharsetName) -> bool:
        return all(part in self._active for part in name.expand())

    def add(self, item: CharsetName | str) -> None:
        if isinstance(item, CharsetName):
            self.add_name(item)
        else:
            self.add_string(item)

    def remove(self, name: CharsetName) -> None:
        self.remove_name(name)

    def add_name(self, name: CharsetName) -> None:
        self._check_usable()
        self._active.update(name.expand())

    def remove_name(self, name: CharsetName) -> None:
        self._check_usable()
        self._active.difference_update(name.expand())

    def add_char(self, char: str) -> None:
        self._check_usable()
        self._additions.append(char)

    def add_string(self, chars: Iterable[str]) -> None:
        for char in chars:
            self.add_char(char)

    def __iadd__(self, item: CharsetName | str) -> CharsetSpec:
        self.add(item)
        return self

    def __isub__(self, name: CharsetName) -> CharsetSpec:
        self.remove(name)
        return self

    def construct(self) -> list[str]:
        self._check_usable()
        chars: list[str] = []
        for name in ATOMIC_ORDER:
            if name in self._active:
                chars.extend(GROUP_CHARS[name])
        chars.extend(self._additions)
        self._additions.clear()
        self._consumed = True

        chars.sort()
        alphabet: list[str] = []
        for char in chars:
            if not alphabet or alphabet[-1] != char:
                alphabet.append(char)
        return alphabet

    def _check_usable(self) -> None:
        if self._consumed:
            raise SpecificationConsumedError()

    def __repr__(self) -> str:
        symbols = "".join(name.symbol for name in ATOMIC_ORDER if name in self._active)
        return f"CharsetSpec(groups={symbols!r}, additions={''.join(self._additions)!r})"
