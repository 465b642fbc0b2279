from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional, Tuple

from yapg.core.password_engine import DEFAULT_LENGTH

DEFAULT_COUNT = 20
ENTROPY_THRESHOLD = 100
EAVESDROPPER_THRESHOLD = 10


@dataclass(frozen=True)
class PasswordRequest:
    count: int = DEFAULT_COUNT
    length: int = DEFAULT_LENGTH
    # Encoded charset symbols such as "LUN"; None selects the standard 64 set.
    charsets: Optional[str] = None
    added_chars: str = ""
    quiet: bool = False


@dataclass(frozen=True)
class PasswordResult:
    outputs: Tuple[str, ...]
    alphabet: Tuple[str, ...] = ()
    combinations: float = 0.0
    entropy_bits: int = 0
    quality: str = ""
    warnings: Tuple[str, ...] = ()

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        """One line per password; with `show_meta`, a tab and a tab-free `[entropy=...]` suffix.

        Passwords may themselves contain tabs (`-a "\\t"`), so split on the last tab.
        """
        if not show_meta:
            return self.outputs

        meta = f"[entropy={self.entropy_bits} bits"
        if self.quality:
            meta += f" quality={self.quality}"
        meta += "]"
        return tuple(f"{value}\t{meta}" for value in self.outputs)

    def combinations_text(self) -> str:
        if not math.isfinite(self.combinations):
            return "unknown"
        if self.combinations < 1e15:
            return str(int(self.combinations))
        return f"{self.combinations:.3e}"
