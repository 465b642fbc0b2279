"""Random passphrases from a configurable alphabet."""

from __future__ import annotations

__version__ = "0.1.0"
