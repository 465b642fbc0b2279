#!/usr/bin/env python3
"""Run the yapg CLI from a source checkout without installing it."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.cli.yapg_cli import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
