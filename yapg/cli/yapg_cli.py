#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys

from yapg.core.charsets import describe_charsets
from yapg.core.error_dialect import format_error_text
from yapg.core.models import DEFAULT_COUNT, PasswordRequest
from yapg.core.password_engine import DEFAULT_LENGTH
from yapg.core.password_service import generate_passwords

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _env_charsets() -> str | None:
    value = os.environ.get("YAPG_CHARSETS", "").strip()
    return value or None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="yapg", description="Generate random passphrases")
    parser.add_argument(
        "charsets",
        nargs="?",
        default=None,
        help="selection of charsets to use, e.g. 'LUN' (see --list-charsets; default: letters, digits, '-' and '_')",
    )
    parser.add_argument(
        "-n",
        "--number",
        "--count",
        dest="count",
        type=int,
        default=DEFAULT_COUNT,
        help="number (count) of passwords to print",
    )
    parser.add_argument("-l", "--length", type=int, default=DEFAULT_LENGTH, help="length of each password")
    parser.add_argument("-a", "--add", dest="added_chars", default="", help="additional characters to use")
    parser.add_argument("-q", "--quiet", action="store_true", help="don't print safety warnings")
    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="append a tab and entropy metadata to each output (split on the last tab)",
    )
    parser.add_argument("--list-charsets", action="store_true", help="list charset symbols and exit")
    return parser.parse_args(argv)


def _print_charsets() -> None:
    for symbol, name, contents in describe_charsets():
        print(f"{symbol}  {name:<22} {contents}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.list_charsets:
        _print_charsets()
        return 0

    quiet = args.quiet or _env_flag("YAPG_QUIET")
    request = PasswordRequest(
        count=args.count,
        length=args.length,
        charsets=args.charsets if args.charsets is not None else _env_charsets(),
        added_chars=args.added_chars,
        quiet=quiet,
    )
    try:
        result = generate_passwords(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2

    for warning in result.warnings:
        print(warning, file=sys.stderr)
    if args.show_meta and not quiet:
        print(
            f"[alphabet={len(result.alphabet)} combinations={result.combinations_text()} "
            f"entropy={result.entropy_bits} bits]",
            file=sys.stderr,
        )
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
