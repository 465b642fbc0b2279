"""Charset construction, generation engine, and service API for yapg."""

from __future__ import annotations

from yapg.core.charsets import CharsetName, CharsetSpec, resolve_charset_name
from yapg.core.error_dialect import (
    EmptyAlphabetError,
    InvalidCharsetSymbolError,
    SpecificationConsumedError,
    YapgError,
)
from yapg.core.password_engine import PasswordGenerator


def generate_passwords(request):
    from yapg.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request)


__all__ = [
    "CharsetName",
    "CharsetSpec",
    "EmptyAlphabetError",
    "InvalidCharsetSymbolError",
    "PasswordGenerator",
    "SpecificationConsumedError",
    "YapgError",
    "generate_passwords",
    "resolve_charset_name",
]
