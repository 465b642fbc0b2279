from __future__ import annotations

import string
import unittest
from unittest.mock import patch

from yapg.core.charsets import CharsetSpec
from yapg.core.error_dialect import EmptyAlphabetError, InvalidCharsetSymbolError, YapgError
from yapg.core.models import PasswordRequest, PasswordResult
from yapg.core.password_engine import SeededRandomSource
from yapg.core.password_service import collect_warnings, generate_passwords, resolve_charset_spec


class ServiceLayerTests(unittest.TestCase):
    def test_password_service_generates_expected_count(self) -> None:
        request = PasswordRequest(count=4, length=12, charsets="N", added_chars="ab")
        result = generate_passwords(request)
        self.assertEqual(len(result.outputs), 4)
        for value in result.outputs:
            self.assertEqual(len(value), 12)
            self.assertTrue(set(value).issubset(set("0123456789ab")))
        self.assertEqual(len(result.alphabet), 12)

    def test_password_service_defaults_to_std64(self) -> None:
        result = generate_passwords(PasswordRequest(count=3))
        self.assertEqual(set(result.alphabet), set(string.ascii_letters + string.digits + "-_"))
        self.assertEqual(result.entropy_bits, 120)
        self.assertEqual(result.quality, "excellent")
        for value in result.outputs:
            self.assertEqual(len(value), 20)

    def test_password_service_added_chars_extend_preset(self) -> None:
        result = generate_passwords(PasswordRequest(count=1, added_chars="!"))
        self.assertEqual(len(result.alphabet), 65)

    def test_password_service_seeded_source_is_reproducible(self) -> None:
        request = PasswordRequest(count=5, length=16, charsets="AS")
        first = generate_passwords(request, source=SeededRandomSource(42))
        second = generate_passwords(request, source=SeededRandomSource(42))
        self.assertEqual(first.outputs, second.outputs)

    def test_password_service_propagates_invalid_symbol(self) -> None:
        with self.assertRaises(InvalidCharsetSymbolError) as ctx:
            generate_passwords(PasswordRequest(count=1, charsets="LZ"))
        self.assertEqual(ctx.exception.symbol, "Z")

    def test_password_service_rejects_empty_alphabet(self) -> None:
        with self.assertRaises(EmptyAlphabetError):
            generate_passwords(PasswordRequest(count=1, charsets=""))

    def test_password_service_zero_count_with_empty_alphabet(self) -> None:
        result = generate_passwords(PasswordRequest(count=0, charsets="", quiet=True))
        self.assertEqual(result.outputs, ())
        self.assertEqual(result.entropy_bits, 0)

    def test_password_service_count_validation(self) -> None:
        with self.assertRaisesRegex(YapgError, "count must be >= 0"):
            generate_passwords(PasswordRequest(count=-1))
        with self.assertRaisesRegex(YapgError, "length must be >= 0"):
            generate_passwords(PasswordRequest(length=-1))

    def test_password_service_maps_rng_failure(self) -> None:
        with patch(
            "yapg.core.password_service.engine.assert_csprng_ready",
            side_effect=OSError("OS CSPRNG unavailable: boom"),
        ):
            with self.assertRaises(YapgError) as ctx:
                generate_passwords(PasswordRequest(count=1))
        self.assertEqual(ctx.exception.code, "rng_unavailable")

    def test_password_service_warnings(self) -> None:
        result = generate_passwords(PasswordRequest(count=2, length=4, charsets="N"))
        self.assertEqual(len(result.warnings), 2)
        self.assertIn("2 passphrases", result.warnings[0])
        self.assertIn("Low password entropy of 13 bits!", result.warnings[1])

    def test_password_service_quiet_suppresses_warnings(self) -> None:
        result = generate_passwords(PasswordRequest(count=2, length=4, charsets="N", quiet=True))
        self.assertEqual(result.warnings, ())

    def test_collect_warnings_thresholds(self) -> None:
        self.assertEqual(collect_warnings(10, 100), ())
        self.assertEqual(len(collect_warnings(9, 100)), 1)
        self.assertEqual(collect_warnings(10, 99), ("Low password entropy of 99 bits!",))

    def test_resolve_charset_spec_applies_additions_after_parse(self) -> None:
        spec = resolve_charset_spec("D", "<>")
        self.assertIsInstance(spec, CharsetSpec)
        self.assertEqual(spec.construct(), ["(", ")", "<", ">", "[", "]", "{", "}"])

    def test_result_lines_with_meta(self) -> None:
        result = PasswordResult(outputs=("abc", "def"), entropy_bits=42, quality="weak")
        self.assertEqual(result.as_lines(), ("abc", "def"))
        self.assertEqual(
            result.as_lines(show_meta=True),
            ("abc\t[entropy=42 bits quality=weak]", "def\t[entropy=42 bits quality=weak]"),
        )

    def test_result_meta_splits_on_last_tab(self) -> None:
        result = generate_passwords(
            PasswordRequest(count=10, length=12, charsets="", added_chars="\tx", quiet=True),
            source=SeededRandomSource(3),
        )
        for value, line in zip(result.outputs, result.as_lines(show_meta=True)):
            password, meta = line.rsplit("\t", 1)
            self.assertEqual(password, value)
            self.assertEqual(meta, "[entropy=12 bits quality=poor]")

    def test_result_combinations_text(self) -> None:
        self.assertEqual(PasswordResult(outputs=(), combinations=1024.0).combinations_text(), "1024")
        self.assertEqual(PasswordResult(outputs=(), combinations=64.0**20).combinations_text(), "1.329e+36")
        self.assertEqual(PasswordResult(outputs=(), combinations=float("inf")).combinations_text(), "unknown")


if __name__ == "__main__":
    unittest.main()
