from __future__ import annotations

import unittest
from unittest.mock import patch

from tools import rng_health_probe


class _ScriptedSource:
    def __init__(self, values: list[int]) -> None:
        self._values = iter(values)

    def randbelow(self, n: int) -> int:
        return next(self._values) % n


class RngHealthProbeTests(unittest.TestCase):
    def test_run_probe_accepts_healthy_sample_set(self) -> None:
        source = _ScriptedSource([0, 1, 1, 0, 0, 0, 1, 1])
        with patch("tools.rng_health_probe.assert_csprng_ready"):
            unique_ratio, deviation, collisions, collision_bound = rng_health_probe._run_probe(
                samples=4,
                alphabet_size=2,
                block_length=2,
                min_unique_ratio=1.0,
                max_frequency_deviation=0.1,
                source=source,
            )
        self.assertEqual(unique_ratio, 1.0)
        self.assertEqual(deviation, 0.0)
        self.assertEqual(collisions, 0)
        self.assertGreaterEqual(collision_bound, 2)

    def test_run_probe_rejects_low_unique_ratio(self) -> None:
        source = _ScriptedSource([0, 1] * 8)
        with patch("tools.rng_health_probe.assert_csprng_ready"):
            with self.assertRaisesRegex(RuntimeError, "unique ratio"):
                rng_health_probe._run_probe(
                    samples=8,
                    alphabet_size=2,
                    block_length=2,
                    min_unique_ratio=0.9,
                    max_frequency_deviation=1.0,
                    source=source,
                )

    def test_run_probe_rejects_skewed_frequencies(self) -> None:
        source = _ScriptedSource([0, 0, 0, 0, 0, 0, 0, 1])
        with patch("tools.rng_health_probe.assert_csprng_ready"):
            with self.assertRaisesRegex(RuntimeError, "symbol frequency deviation"):
                rng_health_probe._run_probe(
                    samples=4,
                    alphabet_size=2,
                    block_length=2,
                    min_unique_ratio=0.25,
                    max_frequency_deviation=0.2,
                    source=source,
                )

    def test_run_probe_validates_arguments(self) -> None:
        with patch("tools.rng_health_probe.assert_csprng_ready"):
            with self.assertRaisesRegex(ValueError, "alphabet-size"):
                rng_health_probe._run_probe(
                    samples=4,
                    alphabet_size=1,
                    block_length=2,
                    min_unique_ratio=0.5,
                    max_frequency_deviation=0.2,
                )

    def test_main_reports_ok_with_system_source(self) -> None:
        rc = rng_health_probe.main(["--samples", "2048", "--alphabet-size", "16", "--block-length", "8"])
        self.assertEqual(rc, 0)


if __name__ == "__main__":
    unittest.main()
