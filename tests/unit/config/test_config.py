"""Tests for config loading and input sanitization.

Ensures malformed config data is ignored and only well-typed values are used.
"""

from __future__ import annotations

import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treescan import config


def _write_config(config_path: Path, data: dict[str, object]) -> None:
    config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("treescan.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_show_output())
                self.assertFalse(config.load_verbose())
                self.assertIsNone(config.load_name_placeholder())
                self.assertEqual(config.load_log_level(), logging.WARNING)

    def test_well_typed_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treescan.config.CONFIG_PATH", config_path):
                _write_config(
                    config_path,
                    {
                        "show_output": True,
                        "verbose": True,
                        "name_placeholder": "<?>",
                        "log_level": "debug",
                    }
                )

                self.assertTrue(config.load_show_output())
                self.assertTrue(config.load_verbose())
                self.assertEqual(config.load_name_placeholder(), "<?>")
                self.assertEqual(config.load_log_level(), logging.DEBUG)

    def test_wrongly_typed_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treescan.config.CONFIG_PATH", config_path):
                _write_config(
                    config_path,
                    {
                        "show_output": "yes",
                        "verbose": 1,
                        "name_placeholder": "",
                        "log_level": "LOUD",
                    }
                )

                self.assertFalse(config.load_show_output())
                self.assertFalse(config.load_verbose())
                self.assertIsNone(config.load_name_placeholder())
                self.assertEqual(config.load_log_level(), logging.WARNING)

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treescan.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2, 3]\n", encoding="utf-8")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
