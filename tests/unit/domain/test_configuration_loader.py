"""Unit tests for ConfigurationLoader."""

import logging
import unittest

from aabha_linter.domain.config import ConfigurationLoader


class TestConfigurationLoader(unittest.TestCase):
    def test_defaults(self) -> None:
        loader = ConfigurationLoader({}, {})
        self.assertEqual(loader.disabled_rules, [])
        self.assertEqual(loader.exclude_paths, [])
        self.assertTrue(loader.is_rule_enabled("action-duration-realism"))

    def test_disable_known_rules(self) -> None:
        loader = ConfigurationLoader({"disable": ["action-duration-realism"]}, {})
        self.assertEqual(loader.disabled_rules, ["action-duration-realism"])
        self.assertFalse(loader.is_rule_enabled("action-duration-realism"))
        self.assertTrue(loader.is_rule_enabled("behavior-validation-consistency"))

    def test_unknown_rule_is_warned_and_dropped(self) -> None:
        with self.assertLogs("aabha_linter.domain.config", level=logging.WARNING) as logs:
            loader = ConfigurationLoader({"disable": ["no-such-rule"]}, {})
        self.assertIn("no-such-rule", logs.output[0])
        self.assertEqual(loader.disabled_rules, [])

    def test_unknown_key_is_warned(self) -> None:
        with self.assertLogs("aabha_linter.domain.config", level=logging.WARNING) as logs:
            ConfigurationLoader({"layer_map": {}}, {})
        self.assertIn("layer_map", logs.output[0])

    def test_malformed_values_are_ignored(self) -> None:
        with self.assertLogs("aabha_linter.domain.config", level=logging.WARNING):
            loader = ConfigurationLoader({"disable": "action-duration-realism", "exclude_paths": "x"}, {})
        self.assertEqual(loader.disabled_rules, [])
        self.assertEqual(loader.exclude_paths, [])

    def test_exclude_paths(self) -> None:
        loader = ConfigurationLoader({"exclude_paths": ["fixtures/bad", 3]}, {"aabha-lint": {}})
        self.assertEqual(loader.exclude_paths, ["fixtures/bad"])
        self.assertEqual(loader.tool_section, {"aabha-lint": {}})
