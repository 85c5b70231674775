"""Unit tests for RuleMsgBuilder (domain/rule_msgs.py)."""

import unittest

from aabha_linter.domain.rule_msgs import RuleMsgBuilder


def _registry() -> dict[str, object]:
    return {
        "aabha.sample-rule": {
            "rule_type": "suggestion",
            "checker_id": "58",
            "short_description": "Sample rule.",
            "messages": {
                "firstMessage": {
                    "number": "01",
                    "symbol": "sample-first",
                    "message_template": "First '%(name)s'.",
                },
                "secondMessage": {
                    "number": "2",
                    "symbol": "sample-second",
                    "message_template": "Second '%(name)s'.",
                },
            },
        },
        "aabha.empty-rule": {
            "rule_type": "problem",
            "checker_id": "59",
            "messages": {},
        },
    }


class TestRuleMsgBuilderGetEntry(unittest.TestCase):
    def test_prefix_is_optional(self) -> None:
        registry = _registry()
        self.assertIsNotNone(RuleMsgBuilder.get_entry(registry, "sample-rule"))
        self.assertIsNotNone(RuleMsgBuilder.get_entry(registry, "aabha.sample-rule"))

    def test_unknown_rule(self) -> None:
        self.assertIsNone(RuleMsgBuilder.get_entry(_registry(), "nope"))
        self.assertIsNone(RuleMsgBuilder.get_entry({}, "sample-rule"))


class TestRuleMsgBuilderCodes(unittest.TestCase):
    def test_category_follows_rule_type(self) -> None:
        registry = _registry()
        self.assertEqual(RuleMsgBuilder.category_for(registry["aabha.sample-rule"]), "W")
        self.assertEqual(RuleMsgBuilder.category_for(registry["aabha.empty-rule"]), "E")

    def test_message_code_is_zero_padded(self) -> None:
        entry = _registry()["aabha.sample-rule"]
        self.assertEqual(
            RuleMsgBuilder.message_code(entry, entry["messages"]["secondMessage"]), "W5802"
        )

    def test_build_msgs_for_rule(self) -> None:
        msgs = RuleMsgBuilder.build_msgs_for_rule(_registry(), "sample-rule")
        self.assertEqual(
            msgs,
            {
                "W5801": ("First '%(name)s'.", "sample-first", "Sample rule."),
                "W5802": ("Second '%(name)s'.", "sample-second", "Sample rule."),
            },
        )

    def test_rule_without_messages_builds_nothing(self) -> None:
        self.assertEqual(RuleMsgBuilder.build_msgs_for_rule(_registry(), "empty-rule"), {})
        self.assertEqual(RuleMsgBuilder.build_msgs_for_rule(_registry(), "missing"), {})

    def test_symbols_for_rule(self) -> None:
        self.assertEqual(
            RuleMsgBuilder.symbols_for_rule(_registry(), "sample-rule"),
            {"firstMessage": "sample-first", "secondMessage": "sample-second"},
        )

    def test_get_message(self) -> None:
        message = RuleMsgBuilder.get_message(_registry(), "sample-rule", "firstMessage")
        self.assertEqual(message["symbol"], "sample-first")
        self.assertIsNone(RuleMsgBuilder.get_message(_registry(), "sample-rule", "nope"))
