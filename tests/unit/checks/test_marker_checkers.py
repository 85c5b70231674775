"""Unit tests for the thin pylint checkers over the domain rules."""

import unittest
from unittest.mock import MagicMock

from aabha_linter.domain.rules import Violation
from aabha_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from aabha_linter.infrastructure.services.guidance_service import GuidanceService
from aabha_linter.use_cases.checks.action import ActionDurationRealismChecker
from aabha_linter.use_cases.checks.behavior import BehaviorValidationConsistencyChecker
from aabha_linter.use_cases.checks.initiative import (
    InitiativeBudgetBreakdownChecker,
    InitiativeTimelineValidationChecker,
)
from aabha_linter.use_cases.checks.metric import MetricTargetAlignmentChecker
from aabha_linter.use_cases.checks.witness import WitnessBddCompletenessChecker
from tests.linter_test_utils import first_class, run_checker

REGISTRY = GuidanceService().get_registry()


def _run(checker_cls, code: str) -> list:
    return run_checker(checker_cls, code, extractor=AstroidGateway(), registry=REGISTRY)


class TestCheckerMessages(unittest.TestCase):
    def test_msgs_come_from_registry(self) -> None:
        checker = ActionDurationRealismChecker(MagicMock(), AstroidGateway(), REGISTRY)
        self.assertEqual(sorted(checker.msgs), ["W5101", "W5102", "W5103"])
        self.assertEqual(checker.msgs["W5102"][1], "manual-action-instant")
        self.assertEqual(checker.name, "aabha-action-duration-realism")

    def test_noop_checkers_have_no_msgs(self) -> None:
        for checker_cls in (MetricTargetAlignmentChecker, WitnessBddCompletenessChecker):
            checker = checker_cls(MagicMock(), AstroidGateway(), REGISTRY)
            self.assertEqual(checker.msgs, {})


class TestCheckerReporting(unittest.TestCase):
    def test_reports_symbol_and_dict_args(self) -> None:
        messages = _run(
            ActionDurationRealismChecker,
            "@Action({'name': 'X', 'automationLevel': 'fully-automated', 'estimatedDuration': 'long'})\n"
            "class X:\n    pass\n",
        )
        self.assertEqual(messages, [("automated-action-long-duration", {"name": "X", "duration": "long"})])

    def test_per_field_violations_share_the_decorator_node(self) -> None:
        linter = MagicMock()
        checker = BehaviorValidationConsistencyChecker(linter, AstroidGateway(), REGISTRY)
        node = first_class(
            "@Behavior({'name': 'B', 'preconditions': ['user is a', 'order is b']})\nclass B:\n    pass\n"
        )
        checker.visit_classdef(node)
        calls = linter.add_message.call_args_list
        self.assertEqual(len(calls), 2)
        decorator = node.decorators.nodes[0]
        self.assertTrue(all(call.args[2] is decorator for call in calls))
        self.assertTrue(all(call.args[0] == "missing-validation-for-precondition" for call in calls))

    def test_both_initiative_checkers_see_the_same_marker(self) -> None:
        code = "@BusinessInitiative({'name': 'I', 'budget': 10})\nclass I:\n    pass\n"
        self.assertEqual(
            _run(InitiativeBudgetBreakdownChecker, code),
            [("missing-budget-breakdown", {"name": "I", "budget": "10"})],
        )
        self.assertEqual(
            _run(InitiativeTimelineValidationChecker, code),
            [("missing-initiative-timeline", {"name": "I"})],
        )

    def test_unparseable_marker_reports_nothing(self) -> None:
        for checker_cls in (
            ActionDurationRealismChecker,
            BehaviorValidationConsistencyChecker,
            InitiativeBudgetBreakdownChecker,
            InitiativeTimelineValidationChecker,
        ):
            code = (
                "@Action(CONFIG)\n@Behavior(build())\n@BusinessInitiative(**INIT)\n"
                "class Anything:\n    pass\n"
            )
            with self.subTest(checker=checker_cls.name):
                self.assertEqual(_run(checker_cls, code), [])

    def test_nested_classes_are_visited(self) -> None:
        code = (
            "class Models:\n"
            "    @Action({'name': 'Inner', 'automationLevel': 'manual', 'estimatedDuration': 'instant'})\n"
            "    class Inner:\n"
            "        pass\n"
        )
        self.assertEqual(_run(ActionDurationRealismChecker, code), [("manual-action-instant", {"name": "Inner"})])


class TestCheckerFailureContainment(unittest.TestCase):
    def test_rule_exception_emits_nothing(self) -> None:
        extractor = MagicMock()
        extractor.get_markers.side_effect = RuntimeError("broken tree")
        linter = MagicMock()
        checker = ActionDurationRealismChecker(linter, extractor, REGISTRY)
        with self.assertLogs("aabha_linter.use_cases.checks.base", level="DEBUG"):
            checker.visit_classdef(first_class("class X:\n    pass\n"))
        linter.add_message.assert_not_called()

    def test_unregistered_message_is_skipped(self) -> None:
        linter = MagicMock()
        checker = ActionDurationRealismChecker(linter, AstroidGateway(), {})
        node = first_class("class X:\n    pass\n")
        checker._rule = MagicMock()
        checker._rule.check.return_value = [
            Violation("action-duration-realism", "manualActionInstant", "test.py:1:0", node, {"name": "X"})
        ]
        checker.visit_classdef(node)
        linter.add_message.assert_not_called()
