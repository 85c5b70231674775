"""Unit tests for PreconditionHeuristic (lexical, deliberately imprecise)."""

import unittest

from aabha_linter.domain.rules.validation_heuristics import PreconditionHeuristic


class TestPreconditionKey(unittest.TestCase):
    def test_strips_modal_after_known_subject(self) -> None:
        self.assertEqual(PreconditionHeuristic.precondition_key("User is authenticated"), "user authenticated")
        self.assertEqual(PreconditionHeuristic.precondition_key("  EMAIL has   been verified "), "email been verified")

    def test_unknown_subject_is_kept_verbatim(self) -> None:
        self.assertEqual(PreconditionHeuristic.precondition_key("account is open"), "account is open")

    def test_rule_prefix_does_not_strip_is(self) -> None:
        self.assertEqual(PreconditionHeuristic.rule_key("user is not blocked"), "user is not blocked")
        self.assertEqual(PreconditionHeuristic.rule_key("user must  not be blocked"), "user not be blocked")


class TestContradicts(unittest.TestCase):
    def test_requires_not(self) -> None:
        self.assertFalse(PreconditionHeuristic.contradicts("user is authenticated", "user must be authenticated"))

    def test_shared_leading_subject_with_not(self) -> None:
        self.assertTrue(PreconditionHeuristic.contradicts("user is authenticated", "user must not be authenticated"))

    def test_rule_subject_found_in_precondition(self) -> None:
        self.assertTrue(PreconditionHeuristic.contradicts("the kyc check passed", "kyc cannot be skipped"))

    def test_not_as_substring_over_fires(self) -> None:
        # 'notification' contains 'not'; accepted imprecision.
        self.assertTrue(PreconditionHeuristic.contradicts("email is verified", "email notification sent"))

    def test_unrelated_negation_does_not_fire(self) -> None:
        self.assertFalse(PreconditionHeuristic.contradicts("order is placed", "payment must not be declined"))
