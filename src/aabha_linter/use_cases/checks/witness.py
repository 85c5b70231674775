"""Witness marker checks."""

from aabha_linter.domain.rules.witness_rules import (
    WitnessBddCompletenessRule,
    WitnessMockConsistencyRule,
)
from aabha_linter.use_cases.checks.base import MarkerRuleChecker


class WitnessBddCompletenessChecker(MarkerRuleChecker):
    """Registered without messages; reserved for witness given/when/then checks."""

    name: str = "aabha-witness-bdd-completeness"
    rule_class = WitnessBddCompletenessRule


class WitnessMockConsistencyChecker(MarkerRuleChecker):
    """Registered without messages; reserved for witness mock checks."""

    name: str = "aabha-witness-mock-consistency"
    rule_class = WitnessMockConsistencyRule
