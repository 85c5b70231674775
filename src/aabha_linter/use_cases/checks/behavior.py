"""Behavior marker checks."""

from aabha_linter.domain.rules.behavior_validation_consistency import (
    BehaviorValidationConsistencyRule,
)
from aabha_linter.use_cases.checks.base import MarkerRuleChecker


class BehaviorValidationConsistencyChecker(MarkerRuleChecker):
    """E52xx: preconditions without validation, or contradicted by it."""

    name: str = "aabha-behavior-validation-consistency"
    rule_class = BehaviorValidationConsistencyRule
