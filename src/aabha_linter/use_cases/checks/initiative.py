"""BusinessInitiative marker checks."""

from aabha_linter.domain.rules.initiative_budget_breakdown import (
    InitiativeBudgetBreakdownRule,
)
from aabha_linter.domain.rules.initiative_timeline_validation import (
    InitiativeTimelineValidationRule,
)
from aabha_linter.use_cases.checks.base import MarkerRuleChecker


class InitiativeBudgetBreakdownChecker(MarkerRuleChecker):
    """E53xx: budget without a matching breakdown."""

    name: str = "aabha-initiative-budget-breakdown"
    rule_class = InitiativeBudgetBreakdownRule


class InitiativeTimelineValidationChecker(MarkerRuleChecker):
    """E54xx: missing or malformed timelines."""

    name: str = "aabha-initiative-timeline-validation"
    rule_class = InitiativeTimelineValidationRule
