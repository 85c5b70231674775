"""Action marker checks."""

from aabha_linter.domain.rules.action_duration_realism import ActionDurationRealismRule
from aabha_linter.use_cases.checks.base import MarkerRuleChecker


class ActionDurationRealismChecker(MarkerRuleChecker):
    """W51xx: estimated durations that contradict automation level or scope."""

    name: str = "aabha-action-duration-realism"
    rule_class = ActionDurationRealismRule
