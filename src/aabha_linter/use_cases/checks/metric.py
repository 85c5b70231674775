"""Metric marker checks."""

from aabha_linter.domain.rules.metric_target_alignment import MetricTargetAlignmentRule
from aabha_linter.use_cases.checks.base import MarkerRuleChecker


class MetricTargetAlignmentChecker(MarkerRuleChecker):
    """Registered without messages; reserved for metric target checks."""

    name: str = "aabha-metric-target-alignment"
    rule_class = MetricTargetAlignmentRule
