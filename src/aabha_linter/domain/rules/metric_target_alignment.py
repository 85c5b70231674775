"""Metric target alignment rule (registered, no checks yet)."""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker


class MetricTargetAlignmentRule(MarkerRule):
    """Registered with its full interface but performs no check.

    No behavior has been defined for target alignment; the rule reads Metric
    markers and reports nothing until one is.
    """

    rule_id: str = "metric-target-alignment"
    rule_type: str = "problem"
    description: str = "Metric targets should align with their baselines and thresholds."
    marker_names: ClassVar[tuple[str, ...]] = ("Metric",)
    message_ids: ClassVar[tuple[str, ...]] = ()

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        return []
