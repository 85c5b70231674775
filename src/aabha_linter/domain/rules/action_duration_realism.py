"""Action duration realism rule: estimatedDuration vs automationLevel and scope."""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.constants import DURATION_RANKING
from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker


class ActionDurationRealismRule(MarkerRule):
    """Duration estimates must agree with automation level and scope.

    - fully-automated actions ranked above 'quick' contradict themselves;
    - manual actions cannot be 'instant';
    - Atomic actions ranked above 'short' probably have the wrong scope.

    Unranked durations (including enum member references such as
    StepDuration.Long, which stay as source text) are skipped.
    """

    rule_id: str = "action-duration-realism"
    rule_type: str = "suggestion"
    description: str = (
        "Duration estimates should align with automation level and scope."
    )
    marker_names: ClassVar[tuple[str, ...]] = ("Action",)
    message_ids: ClassVar[tuple[str, ...]] = (
        "automatedActionLongDuration",
        "manualActionInstant",
        "atomicActionLongDuration",
    )

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        duration = marker.get("estimatedDuration")
        if not isinstance(duration, str) or not duration:
            return []
        rank = DURATION_RANKING.get(duration)
        if rank is None:
            return []

        name = self.display_name(marker.get("name"))
        automation_level = marker.get("automationLevel")
        scope = marker.get("scope")
        violations: list[Violation] = []

        if automation_level == "fully-automated" and rank > 2:
            violations.append(
                self.violation(
                    marker, "automatedActionLongDuration", name=name, duration=duration
                )
            )
        if automation_level == "manual" and rank == 1:
            violations.append(self.violation(marker, "manualActionInstant", name=name))
        if scope == "Atomic" and rank > 3:
            violations.append(
                self.violation(
                    marker, "atomicActionLongDuration", name=name, duration=duration
                )
            )
        return violations
