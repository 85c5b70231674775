"""Business initiative budget breakdown rule."""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker, MetadataValue


class InitiativeBudgetBreakdownRule(MarkerRule):
    """Initiatives with a numeric budget need a breakdown that sums to it (1% tolerance)."""

    rule_id: str = "initiative-budget-breakdown"
    rule_type: str = "problem"
    description: str = "Business initiatives should carry a detailed budget breakdown."
    marker_names: ClassVar[tuple[str, ...]] = ("BusinessInitiative",)
    message_ids: ClassVar[tuple[str, ...]] = (
        "missingBreakdown",
        "breakdownMismatch",
        "emptyBreakdown",
    )
    TOLERANCE: ClassVar[float] = 0.01

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        name = self.display_name(marker.get("name"))
        budget = marker.get("budget")
        breakdown = marker.get("budgetBreakdown")
        has_budget = self._is_number(budget)

        if has_budget and self.is_blank(breakdown):
            return [
                self.violation(
                    marker, "missingBreakdown", name=name, budget=self._format(budget)
                )
            ]
        if isinstance(breakdown, dict) and not breakdown:
            return [self.violation(marker, "emptyBreakdown", name=name)]
        if has_budget and isinstance(breakdown, dict):
            try:
                total = sum(v for v in breakdown.values() if self._is_number(v))
                mismatched = abs(total - budget) > budget * self.TOLERANCE
            except OverflowError:
                # Integers too large for float arithmetic carry no evidence.
                return []
            if mismatched:
                return [
                    self.violation(
                        marker,
                        "breakdownMismatch",
                        name=name,
                        budget=self._format(budget),
                        breakdownSum=self._format(total),
                    )
                ]
        return []

    @staticmethod
    def _is_number(value: "MetadataValue") -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def _format(value: "MetadataValue") -> str:
        """Render whole floats without a trailing .0 (2500000.0 -> 2500000)."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
