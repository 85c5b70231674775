"""Behavior validation consistency rule: preconditions vs validation.rules."""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.rules import MarkerRule, Violation
from aabha_linter.domain.rules.validation_heuristics import PreconditionHeuristic

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker


class BehaviorValidationConsistencyRule(MarkerRule):
    """Every precondition needs validation, and validation must not negate a precondition."""

    rule_id: str = "behavior-validation-consistency"
    rule_type: str = "problem"
    description: str = (
        "Validation rules should be consistent with preconditions."
    )
    marker_names: ClassVar[tuple[str, ...]] = ("Behavior",)
    message_ids: ClassVar[tuple[str, ...]] = (
        "missingValidationForPrecondition",
        "validationContradictsPrecondition",
    )

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        preconditions = marker.get("preconditions")
        if not isinstance(preconditions, list) or not preconditions:
            return []

        name = self.display_name(marker.get("name"))
        validation = marker.get("validation")
        rules = validation.get("rules") if isinstance(validation, dict) else None

        if not isinstance(rules, list) or not rules:
            return [
                self.violation(
                    marker,
                    "missingValidationForPrecondition",
                    name=name,
                    precondition=precondition.strip(),
                )
                for precondition in preconditions
                if isinstance(precondition, str)
            ]

        normalized_rules = [r.lower().strip() for r in rules if isinstance(r, str)]
        violations: list[Violation] = []
        for precondition in preconditions:
            if not isinstance(precondition, str):
                continue
            for rule in normalized_rules:
                if PreconditionHeuristic.contradicts(precondition, rule):
                    violations.append(
                        self.violation(
                            marker,
                            "validationContradictsPrecondition",
                            name=name,
                            validationRule=rule,
                            precondition=precondition.strip(),
                        )
                    )
        return violations
