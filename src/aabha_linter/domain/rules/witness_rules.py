"""Witness rules (registered, no checks yet).

Both rules carry their id, type, description and an empty message set so they
can be listed, enabled and disabled like any other rule. Neither defines a
check: they read Witness markers and report nothing.
"""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker


class WitnessBddCompletenessRule(MarkerRule):
    """Witness given/when/then completeness. No-op."""

    rule_id: str = "witness-bdd-completeness"
    rule_type: str = "problem"
    description: str = "Witnesses should describe complete given/when/then scenarios."
    marker_names: ClassVar[tuple[str, ...]] = ("Witness",)
    message_ids: ClassVar[tuple[str, ...]] = ()

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        return []


class WitnessMockConsistencyRule(MarkerRule):
    """Witness mock declarations consistency. No-op."""

    rule_id: str = "witness-mock-consistency"
    rule_type: str = "problem"
    description: str = "Witness mocks should be declared consistently."
    marker_names: ClassVar[tuple[str, ...]] = ("Witness",)
    message_ids: ClassVar[tuple[str, ...]] = ()

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        return []
