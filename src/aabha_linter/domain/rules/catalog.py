"""Catalog of every rule shipped with the plugin, in registration order."""

from typing import TYPE_CHECKING, ClassVar

from aabha_linter.domain.rules import MarkerRule
from aabha_linter.domain.rules.action_duration_realism import ActionDurationRealismRule
from aabha_linter.domain.rules.behavior_validation_consistency import (
    BehaviorValidationConsistencyRule,
)
from aabha_linter.domain.rules.initiative_budget_breakdown import (
    InitiativeBudgetBreakdownRule,
)
from aabha_linter.domain.rules.initiative_timeline_validation import (
    InitiativeTimelineValidationRule,
)
from aabha_linter.domain.rules.metric_target_alignment import MetricTargetAlignmentRule
from aabha_linter.domain.rules.witness_rules import (
    WitnessBddCompletenessRule,
    WitnessMockConsistencyRule,
)

if TYPE_CHECKING:
    from aabha_linter.domain.protocols import MarkerExtractorProtocol


class RuleCatalog:
    """Creates rule instances. No top-level functions."""

    RULE_CLASSES: ClassVar[tuple[type[MarkerRule], ...]] = (
        ActionDurationRealismRule,
        BehaviorValidationConsistencyRule,
        InitiativeBudgetBreakdownRule,
        InitiativeTimelineValidationRule,
        MetricTargetAlignmentRule,
        WitnessBddCompletenessRule,
        WitnessMockConsistencyRule,
    )

    @classmethod
    def create_all(cls, extractor: "MarkerExtractorProtocol") -> list[MarkerRule]:
        """Instantiate every rule against one extractor."""
        return [rule_cls(extractor) for rule_cls in cls.RULE_CLASSES]

    @classmethod
    def rule_ids(cls) -> list[str]:
        """Rule ids in registration order."""
        return [rule_cls.rule_id for rule_cls in cls.RULE_CLASSES]
