"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from pylint.lint import PyLinter

from aabha_linter.infrastructure.di.container import AabhaContainer
from aabha_linter.interface.reporter import AabhaSummaryReporter
from aabha_linter.use_cases.checks.action import ActionDurationRealismChecker
from aabha_linter.use_cases.checks.behavior import BehaviorValidationConsistencyChecker
from aabha_linter.use_cases.checks.initiative import (
    InitiativeBudgetBreakdownChecker,
    InitiativeTimelineValidationChecker,
)
from aabha_linter.use_cases.checks.metric import MetricTargetAlignmentChecker
from aabha_linter.use_cases.checks.witness import (
    WitnessBddCompletenessChecker,
    WitnessMockConsistencyChecker,
)

CHECKER_CLASSES = (
    ActionDurationRealismChecker,
    BehaviorValidationConsistencyChecker,
    InitiativeBudgetBreakdownChecker,
    InitiativeTimelineValidationChecker,
    MetricTargetAlignmentChecker,
    WitnessBddCompletenessChecker,
    WitnessMockConsistencyChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = AabhaContainer.get_instance()
    extractor = container.get_astroid_gateway()
    registry = container.get_guidance_service().get_registry()

    for checker_class in CHECKER_CLASSES:
        linter.register_checker(checker_class(linter, extractor=extractor, registry=registry))

    # Register reporter
    linter.register_reporter(AabhaSummaryReporter)
