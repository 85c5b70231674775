"""Shared pylint plumbing for the marker rule checkers."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

import astroid  # type: ignore[import-untyped]
from pylint.checkers import BaseChecker

from aabha_linter.domain.registry_types import RuleRegistryEntry
from aabha_linter.domain.rule_msgs import RuleMsgBuilder
from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from pylint.lint import PyLinter

    from aabha_linter.domain.protocols import MarkerExtractorProtocol

logger = logging.getLogger(__name__)


class MarkerRuleChecker(BaseChecker):
    """
    Thin adapter from one domain rule to pylint.

    Messages come from the rule registry; every violation is reported on the
    marker's decorator node with the violation data as %-format args.
    """

    name: str = "aabha-marker-rule"
    options = ()
    rule_class: ClassVar[type[MarkerRule]]

    def __init__(
        self,
        linter: "PyLinter",
        extractor: "MarkerExtractorProtocol",
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        rule_id = self.rule_class.rule_id
        self.msgs = RuleMsgBuilder.build_msgs_for_rule(registry, rule_id)
        super().__init__(linter)
        self._rule = self.rule_class(extractor)
        self._symbols = RuleMsgBuilder.symbols_for_rule(registry, rule_id)

    @property
    def rule(self) -> MarkerRule:
        """The domain rule this checker reports for."""
        return self._rule

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        """Run the rule over the declaration's markers."""
        for violation in self._evaluate(node):
            symbol = self._symbols.get(violation.message_id)
            if symbol is None:
                logger.debug(
                    "%s: unregistered message %s", self.name, violation.message_id
                )
                continue
            self.add_message(symbol, node=violation.node, args=dict(violation.data))

    def _evaluate(self, node: astroid.nodes.ClassDef) -> list[Violation]:
        try:
            return self._rule.check(node)
        except Exception:  # pylint: disable=broad-exception-caught
            # JUSTIFICATION: a rule failure must not abort the lint run.
            logger.debug("%s failed on %s", self.name, node.name, exc_info=True)
            return []
