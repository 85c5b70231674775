"""Normalizes rule violations into host diagnostics using the rule registry."""

from collections.abc import Mapping
from typing import Optional

from aabha_linter.domain.constants import CATEGORY_SEVERITY
from aabha_linter.domain.entities import Diagnostic
from aabha_linter.domain.registry_types import RuleRegistryEntry
from aabha_linter.domain.rule_msgs import RuleMsgBuilder
from aabha_linter.domain.rules import Violation


class DiagnosticReporter:
    """
    Converts a Violation into a Diagnostic: msgid, symbol, severity, filled
    message text and the node's line/column range.

    Severity follows the rule type (problem -> error, suggestion -> warning).
    A violation's fix is carried through untouched; nothing here applies it.
    """

    def __init__(self, registry: Mapping[str, RuleRegistryEntry]) -> None:
        self._registry = registry

    def to_diagnostic(self, violation: Violation) -> Optional[Diagnostic]:
        """Return the Diagnostic for a violation, or None if its message is unregistered."""
        entry = RuleMsgBuilder.get_entry(self._registry, violation.rule_id)
        message = RuleMsgBuilder.get_message(
            self._registry, violation.rule_id, violation.message_id
        )
        if entry is None or message is None or not message.get("message_template"):
            return None
        msgid = RuleMsgBuilder.message_code(entry, message)
        node = violation.node
        return Diagnostic(
            rule_id=violation.rule_id,
            msgid=msgid,
            symbol=str(message.get("symbol") or violation.message_id),
            severity=CATEGORY_SEVERITY.get(msgid[0], "warning"),
            message=self.format_message(str(message["message_template"]), violation.data),
            line=getattr(node, "lineno", 0) or 0,
            column=getattr(node, "col_offset", 0) or 0,
            end_line=getattr(node, "end_lineno", None),
            end_column=getattr(node, "end_col_offset", None),
            fix=violation.fix,
        )

    def to_diagnostics(self, violations: list[Violation]) -> list[Diagnostic]:
        """Convert violations in order, dropping unregistered ones."""
        diagnostics: list[Diagnostic] = []
        for violation in violations:
            diagnostic = self.to_diagnostic(violation)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    @staticmethod
    def format_message(template: str, data: Mapping[str, str]) -> str:
        """Fill %(field)s placeholders the same way pylint does for dict args."""
        try:
            return template % dict(data)
        except (KeyError, TypeError, ValueError):
            return template
