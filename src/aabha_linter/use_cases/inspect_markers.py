"""Use Case: Inspect Markers - show what the plugin reads from a file and what it reports."""

import logging
from typing import TYPE_CHECKING

import astroid  # type: ignore[import-untyped]

from aabha_linter.domain.diagnostics import DiagnosticReporter
from aabha_linter.domain.protocols import MarkerExtractorProtocol

if TYPE_CHECKING:
    from aabha_linter.domain.rules import MarkerRule, Violation

logger = logging.getLogger(__name__)


class InspectMarkersUseCase:
    """Extract markers and evaluate every rule for each declaration of one file."""

    def __init__(
        self,
        extractor: MarkerExtractorProtocol,
        rules: list["MarkerRule"],
        diagnostic_reporter: DiagnosticReporter,
    ) -> None:
        self.extractor = extractor
        self.rules = rules
        self.diagnostic_reporter = diagnostic_reporter

    def execute(self, file_path: str) -> list[dict[str, object]] | None:
        """One entry per marked declaration; None when the file cannot be parsed."""
        module = self.extractor.parse_file(file_path)
        if module is None:
            return None

        declarations: list[dict[str, object]] = []
        for node in self.extractor.iter_declarations(module):
            markers = self.extractor.get_markers(node)
            if not markers:
                continue
            violations = [v for rule in self.rules for v in self._evaluate(rule, node)]
            declarations.append(
                {
                    "declaration": node.name,
                    "line": node.lineno,
                    "markers": [m.to_dict() for m in markers],
                    "diagnostics": [
                        d.to_dict() for d in self.diagnostic_reporter.to_diagnostics(violations)
                    ],
                }
            )
        return declarations

    @staticmethod
    def _evaluate(rule: "MarkerRule", node: astroid.nodes.ClassDef) -> list["Violation"]:
        try:
            return rule.check(node)
        except Exception:  # pylint: disable=broad-exception-caught
            # JUSTIFICATION: one failing rule must not abort the inspection.
            logger.debug("%s failed on %s", rule.rule_id, node.name, exc_info=True)
            return []
