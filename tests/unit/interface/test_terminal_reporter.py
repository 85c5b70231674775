"""Unit tests for TerminalAuditReporter."""

import unittest
from unittest.mock import MagicMock, patch

from aabha_linter.domain.entities import AuditResult, LinterResult
from aabha_linter.infrastructure.reporters import TerminalAuditReporter


class TestTerminalAuditReporter(unittest.TestCase):
    def setUp(self) -> None:
        self.guidance = MagicMock()
        self.guidance.get_manual_instructions.return_value = "Fix the timeline."
        self.reporter = TerminalAuditReporter(self.guidance)

    def _printed(self, audit_result: AuditResult) -> str:
        with patch("aabha_linter.infrastructure.reporters.typer.secho") as secho, patch(
            "aabha_linter.infrastructure.reporters.typer.echo"
        ) as echo:
            self.reporter.report_audit(audit_result)
        lines = [c.args[0] for c in secho.call_args_list] + [c.args[0] for c in echo.call_args_list]
        return "\n".join(lines)

    def test_clean_audit(self) -> None:
        self.assertIn("No Aabha model inconsistencies in src", self._printed(AuditResult([], "src")))

    def test_grouped_results_with_guidance(self) -> None:
        result = LinterResult(
            "E5403", "Initiative 'I' has timeline end date", ["a.py:1:1", "b.py:2:1"],
            symbol="timeline-end-before-start",
        )
        output = self._printed(AuditResult([result], "src"))
        self.assertIn("E5403 (timeline-end-before-start) x2", output)
        self.assertIn("Fix: Fix the timeline.", output)
        self.assertIn("2 Aabha model inconsistencies across 1 message ids.", output)
        self.guidance.get_manual_instructions.assert_called_once_with("timeline-end-before-start")

    def test_error_result(self) -> None:
        output = self._printed(AuditResult([LinterResult("AABHA_ERROR", "pylint missing")], "src"))
        self.assertIn("Audit failed: pylint missing", output)
