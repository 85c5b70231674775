"""Unit tests for InspectMarkersUseCase."""

import os
import tempfile
import unittest
from unittest.mock import MagicMock

from aabha_linter.domain.diagnostics import DiagnosticReporter
from aabha_linter.domain.rules.catalog import RuleCatalog
from aabha_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from aabha_linter.infrastructure.services.guidance_service import GuidanceService
from aabha_linter.use_cases.inspect_markers import InspectMarkersUseCase

INITIATIVE = """
@BusinessInitiative({
    "name": "Instant Account Opening",
    "budget": 2500000,
    "timeline": {"start": "2025-01-01", "end": "2024-12-31"},
})
class InstantAccountOpeningInitiative:
    pass
"""


class TestInspectMarkersUseCase(unittest.TestCase):
    def setUp(self) -> None:
        gateway = AstroidGateway()
        self.use_case = InspectMarkersUseCase(
            extractor=gateway,
            rules=RuleCatalog.create_all(gateway),
            diagnostic_reporter=DiagnosticReporter(GuidanceService().get_registry()),
        )

    def test_reports_markers_and_diagnostics(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "initiative.py")
            with open(path, "w", encoding="utf-8") as f:
                f.write(INITIATIVE)
            [declaration] = self.use_case.execute(path)
        self.assertEqual(declaration["declaration"], "InstantAccountOpeningInitiative")
        self.assertEqual(declaration["line"], 7)
        self.assertEqual(
            [d["msgid"] for d in declaration["diagnostics"]], ["E5301", "E5403"]
        )

    def test_missing_file(self) -> None:
        self.assertIsNone(self.use_case.execute("/nonexistent/model.py"))

    def test_failing_rule_is_contained(self) -> None:
        gateway = AstroidGateway()
        broken = MagicMock(rule_id="broken-rule")
        broken.check.side_effect = OverflowError("int too large to convert to float")
        use_case = InspectMarkersUseCase(
            extractor=gateway,
            rules=[broken, *RuleCatalog.create_all(gateway)],
            diagnostic_reporter=DiagnosticReporter(GuidanceService().get_registry()),
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "initiative.py")
            with open(path, "w", encoding="utf-8") as f:
                f.write(INITIATIVE)
            with self.assertLogs("aabha_linter.use_cases.inspect_markers", level="DEBUG"):
                [declaration] = use_case.execute(path)
        self.assertEqual(
            [d["msgid"] for d in declaration["diagnostics"]], ["E5301", "E5403"]
        )

    def test_oversized_budget_does_not_abort_inspection(self) -> None:
        huge = "1" + "0" * 400
        source = (
            f"@BusinessInitiative({{'name': 'Big', 'budget': {huge}, "
            "'budgetBreakdown': {'development': 1.5}, "
            "'timeline': {'start': '2024-01-01', 'end': '2024-12-31'}})\n"
            "class BigInitiative:\n    pass\n"
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "big.py")
            with open(path, "w", encoding="utf-8") as f:
                f.write(source)
            [declaration] = self.use_case.execute(path)
        self.assertEqual(declaration["declaration"], "BigInitiative")
        self.assertEqual(declaration["diagnostics"], [])
