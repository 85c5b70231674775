"""Unit tests for AabhaSummaryReporter."""

import io
import unittest
from unittest.mock import MagicMock

from aabha_linter.interface.reporter import AabhaSummaryReporter


def _msg(msg_id: str, symbol: str, path: str) -> MagicMock:
    msg = MagicMock()
    msg.msg_id = msg_id
    msg.symbol = symbol
    msg.path = path
    return msg


class TestAabhaSummaryReporter(unittest.TestCase):
    def setUp(self) -> None:
        self.out = io.StringIO()
        self.reporter = AabhaSummaryReporter(self.out)

    def test_no_messages(self) -> None:
        self.reporter.on_close(None, None)
        self.assertIn("No Aabha model inconsistencies detected.", self.out.getvalue())

    def test_counts_by_message_and_directory(self) -> None:
        for msg in (
            _msg("W5101", "automated-action-long-duration", "models/actions/A.py"),
            _msg("W5101", "automated-action-long-duration", "models/actions/B.py"),
            _msg("E5201", "missing-validation-for-precondition", "models/behaviors/C.py"),
        ):
            self.reporter.handle_message(msg)

        errors, directories = self.reporter._collect_stats()
        self.assertEqual(directories, {"actions", "behaviors"})
        self.assertEqual(errors["W5101"]["total"], 2)
        self.assertEqual(errors["W5101"]["actions"], 2)
        self.assertEqual(errors["E5201"]["behaviors"], 1)

        self.reporter.on_close(None, None)
        output = self.out.getvalue()
        self.assertIn("automated-action-long-duration", output)
        self.assertIn("3 Aabha model inconsistencies detected.", output)
        self.assertLess(output.index("W5101"), output.index("E5201"))

    def test_marker_directory(self) -> None:
        self.assertEqual(AabhaSummaryReporter.marker_directory("src/models/metrics/nps.py"), "metrics")
        self.assertEqual(AabhaSummaryReporter.marker_directory("nps.py"), ".")
