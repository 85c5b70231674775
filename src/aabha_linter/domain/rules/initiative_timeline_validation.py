"""Business initiative timeline validation rule."""

import re
from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from aabha_linter.domain.rules import MarkerRule, Violation

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker


class InitiativeTimelineValidationRule(MarkerRule):
    """Initiative timelines need ISO 'start'/'end' dates with end not before start."""

    rule_id: str = "initiative-timeline-validation"
    rule_type: str = "problem"
    description: str = "Initiative timelines should be valid and properly structured."
    marker_names: ClassVar[tuple[str, ...]] = ("BusinessInitiative",)
    message_ids: ClassVar[tuple[str, ...]] = (
        "missingTimeline",
        "invalidTimeline",
        "endBeforeStart",
        "invalidDateFormat",
    )
    ISO_DATE: ClassVar[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        name = self.display_name(marker.get("name"))
        timeline = marker.get("timeline")

        if self.is_blank(timeline):
            return [self.violation(marker, "missingTimeline", name=name)]
        if not isinstance(timeline, dict):
            return [self.violation(marker, "invalidTimeline", name=name)]

        start = timeline.get("start")
        end = timeline.get("end")
        if self.is_blank(start) or self.is_blank(end):
            return [self.violation(marker, "invalidTimeline", name=name)]
        if not self._is_iso(start) or not self._is_iso(end):
            return [self.violation(marker, "invalidDateFormat", name=name)]

        start_date = self._to_date(str(start))
        end_date = self._to_date(str(end))
        # Well-formed but impossible dates (2024-13-45) compare as nothing.
        if start_date is None or end_date is None:
            return []
        if end_date < start_date:
            return [
                self.violation(
                    marker, "endBeforeStart", name=name, start=str(start), end=str(end)
                )
            ]
        return []

    @classmethod
    def _is_iso(cls, value: object) -> bool:
        return isinstance(value, str) and cls.ISO_DATE.fullmatch(value) is not None

    @staticmethod
    def _to_date(value: str) -> Optional[date]:
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
