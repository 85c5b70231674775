"""Domain models for rules and violations."""

from dataclasses import dataclass, field

__all__ = [
    "Checkable",
    "MarkerRule",
    "Violation",
]

from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Protocol

import astroid

from aabha_linter.domain.constants import UNKNOWN_NAME

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker, MetadataValue
    from aabha_linter.domain.protocols import MarkerExtractorProtocol


@dataclass(frozen=True)
class Violation:
    """A rule finding: which rule, which message, where, and the template data."""

    rule_id: str
    message_id: str
    location: str
    node: astroid.nodes.NodeNG
    data: dict[str, str] = field(default_factory=dict)
    fix: Optional[Callable[..., object]] = None
    """Optional fix callback. No rule in this package supplies one."""

    @classmethod
    def from_marker(
        cls,
        *,
        rule_id: str,
        message_id: str,
        marker: "DeclarationMarker",
        data: dict[str, str] | None = None,
    ) -> "Violation":
        """Build a Violation anchored to the marker's decorator node."""
        return cls(
            rule_id=rule_id,
            message_id=message_id,
            location=marker.location,
            node=marker.node,
            data=dict(data or {}),
        )


class Checkable(Protocol):
    """One-and-done check: given a declaration node, return violations."""

    rule_id: str
    rule_type: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a declaration's markers for consistency breaches."""
        ...


class MarkerRule(Checkable):
    """
    Shared plumbing for rules keyed to one or more marker types.

    Subclasses set marker_names and implement check_marker. Unparseable markers
    are never handed to check_marker: they carry no evidence.
    """

    rule_id: str = ""
    rule_type: str = "problem"
    description: str = ""
    marker_names: ClassVar[tuple[str, ...]] = ()
    message_ids: ClassVar[tuple[str, ...]] = ()

    def __init__(self, extractor: "MarkerExtractorProtocol") -> None:
        self._extractor = extractor

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Run check_marker over every parseable marker this rule understands."""
        violations: list[Violation] = []
        for marker in self._extractor.get_markers(node):
            if marker.marker_name not in self.marker_names or not marker.parseable:
                continue
            violations.extend(self.check_marker(marker))
        return violations

    def check_marker(self, marker: "DeclarationMarker") -> list[Violation]:
        """Evaluate one marker. Default: no findings."""
        return []

    def violation(
        self, marker: "DeclarationMarker", message_id: str, **data: str
    ) -> Violation:
        """Build a Violation of this rule for the given marker."""
        return Violation.from_marker(
            rule_id=self.rule_id,
            message_id=message_id,
            marker=marker,
            data=data,
        )

    @staticmethod
    def display_name(value: "MetadataValue") -> str:
        """Marker `name` for messages; falsy or absent names read as Unknown."""
        if not value:
            return UNKNOWN_NAME
        return str(value)

    @staticmethod
    def is_blank(value: "MetadataValue") -> bool:
        """Absent, None, False, '' or numeric zero. Empty lists and mappings are not blank."""
        if value is None or value is False or value == "":
            return True
        return isinstance(value, (int, float)) and value == 0
