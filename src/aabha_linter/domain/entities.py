from dataclasses import dataclass, field
from typing import Optional, Union

import astroid

MetadataValue = Union[
    str,
    int,
    float,
    bool,
    None,
    list["MetadataValue"],
    dict[str, "MetadataValue"],
]


@dataclass(frozen=True)
class DeclarationMarker:
    """
    One recognized Aabha marker applied to a declaration.

    `node` is the decorator expression; diagnostics anchor there. When the
    marker argument could not be read as a literal, `parseable` is False and
    `metadata` is always empty.
    """

    marker_name: str
    node: astroid.nodes.NodeNG
    location: str
    metadata: dict[str, MetadataValue] = field(default_factory=dict)
    parseable: bool = True

    def get(self, field_name: str, default: MetadataValue = None) -> MetadataValue:
        """Return a top-level metadata field, or default when absent."""
        return self.metadata.get(field_name, default)

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-ready dictionary (node replaced by its location)."""
        return {
            "marker": self.marker_name,
            "location": self.location,
            "parseable": self.parseable,
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class Diagnostic:
    """A rule violation normalized to the host's message shape."""

    rule_id: str
    msgid: str
    symbol: str
    severity: str
    message: str
    line: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    fix: Optional[object] = None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporters."""
        return {
            "rule_id": self.rule_id,
            "msgid": self.msgid,
            "symbol": self.symbol,
            "severity": self.severity,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
        }


@dataclass(frozen=True)
class LinterResult:
    """Standardized linter result parsed from pylint output."""
    code: str
    message: str
    locations: list[str] = field(default_factory=list)
    symbol: str = ""

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert to dictionary for reporter."""
        return {
            "code": self.code,
            "symbol": self.symbol,
            "message": self.message,
            "location": ", ".join(self.locations) if self.locations else "N/A",
            "locations": self.locations,
        }


@dataclass(frozen=True)
class AuditResult:
    """Results of one `aabha-lint check` run."""
    results: list[LinterResult] = field(default_factory=list)
    target_path: str = "."

    def has_violations(self) -> bool:
        """True when any result was reported."""
        return bool(self.results)

    def is_error(self) -> bool:
        """True when the run itself failed rather than reporting violations."""
        return any(r.code == "AABHA_ERROR" for r in self.results)
