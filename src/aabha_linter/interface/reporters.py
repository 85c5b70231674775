"""Interface for audit reporting."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from aabha_linter.domain.entities import AuditResult


class AuditReporter(Protocol):
    """Protocol for reporting audit results."""

    def report_audit(self, audit_result: "AuditResult") -> None:
        """Report audit results to the user."""
        ...
