"""Use Case: Check Audit - run pylint with the Aabha checkers and return audit results."""

import logging
from typing import TYPE_CHECKING, Optional

from aabha_linter.domain.entities import AuditResult
from aabha_linter.domain.protocols import LinterAdapterProtocol

if TYPE_CHECKING:
    from aabha_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class CheckAuditUseCase:
    """Orchestrate one pylint run over a target path."""

    def __init__(
        self,
        lint_adapter: LinterAdapterProtocol,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.lint_adapter = lint_adapter
        self.config_loader = config_loader

    def execute(self, target_path: str, disabled_rules: Optional[list[str]] = None) -> AuditResult:
        """
        Run the audit.

        Args:
            target_path: Path to audit
            disabled_rules: Rule ids to skip on top of [tool.aabha-lint].disable

        Returns:
            AuditResult with one LinterResult per reported message id.
        """
        disabled = sorted(set(disabled_rules or []) | set(self.config_loader.disabled_rules))
        logger.info("Auditing %s (disabled: %s)", target_path, ", ".join(disabled) or "none")
        results = self.lint_adapter.gather_results(target_path, disabled_rules=disabled)
        return AuditResult(results=results, target_path=target_path)
