import logging
import os
import re
import subprocess
import sys
from collections import defaultdict
from typing import TYPE_CHECKING, Optional

from aabha_linter.domain.constants import CHECKER_PREFIX
from aabha_linter.domain.entities import LinterResult
from aabha_linter.domain.protocols import LinterAdapterProtocol, RawLogPort
from aabha_linter.domain.rules.catalog import RuleCatalog

if TYPE_CHECKING:
    from aabha_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)

# pylint exit status bits for fatal (1) and usage (32) errors.
_PYLINT_FATAL_BITS = 1 | 32


class AabhaLintAdapter(LinterAdapterProtocol):
    """Runs pylint with only the Aabha checkers enabled and groups its output by message id."""

    MSG_TEMPLATE: str = "{path}:{line}:{column}: {msg_id}: {msg} ({symbol})"
    LINE_PATTERN: re.Pattern[str] = re.compile(
        r"^(?P<path>.*?):(?P<line>\d+):(?P<column>\d+): (?P<msg_id>[A-Z]\d{4}): "
        r"(?P<message>.*) \((?P<symbol>[\w-]+)\)$"
    )

    def __init__(
        self,
        config_loader: "ConfigurationLoader",
        raw_log_port: Optional[RawLogPort] = None,
    ) -> None:
        self._config_loader = config_loader
        self._raw_log_port = raw_log_port

    def enabled_checkers(self, disabled_rules: Optional[list[str]] = None) -> list[str]:
        """Checker names left on after CLI and configured disables."""
        disabled = set(disabled_rules or []) | set(self._config_loader.disabled_rules)
        return [
            f"{CHECKER_PREFIX}{rule_id}"
            for rule_id in RuleCatalog.rule_ids()
            if rule_id not in disabled
        ]

    def build_command(
        self, target_path: str, disabled_rules: Optional[list[str]] = None
    ) -> list[str]:
        """Build the pylint command line for a target path."""
        enabled = self.enabled_checkers(disabled_rules)
        cmd = [
            sys.executable,
            "-m",
            "pylint",
            target_path,
            "--load-plugins=aabha_linter",
            "--disable=all",
            f"--enable={','.join(enabled)}",
            f"--msg-template={self.MSG_TEMPLATE}",
            "--reports=n",
            "--score=n",
        ]
        # Exclude deliberately invalid fixtures from the audit
        exclude = self._config_loader.exclude_paths
        if exclude:
            regex = ",".join([rf".*{re.escape(p)}.*" for p in exclude])
            cmd.append(f"--ignore-paths={regex}")
        return cmd

    def gather_results(
        self, target_path: str, disabled_rules: Optional[list[str]] = None
    ) -> list[LinterResult]:
        """Run pylint with the Aabha plugin and gather results."""
        if not self.enabled_checkers(disabled_rules):
            logger.warning("Every Aabha rule is disabled; nothing to check.")
            return []
        cmd = self.build_command(target_path, disabled_rules)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                env=os.environ.copy(),
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            return [LinterResult("AABHA_ERROR", str(e), [])]

        if self._raw_log_port is not None:
            self._raw_log_port.log_raw("pylint", result.stdout, result.stderr)

        results = self.parse_output(result.stdout)
        if not results and result.returncode & _PYLINT_FATAL_BITS:
            detail = (result.stderr or result.stdout).strip().splitlines()
            return [LinterResult("AABHA_ERROR", detail[-1] if detail else "pylint failed", [])]
        return results

    def parse_output(self, output: str) -> list[LinterResult]:
        """Group `path:line:col: msgid: message (symbol)` lines by message id."""
        # Structure: {msg_id: {"message": str, "symbol": str, "locations": set}}
        collected: dict[str, dict[str, object]] = defaultdict(
            lambda: {"message": "", "symbol": "", "locations": set()})

        for line in output.splitlines():
            match = self.LINE_PATTERN.match(line)
            if not match:
                continue
            entry = collected[match["msg_id"]]
            entry["message"] = match["message"]
            entry["symbol"] = match["symbol"]
            locations_set = entry["locations"]
            if isinstance(locations_set, set):
                locations_set.add(f"{match['path']}:{match['line']}:{match['column']}")

        results = []
        for msg_id, data in sorted(collected.items()):
            locations_set = data["locations"]
            sorted_locations = sorted(locations_set) if isinstance(locations_set, set) else []
            results.append(
                LinterResult(
                    msg_id, str(data["message"]), sorted_locations, symbol=str(data["symbol"])
                )
            )
        return results
