"""Subprocess raw output logging - capture pylint stdout/stderr to .aabha/logs."""

import os
from datetime import datetime, timezone

from aabha_linter.domain.protocols import RawLogPort


class SubprocessLoggingService(RawLogPort):
    """Store raw stdout/stderr of a linter subprocess into .aabha/logs/raw_[tool].log."""

    def __init__(self, log_dir: str = ".aabha/logs") -> None:
        self._log_dir = log_dir

    def log_raw(self, tool: str, stdout: str, stderr: str) -> None:
        """Append raw tool output to raw_{tool}.log with a run header."""
        os.makedirs(self._log_dir, exist_ok=True)
        log_path = os.path.join(self._log_dir, f"raw_{tool}.log")
        now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"\n{'='*60}\n[{now}] {tool.upper()} raw output\n{'='*60}\n")
            for label, text in (("stdout", stdout), ("stderr", stderr)):
                if not text:
                    continue
                f.write(f"--- {label} ---\n")
                f.write(text if text.endswith("\n") else f"{text}\n")
