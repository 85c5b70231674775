"""Terminal reporter implementation for `aabha-lint check`."""

from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from aabha_linter.domain.entities import AuditResult, LinterResult
    from aabha_linter.domain.protocols import GuidanceServiceProtocol


class TerminalAuditReporter:
    """Prints audit results grouped by message id, with the rule's fix guidance."""

    def __init__(self, guidance_service: "GuidanceServiceProtocol") -> None:
        self._guidance = guidance_service

    def report_audit(self, audit_result: "AuditResult") -> None:
        """Print one block per message id; a summary line at the end."""
        if audit_result.is_error():
            for result in audit_result.results:
                typer.secho(f"Audit failed: {result.message}", fg=typer.colors.RED, err=True)
            return

        if not audit_result.has_violations():
            typer.secho(
                f"No Aabha model inconsistencies in {audit_result.target_path}.",
                fg=typer.colors.GREEN,
                bold=True,
            )
            return

        total = 0
        for result in sorted(audit_result.results, key=lambda r: (-len(r.locations), r.code)):
            total += len(result.locations)
            self._report_result(result)

        typer.secho(
            f"{total} Aabha model inconsistencies across {len(audit_result.results)} message ids.",
            fg=typer.colors.RED,
            bold=True,
        )

    def _report_result(self, result: "LinterResult") -> None:
        header = f"{result.code} ({result.symbol})" if result.symbol else result.code
        typer.secho(f"\n{header} x{len(result.locations)}", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  {result.message}")
        for location in result.locations:
            typer.secho(f"    {location}", fg=typer.colors.CYAN)
        instructions = self._guidance.get_manual_instructions(result.symbol or result.code)
        typer.secho(f"  Fix: {instructions}", fg=typer.colors.YELLOW)
