"""CLI entry points for aabha-lint - Thin Controller using Typer."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from aabha_linter.domain.config import ConfigurationLoader
from aabha_linter.domain.diagnostics import DiagnosticReporter
from aabha_linter.domain.protocols import (
    GuidanceServiceProtocol,
    LinterAdapterProtocol,
    MarkerExtractorProtocol,
)
from aabha_linter.domain.rule_msgs import RuleMsgBuilder
from aabha_linter.domain.rules import MarkerRule
from aabha_linter.interface.reporters import AuditReporter
from aabha_linter.use_cases.check_audit import CheckAuditUseCase
from aabha_linter.use_cases.inspect_markers import InspectMarkersUseCase

# B008: avoid function call in default; use module-level singletons for Typer params
_PATH_ARGUMENT = typer.Argument(None, help="Path to audit (default: src/ if present, else .)")
_DISABLE_OPTION = typer.Option(
    None, "--disable", "-d", help="Rule id to skip (repeatable), on top of [tool.aabha-lint].disable")
_FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Python model file to inspect")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    lint_adapter: LinterAdapterProtocol
    reporter: AuditReporter
    astroid_gateway: MarkerExtractorProtocol
    guidance_service: GuidanceServiceProtocol
    diagnostic_reporter: DiagnosticReporter
    rules: list[MarkerRule]


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        """Warnings by default; debug output with --verbose."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="aabha-lint",
            help="Consistency checks for Aabha business models.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            """Consistency checks for Aabha business models."""
            CLIAppFactory.configure_logging(verbose)

        @app.command()
        def check(
            path: Optional[Path] = _PATH_ARGUMENT,
            disable: Optional[list[str]] = _DISABLE_OPTION,
        ) -> None:
            """Run pylint with only the Aabha checkers enabled. Exits 1 on findings."""
            target_path = CLIAppFactory.resolve_target_path(path)
            known = {rule.rule_id for rule in deps.rules}
            unknown = sorted(set(disable or []) - known)
            if unknown:
                typer.secho(f"Unknown rule id(s): {', '.join(unknown)}", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=2)

            use_case = CheckAuditUseCase(
                lint_adapter=deps.lint_adapter,
                config_loader=deps.config_loader,
            )
            audit_result = use_case.execute(target_path, disabled_rules=list(disable or []))
            deps.reporter.report_audit(audit_result)
            if audit_result.is_error():
                raise typer.Exit(code=2)
            if audit_result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def rules() -> None:
            """List every registered rule with its type, messages and enable state."""
            registry = deps.guidance_service.get_registry()
            for rule in deps.rules:
                enabled = deps.config_loader.is_rule_enabled(rule.rule_id)
                state = "enabled" if enabled else "disabled"
                typer.secho(
                    f"{rule.rule_id} [{rule.rule_type}] ({state})",
                    fg=typer.colors.GREEN if enabled else typer.colors.YELLOW,
                    bold=True,
                )
                typer.echo(f"  {rule.description}")
                msgs = RuleMsgBuilder.build_msgs_for_rule(registry, rule.rule_id)
                if not msgs:
                    typer.echo("  (no messages)")
                for code, (_template, symbol, _desc) in sorted(msgs.items()):
                    typer.echo(f"  {code} {symbol}")

        @app.command()
        def markers(file: Path = _FILE_ARGUMENT) -> None:
            """Print the markers read from FILE and the diagnostics they produce, as JSON."""
            use_case = InspectMarkersUseCase(
                extractor=deps.astroid_gateway,
                rules=deps.rules,
                diagnostic_reporter=deps.diagnostic_reporter,
            )
            declarations = use_case.execute(str(file))
            if declarations is None:
                typer.secho(f"Could not parse {file}", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=2)
            typer.echo(json.dumps(declarations, indent=2))

        return app
