"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from aabha_linter.infrastructure.di.container import AabhaContainer
from aabha_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = AabhaContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        lint_adapter=container.get_lint_adapter(),
        reporter=container.get_reporter(),
        astroid_gateway=container.get_astroid_gateway(),
        guidance_service=container.get_guidance_service(),
        diagnostic_reporter=container.get_diagnostic_reporter(),
        rules=container.get_rules(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
