from typing import TYPE_CHECKING, Any, Optional, cast

from aabha_linter.domain.config import ConfigurationLoader
from aabha_linter.domain.diagnostics import DiagnosticReporter
from aabha_linter.domain.rules.catalog import RuleCatalog
from aabha_linter.infrastructure.adapters.pylint_adapter import AabhaLintAdapter
from aabha_linter.infrastructure.config_file_loader import ConfigFileLoader
from aabha_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from aabha_linter.infrastructure.reporters import TerminalAuditReporter
from aabha_linter.infrastructure.services.guidance_service import GuidanceService
from aabha_linter.infrastructure.services.subprocess_logging import (
    SubprocessLoggingService,
)

if TYPE_CHECKING:
    from aabha_linter.domain.protocols import (
        LinterAdapterProtocol,
        MarkerExtractorProtocol,
        RawLogPort,
    )
    from aabha_linter.domain.rules import MarkerRule


class AabhaContainer:
    """Dependency Injection Container for the Aabha linter."""

    _instance: Optional["AabhaContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton("AstroidGateway", AstroidGateway())
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton(
            "DiagnosticReporter", DiagnosticReporter(guidance_service.get_registry())
        )

        # Raw subprocess logging (pylint stdout/stderr -> .aabha/logs/)
        raw_log_service = SubprocessLoggingService()
        self.register_singleton("SubprocessLoggingService", raw_log_service)
        self.register_singleton(
            "AabhaLintAdapter",
            AabhaLintAdapter(config_loader=config_loader, raw_log_port=raw_log_service),
        )
        self.register_singleton(
            "AuditReporter", TerminalAuditReporter(guidance_service=guidance_service)
        )

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> "MarkerExtractorProtocol":
        """Return the Astroid gateway."""
        return cast("MarkerExtractorProtocol", self.get("AstroidGateway"))

    def get_guidance_service(self) -> GuidanceService:
        """Return the guidance service (rule registry)."""
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_diagnostic_reporter(self) -> DiagnosticReporter:
        """Return the violation -> diagnostic normalizer."""
        return cast(DiagnosticReporter, self.get("DiagnosticReporter"))

    def get_raw_log_port(self) -> "RawLogPort":
        """Return the raw subprocess log sink."""
        return cast("RawLogPort", self.get("SubprocessLoggingService"))

    def get_lint_adapter(self) -> "LinterAdapterProtocol":
        """Return the pylint subprocess adapter."""
        return cast("LinterAdapterProtocol", self.get("AabhaLintAdapter"))

    def get_reporter(self) -> TerminalAuditReporter:
        """Return the audit reporter."""
        return cast(TerminalAuditReporter, self.get("AuditReporter"))

    def get_rules(self) -> list["MarkerRule"]:
        """Fresh rule instances bound to the Astroid gateway."""
        return RuleCatalog.create_all(self.get_astroid_gateway())

    @classmethod
    def get_instance(cls) -> "AabhaContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = AabhaContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
