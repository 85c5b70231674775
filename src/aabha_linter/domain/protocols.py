from typing import TYPE_CHECKING, Optional, Protocol

import astroid

from aabha_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from aabha_linter.domain.entities import DeclarationMarker, LinterResult


class MarkerExtractorProtocol(Protocol):
    """Reads Aabha markers off a declaration node. Purely syntactic."""

    def get_markers(self, node: astroid.nodes.NodeNG) -> list["DeclarationMarker"]:
        ...

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        ...

    def iter_declarations(self, module: astroid.nodes.Module) -> list[astroid.nodes.ClassDef]:
        ...


class GuidanceServiceProtocol(Protocol):
    """Access to the packaged rule registry."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_rule_entry(self, rule_id: str) -> Optional[RuleRegistryEntry]:
        ...

    def get_manual_instructions(self, rule_id: str) -> str:
        ...


class LinterAdapterProtocol(Protocol):
    """Runs a linter over a path and returns normalized results."""

    def gather_results(
        self, target_path: str, disabled_rules: Optional[list[str]] = None
    ) -> list["LinterResult"]:
        ...


class RawLogPort(Protocol):
    """Sink for raw subprocess output."""

    def log_raw(self, tool: str, stdout: str, stderr: str) -> None:
        ...
