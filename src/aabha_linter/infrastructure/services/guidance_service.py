"""GuidanceService: loads the rule registry and provides rule metadata and manual instructions."""

from pathlib import Path
from typing import cast

import yaml

from aabha_linter.domain.constants import AABHA_PREFIX
from aabha_linter.domain.protocols import GuidanceServiceProtocol
from aabha_linter.domain.registry_types import RuleRegistryEntry
from aabha_linter.domain.rule_msgs import RuleMsgBuilder


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and answers registry lookups by rule id."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_rule_entry(self, rule_id: str) -> RuleRegistryEntry | None:
        """Return the full registry entry for a rule id (with or without the aabha. prefix)."""
        return RuleMsgBuilder.get_entry(self._registry, rule_id)

    def get_display_name(self, rule_id: str) -> str:
        """Return display name for a rule."""
        entry = self.get_rule_entry(rule_id)
        if not entry:
            return rule_id.replace("-", " ").title()
        return str(
            entry.get("display_name")
            or entry.get("short_description")
            or rule_id.replace("-", " ").title()
        )

    def get_manual_instructions(self, rule_id: str) -> str:
        """Return manual fix instructions for a rule id, message symbol or message code."""
        entry = self.get_rule_entry(rule_id) or self.find_entry_for_message(rule_id)
        if entry and entry.get("manual_instructions"):
            return str(entry["manual_instructions"])
        default_entry = self._registry.get(f"{AABHA_PREFIX}_default")
        if default_entry and default_entry.get("manual_instructions"):
            return str(default_entry["manual_instructions"])
        return "Correct the marker metadata at the reported location."

    def find_entry_for_message(self, code_or_symbol: str) -> RuleRegistryEntry | None:
        """Return the rule entry owning a message code (E5201) or symbol."""
        for rule_id, entry in self._registry.items():
            if not rule_id.startswith(AABHA_PREFIX) or rule_id.endswith("._default"):
                continue
            for message in (entry.get("messages") or {}).values():
                if not isinstance(message, dict):
                    continue
                if message.get("symbol") == code_or_symbol:
                    return cast(RuleRegistryEntry, dict(entry))
                if RuleMsgBuilder.message_code(entry, message) == code_or_symbol:
                    return cast(RuleRegistryEntry, dict(entry))
        return None
