"""Configuration loader for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from aabha_linter.domain.rules.catalog import RuleCatalog

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for aabha-lint settings.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    """

    KNOWN_KEYS: frozenset[str] = frozenset({"disable", "exclude_paths"})

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object],
    ) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        self._tool_section = tool_section
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys and rule ids. Never raises."""
        for key in config:
            if key not in self.KNOWN_KEYS:
                logger.warning("Configuration Warning: unknown [tool.aabha-lint] key '%s'.", key)

        raw = config.get("disable", [])
        if not isinstance(raw, list):
            logger.warning("Configuration Warning: 'disable' must be a list of rule ids.")
            return
        known = set(RuleCatalog.rule_ids())
        for rule_id in raw:
            if rule_id not in known:
                logger.warning("Configuration Warning: unknown rule id '%s' in 'disable'.", rule_id)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        """Return the full [tool] table the configuration came from."""
        return self._tool_section

    @property
    def disabled_rules(self) -> list[str]:
        """Rule ids to turn off; unknown ids are dropped."""
        raw = self._config.get("disable", [])
        if not isinstance(raw, list):
            return []
        known = set(RuleCatalog.rule_ids())
        return [str(x) for x in raw if isinstance(x, str) and x in known]

    @property
    def exclude_paths(self) -> list[str]:
        """
        Path fragments to exclude from `aabha-lint check`.

        Intended for deliberately invalid fixtures.
        """
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    def is_rule_enabled(self, rule_id: str) -> bool:
        """True unless the rule is listed in `disable`."""
        return rule_id not in self.disabled_rules
