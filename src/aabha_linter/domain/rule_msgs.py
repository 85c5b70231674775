"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from aabha_linter.domain.constants import AABHA_PREFIX, RULE_TYPE_CATEGORY
from aabha_linter.domain.registry_types import MessageRegistryEntry, RuleRegistryEntry


class RuleMsgBuilder:
    """
    Builds Pylint msgs dicts from a registry mapping.

    Registry keys are e.g. 'aabha.action-duration-realism'. Message codes are
    derived, never stored: category letter (from rule_type) + checker_id +
    message number, e.g. W5101.
    """

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by id (with or without the aabha. prefix)."""
        key = rule_id if rule_id.startswith(AABHA_PREFIX) else f"{AABHA_PREFIX}{rule_id}"
        entry = registry.get(key)
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        return None

    @staticmethod
    def category_for(entry: RuleRegistryEntry) -> str:
        """Pylint category letter for a rule: problem -> E, suggestion -> W."""
        return RULE_TYPE_CATEGORY.get(str(entry.get("rule_type", "problem")), "E")

    @staticmethod
    def message_code(entry: RuleRegistryEntry, message: MessageRegistryEntry) -> str:
        """Compose the pylint msgid for one message of a rule."""
        category = RuleMsgBuilder.category_for(entry)
        checker_id = str(entry.get("checker_id", "99")).zfill(2)
        number = str(message.get("number", "01")).zfill(2)
        return f"{category}{checker_id}{number}"

    @staticmethod
    def get_message(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str, message_id: str
    ) -> MessageRegistryEntry | None:
        """Return the registry entry for one messageId of a rule."""
        entry = RuleMsgBuilder.get_entry(registry, rule_id)
        if not entry:
            return None
        messages = entry.get("messages") or {}
        message = messages.get(message_id)
        return message if isinstance(message, dict) else None

    @staticmethod
    def build_msgs_for_rule(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict for one rule.

        Returns { code: (message_template, symbol, description) } for checker.msgs.
        Rules registered without messages yield an empty dict.
        """
        result: dict[str, tuple[str, str, str]] = {}
        entry = RuleMsgBuilder.get_entry(registry, rule_id)
        if not entry:
            return result
        desc = entry.get("short_description") or entry.get("display_name") or rule_id
        for message_id, message in (entry.get("messages") or {}).items():
            if not isinstance(message, dict) or not message.get("message_template"):
                continue
            code = RuleMsgBuilder.message_code(entry, message)
            symbol = message.get("symbol") or message_id
            result[code] = (str(message["message_template"]), str(symbol), str(desc))
        return result

    @staticmethod
    def symbols_for_rule(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str
    ) -> dict[str, str]:
        """Map each messageId of a rule to its pylint symbol."""
        entry = RuleMsgBuilder.get_entry(registry, rule_id)
        if not entry:
            return {}
        return {
            message_id: str(message.get("symbol") or message_id)
            for message_id, message in (entry.get("messages") or {}).items()
            if isinstance(message, dict)
        }
