from typing import TypedDict


class MessageRegistryEntry(TypedDict, total=False):
    number: str
    symbol: str
    message_template: str


class RuleRegistryEntry(TypedDict, total=False):
    rule_id: str
    display_name: str
    short_description: str
    rule_type: str
    checker_id: str
    markers: list[str]
    messages: dict[str, MessageRegistryEntry]
    manual_instructions: str
    references: list[str]
