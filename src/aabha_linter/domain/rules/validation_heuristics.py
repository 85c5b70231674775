"""Lexical precondition/validation contradiction heuristic.

Deliberately narrow: it over-fires when unrelated text shares a leading word
and misses contradictions phrased differently. Callers depend on exactly this
behavior.
"""

import re
from typing import ClassVar


class PreconditionHeuristic:
    """Normalizes condition text and decides whether a validation rule contradicts it."""

    PRECONDITION_PREFIX: ClassVar[re.Pattern[str]] = re.compile(
        r"^(user|payment|order|item|inventory|email)\s+(is|must|should|has)",
        re.IGNORECASE,
    )
    # "is" is intentionally absent for validation rules.
    RULE_PREFIX: ClassVar[re.Pattern[str]] = re.compile(
        r"^(user|payment|order|item|inventory|email)\s+(must|should|has)",
        re.IGNORECASE,
    )
    WHITESPACE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    @classmethod
    def precondition_key(cls, precondition: str) -> str:
        """Lower/trim, reduce '<subject> <modal>' to '<subject>', collapse whitespace."""
        lowered = precondition.lower().strip()
        stripped = cls.PRECONDITION_PREFIX.sub(r"\1", lowered, count=1)
        return cls.WHITESPACE.sub(" ", stripped)

    @classmethod
    def rule_key(cls, normalized_rule: str) -> str:
        """Reduce an already lower-cased, trimmed validation rule to its key."""
        stripped = cls.RULE_PREFIX.sub(r"\1", normalized_rule, count=1)
        return cls.WHITESPACE.sub(" ", stripped)

    @classmethod
    def contradicts(cls, precondition: str, normalized_rule: str) -> bool:
        """True when the rule mentions 'not' and shares a leading token with the precondition."""
        precondition_key = cls.precondition_key(precondition)
        rule_key = cls.rule_key(normalized_rule)
        if "not" not in rule_key:
            return False
        return (
            precondition_key.split(" ")[0] in rule_key
            or rule_key.split(" ")[0] in precondition_key
        )
