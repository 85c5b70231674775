"""
Aabha marker vocabulary and rule constants.
"""

AABHA_PREFIX: str = "aabha."
CHECKER_PREFIX: str = "aabha-"

# Decorator names recognized as Aabha markers. Anything else is ignored.
MARKER_NAMES: frozenset[str] = frozenset(
    {
        "Action",
        "Attribute",
        "Behavior",
        "BusinessInitiative",
        "Collaboration",
        "Context",
        "Expectation",
        "Interaction",
        "Journey",
        "Metric",
        "Milestone",
        "Persona",
        "Stakeholder",
        "Step",
        "Strategy",
        "Test",
        "Witness",
    }
)

# Rule type -> pylint message category letter.
RULE_TYPE_CATEGORY: dict[str, str] = {
    "problem": "E",
    "suggestion": "W",
}

CATEGORY_SEVERITY: dict[str, str] = {
    "E": "error",
    "W": "warning",
}

# Substituted for each embedded expression of an f-string marker value.
EXPRESSION_PLACEHOLDER: str = "${...}"

UNKNOWN_NAME: str = "Unknown"

# estimatedDuration ranks: instant < 1s, quick < 1min, short 1-5min,
# medium 5-30min, long > 30min.
DURATION_RANKING: dict[str, int] = {
    "instant": 1,
    "quick": 2,
    "short": 3,
    "medium": 4,
    "long": 5,
}
