"""Pylint plugin that checks Aabha business-model markers for logical consistency."""

from aabha_linter.infrastructure.checker import register

__all__ = ["register"]
__version__ = "0.1.0"
