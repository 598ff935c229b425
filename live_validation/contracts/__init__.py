"""Declarative building blocks a caller uses to describe validation."""

from .rule import Rule, RuleInput, TextProvider
from .rule_set import RuleSet

__all__ = [
    "Rule",
    "RuleInput",
    "RuleSet",
    "TextProvider",
]
