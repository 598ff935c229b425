"""Custom exceptions for live-validation."""

from .common_exceptions import (
    RuleDefinitionException,
    EnvInvalidException,
)


__all__ = [
    "RuleDefinitionException",
    "EnvInvalidException",
]
