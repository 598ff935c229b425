"""Evaluation engine, result model and localized text providers."""

from .localization import *  # noqa: F401,F403
from .results import Feedback, ResultEntry, ValidationResult
from .validator import EvaluationInput, Validator, build_validator, with_validation

__all__ = [
    "EvaluationInput",
    "Feedback",
    "ResultEntry",
    "ValidationResult",
    "Validator",
    "build_validator",
    "with_validation",
]
