"""
Turns a `RuleSet` into a reusable evaluation function for a live input field.

    validator = build_validator(
        description=lambda ctx: "Use at least 8 characters",
        rules=[
            Rule(
                key="length",
                test=lambda ctx, rule_input: len(rule_input.value) >= 8,
                valid=lambda ctx: "Long enough",
                invalid=lambda ctx: "Too short",
            ),
        ],
    )

    result = validator(field_state, "abc", focused=True, allow_empty=False)
    result.valid                       # False
    result.feedback.entries[0].text    # "Too short"

The validator keeps no state between calls. Callers that re-run it on every
keystroke are responsible for any debouncing.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from live_validation import config
from live_validation.contracts.rule import Rule, RuleInput, TextProvider
from live_validation.contracts.rule_set import RuleSet
from live_validation.core.results import Feedback, ResultEntry, ValidationResult
from live_validation.decorators.deprecated_decorator import deprecated
from live_validation.exceptions import RuleDefinitionException
from live_validation.utils.value_utils import is_empty

logger = logging.getLogger(__name__)


class EvaluationInput(BaseModel):
    """Snapshot of the field being validated. `allowEmpty` is accepted for `allow_empty`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    focused: bool = False
    allow_empty: bool = Field(default=True, validation_alias=AliasChoices("allow_empty", "allowEmpty"))


class Validator:
    """
    Evaluation function bound to one `RuleSet`.

    Call it as `validator(context, value, focused=..., allow_empty=...)`. The
    context is handed to every rule test, text provider and the description.
    """

    def __init__(self, rule_set: RuleSet, *, strict: Optional[bool] = None):
        self.rule_set = rule_set
        self.strict = config.strict_rules() if strict is None else strict
        self._rules = _usable_rules(rule_set.rules, strict=self.strict)

        logger.debug(
            f"[VALIDATION] Built validator with {len(self._rules)} rule(s)"
            f" ({len(rule_set.rules) - len(self._rules)} skipped)"
        )

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules that take part in evaluation, in declaration order."""
        return self._rules

    def __call__(self, context: Any, value: Any = None, *, focused: bool = False,
                 allow_empty: bool = True) -> ValidationResult:
        return self.evaluate(context, EvaluationInput(value=value, focused=focused, allow_empty=allow_empty))

    def evaluate(self, context: Any,
                 evaluation_input: Union[EvaluationInput, Mapping[str, Any]]) -> ValidationResult:
        if not isinstance(evaluation_input, EvaluationInput):
            evaluation_input = EvaluationInput.model_validate(evaluation_input)

        value = evaluation_input.value
        allow_empty = evaluation_input.allow_empty

        if allow_empty and is_empty(value):
            return ValidationResult.neutral()

        rule_input = RuleInput(value=value, allow_empty=allow_empty)
        valid = True
        entries: list[ResultEntry] = []

        for rule in self._rules:
            rule_valid = rule.check(context, rule_input)
            valid = valid and rule_valid

            text = rule.text_for(context, rule_valid)
            if text is not None:
                entries.append(ResultEntry(key=rule.key, valid=rule_valid, text=text))

        if config.log_evaluations():
            failed = [entry.key for entry in entries if not entry.valid]
            logger.debug(f"[VALIDATION] valid={valid} focused={evaluation_input.focused} failed={failed}")

        # Detail is only shown while the field is focused
        if not evaluation_input.focused:
            return ValidationResult(valid=valid, feedback=None)

        description = self.rule_set.render_description(context)
        if description is None and not entries:
            return ValidationResult(valid=valid, feedback=None)

        return ValidationResult(
            valid=valid,
            feedback=Feedback(description=description, entries=tuple(entries)),
        )


def _usable_rules(rules: Sequence[Rule], *, strict: bool) -> tuple[Rule, ...]:
    usable: list[Rule] = []
    seen_keys: set[str] = set()

    for index, rule in enumerate(rules):
        if not rule.is_well_formed():
            missing = "key" if not rule.key else "test"
            message = f"Rule at position {index} has no `{missing}`"
            if strict:
                raise RuleDefinitionException(message, index=index, key=rule.key)
            logger.warning(f"[VALIDATION] {message}; skipping it")
            continue

        if rule.key in seen_keys:
            message = f"Rule key `{rule.key}` at position {index} is already used"
            if strict:
                raise RuleDefinitionException(message, index=index, key=rule.key)
            logger.warning(f"[VALIDATION] {message}; feedback entries will share the key")

        seen_keys.add(rule.key)
        usable.append(rule)

    return tuple(usable)


def build_validator(
    rule_set: Union[RuleSet, Mapping[str, Any], None] = None,
    *,
    description: Optional[TextProvider] = None,
    rules: Optional[Sequence[Union[Rule, Mapping[str, Any]]]] = None,
    strict: Optional[bool] = None,
) -> Validator:
    """
    Create a validator from a rule set.

    Args:
        rule_set: A `RuleSet` or a mapping with `description` and `rules`. When omitted,
            the rule set is assembled from the `description` and `rules` keywords.
        strict: Raise `RuleDefinitionException` for rules missing `key`/`test` or reusing
            a key. Defaults to the `VALIDATION_STRICT_RULES` environment setting; when
            off, such rules are logged (and malformed ones skipped).

    Returns:
        Validator: callable as `validator(context, value, focused=..., allow_empty=...)`.
    """
    if rule_set is None:
        rule_set = RuleSet(description=description, rules=rules)
    elif not isinstance(rule_set, RuleSet):
        rule_set = RuleSet.model_validate(rule_set)

    return Validator(rule_set, strict=strict)


@deprecated("Use build_validator instead.")
def with_validation(rule_set: Union[RuleSet, Mapping[str, Any], None] = None, **kwargs) -> Validator:
    return build_validator(rule_set, **kwargs)


__all__ = [
    "EvaluationInput",
    "Validator",
    "build_validator",
    "with_validation",
]
