from typing import Any, Callable, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Text providers receive the evaluation context and return the text to show
TextProvider = Callable[[Any], str]


class RuleInput(BaseModel):
    """What a rule's `test` receives besides the evaluation context."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    allow_empty: bool = True


class Rule(BaseModel):
    """
    One named check of a rule set.

    `test(context, RuleInput) -> bool` decides the rule's outcome. `valid_text` and
    `invalid_text` are optional; a rule without text for its outcome runs silently
    and only contributes to the overall verdict. `valid` / `invalid` are accepted as
    short names for the two text fields.

    A rule without `key` or `test` is malformed and is left out by `build_validator`.
    Non-string keys are stored as strings (`1` becomes `"1"`); falsy ones count as missing.
    A text provider returning None leaves the rule silent for that outcome.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: Optional[str] = Field(default=None, description="Unique identifier of the rule within its rule set")
    test: Optional[Callable[[Any, RuleInput], bool]] = Field(default=None, description="Predicate deciding the rule's outcome")
    valid_text: Optional[TextProvider] = Field(
        default=None,
        validation_alias=AliasChoices("valid_text", "valid"),
        description="Text shown when the rule passes",
    )
    invalid_text: Optional[TextProvider] = Field(
        default=None,
        validation_alias=AliasChoices("invalid_text", "invalid"),
        description="Text shown when the rule fails",
    )

    @field_validator("key", mode="before")
    @classmethod
    def _key_as_string(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value) if value else None

    def is_well_formed(self) -> bool:
        return bool(self.key) and self.test is not None

    def check(self, context: Any, rule_input: RuleInput) -> bool:
        return bool(self.test(context, rule_input))

    def text_for(self, context: Any, valid: bool) -> Optional[str]:
        """Text for the given outcome, or None when the rule is silent for it."""
        provider = self.valid_text if valid else self.invalid_text
        if provider is None:
            return None
        text = provider(context)
        return None if text is None else str(text)
