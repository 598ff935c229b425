from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from live_validation.contracts.rule import Rule, TextProvider


class RuleSet(BaseModel):
    """
    Immutable description of a validator: an optional summary text and ordered rules.

    Rules may be given as `Rule` instances or as mappings with the same fields.
    `rules=None` is the same as no rules.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    description: Optional[TextProvider] = Field(default=None, description="Summary of what a valid value looks like")
    rules: tuple[Rule, ...] = Field(default=(), description="Rules in evaluation and display order")

    @field_validator("rules", mode="before")
    @classmethod
    def _none_means_no_rules(cls, value: Any) -> Any:
        return () if value is None else value

    def render_description(self, context: Any) -> Optional[str]:
        if self.description is None:
            return None
        text = self.description(context)
        return None if text is None else str(text)
