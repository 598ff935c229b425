from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResultEntry(BaseModel):
    """Feedback line produced by one rule that ran and had text for its outcome."""

    model_config = ConfigDict(frozen=True)

    key: str
    valid: bool
    text: str

    @property
    def status(self) -> Literal["valid", "invalid"]:
        return "valid" if self.valid else "invalid"


class Feedback(BaseModel):
    """Detail shown under a focused field: the summary text and the per-rule lines, in rule order."""

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    entries: tuple[ResultEntry, ...] = Field(default=())

    @property
    def invalid_entries(self) -> tuple[ResultEntry, ...]:
        return tuple(entry for entry in self.entries if not entry.valid)


class ValidationResult(BaseModel):
    """
    Outcome of one evaluation.

    `valid` is None while there is no verdict yet (empty value that is allowed to be
    empty). `feedback` is None whenever there is nothing to show.
    """

    model_config = ConfigDict(frozen=True)

    valid: Optional[bool] = None
    feedback: Optional[Feedback] = None

    @classmethod
    def neutral(cls) -> "ValidationResult":
        return cls(valid=None, feedback=None)

    @property
    def is_pending(self) -> bool:
        return self.valid is None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
