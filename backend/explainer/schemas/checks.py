"""Comprehension check schemas."""

from typing import Annotated, Literal

from pydantic import ConfigDict, JsonValue, StringConstraints

from explainer.schemas.base import BaseSchema, CreatedAtMixin, IDMixin

CheckTypeType = Literal["single_choice", "multiple_choice", "true_false", "short_text"]

# Opaque payloads sit on these models, so whitespace is only trimmed where declared
QuestionText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CheckBase(BaseSchema):
    """Base check schema.

    options and correct_answer are arbitrary JSON; their shape is not
    validated against type.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    question: QuestionText
    options: JsonValue = None
    correct_answer: JsonValue = None
    explanation: str | None = None
    type: CheckTypeType = "single_choice"


class CheckSave(CheckBase):
    """Schema for saving (upserting) a check. Same replace semantics as steps."""

    id: int | None = None


class CheckRead(IDMixin, CreatedAtMixin, CheckBase):
    """Schema for reading check data."""

    concept_id: int
