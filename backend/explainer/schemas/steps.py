"""Step schemas."""

from typing import Literal

from pydantic import Field

from explainer.schemas.base import BaseSchema, CreatedAtMixin, IDMixin

StepTypeType = Literal["intro", "intuition", "definition", "example", "analogy", "summary", "other"]


class StepBase(BaseSchema):
    """Base step schema."""

    step_number: int = Field(1, ge=1)
    step_type: StepTypeType = "other"
    heading: str | None = Field(None, max_length=255)
    content: str = Field(..., min_length=1)
    example: str | None = None
    analogy: str | None = None


class StepSave(StepBase):
    """
    Schema for saving (upserting) a step.

    Without an id a new step is inserted. With an id the existing step is
    replaced wholesale: omitted optional fields fall back to their defaults
    rather than keeping the stored value.
    """

    id: int | None = None


class StepRead(IDMixin, CreatedAtMixin, StepBase):
    """Schema for reading step data."""

    concept_id: int
