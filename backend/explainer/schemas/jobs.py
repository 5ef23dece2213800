"""Generation job schemas."""

from typing import Literal

from pydantic import ConfigDict, JsonValue

from explainer.schemas.base import BaseSchema, CreatedAtMixin, IDMixin, PartialUpdateSchema

JobTypeType = Literal["explain_like_5", "step_breakdown", "analogy", "summary", "other"]
JobStatusType = Literal["pending", "completed", "failed"]


class JobBase(BaseSchema):
    """Base job schema. input/output are opaque payloads."""

    model_config = ConfigDict(str_strip_whitespace=False)

    job_type: JobTypeType = "step_breakdown"
    input: JsonValue = None
    output: JsonValue = None
    status: JobStatusType = "pending"


class JobCreate(JobBase):
    """Schema for creating a job. A job may or may not be tied to a concept."""

    concept_id: int | None = None


class JobRead(IDMixin, CreatedAtMixin, JobBase):
    """Schema for reading job data."""

    concept_id: int | None
    owner_id: str


class JobUpdate(PartialUpdateSchema):
    """Only output and status can change once a job exists."""

    model_config = ConfigDict(str_strip_whitespace=False)
    non_nullable = ("status",)

    output: JsonValue = None
    status: JobStatusType | None = None
