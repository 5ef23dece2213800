"""Concept schemas."""

from typing import Literal

from pydantic import Field

from explainer.schemas.base import BaseSchema, IDMixin, PartialUpdateSchema, TimestampMixin
from explainer.schemas.checks import CheckRead
from explainer.schemas.steps import StepRead

# Type aliases for enums (used as literals for API validation)
DifficultyType = Literal["beginner", "intermediate", "advanced"]
ConceptStatusType = Literal["draft", "published", "archived"]


class ConceptBase(BaseSchema):
    """Base concept schema."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    subject: str | None = Field(None, max_length=255)
    topic: str | None = Field(None, max_length=255)
    tags: str | None = None  # free-form, e.g. "algorithms, complexity"
    difficulty: DifficultyType = "beginner"
    status: ConceptStatusType = "draft"


class ConceptCreate(ConceptBase):
    """Schema for creating a concept. Owner comes from auth, never the body."""

    pass


class ConceptRead(IDMixin, TimestampMixin, ConceptBase):
    """Schema for reading concept data."""

    owner_id: str


class ConceptUpdate(PartialUpdateSchema):
    """Schema for updating a concept. All fields optional; absent fields are kept."""

    non_nullable = ("title", "difficulty", "status")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    subject: str | None = Field(None, max_length=255)
    topic: str | None = Field(None, max_length=255)
    tags: str | None = None
    difficulty: DifficultyType | None = None
    status: ConceptStatusType | None = None


class ConceptDetail(BaseSchema):
    """A concept together with all of its steps and checks."""

    concept: ConceptRead
    steps: list[StepRead]
    checks: list[CheckRead]
