"""
SQLAlchemy 2.0 Models for the concept explainer.

Uses modern declarative syntax with Mapped[] type annotations.
Concepts are owned by an identity (owner_id is the token subject); steps and
checks inherit ownership from their concept and never store it themselves.
"""

from datetime import datetime, timezone
from enum import Enum as PyEnum
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from explainer.db.base import Base


# =============================================================================
# ENUMS
# =============================================================================


class Difficulty(str, PyEnum):
    """How hard a concept is to pick up."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ConceptStatus(str, PyEnum):
    """UI status of a concept. Archived is a soft delete."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class StepType(str, PyEnum):
    """Label for an explanation step."""

    INTRO = "intro"
    INTUITION = "intuition"
    DEFINITION = "definition"
    EXAMPLE = "example"
    ANALOGY = "analogy"
    SUMMARY = "summary"
    OTHER = "other"


class CheckType(str, PyEnum):
    """Kind of comprehension question."""

    SINGLE_CHOICE = "single_choice"
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_TEXT = "short_text"


class JobType(str, PyEnum):
    """What a generation job produces."""

    EXPLAIN_LIKE_5 = "explain_like_5"
    STEP_BREAKDOWN = "step_breakdown"
    ANALOGY = "analogy"
    SUMMARY = "summary"
    OTHER = "other"


class JobStatus(str, PyEnum):
    """Lifecycle state of a generation job."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


def enum_column(enum_cls: type[PyEnum], name: str) -> Enum:
    """String-valued enum type; native on PostgreSQL, VARCHAR elsewhere."""
    return Enum(*[member.value for member in enum_cls], name=name)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Opaque JSON payloads. Absent values are stored as SQL NULL, not JSON 'null'.
OpaqueJSON = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")


# =============================================================================
# MODELS
# =============================================================================


class Concept(Base):
    """
    A concept the user wants to explain or understand.

    Example: "Big-O Notation", "Photosynthesis", "Pointers in C".
    """

    __tablename__ = "concepts"
    __table_args__ = (
        Index("idx_concepts_owner_status", "owner_id", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)  # e.g. "Computer Science"
    topic: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)  # e.g. "Algorithms"
    tags: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    difficulty: Mapped[str] = mapped_column(
        enum_column(Difficulty, "concept_difficulty"),
        nullable=False,
        default=Difficulty.BEGINNER.value,
    )
    status: Mapped[str] = mapped_column(
        enum_column(ConceptStatus, "concept_status"),
        nullable=False,
        default=ConceptStatus.DRAFT.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    steps: Mapped[list["ConceptStep"]] = relationship(
        "ConceptStep", back_populates="concept", passive_deletes=True
    )
    checks: Mapped[list["ConceptCheck"]] = relationship(
        "ConceptCheck", back_populates="concept", passive_deletes=True
    )
    jobs: Mapped[list["ConceptJob"]] = relationship(
        "ConceptJob", back_populates="concept", passive_deletes=True
    )


class ConceptStep(Base):
    """
    One unit of step-by-step explanation.

    step_number orders steps in the UI but is not unique within a concept.
    """

    __tablename__ = "concept_steps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    concept_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("concepts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    step_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    step_type: Mapped[str] = mapped_column(
        enum_column(StepType, "step_type"),
        nullable=False,
        default=StepType.OTHER.value,
    )
    heading: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    example: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    analogy: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    concept: Mapped["Concept"] = relationship("Concept", back_populates="steps")


class ConceptCheck(Base):
    """Quick "did you understand?" question attached to a concept."""

    __tablename__ = "concept_checks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    concept_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("concepts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[Optional[Any]] = mapped_column(OpaqueJSON, nullable=True)  # MCQ choices
    correct_answer: Mapped[Optional[Any]] = mapped_column(OpaqueJSON, nullable=True)  # string or list
    explanation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(
        enum_column(CheckType, "check_type"),
        nullable=False,
        default=CheckType.SINGLE_CHOICE.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    concept: Mapped["Concept"] = relationship("Concept", back_populates="checks")


class ConceptJob(Base):
    """
    Bookkeeping for an AI generation request (explanation, analogy, ...).

    input/output are whatever was sent to and received from the model.
    """

    __tablename__ = "concept_jobs"
    __table_args__ = (
        Index("idx_concept_jobs_owner_status", "owner_id", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    concept_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("concepts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_type: Mapped[str] = mapped_column(
        enum_column(JobType, "job_type"),
        nullable=False,
        default=JobType.STEP_BREAKDOWN.value,
    )
    input: Mapped[Optional[Any]] = mapped_column(OpaqueJSON, nullable=True)
    output: Mapped[Optional[Any]] = mapped_column(OpaqueJSON, nullable=True)
    status: Mapped[str] = mapped_column(
        enum_column(JobStatus, "job_status"),
        nullable=False,
        default=JobStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    concept: Mapped[Optional["Concept"]] = relationship("Concept", back_populates="jobs")
