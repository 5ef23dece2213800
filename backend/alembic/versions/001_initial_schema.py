"""Initial schema with all tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

This migration creates the complete concept explainer schema:
- Enums: concept_difficulty, concept_status, step_type, check_type, job_type, job_status
- Tables: concepts, concept_steps, concept_checks, concept_jobs
- Indexes: owner lookups, owner+status filters, concept foreign keys
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "concept_difficulty": ("beginner", "intermediate", "advanced"),
    "concept_status": ("draft", "published", "archived"),
    "step_type": ("intro", "intuition", "definition", "example", "analogy", "summary", "other"),
    "check_type": ("single_choice", "multiple_choice", "true_false", "short_text"),
    "job_type": ("explain_like_5", "step_breakdown", "analogy", "summary", "other"),
    "job_status": ("pending", "completed", "failed"),
}


def _enum(name: str) -> sa.Enum:
    return sa.Enum(*ENUMS[name], name=name)


def _json() -> sa.types.TypeEngine:
    return sa.JSON(none_as_null=True).with_variant(postgresql.JSONB(none_as_null=True), "postgresql")


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    # ==========================================================================
    # CONCEPTS TABLE
    # ==========================================================================
    op.create_table(
        "concepts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("topic", sa.String(255), nullable=True),
        sa.Column("tags", sa.Text(), nullable=True),
        sa.Column("difficulty", _enum("concept_difficulty"), nullable=False),
        sa.Column("status", _enum("concept_status"), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_concepts"),
    )
    op.create_index("ix_concepts_owner_id", "concepts", ["owner_id"])
    op.create_index("idx_concepts_owner_status", "concepts", ["owner_id", "status"])

    # ==========================================================================
    # CONCEPT_STEPS TABLE
    # ==========================================================================
    op.create_table(
        "concept_steps",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("concept_id", sa.Integer(), nullable=False),
        sa.Column("step_number", sa.Integer(), nullable=False),
        sa.Column("step_type", _enum("step_type"), nullable=False),
        sa.Column("heading", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("example", sa.Text(), nullable=True),
        sa.Column("analogy", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_concept_steps"),
        sa.ForeignKeyConstraint(
            ["concept_id"], ["concepts.id"],
            name="fk_concept_steps_concept_id_concepts",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_concept_steps_concept_id", "concept_steps", ["concept_id"])

    # ==========================================================================
    # CONCEPT_CHECKS TABLE
    # ==========================================================================
    op.create_table(
        "concept_checks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("concept_id", sa.Integer(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("options", _json(), nullable=True),
        sa.Column("correct_answer", _json(), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("type", _enum("check_type"), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_concept_checks"),
        sa.ForeignKeyConstraint(
            ["concept_id"], ["concepts.id"],
            name="fk_concept_checks_concept_id_concepts",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_concept_checks_concept_id", "concept_checks", ["concept_id"])

    # ==========================================================================
    # CONCEPT_JOBS TABLE
    # ==========================================================================
    op.create_table(
        "concept_jobs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("concept_id", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("job_type", _enum("job_type"), nullable=False),
        sa.Column("input", _json(), nullable=True),
        sa.Column("output", _json(), nullable=True),
        sa.Column("status", _enum("job_status"), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_concept_jobs"),
        sa.ForeignKeyConstraint(
            ["concept_id"], ["concepts.id"],
            name="fk_concept_jobs_concept_id_concepts",
            ondelete="SET NULL",
        ),
    )
    op.create_index("ix_concept_jobs_concept_id", "concept_jobs", ["concept_id"])
    op.create_index("ix_concept_jobs_owner_id", "concept_jobs", ["owner_id"])
    op.create_index("idx_concept_jobs_owner_status", "concept_jobs", ["owner_id", "status"])


def downgrade() -> None:
    op.drop_table("concept_jobs")
    op.drop_table("concept_checks")
    op.drop_table("concept_steps")
    op.drop_table("concepts")

    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for name in reversed(list(ENUMS)):
            postgresql.ENUM(name=name).drop(bind, checkfirst=True)
