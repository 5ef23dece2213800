"""Concept CRUD routes.

Concepts are never hard-deleted; archiving sets status="archived" and the
concept can later be moved back to draft or published with an update.
"""

import logging

from fastapi import APIRouter, status
from sqlalchemy import select

from explainer.api.deps import CurrentUser, DbSession, get_owned_concept_or_404
from explainer.db.models import Concept, ConceptCheck, ConceptStatus, ConceptStep, utcnow
from explainer.schemas.checks import CheckRead
from explainer.schemas.concepts import (
    ConceptCreate,
    ConceptDetail,
    ConceptRead,
    ConceptStatusType,
    ConceptUpdate,
)
from explainer.schemas.steps import StepRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/concepts", tags=["concepts"])


@router.get("/", response_model=list[ConceptRead])
async def list_my_concepts(
    current_user: CurrentUser,
    db: DbSession,
    status: ConceptStatusType | None = None,
    subject: str | None = None,
    topic: str | None = None,
) -> list[ConceptRead]:
    """
    List concepts owned by the current user.

    Filters (exact match, all must hold; omitted filters match everything):
    - status
    - subject
    - topic
    """
    query = select(Concept).where(Concept.owner_id == current_user.id)

    if status:
        query = query.where(Concept.status == status)
    if subject:
        query = query.where(Concept.subject == subject)
    if topic:
        query = query.where(Concept.topic == topic)

    query = query.order_by(Concept.id)

    result = await db.execute(query)
    return [ConceptRead.model_validate(c) for c in result.scalars()]


@router.post("/", response_model=ConceptRead, status_code=status.HTTP_201_CREATED)
async def create_concept(
    data: ConceptCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ConceptRead:
    """Create a new concept owned by the caller."""
    now = utcnow()
    concept = Concept(
        owner_id=current_user.id,  # From auth, NEVER from request
        created_at=now,
        updated_at=now,
        **data.model_dump(),
    )
    db.add(concept)
    await db.commit()
    await db.refresh(concept)
    logger.info("Created concept %s for owner %s", concept.id, current_user.id)
    return ConceptRead.model_validate(concept)


@router.get("/{concept_id}", response_model=ConceptDetail)
async def get_concept_with_details(
    concept_id: int,
    current_user: CurrentUser,
    db: DbSession,
) -> ConceptDetail:
    """Get a concept with all of its steps and checks."""
    concept = await get_owned_concept_or_404(db, concept_id, current_user.id)

    steps = await db.execute(
        select(ConceptStep).where(ConceptStep.concept_id == concept.id).order_by(ConceptStep.id)
    )
    checks = await db.execute(
        select(ConceptCheck).where(ConceptCheck.concept_id == concept.id).order_by(ConceptCheck.id)
    )

    return ConceptDetail(
        concept=ConceptRead.model_validate(concept),
        steps=[StepRead.model_validate(s) for s in steps.scalars()],
        checks=[CheckRead.model_validate(c) for c in checks.scalars()],
    )


@router.patch("/{concept_id}", response_model=ConceptRead)
async def update_concept(
    concept_id: int,
    data: ConceptUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ConceptRead:
    """
    Partially update a concept.

    Only fields present in the request are written. A request with no fields
    returns the stored concept without touching updated_at.
    """
    concept = await get_owned_concept_or_404(db, concept_id, current_user.id)

    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return ConceptRead.model_validate(concept)

    for key, value in changes.items():
        setattr(concept, key, value)
    concept.updated_at = utcnow()
    await db.commit()
    await db.refresh(concept)
    logger.info("Updated concept %s fields=%s", concept.id, sorted(changes))
    return ConceptRead.model_validate(concept)


@router.post("/{concept_id}/archive", response_model=ConceptRead)
async def archive_concept(
    concept_id: int,
    current_user: CurrentUser,
    db: DbSession,
) -> ConceptRead:
    """Soft-delete a concept by marking it archived."""
    concept = await get_owned_concept_or_404(db, concept_id, current_user.id)
    concept.status = ConceptStatus.ARCHIVED.value
    concept.updated_at = utcnow()
    await db.commit()
    await db.refresh(concept)
    logger.info("Archived concept %s", concept.id)
    return ConceptRead.model_validate(concept)
