"""Comprehension check routes, nested under their concept."""

import logging

from fastapi import APIRouter

from explainer.api.deps import DbSession, OwnedConcept, get_concept_child_or_404
from explainer.db.models import ConceptCheck
from explainer.schemas.checks import CheckRead, CheckSave

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/concepts/{concept_id}/checks", tags=["checks"])

CHECK_NOT_FOUND = "Check not found."


@router.post("/", response_model=CheckRead)
async def save_check(
    data: CheckSave,
    scope: OwnedConcept,
    db: DbSession,
) -> CheckRead:
    """Insert a check, or fully replace the one named by id."""
    values = data.model_dump(exclude={"id"})

    if data.id is not None:
        check = await get_concept_child_or_404(db, ConceptCheck, data.id, scope, CHECK_NOT_FOUND)
        for key, value in values.items():
            setattr(check, key, value)
    else:
        check = ConceptCheck(concept_id=scope.concept_id, **values)
        db.add(check)

    await db.commit()
    await db.refresh(check)
    logger.info("Saved check %s on concept %s", check.id, scope.concept_id)
    return CheckRead.model_validate(check)


@router.delete("/{check_id}", response_model=CheckRead)
async def delete_check(
    check_id: int,
    scope: OwnedConcept,
    db: DbSession,
) -> CheckRead:
    """Hard-delete a check."""
    check = await get_concept_child_or_404(db, ConceptCheck, check_id, scope, CHECK_NOT_FOUND)
    deleted = CheckRead.model_validate(check)
    await db.delete(check)
    await db.commit()
    logger.info("Deleted check %s from concept %s", check_id, scope.concept_id)
    return deleted
