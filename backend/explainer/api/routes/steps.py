"""Explanation step routes, nested under their concept."""

import logging

from fastapi import APIRouter

from explainer.api.deps import DbSession, OwnedConcept, get_concept_child_or_404
from explainer.db.models import ConceptStep
from explainer.schemas.steps import StepRead, StepSave

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/concepts/{concept_id}/steps", tags=["steps"])

STEP_NOT_FOUND = "Step not found."


@router.post("/", response_model=StepRead)
async def save_step(
    data: StepSave,
    scope: OwnedConcept,
    db: DbSession,
) -> StepRead:
    """
    Insert a step, or replace an existing one when the body carries an id.

    Replacement is total: any optional field left out of the body is reset
    to its default (step_number=1, step_type="other", text fields cleared).
    """
    values = data.model_dump(exclude={"id"})

    if data.id is not None:
        step = await get_concept_child_or_404(db, ConceptStep, data.id, scope, STEP_NOT_FOUND)
        for key, value in values.items():
            setattr(step, key, value)
    else:
        step = ConceptStep(concept_id=scope.concept_id, **values)
        db.add(step)

    await db.commit()
    await db.refresh(step)
    logger.info("Saved step %s on concept %s", step.id, scope.concept_id)
    return StepRead.model_validate(step)


@router.delete("/{step_id}", response_model=StepRead)
async def delete_step(
    step_id: int,
    scope: OwnedConcept,
    db: DbSession,
) -> StepRead:
    """Hard-delete a step and return it as it was."""
    step = await get_concept_child_or_404(db, ConceptStep, step_id, scope, STEP_NOT_FOUND)
    deleted = StepRead.model_validate(step)
    await db.delete(step)
    await db.commit()
    logger.info("Deleted step %s from concept %s", step_id, scope.concept_id)
    return deleted
