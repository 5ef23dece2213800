"""Generation job routes.

Jobs only record the lifecycle of a generation request; the payloads in
input/output are stored as-is.
"""

import logging

from fastapi import APIRouter, status
from sqlalchemy import or_, select

from explainer.api.deps import (
    CurrentUser,
    DbSession,
    get_owned_concept_or_404,
    get_owned_resource_or_404,
)
from explainer.db.models import Concept, ConceptJob
from explainer.errors import concept_not_found
from explainer.schemas.jobs import JobCreate, JobRead, JobStatusType, JobUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/", response_model=list[JobRead])
async def list_jobs(
    current_user: CurrentUser,
    db: DbSession,
    concept_id: int | None = None,
    status: JobStatusType | None = None,
) -> list[JobRead]:
    """
    List the caller's jobs.

    A job attached to a concept is only returned while that concept is still
    owned by the caller. Jobs with no concept always pass the concept check,
    including when filtering by concept_id.
    """
    result = await db.execute(select(Concept.id).where(Concept.owner_id == current_user.id))
    allowed_concept_ids = set(result.scalars())

    if concept_id is not None:
        if concept_id not in allowed_concept_ids:
            raise concept_not_found()
        allowed_concept_ids = {concept_id}

    query = select(ConceptJob).where(
        ConceptJob.owner_id == current_user.id,
        or_(
            ConceptJob.concept_id.is_(None),
            ConceptJob.concept_id.in_(list(allowed_concept_ids)),
        ),
    )
    if status:
        query = query.where(ConceptJob.status == status)
    query = query.order_by(ConceptJob.id)

    result = await db.execute(query)
    return [JobRead.model_validate(j) for j in result.scalars()]


@router.post("/", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> JobRead:
    """Record a new job, optionally attached to one of the caller's concepts."""
    if data.concept_id is not None:
        await get_owned_concept_or_404(db, data.concept_id, current_user.id)

    job = ConceptJob(
        owner_id=current_user.id,
        **data.model_dump(),
    )
    db.add(job)
    await db.commit()
    await db.refresh(job)
    logger.info("Created %s job %s (concept=%s)", job.job_type, job.id, job.concept_id)
    return JobRead.model_validate(job)


@router.patch("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: int,
    data: JobUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> JobRead:
    """Record a job's output and/or status. Other fields are fixed at creation."""
    job = await get_owned_resource_or_404(db, ConceptJob, job_id, current_user.id, "Job not found.")

    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return JobRead.model_validate(job)

    for key, value in changes.items():
        setattr(job, key, value)
    await db.commit()
    await db.refresh(job)
    logger.info("Job %s is now %s", job.id, job.status)
    return JobRead.model_validate(job)
