"""
FastAPI Dependencies for Authentication and Authorization.

Key patterns:
1. get_current_user: Extracts and validates JWT, returns the caller's Identity
2. Owner-scoped queries: every lookup filters on owner_id at the SQL level
3. Child rows (steps, checks) are authorized through a ConceptScope, which is
   only ever built after the parent concept was loaded for the caller

Security model:
- Identities are issued elsewhere; we only verify the JWT and read its subject
- JWT stored in HttpOnly cookie or Authorization header
- Missing and not-owned rows both surface as NotFound
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import Cookie, Depends, Header
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from explainer.config import get_settings
from explainer.db.models import Concept
from explainer.db.session import get_db
from explainer.errors import NotFound, Unauthorized, concept_not_found

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass(frozen=True)
class Identity:
    """An authenticated caller. id is the token subject and the owner_id of their rows."""

    id: str


@dataclass(frozen=True)
class ConceptScope:
    """
    Proof that owner_id owns concept_id.

    Step and check operations take one of these instead of a bare concept id,
    so they never need to repeat the ownership lookup.
    """

    concept_id: int
    owner_id: str


# =============================================================================
# JWT UTILITIES
# =============================================================================


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token for an identity.

    Token payload contains only:
    - sub: the identity id (standard JWT subject claim)
    - exp: expiration timestamp
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    payload = {
        "sub": subject,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str | None:
    """
    Decode and validate a JWT access token.

    Returns the subject if valid, None if invalid/expired/subject-less.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject


# =============================================================================
# AUTHENTICATION DEPENDENCIES
# =============================================================================


async def get_token_from_request(
    authorization: Annotated[str | None, Header()] = None,
    access_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """
    Extract JWT token from request.

    Supports two methods (in order of preference):
    1. HttpOnly cookie named 'access_token'
    2. Authorization header: 'Bearer <token>'
    """
    if access_token:
        return access_token

    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]

    raise Unauthorized()


async def get_current_user(
    token: Annotated[str, Depends(get_token_from_request)],
) -> Identity:
    """
    Validate JWT and return the calling identity.

    This is the mandatory first step of every operation:

        @router.get("/concepts")
        async def list_concepts(current_user: CurrentUser):
            ...

    Raises Unauthorized if the token is invalid, expired, or has no subject.
    """
    subject = decode_access_token(token)
    if subject is None:
        logger.debug("Rejected access token")
        raise Unauthorized("Could not validate credentials.")
    return Identity(id=subject)


# Type alias for dependency injection
CurrentUser = Annotated[Identity, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]


# =============================================================================
# QUERY HELPERS (enforce owner scoping at query level)
# =============================================================================


async def get_owned_concept(db: AsyncSession, concept_id: int, owner_id: str) -> Concept | None:
    """Load a concept only if owner_id owns it."""
    result = await db.execute(
        select(Concept).where(Concept.id == concept_id, Concept.owner_id == owner_id)
    )
    return result.scalar_one_or_none()


async def get_owned_concept_or_404(db: AsyncSession, concept_id: int, owner_id: str) -> Concept:
    """
    Fetch an owned concept or raise NotFound.

    Usage:
        concept = await get_owned_concept_or_404(db, concept_id, current_user.id)
    """
    concept = await get_owned_concept(db, concept_id, owner_id)
    if concept is None:
        logger.info("Concept %s not visible to owner %s", concept_id, owner_id)
        raise concept_not_found()
    return concept


async def get_owned_resource_or_404(
    db: AsyncSession,
    model: type,
    resource_id: int,
    owner_id: str,
    detail: str = "Resource not found.",
):
    """
    Generic helper to fetch a row that carries its own owner_id.

    Usage:
        job = await get_owned_resource_or_404(db, ConceptJob, job_id, current_user.id)
    """
    result = await db.execute(
        select(model).where(model.id == resource_id, model.owner_id == owner_id)
    )
    resource = result.scalar_one_or_none()

    if resource is None:
        raise NotFound(detail)

    return resource


async def get_concept_scope(
    concept_id: int,
    current_user: CurrentUser,
    db: DbSession,
) -> ConceptScope:
    """Resolve the {concept_id} path parameter into a verified ConceptScope."""
    concept = await get_owned_concept_or_404(db, concept_id, current_user.id)
    return ConceptScope(concept_id=concept.id, owner_id=current_user.id)


OwnedConcept = Annotated[ConceptScope, Depends(get_concept_scope)]


async def get_concept_child_or_404(
    db: AsyncSession,
    model: type,
    child_id: int,
    scope: ConceptScope,
    detail: str = "Resource not found.",
):
    """
    Fetch a step/check that lives under the scoped concept.

    A row that exists but hangs off another concept is reported exactly like
    a missing one, which is what blocks moving children between concepts.
    """
    child = await db.get(model, child_id)
    if child is None or child.concept_id != scope.concept_id:
        raise NotFound(detail)
    return child
