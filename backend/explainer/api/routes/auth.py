"""
Authentication Routes

Endpoints:
- GET /auth/me - Return the identity resolved from the access token

Tokens are issued by the identity service. This API never sees credentials;
it only verifies the JWT on each request (see api/deps.py).
"""

from fastapi import APIRouter

from explainer.api.deps import CurrentUser
from explainer.schemas.auth import IdentityRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=IdentityRead)
async def get_me(current_user: CurrentUser) -> IdentityRead:
    """Who am I? Useful for clients checking that their token still works."""
    return IdentityRead(id=current_user.id)
