"""
Domain errors surfaced to callers.

Only two exist: the caller has no identity (Unauthorized), or the row they
named is missing, belongs to someone else, or sits under a different parent
(NotFound). Ownership failures are reported as NotFound so other users'
records cannot be probed. Both are HTTPExceptions so FastAPI returns the
message verbatim as {"detail": ...}.
"""

from fastapi import HTTPException, status


class Unauthorized(HTTPException):
    """No authenticated identity could be resolved from the request."""

    def __init__(self, detail: str = "You must be signed in to perform this action.") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFound(HTTPException):
    """Referenced row is absent or not visible to the caller."""

    def __init__(self, detail: str = "Resource not found.") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def concept_not_found() -> NotFound:
    return NotFound("Concept not found.")
