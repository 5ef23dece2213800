"""API routes package."""

from explainer.api.routes import (
    auth,
    checks,
    concepts,
    jobs,
    steps,
)

__all__ = [
    "auth",
    "checks",
    "concepts",
    "jobs",
    "steps",
]
