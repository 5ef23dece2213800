"""Pydantic schemas for API request/response validation."""

from explainer.schemas.auth import IdentityRead
from explainer.schemas.checks import CheckRead, CheckSave
from explainer.schemas.concepts import ConceptCreate, ConceptDetail, ConceptRead, ConceptUpdate
from explainer.schemas.jobs import JobCreate, JobRead, JobUpdate
from explainer.schemas.steps import StepRead, StepSave

__all__ = [
    # Auth
    "IdentityRead",
    # Concepts
    "ConceptCreate",
    "ConceptDetail",
    "ConceptRead",
    "ConceptUpdate",
    # Steps
    "StepRead",
    "StepSave",
    # Checks
    "CheckRead",
    "CheckSave",
    # Jobs
    "JobCreate",
    "JobRead",
    "JobUpdate",
]
