"""Auth schemas."""

from explainer.schemas.base import BaseSchema


class IdentityRead(BaseSchema):
    """The caller as resolved from their access token."""

    id: str
