"""Base schema configuration."""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class PartialUpdateSchema(BaseSchema):
    """
    Base for PATCH payloads.

    Fields left out of the request are untouched (read them with
    model_dump(exclude_unset=True)). Fields listed in ``non_nullable`` back
    NOT NULL columns, so an explicit null for them is rejected.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_null_for_required_columns(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulled = [name for name in cls.non_nullable if name in data and data[name] is None]
            if nulled:
                raise ValueError(f"{', '.join(nulled)} may not be null")
        return data


class CreatedAtMixin(BaseModel):
    """Mixin for created_at timestamp."""

    created_at: datetime


class TimestampMixin(CreatedAtMixin):
    """Mixin for created_at/updated_at timestamps."""

    updated_at: datetime


class IDMixin(BaseModel):
    """Mixin for integer primary key."""

    id: int
