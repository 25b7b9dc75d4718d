"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseDBSchema",
    "MessageResponse",
    "DataResponse",
]

TData = TypeVar("TData")


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
    )


class BaseDBSchema(BaseSchema):
    """Base schema for stored records with ID and timestamps."""

    id: str = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class MessageResponse(BaseSchema):
    """Plain acknowledgement."""

    message: str


class DataResponse(BaseSchema, Generic[TData]):
    """Acknowledgement carrying the affected record."""

    message: str
    data: TData
