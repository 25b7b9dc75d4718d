"""
Health check response schema.
"""

from __future__ import annotations

from pydantic import Field

from lapordesa.schemas.base import BaseSchema

__all__ = ["HealthResponse"]


class HealthResponse(BaseSchema):
    status: str = Field(..., description="ok, or degraded when the database is unreachable")
    version: str
    database: str
    orphaned_media: int = Field(..., description="Storage keys whose remote deletion failed since start-up")
