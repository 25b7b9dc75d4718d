"""
Complaint (laporan) request and response schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from lapordesa.models.enums import LaporanPriority, LaporanStatus
from lapordesa.schemas.attachment import LaporanAttachment
from lapordesa.schemas.base import BaseDBSchema, BaseSchema

__all__ = [
    "LaporanCreate",
    "LaporanUpdate",
    "LaporanResponse",
]


class LaporanCreate(BaseSchema):
    """Fields submitted with a new complaint. Files travel separately."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    category: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)


class LaporanUpdate(BaseSchema):
    """Partial triage update; only supplied fields change."""

    status: Optional[LaporanStatus] = None
    priority: Optional[LaporanPriority] = None


class LaporanResponse(BaseDBSchema):
    name: str
    phone: Optional[str] = None
    category: str
    title: str
    description: str
    status: LaporanStatus
    priority: LaporanPriority
    attachments: List[LaporanAttachment] = Field(default_factory=list)
