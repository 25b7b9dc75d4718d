"""
Announcement (pengumuman) request and response schemas.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from lapordesa.schemas.attachment import Attachment
from lapordesa.schemas.base import BaseDBSchema, BaseSchema

__all__ = [
    "PengumumanWrite",
    "PengumumanResponse",
]


class PengumumanWrite(BaseSchema):
    """Text fields of an announcement, used on create and update."""

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)


class PengumumanResponse(BaseDBSchema):
    title: str
    body: str
    attachments: List[Attachment] = Field(default_factory=list)
