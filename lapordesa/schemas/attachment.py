"""
Attachment schemas embedded in laporan and pengumuman records.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator

from lapordesa.models.enums import MediaKind
from lapordesa.schemas.base import BaseSchema

__all__ = [
    "Attachment",
    "LaporanAttachment",
    "KeepListEntry",
]


class Attachment(BaseSchema):
    """Reference to an asset stored on the media host."""

    url: str = Field(..., description="Served URL of the asset")
    storage_key: str = Field(..., min_length=1, description="Media host identifier used for deletion")
    kind: MediaKind = Field(MediaKind.RAW, description="Media host resource kind")

    @field_validator("kind", mode="before")
    @classmethod
    def default_unknown_kind(cls, v: Any) -> Any:
        """Missing or unrecognized kinds are treated as raw."""
        if isinstance(v, MediaKind):
            return v
        if isinstance(v, str) and v in MediaKind._value2member_map_:
            return v
        return MediaKind.RAW


class LaporanAttachment(Attachment):
    """Complaint attachment, which also keeps the uploader's file name."""

    original_name: Optional[str] = Field(None, description="File name as uploaded")


class KeepListEntry(BaseSchema):
    """One element of the ``existingFiles`` keep-list sent on announcement update."""

    storage_key: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("storageKey", "storage_key", "filename"),
    )
