"""
Announcement ("pengumuman") model.
"""

from typing import Any, Dict, List

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lapordesa.db.base import Base
from lapordesa.models.base import IdMixin, TimestampMixin


class Pengumuman(IdMixin, TimestampMixin, Base):
    """
    Announcement published by the village admin.

    ``attachments`` is an embedded JSON array of ``{url, storageKey, kind}``.
    """

    __tablename__ = "pengumuman"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    attachments: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Pengumuman id={self.id} title={self.title!r}>"
