"""
Citizen complaint ("laporan") model.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lapordesa.db.base import Base
from lapordesa.models.base import IdMixin, TimestampMixin
from lapordesa.models.enums import LaporanPriority, LaporanStatus


class Laporan(IdMixin, TimestampMixin, Base):
    """
    Complaint or suggestion submitted by a citizen.

    ``attachments`` is an embedded JSON array of
    ``{url, storageKey, originalName, kind}`` objects owned by the row.
    """

    __tablename__ = "laporan"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=LaporanStatus.PENDING.value
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default=LaporanPriority.LOW.value
    )
    attachments: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Laporan id={self.id} title={self.title!r} status={self.status}>"
