"""ORM models."""

from lapordesa.models.admin import Admin
from lapordesa.models.enums import LaporanPriority, LaporanStatus, MediaKind
from lapordesa.models.laporan import Laporan
from lapordesa.models.pengumuman import Pengumuman

__all__ = [
    "Admin",
    "Laporan",
    "LaporanPriority",
    "LaporanStatus",
    "MediaKind",
    "Pengumuman",
]
