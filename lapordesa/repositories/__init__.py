"""Data access layer."""

from lapordesa.repositories.admin_repository import AdminRepository
from lapordesa.repositories.base_repository import BaseRepository
from lapordesa.repositories.laporan_repository import LaporanRepository
from lapordesa.repositories.pengumuman_repository import PengumumanRepository

__all__ = [
    "AdminRepository",
    "BaseRepository",
    "LaporanRepository",
    "PengumumanRepository",
]
