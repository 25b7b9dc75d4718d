"""
Laporan Repository
"""

from sqlalchemy.orm import Session

from lapordesa.models.laporan import Laporan
from lapordesa.repositories.base_repository import BaseRepository


class LaporanRepository(BaseRepository[Laporan]):
    def __init__(self, db: Session):
        super().__init__(Laporan, db)
