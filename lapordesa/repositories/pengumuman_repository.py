"""
Pengumuman Repository
"""

from sqlalchemy.orm import Session

from lapordesa.models.pengumuman import Pengumuman
from lapordesa.repositories.base_repository import BaseRepository


class PengumumanRepository(BaseRepository[Pengumuman]):
    def __init__(self, db: Session):
        super().__init__(Pengumuman, db)
