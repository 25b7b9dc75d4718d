"""
Admin credential repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from lapordesa.models.admin import Admin
from lapordesa.repositories.base_repository import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    """Credentials are only created and looked up; never updated or deleted here."""

    def __init__(self, db: Session):
        super().__init__(Admin, db)

    def get_by_username(self, username: str) -> Optional[Admin]:
        return self.find_one_by(username=username)

    def username_exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None
