"""
Admin credential model.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lapordesa.db.base import Base
from lapordesa.models.base import IdMixin


class Admin(IdMixin, Base):
    """Operator-managed admin credential. Only the bcrypt hash is stored."""

    __tablename__ = "admins"

    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin id={self.id} username={self.username!r}>"
