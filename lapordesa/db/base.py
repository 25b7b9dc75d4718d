"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Root SQLAlchemy base class."""
    pass


def import_models() -> None:
    """Import all models to register them with SQLAlchemy."""
    from lapordesa.models import admin, laporan, pengumuman  # noqa: F401
