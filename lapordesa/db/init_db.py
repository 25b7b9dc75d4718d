"""Database initialization utilities."""
import logging

from sqlalchemy.engine import Engine

from lapordesa.db.base import Base, import_models

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Initialize the database by creating all missing tables.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations instead.
    """
    try:
        import_models()
        Base.metadata.create_all(bind=engine)
        logger.info(f"Database initialized with tables: {sorted(Base.metadata.tables)}")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise

