"""
Base repository with standardized CRUD operations and error handling.

Provides the document-store contract every collection uses:
create, list, find-by-id, update, delete, with unique-constraint
violations surfaced as ``EntityAlreadyExistsError``.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lapordesa.core.exceptions import EntityAlreadyExistsError, RepositoryError
from lapordesa.core.logging import get_logger
from lapordesa.db.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with standardized operations.

    Every write commits immediately; a failed write is rolled back
    before the error is re-raised.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Create Operations ====================

    def create(self, entity: ModelType) -> ModelType:
        """
        Persist a new entity.

        Raises:
            EntityAlreadyExistsError: If a unique constraint is violated
            RepositoryError: On any other storage failure
        """
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(
                f"{self.model.__name__} already exists"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Create failed: {str(e)}") from e

        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Read Operations ====================

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Find an entity by primary key, or None."""
        return self.db.get(self.model, entity_id)

    def find_one_by(self, **criteria: Any) -> Optional[ModelType]:
        """Find the first entity whose columns equal ``criteria``."""
        stmt = select(self.model).filter_by(**criteria).limit(1)
        return self.db.scalars(stmt).first()

    def list_newest_first(self) -> List[ModelType]:
        """All entities ordered by creation time, newest first."""
        stmt = select(self.model).order_by(
            self.model.created_at.desc(),
            self.model.id.desc(),
        )
        return list(self.db.scalars(stmt).all())

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, changes: Dict[str, Any]) -> ModelType:
        """
        Apply ``changes`` to ``entity`` and persist.

        Values are assigned, never mutated in place, so JSON columns
        are flagged dirty.
        """
        try:
            for field, value in changes.items():
                setattr(entity, field, value)
            self.db.commit()
            self.db.refresh(entity)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Update failed: {str(e)}") from e

        logger.info(
            f"Updated {self.model.__name__} with id: {entity.id}",
            extra={"fields": sorted(changes)},
        )
        return entity

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType) -> ModelType:
        """Delete ``entity`` and return it as it was."""
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Delete failed: {str(e)}") from e

        logger.info(f"Deleted {self.model.__name__} with id: {entity.id}")
        return entity
