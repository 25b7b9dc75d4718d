"""
Shared service plumbing: repository access, logger, and conversion of
unexpected exceptions into failed results.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from lapordesa.core.exceptions import RepositoryError
from lapordesa.core.logging import get_logger
from lapordesa.repositories.base_repository import BaseRepository
from lapordesa.services.base.service_result import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)

TRepo = TypeVar("TRepo", bound=BaseRepository)


def summarize_validation_error(error: PydanticValidationError) -> str:
    """One-line, field-by-field description of a pydantic validation error."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "data"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class BaseService(Generic[TRepo]):
    """
    Base of the record services.

    Subclasses catch storage and media failures and hand them to
    ``_handle_exception``, so no unexpected exception reaches the routes.
    """

    def __init__(self, repository: TRepo):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
        """
        self.repository: TRepo = repository
        self._logger = get_logger(self.__class__.__name__)

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ) -> ServiceResult:
        """
        Convert an unexpected exception to a failed result.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed, in Indonesian
            entity_ref: Reference to the entity involved
            code: Error code of the result, INTERNAL_ERROR unless the
                operation reports storage failures differently

        Returns:
            ServiceResult carrying the underlying message
        """
        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra={
                "operation": operation,
                "entity_ref": str(entity_ref) if entity_ref is not None else None,
                "exception_type": type(exception).__name__,
                "storage_error": isinstance(exception, (SQLAlchemyError, RepositoryError)),
            },
        )

        return ServiceResult.failure(
            ServiceError(
                code=code,
                message=f"Gagal {operation}: {exception}",
                details={"entity_ref": str(entity_ref) if entity_ref is not None else None},
            )
        )
