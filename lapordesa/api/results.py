"""
Mapping of failed service results onto the HTTP exception taxonomy.
"""

from typing import Dict, Type, TypeVar

from lapordesa.core.exceptions import (
    BaseAppException,
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from lapordesa.services.base import ErrorCode, ServiceResult

T = TypeVar("T")

EXCEPTION_BY_CODE: Dict[ErrorCode, Type[BaseAppException]] = {
    ErrorCode.VALIDATION_ERROR: ValidationError,
    ErrorCode.CONFLICT: ConflictError,
    ErrorCode.AUTHENTICATION_FAILED: InvalidCredentialsError,
    ErrorCode.UNAUTHORIZED: UnauthenticatedError,
    ErrorCode.NOT_FOUND: ResourceNotFoundError,
    ErrorCode.INTERNAL_ERROR: InternalError,
}


def raise_for_failure(result: ServiceResult[T]) -> ServiceResult[T]:
    """
    Return ``result`` unchanged if it succeeded.

    Raises:
        BaseAppException: The subclass matching the result's error code
    """
    if result.is_success:
        return result

    details = dict(result.error.details or {}) if result.error else {}
    if result.error and result.error.field:
        details["field"] = result.error.field

    exception_class = EXCEPTION_BY_CODE.get(result.error_code, InternalError)
    raise exception_class(result.message or "Terjadi kesalahan internal", details=details)
