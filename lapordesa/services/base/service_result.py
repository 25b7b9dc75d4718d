"""
Outcome objects returned by every service method.

Services do not raise for expected failures. They return a failed
``ServiceResult`` and the API layer decides how to present it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar


class ErrorCode(str, Enum):
    """Why a service operation failed."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"


@dataclass
class ServiceError:
    """
    Failure detail carried by a failed result.

    ``field`` names the offending input and ``details`` holds extra
    context; both are logged at the HTTP boundary, never sent to clients.
    """

    code: ErrorCode
    message: str
    field: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Either ``data`` plus an optional user-facing ``message``, or an ``error``.

    ``message`` mirrors ``error.message`` on failure, so callers can read
    it without checking which case they hold.
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Optional[TData] = None, message: Optional[str] = None) -> "ServiceResult[TData]":
        return cls(is_success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[TData]":
        return cls(is_success=False, error=error, message=error.message)

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        return cls.failure(
            ServiceError(code=ErrorCode.VALIDATION_ERROR, message=message, field=field, details=details)
        )

    @classmethod
    def not_found(cls, message: str, resource_id: Optional[str] = None) -> "ServiceResult[TData]":
        return cls.failure(
            ServiceError(code=ErrorCode.NOT_FOUND, message=message, details={"resource_id": resource_id})
        )

    @classmethod
    def conflict(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ServiceResult[TData]":
        return cls.failure(ServiceError(code=ErrorCode.CONFLICT, message=message, details=details))

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error else None

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return f"ServiceResult(ok, message={self.message!r})"
        return f"ServiceResult({self.error_code.value}, message={self.message!r})"
