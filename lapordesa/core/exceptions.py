"""
Custom Exceptions for the village feedback service

This module defines the exception classes raised at the HTTP boundary.
Each carries its HTTP status and a stable error code so that handlers
can render a uniform error body.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHENTICATED = "UNAUTHENTICATED"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the response body format"""
        return {
            "error": self.message,
            "code": self.error_code.value,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validasi gagal",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, 400)


class ConflictError(BaseAppException):
    """Exception raised when a uniqueness constraint would be violated"""

    def __init__(
        self,
        message: str = "Data sudah ada",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.CONFLICT, details, 400)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        message: str = "Data tidak ditemukan",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class InvalidCredentialsError(BaseAppException):
    """Exception raised when a login attempt fails, whatever the cause"""

    def __init__(
        self,
        message: str = "Username atau password salah",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS, details, 401)


class UnauthenticatedError(BaseAppException):
    """Exception raised when a bearer token is missing or invalid"""

    def __init__(
        self,
        message: str = "Akses ditolak, token tidak valid",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.UNAUTHENTICATED, details, 401)


class InternalError(BaseAppException):
    """Exception raised for unhandled store or network failures"""

    def __init__(
        self,
        message: str = "Terjadi kesalahan internal",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details, 500)


# ========================================
# Repository Exceptions
# ========================================

class RepositoryError(Exception):
    """Raised when a storage operation fails"""


class EntityAlreadyExistsError(RepositoryError):
    """Raised when an insert violates a unique constraint"""
