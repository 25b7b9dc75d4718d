"""
Base services module.

All services follow consistent patterns for:
- Result handling via ServiceResult
- Error management and logging
"""

from lapordesa.services.base.service_result import (
    ServiceResult,
    ServiceError,
    ErrorCode,
)
from lapordesa.services.base.base_service import BaseService, summarize_validation_error

__all__ = [
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "BaseService",
    "summarize_validation_error",
]
