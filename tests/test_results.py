import pytest

from lapordesa.api.results import raise_for_failure
from lapordesa.core.exceptions import (
    InternalError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    ValidationError,
)
from lapordesa.services.base import ErrorCode, ServiceError, ServiceResult


def test_success_is_returned_unchanged():
    result = ServiceResult.success(data=[1, 2], message="ok")
    assert raise_for_failure(result) is result


def test_field_and_details_travel_with_the_exception():
    result = ServiceResult.validation_failure(
        "Maksimal 3 file", field="imageUrls", details={"limit": 3}
    )

    with pytest.raises(ValidationError) as exc_info:
        raise_for_failure(result)

    assert exc_info.value.status_code == 400
    assert exc_info.value.details == {"limit": 3, "field": "imageUrls"}
    assert exc_info.value.to_dict() == {"error": "Maksimal 3 file", "code": "VALIDATION_ERROR"}


@pytest.mark.parametrize(
    "code, expected",
    [
        (ErrorCode.NOT_FOUND, ResourceNotFoundError),
        (ErrorCode.AUTHENTICATION_FAILED, InvalidCredentialsError),
        (ErrorCode.INTERNAL_ERROR, InternalError),
    ],
)
def test_error_code_selects_exception(code, expected):
    result = ServiceResult.failure(ServiceError(code=code, message="gagal"))

    with pytest.raises(expected) as exc_info:
        raise_for_failure(result)

    assert exc_info.value.message == "gagal"
    assert exc_info.value.details == {}
