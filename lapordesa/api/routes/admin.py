"""
Admin registration and login.
"""

from fastapi import APIRouter, Depends, status

from lapordesa.api.deps import get_auth_service
from lapordesa.api.results import raise_for_failure
from lapordesa.schemas import AdminCredentials, LoginResponse, MessageResponse
from lapordesa.services.auth import AdminAuthService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_admin(
    credentials: AdminCredentials,
    service: AdminAuthService = Depends(get_auth_service),
):
    """Register an admin account. The password is stored only as a bcrypt hash."""
    result = raise_for_failure(service.register(credentials))
    return MessageResponse(message=result.message)


@router.post("/login", response_model=LoginResponse)
def login_admin(
    credentials: AdminCredentials,
    service: AdminAuthService = Depends(get_auth_service),
):
    """Exchange username and password for a bearer token."""
    result = raise_for_failure(service.login(credentials))
    return LoginResponse(message=result.message, token=result.data)
