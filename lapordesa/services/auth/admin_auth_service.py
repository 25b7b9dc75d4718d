"""
Admin authentication service: one-time registration, login, and
bearer token verification.
"""

from typing import Optional

import jwt

from lapordesa.core.exceptions import EntityAlreadyExistsError
from lapordesa.core.security import JWTManager, PasswordHasher, TokenClaims
from lapordesa.models.admin import Admin
from lapordesa.repositories.admin_repository import AdminRepository
from lapordesa.schemas.admin import AdminCredentials
from lapordesa.services.base import (
    BaseService,
    ErrorCode,
    ServiceError,
    ServiceResult,
)

# Returned for every failed login, whatever the cause.
INVALID_CREDENTIALS_MESSAGE = "Username atau password salah"


class AdminAuthService(BaseService[AdminRepository]):
    """
    Admin credential operations.

    Responsibilities:
    - Register an admin, storing only a bcrypt hash
    - Exchange username/password for a signed, time-limited token
    - Verify bearer tokens for the authorization gate
    """

    def __init__(
        self,
        repository: AdminRepository,
        password_hasher: PasswordHasher,
        jwt_manager: JWTManager,
    ):
        super().__init__(repository)
        self.password_hasher = password_hasher
        self.jwt_manager = jwt_manager

    def register(self, credentials: AdminCredentials) -> ServiceResult[str]:
        """
        Register a new admin.

        Returns:
            ServiceResult containing the new admin id
        """
        username = credentials.username.strip()
        if not username or not credentials.password:
            return ServiceResult.validation_failure("Username dan password tidak boleh kosong")
        if not self.password_hasher.is_acceptable(credentials.password):
            return ServiceResult.validation_failure("Password maksimal 72 byte", field="password")

        try:
            if self.repository.username_exists(username):
                return ServiceResult.conflict("Username sudah digunakan")

            admin = self.repository.create(
                Admin(
                    username=username,
                    password_hash=self.password_hasher.hash(credentials.password),
                )
            )
        except EntityAlreadyExistsError:
            return ServiceResult.conflict("Username sudah digunakan")
        except Exception as e:
            return self._handle_exception(e, "mendaftarkan admin", username)

        self._logger.info("Admin registered", extra={"admin_id": admin.id, "username": username})
        return ServiceResult.success(data=admin.id, message="Admin berhasil didaftarkan")

    def login(self, credentials: AdminCredentials) -> ServiceResult[str]:
        """
        Authenticate an admin and issue an access token.

        Returns:
            ServiceResult containing the encoded token
        """
        try:
            admin = self.repository.get_by_username(credentials.username.strip())
        except Exception as e:
            return self._handle_exception(e, "login")

        stored_hash = admin.password_hash if admin else self.password_hasher.dummy_hash
        password_ok = self.password_hasher.verify(credentials.password, stored_hash)

        if admin is None or not password_ok:
            self._logger.warning("Admin login rejected", extra={"username": credentials.username})
            return ServiceResult.failure(
                ServiceError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=INVALID_CREDENTIALS_MESSAGE,
                )
            )

        token = self.jwt_manager.create_access_token(admin.id, admin.username)
        self._logger.info("Admin logged in", extra={"admin_id": admin.id})
        return ServiceResult.success(data=token, message="Login berhasil")

    def authenticate(self, token: Optional[str]) -> ServiceResult[TokenClaims]:
        """Verify a bearer token presented to an admin-only operation."""
        if not token:
            return self._unauthenticated("Akses ditolak, token tidak ditemukan")

        try:
            claims = self.jwt_manager.verify_token(token)
        except jwt.ExpiredSignatureError:
            return self._unauthenticated("Token sudah kedaluwarsa")
        except jwt.InvalidTokenError:
            return self._unauthenticated("Token tidak valid")

        return ServiceResult.success(data=claims)

    @staticmethod
    def _unauthenticated(message: str) -> ServiceResult[TokenClaims]:
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.UNAUTHORIZED,
                message=message,
            )
        )
