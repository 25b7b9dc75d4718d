from lapordesa.services.auth.admin_auth_service import AdminAuthService, INVALID_CREDENTIALS_MESSAGE

__all__ = ["AdminAuthService", "INVALID_CREDENTIALS_MESSAGE"]
