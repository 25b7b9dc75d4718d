"""Security module for admin authentication."""

from .password_hasher import PasswordHasher
from .jwt_handler import JWTManager, TokenClaims

__all__ = [
    "PasswordHasher",
    "JWTManager",
    "TokenClaims",
]
