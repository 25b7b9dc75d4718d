"""
Admin bearer tokens.

Signed JWTs carrying the admin id and username, with an expiry
taken from configuration.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity recovered from a verified admin token."""

    admin_id: str
    username: str
    expires_at: datetime


class JWTManager:
    """
    JWT token manager for admin authentication.

    Tokens are signed with a shared secret and carry the admin's id and
    username. Lifetime is a policy value supplied by configuration.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES = 60

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: str = DEFAULT_ALGORITHM,
        access_token_expire_minutes: int = DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES,
    ):
        """
        Initialize JWT manager.

        Args:
            secret_key: Secret key for signing tokens (auto-generated if None)
            algorithm: JWT algorithm (default: HS256)
            access_token_expire_minutes: Access token lifetime in minutes
        """
        self.secret_key = secret_key or secrets.token_urlsafe(32)
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes

        logger.info(
            f"JWT Manager initialized with algorithm {algorithm}, "
            f"access token expires in {access_token_expire_minutes}m"
        )

    def create_access_token(
        self,
        admin_id: str,
        username: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create JWT access token.

        Args:
            admin_id: Admin identifier
            username: Admin username
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        payload: Dict[str, Any] = {
            "adminId": str(admin_id),
            "username": username,
            "iat": now,
            "exp": expire,
            "jti": secrets.token_hex(16),
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for admin {admin_id}")
        return token

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify and decode JWT token.

        Args:
            token: JWT token to verify

        Returns:
            Claims of the verified token

        Raises:
            jwt.ExpiredSignatureError: If token is expired
            jwt.InvalidTokenError: If token is malformed, badly signed,
                or lacks the admin claims
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token verification failed: token expired")
            raise
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {e}")
            raise

        admin_id = payload.get("adminId")
        username = payload.get("username")
        if not admin_id or not username:
            raise jwt.InvalidTokenError("Token is missing admin claims")

        return TokenClaims(
            admin_id=admin_id,
            username=username,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
