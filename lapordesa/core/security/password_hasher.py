"""
Admin password hashing.

bcrypt with a configurable cost. Only the hash is ever stored; bcrypt
embeds salt and cost in it, so verification needs nothing else.
"""

import logging
import secrets
from functools import cached_property

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a secret and recent releases
# refuse longer input outright.
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")


class PasswordHasher:
    """Hashes and checks admin passwords with bcrypt."""

    DEFAULT_ROUNDS = 10
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Args:
            rounds: bcrypt cost factor, 4-31

        Raises:
            ValueError: If rounds is outside that range
        """
        if not (self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS):
            raise ValueError(
                f"Rounds must be between {self.MIN_ROUNDS} and {self.MAX_ROUNDS}, got {rounds}"
            )
        self.rounds = rounds
        logger.debug(f"PasswordHasher using cost {rounds}")

    @cached_property
    def dummy_hash(self) -> str:
        """Hash of a random secret at the configured cost, checked when no credential matches."""
        return self.hash(secrets.token_urlsafe(16))

    @staticmethod
    def is_acceptable(password: str) -> bool:
        """True if ``password`` is a non-empty string bcrypt can hash."""
        return isinstance(password, str) and 0 < len(_encode(password)) <= MAX_PASSWORD_BYTES

    def hash(self, password: str) -> str:
        """
        Salted hash of ``password``.

        Raises:
            TypeError: If password is not a string
            ValueError: If password is empty or longer than 72 bytes
        """
        if not isinstance(password, str):
            raise TypeError("Password must be a string")
        if not self.is_acceptable(password):
            raise ValueError(f"Password must be 1 to {MAX_PASSWORD_BYTES} bytes long")

        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, password: str, hashed_password: str) -> bool:
        """Check ``password`` against a stored hash. Bad input never matches."""
        if not self.is_acceptable(password) or not hashed_password:
            return False

        try:
            return bcrypt.checkpw(_encode(password), hashed_password.encode("ascii"))
        except ValueError as e:
            logger.warning(f"Stored password hash could not be checked: {e}")
            return False

