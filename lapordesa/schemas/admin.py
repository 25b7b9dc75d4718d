"""
Admin credential schemas.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from lapordesa.schemas.base import BaseSchema

__all__ = [
    "AdminCredentials",
    "LoginResponse",
]


class AdminCredentials(BaseSchema):
    """Username and password, used for both registration and login."""

    model_config = ConfigDict(str_strip_whitespace=False)

    username: str = Field("", description="Admin username")
    password: str = Field("", description="Plain text password, never stored")


class LoginResponse(BaseSchema):
    message: str
    token: str
