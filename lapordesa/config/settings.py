"""
Environment configuration for the village feedback service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
import secrets
import string
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional, Union

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


def _generate_secret_key() -> str:
    """Generate a default secret key if not provided"""
    alphabet = string.ascii_letters + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(32))


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = Field(
        default="Layanan Aspirasi Desa",
        validation_alias=AliasChoices("APP_NAME", "PROJECT_NAME"),
    )
    API_VERSION: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("API_VERSION", "PROJECT_VERSION"),
    )
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(default=["*"])

    # Database configuration
    DATABASE_URL: str = "sqlite:///./lapordesa.db"
    DATABASE_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_POOL_OVERFLOW: int = 5

    # Security configuration
    JWT_SECRET_KEY: str = Field(default_factory=_generate_secret_key)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    PASSWORD_BCRYPT_ROUNDS: int = 10

    # Media host (Cloudinary)
    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[str] = None
    CLOUDINARY_API_SECRET: Optional[str] = None
    MEDIA_FOLDER: str = "kritik_saran_desa"
    MEDIA_TIMEOUT_SECONDS: int = 30
    MAX_UPLOAD_SIZE: int = 10485760

    # Upload limits per route
    LAPORAN_MAX_FILES: int = 5
    PENGUMUMAN_MAX_FILES: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from string to list"""
        if isinstance(v, str):
            # Handle JSON string format from .env
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of {valid_levels}')
        return v.upper()

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ('text', 'json'):
            raise ValueError('Log format must be "text" or "json"')
        return v.lower()

    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite"""
        return self.DATABASE_URL.startswith("sqlite")

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def media_configured(self) -> bool:
        """Check if all Cloudinary credentials are present"""
        return all([
            self.CLOUDINARY_CLOUD_NAME,
            self.CLOUDINARY_API_KEY,
            self.CLOUDINARY_API_SECRET,
        ])

    def jwt_secret_generated(self) -> bool:
        """Check if JWT_SECRET_KEY was generated for this process instead of configured"""
        return "JWT_SECRET_KEY" not in self.model_fields_set


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
