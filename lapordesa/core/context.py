"""
Application context.

Holds the collaborators that are built once per application: settings,
database engine and session factory, security helpers and the media
host client. ``create_app`` stores it on ``app.state.context`` and route
dependencies read it from there.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from lapordesa.config.settings import Settings
from lapordesa.core.logging import get_logger
from lapordesa.core.security import JWTManager, PasswordHasher
from lapordesa.db.session import create_db_engine, create_session_factory
from lapordesa.services.media import AttachmentCleaner, CloudinaryMediaStorage, MediaStorage

logger = get_logger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    password_hasher: PasswordHasher
    jwt_manager: JWTManager
    media_storage: MediaStorage
    attachment_cleaner: AttachmentCleaner


def build_context(settings: Settings, media_storage: Optional[MediaStorage] = None) -> AppContext:
    """
    Build the application context from settings.

    Args:
        settings: Application settings
        media_storage: Media host client; a Cloudinary client is built
            from the settings when omitted
    """
    engine = create_db_engine(settings)

    if settings.jwt_secret_generated():
        logger.warning(
            "JWT_SECRET_KEY is not configured; a random key was generated and tokens "
            "will not survive a restart or be accepted by other workers"
        )

    if media_storage is None:
        if not settings.media_configured():
            logger.warning(
                "Cloudinary credentials are not configured; uploads and remote deletions will fail"
            )
        media_storage = CloudinaryMediaStorage(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            timeout=settings.MEDIA_TIMEOUT_SECONDS,
        )

    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        password_hasher=PasswordHasher(rounds=settings.PASSWORD_BCRYPT_ROUNDS),
        jwt_manager=JWTManager(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        ),
        media_storage=media_storage,
        attachment_cleaner=AttachmentCleaner(media_storage),
    )
