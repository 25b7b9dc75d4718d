"""
FastAPI dependencies: application context, database session, services
and the admin bearer-token gate.
"""

from typing import Generator, List, Optional

from fastapi import Depends, Request, UploadFile
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from lapordesa.api.results import raise_for_failure
from lapordesa.core.context import AppContext
from lapordesa.core.security import TokenClaims
from lapordesa.db.session import session_scope
from lapordesa.repositories import AdminRepository, LaporanRepository, PengumumanRepository
from lapordesa.services.auth import AdminAuthService
from lapordesa.services.laporan import LaporanService
from lapordesa.services.media import IncomingFile, MediaUploader
from lapordesa.services.pengumuman import PengumumanService

_bearer = HTTPBearer(auto_error=False)


# --- Database & context --------------------------------------------------------

def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    yield from session_scope(context.session_factory)


# --- Services ------------------------------------------------------------------

def _uploader(context: AppContext) -> MediaUploader:
    return MediaUploader(
        storage=context.media_storage,
        cleaner=context.attachment_cleaner,
        folder=context.settings.MEDIA_FOLDER,
        max_file_size=context.settings.MAX_UPLOAD_SIZE,
    )


def get_auth_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> AdminAuthService:
    return AdminAuthService(AdminRepository(db), context.password_hasher, context.jwt_manager)


def get_laporan_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> LaporanService:
    return LaporanService(
        LaporanRepository(db),
        uploader=_uploader(context),
        cleaner=context.attachment_cleaner,
        max_files=context.settings.LAPORAN_MAX_FILES,
    )


def get_pengumuman_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> PengumumanService:
    return PengumumanService(
        PengumumanRepository(db),
        uploader=_uploader(context),
        cleaner=context.attachment_cleaner,
        max_files=context.settings.PENGUMUMAN_MAX_FILES,
    )


# --- Authentication ------------------------------------------------------------

def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    auth_service: AdminAuthService = Depends(get_auth_service),
) -> TokenClaims:
    """Admin gate: resolves to the token claims or raises UnauthenticatedError (401)."""
    token = credentials.credentials if credentials else None
    return raise_for_failure(auth_service.authenticate(token)).data


# --- Uploads -------------------------------------------------------------------

def to_incoming_files(uploads: Optional[List[UploadFile]]) -> List[IncomingFile]:
    """Convert multipart uploads, skipping empty file inputs."""
    return [
        IncomingFile(
            filename=upload.filename,
            stream=upload.file,
            size=upload.size,
        )
        for upload in uploads or []
        if upload.filename
    ]


__all__ = [
    "get_context",
    "get_db",
    "get_auth_service",
    "get_laporan_service",
    "get_pengumuman_service",
    "require_admin",
    "to_incoming_files",
]
