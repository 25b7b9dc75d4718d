"""Pydantic request/response schemas."""

from lapordesa.schemas.admin import AdminCredentials, LoginResponse
from lapordesa.schemas.attachment import Attachment, KeepListEntry, LaporanAttachment
from lapordesa.schemas.base import DataResponse, MessageResponse
from lapordesa.schemas.health import HealthResponse
from lapordesa.schemas.laporan import LaporanCreate, LaporanResponse, LaporanUpdate
from lapordesa.schemas.pengumuman import PengumumanResponse, PengumumanWrite

__all__ = [
    "AdminCredentials",
    "Attachment",
    "DataResponse",
    "HealthResponse",
    "KeepListEntry",
    "LaporanAttachment",
    "LaporanCreate",
    "LaporanResponse",
    "LaporanUpdate",
    "LoginResponse",
    "MessageResponse",
    "PengumumanResponse",
    "PengumumanWrite",
]
