"""
Announcement endpoints. Listing is public; everything else requires an
admin token.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from lapordesa.api.deps import get_pengumuman_service, require_admin, to_incoming_files
from lapordesa.api.results import raise_for_failure
from lapordesa.schemas import DataResponse, PengumumanResponse
from lapordesa.services.pengumuman import PengumumanService

router = APIRouter(prefix="/pengumuman", tags=["Pengumuman"])


def _respond(result) -> DataResponse[PengumumanResponse]:
    return DataResponse[PengumumanResponse](
        message=result.message,
        data=PengumumanResponse.model_validate(result.data),
    )


def _text_fields(title: Optional[str], body: Optional[str]) -> dict:
    return {key: value for key, value in (("title", title), ("body", body)) if value is not None}


@router.get("", response_model=List[PengumumanResponse])
def list_pengumuman(service: PengumumanService = Depends(get_pengumuman_service)):
    """All announcements, newest first."""
    result = raise_for_failure(service.list_all())
    return [PengumumanResponse.model_validate(pengumuman) for pengumuman in result.data]


@router.post("", response_model=DataResponse[PengumumanResponse], status_code=status.HTTP_201_CREATED)
def create_pengumuman(
    title: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
    image_urls: Optional[List[UploadFile]] = File(None, alias="imageUrls"),
    _admin=Depends(require_admin),
    service: PengumumanService = Depends(get_pengumuman_service),
):
    result = service.create(_text_fields(title, body), to_incoming_files(image_urls))
    return _respond(raise_for_failure(result))


@router.put("/{pengumuman_id}", response_model=DataResponse[PengumumanResponse])
def update_pengumuman(
    pengumuman_id: str,
    title: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
    existing_files: Optional[str] = Form(None, alias="existingFiles"),
    image_urls: Optional[List[UploadFile]] = File(None, alias="imageUrls"),
    _admin=Depends(require_admin),
    service: PengumumanService = Depends(get_pengumuman_service),
):
    """
    Update an announcement.

    ``existingFiles`` is a JSON array naming, by ``storageKey``, the stored
    attachments to keep; files sent as ``imageUrls`` are appended.
    """
    result = service.update(
        pengumuman_id,
        _text_fields(title, body),
        existing_files,
        to_incoming_files(image_urls),
    )
    return _respond(raise_for_failure(result))


@router.delete("/{pengumuman_id}", response_model=DataResponse[PengumumanResponse])
def delete_pengumuman(
    pengumuman_id: str,
    _admin=Depends(require_admin),
    service: PengumumanService = Depends(get_pengumuman_service),
):
    return _respond(raise_for_failure(service.delete(pengumuman_id)))
