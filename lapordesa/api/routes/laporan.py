"""
Citizen complaint endpoints. Submission and listing are public;
triage and deletion require an admin token.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from lapordesa.api.deps import get_laporan_service, require_admin, to_incoming_files
from lapordesa.api.results import raise_for_failure
from lapordesa.schemas import DataResponse, LaporanResponse, LaporanUpdate
from lapordesa.services.laporan import LaporanService

router = APIRouter(prefix="/laporan", tags=["Laporan"])


def _respond(result) -> DataResponse[LaporanResponse]:
    return DataResponse[LaporanResponse](
        message=result.message,
        data=LaporanResponse.model_validate(result.data),
    )


@router.post("", response_model=DataResponse[LaporanResponse], status_code=status.HTTP_201_CREATED)
def create_laporan(
    name: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    service: LaporanService = Depends(get_laporan_service),
):
    """Submit a complaint with up to five attachments."""
    fields = {
        "name": name,
        "phone": phone,
        "category": category,
        "title": title,
        "description": description,
    }
    result = service.create(
        {key: value for key, value in fields.items() if value is not None},
        to_incoming_files(files),
    )
    return _respond(raise_for_failure(result))


@router.get("", response_model=List[LaporanResponse])
def list_laporan(service: LaporanService = Depends(get_laporan_service)):
    """All complaints, newest first."""
    result = raise_for_failure(service.list_all())
    return [LaporanResponse.model_validate(laporan) for laporan in result.data]


@router.put("/{laporan_id}", response_model=DataResponse[LaporanResponse])
def update_laporan(
    laporan_id: str,
    changes: Optional[LaporanUpdate] = None,
    _admin=Depends(require_admin),
    service: LaporanService = Depends(get_laporan_service),
):
    return _respond(raise_for_failure(service.update(laporan_id, changes or LaporanUpdate())))


@router.delete("/{laporan_id}", response_model=DataResponse[LaporanResponse])
def delete_laporan(
    laporan_id: str,
    _admin=Depends(require_admin),
    service: LaporanService = Depends(get_laporan_service),
):
    return _respond(raise_for_failure(service.delete(laporan_id)))
