"""
Laporan service: citizen complaint submission and admin triage.
"""

from typing import Any, List, Mapping, Sequence

from pydantic import ValidationError as PydanticValidationError

from lapordesa.models.laporan import Laporan
from lapordesa.repositories.laporan_repository import LaporanRepository
from lapordesa.schemas.laporan import LaporanCreate, LaporanUpdate
from lapordesa.services.base import (
    BaseService,
    ErrorCode,
    ServiceResult,
    summarize_validation_error,
)
from lapordesa.services.media import (
    AttachmentCleaner,
    IncomingFile,
    MediaUploader,
    UploadedMedia,
    UploadRejected,
)

NOT_FOUND_MESSAGE = "Laporan tidak ditemukan"


class LaporanService(BaseService[LaporanRepository]):
    """
    Complaint operations.

    Submission is public; update and delete are admin operations and are
    gated before the service is reached.
    """

    def __init__(
        self,
        repository: LaporanRepository,
        uploader: MediaUploader,
        cleaner: AttachmentCleaner,
        max_files: int = 5,
    ):
        super().__init__(repository)
        self.uploader = uploader
        self.cleaner = cleaner
        self.max_files = max_files

    def create(
        self,
        fields: Mapping[str, Any],
        files: Sequence[IncomingFile] = (),
    ) -> ServiceResult[Laporan]:
        """
        Submit a complaint with optional attachments.

        Fields are validated and the files checked before anything is
        uploaded. Failures while uploading or saving are reported as
        validation errors, and media uploaded for the failed complaint
        is removed again.
        """
        try:
            payload = LaporanCreate.model_validate(dict(fields))
        except PydanticValidationError as e:
            return ServiceResult.validation_failure(
                f"Data laporan tidak lengkap: {summarize_validation_error(e)}",
                details={"fields": [".".join(map(str, err["loc"])) for err in e.errors()]},
            )

        try:
            checked = self.uploader.check(files, self.max_files)
        except UploadRejected as e:
            return ServiceResult.validation_failure(str(e), field="files")

        uploaded: List[UploadedMedia] = []
        try:
            uploaded = self.uploader.upload(checked)
            laporan = self.repository.create(
                Laporan(
                    name=payload.name,
                    phone=payload.phone or None,
                    category=payload.category,
                    title=payload.title,
                    description=payload.description,
                    attachments=[media.to_attachment() for media in uploaded],
                )
            )
        except Exception as e:
            if uploaded:
                self.cleaner.purge(
                    [media.to_attachment() for media in uploaded],
                    reason="laporan not saved",
                )
            return self._handle_exception(
                e, "mengirim laporan", payload.title, code=ErrorCode.VALIDATION_ERROR
            )

        self._logger.info(
            "Laporan submitted",
            extra={"laporan_id": laporan.id, "attachment_count": len(laporan.attachments)},
        )
        return ServiceResult.success(data=laporan, message="Laporan berhasil dikirim")

    def list_all(self) -> ServiceResult[List[Laporan]]:
        """All complaints, newest first."""
        try:
            return ServiceResult.success(data=self.repository.list_newest_first())
        except Exception as e:
            return self._handle_exception(e, "mengambil laporan")

    def update(self, laporan_id: str, changes: LaporanUpdate) -> ServiceResult[Laporan]:
        """Change status and/or priority; fields left out are untouched."""
        values = changes.model_dump(mode="json", exclude_none=True)

        try:
            laporan = self.repository.get_by_id(laporan_id)
            if laporan is None:
                return ServiceResult.not_found(NOT_FOUND_MESSAGE, laporan_id)
            if values:
                laporan = self.repository.update(laporan, values)
        except Exception as e:
            return self._handle_exception(e, "mengupdate laporan", laporan_id)

        return ServiceResult.success(data=laporan, message="Laporan berhasil diupdate")

    def delete(self, laporan_id: str) -> ServiceResult[Laporan]:
        """
        Delete a complaint, then its media.

        The attachment list is captured before the row is deleted. Media
        that cannot be removed is logged as orphaned; the delete still
        succeeds.
        """
        try:
            laporan = self.repository.get_by_id(laporan_id)
            if laporan is None:
                return ServiceResult.not_found(NOT_FOUND_MESSAGE, laporan_id)
            attachments = [dict(entry) for entry in laporan.attachments or []]
            laporan = self.repository.delete(laporan)
        except Exception as e:
            return self._handle_exception(e, "menghapus laporan", laporan_id)

        self.cleaner.purge(attachments, reason=f"laporan {laporan_id} deleted")
        return ServiceResult.success(data=laporan, message="Laporan berhasil dihapus")
