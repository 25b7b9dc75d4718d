"""
Pengumuman service: announcements published by the admin.

Updating an announcement reconciles its attachments: stored media the
client no longer keeps is deleted from the media host, and the survivors
are followed by the newly uploaded files.
"""

from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from lapordesa.models.pengumuman import Pengumuman
from lapordesa.repositories.pengumuman_repository import PengumumanRepository
from lapordesa.schemas.pengumuman import PengumumanWrite
from lapordesa.services.base import BaseService, ServiceResult
from lapordesa.services.media import (
    AttachmentCleaner,
    IncomingFile,
    KeepListError,
    MediaUploader,
    UploadedMedia,
    UploadRejected,
    decode_keep_list,
    plan_reconciliation,
)

NOT_FOUND_MESSAGE = "Pengumuman tidak ditemukan"
MISSING_TEXT_MESSAGE = "Judul dan Isi tidak boleh kosong"
NO_ATTACHMENT_MESSAGE = "Pengumuman harus memiliki minimal satu lampiran"


def _as_attachments(uploaded: Sequence[UploadedMedia]) -> List[dict]:
    return [media.to_attachment(include_original_name=False) for media in uploaded]


class PengumumanService(BaseService[PengumumanRepository]):
    """
    Announcement operations.

    Create accepts an announcement without attachments; an update may
    never leave it with none.
    """

    def __init__(
        self,
        repository: PengumumanRepository,
        uploader: MediaUploader,
        cleaner: AttachmentCleaner,
        max_files: int = 3,
    ):
        super().__init__(repository)
        self.uploader = uploader
        self.cleaner = cleaner
        self.max_files = max_files

    def _parse_text(self, fields: Mapping[str, Any]) -> Optional[PengumumanWrite]:
        try:
            return PengumumanWrite.model_validate(dict(fields))
        except PydanticValidationError:
            return None

    def create(
        self,
        fields: Mapping[str, Any],
        files: Sequence[IncomingFile] = (),
    ) -> ServiceResult[Pengumuman]:
        """Publish an announcement with zero or more attachments."""
        payload = self._parse_text(fields)
        if payload is None:
            return ServiceResult.validation_failure(MISSING_TEXT_MESSAGE)

        try:
            checked = self.uploader.check(files, self.max_files)
        except UploadRejected as e:
            return ServiceResult.validation_failure(str(e), field="imageUrls")

        uploaded: List[UploadedMedia] = []
        try:
            uploaded = self.uploader.upload(checked)
            pengumuman = self.repository.create(
                Pengumuman(
                    title=payload.title,
                    body=payload.body,
                    attachments=_as_attachments(uploaded),
                )
            )
        except Exception as e:
            if uploaded:
                self.cleaner.purge(_as_attachments(uploaded), reason="pengumuman not saved")
            return self._handle_exception(e, "membuat pengumuman", payload.title)

        self._logger.info(
            "Pengumuman created",
            extra={"pengumuman_id": pengumuman.id, "attachment_count": len(pengumuman.attachments)},
        )
        return ServiceResult.success(data=pengumuman, message="Pengumuman berhasil dibuat")

    def list_all(self) -> ServiceResult[List[Pengumuman]]:
        """All announcements, newest first."""
        try:
            return ServiceResult.success(data=self.repository.list_newest_first())
        except Exception as e:
            return self._handle_exception(e, "mengambil pengumuman")

    def update(
        self,
        pengumuman_id: str,
        fields: Mapping[str, Any],
        existing_files: Optional[str],
        files: Sequence[IncomingFile] = (),
    ) -> ServiceResult[Pengumuman]:
        """
        Replace the text of an announcement and reconcile its attachments.

        Args:
            pengumuman_id: Announcement to update
            fields: ``title`` and ``body``
            existing_files: JSON keep-list of stored attachments, by storage key
            files: Newly uploaded files, appended after the kept attachments

        Every rejection (bad keep-list, missing text, unknown id, bad file,
        empty result) happens before anything is uploaded, deleted or
        written. Dropped media is deleted after the record is saved, best-effort.
        """
        try:
            keep_list = decode_keep_list(existing_files)
        except KeepListError as e:
            return ServiceResult.validation_failure(str(e), field="existingFiles")

        payload = self._parse_text(fields)
        if payload is None:
            return ServiceResult.validation_failure(MISSING_TEXT_MESSAGE)

        try:
            pengumuman = self.repository.get_by_id(pengumuman_id)
        except Exception as e:
            return self._handle_exception(e, "mengupdate pengumuman", pengumuman_id)
        if pengumuman is None:
            return ServiceResult.not_found(NOT_FOUND_MESSAGE, pengumuman_id)

        try:
            checked = self.uploader.check(files, self.max_files)
        except UploadRejected as e:
            return ServiceResult.validation_failure(str(e), field="imageUrls")

        plan = plan_reconciliation(pengumuman.attachments or [], keep_list)
        if not plan.kept and not checked:
            return ServiceResult.validation_failure(NO_ATTACHMENT_MESSAGE, field="existingFiles")

        uploaded: List[UploadedMedia] = []
        try:
            uploaded = self.uploader.upload(checked)
            pengumuman = self.repository.update(
                pengumuman,
                {
                    "title": payload.title,
                    "body": payload.body,
                    "attachments": plan.final + _as_attachments(uploaded),
                },
            )
        except Exception as e:
            if uploaded:
                self.cleaner.purge(_as_attachments(uploaded), reason="pengumuman update not saved")
            return self._handle_exception(e, "mengupdate pengumuman", pengumuman_id)

        if plan.to_delete:
            self.cleaner.purge(plan.to_delete, reason=f"pengumuman {pengumuman_id} attachments dropped")

        self._logger.info(
            "Pengumuman updated",
            extra={
                "pengumuman_id": pengumuman_id,
                "kept": len(plan.kept),
                "added": len(uploaded),
                "dropped": len(plan.to_delete),
            },
        )
        return ServiceResult.success(data=pengumuman, message="Pengumuman berhasil diupdate")

    def delete(self, pengumuman_id: str) -> ServiceResult[Pengumuman]:
        """Delete an announcement, then its media (best-effort)."""
        try:
            pengumuman = self.repository.get_by_id(pengumuman_id)
            if pengumuman is None:
                return ServiceResult.not_found(NOT_FOUND_MESSAGE, pengumuman_id)
            attachments = [dict(entry) for entry in pengumuman.attachments or []]
            pengumuman = self.repository.delete(pengumuman)
        except Exception as e:
            return self._handle_exception(e, "menghapus pengumuman", pengumuman_id)

        self.cleaner.purge(attachments, reason=f"pengumuman {pengumuman_id} deleted")
        return ServiceResult.success(data=pengumuman, message="Pengumuman berhasil dihapus")
