"""
Multipart file upload to the media host.

Files are checked as a whole batch before the first byte is sent, so a bad
file never leaves its siblings uploaded. If the host fails midway, the
files already uploaded in that batch are cleaned up again.
"""

import os
from typing import List, Sequence, Tuple

from lapordesa.core.logging import get_logger
from lapordesa.models.enums import MediaKind
from lapordesa.services.media.classification import SUPPORTED_EXTENSIONS, classify_media_kind
from lapordesa.services.media.reconciliation import AttachmentCleaner
from lapordesa.services.media.storage import IncomingFile, MediaStorage, UploadedMedia

logger = get_logger(__name__)


class UploadRejected(ValueError):
    """A file in the batch cannot be accepted."""


def _stream_size(file: IncomingFile) -> int:
    if file.size is not None:
        return file.size
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


class MediaUploader:
    """Validates and uploads request files into one media folder."""

    def __init__(
        self,
        storage: MediaStorage,
        cleaner: AttachmentCleaner,
        folder: str,
        max_file_size: int,
    ):
        self.storage = storage
        self.cleaner = cleaner
        self.folder = folder
        self.max_file_size = max_file_size

    def check(self, files: Sequence[IncomingFile], max_files: int) -> List[Tuple[IncomingFile, MediaKind]]:
        """
        Validate a batch and pair each file with its media kind.

        Raises:
            UploadRejected: On too many files, an unsupported format,
                or an empty or oversize file
        """
        if len(files) > max_files:
            raise UploadRejected(f"Maksimal {max_files} file per permintaan")

        checked = []
        for file in files:
            kind = classify_media_kind(file.filename)
            if kind is None:
                raise UploadRejected(
                    f"Format file '{file.filename}' tidak didukung. "
                    f"Format yang diizinkan: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
                )
            size = _stream_size(file)
            if size == 0:
                raise UploadRejected(f"File '{file.filename}' kosong")
            if size > self.max_file_size:
                raise UploadRejected(
                    f"File '{file.filename}' melebihi batas {self.max_file_size} byte"
                )
            checked.append((file, kind))
        return checked

    def upload(self, checked: Sequence[Tuple[IncomingFile, MediaKind]]) -> List[UploadedMedia]:
        """
        Upload a checked batch in order.

        On failure the already uploaded part of the batch is purged and
        the original error is re-raised.
        """
        uploaded: List[UploadedMedia] = []
        try:
            for file, kind in checked:
                uploaded.append(self.storage.upload(file, kind, self.folder))
        except Exception:
            if uploaded:
                self.cleaner.purge(
                    [media.to_attachment() for media in uploaded],
                    reason="upload batch aborted",
                )
            raise

        if uploaded:
            logger.info(
                f"Uploaded {len(uploaded)} file(s) to media host",
                extra={"folder": self.folder, "kinds": [media.kind.value for media in uploaded]},
            )
        return uploaded
