"""
Remote media storage.

Defines the contract the services use to talk to the media host and the
Cloudinary implementation of it. Credentials are passed on every call, so
no process-wide SDK configuration is involved.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Protocol, Sequence

import cloudinary.api
import cloudinary.exceptions
import cloudinary.uploader

from lapordesa.models.enums import MediaKind

logger = logging.getLogger(__name__)

# Cloudinary's Admin API accepts at most this many public ids per delete call.
DELETE_BATCH_LIMIT = 100


class MediaStorageError(Exception):
    """Raised when the media host rejects or fails a request."""


@dataclass
class IncomingFile:
    """A file received in a multipart request, not yet uploaded."""

    filename: str
    stream: BinaryIO
    size: Optional[int] = None


@dataclass(frozen=True)
class UploadedMedia:
    """Result of one upload: served URL, generated storage key, original name and kind."""

    url: str
    storage_key: str
    original_name: str
    kind: MediaKind

    def to_attachment(self, include_original_name: bool = True) -> Dict[str, Any]:
        """Attachment entry as embedded in a stored record."""
        entry = {"url": self.url, "storageKey": self.storage_key}
        if include_original_name:
            entry["originalName"] = self.original_name
        entry["kind"] = self.kind.value
        return entry


@dataclass
class DeletionOutcome:
    """What the host reported for one batch deletion."""

    kind: MediaKind
    deleted: List[str] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)


class MediaStorage(Protocol):
    """Contract of the remote media host."""

    def upload(self, file: IncomingFile, kind: MediaKind, folder: str) -> UploadedMedia:
        ...

    def batch_delete(self, storage_keys: Sequence[str], kind: MediaKind) -> DeletionOutcome:
        """Delete ``storage_keys`` of one kind. Unknown keys are not an error."""
        ...


class CloudinaryMediaStorage:
    """
    MediaStorage backed by the Cloudinary SDK.

    Every request is bounded by ``timeout`` seconds.
    """

    def __init__(
        self,
        cloud_name: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        timeout: int = 30,
    ):
        self._options = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
            "secure": True,
            "timeout": timeout,
        }
        logger.info(f"CloudinaryMediaStorage initialized for cloud {cloud_name!r}, timeout {timeout}s")

    def upload(self, file: IncomingFile, kind: MediaKind, folder: str) -> UploadedMedia:
        try:
            result = cloudinary.uploader.upload(
                file.stream,
                folder=folder,
                resource_type=kind.value,
                filename=file.filename,
                **self._options,
            )
        except cloudinary.exceptions.Error as e:
            raise MediaStorageError(f"Upload of {file.filename!r} failed: {e}") from e

        logger.debug(f"Uploaded {file.filename!r} as {kind.value} {result['public_id']}")
        return UploadedMedia(
            url=result["secure_url"],
            storage_key=result["public_id"],
            original_name=file.filename,
            kind=kind,
        )

    def batch_delete(self, storage_keys: Sequence[str], kind: MediaKind) -> DeletionOutcome:
        outcome = DeletionOutcome(kind=kind)
        keys = list(storage_keys)

        for start in range(0, len(keys), DELETE_BATCH_LIMIT):
            chunk = keys[start:start + DELETE_BATCH_LIMIT]
            try:
                response = cloudinary.api.delete_resources(
                    chunk,
                    resource_type=kind.value,
                    type="upload",
                    **self._options,
                )
            except cloudinary.exceptions.Error as e:
                raise MediaStorageError(
                    f"Deleting {len(chunk)} {kind.value} resource(s) failed: {e}"
                ) from e

            for key, status in (response.get("deleted") or {}).items():
                if status == "not_found":
                    outcome.not_found.append(key)
                else:
                    outcome.deleted.append(key)

        return outcome
