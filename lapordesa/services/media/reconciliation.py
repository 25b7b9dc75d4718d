"""
Attachment reconciliation and remote cleanup.

Records own the media they reference: deleting a record deletes its media,
and editing an announcement deletes whatever the client no longer keeps.
The media host deletes in batches scoped to one resource kind, so every
cleanup is partitioned by kind first.

Remote deletion is best-effort. A failure is logged with the orphaned
storage keys and counted; it never fails the request that triggered it.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lapordesa.core.logging import get_logger
from lapordesa.models.enums import MediaKind
from lapordesa.schemas.attachment import KeepListEntry
from lapordesa.services.media.classification import coerce_media_kind
from lapordesa.services.media.storage import MediaStorage

logger = get_logger(__name__)

Attachment = Mapping[str, Any]

_keep_list_adapter = TypeAdapter(List[KeepListEntry])


class KeepListError(ValueError):
    """The ``existingFiles`` payload is not a JSON list of attachment references."""


# ==================== Partitioning ====================

def partition_by_kind(attachments: Iterable[Attachment]) -> Dict[MediaKind, List[str]]:
    """
    Group storage keys by media kind, dropping empty groups.

    Groups come out in image, video, raw order; keys keep their order and
    appear once. Entries without a storage key cannot be deleted and are skipped.
    """
    groups: Dict[MediaKind, List[str]] = {kind: [] for kind in MediaKind}
    seen = set()

    for entry in attachments:
        key = entry.get("storageKey")
        if not key or key in seen:
            continue
        seen.add(key)
        groups[coerce_media_kind(entry.get("kind"))].append(key)

    return {kind: keys for kind, keys in groups.items() if keys}


@dataclass
class PurgeReport:
    """Outcome of one cleanup, per kind."""

    requested: Dict[MediaKind, List[str]] = field(default_factory=dict)
    failed: Dict[MediaKind, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def orphaned_keys(self) -> List[str]:
        return [key for keys in self.failed.values() for key in keys]


class AttachmentCleaner:
    """
    Issues the per-kind batch deletions for a set of attachments.

    Shared by all requests of the application; ``orphaned_total`` counts
    storage keys whose deletion failed since start-up.
    """

    def __init__(self, storage: MediaStorage):
        self.storage = storage
        self._orphaned_total = 0
        self._lock = threading.Lock()

    @property
    def orphaned_total(self) -> int:
        return self._orphaned_total

    def purge(self, attachments: Iterable[Attachment], reason: str) -> PurgeReport:
        """
        Delete every attachment from the media host, one call per kind.

        Args:
            attachments: Attachment entries captured from the owning record
            reason: Short description used in log records

        Returns:
            PurgeReport; failures are recorded there, never raised
        """
        try:
            report = PurgeReport(requested=partition_by_kind(attachments))
        except Exception as e:
            logger.error(
                f"Attachments could not be grouped for deletion, media left orphaned: {e}",
                exc_info=True,
                extra={"reason": reason, "exception_type": type(e).__name__},
            )
            return PurgeReport()

        for kind, keys in report.requested.items():
            try:
                outcome = self.storage.batch_delete(keys, kind)
            except Exception as e:
                report.failed[kind] = keys
                with self._lock:
                    self._orphaned_total += len(keys)
                logger.error(
                    f"Remote {kind.value} deletion failed, media left orphaned: {e}",
                    extra={
                        "reason": reason,
                        "media_kind": kind.value,
                        "orphaned_storage_keys": keys,
                        "exception_type": type(e).__name__,
                    },
                )
                continue

            logger.info(
                f"Deleted {len(keys)} {kind.value} resource(s) from media host",
                extra={
                    "reason": reason,
                    "media_kind": kind.value,
                    "deleted": len(outcome.deleted),
                    "not_found": len(outcome.not_found),
                },
            )

        return report


# ==================== Keep-list decoding ====================

def decode_keep_list(raw: Optional[str]) -> List[KeepListEntry]:
    """
    Decode the ``existingFiles`` form field.

    An absent or blank field means "keep nothing".

    Raises:
        KeepListError: If the value is not a JSON array of objects that
            each carry a non-empty ``storageKey``
    """
    if raw is None or not raw.strip():
        return []

    try:
        return _keep_list_adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise KeepListError(
            f"existingFiles harus berupa daftar JSON berisi storageKey ({e.error_count()} kesalahan)"
        ) from e


# ==================== Reconciliation ====================

@dataclass
class ReconciliationPlan:
    """
    Result of diffing stored attachments against the client's keep-list.

    ``final`` is ``kept`` followed by the new uploads.
    """

    kept: List[Dict[str, Any]]
    to_delete: List[Dict[str, Any]]
    final: List[Dict[str, Any]]
    ignored_keys: List[str] = field(default_factory=list)


def plan_reconciliation(
    stored: Sequence[Attachment],
    keep_list: Sequence[KeepListEntry],
    new_uploads: Sequence[Attachment] = (),
) -> ReconciliationPlan:
    """
    Compute which stored attachments survive an edit and which must go.

    Kept entries are the stored entries (url and kind as stored), in
    keep-list order, each once. Keep-list keys that the record does not
    own are ignored. Everything stored and not kept is to be deleted.
    """
    by_key: Dict[str, Attachment] = {}
    for entry in stored:
        key = entry.get("storageKey")
        if key and key not in by_key:
            by_key[key] = entry

    kept: List[Dict[str, Any]] = []
    kept_keys = set()
    ignored: List[str] = []

    for item in keep_list:
        key = item.storage_key
        if key in kept_keys:
            continue
        if key not in by_key:
            ignored.append(key)
            continue
        kept_keys.add(key)
        kept.append(dict(by_key[key]))

    to_delete = [dict(entry) for entry in stored if entry.get("storageKey") not in kept_keys]
    final = kept + [dict(entry) for entry in new_uploads]

    if ignored:
        logger.warning(
            f"Ignoring {len(ignored)} keep-list key(s) not owned by the record",
            extra={"ignored_storage_keys": ignored},
        )

    return ReconciliationPlan(kept=kept, to_delete=to_delete, final=final, ignored_keys=ignored)
