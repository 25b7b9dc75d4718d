"""
Media host integration: classification, upload, and attachment cleanup.
"""

from lapordesa.services.media.classification import classify_media_kind, coerce_media_kind
from lapordesa.services.media.reconciliation import (
    AttachmentCleaner,
    KeepListError,
    PurgeReport,
    ReconciliationPlan,
    decode_keep_list,
    partition_by_kind,
    plan_reconciliation,
)
from lapordesa.services.media.storage import (
    CloudinaryMediaStorage,
    DeletionOutcome,
    IncomingFile,
    MediaStorage,
    MediaStorageError,
    UploadedMedia,
)
from lapordesa.services.media.uploader import MediaUploader, UploadRejected

__all__ = [
    "AttachmentCleaner",
    "CloudinaryMediaStorage",
    "DeletionOutcome",
    "IncomingFile",
    "KeepListError",
    "MediaStorage",
    "MediaStorageError",
    "MediaUploader",
    "PurgeReport",
    "ReconciliationPlan",
    "UploadRejected",
    "UploadedMedia",
    "classify_media_kind",
    "coerce_media_kind",
    "decode_keep_list",
    "partition_by_kind",
    "plan_reconciliation",
]
