"""
Enumerations shared by models and schemas.
"""

from enum import Enum


class MediaKind(str, Enum):
    """
    Resource kind of an uploaded asset on the media host.

    The host partitions its deletion API by kind, so the kind must be
    stored with every attachment reference.
    """

    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"


class LaporanStatus(str, Enum):
    """Triage status of a complaint"""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class LaporanPriority(str, Enum):
    """Triage priority of a complaint"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
