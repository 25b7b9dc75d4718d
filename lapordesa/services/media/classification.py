"""
Media kind classification by file extension.

The media host files every asset under one resource kind, chosen at upload
time from the extension, and needs that same kind again to delete it.
"""

from typing import Any, Optional

from lapordesa.models.enums import MediaKind

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp"})
VIDEO_EXTENSIONS = frozenset({"mp4", "mov", "mkv", "avi"})
RAW_EXTENSIONS = frozenset({"pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx"})

SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS | RAW_EXTENSIONS


def file_extension(filename: Optional[str]) -> str:
    """Lower-cased extension without the dot, or '' when there is none."""
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].strip().lower()


def classify_media_kind(filename: Optional[str]) -> Optional[MediaKind]:
    """
    Resource kind for an uploaded file, or None if the format is not accepted.

    >>> classify_media_kind("Foto.JPG")
    <MediaKind.IMAGE: 'image'>
    >>> classify_media_kind("notulen.docx")
    <MediaKind.RAW: 'raw'>
    >>> classify_media_kind("script.sh") is None
    True
    """
    ext = file_extension(filename)
    if ext in IMAGE_EXTENSIONS:
        return MediaKind.IMAGE
    if ext in VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    if ext in RAW_EXTENSIONS:
        return MediaKind.RAW
    return None


def coerce_media_kind(value: Any) -> MediaKind:
    """Kind stored on an attachment; missing or unrecognized values mean raw."""
    if isinstance(value, MediaKind):
        return value
    try:
        return MediaKind(value)
    except ValueError:
        return MediaKind.RAW
