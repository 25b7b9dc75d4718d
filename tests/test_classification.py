import pytest

from lapordesa.models.enums import MediaKind
from lapordesa.services.media.classification import (
    SUPPORTED_EXTENSIONS,
    classify_media_kind,
    coerce_media_kind,
    file_extension,
)


@pytest.mark.parametrize(
    "filename, kind",
    [
        ("foto.jpg", MediaKind.IMAGE),
        ("foto.JPEG", MediaKind.IMAGE),
        ("banner.png", MediaKind.IMAGE),
        ("banner.webp", MediaKind.IMAGE),
        ("rapat.mp4", MediaKind.VIDEO),
        ("rapat.MOV", MediaKind.VIDEO),
        ("rapat.mkv", MediaKind.VIDEO),
        ("rapat.avi", MediaKind.VIDEO),
        ("surat.pdf", MediaKind.RAW),
        ("surat.doc", MediaKind.RAW),
        ("surat.docx", MediaKind.RAW),
        ("anggaran.xls", MediaKind.RAW),
        ("anggaran.xlsx", MediaKind.RAW),
        ("paparan.ppt", MediaKind.RAW),
        ("paparan.pptx", MediaKind.RAW),
    ],
)
def test_classify_supported_extensions(filename, kind):
    assert classify_media_kind(filename) is kind


@pytest.mark.parametrize("filename", ["script.sh", "arsip.zip", "README", "", None, "foto.jpg.exe"])
def test_classify_rejects_unsupported(filename):
    assert classify_media_kind(filename) is None


def test_file_extension_uses_last_suffix():
    assert file_extension("laporan.final.PDF") == "pdf"
    assert file_extension("tanpa_ekstensi") == ""


def test_supported_extensions_cover_all_kinds():
    assert {"jpg", "mp4", "pdf"} <= SUPPORTED_EXTENSIONS


@pytest.mark.parametrize(
    "value, kind",
    [
        ("image", MediaKind.IMAGE),
        ("video", MediaKind.VIDEO),
        ("raw", MediaKind.RAW),
        (MediaKind.VIDEO, MediaKind.VIDEO),
        (None, MediaKind.RAW),
        ("document", MediaKind.RAW),
        ("", MediaKind.RAW),
    ],
)
def test_coerce_media_kind_defaults_to_raw(value, kind):
    assert coerce_media_kind(value) is kind
