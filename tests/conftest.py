import io
from typing import Dict, List, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from lapordesa.config.settings import Settings
from lapordesa.main import create_app
from lapordesa.models.enums import MediaKind
from lapordesa.services.media import (
    DeletionOutcome,
    IncomingFile,
    MediaStorageError,
    UploadedMedia,
)

JWT_SECRET = "test-secret-key-with-enough-length-0123456789"


class FakeMediaStorage:
    """In-memory media host that records every call."""

    def __init__(self):
        self.objects: Dict[str, MediaKind] = {}
        self.uploads: List[Tuple[str, MediaKind, str]] = []
        self.delete_calls: List[Tuple[MediaKind, List[str]]] = []
        self.fail_upload_after = None
        self.fail_delete_kinds = set()
        self._counter = 0

    def upload(self, file: IncomingFile, kind: MediaKind, folder: str) -> UploadedMedia:
        if self.fail_upload_after is not None and len(self.uploads) >= self.fail_upload_after:
            raise MediaStorageError(f"Upload of {file.filename!r} failed: host unavailable")
        self._counter += 1
        key = f"{folder}/file-{self._counter}"
        self.objects[key] = kind
        self.uploads.append((file.filename, kind, folder))
        return UploadedMedia(
            url=f"https://media.test/{kind.value}/upload/{key}",
            storage_key=key,
            original_name=file.filename,
            kind=kind,
        )

    def batch_delete(self, storage_keys: Sequence[str], kind: MediaKind) -> DeletionOutcome:
        self.delete_calls.append((kind, list(storage_keys)))
        if kind in self.fail_delete_kinds:
            raise MediaStorageError(f"Deleting {len(storage_keys)} {kind.value} resource(s) failed")
        outcome = DeletionOutcome(kind=kind)
        for key in storage_keys:
            if self.objects.get(key) == kind:
                del self.objects[key]
                outcome.deleted.append(key)
            else:
                outcome.not_found.append(key)
        return outcome

    def seed(self, key: str, kind: MediaKind) -> Dict[str, str]:
        self.objects[key] = kind
        return {"url": f"https://media.test/{key}", "storageKey": key, "kind": kind.value}


def make_settings(**overrides) -> Settings:
    values = dict(
        DATABASE_URL="sqlite://",
        ENVIRONMENT="test",
        JWT_SECRET_KEY=JWT_SECRET,
        PASSWORD_BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
        LOG_FORMAT="text",
        CLOUDINARY_CLOUD_NAME="test",
        CLOUDINARY_API_KEY="key",
        CLOUDINARY_API_SECRET="secret",
    )
    values.update(overrides)
    return Settings(**values)


def upload(filename: str, content: bytes = b"data", content_type: str = "application/octet-stream"):
    return (filename, io.BytesIO(content), content_type)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def media():
    return FakeMediaStorage()


@pytest.fixture
def app(settings, media):
    return create_app(settings, media_storage=media)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    credentials = {"username": "kades", "password": "rahasia-desa"}
    assert client.post("/api/admin/register", json=credentials).status_code == 201
    response = client.post("/api/admin/login", json=credentials)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
