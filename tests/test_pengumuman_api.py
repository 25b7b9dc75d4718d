import json

from lapordesa.models.enums import MediaKind

from conftest import upload

TEXT = {"title": "Kerja bakti", "body": "Kerja bakti hari Minggu pukul 07.00."}


def create(client, headers, files=(), **overrides):
    return client.post(
        "/api/pengumuman",
        data=dict(TEXT, **overrides),
        files=[("imageUrls", f) for f in files],
        headers=headers,
    )


def update(client, headers, pengumuman_id, keep=None, files=(), raw_keep=None, **overrides):
    data = dict(TEXT, **overrides)
    if raw_keep is not None:
        data["existingFiles"] = raw_keep
    elif keep is not None:
        data["existingFiles"] = json.dumps(keep)
    return client.put(
        f"/api/pengumuman/{pengumuman_id}",
        data=data,
        files=[("imageUrls", f) for f in files],
        headers=headers,
    )


def test_create_with_images(client, media, auth_headers):
    response = create(client, auth_headers, files=[upload("a.jpg"), upload("b.png")])

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Pengumuman berhasil dibuat"
    assert body["data"]["title"] == "Kerja bakti"
    assert [a["kind"] for a in body["data"]["attachments"]] == ["image", "image"]
    assert all(set(a) == {"url", "storageKey", "kind"} for a in body["data"]["attachments"])


def test_create_without_attachments_is_allowed(client, auth_headers):
    response = create(client, auth_headers)

    assert response.status_code == 201
    assert response.json()["data"]["attachments"] == []


def test_create_requires_title_and_body(client, media, auth_headers):
    response = client.post(
        "/api/pengumuman",
        data={"title": "Kerja bakti"},
        files=[("imageUrls", upload("a.jpg"))],
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Judul dan Isi tidak boleh kosong", "code": "VALIDATION_ERROR"}
    assert media.uploads == []


def test_create_limits_file_count(client, media, auth_headers):
    response = create(client, auth_headers, files=[upload(f"{i}.jpg") for i in range(4)])

    assert response.status_code == 400
    assert media.uploads == []


def test_create_requires_admin(client, media):
    response = create(client, {}, files=[upload("a.jpg")])

    assert response.status_code == 401
    assert media.uploads == []
    assert client.get("/api/pengumuman").json() == []


def test_list_is_public(client, auth_headers):
    create(client, auth_headers, title="Satu")
    create(client, auth_headers, title="Dua")

    response = client.get("/api/pengumuman")

    assert response.status_code == 200
    assert sorted(item["title"] for item in response.json()) == ["Dua", "Satu"]


def test_update_keeps_one_image_and_adds_video(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg"), upload("b.jpg")]).json()["data"]
    kept, dropped = created["attachments"]

    response = update(
        client,
        auth_headers,
        created["id"],
        keep=[kept],
        files=[upload("rapat.mp4")],
        title="Kerja bakti (diubah)",
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert response.json()["message"] == "Pengumuman berhasil diupdate"
    assert data["title"] == "Kerja bakti (diubah)"
    assert len(data["attachments"]) == 2
    assert data["attachments"][0] == kept
    assert data["attachments"][1]["kind"] == "video"
    assert media.delete_calls == [(MediaKind.IMAGE, [dropped["storageKey"]])]


def test_update_keep_list_order_wins(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg"), upload("b.pdf")]).json()["data"]
    first, second = created["attachments"]

    response = update(client, auth_headers, created["id"], keep=[second, first])

    assert response.status_code == 200
    assert response.json()["data"]["attachments"] == [second, first]
    assert media.delete_calls == []


def test_update_keep_list_by_storage_key_only(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg"), upload("b.pdf")]).json()["data"]
    image, document = created["attachments"]

    response = update(client, auth_headers, created["id"], keep=[{"storageKey": document["storageKey"]}])

    assert response.status_code == 200
    assert response.json()["data"]["attachments"] == [document]
    assert media.delete_calls == [(MediaKind.IMAGE, [image["storageKey"]])]


def test_update_to_zero_attachments_is_rejected_without_side_effects(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg")]).json()["data"]

    response = update(client, auth_headers, created["id"], keep=[], title="Judul baru")

    assert response.status_code == 400
    assert response.json() == {
        "error": "Pengumuman harus memiliki minimal satu lampiran",
        "code": "VALIDATION_ERROR",
    }
    assert media.delete_calls == []
    stored = client.get("/api/pengumuman").json()[0]
    assert stored["title"] == "Kerja bakti"
    assert stored["attachments"] == created["attachments"]


def test_update_without_existing_files_keeps_nothing(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg")]).json()["data"]

    response = update(client, auth_headers, created["id"], files=[upload("b.webp")])

    assert response.status_code == 200
    attachments = response.json()["data"]["attachments"]
    assert len(attachments) == 1
    assert attachments[0]["storageKey"] != created["attachments"][0]["storageKey"]
    assert media.delete_calls == [(MediaKind.IMAGE, [created["attachments"][0]["storageKey"]])]


def test_update_rejects_malformed_keep_list(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg")]).json()["data"]

    for raw in ("bukan json", '{"storageKey": "x"}', '[{"url": "https://media.test/a"}]'):
        response = update(client, auth_headers, created["id"], raw_keep=raw, files=[upload("b.jpg")])
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    assert media.delete_calls == []
    assert len(media.uploads) == 1


def test_update_ignores_keys_not_owned_by_record(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg")]).json()["data"]
    own = created["attachments"][0]

    response = update(client, auth_headers, created["id"], keep=[own, {"storageKey": "milik-orang-lain"}])

    assert response.status_code == 200
    assert response.json()["data"]["attachments"] == [own]
    assert media.delete_calls == []


def test_update_missing_pengumuman(client, media, auth_headers):
    response = update(client, auth_headers, "tidak-ada", keep=[], files=[upload("a.jpg")])

    assert response.status_code == 404
    assert response.json() == {"error": "Pengumuman tidak ditemukan", "code": "RESOURCE_NOT_FOUND"}
    assert media.uploads == []


def test_update_succeeds_when_remote_delete_fails(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg"), upload("b.jpg")]).json()["data"]
    media.fail_delete_kinds = {MediaKind.IMAGE}

    response = update(client, auth_headers, created["id"], keep=[created["attachments"][0]])

    assert response.status_code == 200
    assert response.json()["data"]["attachments"] == [created["attachments"][0]]
    assert client.get("/api/health").json()["orphanedMedia"] == 1


def test_update_requires_admin(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg")]).json()["data"]

    response = update(client, {}, created["id"], keep=[])

    assert response.status_code == 401
    assert media.delete_calls == []


def test_delete_removes_media(client, media, auth_headers):
    created = create(client, auth_headers, files=[upload("a.jpg"), upload("b.jpg")]).json()["data"]

    response = client.delete(f"/api/pengumuman/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Pengumuman berhasil dihapus"
    assert response.json()["data"]["id"] == created["id"]
    assert media.delete_calls == [
        (MediaKind.IMAGE, [a["storageKey"] for a in created["attachments"]]),
    ]
    assert client.get("/api/pengumuman").json() == []


def test_delete_missing_pengumuman(client, auth_headers):
    response = client.delete("/api/pengumuman/tidak-ada", headers=auth_headers)

    assert response.status_code == 404
