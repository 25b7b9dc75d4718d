import pytest

from lapordesa.models.enums import MediaKind
from lapordesa.schemas.attachment import KeepListEntry
from lapordesa.services.media import (
    AttachmentCleaner,
    KeepListError,
    decode_keep_list,
    partition_by_kind,
    plan_reconciliation,
)

from conftest import FakeMediaStorage


def attachment(key, kind="image"):
    entry = {"url": f"https://media.test/{key}", "storageKey": key}
    if kind is not None:
        entry["kind"] = kind
    return entry


def keep(*keys):
    return [KeepListEntry(storage_key=key) for key in keys]


class TestPartitionByKind:
    def test_groups_in_kind_order(self):
        groups = partition_by_kind([
            attachment("doc-1", "raw"),
            attachment("img-1", "image"),
            attachment("vid-1", "video"),
            attachment("img-2", "image"),
        ])

        assert list(groups) == [MediaKind.IMAGE, MediaKind.VIDEO, MediaKind.RAW]
        assert groups[MediaKind.IMAGE] == ["img-1", "img-2"]
        assert groups[MediaKind.VIDEO] == ["vid-1"]
        assert groups[MediaKind.RAW] == ["doc-1"]

    def test_missing_or_unknown_kind_is_raw(self):
        groups = partition_by_kind([attachment("a", None), attachment("b", "document")])
        assert groups == {MediaKind.RAW: ["a", "b"]}

    def test_empty_groups_are_dropped(self):
        assert partition_by_kind([attachment("img-1")]) == {MediaKind.IMAGE: ["img-1"]}
        assert partition_by_kind([]) == {}

    def test_duplicate_and_keyless_entries(self):
        groups = partition_by_kind([
            attachment("img-1"),
            attachment("img-1"),
            {"url": "https://media.test/orphan", "kind": "image"},
            {"url": "https://media.test/blank", "storageKey": "", "kind": "image"},
        ])
        assert groups == {MediaKind.IMAGE: ["img-1"]}


class TestDecodeKeepList:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent_means_keep_nothing(self, raw):
        assert decode_keep_list(raw) == []

    def test_decodes_entries_in_order(self):
        entries = decode_keep_list(
            '[{"url": "https://media.test/b", "storageKey": "b", "kind": "image"}, {"storageKey": "a"}]'
        )
        assert [entry.storage_key for entry in entries] == ["b", "a"]

    def test_accepts_legacy_key_names(self):
        entries = decode_keep_list('[{"filename": "a"}, {"storage_key": "b"}]')
        assert [entry.storage_key for entry in entries] == ["a", "b"]

    def test_empty_array(self):
        assert decode_keep_list("[]") == []

    @pytest.mark.parametrize(
        "raw",
        [
            "bukan json",
            '{"storageKey": "a"}',
            '["a", "b"]',
            '[{"url": "https://media.test/a"}]',
            '[{"storageKey": ""}]',
            '[{"storageKey": null}]',
        ],
    )
    def test_malformed_payload_is_rejected(self, raw):
        with pytest.raises(KeepListError):
            decode_keep_list(raw)


class TestPlanReconciliation:
    def test_final_is_kept_then_new_uploads(self):
        stored = [attachment("a"), attachment("b"), attachment("c", "raw")]
        new = [attachment("d", "video")]

        plan = plan_reconciliation(stored, keep("c", "a"), new)

        assert [entry["storageKey"] for entry in plan.kept] == ["c", "a"]
        assert [entry["storageKey"] for entry in plan.to_delete] == ["b"]
        assert [entry["storageKey"] for entry in plan.final] == ["c", "a", "d"]

    def test_kept_entries_come_from_stored_record(self):
        stored = [attachment("a", "video")]
        plan = plan_reconciliation(stored, keep("a"))
        assert plan.kept == [stored[0]]
        assert plan.kept[0]["kind"] == "video"

    def test_duplicate_keep_keys_kept_once(self):
        plan = plan_reconciliation([attachment("a"), attachment("b")], keep("a", "a"))
        assert [entry["storageKey"] for entry in plan.final] == ["a"]
        assert [entry["storageKey"] for entry in plan.to_delete] == ["b"]

    def test_unknown_keep_keys_are_ignored(self):
        plan = plan_reconciliation([attachment("a")], keep("zzz", "a"))
        assert plan.ignored_keys == ["zzz"]
        assert [entry["storageKey"] for entry in plan.final] == ["a"]
        assert plan.to_delete == []

    def test_empty_keep_list_drops_everything(self):
        stored = [attachment("a"), attachment("b", "raw")]
        plan = plan_reconciliation(stored, [])
        assert plan.kept == []
        assert plan.final == []
        assert plan.to_delete == stored

    def test_does_not_mutate_inputs(self):
        stored = [attachment("a"), attachment("b")]
        snapshot = [dict(entry) for entry in stored]

        plan = plan_reconciliation(stored, keep("a"))
        plan.kept[0]["url"] = "changed"

        assert stored == snapshot


class TestAttachmentCleaner:
    def test_one_call_per_kind(self):
        storage = FakeMediaStorage()
        cleaner = AttachmentCleaner(storage)

        report = cleaner.purge(
            [attachment("img-1"), attachment("doc-1", "raw"), attachment("img-2")],
            reason="test",
        )

        assert report.ok
        assert storage.delete_calls == [
            (MediaKind.IMAGE, ["img-1", "img-2"]),
            (MediaKind.RAW, ["doc-1"]),
        ]

    def test_nothing_to_delete_makes_no_calls(self):
        storage = FakeMediaStorage()
        report = AttachmentCleaner(storage).purge([], reason="test")
        assert report.ok
        assert storage.delete_calls == []

    def test_failure_is_reported_not_raised(self):
        storage = FakeMediaStorage()
        storage.fail_delete_kinds = {MediaKind.IMAGE}
        cleaner = AttachmentCleaner(storage)

        report = cleaner.purge(
            [attachment("img-1"), attachment("img-2"), attachment("vid-1", "video")],
            reason="test",
        )

        assert not report.ok
        assert report.failed == {MediaKind.IMAGE: ["img-1", "img-2"]}
        assert report.orphaned_keys == ["img-1", "img-2"]
        assert (MediaKind.VIDEO, ["vid-1"]) in storage.delete_calls
        assert cleaner.orphaned_total == 2

    def test_unknown_keys_are_not_a_failure(self):
        storage = FakeMediaStorage()
        report = AttachmentCleaner(storage).purge([attachment("gone")], reason="test")
        assert report.ok

    def test_unreadable_attachments_are_reported_not_raised(self):
        storage = FakeMediaStorage()

        report = AttachmentCleaner(storage).purge([attachment("img-1"), "bukan-lampiran"], reason="test")

        assert report.requested == {}
        assert storage.delete_calls == []
