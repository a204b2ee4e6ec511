"""Tests for the key-value settings store."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from gallery.storage.settings import SettingsStore


@pytest.fixture
def settings(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "prefs" / "settings.json")


def _stored_keys(settings: SettingsStore) -> list[str]:
    return sorted(json.loads(settings.path.read_text(encoding="utf-8")))


class TestSettingsStore:
    def test_missing_file(self, settings: SettingsStore):
        assert settings.get("people") is None
        assert not settings.path.exists()

    def test_set_then_get(self, settings: SettingsStore):
        assert settings.set("people", b"\x00\x01blob")
        assert settings.get("people") == b"\x00\x01blob"

    def test_survives_new_instance(self, settings: SettingsStore):
        settings.set("people", b"abc")
        assert SettingsStore(settings.path).get("people") == b"abc"

    def test_overwrite(self, settings: SettingsStore):
        settings.set("people", b"old")
        settings.set("people", b"new")
        assert settings.get("people") == b"new"

    def test_other_keys_untouched(self, settings: SettingsStore):
        settings.set("a", b"1")
        settings.set("b", b"2")
        assert _stored_keys(settings) == ["a", "b"]
        assert settings.get("a") == b"1"

    def test_no_temp_files_left(self, settings: SettingsStore):
        settings.set("a", b"1")
        settings.set("a", b"2")
        assert [p.name for p in settings.path.parent.iterdir()] == ["settings.json"]


class TestAtomicWrite:
    def test_failed_replace_keeps_previous_value(self, settings: SettingsStore, monkeypatch):
        settings.set("people", b"old")

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", fail_replace)

        assert settings.set("people", b"new") is False
        assert settings.get("people") == b"old"
        assert [p.name for p in settings.path.parent.iterdir()] == ["settings.json"]

    def test_failed_dump_keeps_previous_value(self, settings: SettingsStore, monkeypatch):
        settings.set("people", b"old")

        def fail_dump(*args, **kwargs):
            raise OSError("write error")

        monkeypatch.setattr(json, "dump", fail_dump)

        assert settings.set("people", b"new") is False
        assert settings.get("people") == b"old"
        assert not list(settings.path.parent.glob("*.tmp"))


class TestCorruption:
    def test_corrupt_file_reads_as_empty(self, settings: SettingsStore):
        settings.path.parent.mkdir(parents=True)
        settings.path.write_text("{not json", encoding="utf-8")
        assert settings.get("people") is None

    def test_deeply_nested_file_reads_as_empty(self, settings: SettingsStore):
        settings.path.parent.mkdir(parents=True)
        settings.path.write_text("[" * 200000, encoding="utf-8")
        assert settings.get("people") is None

    def test_non_object_file(self, settings: SettingsStore):
        settings.path.parent.mkdir(parents=True)
        settings.path.write_text("[1, 2]", encoding="utf-8")
        assert settings.get("1") is None
        assert settings.set("people", b"x")
        assert _stored_keys(settings) == ["people"]

    def test_invalid_base64_value(self, settings: SettingsStore):
        settings.path.parent.mkdir(parents=True)
        settings.path.write_text(json.dumps({"people": "***", "n": 5}), encoding="utf-8")
        assert settings.get("people") is None
        assert settings.get("n") is None

    def test_corrupt_file_replaced_on_write(self, settings: SettingsStore):
        settings.path.parent.mkdir(parents=True)
        settings.path.write_text("garbage", encoding="utf-8")
        assert settings.set("people", b"x")
        assert settings.get("people") == b"x"

    def test_unwritable_location(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = SettingsStore(blocker / "settings.json")
        assert store.set("people", b"x") is False
