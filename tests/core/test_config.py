"""Tests for jiracli.config: load, accessors, field/preset mutators, persist."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jiracli.config import ConfigStore, write_atomic
from jiracli.errors import ConfigMissingError, ConfigParseError, ConfigWriteError


class TestLoad:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigMissingError) as exc_info:
            ConfigStore.load(tmp_path / "nope.json")
        assert "does not exist" in str(exc_info.value)
        assert exc_info.value.path == tmp_path / "nope.json"

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigParseError):
            ConfigStore.load(path)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigParseError, match="object"):
            ConfigStore.load(path)

    def test_fields_must_be_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"fields": [1]}))
        with pytest.raises(ConfigParseError, match="fields"):
            ConfigStore.load(path)

    def test_presets_must_map_to_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"presets": {"a": 1}}))
        with pytest.raises(ConfigParseError, match="presets"):
            ConfigStore.load(path)

    def test_accessors(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        assert store.credentials["host"] == "jira.example.com"
        assert store.fields == []
        assert store.presets == {}
        assert store.latest_project is None

    def test_absent_members_default_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"jira": {"host": "h"}}))
        store = ConfigStore.load(path)
        assert store.fields == []
        assert store.presets == {}
        assert store.latest_project is None


class TestFields:
    def test_add_twice_persists_once(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        assert store.add_field("Story Points") is True
        assert store.add_field("Story Points") is False
        store.persist()
        assert ConfigStore.load(config_file).fields == ["Story Points"]

    def test_add_keeps_order(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        store.add_field("B")
        store.add_field("A")
        assert store.fields == ["B", "A"]

    def test_remove_missing_is_noop(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        store.add_field("Team")
        assert store.remove_field("Nope") is False
        assert store.fields == ["Team"]

    def test_remove_present(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        store.add_field("Team")
        assert store.remove_field("Team") is True
        assert store.fields == []

    def test_mutation_is_memory_only(self, config_file: Path) -> None:
        before = config_file.read_text()
        store = ConfigStore.load(config_file)
        store.add_field("Team")
        store.latest_project = "ABC"
        assert config_file.read_text() == before


class TestPresets:
    def test_add_and_remove(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        assert store.add_preset("mine", "assignee = currentUser()") is True
        assert store.add_preset("mine", "other") is False
        assert store.presets == {"mine": "assignee = currentUser()"}
        assert store.remove_preset("mine") is True
        assert store.remove_preset("mine") is False


class TestPersist:
    def test_round_trip_keeps_unknown_members(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"jira": {"host": "h", "extra": 1}, "fields": [], "theme": "dark"}))
        store = ConfigStore.load(path)
        store.latest_project = "ABC"
        store.persist()
        data = json.loads(path.read_text())
        assert data["theme"] == "dark"
        assert data["jira"]["extra"] == 1
        assert data["latestProject"] == "ABC"

    def test_persist_is_valid_json_with_newline(self, config_file: Path) -> None:
        store = ConfigStore.load(config_file)
        store.add_preset("q", 'summary ~ "quote"')
        store.persist()
        text = config_file.read_text()
        assert text.endswith("\n")
        assert json.loads(text)["presets"] == {"q": 'summary ~ "quote"'}
        assert not config_file.with_suffix(".json.tmp").exists()

    def test_write_failure(self, tmp_path: Path) -> None:
        store = ConfigStore.create(tmp_path / "missing-dir" / "c.json", {"host": "h"})
        with pytest.raises(ConfigWriteError):
            store.persist()

    def test_create_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "new.json"
        ConfigStore.create(path, {"host": "h"}).persist()
        assert json.loads(path.read_text()) == {
            "jira": {"host": "h"},
            "fields": [],
            "presets": {},
            "latestProject": None,
        }


class TestWriteAtomic:
    def test_replaces_content(self, tmp_path: Path) -> None:
        path = tmp_path / "f.json"
        path.write_text("old")
        write_atomic(path, "new")
        assert path.read_text() == "new"
        assert not (tmp_path / "f.json.tmp").exists()
