"""
Unit Tests — Config Store
=========================
load() never raises; save() creates the directory and surfaces OSError.
"""
import json

import pytest

from daily.models.app_config import AppConfig
from daily.models.field_mapping import FieldMapping
from daily.services.config_store import ConfigStore


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "daily")


def test_missing_file_loads_empty(store):
    config = store.load()
    assert config == AppConfig()
    assert config.is_ready() is False


def test_corrupt_json_loads_empty(store):
    store.config_dir.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() == AppConfig()


def test_non_utf8_bytes_load_empty(store):
    store.config_dir.mkdir(parents=True)
    store.path.write_bytes(b"\xff\xfe{bad")
    assert store.load() == AppConfig()


def test_wrong_shape_loads_empty(store):
    store.config_dir.mkdir(parents=True)
    store.path.write_text(json.dumps(["form_url"]), encoding="utf-8")
    assert store.load() == AppConfig()


def test_unreadable_path_loads_empty(store):
    # A directory where the file should be
    store.path.mkdir(parents=True)
    assert store.load() == AppConfig()


def test_partial_mapping_loads_incomplete(store):
    store.config_dir.mkdir(parents=True)
    store.path.write_text(
        json.dumps({"form_url": "https://docs.google.com/forms/d/e/X/formResponse",
                    "field_mappings": {"date": "1", "issue_link": "2"}}),
        encoding="utf-8",
    )
    config = store.load()
    assert config.field_mappings.date == "1"
    assert config.field_mappings.hours_spent == ""
    assert config.is_ready() is False


def test_save_creates_directory_and_round_trips(store, mapping):
    config = AppConfig(form_url="https://docs.google.com/forms/d/e/X/formResponse", field_mappings=mapping)
    path = store.save(config)

    assert path == store.path
    assert store.config_dir.is_dir()
    on_disk = json.loads(store.path.read_text(encoding="utf-8"))
    assert on_disk["form_url"] == config.form_url
    assert on_disk["field_mappings"]["hours_spent"] == "106"
    assert store.load() == config
    assert store.load().is_ready() is True


def test_save_leaves_no_temp_files(store, mapping):
    store.save(AppConfig(form_url="u", field_mappings=mapping))
    assert [p.name for p in store.config_dir.iterdir()] == ["config.json"]


def test_save_failure_raises_oserror(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied", encoding="utf-8")
    store = ConfigStore(blocker)
    with pytest.raises(OSError):
        store.save(AppConfig(form_url="u", field_mappings=FieldMapping()))
