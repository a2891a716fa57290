#!/usr/bin/env python3
"""
Tests for DataStore interface contracts across record stores.

Both persisted records (entries and favorites) share the JSON record mixin,
so they must behave the same way for absent, corrupt and unwritable files.
"""

import json

import pytest

from pft.core.errors import PersistenceError
from pft.core.json_utils import format_json, read_json, write_json
from pft.entries.datastore import EntryRecordStore
from pft.tips.favorites import FavoritesRecordStore

STORE_CLASSES = pytest.mark.parametrize(
    "store_class",
    [EntryRecordStore, FavoritesRecordStore],
    ids=["EntryRecordStore", "FavoritesRecordStore"],
)


@pytest.mark.storage
@STORE_CLASSES
def test_load_returns_empty_when_no_data(store_class, temp_dir):
    """Test that an absent record loads as an empty collection."""
    store = store_class(temp_dir / "record.json")

    assert not store.exists()
    assert store.load() == []
    assert store.last_modified() is None
    assert store.age_days() is None
    assert store.item_count() is None
    assert store.size_bytes() is None


@pytest.mark.storage
@STORE_CLASSES
def test_load_raises_on_invalid_json(store_class, temp_dir):
    """Test that corrupt content raises PersistenceError."""
    path = temp_dir / "record.json"
    path.write_text("{not json", encoding="utf-8")
    store = store_class(path)

    with pytest.raises(PersistenceError) as exc_info:
        store.load()
    assert exc_info.value.path == str(path)
    assert store.item_count() is None


@pytest.mark.storage
@STORE_CLASSES
def test_load_raises_when_not_an_array(store_class, temp_dir):
    """Test that a JSON object instead of an array raises PersistenceError."""
    path = temp_dir / "record.json"
    path.write_text(json.dumps({"id": "1"}), encoding="utf-8")

    with pytest.raises(PersistenceError):
        store_class(path).load()


@pytest.mark.storage
@STORE_CLASSES
def test_save_raises_when_path_is_directory(store_class, temp_dir):
    """Test that an unwritable target raises PersistenceError."""
    path = temp_dir / "record.json"
    path.mkdir()

    with pytest.raises(PersistenceError):
        store_class(path).save([])


@pytest.mark.storage
def test_metadata_after_save(temp_dir):
    """Test file metadata once a record exists."""
    store = FavoritesRecordStore(temp_dir / "nested" / "favs.json")
    store.save(["t1", "t2"])

    assert store.exists()
    assert store.item_count() == 2
    assert store.age_days() == 0
    assert store.size_bytes() > 0
    assert store.summary_text() == "Favorites: 2 tips"


class TestJsonUtils:
    """Test the JSON read/write helpers."""

    @pytest.mark.storage
    def test_write_then_read(self, temp_dir):
        """Test a written file reads back identically."""
        path = temp_dir / "a" / "b.json"
        data = [{"title": "Café", "amount": 12.5}]

        write_json(path, data)

        assert read_json(path) == data
        assert "Café" in path.read_text(encoding="utf-8")

    @pytest.mark.storage
    def test_write_leaves_no_temp_files(self, temp_dir):
        """Test atomic write cleans up after itself."""
        path = temp_dir / "record.json"
        write_json(path, [1, 2, 3])
        write_json(path, [4])

        assert [p.name for p in temp_dir.iterdir()] == ["record.json"]
        assert read_json(path) == [4]

    @pytest.mark.storage
    def test_failed_write_keeps_previous_content(self, temp_dir):
        """Test unserializable data doesn't clobber the existing file."""
        path = temp_dir / "record.json"
        write_json(path, ["keep"])

        with pytest.raises(TypeError):
            write_json(path, [object()])

        assert read_json(path) == ["keep"]
        assert [p.name for p in temp_dir.iterdir()] == ["record.json"]

    def test_format_json(self):
        """Test pretty-printing with optional key sorting."""
        assert format_json({"b": 1, "a": 2}, sort_keys=True) == '{\n  "a": 2,\n  "b": 1\n}'
