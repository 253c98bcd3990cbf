"""Tests for key-value stores."""

import json
from pathlib import Path

import pytest

from funfacts.errors import StorageError
from funfacts.storage import JsonFileStore, MemoryStore


async def test_memory_store_round_trip() -> None:
    store = MemoryStore()
    assert await store.get("k") is None
    await store.set("k", "v")
    assert await store.get("k") == "v"
    assert "k" in store
    await store.set("k", "v2")
    assert await store.get("k") == "v2"


async def test_memory_store_delete_missing_is_noop() -> None:
    store = MemoryStore({"a": "1"})
    await store.delete("missing")
    await store.delete("a")
    assert await store.get("a") is None


async def test_json_file_store_missing_file_reads_empty(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "scores.json")
    assert await store.get("anything") is None
    assert not store.path.exists()


async def test_json_file_store_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "scores.json"
    store = JsonFileStore(path)
    await store.set("current", '{"x": 1}')

    assert path.exists()
    assert json.loads(path.read_text()) == {"current": '{"x": 1}'}


async def test_json_file_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    await JsonFileStore(path).set("history", "[]")
    assert await JsonFileStore(path).get("history") == "[]"


async def test_json_file_store_delete(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "scores.json")
    await store.set("a", "1")
    await store.set("b", "2")
    await store.delete("a")
    await store.delete("never-set")
    assert await store.get("a") is None
    assert await store.get("b") == "2"


async def test_json_file_store_corrupt_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    store = JsonFileStore(path)
    with pytest.raises(StorageError, match="Cannot read"):
        await store.get("a")


async def test_json_file_store_non_object_raises(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(StorageError, match="JSON object"):
        await JsonFileStore(path).get("a")


async def test_json_file_store_unwritable_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = JsonFileStore(blocker / "scores.json")
    with pytest.raises(StorageError, match="Cannot write"):
        await store.set("a", "1")


async def test_json_file_store_write_recovers_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text('{"score_history": "[{\\"id\\"')
    store = JsonFileStore(path)

    await store.set("a", "1")

    assert await store.get("a") == "1"
    assert json.loads(path.read_text()) == {"a": "1"}


async def test_json_file_store_delete_recovers_non_object(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]")
    store = JsonFileStore(path)

    await store.delete("a")
    await store.set("b", "2")

    assert await store.get("b") == "2"


async def test_json_file_store_leaves_no_temp_file(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "scores.json")
    await store.set("a", "1")
    assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]
