"""Tests for storage selection from configuration."""

import pytest

from ballot import config
from ballot.storage import JsonFileStorage, MemoryStorage


class TestStorageFromConfig:
    def test_memory_is_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "STORAGE_BACKEND", "memory")
        assert isinstance(config.storage_from_config(), MemoryStorage)

    def test_json_uses_db_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        path = str(tmp_path / "ballot.json")
        monkeypatch.setattr(config, "DB_PATH", path)

        storage = config.storage_from_config("json")

        assert isinstance(storage, JsonFileStorage)
        assert storage.path == path

    def test_mongo_requires_uri(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "MONGO_URI", None)
        with pytest.raises(ValueError, match="MONGO_URI"):
            config.storage_from_config("mongo")

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage backend"):
            config.storage_from_config("sqlite")
