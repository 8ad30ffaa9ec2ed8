"""Tests for SQLiteConfigStore."""

from pathlib import Path

import pytest
from sqlalchemy import Connection, Engine, create_engine, text
from sqlalchemy.exc import OperationalError

from syncflags.db.errors import ReadOnlyStoreError, StoreUnavailableError
from syncflags.storage import SQLiteConfigStore
from syncflags.storage.stores import sqlite as sqlite_store


class TestOpen:
    """Tests for opening existing databases."""

    def test_missing_file_is_unavailable(self, db_path: Path) -> None:
        with pytest.raises(StoreUnavailableError, match="not found"):
            SQLiteConfigStore.open(db_path)

    def test_open_does_not_create_file(self, db_path: Path) -> None:
        with pytest.raises(StoreUnavailableError):
            SQLiteConfigStore.open(db_path)
        assert not db_path.exists()

    def test_directory_is_unavailable(self, tmp_path: Path) -> None:
        with pytest.raises(StoreUnavailableError):
            SQLiteConfigStore.open(tmp_path)

    def test_non_database_file_is_unavailable(self, tmp_path: Path) -> None:
        bogus = tmp_path / "beads.db"
        bogus.write_bytes(b"this is not a sqlite database, just some text" * 100)

        with pytest.raises(StoreUnavailableError) as exc_info:
            SQLiteConfigStore.open(bogus)
        assert exc_info.value.cause is not None

    def test_database_without_config_table_is_unavailable(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "other.db"
        engine = create_engine(f"sqlite:///{path}")
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE issues (id TEXT PRIMARY KEY)"))
        engine.dispose()

        with pytest.raises(StoreUnavailableError, match="no config table"):
            SQLiteConfigStore.open(path)

    def test_open_read_only_by_default(self, make_store) -> None:
        path = make_store({"sync.auto_commit": "true"})

        with SQLiteConfigStore.open(path) as store:
            assert store.read_only is True
            assert store.get_config("sync.auto_commit") == "true"

    def test_open_read_write(self, make_store) -> None:
        path = make_store({})

        with SQLiteConfigStore.open(path, read_only=False) as store:
            store.set_config("daemon.auto_push", "true")

        with SQLiteConfigStore.open(path) as store:
            assert store.get_config("daemon.auto_push") == "true"


class TestReadOnly:
    """Tests for read-only handles."""

    def test_set_rejected(self, make_store) -> None:
        path = make_store({})
        with SQLiteConfigStore.open(path) as store:
            with pytest.raises(ReadOnlyStoreError):
                store.set_config("sync.auto_commit", "true")

    def test_delete_rejected(self, make_store) -> None:
        path = make_store({"sync.auto_commit": "true"})
        with SQLiteConfigStore.open(path) as store:
            with pytest.raises(ReadOnlyStoreError):
                store.delete_config("sync.auto_commit")
            assert store.get_config("sync.auto_commit") == "true"


class TestCreate:
    """Tests for creating databases."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "workspace" / ".beads" / "beads.db"
        with SQLiteConfigStore.create(path):
            pass
        assert path.is_file()

    def test_create_is_idempotent(self, make_store) -> None:
        path = make_store({"sync.auto_commit": "true"})

        with SQLiteConfigStore.create(path) as store:
            assert store.get_config("sync.auto_commit") == "true"

    def test_path_with_spaces(self, tmp_path: Path) -> None:
        path = tmp_path / "my project" / ".beads" / "beads.db"
        with SQLiteConfigStore.create(path) as store:
            store.set_config("sync.auto_push", "true")

        with SQLiteConfigStore.open(path) as store:
            assert store.path == path
            assert store.get_config("sync.auto_push") == "true"

    def test_failed_schema_creation_closes_connection(
        self, db_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A create that fails after connecting releases its connection."""
        connections: list[Connection] = []
        original_connect = Engine.connect

        def _recording_connect(self: Engine) -> Connection:
            conn = original_connect(self)
            connections.append(conn)
            return conn

        def _failing_create_all(*args, **kwargs) -> None:
            raise OperationalError("CREATE TABLE", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Engine, "connect", _recording_connect)
        monkeypatch.setattr(sqlite_store.metadata, "create_all", _failing_create_all)

        with pytest.raises(StoreUnavailableError, match="disk I/O error"):
            SQLiteConfigStore.create(db_path)

        assert connections
        assert all(conn.closed for conn in connections)


class TestPersistence:
    """Writes must be visible to handles opened later."""

    def test_values_survive_reopen(self, make_store) -> None:
        path = make_store({"sync.auto_commit": "true", "daemon.auto_push": "false"})

        with SQLiteConfigStore.open(path) as store:
            assert store.get_all_config() == {
                "daemon.auto_push": "false",
                "sync.auto_commit": "true",
            }

    def test_reader_sees_later_write(self, make_store) -> None:
        """A write committed by another handle is visible to an open reader."""
        path = make_store({})

        with SQLiteConfigStore.open(path) as reader:
            assert reader.get_config("sync.auto_commit") is None
            with SQLiteConfigStore.open(path, read_only=False) as writer:
                writer.set_config("sync.auto_commit", "true")
            assert reader.get_config("sync.auto_commit") == "true"
