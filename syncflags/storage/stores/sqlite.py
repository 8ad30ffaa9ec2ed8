"""SQLite implementation of ConfigStore.

Uses SQLAlchemy Core over the ``config`` table of the issue database.
Each handle owns one connection; closing the handle disposes of it.
"""

import sqlite3
from pathlib import Path

from sqlalchemy import Connection, Engine, create_engine, delete, inspect, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from syncflags.db.errors import ReadOnlyStoreError, StoreUnavailableError
from syncflags.observability.logging import get_logger
from syncflags.observability.metrics import STORE_OPEN_FAILURES
from syncflags.storage.schema import CONFIG_TABLE_NAME, config_table, metadata
from syncflags.storage.store import ConfigStore

logger = get_logger(__name__)

DEFAULT_BUSY_TIMEOUT = 5.0


def _make_engine(path: Path, mode: str, busy_timeout: float) -> Engine:
    """Build an engine whose connections open path with the given URI mode."""
    uri = f"{path.resolve().as_uri()}?mode={mode}"

    def _connect() -> sqlite3.Connection:
        return sqlite3.connect(
            uri,
            uri=True,
            timeout=busy_timeout,
            check_same_thread=False,
        )

    return create_engine("sqlite://", creator=_connect, poolclass=NullPool)


class SQLiteConfigStore(ConfigStore):
    """SQLite-backed ConfigStore.

    Use ``open()`` for an existing database and ``create()`` to initialize
    one. Read-only handles reject writes.
    """

    def __init__(
        self,
        engine: Engine,
        connection: Connection,
        path: Path,
        *,
        read_only: bool,
    ) -> None:
        """Wrap an already-validated connection. Prefer open() or create()."""
        self._engine = engine
        self._conn = connection
        self._path = path
        self._read_only = read_only
        self._closed = False

    @classmethod
    def open(
        cls,
        path: str | Path,
        *,
        read_only: bool = True,
        busy_timeout: float = DEFAULT_BUSY_TIMEOUT,
    ) -> "SQLiteConfigStore":
        """Open an existing database.

        Args:
            path: Database file path
            read_only: Open with SQLite's read-only URI mode
            busy_timeout: Seconds to wait on a locked database

        Raises:
            StoreUnavailableError: If the file is missing, is not a SQLite
                database, or has no config table
        """
        path = Path(path)
        if not path.is_file():
            STORE_OPEN_FAILURES.labels(reason="missing").inc()
            logger.warning("config_store_missing", path=str(path))
            raise StoreUnavailableError(f"Config store not found: {path}")

        engine = _make_engine(path, "ro" if read_only else "rw", busy_timeout)
        try:
            conn = engine.connect()
        except SQLAlchemyError as e:
            engine.dispose()
            STORE_OPEN_FAILURES.labels(reason="connect").inc()
            logger.warning("config_store_unavailable", path=str(path), error=str(e))
            raise StoreUnavailableError(
                f"Failed to open config store {path}: {e}", cause=e
            ) from e

        try:
            has_table = inspect(conn).has_table(CONFIG_TABLE_NAME)
        except SQLAlchemyError as e:
            conn.close()
            engine.dispose()
            STORE_OPEN_FAILURES.labels(reason="invalid").inc()
            logger.warning("config_store_unavailable", path=str(path), error=str(e))
            raise StoreUnavailableError(
                f"Not a valid config store {path}: {e}", cause=e
            ) from e

        if not has_table:
            conn.close()
            engine.dispose()
            STORE_OPEN_FAILURES.labels(reason="schema").inc()
            logger.warning("config_store_schema_missing", path=str(path))
            raise StoreUnavailableError(
                f"Config store {path} has no {CONFIG_TABLE_NAME} table"
            )

        logger.debug("config_store_opened", path=str(path), read_only=read_only)
        return cls(engine, conn, path, read_only=read_only)

    @classmethod
    def create(
        cls,
        path: str | Path,
        *,
        busy_timeout: float = DEFAULT_BUSY_TIMEOUT,
    ) -> "SQLiteConfigStore":
        """Create the database and schema if needed and open it read-write.

        Idempotent: an existing database keeps its entries.
        """
        path = Path(path)
        engine = _make_engine(path, "rwc", busy_timeout)
        conn: Connection | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            conn = engine.connect()
            metadata.create_all(conn)
            conn.commit()
        except (OSError, SQLAlchemyError) as e:
            if conn is not None:
                conn.close()
            engine.dispose()
            logger.error("config_store_create_error", path=str(path), error=str(e))
            raise StoreUnavailableError(
                f"Failed to create config store {path}: {e}", cause=e
            ) from e

        logger.debug("config_store_created", path=str(path))
        return cls(engine, conn, path, read_only=False)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def read_only(self) -> bool:
        return self._read_only

    def get_config(self, key: str) -> str | None:
        """Get the raw value for key, or None if the key is absent."""
        self._check_open()
        try:
            return self._conn.execute(
                select(config_table.c.value).where(config_table.c.key == key)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("config_store_get_error", key=key, error=str(e))
            raise StoreUnavailableError(
                f"Failed to read config {key}: {e}", cause=e
            ) from e

    def set_config(self, key: str, value: str) -> None:
        """Insert or overwrite a single entry and commit."""
        self._check_writable()
        stmt = insert(config_table).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[config_table.c.key],
            set_={"value": stmt.excluded.value},
        )
        try:
            self._conn.execute(stmt)
            self._conn.commit()
        except SQLAlchemyError as e:
            self._conn.rollback()
            logger.error("config_store_set_error", key=key, error=str(e))
            raise StoreUnavailableError(
                f"Failed to write config {key}: {e}", cause=e
            ) from e
        logger.debug("config_set", key=key)

    def delete_config(self, key: str) -> bool:
        """Delete an entry and commit, returning whether it existed."""
        self._check_writable()
        try:
            result = self._conn.execute(
                delete(config_table).where(config_table.c.key == key)
            )
            self._conn.commit()
        except SQLAlchemyError as e:
            self._conn.rollback()
            logger.error("config_store_delete_error", key=key, error=str(e))
            raise StoreUnavailableError(
                f"Failed to delete config {key}: {e}", cause=e
            ) from e
        return result.rowcount > 0

    def get_all_config(self) -> dict[str, str]:
        """Get every entry in the store."""
        self._check_open()
        try:
            rows = self._conn.execute(
                select(config_table.c.key, config_table.c.value).order_by(
                    config_table.c.key
                )
            ).all()
        except SQLAlchemyError as e:
            logger.error("config_store_list_error", error=str(e))
            raise StoreUnavailableError(
                f"Failed to list config: {e}", cause=e
            ) from e
        return {row.key: row.value for row in rows}

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._conn.close()
        finally:
            self._engine.dispose()

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_writable(self) -> None:
        self._check_open()
        if self._read_only:
            raise ReadOnlyStoreError(f"Config store {self._path} is open read-only")
