"""SQLite database for smartlinks.

One connection per Database, shared across threads. Every operations object
receives the same re-entrant lock, so read-modify-write sequences (counter
increments, updates) are serialized per process.
"""

import logging
import os
import sqlite3
import threading

from smartlinker.persistence.database.meta_sql import MetaOperations
from smartlinker.persistence.database.smartlinks_sql import SmartlinkOperations

__all__ = [
    "SCHEMA",
    "SCHEMA_VERSION",
    "Database",
]

logger = logging.getLogger(__name__)

IN_MEMORY = ":memory:"

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS meta (
        key TEXT PRIMARY KEY,
        value TEXT
    );
    """,
    # seq keeps creation order stable across updates
    """
    CREATE TABLE IF NOT EXISTS smartlinks (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT UNIQUE NOT NULL,
        payload TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    """,
    # Never pruned: deleted smartlink ids stay reserved
    """
    CREATE TABLE IF NOT EXISTS issued_ids (
        id TEXT PRIMARY KEY,
        issued_at INTEGER NOT NULL
    );
    """,
]

SCHEMA_VERSION = 1


def _connect(path: str) -> sqlite3.Connection:
    if path != IN_MEMORY:
        parent = os.path.dirname(path) or "."
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise RuntimeError(f"Cannot create database directory '{parent}': {exc}") from exc

    try:
        conn = sqlite3.connect(path, check_same_thread=False)
    except sqlite3.OperationalError as exc:
        raise RuntimeError(f"Cannot open SQLite database '{path}': {exc}") from exc

    try:
        if path != IN_MEMORY:
            conn.execute("PRAGMA journal_mode=WAL;")
        for ddl in SCHEMA:
            conn.execute(ddl)
        conn.commit()
    except sqlite3.DatabaseError as exc:
        conn.close()
        raise RuntimeError(f"Cannot initialize SQLite database '{path}': {exc}") from exc
    return conn


class Database:
    """
    Smartlink storage.

    Attributes:
        meta: Key/value metadata (schema version)
        smartlinks: Smartlink record store
    """

    def __init__(self, path: str):
        self.path = path
        self.conn = _connect(path)
        self.lock = threading.RLock()

        self.meta = MetaOperations(self.conn, self.lock)
        self.smartlinks = SmartlinkOperations(self.conn, self.lock)

        self._check_schema_version()
        logger.debug(f"Opened database at {path}")

    def _check_schema_version(self) -> None:
        stored = self.meta.get("schema_version")
        if stored is None:
            self.meta.set("schema_version", str(SCHEMA_VERSION))
        elif stored != str(SCHEMA_VERSION):
            # No migrations yet
            logger.warning(f"Database {self.path} has schema version {stored}, expected {SCHEMA_VERSION}")

    def close(self):
        """Commit pending work and close the connection."""
        with self.lock:
            self.conn.commit()
            self.conn.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
