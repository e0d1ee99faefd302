# storefront/storage.py
import os
import sqlite3
import datetime
import pytz
from contextlib import contextmanager
from typing import List, Optional

from .logger import get_logger

logger = get_logger(__name__)

DB_PATH = os.getenv("DB_PATH", "/data/storefront_state.sqlite3")


def now_utc_iso() -> str:
    return datetime.datetime.now(tz=pytz.UTC).isoformat()


class LocalStorage:
    """
    Durable string key/value storage backed by a SQLite file.

    Mirrors browser local storage: values are opaque text (the stores put
    JSON in them), every write replaces the previous value, and there is no
    coordination between processes sharing the file. Last writer wins.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or DB_PATH
        self.ensure_db()

    @contextmanager
    def _connect(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        con = sqlite3.connect(self.path)
        try:
            with con:
                yield con
        finally:
            con.close()

    def ensure_db(self):
        with self._connect() as con:
            cur = con.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS local_storage (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TEXT
                )
            """
            )
            con.commit()

    def get_item(self, key: str) -> Optional[str]:
        with self._connect() as con:
            cur = con.cursor()
            cur.execute("SELECT value FROM local_storage WHERE key=?", (key,))
            row = cur.fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str):
        with self._connect() as con:
            cur = con.cursor()
            cur.execute(
                """
                INSERT INTO local_storage (key, value, updated_at)
                VALUES (?,?,?)
                ON CONFLICT(key) DO UPDATE SET
                    value=excluded.value,
                    updated_at=excluded.updated_at
            """,
                (key, value, now_utc_iso()),
            )
            con.commit()
        logger.debug("Wrote %d chars under %s", len(value), key)

    def remove_item(self, key: str):
        with self._connect() as con:
            cur = con.cursor()
            cur.execute("DELETE FROM local_storage WHERE key=?", (key,))
            con.commit()

    def clear(self):
        with self._connect() as con:
            cur = con.cursor()
            cur.execute("DELETE FROM local_storage")
            con.commit()
        logger.info("Cleared local storage at %s", self.path)

    def keys(self) -> List[str]:
        with self._connect() as con:
            cur = con.cursor()
            cur.execute("SELECT key FROM local_storage ORDER BY key")
            rows = cur.fetchall()
        return [row[0] for row in rows]
