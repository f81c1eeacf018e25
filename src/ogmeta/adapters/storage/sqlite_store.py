from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ogmeta.domain.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SqliteMetadataStore:
    """
    Post metadata in a single SQLite table keyed by (item_id, meta_key).
    Opens a connection per call; writes are last-write-wins per key.
    """
    db_path: Path

    def _connect(self) -> sqlite3.Connection:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS post_meta (
                  item_id TEXT NOT NULL,
                  meta_key TEXT NOT NULL,
                  meta_value TEXT NOT NULL,
                  PRIMARY KEY (item_id, meta_key)
                )
                """
            )
        except (OSError, sqlite3.Error) as e:
            raise StorageUnavailableError(f"Cannot open metadata database {self.db_path}: {e}") from e
        return conn

    def read(self, item_id: str, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            cur = conn.execute(
                "SELECT meta_value FROM post_meta WHERE item_id = ? AND meta_key = ?",
                (item_id, key),
            )
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Reading {key} for item {item_id} failed: {e}") from e
        finally:
            conn.close()
        return None if row is None else str(row[0])

    def write(self, item_id: str, key: str, value: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT OR REPLACE INTO post_meta(item_id, meta_key, meta_value) VALUES (?, ?, ?)",
                    (item_id, key, value),
                )
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Writing {key} for item {item_id} failed: {e}") from e
        finally:
            conn.close()
        logger.debug("post_meta[%s, %s] written", item_id, key)
