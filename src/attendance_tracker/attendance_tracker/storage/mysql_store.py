from __future__ import annotations

import re
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_value
from .repository import KeyValueStore

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection, table: str = "tracker_kv"):
        if not _TABLE_NAME.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self._conn_factory = conn_factory
        self._table = table

    def ensure_table(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self._table} (
                    k VARCHAR(64) NOT NULL PRIMARY KEY,
                    v LONGBLOB NOT NULL,
                    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
                )
                """
            )

    def get(self, key: str) -> Optional[bytes]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT v FROM {self._table} WHERE k=%s", (key,))
            value = fetch_value(cur, "v")
            return None if value is None else bytes(value)

    def set(self, key: str, value: bytes) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table}(k, v)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, bytes(value)),
            )
