from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Tuple

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Open a connection and cursor; commit on success, roll back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.warning("rolling back MySQL transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_value(cur, column: str) -> Optional[Any]:
    """Single column of the next row, or None when there is no row."""
    row = cur.fetchone()
    if not row:
        return None
    return row[column]
