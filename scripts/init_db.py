from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "attendance_tracker"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from attendance_tracker.database.connection import DatabaseConnection, as_db_config
from attendance_tracker.storage.mysql_store import MySQLKeyValueStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    table = getattr(settings, "KV_TABLE", "tracker_kv")

    store = MySQLKeyValueStore(DatabaseConnection.get_instance(as_db_config(db_config)), table=table)
    store.ensure_table()
    print(
        "OK: key-value table ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}.{table}"
    )


if __name__ == "__main__":
    main()
