"""Backup the tracker store.

Note: Writes every stored entry into one timestamped JSON file under
``backups/``; works the same for file, MySQL and memory backends.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "attendance_tracker"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from attendance_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    snapshot = {
        key: value.decode("utf-8")
        for key, value in container.storage.dump(container.state).items()
    }

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_tracker_{ts}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
