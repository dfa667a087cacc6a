"""Export a JSON snapshot of the mock API's seed state.

Reads every collection through the dispatcher (the same way the UI does) and
writes them to ``snapshots/mock_api_<timestamp>.json``.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.api.query_client import QueryClient
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.main import build_api

COLLECTIONS = {
    "users": "/api/users",
    "courses": "/api/courses",
    "classes": "/api/classes",
    "enrollments": "/api/enrollments",
    "attendance": "/api/attendance",
}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(random_seed=getattr(settings, "MOCK_RANDOM_SEED", None))
    client = QueryClient(build_api(container))

    snapshot = {name: client.fetch(url) for name, url in COLLECTIONS.items()}

    out_dir = REPO_ROOT / "snapshots"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"mock_api_{ts}.json"
    out_file.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")

    counts = ", ".join(f"{name}={len(rows)}" for name, rows in snapshot.items())
    print(f"OK: Snapshot written: {out_file} ({counts})")


if __name__ == "__main__":
    main()
