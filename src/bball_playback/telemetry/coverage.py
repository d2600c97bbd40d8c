from __future__ import annotations

import csv
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


FIELDS = ["ts", "route", "event_code", "game_id", "description"]

_ENABLED_VALUES = {"1", "true", "TRUE", "yes", "YES"}


def maybe_log_unknown(route: str, event_code: str, description: str, game_id: Optional[str] = None) -> None:
    """Append a CSV line for an event code the grammar did not recognize, if enabled.

    Enable by setting env var COVERAGE_LOG_ENABLE=1. Optional COVERAGE_LOG_PATH
    overrides the path. Default path: artifacts/unknown_events.csv (created if missing).
    """
    try:
        if os.environ.get("COVERAGE_LOG_ENABLE", "0") not in _ENABLED_VALUES:
            return
        path = os.environ.get("COVERAGE_LOG_PATH")
        if not path:
            root = Path(__file__).resolve().parents[3]
            path = str(root / "artifacts" / "unknown_events.csv")
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        row = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "route": route,
            "event_code": event_code,
            "game_id": game_id or "",
            "description": description,
        }
        header_written = p.exists()
        with p.open("a", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=FIELDS)
            if not header_written:
                w.writeheader()
            w.writerow(row)
    except Exception:
        # Coverage logging is best-effort and never breaks a request
        return
