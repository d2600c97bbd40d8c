from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel
import yaml


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    capitalize: bool = False
    include_event: bool = False
    players_csv_path: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = True


def load_settings(path: str = "config/settings.example.yaml") -> Settings:
    """Read settings from YAML. A missing file or section falls back to defaults."""
    p = Path(path)
    if not p.exists():
        return Settings()
    with p.open("r", encoding="utf-8") as f:
        y = yaml.safe_load(f) or {}
    s = y.get("service", {}) or {}
    t = y.get("translation", {}) or {}
    players = y.get("players", {}) or {}
    log = y.get("logging", {}) or {}
    return Settings(
        host=s.get("host", "0.0.0.0"),
        port=s.get("port", 8000),
        capitalize=t.get("capitalize", False),
        include_event=t.get("include_event", False),
        players_csv_path=players.get("csv_path"),
        log_level=str(log.get("level", "INFO")).upper(),
        log_json=log.get("json", True),
    )
