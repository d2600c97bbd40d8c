import csv
from pathlib import Path
from typing import Dict, Optional


def _display_name(row: Dict[str, Optional[str]]) -> str:
    full = (row.get("full_name") or row.get("name") or "").strip()
    if full:
        return full
    first = (row.get("first_name") or "").strip()
    last = (row.get("last_name") or "").strip()
    return " ".join(p for p in (first, last) if p)


def load_players_csv(path: str) -> Dict[str, str]:
    """
    Load players.csv into a dict: player_id -> display name.
    The name comes from 'full_name' (or 'name'), else 'first_name' + 'last_name'.
    Rows without an id or a name are skipped.
    Return {} on missing file; do not raise.
    """
    p = Path(path)
    if not p.exists():
        return {}

    names: Dict[str, str] = {}
    try:
        with p.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                pid = (row.get("player_id") or row.get("retro_id") or "").strip()
                if not pid:
                    continue
                name = _display_name(row)
                if name:
                    names[pid] = name
    except (OSError, csv.Error, UnicodeDecodeError):
        # On a read/parse error, return the best-effort lookup built so far
        return names

    return names


def get_name_for(player_id: Optional[str], names: Dict[str, str]) -> Optional[str]:
    if not player_id:
        return None
    return names.get(player_id)
