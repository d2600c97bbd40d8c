"""
Read Retrosheet play logs into the PLAY_COLS frame and describe every play.

Two inputs are accepted: raw event files (.EVN/.EVA, one ``play,...`` record
per plate appearance under an ``id,<game>`` record) and CSV play logs with
any of the column names listed in COLUMN_ALIASES.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional

import pandas as pd

from ..events.facade import describe_event, lead_with_batter
from .retrosheet_schema import COLUMN_ALIASES, OUTPUT_COLS, PLAY_COLS


EVENT_FILE_SUFFIXES = {".evn", ".eva", ".eve", ".edn", ".eda"}


def iter_play_records(lines: Iterable[str]) -> Iterator[Dict[str, object]]:
    game_id: Optional[str] = None
    for fields in csv.reader(lines):
        if not fields:
            continue
        kind = fields[0].strip().lower()
        if kind == "id" and len(fields) > 1:
            game_id = fields[1].strip()
        elif kind == "play" and len(fields) >= 7:
            yield {
                "game_id": game_id,
                "inning": int(fields[1]) if fields[1].strip().isdigit() else None,
                "half": "B" if fields[2].strip() == "1" else "T",
                "batter_retro_id": fields[3].strip(),
                "count": fields[4].strip(),
                "pitches": fields[5].strip(),
                "event_tx": fields[6].strip(),
            }


def read_event_file(path: Path) -> pd.DataFrame:
    with path.open(newline="", encoding="latin-1") as f:
        rows = list(iter_play_records(f))
    df = pd.DataFrame(rows, columns=list(PLAY_COLS.keys()))
    df["inning"] = pd.to_numeric(df["inning"], errors="coerce").astype("Int64")
    return df


def _pick_col(df: pd.DataFrame, names: Iterable[str]) -> Optional[pd.Series]:
    for n in names:
        if n in df.columns:
            return df[n]
    return None


def _to_half(val) -> Optional[str]:
    if pd.isna(val):
        return None
    s = str(val).strip().lower()
    if s in {"t", "top"}:
        return "T"
    if s in {"b", "bot", "bottom"}:
        return "B"
    # numeric encodings: bat_home_id 1 => home batting => Bottom
    try:
        return "B" if int(float(s)) == 1 else "T"
    except ValueError:
        return None


def normalize_play_log(df: pd.DataFrame) -> pd.DataFrame:
    out: Dict[str, pd.Series] = {}
    for col, dtype in PLAY_COLS.items():
        s = _pick_col(df, COLUMN_ALIASES[col])
        if s is None:
            out[col] = pd.Series([None] * len(df), index=df.index, dtype="object")
        elif col == "half":
            out[col] = s.map(_to_half).astype("string")
        elif dtype == "Int64":
            out[col] = pd.to_numeric(s, errors="coerce").astype("Int64")
        else:
            out[col] = s.astype("string")
    return pd.DataFrame(out)[list(PLAY_COLS.keys())]


def read_play_log(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in EVENT_FILE_SUFFIXES:
        return read_event_file(path)
    return normalize_play_log(pd.read_csv(path, low_memory=False))


def describe_plays(df: pd.DataFrame, player_names: Optional[Mapping[str, str]] = None) -> pd.DataFrame:
    """Return a copy of a play-log frame with description/recognized columns."""
    names = player_names or {}
    codes = df["event_tx"].fillna("").astype(str)
    described = [describe_event(c) for c in codes]
    batters = [b if isinstance(b, str) and b else None for b in df["batter_retro_id"]]

    out = df.copy()
    out["description"] = [
        lead_with_batter(d, names.get(b) if b else None) for d, b in zip(described, batters)
    ]
    out["recognized"] = [d.recognized for d in described]
    return out[OUTPUT_COLS]
