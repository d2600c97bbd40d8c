"""
Column names for Retrosheet play logs read by scripts/translate_event_file.py.

CSV inputs are normalized to these columns before translation; event files
(.EVN/.EVA) are read into the same shape. Types are informative.
"""

from __future__ import annotations

from typing import Dict, Tuple


PLAY_COLS: Dict[str, str] = {
    # identifiers
    "game_id": "string",
    "inning": "Int64",
    "half": "string",  # 'T'/'B'

    # actors
    "batter_retro_id": "string",

    # pitch sequence and the event itself
    "count": "string",
    "pitches": "string",
    "event_tx": "string",
}

# Accepted source column names for each play-log column, in preference order.
COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "game_id": ("game_id", "g_id", "game_pk"),
    "inning": ("inning", "inn_ct", "inn"),
    "half": ("half", "top_bottom", "tb", "topbot", "bat_home_id"),
    "batter_retro_id": ("batter_retro_id", "bat_id", "batter_id", "batter"),
    "count": ("count", "count_tx"),
    "pitches": ("pitches", "pitch_seq_tx", "pitch_seq"),
    "event_tx": ("event_tx", "event_text", "event_code", "event"),
}

OUTPUT_COLS = list(PLAY_COLS.keys()) + ["description", "recognized"]
