"""
Translate every play in a Retrosheet event file (.EVN/.EVA) or play-log CSV
and write the descriptions to data/processed/<name>_described.csv.

Usage:
  python scripts/translate_event_file.py data/raw/retrosheet/2019BOS.EVA
  python scripts/translate_event_file.py plays.csv --out described.csv --players data/players.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
# Ensure 'src' is importable when running as a script
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
OUT_DIR = ROOT / "data" / "processed"

from bball_playback.data.event_files import describe_plays, read_play_log
from bball_playback.utils.players import load_players_csv


def main() -> int:
    ap = argparse.ArgumentParser(description="Translate Retrosheet event codes in a play log")
    ap.add_argument("input", help="Event file (.EVN/.EVA) or CSV play log")
    ap.add_argument("--out", default=None, help="Output CSV (default: data/processed/<name>_described.csv)")
    ap.add_argument("--players", default=None, help="CSV with player_id and name columns")
    args = ap.parse_args()

    src = Path(args.input)
    if not src.exists():
        print(f"Input not found: {src}")
        return 1

    plays = read_play_log(src)
    if plays.empty:
        print(f"No plays found in {src}. Output not created.")
        return 0

    names = load_players_csv(args.players) if args.players else {}
    described = describe_plays(plays, names)

    out_path = Path(args.out) if args.out else OUT_DIR / f"{src.stem}_described.csv"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    described.to_csv(out_path, index=False)

    unknown = described.loc[~described["recognized"], "event_tx"]
    print(f"Translated plays: {len(described)}")
    print(f"Distinct games: {described['game_id'].nunique()}")
    print(f"Unrecognized codes: {len(unknown)}")
    if not unknown.empty:
        print("Most frequent unrecognized codes (top 10):")
        print(unknown.value_counts().head(10).to_string())
    print(f"Wrote: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
