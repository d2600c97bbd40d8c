import pandas as pd

from bball_playback.data.event_files import (
    describe_plays,
    iter_play_records,
    normalize_play_log,
    read_play_log,
)
from bball_playback.data.retrosheet_schema import OUTPUT_COLS, PLAY_COLS


EVENT_FILE = """id,BOS201904090
version,2
info,visteam,TOR
start,bellc002,"Cody Bellinger",0,1,9
play,1,0,bellc002,12,CBX,S8/G4M
play,1,0,smitj001,01,CX,64(1)3/GDP
com,"a comment line"
play,1,1,bettm001,32,BBCFBX,HR/F78
play,1,1,ramih003,00,,NP
"""


def test_iter_play_records_reads_play_lines_only():
    records = list(iter_play_records(EVENT_FILE.splitlines()))
    assert len(records) == 4
    assert records[0]["game_id"] == "BOS201904090"
    assert records[0]["half"] == "T"
    assert records[2]["half"] == "B"
    assert records[1]["event_tx"] == "64(1)3/GDP"


def test_event_file_round_trip(tmp_path):
    path = tmp_path / "2019BOS.EVA"
    path.write_text(EVENT_FILE, encoding="latin-1")
    plays = read_play_log(path)
    assert list(plays.columns) == list(PLAY_COLS.keys())

    out = describe_plays(plays, {"bellc002": "Cody Bellinger"})
    assert list(out.columns) == OUTPUT_COLS
    assert out["description"].tolist() == [
        "Cody Bellinger singled on a ground ball to center field",
        "grounded into a double play, 6-4-3 (shortstop to second baseman to first baseman); "
        "runner on first out at second (4)",
        "hit a home run to left-center field",
        "no play",
    ]
    assert out["recognized"].tolist() == [True, True, True, True]


def test_csv_play_log_column_aliases(tmp_path):
    df = pd.DataFrame(
        {
            "g_id": ["G1", "G1"],
            "inn_ct": [1, 1],
            "bat_home_id": [0, 1],
            "bat_id": ["a", None],
            "event_tx": ["K", "ZZZ999"],
        }
    )
    norm = normalize_play_log(df)
    assert norm["half"].tolist() == ["T", "B"]
    assert norm["game_id"].tolist() == ["G1", "G1"]

    out = describe_plays(norm)
    assert out["description"].tolist() == ["struck out", "recorded a play"]
    assert out["recognized"].tolist() == [True, False]

    path = tmp_path / "plays.csv"
    df.to_csv(path, index=False)
    assert read_play_log(path)["event_tx"].tolist() == ["K", "ZZZ999"]
