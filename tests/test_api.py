from fastapi.testclient import TestClient

from bball_playback.config import Settings
from bball_playback.serve.api import create_app


client = TestClient(create_app(Settings(capitalize=True, log_json=False)))


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_translate_single_event():
    r = client.post("/v1/events/translate", json={"event_code": "S8"})
    assert r.status_code == 200
    body = r.json()
    assert body["event_code"] == "S8"
    assert body["description"] == "Singled to center field"
    assert body["recognized"] is True
    assert body["event"] is None


def test_translate_can_return_parsed_event():
    r = client.post("/v1/events/translate", json={"event_code": "64(1)3/GDP", "include_event": True})
    assert r.status_code == 200
    event = r.json()["event"]
    assert event["primary_event_type"] == "G"
    assert event["out_count"] == 2
    assert event["is_double_play"] is True
    assert [f["position"] for f in event["fielders"]] == [6, 4, 3]
    assert event["base_running"][0]["from_base"] == "1"
    assert event["base_running"][0]["to_base"] == "2"


def test_unrecognized_code_is_flagged_not_failed():
    r = client.post("/v1/events/translate", json={"event_code": "ZZZ999"})
    assert r.status_code == 200
    body = r.json()
    assert body["recognized"] is False
    assert body["description"] == "Recorded a play"


def test_missing_event_code_is_rejected():
    r = client.post("/v1/events/translate", json={})
    assert r.status_code == 422


def test_batch_keeps_play_order():
    payload = {"game_id": "BOS201904090", "events": ["K", "S9/L9S.2-H;1-3", "ZZZ999", "HR/F78"]}
    r = client.post("/v1/events/translate-batch", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["game_id"] == "BOS201904090"
    assert body["descriptions"][0] == "Struck out"
    assert body["descriptions"][1].startswith("Singled on a line drive")
    assert body["descriptions"][3] == "Hit a home run to left-center field"
    assert body["unrecognized"] == ["ZZZ999"]


def test_lowercase_fragments_when_not_capitalizing():
    plain = TestClient(create_app(Settings(capitalize=False, log_json=False)))
    r = plain.post("/v1/events/translate", json={"event_code": "K"})
    assert r.json()["description"] == "struck out"


def test_batter_names_from_players_csv(tmp_path):
    csv_path = tmp_path / "players.csv"
    csv_path.write_text("player_id,full_name\nbellc002,Cody Bellinger\n", encoding="utf-8")
    named = TestClient(create_app(Settings(players_csv_path=str(csv_path), log_json=False)))

    r = named.post("/v1/events/translate", json={"event_code": "D7/L7D", "batter_id": "bellc002"})
    assert r.json()["description"] == "Cody Bellinger doubled on a line drive to deep left field"

    r = named.post(
        "/v1/events/translate-batch",
        json={"events": ["W", "SB2"], "batter_ids": ["bellc002", "bellc002"]},
    )
    assert r.json()["descriptions"] == ["Cody Bellinger walked", "stole second base"]
