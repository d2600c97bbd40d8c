import pytest

from bball_playback.events.codes import EventType
from bball_playback.events.facade import (
    FALLBACK_DESCRIPTIONS,
    GENERIC_DESCRIPTION,
    describe_event,
    narrate,
    translate_event,
)


@pytest.mark.parametrize(
    "code,words",
    [
        ("S8", ["single", "center field"]),
        ("HR/F78", ["home run", "left-center"]),
        ("K", ["struck out"]),
        ("E6/G6", ["error", "shortstop"]),
        ("FC5/G5", ["fielder's choice"]),
        ("DGR/L9L", ["ground-rule double"]),
    ],
)
def test_documented_scenarios(code, words):
    text = translate_event(code)
    for w in words:
        assert w in text


def test_ground_rule_double_is_not_plain_double():
    assert "doubled" not in translate_event("DGR/L9L")


@pytest.mark.parametrize(
    "code", ["ZZZ999", "", "   ", "///", "...", "+", "K+", "(", "64(", "1X", "S8.", "#?!", "Q/Q/Q.Q;Q"]
)
def test_never_empty_never_raises(code):
    text = translate_event(code)
    assert isinstance(text, str)
    assert text


def test_unknown_code_uses_generic_phrase():
    described = describe_event("ZZZ999")
    assert described.description == GENERIC_DESCRIPTION
    assert not described.recognized
    assert described.event.primary_event_type is EventType.UNKNOWN
    assert described.event.raw_event == "ZZZ999"


@pytest.mark.parametrize(
    "code,expected",
    [
        ("DI.1-2", "defensive indifference; runner on first advances to second"),
        ("OA.3-H", "runner advanced on the play; runner on third scores"),
        ("C/E2.B-1", "reached on catcher's interference; batter advances to first"),
        ("FLE5", "error on a foul fly ball"),
    ],
)
def test_fallback_table(code, expected):
    described = describe_event(code)
    assert described.description == expected
    assert described.recognized
    assert described.event.is_unknown


def test_fallback_table_keys_are_outside_grammar():
    for code in FALLBACK_DESCRIPTIONS:
        assert describe_event(code).event.is_unknown


def test_recognized_event_carries_parsed_record():
    described = describe_event("S8")
    assert described.recognized
    assert described.event.primary_event_type is EventType.SINGLE


def test_narrate_leads_with_batter_name():
    names = {"bellc002": "Cody Bellinger"}
    assert narrate("S8", "bellc002", names) == "Cody Bellinger singled to center field"
    assert narrate("S8", "nobody01", names) == "singled to center field"
    assert narrate("S8") == "singled to center field"


def test_narrate_skips_name_when_batter_is_not_subject():
    names = {"bellc002": "Cody Bellinger"}
    assert narrate("SB2", "bellc002", names) == "stole second base"
    assert narrate("WP.2-3", "bellc002", names) == "wild pitch; runner on second advances to third"


def test_translate_event_is_repeatable():
    code = "64(1)3/GDP.3-H"
    assert translate_event(code) == translate_event(code)
