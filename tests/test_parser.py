import pytest

from bball_playback.events.codes import (
    Base,
    Depth,
    Direction,
    EventType,
    FielderRole,
    Trajectory,
    Zone,
)
from bball_playback.events.parser import parse


def _positions(event):
    return [f.position for f in event.fielders]


def _moves(event):
    return [(c.from_base, c.to_base, c.is_out) for c in event.base_running]


def test_single_to_center_fielded_by_center_fielder():
    ev = parse("S8")
    assert ev.primary_event_type is EventType.SINGLE
    assert _positions(ev) == [8]
    assert ev.fielders[0].role is FielderRole.FIELDED
    assert ev.location.zone is Zone.OUTFIELD
    assert ev.location.direction is Direction.CENTER
    assert ev.location.depth is Depth.UNKNOWN
    assert ev.location.trajectory is Trajectory.UNKNOWN
    assert not ev.is_out
    assert ev.out_count == 0
    assert ev.raw_event == "S8"


@pytest.mark.parametrize(
    "code,expected",
    [
        ("POCS2(1361)", EventType.PICKOFF_CAUGHT_STEALING),
        ("PO1(13)", EventType.PICKOFF),
        ("DGR", EventType.GROUND_RULE_DOUBLE),
        ("D7", EventType.DOUBLE),
        ("SB2", EventType.STOLEN_BASE),
        ("SF8", EventType.SACRIFICE_FLY),
        ("SH15", EventType.SACRIFICE_HIT),
        ("HP", EventType.HIT_BY_PITCH),
        ("H", EventType.HOME_RUN),
        ("HR", EventType.HOME_RUN),
        ("IW", EventType.INTENTIONAL_WALK),
        ("I", EventType.INTENTIONAL_WALK),
        ("PB.2-3", EventType.PASSED_BALL),
        ("NP", EventType.NO_PLAY),
        ("BK.3-H", EventType.BALK),
    ],
)
def test_longest_code_wins(code, expected):
    assert parse(code).primary_event_type is expected


def test_pickoff_caught_stealing_implies_runner_out():
    ev = parse("POCS2(1361)")
    assert _positions(ev) == [1, 3, 6, 1]
    assert [f.role for f in ev.fielders] == [
        FielderRole.ASSIST,
        FielderRole.ASSIST,
        FielderRole.ASSIST,
        FielderRole.PUTOUT,
    ]
    assert _moves(ev) == [(Base.FIRST, Base.SECOND, True)]
    assert ev.base_running[0].narrated_by_event
    assert ev.out_count == 1


def test_fielder_chain_order_and_roles():
    ev = parse("G643")
    assert ev.primary_event_type is EventType.GROUNDOUT
    assert _positions(ev) == [6, 4, 3]
    assert [f.role for f in ev.fielders] == [
        FielderRole.ASSIST,
        FielderRole.ASSIST,
        FielderRole.PUTOUT,
    ]
    assert _positions(parse("G346")) == [3, 4, 6]


def test_unannotated_three_man_chain_is_double_play():
    ev = parse("643")
    assert ev.primary_event_type is EventType.GROUNDOUT
    assert ev.out_count == 2
    assert ev.is_double_play
    assert not ev.is_triple_play


def test_two_man_chain_is_single_out():
    ev = parse("G63")
    assert ev.out_count == 1
    assert not ev.is_double_play


def test_bare_outfielder_is_flyout():
    ev = parse("8")
    assert ev.primary_event_type is EventType.FLYOUT
    assert ev.location.trajectory is Trajectory.FLY
    assert ev.fielders[0].role is FielderRole.PUTOUT


def test_trajectory_modifier_overrides_bare_chain():
    assert parse("8/L8").primary_event_type is EventType.LINEOUT
    assert parse("6/P6").primary_event_type is EventType.POPUP
    assert parse("31/G3").primary_event_type is EventType.GROUNDOUT


def test_forced_runner_marker_yields_out_clause():
    ev = parse("64(1)3/GDP")
    assert _positions(ev) == [6, 4, 3]
    assert _moves(ev) == [(Base.FIRST, Base.SECOND, True)]
    assert ev.base_running[0].fielders[0].position == 4
    assert ev.out_count == 2
    assert ev.is_double_play


def test_force_at_second_without_batter_out():
    ev = parse("54(1)/FO/G5.3-H;B-1")
    assert _moves(ev) == [
        (Base.FIRST, Base.SECOND, True),
        (Base.THIRD, Base.HOME, False),
        (Base.BATTER, Base.FIRST, False),
    ]
    assert ev.out_count == 1
    assert ev.base_running[1].rbi_credited


def test_batter_marker_in_line_drive_double_play():
    ev = parse("8(B)84(2)/LDP")
    assert ev.primary_event_type is EventType.LINEOUT
    assert _moves(ev) == [(Base.SECOND, Base.SECOND, True)]
    assert ev.out_count == 2


def test_ground_ball_marker_is_still_a_force():
    ev = parse("3(B)6(1)/G3")
    assert _moves(ev) == [(Base.FIRST, Base.SECOND, True)]


def test_first_trajectory_sets_both_out_type_and_trajectory():
    ev = parse("8/L8/F")
    assert ev.primary_event_type is EventType.LINEOUT
    assert ev.location.trajectory is Trajectory.LINE


def test_advances_keep_source_order():
    ev = parse("S9/L9S.2-H;1-3")
    assert _moves(ev) == [(Base.SECOND, Base.HOME, False), (Base.FIRST, Base.THIRD, False)]
    assert ev.location.trajectory is Trajectory.LINE
    assert ev.location.depth is Depth.SHALLOW
    assert ev.location.direction is Direction.RIGHT


def test_primary_fielder_location_wins_over_modifier():
    ev = parse("S8/G4M")
    assert ev.location.direction is Direction.CENTER
    assert ev.location.zone is Zone.OUTFIELD
    assert ev.location.trajectory is Trajectory.GROUND
    assert ev.location.depth is Depth.MEDIUM


@pytest.mark.parametrize(
    "code,direction,zone",
    [
        ("HR/F78", Direction.LEFT_CENTER, Zone.OUTFIELD),
        ("D/L89", Direction.RIGHT_CENTER, Zone.OUTFIELD),
        ("S/G56", Direction.LEFT_SIDE, Zone.INFIELD),
        ("S/G34", Direction.RIGHT_SIDE, Zone.INFIELD),
    ],
)
def test_location_codes(code, direction, zone):
    loc = parse(code).location
    assert loc.direction is direction
    assert loc.zone is zone


def test_depth_suffixes():
    assert parse("D7/L7D").location.depth is Depth.DEEP
    assert parse("T8/F8XD").location.depth is Depth.DEEP
    assert parse("S9/L9S").location.depth is Depth.SHALLOW


def test_unrecognized_modifiers_are_ignored():
    ev = parse("S8/ZZ/G99Q/TH")
    assert ev.primary_event_type is EventType.SINGLE
    assert ev.location.trajectory is Trajectory.UNKNOWN
    assert ev.modifiers == ("ZZ", "G99Q", "TH")


def test_error_event():
    ev = parse("E6/G6")
    assert ev.primary_event_type is EventType.ERROR
    assert ev.is_error
    assert ev.fielders[0].role is FielderRole.ERROR
    assert ev.location.direction is Direction.LEFT_SIDE
    assert not ev.is_out


def test_fielders_choice_with_runner_out():
    ev = parse("FC5/G5.1X2(56)")
    assert ev.primary_event_type is EventType.FIELDERS_CHOICE
    assert ev.is_fielders_choice
    assert ev.out_count == 1
    clause = ev.base_running[0]
    assert clause.is_out
    assert [f.position for f in clause.fielders] == [5, 6]


def test_error_in_advance_makes_runner_safe():
    ev = parse("S9.1X3(5E3)")
    clause = ev.base_running[0]
    assert not clause.is_out
    assert clause.is_error
    assert ev.is_error
    assert ev.out_count == 0


def test_strikeout_counts_batter_out():
    ev = parse("K")
    assert ev.primary_event_type is EventType.STRIKEOUT
    assert ev.is_out
    assert ev.out_count == 1
    assert ev.location.is_known is False


def test_strikeout_wild_pitch_batter_reaches():
    ev = parse("K+WP.B-1")
    assert ev.secondary_event_type is EventType.WILD_PITCH
    assert ev.out_count == 0
    assert _moves(ev) == [(Base.BATTER, Base.FIRST, False)]


def test_strikeout_caught_stealing_double_play():
    ev = parse("K+CS2(26)")
    assert ev.secondary_event_type is EventType.CAUGHT_STEALING
    assert ev.out_count == 2
    assert ev.is_double_play
    assert _positions(ev) == [2, 6]


def test_walk_with_stolen_base():
    ev = parse("W+SB2")
    assert ev.primary_event_type is EventType.WALK
    assert ev.secondary_event_type is EventType.STOLEN_BASE
    assert _moves(ev) == [(Base.FIRST, Base.SECOND, False)]
    assert ev.base_running[0].narrated_by_event


def test_double_steal():
    ev = parse("SB3;SB2")
    assert ev.primary_event_type is EventType.STOLEN_BASE
    assert _moves(ev) == [(Base.SECOND, Base.THIRD, False), (Base.FIRST, Base.SECOND, False)]
    assert [c.narrated_by_event for c in ev.base_running] == [True, False]


def test_caught_stealing_with_error_is_safe():
    ev = parse("CS2(2E6)")
    assert ev.out_count == 0
    assert ev.is_error
    assert not ev.base_running[0].is_out


def test_pickoff_stays_on_base():
    ev = parse("PO1(13)")
    assert _moves(ev) == [(Base.FIRST, Base.FIRST, True)]


def test_sacrifice_modifier_refines_flyout():
    ev = parse("F9/SF.3-H")
    assert ev.primary_event_type is EventType.SACRIFICE_FLY
    assert ev.base_running[0].rbi_credited


def test_explicit_rbi_count():
    ev = parse("S8+2")
    assert ev.primary_event_type is EventType.SINGLE
    assert ev.rbi == 2


@pytest.mark.parametrize(
    "code,credited",
    [
        ("S8.3-H", True),
        ("S8.3-H(NR)", False),
        ("S8.3-H(UR)", False),
        ("E6.3-H", False),
        ("WP.3-H", False),
        ("K+PB.3-H", False),
        ("643.3-H", False),
        ("E6.3-H(RBI)", True),
        ("S8.2-H(E8)", False),
    ],
)
def test_rbi_rules(code, credited):
    scoring = [c for c in parse(code).base_running if c.to_base is Base.HOME]
    assert scoring[0].rbi_credited is credited


def test_home_run_scores_the_batter():
    ev = parse("HR/F7LD.3-H;1-H")
    assert _moves(ev) == [
        (Base.BATTER, Base.HOME, False),
        (Base.THIRD, Base.HOME, False),
        (Base.FIRST, Base.HOME, False),
    ]
    batter = ev.base_running[0]
    assert batter.narrated_by_event
    assert sum(c.rbi_credited for c in ev.base_running) == 3

    solo = parse("HR")
    assert _moves(solo) == [(Base.BATTER, Base.HOME, False)]
    assert solo.base_running[0].rbi_credited


def test_explicit_batter_advance_replaces_home_run_clause():
    ev = parse("HR/F7.B-H")
    assert _moves(ev) == [(Base.BATTER, Base.HOME, False)]
    assert not ev.base_running[0].narrated_by_event
    assert ev.base_running[0].rbi_credited


def test_out_count_capped_at_three():
    ev = parse("5(2)4(1)3/GTP.3XH(32)")
    assert ev.out_count == 3
    assert ev.is_triple_play


def test_uncertainty_markers_and_case_are_normalized():
    ev = parse("  s8/g4#!.3-h? ")
    assert ev.primary_event_type is EventType.SINGLE
    assert _moves(ev) == [(Base.THIRD, Base.HOME, False)]
    assert ev.raw_event == "  s8/g4#!.3-h? "


def test_malformed_advance_is_skipped():
    ev = parse("S8.3-H;ZZ;1-3")
    assert _moves(ev) == [(Base.THIRD, Base.HOME, False), (Base.FIRST, Base.THIRD, False)]


@pytest.mark.parametrize(
    "code",
    ["ZZZ999", "", "   ", "///", "+", "(", "64(", "1X", "S0", "SB1", "POH", "E", "DI.1-2", "FLE5"],
)
def test_unknown_input_is_typed_not_raised(code):
    ev = parse(code)
    assert ev.primary_event_type is EventType.UNKNOWN
    assert ev.is_unknown
    assert ev.raw_event == code


def test_parse_is_deterministic():
    code = "64(1)3/GDP.3-H;2-3"
    assert parse(code) == parse(code)
