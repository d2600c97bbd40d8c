"""
Closed code sets for Retrosheet event notation and the lookup tables that
map every member to its English rendering.

Event format reference: https://www.retrosheet.org/eventfile.htm
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class EventType(str, Enum):
    SINGLE = "S"
    DOUBLE = "D"
    TRIPLE = "T"
    HOME_RUN = "HR"
    GROUND_RULE_DOUBLE = "DGR"

    STRIKEOUT = "K"
    GROUNDOUT = "G"
    FLYOUT = "F"
    LINEOUT = "L"
    POPUP = "P"
    SACRIFICE_HIT = "SH"
    SACRIFICE_FLY = "SF"

    WALK = "W"
    INTENTIONAL_WALK = "IW"
    HIT_BY_PITCH = "HP"
    ERROR = "E"
    FIELDERS_CHOICE = "FC"

    STOLEN_BASE = "SB"
    CAUGHT_STEALING = "CS"
    PICKOFF = "PO"
    PICKOFF_CAUGHT_STEALING = "POCS"

    WILD_PITCH = "WP"
    PASSED_BALL = "PB"
    BALK = "BK"
    NO_PLAY = "NP"

    UNKNOWN = "UNKNOWN"


class FielderRole(str, Enum):
    PUTOUT = "putout"
    ASSIST = "assist"
    ERROR = "error"
    FIELDED = "fielded"  # handled the ball, no out recorded
    UNKNOWN = "unknown"


class Zone(str, Enum):
    INFIELD = "infield"
    OUTFIELD = "outfield"
    UNKNOWN = "unknown"


class Direction(str, Enum):
    LEFT = "left"
    LEFT_CENTER = "left-center"
    CENTER = "center"
    RIGHT_CENTER = "right-center"
    RIGHT = "right"
    LEFT_SIDE = "left side"
    MIDDLE = "middle"
    RIGHT_SIDE = "right side"
    UNKNOWN = "unknown"


class Depth(str, Enum):
    SHALLOW = "shallow"
    MEDIUM = "medium"
    DEEP = "deep"
    UNKNOWN = "unknown"


class Trajectory(str, Enum):
    GROUND = "ground"
    LINE = "line"
    FLY = "fly"
    POP = "pop"
    UNKNOWN = "unknown"


class Base(str, Enum):
    BATTER = "B"
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    HOME = "H"


# Source tokens recognized as a primary event. Aliases share a member.
EVENT_CODES: Dict[str, EventType] = {
    "S": EventType.SINGLE,
    "D": EventType.DOUBLE,
    "T": EventType.TRIPLE,
    "HR": EventType.HOME_RUN,
    "H": EventType.HOME_RUN,
    "DGR": EventType.GROUND_RULE_DOUBLE,
    "K": EventType.STRIKEOUT,
    "G": EventType.GROUNDOUT,
    "F": EventType.FLYOUT,
    "L": EventType.LINEOUT,
    "P": EventType.POPUP,
    "SH": EventType.SACRIFICE_HIT,
    "SF": EventType.SACRIFICE_FLY,
    "W": EventType.WALK,
    "IW": EventType.INTENTIONAL_WALK,
    "I": EventType.INTENTIONAL_WALK,
    "HP": EventType.HIT_BY_PITCH,
    "E": EventType.ERROR,
    "FC": EventType.FIELDERS_CHOICE,
    "SB": EventType.STOLEN_BASE,
    "CS": EventType.CAUGHT_STEALING,
    "PO": EventType.PICKOFF,
    "POCS": EventType.PICKOFF_CAUGHT_STEALING,
    "WP": EventType.WILD_PITCH,
    "PB": EventType.PASSED_BALL,
    "BK": EventType.BALK,
    "NP": EventType.NO_PLAY,
}

# Longest first, so that POCS is tried before PO and DGR before D.
CODES_BY_LENGTH: Tuple[str, ...] = tuple(sorted(EVENT_CODES, key=lambda c: (-len(c), c)))

HIT_EVENTS: FrozenSet[EventType] = frozenset({
    EventType.SINGLE,
    EventType.DOUBLE,
    EventType.TRIPLE,
    EventType.HOME_RUN,
    EventType.GROUND_RULE_DOUBLE,
})

# Events that retire the batter unless an advance clause says otherwise.
OUT_EVENTS: FrozenSet[EventType] = frozenset({
    EventType.STRIKEOUT,
    EventType.GROUNDOUT,
    EventType.FLYOUT,
    EventType.LINEOUT,
    EventType.POPUP,
    EventType.SACRIFICE_HIT,
    EventType.SACRIFICE_FLY,
})

# Outs on a ball caught before it touched the ground.
AIR_OUTS: FrozenSet[EventType] = frozenset({
    EventType.FLYOUT,
    EventType.LINEOUT,
    EventType.POPUP,
    EventType.SACRIFICE_FLY,
})

# Events written as <code><base>[(fielders)], e.g. SB2, CS3(25), PO1(13).
RUNNER_EVENTS: FrozenSet[EventType] = frozenset({
    EventType.STOLEN_BASE,
    EventType.CAUGHT_STEALING,
    EventType.PICKOFF,
    EventType.PICKOFF_CAUGHT_STEALING,
})

# Events with no fielder or base suffix in the primary token.
BARE_EVENTS: FrozenSet[EventType] = frozenset({
    EventType.WALK,
    EventType.INTENTIONAL_WALK,
    EventType.HIT_BY_PITCH,
    EventType.WILD_PITCH,
    EventType.PASSED_BALL,
    EventType.BALK,
    EventType.NO_PLAY,
})

# Events that may follow "+" in the primary token (K+WP, W+SB2, K+CS2(26)).
SECONDARY_EVENTS: FrozenSet[EventType] = RUNNER_EVENTS | frozenset({
    EventType.WILD_PITCH,
    EventType.PASSED_BALL,
    EventType.ERROR,
})

# A run scoring on these never earns the batter an RBI unless annotated.
NO_RBI_EVENTS: FrozenSet[EventType] = RUNNER_EVENTS | frozenset({
    EventType.ERROR,
    EventType.WILD_PITCH,
    EventType.PASSED_BALL,
    EventType.BALK,
    EventType.NO_PLAY,
    EventType.UNKNOWN,
})

# Trajectory each event implies, used to drop redundant wording.
IMPLIED_TRAJECTORY: Dict[EventType, Trajectory] = {
    EventType.HOME_RUN: Trajectory.FLY,
    EventType.GROUNDOUT: Trajectory.GROUND,
    EventType.FLYOUT: Trajectory.FLY,
    EventType.LINEOUT: Trajectory.LINE,
    EventType.POPUP: Trajectory.POP,
    EventType.SACRIFICE_FLY: Trajectory.FLY,
}

# A trajectory modifier turns a bare fielder chain into this out type.
TRAJECTORY_OUTS: Dict[Trajectory, EventType] = {
    Trajectory.GROUND: EventType.GROUNDOUT,
    Trajectory.LINE: EventType.LINEOUT,
    Trajectory.FLY: EventType.FLYOUT,
    Trajectory.POP: EventType.POPUP,
}

POSITION_NAMES: Dict[int, str] = {
    1: "pitcher",
    2: "catcher",
    3: "first baseman",
    4: "second baseman",
    5: "third baseman",
    6: "shortstop",
    7: "left fielder",
    8: "center fielder",
    9: "right fielder",
}

# Where a ball fielded by each position went.
POSITION_AREAS: Dict[int, Tuple[Zone, Direction]] = {
    1: (Zone.INFIELD, Direction.MIDDLE),
    2: (Zone.INFIELD, Direction.MIDDLE),
    3: (Zone.INFIELD, Direction.RIGHT_SIDE),
    4: (Zone.INFIELD, Direction.RIGHT_SIDE),
    5: (Zone.INFIELD, Direction.LEFT_SIDE),
    6: (Zone.INFIELD, Direction.LEFT_SIDE),
    7: (Zone.OUTFIELD, Direction.LEFT),
    8: (Zone.OUTFIELD, Direction.CENTER),
    9: (Zone.OUTFIELD, Direction.RIGHT),
}

# Hit-location codes between two fielders.
GAP_AREAS: Dict[str, Tuple[Zone, Direction]] = {
    "13": (Zone.INFIELD, Direction.RIGHT_SIDE),
    "15": (Zone.INFIELD, Direction.LEFT_SIDE),
    "23": (Zone.INFIELD, Direction.RIGHT_SIDE),
    "25": (Zone.INFIELD, Direction.LEFT_SIDE),
    "34": (Zone.INFIELD, Direction.RIGHT_SIDE),
    "56": (Zone.INFIELD, Direction.LEFT_SIDE),
    "78": (Zone.OUTFIELD, Direction.LEFT_CENTER),
    "89": (Zone.OUTFIELD, Direction.RIGHT_CENTER),
}

TRAJECTORY_CODES: Dict[str, Trajectory] = {
    "G": Trajectory.GROUND,
    "L": Trajectory.LINE,
    "F": Trajectory.FLY,
    "P": Trajectory.POP,
    "BG": Trajectory.GROUND,
    "BL": Trajectory.LINE,
    "BP": Trajectory.POP,
}

# Modifier tokens that annotate the play rather than the batted ball.
MULTI_OUT_MODIFIERS: Dict[str, int] = {
    "DP": 2,
    "GDP": 2,
    "LDP": 2,
    "BGDP": 2,
    "BPDP": 2,
    "FDP": 2,
    "TP": 3,
    "GTP": 3,
    "LTP": 3,
}

ANNOTATION_MODIFIERS: FrozenSet[str] = frozenset({
    "SH", "SF", "FO", "FL", "IF", "INT", "TH", "R", "NDP", "BINT", "BOOT",
    "IPHR", "MREV", "UREV", "AP", "C", "COUB", "COUF", "COUR", "BR", "OBS",
    "PASS", "RINT", "UINT", "B",
})

BASE_NAMES: Dict[Base, str] = {
    Base.BATTER: "home",
    Base.FIRST: "first",
    Base.SECOND: "second",
    Base.THIRD: "third",
    Base.HOME: "home",
}

RUNNER_NAMES: Dict[Base, str] = {
    Base.BATTER: "batter",
    Base.FIRST: "runner on first",
    Base.SECOND: "runner on second",
    Base.THIRD: "runner on third",
    Base.HOME: "runner",
}

# The base a runner leaves to reach the given base.
PREVIOUS_BASE: Dict[Base, Base] = {
    Base.FIRST: Base.BATTER,
    Base.SECOND: Base.FIRST,
    Base.THIRD: Base.SECOND,
    Base.HOME: Base.THIRD,
}

NEXT_BASE: Dict[Base, Base] = {
    Base.BATTER: Base.FIRST,
    Base.FIRST: Base.SECOND,
    Base.SECOND: Base.THIRD,
    Base.THIRD: Base.HOME,
}
