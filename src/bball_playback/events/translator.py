"""
Turn a ParsedEvent into an English sentence fragment.

Phrases are composed in a fixed order and joined the same way every time:

    <primary>[ <location>][<fielders>][, N RBI][; <advance>]*

The result is lower-case with no trailing period; callers capitalize.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .codes import (
    AIR_OUTS,
    BASE_NAMES,
    HIT_EVENTS,
    IMPLIED_TRAJECTORY,
    OUT_EVENTS,
    POSITION_NAMES,
    RUNNER_EVENTS,
    RUNNER_NAMES,
    Base,
    Depth,
    Direction,
    EventType,
    FielderRole,
    Trajectory,
    Zone,
)
from .types import AdvanceClause, Fielder, ParsedEvent


# Every EventType has a phrase; running events take the base as {base}.
PRIMARY_PHRASES: Dict[EventType, str] = {
    EventType.SINGLE: "singled",
    EventType.DOUBLE: "doubled",
    EventType.TRIPLE: "tripled",
    EventType.HOME_RUN: "hit a home run",
    EventType.GROUND_RULE_DOUBLE: "hit a ground-rule double",
    EventType.STRIKEOUT: "struck out",
    EventType.GROUNDOUT: "grounded out",
    EventType.FLYOUT: "flied out",
    EventType.LINEOUT: "lined out",
    EventType.POPUP: "popped out",
    EventType.SACRIFICE_HIT: "laid down a sacrifice bunt",
    EventType.SACRIFICE_FLY: "hit a sacrifice fly",
    EventType.WALK: "walked",
    EventType.INTENTIONAL_WALK: "was intentionally walked",
    EventType.HIT_BY_PITCH: "was hit by a pitch",
    EventType.ERROR: "reached on an error",
    EventType.FIELDERS_CHOICE: "reached on a fielder's choice",
    EventType.STOLEN_BASE: "stole {base}",
    EventType.CAUGHT_STEALING: "was caught stealing {base}",
    EventType.PICKOFF: "was picked off {base}",
    EventType.PICKOFF_CAUGHT_STEALING: "was picked off and caught stealing {base}",
    EventType.WILD_PITCH: "wild pitch",
    EventType.PASSED_BALL: "passed ball",
    EventType.BALK: "balk",
    EventType.NO_PLAY: "no play",
    EventType.UNKNOWN: "recorded a play",
}

# Running events where an error let the runner stay safe.
SAFE_ON_ERROR_PHRASES: Dict[EventType, str] = {
    EventType.CAUGHT_STEALING: "was safe stealing {base}",
    EventType.PICKOFF: "was safe on a pickoff attempt at {base}",
    EventType.PICKOFF_CAUGHT_STEALING: "was safe stealing {base} after a pickoff attempt",
}

SECONDARY_PHRASES: Dict[EventType, str] = {
    EventType.WILD_PITCH: "on a wild pitch",
    EventType.PASSED_BALL: "on a passed ball",
    EventType.ERROR: "on an error",
    EventType.STOLEN_BASE: "while the runner stole {base}",
    EventType.CAUGHT_STEALING: "and the runner was caught stealing {base}",
    EventType.PICKOFF: "and the runner was picked off {base}",
    EventType.PICKOFF_CAUGHT_STEALING: "and the runner was picked off and caught stealing {base}",
}

# Verb used for "<verb> into a double play".
MULTI_OUT_VERBS: Dict[EventType, str] = {
    EventType.STRIKEOUT: "struck out",
    EventType.GROUNDOUT: "grounded",
    EventType.FLYOUT: "flied",
    EventType.LINEOUT: "lined",
    EventType.POPUP: "popped",
    EventType.SACRIFICE_HIT: "bunted",
    EventType.SACRIFICE_FLY: "flied",
}

TRAJECTORY_PHRASES: Dict[Trajectory, str] = {
    Trajectory.GROUND: "on a ground ball",
    Trajectory.LINE: "on a line drive",
    Trajectory.FLY: "on a fly ball",
    Trajectory.POP: "on a pop fly",
    Trajectory.UNKNOWN: "",
}

DIRECTION_PHRASES: Dict[Direction, str] = {
    Direction.LEFT: "left field",
    Direction.LEFT_CENTER: "left-center field",
    Direction.CENTER: "center field",
    Direction.RIGHT_CENTER: "right-center field",
    Direction.RIGHT: "right field",
    Direction.LEFT_SIDE: "the left side of the infield",
    Direction.MIDDLE: "the middle of the infield",
    Direction.RIGHT_SIDE: "the right side of the infield",
    Direction.UNKNOWN: "",
}

# Base named in a stolen-base style phrase ("stole second base", "stole home").
STEAL_BASE_NAMES: Dict[Base, str] = {
    Base.BATTER: "home",
    Base.FIRST: "first base",
    Base.SECOND: "second base",
    Base.THIRD: "third base",
    Base.HOME: "home",
}

_ATTRIBUTED_EVENTS = OUT_EVENTS | RUNNER_EVENTS | {EventType.ERROR, EventType.FIELDERS_CHOICE}


def translate(event: ParsedEvent) -> str:
    text = _primary_phrase(event)
    location = _location_phrase(event)
    if location:
        text = f"{text} {location}"
    text += _fielder_phrase(event)
    if event.rbi:
        text += f", {event.rbi} RBI"
    return "; ".join([text] + advance_phrases(event))


def advance_phrases(event: ParsedEvent) -> List[str]:
    """Phrases for the clauses the primary phrase does not already narrate."""
    return [_advance_phrase(c) for c in event.base_running if not c.narrated_by_event]


def _primary_phrase(event: ParsedEvent) -> str:
    kind = event.primary_event_type
    narrated = [
        c for c in event.base_running
        if c.narrated_by_event and c.from_base is not Base.BATTER
    ]

    if kind in RUNNER_EVENTS:
        clause = narrated[0] if narrated else None
        template = PRIMARY_PHRASES[kind]
        if clause is not None and clause.is_error and not clause.is_out:
            template = SAFE_ON_ERROR_PHRASES.get(kind, template)
        text = template.format(base=_running_base(kind, clause))
        narrated = narrated[1:]
    elif event.out_count >= 2 and kind in MULTI_OUT_VERBS:
        play = "triple" if event.out_count == 3 else "double"
        text = f"{MULTI_OUT_VERBS[kind]} into a {play} play"
    else:
        text = PRIMARY_PHRASES[kind]

    secondary = event.secondary_event_type
    if secondary is not None:
        suffix = SECONDARY_PHRASES[secondary]
        if secondary in RUNNER_EVENTS:
            suffix = suffix.format(base=_running_base(secondary, narrated[0] if narrated else None))
        text = f"{text} {suffix}"
    return text


def _running_base(kind: EventType, clause: Optional[AdvanceClause]) -> str:
    if clause is None:
        return "a base"
    if kind is EventType.PICKOFF:
        return BASE_NAMES[clause.from_base]
    return STEAL_BASE_NAMES[clause.to_base]


def _location_phrase(event: ParsedEvent) -> str:
    loc = event.location
    kind = event.primary_event_type
    if kind not in HIT_EVENTS:
        if kind in AIR_OUTS and loc.depth in (Depth.DEEP, Depth.SHALLOW):
            return loc.depth.value
        return ""

    words: List[str] = []
    if loc.trajectory is not IMPLIED_TRAJECTORY.get(kind, Trajectory.UNKNOWN):
        words.append(TRAJECTORY_PHRASES[loc.trajectory])

    area = _hit_area(event)
    if area:
        depth = ""
        if loc.zone is Zone.OUTFIELD and loc.depth in (Depth.DEEP, Depth.SHALLOW):
            depth = f"{loc.depth.value} "
        words.append(f"to {depth}{area}")
    return " ".join(w for w in words if w)


def _hit_area(event: ParsedEvent) -> str:
    loc = event.location
    if loc.zone is Zone.INFIELD and len(event.fielders) == 1:
        # S6: name the infielder who handled it
        return f"the {POSITION_NAMES[event.fielders[0].position]}"
    return DIRECTION_PHRASES[loc.direction]


def _fielder_phrase(event: ParsedEvent) -> str:
    kind = event.primary_event_type
    secondary = event.secondary_event_type
    if secondary is EventType.ERROR:
        # K+E2: name the fielder charged with the error
        return _error_by(event.fielders)
    if kind not in _ATTRIBUTED_EVENTS and secondary not in RUNNER_EVENTS:
        return ""

    fielders = event.fielders
    if not fielders:
        return ""
    if len(fielders) == 1:
        if kind is EventType.STRIKEOUT:
            return ""
        fielder = fielders[0]
        preposition = "to" if fielder.role in (FielderRole.PUTOUT, FielderRole.ASSIST) else "by"
        return f" {preposition} the {POSITION_NAMES[fielder.position]}"
    return f", {fielder_chain(fielders)}"


def _error_by(fielders: Tuple[Fielder, ...]) -> str:
    errors = [f for f in fielders if f.role is FielderRole.ERROR]
    if not errors:
        return ""
    return f" by the {POSITION_NAMES[errors[-1].position]}"


def fielder_chain(fielders: Tuple[Fielder, ...]) -> str:
    """``6-4-3 (shortstop to second baseman to first baseman)``, in recorded order."""
    digits = "-".join(
        f"E{f.position}" if f.role is FielderRole.ERROR else str(f.position)
        for f in fielders
    )
    names = " to ".join(POSITION_NAMES[f.position] for f in fielders)
    return f"{digits} ({names})"


def _advance_phrase(clause: AdvanceClause) -> str:
    runner = RUNNER_NAMES[clause.from_base]
    if clause.is_out and clause.to_base is clause.from_base:
        text = f"{runner} doubled off {BASE_NAMES[clause.to_base]}"
    elif clause.is_out:
        text = f"{runner} out at {BASE_NAMES[clause.to_base]}"
    elif clause.to_base is Base.HOME:
        text = f"{runner} scores"
    else:
        text = f"{runner} advances to {BASE_NAMES[clause.to_base]}"

    errors = [f for f in clause.fielders if f.role is FielderRole.ERROR]
    if errors:
        text += f" on an error by the {POSITION_NAMES[errors[-1].position]}"
    throws = [str(f.position) for f in clause.fielders if f.role is not FielderRole.ERROR]
    if clause.is_out and throws:
        text += f" ({'-'.join(throws)})"
    if clause.rbi_credited:
        text += " (RBI)"
    return text
