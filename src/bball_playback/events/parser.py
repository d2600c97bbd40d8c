"""
Retrosheet event-code parser.

Grammar handled here (the common modern subset):

    <primary>[+<secondary>][/<modifier>]*[.<advance>[;<advance>]*]

- primary: an event code matched by longest prefix (POCS before PO, DGR
  before D) followed by fielder digits, a base for running events (SB2,
  CS3(25), PO1(E1)), or a bare fielder chain (8, 31, 64(1)3).
- secondary: a running event or wild pitch/passed ball/error after "+"
  (K+WP, W+SB2); digits only after "+" are an explicit RBI count.
- modifier: batted-ball trajectory/location (G6M, F78, L9LS, BG) or a play
  annotation (GDP, SF, FO, E5).
- advance: <from>-<to> or <from>X<to> with parenthesized annotations
  (1X3(52), 2-H(E7), 3-H(NR)).

``parse`` is total: input it cannot classify comes back as
``EventType.UNKNOWN`` with ``raw_event`` preserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .codes import (
    AIR_OUTS,
    ANNOTATION_MODIFIERS,
    BARE_EVENTS,
    CODES_BY_LENGTH,
    EVENT_CODES,
    GAP_AREAS,
    HIT_EVENTS,
    IMPLIED_TRAJECTORY,
    MULTI_OUT_MODIFIERS,
    NEXT_BASE,
    NO_RBI_EVENTS,
    OUT_EVENTS,
    POSITION_AREAS,
    PREVIOUS_BASE,
    RUNNER_EVENTS,
    SECONDARY_EVENTS,
    TRAJECTORY_CODES,
    TRAJECTORY_OUTS,
    Base,
    Depth,
    Direction,
    EventType,
    FielderRole,
    Trajectory,
    Zone,
)
from .types import AdvanceClause, Fielder, Location, ParsedEvent


_IGNORED_CHARS = "#!? \t"

_CHAIN_RE = re.compile(r"^(?:[1-9]|\([B123]\))*$")
_CHAIN_TOKEN_RE = re.compile(r"[1-9]|\([B123]\)")
_DIGITS_RE = re.compile(r"^[1-9]*$")
_RUNNER_RE = re.compile(r"^([123H])((?:\([^)]*\))*)$")
_ADVANCE_RE = re.compile(r"^([B123])([-X])([123H])((?:\([^)]*\))*)$")
_PAREN_RE = re.compile(r"\(([^)]*)\)")
_FIELDING_RE = re.compile(r"^([1-9]*)(?:E([1-9]))?$")
_ERROR_MODIFIER_RE = re.compile(r"^E([1-9])$")
_BATTED_BALL_RE = re.compile(r"^(BG|BP|BL|G|L|F|P)?([1-9]{1,2})?([A-Z]*)$")
_LOCATION_SUFFIX = set("DSMLFX")

_NO_RBI_NOTES = {"NR", "UR", "NORBI"}
_AIR_TRAJECTORIES = {Trajectory.LINE, Trajectory.FLY, Trajectory.POP}

# Clause drafts are plain dicts until the RBI rule can see the whole play.
ClauseDraft = Dict[str, Any]


@dataclass
class _Draft:
    event_type: EventType = EventType.UNKNOWN
    secondary: Optional[EventType] = None
    fielders: List[Fielder] = field(default_factory=list)
    clauses: List[ClauseDraft] = field(default_factory=list)
    zone: Zone = Zone.UNKNOWN
    direction: Direction = Direction.UNKNOWN
    depth: Depth = Depth.UNKNOWN
    trajectory: Trajectory = Trajectory.UNKNOWN
    bare_chain: bool = False
    batter_retired: bool = True
    chain_outs: int = 0
    multi_out: int = 0
    error_noted: bool = False
    rbi: Optional[int] = None

    def locate(self, position: int) -> None:
        zone, direction = POSITION_AREAS[position]
        self.zone, self.direction = zone, direction


def parse(raw_code: str) -> ParsedEvent:
    """Parse one event code. Never raises; ``raw_event`` keeps the input verbatim."""
    raw = raw_code if isinstance(raw_code, str) else ""
    code = "".join(ch for ch in raw.upper() if ch not in _IGNORED_CHARS)
    draft = _Draft()
    if not code:
        return _finish(draft, (), [], raw)

    main, _, advance_part = code.partition(".")
    primary, _, modifier_part = main.partition("/")
    modifiers = tuple(m for m in modifier_part.split("/") if m)

    _parse_primary(primary, draft)
    _apply_modifiers(modifiers, draft)

    explicit: List[ClauseDraft] = []
    for text in advance_part.split(";"):
        clause = _parse_advance(text) if text else None
        if clause is not None:
            explicit.append(clause)
    return _finish(draft, modifiers, explicit, raw)


def _match_code(token: str) -> Tuple[Optional[EventType], str]:
    for code in CODES_BY_LENGTH:
        if token.startswith(code):
            return EVENT_CODES[code], token[len(code):]
    return None, token


def _parse_primary(token: str, draft: _Draft) -> None:
    head, _, extra = token.partition("+")
    if extra.isdigit():
        draft.rbi = int(extra)
        extra = ""

    parts = head.split(";")
    event_type, rest = _match_code(parts[0])

    if event_type is None:
        if len(parts) == 1 and rest[:1].isdigit() and _CHAIN_RE.match(rest):
            _parse_bare_chain(rest, draft)
    elif event_type in RUNNER_EVENTS:
        clauses = _running_clauses(parts)
        if clauses is not None:
            draft.event_type = event_type
            draft.fielders.extend(clauses[0]["fielders"])
            draft.clauses.extend(clauses)
    elif len(parts) == 1:
        _parse_fielded(event_type, rest, draft)

    if extra and draft.event_type is not EventType.UNKNOWN:
        _parse_secondary(extra, draft)


def _parse_fielded(event_type: EventType, rest: str, draft: _Draft) -> None:
    """Events whose remainder is fielder digits (or nothing)."""
    if event_type in BARE_EVENTS:
        if rest == "":
            draft.event_type = event_type
        return

    if event_type in HIT_EVENTS or event_type is EventType.FIELDERS_CHOICE:
        if not _DIGITS_RE.match(rest):
            return
        if event_type is EventType.FIELDERS_CHOICE and len(rest) > 1:
            return
        draft.event_type = event_type
        draft.fielders.extend(Fielder(position=int(d), role=FielderRole.FIELDED) for d in rest)
        if rest:
            draft.locate(int(rest[0]))
        if event_type is EventType.HOME_RUN:
            draft.clauses.append({
                "from_base": Base.BATTER,
                "to_base": Base.HOME,
                "is_out": False,
                "is_error": False,
                "fielders": (),
                "narrated_by_event": True,
                "rbi_flag": True,
            })
        return

    if event_type is EventType.ERROR:
        if len(rest) == 1 and _DIGITS_RE.match(rest):
            draft.event_type = event_type
            draft.fielders.append(Fielder(position=int(rest), role=FielderRole.ERROR))
            draft.locate(int(rest))
        return

    # outs: K, G, F, L, P, SH, SF with an optional fielding chain
    if not _CHAIN_RE.match(rest) or rest.startswith("("):
        return
    draft.event_type = event_type
    _read_chain(rest, draft)
    if draft.fielders and event_type is not EventType.STRIKEOUT:
        draft.locate(draft.fielders[0].position)


def _parse_bare_chain(chain: str, draft: _Draft) -> None:
    _read_chain(chain, draft)
    draft.bare_chain = True
    first = draft.fielders[0].position
    if len(draft.fielders) == 1 and first >= 7:
        draft.event_type = EventType.FLYOUT
    else:
        draft.event_type = EventType.GROUNDOUT
    draft.locate(first)


def _read_chain(chain: str, draft: _Draft) -> None:
    """Read fielder digits left to right, noting runners put out along the way.

    ``64(1)3``: the shortstop fields, the second baseman forces the runner
    from first, then throws to first for the batter.
    """
    tokens = _CHAIN_TOKEN_RE.findall(chain)
    batter_marked = False
    for i, tok in enumerate(tokens):
        if tok.startswith("("):
            continue
        following = tokens[i + 1:]
        position = int(tok)
        if following and following[0].startswith("("):
            role = FielderRole.PUTOUT
            base = Base(following[0][1])
            if base is Base.BATTER:
                batter_marked = True
            else:
                draft.clauses.append({
                    "from_base": base,
                    "to_base": NEXT_BASE[base],
                    "is_out": True,
                    "is_error": False,
                    "fielders": (Fielder(position=position, role=role),),
                    "narrated_by_event": False,
                    "rbi_flag": None,
                    "runner_marker": True,
                })
        elif all(t.startswith("(") for t in following):
            role = FielderRole.PUTOUT
        else:
            role = FielderRole.ASSIST
        draft.fielders.append(Fielder(position=position, role=role))

    ends_on_runner = bool(tokens) and tokens[-1].startswith("(") and tokens[-1] != "(B)"
    draft.batter_retired = batter_marked or not ends_on_runner
    if "(" not in chain and len(draft.fielders) >= 3:
        # an unannotated relay of three or more fielders retired extra runners
        draft.chain_outs = min(len(draft.fielders) - 2, 2)


def _parse_fielding(content: str) -> Optional[Tuple[List[Fielder], bool]]:
    """Parse a parenthesized fielding note: ``52``, ``E5`` or ``5E3``."""
    m = _FIELDING_RE.match(content.split("/")[0])
    if not m or not (m.group(1) or m.group(2)):
        return None
    throwers, error_by = m.group(1), m.group(2)
    fielders: List[Fielder] = []
    for i, d in enumerate(throwers):
        last = i == len(throwers) - 1
        role = FielderRole.PUTOUT if (last and not error_by) else FielderRole.ASSIST
        fielders.append(Fielder(position=int(d), role=role))
    if error_by:
        fielders.append(Fielder(position=int(error_by), role=FielderRole.ERROR))
    return fielders, bool(error_by)


def _running_clauses(parts: List[str]) -> Optional[List[ClauseDraft]]:
    """SB2, CS3(25), PO1(E1), POCS2(1361); several joined by ';'."""
    clauses: List[ClauseDraft] = []
    for i, part in enumerate(parts):
        event_type, rest = _match_code(part)
        m = _RUNNER_RE.match(rest) if event_type in RUNNER_EVENTS else None
        if m is None:
            return None
        base = Base(m.group(1))
        if event_type is EventType.PICKOFF:
            if base is Base.HOME:
                return None
            from_base = to_base = base
        elif base is Base.FIRST:
            return None
        else:
            from_base, to_base = PREVIOUS_BASE[base], base

        fielders: List[Fielder] = []
        is_error = False
        for content in _PAREN_RE.findall(m.group(2)):
            noted = _parse_fielding(content)
            if noted is not None:
                fielders.extend(noted[0])
                is_error = is_error or noted[1]

        clauses.append({
            "from_base": from_base,
            "to_base": to_base,
            "is_out": event_type is not EventType.STOLEN_BASE and not is_error,
            "is_error": is_error,
            "fielders": tuple(fielders),
            "narrated_by_event": i == 0,
            "rbi_flag": None,
        })
    return clauses


def _parse_secondary(extra: str, draft: _Draft) -> None:
    parts = extra.split(";")
    event_type, rest = _match_code(parts[0])
    if event_type not in SECONDARY_EVENTS:
        return
    if event_type in RUNNER_EVENTS:
        clauses = _running_clauses(parts)
        if clauses is None:
            return
        draft.fielders.extend(clauses[0]["fielders"])
        draft.clauses.extend(clauses)
    elif event_type is EventType.ERROR:
        if len(parts) > 1 or len(rest) != 1 or not _DIGITS_RE.match(rest):
            return
        draft.fielders.append(Fielder(position=int(rest), role=FielderRole.ERROR))
    elif len(parts) > 1 or rest:
        return
    draft.secondary = event_type


def _apply_modifiers(modifiers: Tuple[str, ...], draft: _Draft) -> None:
    for token in modifiers:
        if token in MULTI_OUT_MODIFIERS:
            draft.multi_out = max(draft.multi_out, MULTI_OUT_MODIFIERS[token])
            _set_trajectory(TRAJECTORY_CODES.get(token[:-2]), draft)
            continue
        if token in ANNOTATION_MODIFIERS:
            continue
        err = _ERROR_MODIFIER_RE.match(token)
        if err:
            position = int(err.group(1))
            if not any(f.position == position and f.role is FielderRole.ERROR for f in draft.fielders):
                draft.fielders.append(Fielder(position=position, role=FielderRole.ERROR))
            draft.error_noted = True
            continue

        m = _BATTED_BALL_RE.match(token)
        if not m or not (m.group(1) or m.group(2)) or set(m.group(3)) - _LOCATION_SUFFIX:
            continue  # unrecognized modifier
        _set_trajectory(TRAJECTORY_CODES.get(m.group(1) or ""), draft)

        digits = m.group(2)
        if digits and draft.zone is Zone.UNKNOWN:
            zone, direction = GAP_AREAS.get(digits) or POSITION_AREAS[int(digits[0])]
            draft.zone = zone
            if draft.direction is Direction.UNKNOWN:
                draft.direction = direction

        suffix = m.group(3)
        if draft.depth is Depth.UNKNOWN:
            if "D" in suffix:
                draft.depth = Depth.DEEP
            elif "S" in suffix:
                draft.depth = Depth.SHALLOW
            elif "M" in suffix:
                draft.depth = Depth.MEDIUM

    # Sacrifice annotations refine the out type once trajectories are settled.
    if "SF" in modifiers and draft.event_type in (EventType.FLYOUT, EventType.LINEOUT, EventType.POPUP):
        draft.event_type = EventType.SACRIFICE_FLY
    elif "SH" in modifiers and draft.event_type in OUT_EVENTS - {EventType.STRIKEOUT}:
        draft.event_type = EventType.SACRIFICE_HIT

    if draft.trajectory is Trajectory.UNKNOWN and draft.event_type in OUT_EVENTS:
        draft.trajectory = IMPLIED_TRAJECTORY.get(draft.event_type, Trajectory.UNKNOWN)


def _set_trajectory(trajectory: Optional[Trajectory], draft: _Draft) -> None:
    # the first trajectory given wins
    if trajectory is None or draft.trajectory is not Trajectory.UNKNOWN:
        return
    draft.trajectory = trajectory
    if draft.bare_chain:
        # 8/L8: the modifier says how the ball was caught
        draft.event_type = TRAJECTORY_OUTS[trajectory]


def _parse_advance(text: str) -> Optional[ClauseDraft]:
    m = _ADVANCE_RE.match(text)
    if not m:
        return None
    is_out = m.group(2) == "X"
    is_error = False
    rbi_flag: Optional[bool] = None
    fielders: List[Fielder] = []
    for content in _PAREN_RE.findall(m.group(4)):
        if content in _NO_RBI_NOTES:
            rbi_flag = False
        elif content == "RBI":
            rbi_flag = True
        else:
            noted = _parse_fielding(content)
            if noted is not None:
                fielders.extend(noted[0])
                is_error = is_error or noted[1]
    return {
        "from_base": Base(m.group(1)),
        "to_base": Base(m.group(3)),
        # an error on the play lets the runner stay safe
        "is_out": is_out and not is_error,
        "is_error": is_error,
        "fielders": tuple(fielders),
        "narrated_by_event": False,
        "rbi_flag": rbi_flag,
    }


def _finish(draft: _Draft, modifiers: Tuple[str, ...], explicit: List[ClauseDraft], raw: str) -> ParsedEvent:
    if draft.event_type in AIR_OUTS or draft.trajectory in _AIR_TRAJECTORIES:
        # 8(B)84(2): on a caught ball, marked runners are doubled off the bases they held
        for c in draft.clauses:
            if c.get("runner_marker"):
                c["to_base"] = c["from_base"]

    covered = {c["from_base"] for c in explicit}
    implied = [
        c for c in draft.clauses
        if c["from_base"] not in covered
        or (c["narrated_by_event"] and c["from_base"] is not Base.BATTER)
    ]
    clauses = implied + explicit

    out_count = sum(1 for c in clauses if c["is_out"])
    if (
        draft.event_type in OUT_EVENTS
        and draft.batter_retired
        and not any(c["from_base"] is Base.BATTER for c in clauses)
    ):
        out_count += 1
    out_count += draft.chain_outs
    out_count = min(max(out_count, draft.multi_out), 3)

    is_double_play = out_count == 2
    is_triple_play = out_count == 3
    no_rbi = (
        draft.event_type in NO_RBI_EVENTS
        or draft.secondary in NO_RBI_EVENTS
        or is_double_play
        or is_triple_play
    )

    base_running = tuple(
        AdvanceClause(
            from_base=c["from_base"],
            to_base=c["to_base"],
            is_out=c["is_out"],
            is_error=c["is_error"],
            rbi_credited=_credits_rbi(c, no_rbi),
            fielders=c["fielders"],
            narrated_by_event=c["narrated_by_event"],
        )
        for c in clauses
    )

    is_error = (
        draft.event_type is EventType.ERROR
        or draft.secondary is EventType.ERROR
        or draft.error_noted
        or any(f.role is FielderRole.ERROR for f in draft.fielders)
        or any(c.is_error for c in base_running)
    )

    return ParsedEvent(
        primary_event_type=draft.event_type,
        secondary_event_type=draft.secondary,
        fielders=tuple(draft.fielders),
        location=Location(
            zone=draft.zone,
            direction=draft.direction,
            depth=draft.depth,
            trajectory=draft.trajectory,
        ),
        base_running=base_running,
        modifiers=modifiers,
        rbi=draft.rbi,
        is_out=out_count > 0,
        out_count=out_count,
        is_double_play=is_double_play,
        is_triple_play=is_triple_play,
        is_fielders_choice=draft.event_type is EventType.FIELDERS_CHOICE,
        is_error=is_error,
        raw_event=raw,
    )


def _credits_rbi(clause: ClauseDraft, no_rbi: bool) -> bool:
    if clause["to_base"] is not Base.HOME or clause["is_out"]:
        return False
    if clause["rbi_flag"] is not None:
        return clause["rbi_flag"]
    return not (no_rbi or clause["is_error"] or clause["narrated_by_event"])
