from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .codes import HIT_EVENTS, OUT_EVENTS, EventType
from .parser import parse
from .translator import advance_phrases, translate
from .types import ParsedEvent


GENERIC_DESCRIPTION = "recorded a play"

# Codes outside the parsed grammar that still have a fixed English reading.
FALLBACK_DESCRIPTIONS: Dict[str, str] = {
    "DI": "defensive indifference",
    "OA": "runner advanced on the play",
    "C": "reached on catcher's interference",
    "FLE": "error on a foul fly ball",
}

# Events whose phrase reads with the batter as subject.
BATTER_EVENTS = HIT_EVENTS | OUT_EVENTS | {
    EventType.WALK,
    EventType.INTENTIONAL_WALK,
    EventType.HIT_BY_PITCH,
    EventType.ERROR,
    EventType.FIELDERS_CHOICE,
}

_LEADING_CODE_RE = re.compile(r"^[A-Z]+")


class EventDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    event: ParsedEvent
    # False only when neither the grammar nor the fallback table knew the code
    recognized: bool


def describe_event(raw_code: str) -> EventDescription:
    """Parse and translate one event code, falling back for codes the parser left unknown."""
    event = parse(raw_code)
    if not event.is_unknown:
        return EventDescription(description=translate(event), event=event, recognized=True)

    fallback = _fallback_for(event.raw_event)
    if fallback is None:
        description = translate(event)
    else:
        description = "; ".join([fallback] + advance_phrases(event))
    return EventDescription(
        description=description or GENERIC_DESCRIPTION,
        event=event,
        recognized=fallback is not None,
    )


def translate_event(raw_code: str) -> str:
    return describe_event(raw_code).description


def narrate(
    raw_code: str,
    batter_id: Optional[str] = None,
    player_names: Optional[Mapping[str, str]] = None,
) -> str:
    """Translate a code and lead with the batter's name when the lookup has it.

    Running events, pitcher miscues and unknown codes are narrated without a
    name: the batter is not their subject.
    """
    name = None
    if batter_id and player_names:
        name = player_names.get(batter_id)
    return lead_with_batter(describe_event(raw_code), name)


def lead_with_batter(described: EventDescription, name: Optional[str]) -> str:
    if name and described.event.primary_event_type in BATTER_EVENTS:
        return f"{name} {described.description}"
    return described.description


def _fallback_for(raw: str) -> Optional[str]:
    code = raw.strip().upper().lstrip("#!?")
    m = _LEADING_CODE_RE.match(code)
    if not m:
        return None
    return FALLBACK_DESCRIPTIONS.get(m.group(0))
