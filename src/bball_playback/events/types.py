from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .codes import Base, Depth, Direction, EventType, FielderRole, Trajectory, Zone


class Fielder(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(ge=1, le=9)
    role: FielderRole = FielderRole.UNKNOWN


class Location(BaseModel):
    """Where and how the ball was hit. Every field falls back to ``unknown``."""

    model_config = ConfigDict(frozen=True)

    zone: Zone = Zone.UNKNOWN
    direction: Direction = Direction.UNKNOWN
    depth: Depth = Depth.UNKNOWN
    trajectory: Trajectory = Trajectory.UNKNOWN

    @property
    def is_known(self) -> bool:
        return any(
            v.value != "unknown"
            for v in (self.zone, self.direction, self.depth, self.trajectory)
        )


class AdvanceClause(BaseModel):
    """One runner's movement on the play, e.g. ``2-H`` or ``1X3(52)``."""

    model_config = ConfigDict(frozen=True)

    from_base: Base
    to_base: Base
    is_out: bool = False
    is_error: bool = False
    rbi_credited: bool = False
    # fielders named in the clause's parentheses, in throw order
    fielders: Tuple[Fielder, ...] = ()
    # clause implied by the event code itself (SB2 -> 1-2); the primary
    # phrase already narrates it
    narrated_by_event: bool = False


class ParsedEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_event_type: EventType = EventType.UNKNOWN
    secondary_event_type: Optional[EventType] = None
    fielders: Tuple[Fielder, ...] = ()
    location: Location = Location()
    base_running: Tuple[AdvanceClause, ...] = ()
    modifiers: Tuple[str, ...] = ()
    rbi: Optional[int] = None

    is_out: bool = False
    out_count: int = Field(default=0, ge=0, le=3)
    is_double_play: bool = False
    is_triple_play: bool = False
    is_fielders_choice: bool = False
    is_error: bool = False

    raw_event: str = ""

    @property
    def is_unknown(self) -> bool:
        return self.primary_event_type is EventType.UNKNOWN
