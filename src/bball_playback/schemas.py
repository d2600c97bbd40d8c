from pydantic import BaseModel, Field
from typing import List, Optional

from .events.types import ParsedEvent


class TranslateRequest(BaseModel):
    event_code: str = Field(max_length=200)
    batter_id: Optional[str] = None
    # None defers to the service setting
    include_event: Optional[bool] = None

class TranslateResponse(BaseModel):
    event_code: str
    description: str
    recognized: bool
    event: Optional[ParsedEvent] = None

class BatchTranslateRequest(BaseModel):
    game_id: Optional[str] = None
    events: List[str] = Field(default_factory=list, max_length=2000)
    batter_ids: Optional[List[Optional[str]]] = None

class BatchTranslateResponse(BaseModel):
    game_id: Optional[str] = None
    descriptions: List[str]
    unrecognized: List[str]
