import logging
from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI

from ..config import Settings, load_settings
from ..events.facade import describe_event, lead_with_batter
from ..logging_config import setup_logging
from ..schemas import (
    BatchTranslateRequest,
    BatchTranslateResponse,
    TranslateRequest,
    TranslateResponse,
)
from ..telemetry.coverage import maybe_log_unknown
from ..utils.players import get_name_for, load_players_csv


logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]
_DEFAULT_SETTINGS_PATH = _ROOT / "config" / "settings.example.yaml"


def _load_players(settings: Settings) -> Dict[str, str]:
    if not settings.players_csv_path:
        return {}
    path = Path(settings.players_csv_path)
    if not path.is_absolute():
        path = _ROOT / path
    players = load_players_csv(str(path))
    logger.info("Loaded %d player names from %s", len(players), path)
    return players


def _display(text: str, settings: Settings) -> str:
    if settings.capitalize and text:
        return text[0].upper() + text[1:]
    return text


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the service around an explicit Settings object."""
    if settings is None:
        settings = load_settings(str(_DEFAULT_SETTINGS_PATH))
    setup_logging(settings.log_level, settings.log_json)
    players = _load_players(settings)

    app = FastAPI(title="bball-playback")
    app.state.settings = settings
    app.state.players = players

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/v1/events/translate", response_model=TranslateResponse)
    def translate_one(req: TranslateRequest):
        described = describe_event(req.event_code)
        text = lead_with_batter(described, get_name_for(req.batter_id, players))
        if not described.recognized:
            logger.warning("Unrecognized event code", extra={"event_code": req.event_code})
            maybe_log_unknown("/v1/events/translate", req.event_code, text)

        include = settings.include_event if req.include_event is None else req.include_event
        return TranslateResponse(
            event_code=req.event_code,
            description=_display(text, settings),
            recognized=described.recognized,
            event=described.event if include else None,
        )

    @app.post("/v1/events/translate-batch", response_model=BatchTranslateResponse)
    def translate_batch(req: BatchTranslateRequest):
        batter_ids = req.batter_ids or []
        descriptions = []
        unrecognized = []
        for i, code in enumerate(req.events):
            described = describe_event(code)
            batter_id = batter_ids[i] if i < len(batter_ids) else None
            text = lead_with_batter(described, get_name_for(batter_id, players))
            if not described.recognized:
                unrecognized.append(code)
                maybe_log_unknown("/v1/events/translate-batch", code, text, game_id=req.game_id)
            descriptions.append(_display(text, settings))

        if unrecognized:
            logger.warning(
                "Unrecognized event codes in batch",
                extra={"game_id": req.game_id, "count": len(unrecognized)},
            )
        return BatchTranslateResponse(
            game_id=req.game_id,
            descriptions=descriptions,
            unrecognized=unrecognized,
        )

    return app


app = create_app()
