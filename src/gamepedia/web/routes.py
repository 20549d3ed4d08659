"""Game list routes: read the store as JSON, record a game from a form."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response

from gamepedia.forms import (
    FORM_URLENCODED,
    decode_form,
    media_type,
    read_form_body,
    resolve_game_fields,
)
from gamepedia.serialization import dump_games
from gamepedia.store import GameStore

LANDING_PATH = "/assets/"

games_router = APIRouter()


def get_store(request: Request) -> GameStore:
    return request.app.state.store


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


@games_router.get("/game")
def list_games(store: GameStore = Depends(get_store)):
    """All recorded games, oldest first."""
    return Response(content=dump_games(store.snapshot()), media_type="application/json")


@games_router.post("/game")
async def create_game(
    request: Request,
    store: GameStore = Depends(get_store),
    logger: logging.Logger = Depends(get_logger),
):
    """Record one game from form fields, then send the browser back to the page."""
    content_type = request.headers.get("content-type")
    body = b""
    if media_type(content_type) == FORM_URLENCODED:
        body = await read_form_body(request.stream())
    form = decode_form(content_type, body, request.url.query)
    game = resolve_game_fields(form)
    store.append(game)
    logger.info("Recorded game %r (%d total)", game.title, len(store))
    return RedirectResponse(LANDING_PATH, status_code=302)
