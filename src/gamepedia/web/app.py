"""FastAPI app: greeting, game list routes and the static front-end."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from gamepedia.config import get_static_dir
from gamepedia.errors import GamepediaError
from gamepedia.store import GameStore
from gamepedia.web.routes import games_router

GREETING = "Hello Gamepedia!"


async def _fault_handler(request: Request, exc: GamepediaError) -> Response:
    """Request faults end in an empty 500; the process keeps going."""
    request.app.state.logger.error(
        "%s %s failed: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )
    return Response(status_code=500)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Wrong method on a known route: status and Allow header only.
    if exc.status_code == 405:
        return Response(status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


def mount_static_and_routes(app: FastAPI, static_dir: Path) -> None:
    """Mount the front-end under /assets and include the game routes."""
    if static_dir.exists():
        app.mount("/assets", StaticFiles(directory=str(static_dir), html=True), name="assets")
    app.include_router(games_router, tags=["games"])


def create_app(
    store: GameStore | None = None,
    logger: logging.Logger | None = None,
    static_dir: Path | None = None,
) -> FastAPI:
    """
    Build the application around one game store.
    Every app gets its own store unless one is passed in.
    """
    app = FastAPI(title="Gamepedia", version="0.1.0")
    app.state.store = store if store is not None else GameStore()
    app.state.logger = logger or logging.getLogger("gamepedia.web")
    app.add_exception_handler(GamepediaError, _fault_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    @app.get("/hello", response_class=PlainTextResponse)
    async def hello():
        """Liveness greeting."""
        return GREETING

    mount_static_and_routes(app, static_dir or get_static_dir())
    return app


app = create_app()
