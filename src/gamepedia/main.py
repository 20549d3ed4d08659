"""Run the Gamepedia server."""

import logging

import uvicorn

from gamepedia.config import get_host, get_log_level, get_port


def run():
    """Entry point for gamepedia CLI."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(
        "gamepedia.web.app:app",
        host=get_host(),
        port=get_port(),
        reload=False,
    )


if __name__ == "__main__":
    run()
