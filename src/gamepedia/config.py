"""Environment-based configuration."""

import os
from pathlib import Path

PACKAGED_STATIC_DIR = Path(__file__).parent / "web" / "static"


def get_host() -> str:
    """Interface the server binds to."""
    return os.environ.get("GAMEPEDIA_HOST", "").strip() or "0.0.0.0"


def get_port() -> int:
    """TCP port the server listens on."""
    raw = os.environ.get("GAMEPEDIA_PORT", "").strip()
    if not raw:
        return 8080
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"GAMEPEDIA_PORT must be an integer, got {raw!r}") from None


def get_static_dir() -> Path:
    """Directory served under /assets/. Defaults to the bundled front-end."""
    raw = os.environ.get("GAMEPEDIA_STATIC_DIR", "").strip()
    if not raw:
        return PACKAGED_STATIC_DIR
    return Path(raw).resolve()


def get_log_level() -> str:
    """Root logging level name for the server process."""
    return os.environ.get("GAMEPEDIA_LOG_LEVEL", "").strip().upper() or "INFO"
