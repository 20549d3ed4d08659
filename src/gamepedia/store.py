"""In-memory entry store shared by the request handlers."""

import threading

from gamepedia.models import Game


class GameStore:
    """
    Ordered, append-only list of games for the lifetime of the process.

    Handlers run in the event loop and in the threadpool, so every access
    goes through one lock. A snapshot is a copy: appends made after it was
    taken are not visible in it.
    """

    def __init__(self, games: list[Game] | None = None) -> None:
        self._games: list[Game] = list(games or [])
        self._lock = threading.Lock()

    def append(self, game: Game) -> None:
        with self._lock:
            self._games.append(game)

    def snapshot(self) -> list[Game]:
        with self._lock:
            return list(self._games)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
