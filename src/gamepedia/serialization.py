"""JSON wire format for the games list."""

from collections.abc import Sequence

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from gamepedia.errors import SerializationFault
from gamepedia.models import Game

_GAME_LIST = TypeAdapter(list[Game])


def dump_games(games: Sequence[Game]) -> bytes:
    """
    Render games as a JSON array of objects, in the given order.
    An empty sequence renders as `[]`.
    """
    try:
        return _GAME_LIST.dump_json(list(games))
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationFault(f"cannot serialize games: {e}") from e


def load_games(raw: bytes | str) -> list[Game]:
    """Parse the output of dump_games back into Game objects."""
    return _GAME_LIST.validate_json(raw)
