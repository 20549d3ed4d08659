"""Game record as stored and served."""

from pydantic import BaseModel

GAME_FIELDS = ("title", "genre", "description", "rating", "link")


class Game(BaseModel):
    """One catalog entry. Every field is free text; empty is allowed."""

    title: str = ""
    genre: str = ""
    description: str = ""
    rating: str = ""
    link: str = ""
