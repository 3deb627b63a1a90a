"""
games.py

PURPOSE: Wire blueprints of the concrete game types and the game type selector.
DEPENDENCIES: schema, game.py

ARCHITECTURE NOTES:
Only the synchronized state of each game is described here. game_selector()
is the type-selector function used wherever a field may hold any game
(e.g. Lobby.games): it maps the "name" discriminator to a blueprint.
"""

from collections.abc import Mapping
from typing import Any

from gamewire.models.game import BaseGame, BaseGameMove
from gamewire.models.user import User
from gamewire.schema import Property, Schema, Schematized

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 1200


class XY(Schematized):
    """A point on the canvas."""

    def __init__(self, x: float = 0, y: float = 0) -> None:
        self.x = x
        self.y = y

    @classmethod
    def schema(cls) -> Schema:
        return Schema(x="number", y="number")


class RedDots(BaseGame):
    """Drawing game: players place red dots on a shared canvas."""

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id)
        self.width = CANVAS_WIDTH
        self.height = CANVAS_HEIGHT
        self.dots: list[XY] = []

    @classmethod
    def schema(cls) -> Schema:
        return cls.base_schema().extend(
            width="number",
            height="number",
            dots=Property(XY, array=True),
        )


class NTacToeMove(BaseGameMove):
    """Placing symbol s at row r, column c."""

    def __init__(
        self,
        user: User | None = None,
        s: str = "",
        r: int = 0,
        c: int = 0,
    ) -> None:
        super().__init__(user)
        self.s = s
        self.r = r
        self.c = c

    @classmethod
    def schema(cls) -> Schema:
        return super().schema().extend(s="string", r="number", c="number")


class NTacToe(BaseGame):
    """N-by-N board, t in a row wins."""

    def __init__(self, n: int = 5, t: int = 4) -> None:
        super().__init__()
        self.n = n
        self.t = t
        self.moves: list[NTacToeMove] = []

    @classmethod
    def schema(cls) -> Schema:
        return cls.base_schema().extend(
            n="number",
            t="number",
            moves=Property(NTacToeMove, array=True),
        )


GAMES: dict[str, type[BaseGame]] = {
    "RedDots": RedDots,
    "NTacToe": NTacToe,
}


def game_selector(data: Any) -> type[BaseGame] | None:
    """Pick the game blueprint named by data["name"] (or data.name), or None."""
    if isinstance(data, Mapping):
        name = data.get("name")
    else:
        name = getattr(data, "name", None)
    if not isinstance(name, str):
        return None
    return GAMES.get(name)
