"""
game.py

PURPOSE: Base blueprints shared by every game type.
DEPENDENCIES: schema, user.py

ARCHITECTURE NOTES:
Concrete games derive their schema from BaseGame.base_schema() with
Schema.extend(), and their moves from BaseGameMove.schema(). The "name"
field holds the class name and is the discriminator that game_selector()
uses to pick the blueprint for incoming game data.

Rules, drawing and input handling live with each game, not here.
"""

from gamewire.models.user import User, random_userid
from gamewire.schema import Property, Schema, Schematized


class BaseGameMove(Schematized):
    """A move made by a user. Game-specific moves extend the schema."""

    def __init__(self, user: User | None = None) -> None:
        self.user = user if user is not None else User()

    @classmethod
    def schema(cls) -> Schema:
        return Schema(user=User)


class BaseGame(Schematized):
    """Common state of a game: id, type name and players."""

    def __init__(self, id: str | None = None) -> None:
        self.id = id if id is not None else random_userid()
        self.name = self.class_name()
        self.players: list[User] = []
        self.moves: list[BaseGameMove] = []

    @classmethod
    def class_name(cls) -> str:
        return cls.__name__

    @classmethod
    def base_schema(cls) -> Schema:
        return Schema(
            id="string",
            name="string",
            players=Property(User, array=True),
        )

    @classmethod
    def schema(cls) -> Schema:
        return cls.base_schema()

    def max_players(self) -> int:
        return 2

    def has_player(self, userid: str) -> bool:
        return any(u.userid == userid for u in self.players)

    def add_player(self, user: User) -> None:
        if self.has_player(user.userid):
            return
        self.players.append(user)

    def last_player(self) -> str:
        """Userid of whoever made the latest move, or "" if nobody has moved."""
        if not self.moves:
            return ""
        return self.moves[-1].user.userid
