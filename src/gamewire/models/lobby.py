"""
lobby.py

PURPOSE: Lobby snapshot blueprint: chat plus the games being played.
DEPENDENCIES: schema, chat.py, games.py

ARCHITECTURE NOTES:
Lobby.games holds games of different types. Its schema declares the field
with game_selector, so each element is instantiated as the blueprint its
"name" selects; an unknown game name rejects the whole snapshot.
"""

from gamewire.models.chat import Chat
from gamewire.models.game import BaseGame
from gamewire.models.games import game_selector
from gamewire.schema import Property, Schema, Schematized


class Lobby(Schematized):
    """A lobby, identified by the id in its URL path."""

    def __init__(self, id: str = "") -> None:
        self.id = id
        self.chat = Chat()
        self.games: list[BaseGame] = []

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            id="string",
            chat=Chat,
            games=Property(game_selector, array=True),
        )

    def add_game(self, game: BaseGame) -> None:
        self.games.append(game)

    def find_game(self, game_id: str) -> BaseGame | None:
        for game in self.games:
            if game.id == game_id:
                return game
        return None
