"""
user.py

PURPOSE: User identity blueprints exchanged over HTTP and websockets.
DEPENDENCIES: schema

ARCHITECTURE NOTES:
User is the most widely nested blueprint: chat messages, game players and
game moves all carry one. AuthObject is the login payload binding a user
to a lobby.
"""

import random

from gamewire.schema import Schema, Schematized

USERID_LENGTH = 14

USER_SCHEMA = Schema(
    userid="string",
    username="string",
)


def random_userid() -> str:
    """Generate a random numeric user/game id (14 digits, no leading zero)."""
    first = str(random.randint(1, 9))
    rest = "".join(str(random.randint(0, 9)) for _ in range(USERID_LENGTH - 1))
    return first + rest


class User(Schematized):
    """A player, identified by userid and shown by username."""

    def __init__(self, userid: str | None = None, username: str | None = None) -> None:
        self.userid = userid if userid is not None else ""
        self.username = username if username is not None else ""

    @classmethod
    def schema(cls) -> Schema:
        return USER_SCHEMA


class AuthObject(Schematized):
    """Login payload: a user joining a specific lobby."""

    def __init__(
        self,
        userid: str | None = None,
        username: str | None = None,
        lobby_id: str | None = None,
    ) -> None:
        self.userid = userid if userid is not None else ""
        self.username = username if username is not None else ""
        self.lobby_id = lobby_id if lobby_id is not None else ""

    @classmethod
    def schema(cls) -> Schema:
        return USER_SCHEMA.extend(lobby_id="string")

    def user(self) -> User:
        """The User part of this payload."""
        return User(self.userid, self.username)
