"""
chat.py

PURPOSE: Lobby chat blueprints.
DEPENDENCIES: schema, user.py

ARCHITECTURE NOTES:
The whole Chat is sent as one snapshot, so its schema nests Message and
User arrays. Timestamps are epoch milliseconds, matching what browsers
produce with Date.now().
"""

import time

from gamewire.models.user import User
from gamewire.schema import Property, Schema, Schematized


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class Message(Schematized):
    """A single chat message."""

    def __init__(
        self,
        user: User | None = None,
        body: str | None = None,
        timestamp: int | None = None,
    ) -> None:
        self.user = user if user is not None else User()
        self.body = body if body is not None else ""
        self.timestamp = timestamp if timestamp is not None else now_ms()

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            user=User,
            body="string",
            timestamp="number",
        )


class Chat(Schematized):
    """Messages of a lobby in the order received, plus everyone who has written."""

    def __init__(self) -> None:
        self.messages: list[Message] = []
        self.users: list[User] = []

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            messages=Property(Message, array=True),
            users=Property(User, array=True),
        )

    def add(self, username: str, userid: str, body: str) -> Message:
        """Append a message, registering its author the first time they write."""
        user = User(userid, username)
        message = Message(user, body)
        self.messages.append(message)
        if not any(u.userid == userid for u in self.users):
            self.users.append(User(userid, username))
        return message
