"""Wire blueprints for users, chat, games, lobbies and websocket frames."""

from gamewire.models.chat import Chat, Message
from gamewire.models.game import BaseGame, BaseGameMove
from gamewire.models.games import GAMES, XY, NTacToe, NTacToeMove, RedDots, game_selector
from gamewire.models.lobby import Lobby
from gamewire.models.user import AuthObject, User
from gamewire.models.websocket import (
    WEB_SOCKET_ACTIONS,
    WebSocketMessage,
    decode_message,
    encode_message,
)

# Blueprints addressable by name, e.g. from the CLI
BLUEPRINTS: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        AuthObject,
        Chat,
        Lobby,
        Message,
        NTacToe,
        NTacToeMove,
        RedDots,
        User,
        WebSocketMessage,
        XY,
    )
}

__all__ = [
    "BLUEPRINTS",
    "GAMES",
    "WEB_SOCKET_ACTIONS",
    "XY",
    "AuthObject",
    "BaseGame",
    "BaseGameMove",
    "Chat",
    "Lobby",
    "Message",
    "NTacToe",
    "NTacToeMove",
    "RedDots",
    "User",
    "WebSocketMessage",
    "decode_message",
    "encode_message",
    "game_selector",
]
