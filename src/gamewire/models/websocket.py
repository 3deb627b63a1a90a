"""
websocket.py

PURPOSE: The websocket envelope and its encode/decode helpers.
DEPENDENCIES: schema

ARCHITECTURE NOTES:
Every websocket frame is a WebSocketMessage. The payload is itself a JSON
string (a Message, a game, a move...) that the receiver instantiates with
the blueprint implied by the action. Invalid frames are logged and
dropped, never raised to the connection handler.
"""

import json
import logging

from gamewire.schema import Schema, SchemaError, Schematized, to_class, to_string

logger = logging.getLogger(__name__)

WEB_SOCKET_ACTIONS = (
    "",
    "chat",
    "lobby",
    "replace_game",
    "update_game",
    "game_move",
    "username",
)


class WebSocketMessage(Schematized):
    """Envelope for everything sent over a lobby websocket."""

    def __init__(
        self,
        action: str = "",
        lobby_id: str = "",
        game_id: str = "",
        payload: str = "",
    ) -> None:
        self.action = action
        self.lobby_id = lobby_id
        self.game_id = game_id
        self.payload = payload

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            action="string",
            lobby_id="string",
            game_id="string",
            payload="string",
        )

    def pretty(self) -> str:
        """Log-friendly rendering with the payload JSON indented."""
        try:
            payload = json.dumps(json.loads(self.payload), indent=2, ensure_ascii=False)
        except (ValueError, RecursionError):
            payload = self.payload
        return (
            f'action: "{self.action}", lobby_id: "{self.lobby_id}", '
            f'game_id: "{self.game_id}", payload: \n{payload}'
        )


def decode_message(raw: str) -> WebSocketMessage | None:
    """
    Instantiate a received frame.

    Returns:
        The message, or None if the frame is malformed or has an unknown action.
    """
    message = to_class(raw, WebSocketMessage)
    if isinstance(message, SchemaError):
        logger.warning(f"Dropping invalid websocket message: {message}")
        return None
    if message.action not in WEB_SOCKET_ACTIONS:
        logger.warning(f"Dropping websocket message with unknown action '{message.action}'")
        return None
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"<- Received: {message.pretty()}")
    return message


def encode_message(message: WebSocketMessage) -> str:
    """
    Serialize a frame for sending.

    Raises:
        SchemaError: If the message fields have the wrong types.
    """
    data = to_string(message, revalidate=True)
    if isinstance(data, SchemaError):
        raise data
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"-> Sent: {message.pretty()}")
    return data
