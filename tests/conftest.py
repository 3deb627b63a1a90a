"""
conftest.py

Shared pytest fixtures for gamewire tests.
"""

import json
import logging
from pathlib import Path

import pytest

from gamewire.models import Chat, Lobby, Message, User
from gamewire.schema import to_class

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON payload fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def user_json() -> str:
    """A valid User payload as received over the wire."""
    return (FIXTURES_DIR / "user.json").read_text()


@pytest.fixture
def chat_json() -> str:
    """A Chat snapshot in canonical (compact, schema-ordered) form."""
    return (FIXTURES_DIR / "chat.json").read_text().strip()


@pytest.fixture
def lobby_dict() -> dict:
    """A lobby snapshot holding one game of each type, plus an unknown field."""
    with open(FIXTURES_DIR / "lobby.json") as f:
        return json.load(f)


@pytest.fixture
def alice() -> User:
    return User("12345678901234", "Alice")


@pytest.fixture
def message(alice: User) -> Message:
    """A message with a fixed timestamp."""
    return Message(alice, "Hello, world!", 1709400461241)


@pytest.fixture
def chat() -> Chat:
    """A chat with two messages from the same user."""
    chat = Chat()
    chat.add("Cheetah", "38133501152442", "abc")
    chat.add("Cheetah", "38133501152442", "123")
    return chat


@pytest.fixture
def lobby(lobby_dict: dict) -> Lobby:
    result = to_class(lobby_dict, Lobby)
    assert isinstance(result, Lobby), result
    return result


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger after the test."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
