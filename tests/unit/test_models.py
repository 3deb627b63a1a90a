"""
TEST DOC: Wire Blueprints

WHAT: Tests for User, AuthObject, Message, Chat, the game blueprints and Lobby.
WHY: These are the payloads browsers and the server exchange; a schema slip
     here breaks every connected client.
HOW: Instantiate real payloads, serialize them back and check the exact strings.

CASES:
- Canonical chat snapshot round-trips byte for byte
- Inherited schemas (AuthObject, NTacToeMove, RedDots) keep base fields first
- Lobby.games dispatches each element on its "name"
- BaseGame player/move helpers

EDGE CASES:
- Unknown game name rejects the whole lobby
- Unknown lobby fields are dropped
- Nested chat sent as a JSON string
"""

import json

from gamewire.models import (
    GAMES,
    XY,
    AuthObject,
    BaseGame,
    Chat,
    Lobby,
    Message,
    NTacToe,
    NTacToeMove,
    RedDots,
    User,
    game_selector,
)
from gamewire.models.user import USER_SCHEMA, USERID_LENGTH, random_userid
from gamewire.schema import SchemaError, copy, is_valid, schema_of, to_class, to_object, to_string


class TestUser:
    """Tests for User and AuthObject."""

    def test_from_json(self, user_json):
        user = to_class(user_json, User)
        assert isinstance(user, User)
        assert user.userid == "12345678901234"
        assert user.username == "Alice"

    def test_to_string(self, alice):
        assert to_string(alice) == '{"userid":"12345678901234","username":"Alice"}'

    def test_missing_userid(self, fixtures_dir):
        result = to_class((fixtures_dir / "user_missing_userid.json").read_text(), User)
        assert isinstance(result, SchemaError)
        assert result.field == "userid"

    def test_defaults(self):
        user = User()
        assert user.userid == ""
        assert user.username == ""

    def test_random_userid(self):
        userid = random_userid()
        assert len(userid) == USERID_LENGTH
        assert userid.isdigit()
        assert userid[0] != "0"

    def test_auth_object_schema_extends_user(self):
        assert list(schema_of(AuthObject)) == ["userid", "username", "lobby_id"]
        assert list(USER_SCHEMA) == ["userid", "username"]

    def test_auth_object(self):
        auth = to_class({"userid": "1", "username": "Alice", "lobby_id": "5678"}, AuthObject)
        assert isinstance(auth, AuthObject)
        user = auth.user()
        assert isinstance(user, User)
        assert (user.userid, user.username) == ("1", "Alice")

    def test_auth_object_requires_lobby_id(self):
        assert not is_valid({"userid": "1", "username": "Alice"}, AuthObject)


class TestMessage:
    """Tests for Message."""

    def test_to_string(self):
        message = Message(User("38133501152442", "Cheetah"), "asd", 1709400461241)
        assert to_string(message) == (
            '{"user":{"userid":"38133501152442","username":"Cheetah"},'
            '"body":"asd","timestamp":1709400461241}'
        )

    def test_default_timestamp(self):
        assert Message().timestamp > 0

    def test_nested_user_is_a_user(self, message):
        restored = to_class(to_string(message), Message)
        assert isinstance(restored, Message)
        assert isinstance(restored.user, User)
        assert restored.user is not message.user

    def test_string_timestamp_rejected(self):
        data = {"user": {"userid": "1", "username": "A"}, "body": "hi", "timestamp": "now"}
        result = to_class(data, Message)
        assert isinstance(result, SchemaError)
        assert result.field == "timestamp"
        assert result.actual == "string"


class TestChat:
    """Tests for Chat."""

    def test_canonical_round_trip(self, chat_json):
        chat = to_class(chat_json, Chat)
        assert isinstance(chat, Chat)
        assert to_string(chat) == chat_json

    def test_messages_are_typed(self, chat_json):
        chat = to_class(chat_json, Chat)
        assert [m.body for m in chat.messages] == ["abc", "123"]
        assert all(isinstance(m, Message) for m in chat.messages)
        assert all(isinstance(m.user, User) for m in chat.messages)

    def test_add_registers_user_once(self, chat):
        assert len(chat.messages) == 2
        assert len(chat.users) == 1
        assert chat.users[0].username == "Cheetah"

    def test_add_returns_message(self):
        chat = Chat()
        message = chat.add("Alice", "1", "hi")
        assert chat.messages == [message]
        assert message.user.userid == "1"

    def test_copy_is_independent(self, chat):
        duplicate = copy(chat)
        assert isinstance(duplicate, Chat)
        duplicate.messages[0].body = "changed"
        duplicate.users.append(User("2", "Bob"))
        assert chat.messages[0].body == "abc"
        assert len(chat.users) == 1


class TestGames:
    """Tests for the concrete game blueprints and game_selector."""

    def test_red_dots_schema(self):
        assert list(schema_of(RedDots)) == ["id", "name", "players", "width", "height", "dots"]

    def test_ntactoe_schema(self):
        assert list(schema_of(NTacToe)) == ["id", "name", "players", "n", "t", "moves"]

    def test_ntactoe_move_schema_extends_base_move(self):
        assert list(schema_of(NTacToeMove)) == ["user", "s", "r", "c"]

    def test_name_is_class_name(self):
        assert RedDots().name == "RedDots"
        assert NTacToe().name == "NTacToe"

    def test_generated_id(self):
        assert len(RedDots().id) == USERID_LENGTH
        assert RedDots("foo").id == "foo"

    def test_red_dots_round_trip(self):
        game = RedDots("foo")
        game.dots = [XY(1, 2), XY(3.5, 4)]
        restored = to_class(to_string(game), RedDots)
        assert isinstance(restored, RedDots)
        assert [(d.x, d.y) for d in restored.dots] == [(1, 2), (3.5, 4)]
        assert to_string(restored) == to_string(game)

    def test_selector(self):
        assert game_selector({"name": "RedDots"}) is RedDots
        assert game_selector({"name": "NTacToe"}) is NTacToe
        assert game_selector(NTacToe()) is NTacToe

    def test_selector_unknown(self):
        assert game_selector({"name": "Chess"}) is None
        assert game_selector({"name": 3}) is None
        assert game_selector({}) is None

    def test_registry(self):
        assert set(GAMES) == {"RedDots", "NTacToe"}

    def test_instantiate_through_selector(self):
        game = to_class(to_string(NTacToe(n=3, t=3)), game_selector)
        assert isinstance(game, NTacToe)
        assert (game.n, game.t) == (3, 3)


class TestBaseGame:
    """Tests for BaseGame helpers."""

    def test_add_player(self, alice):
        game = BaseGame("g")
        game.add_player(alice)
        game.add_player(User(alice.userid, "Alias"))
        assert len(game.players) == 1
        assert game.has_player(alice.userid)
        assert not game.has_player("nobody")

    def test_max_players(self):
        assert BaseGame().max_players() == 2

    def test_last_player(self, alice):
        game = NTacToe()
        assert game.last_player() == ""
        game.moves.append(NTacToeMove(alice, "X", 0, 0))
        assert game.last_player() == alice.userid


class TestLobby:
    """Tests for Lobby snapshots."""

    def test_games_are_dispatched_by_name(self, lobby):
        red_dots, ntactoe = lobby.games
        assert isinstance(red_dots, RedDots)
        assert isinstance(ntactoe, NTacToe)
        assert all(isinstance(d, XY) for d in red_dots.dots)
        assert red_dots.dots[1].x == 30.5
        assert isinstance(ntactoe.moves[0], NTacToeMove)
        assert isinstance(ntactoe.moves[0].user, User)

    def test_find_game(self, lobby):
        assert lobby.find_game("bar") is lobby.games[1]
        assert lobby.find_game("missing") is None

    def test_add_game(self):
        lobby = Lobby("1")
        game = RedDots("g")
        lobby.add_game(game)
        assert lobby.find_game("g") is game

    def test_unknown_fields_dropped(self, lobby):
        assert not hasattr(lobby, "spectators")
        assert "spectators" not in to_object(lobby)

    def test_unknown_game_rejects_lobby(self, lobby_dict):
        lobby_dict["games"][0]["name"] = "Chess"
        result = to_class(lobby_dict, Lobby)
        assert isinstance(result, SchemaError)
        assert result.field == "games[0]"
        assert "no blueprint matches" in str(result)

    def test_invalid_nested_move(self, lobby_dict):
        lobby_dict["games"][1]["moves"][0]["r"] = "1"
        result = to_class(lobby_dict, Lobby)
        assert isinstance(result, SchemaError)
        assert result.owner == "NTacToeMove"
        assert result.field == "r"

    def test_nested_chat_as_json_string(self, lobby_dict):
        lobby_dict["chat"] = json.dumps(lobby_dict["chat"])
        lobby = to_class(lobby_dict, Lobby)
        assert isinstance(lobby, Lobby)
        assert lobby.chat.messages[0].body == "gg"

    def test_round_trip(self, lobby):
        restored = to_class(to_string(lobby), Lobby)
        assert isinstance(restored, Lobby)
        assert to_string(restored) == to_string(lobby)

    def test_copy_keeps_game_types(self, lobby):
        duplicate = copy(lobby)
        assert isinstance(duplicate, Lobby)
        assert [type(g) for g in duplicate.games] == [RedDots, NTacToe]
        assert duplicate.games[0] is not lobby.games[0]
