"""
gamewire - Typed wire payloads for a real-time multiplayer games app.

This package provides:
- A schema engine that validates loose JSON against declarative schemas
  and deep-copies it into typed instances
- Canonical serialization of typed instances back to JSON
- The wire blueprints (users, chat, games, lobbies, websocket frames)
"""

__version__ = "0.1.0"
