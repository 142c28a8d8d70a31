"""Read-only snapshot schemas for rendering consumers and logs."""

from .board import BoardRead, PlayerRead, ZoneRead

__all__ = [
    "BoardRead",
    "PlayerRead",
    "ZoneRead",
]
