"""Host-facing services built on top of the domain layer."""

from conquest.services.game_service import GameService

__all__ = ["GameService"]
