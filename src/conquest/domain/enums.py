"""Enumerations for the conquest domain."""

from __future__ import annotations

from enum import StrEnum


class GamePhase(StrEnum):
    """States of the board's turn state machine."""

    AWAITING_ACTION = "awaiting_action"
    RESOLVING = "resolving"
    GAME_OVER = "game_over"


class AttackOutcome(StrEnum):
    """Result signalled to the host after every player or bot action."""

    NORMAL = "normal"
    INVALID = "invalid"
    GAME_OVER = "game_over"


class InvalidReason(StrEnum):
    """Why an attack plan was rejected."""

    MISSING_PLAN = "missing_plan"
    MISSING_ZONE = "missing_zone"
    UNOWNED_ATTACKER = "unowned_attacker"
    INSUFFICIENT_STRENGTH = "insufficient_strength"
    NOT_ADJACENT = "not_adjacent"
    SAME_OWNER = "same_owner"
    NOT_YOUR_ZONE = "not_your_zone"
    GAME_OVER = "game_over"
