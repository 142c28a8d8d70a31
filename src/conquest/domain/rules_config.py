"""Declarative rule configuration for the conquest domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ZoneRules:
    """Per-zone unit limits."""

    max_strength: int = 9
    initial_strength: int = 1


@dataclass(frozen=True, slots=True)
class SetupRules:
    """Initial deal parameters."""

    # floor(width * height * multiplier / players) units per player
    initial_reinforcement_multiplier: int = 3


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Dice parameters shared by the bundled battle rules."""

    die_faces: int = 6
    attacker_max_dice: int = 3
    defender_max_dice: int = 2


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    zone: ZoneRules = ZoneRules()
    setup: SetupRules = SetupRules()
    battle: BattleRules = BattleRules()


DEFAULT_RULES = RulesConfig()
