"""Domain model and rules for the conquest simulation.

This package holds everything that decides the outcome of a game:

* Dataclasses for zones, players and attack plans (see :mod:`models`).
* The zone graph and connected-area analysis.
* The turn engine (:mod:`board`) and the board factory (:mod:`setup`).
* Bundled battle rules, reinforcement rules and bots.

Nothing here renders, animates or talks to a host application.
"""

from . import (
    battle,
    board,
    bots,
    connectivity,
    enums,
    grid,
    models,
    outcomes,
    reinforcement,
    rules_config,
    setup,
    themes,
)

__all__ = [
    "battle",
    "board",
    "bots",
    "connectivity",
    "enums",
    "grid",
    "models",
    "outcomes",
    "reinforcement",
    "rules_config",
    "setup",
    "themes",
]
