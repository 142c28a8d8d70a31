"""Protocol-based interfaces for the pluggable game strategies.

Battle rules, reinforcement rules and bots are injected when a board is
built and never swapped mid-game.
"""

from conquest.interfaces.battle import IBattleRule
from conquest.interfaces.bot import IBotStrategy
from conquest.interfaces.reinforcement import IReinforcementRule, IReinforcementSink

__all__ = [
    "IBattleRule",
    "IBotStrategy",
    "IReinforcementRule",
    "IReinforcementSink",
]
