"""Rule registries and settings-driven board construction.

Rules and bots are looked up by the names used in :class:`Settings` so a
host (or the CLI) can choose them from configuration.

Example:
    from conquest.config import get_settings
    from conquest.factory import create_board

    board = create_board(get_settings())

For tests, build boards with :func:`conquest.domain.setup.new_board`
directly and inject whatever rule objects the scenario needs.
"""

from collections.abc import Callable
from typing import TypeVar

from conquest.config import Settings
from conquest.domain.battle import HighestRoll, RankedDice
from conquest.domain.board import Board
from conquest.domain.bots import BorderShrinkBot, RandomBot
from conquest.domain.reinforcement import RandomAnywhere, RandomBorder
from conquest.domain.setup import new_board
from conquest.domain.themes import THEMES, PlayerIdentity
from conquest.errors import ConfigurationError
from conquest.interfaces import IBattleRule, IBotStrategy, IReinforcementRule

BATTLE_RULES: dict[str, Callable[[], IBattleRule]] = {
    "highest_roll": HighestRoll,
    "ranked_dice": RankedDice,
}

REINFORCEMENT_RULES: dict[str, Callable[[], IReinforcementRule]] = {
    "random_anywhere": RandomAnywhere,
    "random_border": RandomBorder,
}

BOTS: dict[str, Callable[[], IBotStrategy]] = {
    "random": RandomBot,
    "border_shrink": BorderShrinkBot,
}

T = TypeVar("T")


def _lookup(registry: dict[str, Callable[[], T]], name: str, kind: str) -> T:
    try:
        build = registry[name]
    except KeyError:
        known = ", ".join(sorted(registry))
        raise ConfigurationError(f"Unknown {kind} '{name}' (expected one of: {known})") from None
    return build()


def create_battle_rule(name: str) -> IBattleRule:
    """Create a battle rule by registry name.

    Raises:
        ConfigurationError: If the name is not registered
    """
    return _lookup(BATTLE_RULES, name, "battle rule")


def create_reinforcement_rule(name: str) -> IReinforcementRule:
    """Create a reinforcement rule by registry name.

    Raises:
        ConfigurationError: If the name is not registered
    """
    return _lookup(REINFORCEMENT_RULES, name, "reinforcement rule")


def create_bot(name: str) -> IBotStrategy:
    """Create a bot strategy by registry name.

    Raises:
        ConfigurationError: If the name is not registered
    """
    return _lookup(BOTS, name, "bot")


def get_theme(name: str) -> tuple[PlayerIdentity, ...]:
    """Return the named theme.

    Raises:
        ConfigurationError: If no theme has that name
    """
    try:
        return THEMES[name]
    except KeyError:
        raise ConfigurationError(f"Unknown theme '{name}'") from None


def create_board(settings: Settings) -> Board:
    """Create a board with every rule and bot wired from settings.

    Args:
        settings: Application settings

    Returns:
        Fully initialized Board
    """
    bots = {
        index: create_bot(settings.bot)
        for index in range(settings.num_players)
        if index not in settings.human_players
    }
    return new_board(
        settings.board_width,
        settings.board_height,
        settings.num_players,
        get_theme(settings.theme),
        seed=settings.seed,
        battle_rule=create_battle_rule(settings.battle_rule),
        reinforcement_rule=create_reinforcement_rule(settings.reinforcement_rule),
        human_players=settings.human_players,
        bots=bots,
    )
