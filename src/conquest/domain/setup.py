"""Board factory: builds a fully dealt, reinforced starting position."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from typing import TYPE_CHECKING

from conquest.domain.battle import HighestRoll
from conquest.domain.board import Board
from conquest.domain.bots import RandomBot
from conquest.domain.grid import build_grid, compute_neighbors
from conquest.domain.models import Player, PlayerID
from conquest.domain.reinforcement import RandomAnywhere, RandomBorder
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.domain.themes import BASE_THEME, PlayerIdentity
from conquest.errors import ConfigurationError
from conquest.utils.rng import create_rng

if TYPE_CHECKING:
    from conquest.interfaces import IBattleRule, IBotStrategy, IReinforcementRule


def new_board(  # noqa: PLR0913
    width: int,
    height: int,
    num_players: int,
    theme: Sequence[PlayerIdentity] | None = None,
    *,
    seed: int | str | None = None,
    battle_rule: IBattleRule | None = None,
    reinforcement_rule: IReinforcementRule | None = None,
    human_players: Collection[int] = (),
    bots: Mapping[int, IBotStrategy] | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> Board:
    """Initialize a new game board.

    Steps, in order: allocate zones and neighbors, create one player per
    theme entry, pick a random starting player, deal every zone through a
    random permutation, then give each player
    ``floor(width * height * 3 / num_players)`` starting units placed at
    random (capped per zone).  The starting units always use the
    ``RandomAnywhere`` rule regardless of the reinforcement rule installed
    for play.

    Args:
        width: Number of columns
        height: Number of rows
        num_players: Number of players, at most ``len(theme)``
        theme: Player identities in seating order (defaults to BASE_THEME)
        seed: Seed for the board's random source; same seed, same board
        battle_rule: Rule used during play (defaults to HighestRoll)
        reinforcement_rule: Rule used at end of turn (defaults to RandomBorder)
        human_players: Indices of players controlled by a person
        bots: Bot strategy per player index; others get a RandomBot
        rules: Rule constants

    Returns:
        A Board ready for its first action

    Raises:
        ConfigurationError: If any parameter cannot produce a playable board
    """

    theme = BASE_THEME if theme is None else tuple(theme)
    bots = dict(bots or {})
    _validate(width, height, num_players, theme, human_players, bots)

    rng = create_rng(seed)

    zones = build_grid(
        width,
        height,
        max_strength=rules.zone.max_strength,
        initial_strength=rules.zone.initial_strength,
    )
    compute_neighbors(zones)

    players = [
        Player(
            id=PlayerID(index),
            name=identity.name,
            color=identity.color,
            is_human=index in human_players,
            bot=bots.get(index, RandomBot()),
        )
        for index, identity in enumerate(theme[:num_players])
    ]

    current_turn = rng.randrange(num_players)

    deal_order = [zone.id for zone in zones]
    rng.shuffle(deal_order)
    for position, zone_id in enumerate(deal_order):
        player = players[position % num_players]
        zones[zone_id].owner = player.id
        player.zones.add(zone_id)

    board = Board(
        width,
        height,
        zones=zones,
        players=players,
        battle_rule=battle_rule if battle_rule is not None else HighestRoll(),
        reinforcement_rule=(
            reinforcement_rule if reinforcement_rule is not None else RandomBorder()
        ),
        rng=rng,
        rules=rules,
        current_turn=current_turn,
    )

    starting_units = (width * height * rules.setup.initial_reinforcement_multiplier) // num_players
    initial_rule = RandomAnywhere()
    for player in players:
        initial_rule.reinforce(board, player, starting_units).apply(board)

    return board


def _validate(
    width: int,
    height: int,
    num_players: int,
    theme: Sequence[PlayerIdentity],
    human_players: Collection[int],
    bots: Mapping[int, object],
) -> None:
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Board dimensions must be positive, got {width}x{height}")
    if num_players <= 0:
        raise ConfigurationError(f"At least one player is required, got {num_players}")
    if num_players > len(theme):
        raise ConfigurationError(
            f"Theme only provides {len(theme)} player identities, {num_players} requested"
        )
    if num_players > width * height:
        raise ConfigurationError(
            f"{num_players} players cannot share a board of {width * height} zones"
        )
    for index in [*human_players, *bots]:
        if not 0 <= index < num_players:
            raise ConfigurationError(f"Player index {index} is out of range")
