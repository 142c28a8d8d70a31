"""Headless runner that plays a full all-bot game."""

from __future__ import annotations

import argparse
import logging
import sys

from conquest.config import Settings, get_settings
from conquest.domain.enums import AttackOutcome
from conquest.domain.themes import THEMES
from conquest.errors import ConfigurationError
from conquest.factory import BATTLE_RULES, BOTS, REINFORCEMENT_RULES, create_board
from conquest.schemas import BoardRead
from conquest.services import GameService

logger = logging.getLogger(__name__)


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a conquest game between bots")
    parser.add_argument("--width", type=int, default=defaults.board_width, help="Zone columns")
    parser.add_argument("--height", type=int, default=defaults.board_height, help="Zone rows")
    parser.add_argument(
        "--players", type=int, default=defaults.num_players, help="Number of players"
    )
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for a replayable game")
    parser.add_argument("--theme", choices=sorted(THEMES), default=defaults.theme)
    parser.add_argument("--battle-rule", choices=sorted(BATTLE_RULES), default=defaults.battle_rule)
    parser.add_argument(
        "--reinforcement-rule",
        choices=sorted(REINFORCEMENT_RULES),
        default=defaults.reinforcement_rule,
    )
    parser.add_argument("--bot", choices=sorted(BOTS), default=defaults.bot)
    parser.add_argument(
        "--max-actions",
        type=int,
        default=defaults.max_actions,
        help="Stop after this many bot actions even if nobody has won",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final board as JSON instead of a status line",
    )
    return parser


def run_game(settings: Settings) -> GameService:
    """Build a board from settings and let the bots play it out."""

    service = GameService(create_board(settings))
    board = service.board
    last_round = board.round
    print(board.game_status())

    for _ in range(settings.max_actions):
        outcome = service.take_bot_action()
        if board.round != last_round:
            last_round = board.round
            print(board.game_status())
        if outcome == AttackOutcome.GAME_OVER:
            break
    else:
        logger.warning("No winner after %d actions", settings.max_actions)

    return service


def main(argv: list[str] | None = None) -> int:
    defaults = get_settings()
    args = build_parser(defaults).parse_args(argv)
    settings = defaults.model_copy(
        update={
            "board_width": args.width,
            "board_height": args.height,
            "num_players": args.players,
            "seed": args.seed,
            "theme": args.theme,
            "battle_rule": args.battle_rule,
            "reinforcement_rule": args.reinforcement_rule,
            "bot": args.bot,
            "max_actions": args.max_actions,
            "human_players": [],
        }
    )
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        service = run_game(settings)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    board = service.board
    if args.json:
        print(BoardRead.from_board(board).model_dump_json(indent=2))
    elif board.winner is not None:
        print(f"{board.game_status()}\nWinner: {board.winner.name} in round {board.round}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
