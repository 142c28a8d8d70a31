"""Pydantic snapshots of a board, its players and zones."""

from __future__ import annotations

from pydantic import BaseModel, Field

from conquest.domain.board import Board
from conquest.domain.enums import GamePhase


class ZoneRead(BaseModel):
    id: int = Field(..., description="Index of the zone on the board")
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")
    strength: int = Field(..., ge=0, description="Units currently in the zone")
    max_strength: int = Field(..., ge=0, description="Unit cap")
    owner: int | None = Field(None, description="Owning player index (NULL if unclaimed)")


class PlayerRead(BaseModel):
    id: int = Field(..., description="Seat index")
    name: str
    color: str = Field(..., description="Display colour from the theme")
    is_human: bool = False
    is_dead: bool = False
    zone_count: int = Field(..., ge=0)
    strength: int = Field(..., ge=0, description="Total units across owned zones")
    largest_area: int = Field(..., ge=0, description="Size of the largest connected area")


class BoardRead(BaseModel):
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    round: int = Field(..., ge=0)
    current_turn: int = Field(..., ge=0)
    phase: GamePhase
    winner: int | None = Field(None, description="Winning player index once the game is over")
    players: list[PlayerRead]
    zones: list[ZoneRead]

    @classmethod
    def from_board(cls, board: Board) -> BoardRead:
        """Take a read-only snapshot for renderers and logs."""

        winner = board.winner
        return cls(
            width=board.width,
            height=board.height,
            round=board.round,
            current_turn=board.current_turn,
            phase=board.phase,
            winner=winner.id if winner is not None else None,
            players=[
                PlayerRead(
                    id=p.id,
                    name=p.name,
                    color=p.color,
                    is_human=p.is_human,
                    is_dead=p.is_dead,
                    zone_count=len(p.zones),
                    strength=board.player_strength(p),
                    largest_area=len(board.largest_area(p)),
                )
                for p in board.players
            ],
            zones=[
                ZoneRead(
                    id=z.id,
                    x=z.x,
                    y=z.y,
                    strength=z.strength,
                    max_strength=z.max_strength,
                    owner=z.owner,
                )
                for z in board.zones
            ],
        )
