"""Dataclasses describing the conquest board entities.

Zones and players are stored in arenas on the board (``board.zones`` and
``board.players``) and refer to each other through stable integer
identifiers rather than object references.  Ownership is therefore two
index relations kept consistent by the board:

* ``Zone.owner`` holds the owning ``PlayerID`` (or None while unclaimed).
* ``Player.zones`` holds the ``ZoneID`` of every zone the player owns.

Adjacency is a ``frozenset`` of zone ids computed once when the board is
built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NewType

from conquest.utils.grid_math import GridCoord

if TYPE_CHECKING:
    from conquest.interfaces import IBotStrategy

# --- Strongly typed identifiers -------------------------------------------------

ZoneID = NewType("ZoneID", int)
PlayerID = NewType("PlayerID", int)


# --- Core dataclasses -----------------------------------------------------------


@dataclass(slots=True)
class Zone:
    """A single grid cell, the unit of ownership and combat."""

    id: ZoneID
    x: int
    y: int
    strength: int = 1
    max_strength: int = 9
    owner: PlayerID | None = None
    neighbors: frozenset[ZoneID] = field(default_factory=frozenset)

    @property
    def coord(self) -> GridCoord:
        return GridCoord(x=self.x, y=self.y)

    def is_neighbor_of(self, other: Zone) -> bool:
        return other.id in self.neighbors


@dataclass(slots=True)
class Player:
    """A participant in the game, human or bot."""

    id: PlayerID
    name: str
    color: str
    is_human: bool = False
    is_dead: bool = False
    zones: set[ZoneID] = field(default_factory=set)
    bot: IBotStrategy | None = None

    def mark_dead_if_empty(self) -> bool:
        """Flag the player as eliminated once they own nothing.

        Returns True if this call eliminated the player.  A dead player is
        never revived.
        """
        if self.is_dead or self.zones:
            return False
        self.is_dead = True
        return True


@dataclass(frozen=True, slots=True)
class AttackPlan:
    """A proposed attacker/defender zone pair awaiting resolution."""

    attacker: ZoneID | None
    defender: ZoneID | None
