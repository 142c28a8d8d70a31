"""Player identities available to a new board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlayerIdentity:
    """Display name and colour handed to one player."""

    name: str
    color: str


BASE_THEME: tuple[PlayerIdentity, ...] = (
    PlayerIdentity("red", "#d32f2f"),
    PlayerIdentity("blue", "#1976d2"),
    PlayerIdentity("green", "#388e3c"),
    PlayerIdentity("yellow", "#fbc02d"),
)

RAINBOW_THEME: tuple[PlayerIdentity, ...] = (
    PlayerIdentity("red", "#e53935"),
    PlayerIdentity("orange", "#fb8c00"),
    PlayerIdentity("yellow", "#fdd835"),
    PlayerIdentity("green", "#43a047"),
    PlayerIdentity("blue", "#1e88e5"),
    PlayerIdentity("indigo", "#3949ab"),
    PlayerIdentity("violet", "#8e24aa"),
)

THEMES: dict[str, tuple[PlayerIdentity, ...]] = {
    "base": BASE_THEME,
    "rainbow": RAINBOW_THEME,
}
