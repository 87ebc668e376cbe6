"""Hex distances, the world atlas and jump navigation."""

from __future__ import annotations

import json
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable

from .models import Player, World

MAP_HEADER = (
    " hex   world name      uwp        bases  belt  jovian  zone   alleg  distance  "
)


class InvalidJumpError(ValueError):
    """Raised when a jump destination is out of range or the current hex."""


class Color(str, Enum):
    LIGHTGREEN = "lightgreen"
    YELLOW = "yellow"
    LIGHTRED = "lightred"
    LIGHTBLUE = "lightblue"


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def distance(col1: int, row1: int, col2: int, row2: int) -> int:
    """Number of hex steps between two hexes of the sector map."""
    aa = row1 + _half(col1)
    ab = row2 + _half(col2)
    da = abs(aa - ab)
    db = abs(col1 - col2)
    d = abs(aa - ab - col1 + col2)
    return max(da, db, d)


class Atlas:
    """Lookup of worlds by hex position."""

    def __init__(self, worlds: Iterable[World]) -> None:
        self._worlds: dict[tuple[int, int], World] = {}
        for world in worlds:
            self._worlds.setdefault((world.col, world.row), world)

    def __len__(self) -> int:
        return len(self._worlds)

    def __iter__(self):
        return iter(self._worlds.values())

    def find(self, col: int, row: int) -> World | None:
        return self._worlds.get((col, row))

    @classmethod
    def load(cls, path: str | PathLike) -> Atlas:
        """Read an atlas from a JSON list of world records."""
        records = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(World.from_dict(r) for r in records)


def world_color(world: World, player: Player) -> Color:
    if player.position == (world.col, world.row):
        return Color.LIGHTGREEN
    if world.zone == 1:
        return Color.YELLOW
    if world.zone == 2:
        return Color.LIGHTRED
    return Color.LIGHTBLUE


def format_world(world: World, player: Player) -> str:
    """One row of the astrogation table, without the distance column."""
    bases = ("n" if world.has_naval_base else " ") + ("s" if world.has_scout_base else " ")
    belt = "y" if world.has_belt else " "
    gg = "y" if world.has_gg else " "
    return (
        f" {world.col:02d}{world.row:02d}  {world.name:<15} {world.uwp:>9}  {bases:>2}"
        f"     {belt}     {gg}       {world.zone.label:<5}  {world.allegiance.label:<8}  "
    )


def render_map(atlas: Atlas, player: Player) -> list[tuple[Color | None, str]]:
    """Header and world rows within jump range, each paired with its colour."""
    lines: list[tuple[Color | None, str]] = [(None, MAP_HEADER)]
    reach = player.ship.j
    for col in range(player.col - reach, player.col + reach + 1):
        for row in range(player.row - reach, player.row + reach + 1):
            world = atlas.find(col, row)
            if world is None:
                continue
            d = distance(col, row, player.col, player.row)
            lines.append((world_color(world, player), f"{format_world(world, player)}{d}"))
    return lines


def attempt_jump(player: Player, hex_code: int) -> int:
    """Move the player to the hex code CCRR; return the distance jumped."""
    col, row = divmod(hex_code, 100)
    d = distance(col, row, player.col, player.row)
    if d == 0 or d > player.ship.j:
        raise InvalidJumpError(f"({col:02d}{row:02d}) invalid destination!")
    player.col = col
    player.row = row
    return d