"""Administrative console: register players, set the active one, dump records."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path
from typing import Iterator, TextIO

from .models import Player, Ship
from .screen import login_banner
from .storage import load_player, player_filename, save_player, set_active_player

CONSOLE_TITLE = "star traveller administrative console"
CONSOLE_DATE = "2024-06-17"

ADMIN_MENU = (
    "\n\nmenu\n"
    "--------------------------\n"
    "(d) dump player data\n"
    "(l) log player in\n"
    "(r) register new player\n"
    "(q) quit util\n\n"
)

SHIP_MENU = (
    "\n  select ship type:\n\n"
    "    (s) scout\n"
    "    (a) free trader\n"
    "    (u) packet\n\n"
)


def make_ship(
    qsp: str,
    name: str,
    builder: str,
    av: int,
    m: int,
    j: int,
    cargo: int,
    passengers: int,
    low_berths: int,
    cost: int,
) -> Ship:
    """A fresh ship with empty turrets."""
    return Ship(
        name=name,
        m=m,
        j=j,
        av=av,
        qsp=qsp,
        builder=builder,
        cargo=cargo,
        passengers=passengers,
        low_berths=low_berths,
        cost=cost,
        status=0,
    )


def new_player(name: str, choice: str) -> Player:
    """A new player with the starting ship chosen by its menu letter."""
    player = Player(name=name, kilocredits=100, col=19, row=10, turns_left=60)
    if choice == "a":
        player.turns_left = 60
        player.ship = make_ship("abu11", "beowulf", "b", 10, 1, 1, 82, 8, 10, 50)
    elif choice == "u":
        player.turns_left = 80
        player.ship = make_ship("ucs13", "ishillik", "b", 12, 1, 3, 80, 8, 10, 70)
    elif choice == "s":
        player.col = 24
        player.row = 17
        player.turns_left = 120
        player.ship = make_ship("saa22", "murphy", "b", 11, 2, 2, 4, 4, 4, 50)
    else:
        raise ValueError(f"unknown ship choice: {choice!r}")
    return player


def dump_player(player: Player) -> str:
    """Readable text listing of a player's record."""
    ship = player.ship
    lines = [
        f"name: {player.name}",
        f"kcr: {player.kilocredits}",
        f"col: {player.col}",
        f"row: {player.row}",
        f"turns-left: {player.turns_left}",
        f"ship-qsp: {ship.qsp}",
        f"ship-av: {ship.av}",
        f"ship-name: {ship.name}",
        f"ship-cost: {ship.cost}",
        f"ship-builder: {ship.builder}",
        f"ship-status: {ship.status}",
        f"ship-m: {ship.m}",
        f"ship-j: {ship.j}",
        f"ship-cargo: {ship.cargo}",
        f"ship-passengers: {ship.passengers}",
        f"ship-lowBerths: {ship.low_berths}",
    ]
    lines.extend(
        f"turret-{i}: e={t.emplacement} t={t.device_type} d={t.device}"
        for i, t in enumerate(ship.turrets)
    )
    return "\n".join(lines) + "\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class AdminConsole:
    """Menu-driven maintenance of player files in one directory."""

    def __init__(
        self,
        directory: str | PathLike = ".",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.stdout = stdout if stdout is not None else sys.stdout
        self._input = _tokens(stdin if stdin is not None else sys.stdin)

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _next(self) -> str | None:
        return next(self._input, None)

    def _ask_name(self, prompt: str) -> str | None:
        self._write(prompt)
        return self._next()

    def register(self) -> Player | None:
        """Create and save a new player; return it, or None if input ended."""
        name = self._ask_name("\n\n  enter player name: ")
        if name is None:
            return None
        self._write(SHIP_MENU)
        while True:
            token = self._next()
            if token is None:
                return None
            if token[0] in "aus":
                break
        try:
            player = new_player(name, token[0])
        except ValueError as error:
            self._write(f"\n  {error}\n")
            return None
        self._write(f"\ncreating player {name}\n")
        save_player(player, self.directory / player_filename(name))
        return player

    def login(self) -> Path | None:
        """Mark a player as active; return the marker file's path."""
        name = self._ask_name("\n\n  enter player name: ")
        if name is None:
            return None
        marker = set_active_player(name, self.directory)
        self._write(f"\n  {player_filename(name)} is set active\n")
        return marker

    def dump(self) -> Path | None:
        """Write a player's record as text; return the text file's path."""
        name = self._ask_name("\n\n\n\n  enter player name: ")
        if name is None:
            return None
        try:
            player = load_player(self.directory / player_filename(name))
        except FileNotFoundError:
            self._write(f"\n  no player named {name}\n")
            return None
        target = self.directory / f"{name}.txt"
        self._write(f"\n  dumping to {target.name}\n")
        target.write_text(dump_player(player), encoding="utf-8")
        return target

    def run(self) -> None:
        """Serve menu commands until quit or end of input."""
        actions = {"r": self.register, "l": self.login, "d": self.dump}
        while True:
            self._write(ADMIN_MENU)
            token = self._next()
            if token is None or token[0] == "q":
                return
            action = actions.get(token[0])
            if action is not None:
                action()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="startraveller-admin", description="Administer player files."
    )
    parser.add_argument("--directory", default=".", help="directory holding game files")
    args = parser.parse_args(argv)

    print(login_banner(CONSOLE_TITLE, CONSOLE_DATE))
    AdminConsole(args.directory, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())