"""The player's command loop and the game's entry point."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path
from typing import Iterator, TextIO

from .astrogation import Atlas, InvalidJumpError, attempt_jump, render_map
from .models import GameState, Player, Ship
from .screen import splash
from .storage import (
    GAMESTATE_FILENAME,
    load_active_player,
    load_game_state,
    player_filename,
    save_game_state,
    save_player,
)

ATLAS_FILENAME = "worlds.json"

COMMAND_MENU = (
    "\n\ncommand menu\n\n"
    " 1    - trade\n"
    " 2    - map\n"
    " 3    - upgrade\n"
    " 4    - end turn\n"
    " xxxx - jump to hex\n"
)

UPGRADE_MENU = (
    "\n\nupgrade ship menu\n"
    " m - change maneuver rating\n"
    " j - change jump rating\n"
    " r - rebalance cargo, passengers, and low berths\n"
    " 1 - change turret 1\n"
    " 2 - change turret 2\n"
)


def turret_summary(ship: Ship, index: int) -> str:
    """Description of one of the ship's turret emplacements."""
    turret = ship.turrets[index]
    return (
        f"\nemplacement {index + 1}:\n"
        f" - emplacement type: {turret.emplacement}\n"
        f" - device type: {turret.device_type}\n"
        f" - device id: {turret.device}\n"
    )


def _logout_message(name: str) -> str:
    return (
        f"player {name}, your turns are up.\n\n"
        "please allow another player to log in, if possible, before re-logging in.\n\n"
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Game:
    """One player's session: menu commands that spend turns."""

    def __init__(
        self,
        state: GameState,
        player: Player,
        atlas: Atlas,
        directory: str | PathLike = ".",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.state = state
        self.player = player
        self.atlas = atlas
        self.directory = Path(directory)
        self.stdout = stdout if stdout is not None else sys.stdout
        self._input = _tokens(stdin if stdin is not None else sys.stdin)

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _next(self) -> str | None:
        return next(self._input, None)

    @property
    def player_path(self) -> Path:
        return self.directory / player_filename(self.player.name)

    def trade(self) -> int:
        """Trade at the starport; return the turns spent."""
        return 0

    def show_map(self) -> None:
        for _color, line in render_map(self.atlas, self.player):
            self._write(f"{line}\n")

    def upgrade(self) -> int:
        """Show the shipyard menu; return the turns spent."""
        self._write(UPGRADE_MENU + "\n")
        self._write(turret_summary(self.player.ship, 0))
        self._write(turret_summary(self.player.ship, 1))
        return 0

    def missions(self) -> int:
        """View available missions; return the turns spent."""
        return 0

    def end_turn(self) -> None:
        self.state.next_turn()
        save_game_state(self.state, self.directory / GAMESTATE_FILENAME)
        self._write("turn ended. next player, please log in.\n")

    def _jump(self, hex_code: int) -> None:
        self._write(f"\njump to hex {hex_code:04d}? ")
        answer = self._next()
        if answer is None or not answer.startswith("y"):
            return
        try:
            attempt_jump(self.player, hex_code)
        except InvalidJumpError as error:
            self._write(f"\n  {error}\n\n")
            return
        self.player.turns_left -= 1
        self._write(f"you are now at hex {hex_code:04d}\n")

    def command_menu(self) -> None:
        """Run commands until the player's turns are spent or input ends."""
        spending = {1: self.trade, 3: self.upgrade, 4: self.missions}
        while self.player.turns_left > 0:
            self._write(COMMAND_MENU)
            self._write(f"\nyou have {self.player.turns_left} turns left\n")
            self._write("enter your choice: ")
            token = self._next()
            if token is None:
                return
            try:
                choice = int(token)
            except ValueError:
                continue
            if choice in spending:
                self.player.turns_left -= spending[choice]()
            elif choice == 2:
                self.show_map()
            elif choice == 5:
                self.end_turn()
            elif choice > 100:
                self._jump(choice)
            save_player(self.player, self.player_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="startraveller", description="Play a turn.")
    parser.add_argument("--directory", default=".", help="directory holding game files")
    parser.add_argument("--atlas", default=None, help="JSON file of sector worlds")
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    state = load_game_state(directory / GAMESTATE_FILENAME)
    player, _path = load_active_player(directory)
    if player.turns_left < 1:
        print(_logout_message(player.name), end="")
        return 0

    atlas_path = Path(args.atlas) if args.atlas else directory / ATLAS_FILENAME
    atlas = Atlas.load(atlas_path) if atlas_path.exists() else Atlas([])

    print(splash(player.name))
    print("press a key to begin")
    sys.stdin.readline()

    Game(state, player, atlas, directory, sys.stdin, sys.stdout).command_menu()
    print(_logout_message(player.name), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())