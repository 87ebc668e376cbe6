"""Saving and loading the game state and player files."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

from .models import GameState, Player

GAMESTATE_FILENAME = "game.dat"
ACTIVE_FILENAME = "active.p"
PLAYER_SUFFIX = ".p"


def _write_json(path: str | PathLike, data: Any) -> None:
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def _read_json(path: str | PathLike) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def save_game_state(state: GameState, path: str | PathLike) -> None:
    _write_json(path, state.to_dict())


def load_game_state(path: str | PathLike) -> GameState:
    return GameState.from_dict(_read_json(path))


def player_filename(name: str) -> str:
    return f"{name}{PLAYER_SUFFIX}"


def save_player(player: Player, path: str | PathLike) -> None:
    _write_json(path, player.to_dict())


def load_player(path: str | PathLike) -> Player:
    return Player.from_dict(_read_json(path))


def set_active_player(name: str, directory: str | PathLike) -> Path:
    """Mark the named player as the one who plays next; return the marker path."""
    marker = Path(directory) / ACTIVE_FILENAME
    marker.write_text(player_filename(name), encoding="utf-8")
    return marker


def load_active_player(directory: str | PathLike) -> tuple[Player, Path]:
    """Load the active player and return it with the path of its file."""
    tokens = (Path(directory) / ACTIVE_FILENAME).read_text(encoding="utf-8").split()
    if not tokens:
        raise ValueError("no active player is set")
    path = Path(directory) / tokens[0]
    return load_player(path), path