import pytest

from startraveller.models import CargoItem, GameState, Player, Ship
from startraveller.storage import (
    ACTIVE_FILENAME,
    load_active_player,
    load_game_state,
    load_player,
    player_filename,
    save_game_state,
    save_player,
    set_active_player,
)


def make_player(name="alice"):
    return Player(
        name=name,
        kilocredits=100,
        col=19,
        row=10,
        turns_left=60,
        ship=Ship(name="beowulf", qsp="abu11", builder="b", j=1, cost=50),
        cargo_manifest=[CargoItem(type=1, quantity=4, value=200)],
    )


def test_game_state_round_trip(tmp_path):
    state = GameState(date=42, player_names=["alice"])
    path = tmp_path / "game.dat"
    save_game_state(state, path)
    assert load_game_state(path) == state


def test_player_filename():
    assert player_filename("alice") == "alice.p"


def test_player_round_trip(tmp_path):
    player = make_player()
    path = tmp_path / player_filename(player.name)
    save_player(player, path)
    assert load_player(path) == player


def test_active_player(tmp_path):
    player = make_player("bob")
    save_player(player, tmp_path / player_filename("bob"))
    marker = set_active_player("bob", tmp_path)
    assert marker.read_text() == "bob.p"
    loaded, path = load_active_player(tmp_path)
    assert loaded == player
    assert path == tmp_path / "bob.p"


def test_active_player_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_active_player(tmp_path)


def test_active_player_empty(tmp_path):
    (tmp_path / ACTIVE_FILENAME).write_text("   ")
    with pytest.raises(ValueError):
        load_active_player(tmp_path)


def test_load_game_state_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game_state(tmp_path / "absent.dat")