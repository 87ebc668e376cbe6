import json
import itertools

import pytest

from startraveller.astrogation import (
    MAP_HEADER,
    Atlas,
    Color,
    InvalidJumpError,
    attempt_jump,
    distance,
    format_world,
    render_map,
    world_color,
)
from startraveller.models import Allegiance, Player, Ship, World, Zone


def make_player(col=24, row=17, j=2):
    return Player(name="alice", col=col, row=row, turns_left=10, ship=Ship(name="murphy", j=j))


def test_distance_worked_example():
    assert distance(24, 17, 24, 19) == 2


def test_distance_self_is_zero():
    assert distance(7, 9, 7, 9) == 0


GRID = [(c, r) for c in range(-2, 5) for r in range(-2, 5)]


def test_distance_symmetric():
    for a, b in itertools.combinations(GRID, 2):
        assert distance(*a, *b) == distance(*b, *a)


def test_distance_triangle_inequality():
    sample = GRID[::3]
    for a, b, c in itertools.product(sample, repeat=3):
        assert distance(*a, *c) <= distance(*a, *b) + distance(*b, *c)


def test_atlas_find_and_first_wins():
    first = World(col=1, row=2, name="first")
    atlas = Atlas([first, World(col=1, row=2, name="second")])
    assert atlas.find(1, 2) is first
    assert atlas.find(3, 3) is None
    assert len(atlas) == 1


def test_atlas_load(tmp_path):
    path = tmp_path / "worlds.json"
    path.write_text(json.dumps([{"col": 24, "row": 17, "name": "regina", "allegiance": 5}]))
    atlas = Atlas.load(path)
    assert atlas.find(24, 17).allegiance is Allegiance.REGINA


def test_world_color():
    player = make_player()
    assert world_color(World(col=24, row=17, name="here", zone=Zone.RED), player) is Color.LIGHTGREEN
    assert world_color(World(col=1, row=1, name="a", zone=Zone.AMBER), player) is Color.YELLOW
    assert world_color(World(col=1, row=1, name="r", zone=Zone.RED), player) is Color.LIGHTRED
    assert world_color(World(col=1, row=1, name="n"), player) is Color.LIGHTBLUE


def test_format_world():
    world = World(
        col=24, row=19, name="regina", uwp="A788899-C", has_naval_base=True,
        zone=Zone.AMBER, allegiance=Allegiance.REGINA, has_gg=True,
    )
    line = format_world(world, make_player())
    assert line.startswith(" 2419  regina")
    assert "A788899-C" in line
    assert "amber" in line
    assert "regina  " in line[30:]


def test_render_map_range():
    near = World(col=24, row=19, name="near")
    far = World(col=24, row=25, name="far")
    lines = render_map(Atlas([near, far]), make_player())
    assert lines[0] == (None, MAP_HEADER)
    texts = [text for _, text in lines[1:]]
    assert len(texts) == 1
    assert "near" in texts[0]
    assert texts[0].endswith(str(distance(24, 19, 24, 17)))


def test_attempt_jump_moves_player():
    player = make_player()
    assert attempt_jump(player, 2419) == 2
    assert player.position == (24, 19)


@pytest.mark.parametrize("hex_code", [2417, 2430])
def test_attempt_jump_invalid(hex_code):
    player = make_player()
    with pytest.raises(InvalidJumpError):
        attempt_jump(player, hex_code)
    assert player.position == (24, 17)