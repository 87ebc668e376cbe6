from startraveller.screen import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HORIZONTAL,
    TOP_LEFT,
    TOP_RIGHT,
    VERSION,
    VERTICAL,
    draw_box,
    login_banner,
    splash,
)

import pytest


def test_box_has_one_line_per_row():
    lines = draw_box(10, 4, "hi")
    assert len(lines) == 4 + 1
    assert all(len(line) == 10 + 1 for line in lines)


def test_box_corners():
    lines = draw_box(10, 4, "hi")
    assert lines[0][0] == TOP_LEFT
    assert lines[0][10] == TOP_RIGHT
    assert lines[4][0] == BOTTOM_LEFT
    assert lines[4][10] == BOTTOM_RIGHT


def test_box_sides_and_bottom():
    lines = draw_box(10, 4, "hi")
    assert all(line[0] == VERTICAL and line[10] == VERTICAL for line in lines[1:4])
    assert set(lines[4][1:10]) == {HORIZONTAL}


def test_box_title_is_set_into_top_edge():
    lines = draw_box(10, 4, "hi")
    assert lines[0][2:6] == " hi "
    assert lines[0][1] == HORIZONTAL


def test_long_title_extends_top_line():
    lines = draw_box(4, 2, "longtitle")
    assert " longtitle " in lines[0]
    assert lines[1][4] == VERTICAL


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_box_rejects_bad_size(width, height):
    with pytest.raises(ValueError):
        draw_box(width, height, "x")


def test_splash_names_the_player():
    text = splash("bob")
    line = next(l for l in text.splitlines() if "current player" in l)
    assert line.strip() == "current player: bob"
    assert line.index("current player") == 50 - len("bob") // 2


def test_splash_shows_version():
    assert VERSION in splash("bob")


def test_login_banner_centres_name_and_shows_date():
    name = "star traveller administrative console"
    text = login_banner(name, "2024-06-17")
    lines = text.splitlines()
    title = next(l for l in lines if name in l)
    assert title.index(name) == 40 - len(name) // 2
    assert lines[-1].strip() == "commander x16 | 2024-06-17"