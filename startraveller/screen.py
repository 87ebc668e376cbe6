"""Text screens: menu boxes, the game splash and the console login banner."""

from __future__ import annotations

TOP_LEFT = "╭"
TOP_RIGHT = "╮"
BOTTOM_LEFT = "╰"
BOTTOM_RIGHT = "╯"
HORIZONTAL = "─"
VERTICAL = "│"

SCREEN_WIDTH = 80
VERSION = "0.1"

_LOGO = (
    "               __                __                        ____            ",
    "         _____/ /_____ ______   / /__________ __   _____  / / /__  _____   ",
    "        / ___/ __/ __ `/ ___/  / __/ ___/ __ `/ | / / _ \\/ / / _ \\/ ___/   ",
    "       (__  ) /_/ /_/ / /     / /_/ /  / /_/ /| |/ /  __/ / /  __/ /       ",
    f"      /____/\\__/\\__,_/_/      \\__/_/   \\__,_/ |___/\\___/_/_/\\___/_/ {VERSION} ",
)

_WELCOME = (
    "   '##     '## '######## '##        '######   '#######  '##    '## '########   ",
    "    ## '##  ##  ##.....   ##       '##... ## '##.... ##  ###  '###  ##.....    ",
    "    ##  ##  ##  ##        ##        ##   ..   ##     ##  ####'####  ##         ",
    "    ##  ##  ##  ######    ##        ##        ##     ##  ## ### ##  ######     ",
    "    ##  ##  ##  ##...     ##        ##        ##     ##  ##. #  ##  ##...      ",
    "    ##  ##  ##  ##        ##        ##    ##  ##     ##  ## .   ##  ##         ",
    "   . ###. ###   ########  ######## . ######  . #######   ##     ##  ########   ",
    "    ...  ...   ........  ........   ......    .......   ..     ..  ........    ",
)

_NOTICE = (
    "         not a warning!  all are welcome to access this system; there are no",
    "         penalties, nor any system security policy, and  no applicable state",
    "         or federal laws. sessions & e-mail are not monitored, as the system",
    "         has neither.     * * * note: system will be down if it is shut off.",
)


def draw_box(width: int, height: int, title: str) -> list[str]:
    """Lines of a box of the given size with the title set into its top edge."""
    if width < 1 or height < 1:
        raise ValueError("a box needs a positive width and height")
    grid = [[" "] * (width + 1) for _ in range(height + 1)]
    for col in range(width):
        grid[0][col] = HORIZONTAL
        grid[height][col] = HORIZONTAL
    for row in range(height):
        grid[row][0] = VERTICAL
        grid[row][width] = VERTICAL
    grid[0][0] = TOP_LEFT
    grid[0][width] = TOP_RIGHT
    grid[height][0] = BOTTOM_LEFT
    grid[height][width] = BOTTOM_RIGHT

    label = f" {title} "
    top = grid[0]
    end = 2 + len(label)
    if end > len(top):
        top.extend(" " * (end - len(top)))
    top[2:end] = label
    return ["".join(row) for row in grid]


def splash(name: str) -> str:
    """The title screen shown when a player starts the game."""
    lines = [""] * 8
    lines.extend(_LOGO)
    lines.append("")
    lines.append(HORIZONTAL * SCREEN_WIDTH)
    lines.append(" " * max(0, 50 - len(name) // 2) + f"current player: {name}")
    return "\n".join(lines)


def login_banner(name: str, date: str) -> str:
    """The banner of the administrative console."""
    lines = ["", " " * max(0, 40 - len(name) // 2) + name, "", "", ""]
    lines.extend(_WELCOME)
    lines.extend([" " * 79, ""])
    lines.extend(["*" * SCREEN_WIDTH, ""])
    for notice in _NOTICE:
        lines.extend([notice, ""])
    lines.extend(["", "*" * SCREEN_WIDTH])
    lines.append(f"                        commander x16 | {date}")
    return "\n".join(lines)