# startraveller

A turn-based space trading game for the terminal. Each player commands a
starship in a hex-mapped sector, jumps between worlds and spends a limited
number of turns per session. An administrative console registers players,
chooses who is logged in and dumps player records to text.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Game files

All files live in one directory (the working directory by default) and are
stored as JSON:

- `game.dat` — the shared game state: the date, a history counter and the
  player roster
- `<name>.p` — one player record per player
- `active.p` — the file name of the player who plays next
- `worlds.json` — the sector atlas: a JSON list of world records with the
  keys `col`, `row`, `name`, and optionally `uwp`, `starport`,
  `has_naval_base`, `has_scout_base`, `zone` (0–3), `allegiance` (0–7),
  `has_belt`, `has_gg` and `trade_codes`

## Administrative console

```
startraveller-admin [--directory DIR]
```

After a banner, the console reads one command at a time:

- `r` — register a new player: asks for a name, then a starting ship:
  scout (`s`), free trader (`a`) or packet (`u`). The record is saved as
  `<name>.p`.
- `l` — log a player in: writes `<name>.p` into `active.p`.
- `d` — dump a player's record as readable text to `<name>.txt`.
- `q` — quit (end of input quits as well).

## Playing

```
startraveller [--directory DIR] [--atlas FILE]
```

The game reads `game.dat` and the active player. If that player has no
turns left it asks for another player to log in and stops. Otherwise it shows
a title screen, waits for a line of input and opens the command menu:

- `1` — trade
- `2` — map: lists the worlds of the atlas within the ship's jump rating of
  the player's hex, with hex, name, UWP, bases, belt, gas giant, zone,
  allegiance and distance
- `3` — upgrade: shows the shipyard menu and the summary of the first two
  turrets
- `4` — missions
- `5` — end the turn: advances the game date and saves `game.dat`
- a hex code above 100, such as `2419` — asks for confirmation (`y…`) and
  jumps there if the hex is neither the current one nor beyond the ship's
  jump rating; a jump costs one turn

The menu text lists `4` as "end turn", but `4` opens missions and `5` ends
the turn. The player record is saved after every command. The session ends
when the player's turns run out or input ends.

The atlas is taken from `--atlas`, or `worlds.json` in the game directory;
with neither present the map is empty.

## What it does not do

- Trading and missions spend no turns and do nothing yet; the upgrade
  screen only displays the shipyard menu and turrets.
- Neither command creates `game.dat`; make one first, for example with
  `startraveller.storage.save_game_state(GameState(), "game.dat")`.
- No sector atlas is shipped; `worlds.json` has to be supplied.
- No game history is recorded.

## Using it as a library

- `startraveller.models` — `Player`, `Ship`, `Turret`, `CargoItem`, `World`,
  `Zone`, `Allegiance`, `GameState`, `Loadout`, `NPCShip`, `CargoLot` and
  `Starport`; `Ship`, `Player` and `GameState` have `to_dict`/`from_dict`,
  `World` has `from_dict`, and `GameState.next_turn` advances the date
- `startraveller.astrogation` — `distance` between hexes, the `Atlas` of
  worlds (`find`, `load`), `world_color`, `format_world`, `render_map` and
  `attempt_jump`, which raises `InvalidJumpError` for a bad destination
- `startraveller.storage` — `save_game_state`, `load_game_state`,
  `save_player`, `load_player`, `player_filename`, `set_active_player` and
  `load_active_player`
- `startraveller.screen` — `draw_box`, `splash` and `login_banner`
- `startraveller.game` — `Game` and `turret_summary`
- `startraveller.admin` — `AdminConsole`, `make_ship`, `new_player` and
  `dump_player`

```python
from startraveller.astrogation import distance

distance(24, 17, 24, 19)  # 2
```