"""Game data records: ships, players, worlds and the shared game state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any

MAX_PLAYERS = 16
MAX_CARGO_ITEMS = 10
MAX_CARGO_LOTS = 24
NUM_TRADE_GOODS = 21
NUM_WORLDS = 439
TURRET_COUNT = 8
MAX_PLAYER_NAME = 14
MAX_SHIP_NAME = 15

TRADE_CODES = (
    "Ag", "As", "De", "Fl", "He", "Hi", "Ic", "In",
    "Lo", "Na", "Ni", "Po", "Ri", "Va", "Wa",
)


class Zone(IntEnum):
    """Travel zone of a world."""

    NONE = 0
    AMBER = 1
    RED = 2
    UNUSED = 3

    @property
    def label(self) -> str:
        return {Zone.AMBER: "amber", Zone.RED: "red"}.get(self, "")


class Allegiance(IntEnum):
    """Political allegiance of a world."""

    WILDS = 0
    VILIS = 1
    NONE = 2
    GRAM = 3
    PAVABID = 4
    REGINA = 5
    CLIENT = 6
    MORA = 7

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass
class Turret:
    """One weapon or screen emplacement on a ship."""

    emplacement: int = 0
    device_type: int = 0
    device: int = 0


@dataclass
class Ship:
    """A player's starship."""

    name: str = ""
    m: int = 0
    j: int = 0
    bridge: int = 0
    globe: bool = False
    stealth: bool = False
    advanced_sensors: bool = False
    av: int = 0
    qsp: str = ""
    builder: str = ""
    cargo: int = 0
    passengers: int = 0
    low_berths: int = 0
    allegiance: str = ""
    cost: int = 0
    status: int = 0
    turrets: list[Turret] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.name) > MAX_SHIP_NAME:
            raise ValueError(f"ship name longer than {MAX_SHIP_NAME} characters")
        if len(self.turrets) > TURRET_COUNT:
            raise ValueError(f"a ship has at most {TURRET_COUNT} turrets")
        self.turrets.extend(Turret() for _ in range(TURRET_COUNT - len(self.turrets)))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Ship:
        values = dict(data)
        values["turrets"] = [Turret(**t) for t in values.get("turrets", [])]
        return cls(**values)


@dataclass
class CargoItem:
    """One entry of a player's cargo manifest."""

    type: int = 0
    quantity: int = 0
    value: int = 0


@dataclass
class Player:
    """A player and the ship they command."""

    name: str
    kilocredits: int = 0
    col: int = 0
    row: int = 0
    turns_left: int = 0
    ship: Ship = field(default_factory=Ship)
    cargo_manifest: list[CargoItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.name) > MAX_PLAYER_NAME:
            raise ValueError(f"player name longer than {MAX_PLAYER_NAME} characters")
        if len(self.cargo_manifest) > MAX_CARGO_ITEMS:
            raise ValueError(f"cargo manifest holds at most {MAX_CARGO_ITEMS} items")

    @property
    def position(self) -> tuple[int, int]:
        return self.col, self.row

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        values = dict(data)
        values["ship"] = Ship.from_dict(values.get("ship", {}))
        values["cargo_manifest"] = [CargoItem(**c) for c in values.get("cargo_manifest", [])]
        return cls(**values)


@dataclass(frozen=True)
class World:
    """A world in the sector, located by hex column and row."""

    col: int
    row: int
    name: str
    uwp: str = ""
    starport: int = 0
    has_naval_base: bool = False
    has_scout_base: bool = False
    zone: Zone = Zone.NONE
    allegiance: Allegiance = Allegiance.WILDS
    has_belt: bool = False
    has_gg: bool = False
    trade_codes: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        unknown = set(self.trade_codes) - set(TRADE_CODES)
        if unknown:
            raise ValueError(f"unknown trade codes: {', '.join(sorted(unknown))}")

    @property
    def hex_code(self) -> str:
        return f"{self.col:02d}{self.row:02d}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> World:
        values = dict(data)
        values["zone"] = Zone(values.get("zone", 0))
        values["allegiance"] = Allegiance(values.get("allegiance", 0))
        values["trade_codes"] = frozenset(values.get("trade_codes", ()))
        return cls(**values)


@dataclass
class GameState:
    """State shared by all players: the date and the roster."""

    date: int = 0
    history_top: int = 0
    player_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.player_names) > MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players")

    def next_turn(self) -> int:
        """Advance the date by one and return the new date."""
        self.date += 1
        return self.date

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        return cls(
            date=data.get("date", 0),
            history_top=data.get("history_top", 0),
            player_names=list(data.get("player_names", [])),
        )


@dataclass
class Loadout:
    """A predetermined turret emplacement configuration."""

    name: str
    tl: int = 0
    mcr: int = 0
    heat: bool = False
    pen: bool = False
    rad: bool = False
    screen: bool = False
    sensor: bool = False
    globe: bool = False
    r1: bool = False
    r2: bool = False


@dataclass
class NPCShip:
    """A non-player ship referencing one of the ship types."""

    ship_type: int = 0
    col: int = 0
    row: int = 0
    status: int = 0
    turret_loadout: int = 0


@dataclass
class CargoLot:
    """A lot of speculative cargo available for trade."""

    type: int = 0
    tonnage: int = 0
    cost: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.type < NUM_TRADE_GOODS:
            raise ValueError(f"trade good type must be below {NUM_TRADE_GOODS}")


@dataclass
class Starport:
    """Facilities of a world's starport."""

    grade: str = "X"
    warehouse_capacity: int = 0
    defense_level: int = 0
    has_black_market: bool = False
    has_luxury_goods_market: bool = False
    has_exotic_goods_market: bool = False