"""A single cell of the game board."""

import enum
from dataclasses import dataclass

TILE_SIZE = 50


class TileStatus(enum.Enum):
    UNKNOWN = enum.auto()
    MISS = enum.auto()
    HIT = enum.auto()
    SOMETHING = enum.auto()


@dataclass
class Tile:
    """One board cell: what the player knows of it and whether a ship is there."""

    status: TileStatus = TileStatus.UNKNOWN
    has_ship: bool = False

    def place_ship(self) -> None:
        self.has_ship = True
        self.status = TileStatus.UNKNOWN

    def mark_miss(self) -> None:
        if self.status is TileStatus.UNKNOWN:
            self.status = TileStatus.MISS

    def mark_hit(self) -> None:
        if self.status is TileStatus.UNKNOWN and self.has_ship:
            self.status = TileStatus.HIT