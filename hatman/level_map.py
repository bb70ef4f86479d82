"""Tile grids of a level map and the parsing of its tile layers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from hatman.tags import get_prefix

LAYERS = ("backlayer", "layer", "midlayer", "frontlayer")


@dataclass(frozen=True)
class TilesetRef:
    """A tileset as used by one map: its file name and the map's first gid for it."""

    name: str
    first_gid: int


@dataclass(frozen=True)
class TilePlacement:
    """One tile of a layer: which tileset tile it is and where it goes."""

    tileset: TilesetRef
    tile_id: int
    position: tuple[int, int]
    layer: str

    @property
    def gid(self) -> int:
        """The map-wide id the tile was stored under."""
        return self.tileset.first_gid + self.tile_id


def tileset_name(source: str) -> str:
    """File name of a tileset, with any directories cut off."""
    name = source[source.rfind("/") + 1:]
    return name[name.rfind("\\") + 1:]


def find_tileset(tilesets: Sequence[TilesetRef], gid: int) -> TilesetRef:
    """The tileset a gid belongs to: the last one whose first gid it reaches."""
    if not tilesets:
        raise ValueError("map has no tilesets")
    found = tilesets[0]
    for tileset in tilesets:
        if gid >= tileset.first_gid:
            found = tileset
    return found


def tile_index(x: int, y: int, map_height: int) -> int:
    """Position of a tile in a column-major grid."""
    return x * map_height + y


def tile_range(
    center: tuple[int, int],
    map_size: tuple[int, int],
    range_x: int,
    range_y: int,
) -> tuple[range, range]:
    """Column and row indices within a range of a center tile, kept inside the map."""
    cx, cy = center
    width, height = map_size
    left = max(cx - range_x, 0)
    right = min(cx + range_x, width - 1)
    upper = max(cy - range_y, 0)
    lower = min(cy + range_y, height - 1)
    return range(left, right + 1), range(upper, lower + 1)


def parse_tilelayer(
    layer: Mapping[str, Any],
    map_width: int,
    tilesets: Sequence[TilesetRef],
) -> list[TilePlacement]:
    """Tiles of a tile layer; a gid of zero marks an empty cell."""
    layer_prefix = get_prefix(layer["name"])
    placements = []
    for count, gid in enumerate(layer["data"]):
        if not gid:
            continue
        tileset = find_tileset(tilesets, gid)
        placements.append(
            TilePlacement(
                tileset=tileset,
                tile_id=gid - tileset.first_gid,
                position=(count % map_width, count // map_width),
                layer=layer_prefix,
            )
        )
    return placements


@dataclass
class LevelMap:
    """The four tile layers of a level, each a width by height grid."""

    width: int
    height: int
    layers: dict[str, list[TilePlacement | None]] = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid map size {self.width}x{self.height}")
        size = self.width * self.height
        self.layers = {name: [None] * size for name in LAYERS}

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside a {self.width}x{self.height} map")
        return tile_index(x, y, self.height)

    def _grid(self, layer: str) -> list[TilePlacement | None]:
        try:
            return self.layers[layer]
        except KeyError:
            raise ValueError(f"unknown tile layer {layer!r}") from None

    def place(self, placement: TilePlacement) -> None:
        """Put a tile into its layer, replacing whatever was there."""
        grid = self._grid(placement.layer)
        grid[self._index(*placement.position)] = placement

    def place_all(self, placements: Iterable[TilePlacement]) -> None:
        for placement in placements:
            self.place(placement)

    def tile_at(self, layer: str, x: int, y: int) -> TilePlacement | None:
        """The tile at a position of a layer, or None for an empty cell."""
        return self._grid(layer)[self._index(x, y)]