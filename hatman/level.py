"""Level files: tile layers, entity spawns and scripted areas."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from hatman.flags import Flags
from hatman.level_map import (
    LevelMap,
    TilesetRef,
    find_tileset,
    parse_tilelayer,
    tileset_name,
)
from hatman.tags import get_prefix, get_suffix

TILE_SIZE = 32


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_center(cls, center: tuple[float, float], size: tuple[float, float]) -> Rect:
        cx, cy = center
        w, h = size
        return cls(cx - w / 2, cy - h / 2, w, h)

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.w / 2, self.y + self.h / 2


@dataclass(frozen=True)
class EntitySpawn:
    """An entity placed on the map, with the flag it raises when it dies.

    The position is the tile's top-left corner; any offset within the tile
    belongs to the tileset's spawn data.
    """

    tileset: TilesetRef
    tile_id: int
    position: tuple[float, float]
    emits_flag: str = ""


@dataclass(frozen=True)
class LevelChange:
    """Area that moves the player to another level after a fade."""

    hitbox: Rect
    goes_to_level: str
    goes_to_pos: tuple[int, int]


@dataclass(frozen=True)
class LevelSwitch:
    """Area that moves the player to another level on interaction."""

    hitbox: Rect
    goes_to_level: str
    goes_to_pos: tuple[int, int]


@dataclass(frozen=True)
class Portal:
    """Area that moves the player within the same level."""

    hitbox: Rect
    goes_to_pos: tuple[int, int]


@dataclass(frozen=True)
class Hint:
    """Area that shows a text in a field while the player stands in it."""

    hitbox: Rect
    text_field: Rect
    text: str


@dataclass(frozen=True)
class Checkpoint:
    """Area that saves the game and raises a flag."""

    hitbox: Rect
    emits_flag: str


Script = Union[LevelChange, LevelSwitch, Portal, Hint, Checkpoint]
MapObject = Union[EntitySpawn, Script]


@dataclass
class Level:
    """Everything a level file describes."""

    map: LevelMap
    tilesets: list[TilesetRef] = field(default_factory=list)
    entities: list[EntitySpawn] = field(default_factory=list)
    scripts: list[Script] = field(default_factory=list)
    background: str = ""
    music: str = ""
    name: str = ""

    @property
    def size(self) -> tuple[int, int]:
        return self.map.width, self.map.height


def _hitbox(obj: Mapping[str, Any]) -> Rect:
    return Rect(int(obj["x"]), int(obj["y"]), int(obj["width"]), int(obj["height"]))


def _properties(obj: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
    return obj.get("properties") or ()


def _flag_properties(obj: Mapping[str, Any]) -> tuple[str, str]:
    requires_flag = ""
    emits_flag = ""
    for prop in _properties(obj):
        if prop["name"] == "requires_flag":
            requires_flag = prop["value"]
        elif prop["name"] == "emits_flag":
            emits_flag = prop["value"]
    return requires_flag, emits_flag


def _destination(obj: Mapping[str, Any]) -> tuple[str, tuple[int, int]]:
    level = ""
    x = y = 0
    for prop in _properties(obj):
        prefix = get_prefix(prop["name"])
        if prefix == "goes_to_level":
            level = prop["value"]
        elif prefix == "goes_to_x":
            x = int(prop["value"])
        elif prefix == "goes_to_y":
            y = int(prop["value"])
    return level, (x, y)


def _parse_entities(
    objects: Iterable[Mapping[str, Any]], tilesets: Sequence[TilesetRef], flags: Flags
) -> list[EntitySpawn]:
    spawns = []
    for obj in objects:
        requires_flag, emits_flag = _flag_properties(obj)
        if requires_flag and not flags.check(requires_flag):
            continue
        gid = int(obj["gid"])
        tileset = find_tileset(tilesets, gid)
        # Tile objects are anchored at their bottom-left corner; move up one tile.
        position = (float(obj["x"]), float(obj["y"]) - TILE_SIZE)
        spawns.append(EntitySpawn(tileset, gid - tileset.first_gid, position, emits_flag))
    return spawns


def _parse_hint(obj: Mapping[str, Any]) -> Hint:
    text = ""
    cx = cy = w = h = 0.0
    for prop in _properties(obj):
        prefix = get_prefix(prop["name"])
        if prefix == "text":
            text = prop["value"]
        elif prefix == "text_x":
            cx = int(prop["value"])
        elif prefix == "text_y":
            cy = int(prop["value"])
        elif prefix == "text_width":
            w = int(prop["value"])
        elif prefix == "text_height":
            h = int(prop["value"])
    return Hint(_hitbox(obj), Rect.from_center((cx, cy), (w, h)), text)


def _parse_scripts(
    kind: str, objects: Iterable[Mapping[str, Any]], flags: Flags
) -> list[Script]:
    scripts: list[Script] = []
    for obj in objects:
        if kind == "level_change":
            level, pos = _destination(obj)
            scripts.append(LevelChange(_hitbox(obj), level, pos))
        elif kind == "level_switch":
            level, pos = _destination(obj)
            scripts.append(LevelSwitch(_hitbox(obj), level, pos))
        elif kind == "portal":
            _, pos = _destination(obj)
            scripts.append(Portal(_hitbox(obj), pos))
        elif kind == "hint":
            scripts.append(_parse_hint(obj))
        elif kind == "checkpoint":
            requires_flag, emits_flag = _flag_properties(obj)
            if requires_flag and not flags.check(requires_flag):
                continue
            scripts.append(Checkpoint(_hitbox(obj), emits_flag))
    return scripts


def parse_objectgroup(
    layer: Mapping[str, Any], tilesets: Sequence[TilesetRef], flags: Flags
) -> list[MapObject]:
    """Entities or scripts of an object layer; unknown layer kinds give nothing."""
    name = layer["name"]
    prefix = get_prefix(name)
    objects = layer.get("objects") or ()
    if prefix == "entity":
        return list(_parse_entities(objects, tilesets, flags))
    if prefix == "script":
        return list(_parse_scripts(get_suffix(name), objects, flags))
    return []


def parse_level(data: Mapping[str, Any], flags: Flags) -> Level:
    """Build a level from a decoded map document."""
    background = ""
    music = ""
    for prop in data.get("properties") or ():
        prefix = get_prefix(prop["name"])
        if prefix == "background":
            background = prop["value"]
        elif prefix == "music":
            music = prop["value"]

    tilesets = [
        TilesetRef(tileset_name(node["source"]), int(node["firstgid"]))
        for node in data.get("tilesets") or ()
    ]

    tile_map = LevelMap(int(data["width"]), int(data["height"]))
    level = Level(map=tile_map, tilesets=tilesets, background=background, music=music)

    for layer in data.get("layers") or ():
        kind = layer["type"]
        if kind == "tilelayer":
            tile_map.place_all(parse_tilelayer(layer, tile_map.width, tilesets))
        elif kind == "objectgroup":
            for obj in parse_objectgroup(layer, tilesets, flags):
                if isinstance(obj, EntitySpawn):
                    level.entities.append(obj)
                else:
                    level.scripts.append(obj)
    return level


def load_level(path: str | Path, flags: Flags) -> Level:
    """Read a level file; the level is named after the file."""
    path = Path(path)
    with open(path, encoding="utf-8") as file:
        data = json.load(file)
    level = parse_level(data, flags)
    level.name = path.stem
    return level