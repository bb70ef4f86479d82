"""Save file state and the launch configuration file."""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from hatman.launch_info import WindowMode

logger = logging.getLogger(__name__)

FIRST_LEVEL = "desolation"
FIRST_SPAWNPOINT = (160.0, 1296.0)
CONFIG_PATH = "CONFIG.json"
CONFIG_COMMENTS = (
    "Non-standard resolutions can be selected manually through config. "
    "Options for 'screen_mode': 1) WINDOW; 2) BORDERLESS; 3) FULLSCREEN."
)


def _write_json(path: str | Path, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as file:
        json.dump(data, file, indent=4, sort_keys=True)


class Saver:
    """Holds the savegame state and keeps it in a JSON file."""

    def __init__(self, file_path: str | Path) -> None:
        self.save_filepath = Path(file_path)
        self.state: dict[str, Any] = {}
        self._present = self.save_filepath.is_file()
        if self._present:
            with open(self.save_filepath, encoding="utf-8") as file:
                self.state = json.load(file)

    def save_present(self) -> bool:
        return self._present

    def create_new(self) -> None:
        """Start a fresh game at the first spawnpoint and write it out."""
        player = self.state.setdefault("player", {})
        player["current_level"] = FIRST_LEVEL
        player["x"], player["y"] = FIRST_SPAWNPOINT
        player["inventory"] = {}
        self.state["flags"] = []
        self.write()

    def write(self) -> None:
        _write_json(self.save_filepath, self.state)

    def record_state(
        self,
        level_name: str,
        position: tuple[float, float],
        inventory: Iterable[tuple[str, int]] | Mapping[str, int],
        flags: Iterable[str],
    ) -> None:
        """Record the current level, position, inventory and flags."""
        self.state_set_level_and_position(level_name, position)
        self.state_set_inventory(inventory)
        self.state_set_flags(flags)

    def state_set_level_and_position(self, level: str, player_pos: tuple[float, float]) -> None:
        player = self.state.setdefault("player", {})
        player["current_level"] = level
        player["x"], player["y"] = player_pos

    def state_set_inventory(self, inventory: Iterable[tuple[str, int]] | Mapping[str, int]) -> None:
        """Store item stacks, given as (name, quantity) pairs or a mapping."""
        stacks = inventory.items() if isinstance(inventory, Mapping) else inventory
        self.state.setdefault("player", {})["inventory"] = [
            {"name": name, "quantity": quantity} for name, quantity in stacks
        ]

    def state_set_flags(self, flags: Iterable[str]) -> None:
        self.state["flags"] = sorted(flags)

    def backup_and_delete_current(self, backup_dir: str | Path = "backups") -> None:
        """Move the save file into the backup directory and forget the state."""
        directory = Path(backup_dir)
        directory.mkdir(parents=True, exist_ok=True)
        with contextlib.suppress(FileNotFoundError):
            os.replace(self.save_filepath, directory / "save.json")
        self.state.clear()
        self._present = False

    def current_level(self) -> str:
        return self.state["player"]["current_level"]

    def player_position(self) -> tuple[float, float]:
        player = self.state["player"]
        return float(player["x"]), float(player["y"])

    def player_inventory(self) -> list[tuple[str, int]]:
        """Item stacks as (name, quantity) pairs."""
        stacks = self.state["player"]["inventory"]
        if isinstance(stacks, Mapping):
            stacks = []
        return [(stack["name"], int(stack["quantity"])) for stack in stacks]

    def flags(self) -> set[str]:
        return set(self.state["flags"])


@dataclass
class Config:
    """Launch settings kept in the config file."""

    resolution_x: int = 1280
    resolution_y: int = 720
    screen_mode: str = "WINDOW"
    music: int = 10
    sound: int = 10
    fps_counter: bool = False
    save_filepath: str = "temp/save.json"


def config_create(config: Config, path: str | Path = CONFIG_PATH) -> None:
    """Create or overwrite the config file."""
    data = asdict(config)
    data["_COMMENTS_"] = CONFIG_COMMENTS
    _write_json(path, data)


def config_create_default(path: str | Path = CONFIG_PATH) -> None:
    logger.info("Creating default config...")
    config_create(Config(), path)


def config_parse(path: str | Path = CONFIG_PATH) -> Config | None:
    """Read the config file; None when there is none."""
    try:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)
    except FileNotFoundError:
        logger.info("Could not find %s", path)
        return None
    return Config(
        resolution_x=data["resolution_x"],
        resolution_y=data["resolution_y"],
        screen_mode=data["screen_mode"],
        music=data["music"],
        sound=data["sound"],
        fps_counter=data["fps_counter"],
        save_filepath=data["save_filepath"],
    )


def window_mode_from_string(text: str) -> WindowMode:
    """Window mode named by the text; a plain window for anything unknown."""
    try:
        return WindowMode(text)
    except ValueError:
        return WindowMode.WINDOW