"""Window settings chosen at launch."""

import enum
from dataclasses import dataclass


class WindowMode(enum.Enum):
    WINDOW = "WINDOW"
    BORDERLESS = "BORDERLESS"
    FULLSCREEN = "FULLSCREEN"


@dataclass
class LaunchInfo:
    """Size and mode of the game window."""

    window_width: int = 0
    window_height: int = 0
    window_flag: WindowMode = WindowMode.WINDOW

    def set_window(self, width: int, height: int, flag: WindowMode) -> None:
        self.window_width = width
        self.window_height = height
        self.window_flag = flag