"""Top-level game state: screen transitions, pausing and frame updates."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable

from hatman.audio import Audio
from hatman.emit import EmitStorage
from hatman.flags import Flags
from hatman.saver import Saver
from hatman.timer import Timer, TimerController

logger = logging.getLogger(__name__)

# Frames longer than this are cut short so physics does not break at low FPS
# (below 1000/40 = 25 FPS the game slows down instead).
MAX_FRAME_TIME_MS = 40.0
TRANSITION_FADE_DURATION = 1000.0
GAME_ENDING_FADE_DURATION = 5000.0
MENU_MUSIC = "a_nights_respite.wav"

BLACK = "black"
TRANSPARENT = "transparent"
ESC_MENU_FADE = "esc_menu_fade"


class ExitCode(enum.Enum):
    NONE = 0
    EXIT = 1
    RESTART = 2


@dataclass(frozen=True)
class Fade:
    """A screen fade from one color to another."""

    start: str
    end: str
    duration: float


@dataclass
class GuiState:
    """Which interface screens are shown and the last fade started."""

    main_menu: bool = False
    esc_menu: bool = False
    inventory: bool = False
    ending_screen: bool = False
    level_name: bool = False
    player_gui: bool = False
    fps_counter: bool = False
    fade: Fade | None = None


@dataclass
class ActiveLevel:
    """A level being played: its name, where the player stands and time spent."""

    name: str
    player_position: tuple[float, float]
    time: float = 0.0

    def update(self, elapsed_time: float) -> None:
        self.time += elapsed_time


def clamp_frame_time(elapsed: float, maximum: float = MAX_FRAME_TIME_MS) -> float:
    """Limit the length of a frame."""
    return min(elapsed, maximum)


class Game:
    """Handles transition requests between menus and levels and drives updates."""

    def __init__(
        self,
        fps_counter: bool = False,
        *,
        saver: Saver | None = None,
        flags: Flags | None = None,
        audio: Audio | None = None,
        emits: EmitStorage | None = None,
        load_from_save: Callable[[], Any] | None = None,
        change_level: Callable[[str, tuple[float, float], Any], Any] | None = None,
        transition_duration: float = TRANSITION_FADE_DURATION,
        ending_fade_duration: float = GAME_ENDING_FADE_DURATION,
    ) -> None:
        self.show_fps_counter = fps_counter
        self.toggle_f3 = False
        self.paused = False
        self.timescale = 1.0
        self.true_time_elapsed = 0.0

        self.saver = saver
        self.flags = flags if flags is not None else Flags()
        self.audio = audio
        self.emits = emits if emits is not None else EmitStorage()
        self._load_from_save = load_from_save or self._load_saved_level
        self._change_level = change_level or self._make_level
        self.transition_duration = transition_duration
        self.ending_fade_duration = ending_fade_duration

        self.gui = GuiState()
        self.level: Any = None
        self.timers = TimerController()
        self._transition = Timer(self.timers)

        self._req_main_menu = False
        self._req_ending_screen = False
        self._req_toggle_esc = False
        self._req_toggle_inventory = False
        self._req_toggle_f3 = False
        self._req_exit = ExitCode.NONE
        self._req_load_from_save = False
        self._req_level_change = False
        self.level_change_is_reload = False
        self.level_change_target = ""
        self.level_change_position: tuple[float, float] = (0.0, 0.0)

        logger.info("Entering main menu...")
        self.request_go_to_main_menu()
        self.gui.fps_counter = True
        if self.audio is not None:
            self.audio.queue_music(MENU_MUSIC)

    # Level construction

    def _load_saved_level(self) -> ActiveLevel:
        if self.saver is None:
            raise RuntimeError("no save to load the level from")
        self.flags.flags = self.saver.flags()
        return ActiveLevel(self.saver.current_level(), self.saver.player_position())

    @staticmethod
    def _make_level(target: str, position: tuple[float, float], _current: Any) -> ActiveLevel:
        return ActiveLevel(target, position)

    def _fade(self, start: str, end: str, duration: float) -> None:
        self.gui.fade = Fade(start, end, duration)

    def _fade_out_and_wait(self, start: str, duration: float) -> None:
        self._fade(start, BLACK, duration)
        self._transition.start(duration)

    def _fade_in_and_wait(self) -> None:
        self._fade(BLACK, TRANSPARENT, self.transition_duration)
        self._transition.start(self.transition_duration)

    # Requests

    def is_running(self) -> bool:
        return self.level is not None

    def request_level_load_from_save(self) -> None:
        if self._req_load_from_save:
            return
        self._req_load_from_save = True
        self._fade_out_and_wait(TRANSPARENT, self.transition_duration)

    def request_level_change(self, new_level: str, new_position: tuple[float, float]) -> None:
        if self._req_level_change:
            return
        self._req_level_change = True
        self.gui.player_gui = False
        self.level_change_target = new_level
        self.level_change_position = new_position
        self._fade_out_and_wait(TRANSPARENT, self.transition_duration)

    def request_level_reload(self) -> None:
        if self._req_level_change:
            return
        self._req_level_change = True
        self.level_change_is_reload = True
        self.gui.player_gui = False
        self._fade_out_and_wait(TRANSPARENT, self.transition_duration)

    def request_go_to_main_menu(self) -> None:
        if self._req_main_menu:
            return
        self._req_main_menu = True
        if self.is_running():
            self._fade_out_and_wait(ESC_MENU_FADE, self.transition_duration)

    def request_go_to_ending_screen(self) -> None:
        if self._req_ending_screen:
            return
        self._req_ending_screen = True
        if self.is_running():
            self._fade_out_and_wait(ESC_MENU_FADE, self.ending_fade_duration)

    def request_toggle_esc_menu(self) -> None:
        self._req_toggle_esc = True

    def request_toggle_inventory(self) -> None:
        self._req_toggle_inventory = True

    def request_toggle_f3(self) -> None:
        self._req_toggle_f3 = True

    def request_exit_to_desktop(self) -> None:
        self._req_exit = ExitCode.EXIT

    def request_exit_to_restart(self) -> None:
        self._req_exit = ExitCode.RESTART

    # Frame handling

    def _level_swap_to_target(self) -> None:
        logger.info("Swapping to level {%s}", self.level_change_target)
        self.level = self._change_level(
            self.level_change_target, self.level_change_position, self.level
        )
        self._req_level_change = False
        self.gui.player_gui = True

    def _level_load_from_save(self) -> None:
        self.level = self._load_from_save()
        self._req_level_change = False
        self.level_change_is_reload = False
        self.gui.player_gui = True

    def handle_requests(self) -> ExitCode:
        """Carry out pending requests whose transitions have finished."""
        # Level changes go first so the transition timer restarts before other checks.
        if self._req_level_change and self._transition.finished():
            self._fade_in_and_wait()
            if self.level_change_is_reload:
                self._level_load_from_save()
                self.gui.level_name = False
            else:
                self._level_swap_to_target()
                self.gui.level_name = True
            self._req_level_change = False

        if self._req_load_from_save and self._transition.finished():
            self.gui.ending_screen = False
            self._fade_in_and_wait()
            self._level_load_from_save()
            self.gui.main_menu = False
            self._req_load_from_save = False

        if self._req_ending_screen:
            self._req_toggle_esc = False

        if self._req_toggle_esc and self._transition.finished():
            self.gui.esc_menu = not self.gui.esc_menu
            self.paused = not self.paused
            self._req_toggle_esc = False

        if self._req_toggle_inventory and self._transition.finished():
            self.gui.inventory = not self.gui.inventory
            self.paused = not self.paused
            self._req_toggle_inventory = False

        if self._req_main_menu and self._transition.finished():
            self.gui.ending_screen = False
            self.level = None
            self.gui.main_menu = True
            self._fade(BLACK, TRANSPARENT, self.transition_duration)
            self._req_main_menu = False

        if self._req_ending_screen and self._transition.finished():
            if self.is_running():
                self.level = None
                self.gui.ending_screen = True
            self._fade(BLACK, TRANSPARENT, self.transition_duration)
            self._req_ending_screen = False

        if self._req_toggle_f3:
            self.toggle_f3 = not self.toggle_f3
            self._req_toggle_f3 = False

        return self._req_exit

    def update(self, elapsed_time: float) -> None:
        """Advance the level (unless paused), music, emits and timers."""
        scaled = elapsed_time * self.timescale
        if self.is_running() and not self.paused:
            self.level.update(scaled)
        if self.audio is not None:
            self.audio.update(scaled)
        self.emits.update(scaled)
        self.timers.update(scaled)

    def step(self, elapsed_time: float) -> ExitCode:
        """Run one frame; a code other than NONE means the game should stop."""
        elapsed = clamp_frame_time(elapsed_time)
        self.true_time_elapsed = elapsed
        code = self.handle_requests()
        if code is not ExitCode.NONE:
            return code
        self.update(elapsed)
        return ExitCode.NONE