"""Sound effect cache and music playback with cross-fading between tracks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from hatman.timer import Timer, TimerController

logger = logging.getLogger(__name__)

MAX_VOLUME = 100.0
DEFAULT_FADE_DURATION = 1000.0
DEFAULT_MUSIC_BASE_VOLUME = 1.0


def _read_or_empty(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError:
        return b""


@dataclass
class MusicTrack:
    """The track currently opened for playback."""

    path: Path
    loop: bool = True
    playing: bool = True


class Audio:
    """Loads sound effects on demand and fades music in and out."""

    def __init__(
        self,
        music_volume_setting: int,
        sound_volume_setting: int,
        *,
        content_dir: str | Path = "content/audio",
        fade_duration: float = DEFAULT_FADE_DURATION,
        base_volume: float = DEFAULT_MUSIC_BASE_VOLUME,
        loader: Callable[[Path], object] = _read_or_empty,
        controller: TimerController | None = None,
    ) -> None:
        self.music_volume_mod = music_volume_setting / 10.0
        self.sound_volume_mod = sound_volume_setting / 10.0
        self.content_dir = Path(content_dir)
        self.fade_duration = fade_duration
        self.base_volume = base_volume
        self._loader = loader
        self._loaded: dict[str, object] = {}

        self.music: MusicTrack | None = None
        self.music_volume = 0.0
        self.music_current = ""
        self.music_queued = ""
        self._fading_in = False
        self._fading_out = False
        # Without a shared controller the timers are advanced by update() itself.
        self._own_timers = controller is None
        self._fade_in_timer = Timer(controller)
        self._fade_out_timer = Timer(controller)

    def get_sound_buffer(self, name: str) -> object:
        """Return the sound effect, loading it the first time it is asked for."""
        if name not in self._loaded:
            self._loaded[name] = self._loader(self.content_dir / "fx" / name)
        return self._loaded[name]

    def queue_music(self, name: str) -> None:
        """Switch to a track, fading out the current one first."""
        if self.music_current == name:
            return
        self.music_queued = name
        if not self.music_current:
            self.set_music(name)
            self.set_music_volume(0.0)
            self._fading_in = True
            self._fade_in_timer.start(self.fade_duration)
        else:
            self.set_music_volume(1.0)
            self._fading_out = True
            self._fade_out_timer.start(self.fade_duration)

    def update(self, elapsed_time: float) -> None:
        if self._own_timers:
            self._fade_in_timer.update(elapsed_time)
            self._fade_out_timer.update(elapsed_time)

        if self._fading_out:
            if self._fade_out_timer.finished():
                self.set_music(self.music_queued)
                self.music_current = self.music_queued
                self.music_queued = ""
                self._fading_out = False
                self._fading_in = True
                self._fade_in_timer.start(self.fade_duration)
            self.set_music_volume(1.0 - self._fade_out_timer.elapsed_percentage())

        if self._fading_in:
            if self._fade_in_timer.finished():
                self._fading_in = False
            self.set_music_volume(self._fade_in_timer.elapsed_percentage())

    def set_music(self, name: str) -> None:
        """Start looping a track unless it is already the current one."""
        if self.music_current == name:
            return
        self.music_current = name
        path = self.content_dir / "mx" / name
        if not path.is_file():
            logger.error("Could not open music file %s", path)
        self.music = MusicTrack(path)

    def set_music_volume(self, volume_mod: float) -> None:
        """Set music volume as a fraction of the configured level, clamped to [0, 100]."""
        total = MAX_VOLUME * self.base_volume * self.music_volume_mod * volume_mod
        self.music_volume = min(max(total, 0.0), MAX_VOLUME)