"""Game-state core of a 2D metroidvania: tags, flags, emits, timers, input, music queueing, saves, level parsing and screen transitions."""

__version__ = "2.0.1"