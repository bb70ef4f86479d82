"""Per-frame keyboard and mouse state."""

from __future__ import annotations

from dataclasses import dataclass, field

from hatman.controls import Key, MouseButton


@dataclass
class Input:
    """Tracks pressed, released and held inputs and the mouse position."""

    keys_pressed: set[Key] = field(default_factory=set)
    keys_released: set[Key] = field(default_factory=set)
    keys_held: set[Key] = field(default_factory=set)
    buttons_pressed: set[MouseButton] = field(default_factory=set)
    buttons_released: set[MouseButton] = field(default_factory=set)
    buttons_held: set[MouseButton] = field(default_factory=set)
    mouse_position: tuple[float, float] = (0.0, 0.0)

    def begin_new_frame(self) -> None:
        """Forget presses and releases; they only last one frame."""
        self.keys_pressed.clear()
        self.keys_released.clear()
        self.buttons_pressed.clear()
        self.buttons_released.clear()

    def mouse_move(self, x: float, y: float, scaling_factor: float) -> None:
        """Record a mouse move given in window pixels."""
        self.mouse_position = (x / scaling_factor, y / scaling_factor)

    def key_down(self, key: Key) -> None:
        self.keys_pressed.add(key)
        self.keys_held.add(key)

    def key_up(self, key: Key) -> None:
        self.keys_released.add(key)
        self.keys_held.discard(key)

    def button_down(self, button: MouseButton) -> None:
        self.buttons_pressed.add(button)
        self.buttons_held.add(button)

    def button_up(self, button: MouseButton) -> None:
        self.buttons_released.add(button)
        self.buttons_held.discard(button)

    def key_pressed(self, key: Key) -> bool:
        return key in self.keys_pressed

    def key_released(self, key: Key) -> bool:
        return key in self.keys_released

    def key_held(self, key: Key) -> bool:
        return key in self.keys_held

    def mouse_pressed(self, button: MouseButton) -> bool:
        return button in self.buttons_pressed

    def mouse_released(self, button: MouseButton) -> bool:
        return button in self.buttons_released

    def mouse_held(self, button: MouseButton) -> bool:
        return button in self.buttons_held

    @property
    def mouse_x(self) -> float:
        return self.mouse_position[0]

    @property
    def mouse_y(self) -> float:
        return self.mouse_position[1]