"""Keys, mouse buttons and the game's control bindings."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass


class Key(enum.Enum):
    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    V = enum.auto()
    W = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()
    NUM0 = enum.auto()
    NUM1 = enum.auto()
    NUM2 = enum.auto()
    NUM3 = enum.auto()
    NUM4 = enum.auto()
    NUM5 = enum.auto()
    NUM6 = enum.auto()
    NUM7 = enum.auto()
    NUM8 = enum.auto()
    NUM9 = enum.auto()
    ESCAPE = enum.auto()
    LCONTROL = enum.auto()
    LSHIFT = enum.auto()
    LALT = enum.auto()
    RCONTROL = enum.auto()
    RSHIFT = enum.auto()
    RALT = enum.auto()
    LBRACKET = enum.auto()
    RBRACKET = enum.auto()
    SEMICOLON = enum.auto()
    COMMA = enum.auto()
    PERIOD = enum.auto()
    QUOTE = enum.auto()
    SLASH = enum.auto()
    BACKSLASH = enum.auto()
    EQUAL = enum.auto()
    DASH = enum.auto()
    SPACE = enum.auto()
    ENTER = enum.auto()
    BACKSPACE = enum.auto()
    TAB = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()
    XBUTTON1 = enum.auto()
    XBUTTON2 = enum.auto()


UNDEFINED = "Undefined"

_KEY_NAMES: dict[Key, str] = {
    **{Key[letter]: letter for letter in string.ascii_uppercase},
    **{Key[f"NUM{digit}"]: digit for digit in string.digits},
    Key.DASH: "Dash",
    Key.EQUAL: "Equals",
    Key.LBRACKET: "LBracket",
    Key.RBRACKET: "RBracket",
    Key.SEMICOLON: "Semicolon",
    Key.QUOTE: "Quote",
    Key.COMMA: "Comma",
    Key.PERIOD: "Period",
    Key.SLASH: "Slash",
    Key.SPACE: "Space",
    Key.TAB: "Tab",
    Key.LSHIFT: "LShift",
    Key.RSHIFT: "RShift",
    Key.LCONTROL: "LCtrl",
    Key.RCONTROL: "RCtrl",
    Key.LALT: "LAlt",
    Key.RALT: "RAlt",
}

_BUTTON_NAMES: dict[MouseButton, str] = {
    MouseButton.LEFT: "LMB",
    MouseButton.MIDDLE: "Middle Button",
    MouseButton.RIGHT: "RMB",
    MouseButton.XBUTTON1: "Extra Button 1",
    MouseButton.XBUTTON2: "Extra Button 2",
}


def key_name(key: Key) -> str:
    """Display name of a key, or ``Undefined`` for keys without one."""
    return _KEY_NAMES.get(key, UNDEFINED)


def button_name(button: MouseButton) -> str:
    """Display name of a mouse button."""
    return _BUTTON_NAMES.get(button, UNDEFINED)


@dataclass
class Controls:
    """Bindings of game and interface actions to inputs."""

    # Interface
    lmb: MouseButton = MouseButton.LEFT
    esc: Key = Key.ESCAPE
    f3: Key = Key.F3
    # Game
    left: Key = Key.A
    right: Key = Key.D
    up: Key = Key.W
    down: Key = Key.S
    chain: MouseButton = MouseButton.LEFT
    shift: Key = Key.LSHIFT
    skill: Key = Key.C
    zoomout: Key = Key.R
    jump: Key = Key.SPACE
    use: Key = Key.E
    inventory: Key = Key.I