"""Translation of desktop-window key and mouse-button codes to engine keys."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

from hazelengine import log
from hazelengine.keycodes import HazelKey

GLFW_KEY_UNKNOWN = -1


class Action(enum.IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


def _run(first_code: int, first_key: HazelKey, count: int) -> dict[int, HazelKey]:
    return {first_code + i: HazelKey(int(first_key) + i) for i in range(count)}


_table: dict[int, HazelKey] = {}
# Mouse buttons 1-5
_table.update(_run(0, HazelKey.MouseLeft, 5))
# Number keys (top row) and letters share their ASCII codes
_table.update(_run(48, HazelKey.Digit0, 10))
_table.update(_run(65, HazelKey.A, 26))
# Function keys
_table.update(_run(290, HazelKey.F1, 12))
# Numpad keys
_table.update(_run(320, HazelKey.Numpad0, 10))
_table.update(
    {
        330: HazelKey.NumpadDecimal,
        331: HazelKey.NumpadDivide,
        332: HazelKey.NumpadMultiply,
        333: HazelKey.NumpadSubtract,
        334: HazelKey.NumpadAdd,
        335: HazelKey.NumpadEnter,
    }
)
# Control keys
_table.update(
    {
        258: HazelKey.Tab,
        257: HazelKey.Enter,
        340: HazelKey.LeftShift,
        344: HazelKey.RightShift,
        341: HazelKey.LeftControl,
        345: HazelKey.RightControl,
        342: HazelKey.LeftAlt,
        346: HazelKey.RightAlt,
        343: HazelKey.LeftSuper,
        347: HazelKey.RightSuper,
        32: HazelKey.Space,
        280: HazelKey.CapsLock,
        256: HazelKey.Escape,
        259: HazelKey.Backspace,
        266: HazelKey.PageUp,
        267: HazelKey.PageDown,
        268: HazelKey.Home,
        269: HazelKey.End,
        260: HazelKey.Insert,
        261: HazelKey.Delete,
        263: HazelKey.LeftArrow,
        265: HazelKey.UpArrow,
        262: HazelKey.RightArrow,
        264: HazelKey.DownArrow,
        282: HazelKey.NumLock,
        281: HazelKey.ScrollLock,
    }
)
# Additional keyboard keys
_table.update(
    {
        39: HazelKey.Apostrophe,
        44: HazelKey.Comma,
        45: HazelKey.Minus,
        46: HazelKey.Period,
        47: HazelKey.Slash,
        59: HazelKey.Semicolon,
        61: HazelKey.Equal,
        91: HazelKey.LeftBracket,
        92: HazelKey.Backslash,
        93: HazelKey.RightBracket,
        96: HazelKey.GraveAccent,
    }
)

GLFW_KEYS: Mapping[int, HazelKey] = MappingProxyType(_table)
"""Window-system key and mouse-button codes mapped to engine keys."""

del _table


def glfw_key_to_hazel_key(keycode: int) -> HazelKey:
    """Return the engine key for a window-system code.

    Codes without a mapping are logged as a warning and give ``HazelKey.NONE``.
    """
    try:
        return GLFW_KEYS[keycode]
    except KeyError:
        log.get_core_logger().warning(
            "Keycode %s in GLFW is not mapped in HazelKey!", keycode
        )
        return HazelKey.NONE