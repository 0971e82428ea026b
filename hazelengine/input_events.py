"""Keyboard and mouse input events."""

from __future__ import annotations

import math
import struct
from decimal import Decimal

from hazelengine.events import Event, EventCategory, EventType
from hazelengine.keycodes import HazelKey, key_name


def _to_float32(value: float) -> float:
    """Round a number to single precision, overflowing to infinity."""
    value = float(value)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_float32(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    packed = struct.pack("<f", value)
    scientific = format(value, ".8e")
    for digits in range(0, 9):
        candidate = format(value, f".{digits}e")
        if struct.pack("<f", float(candidate)) == packed:
            scientific = candidate
            break
    fixed = format(Decimal(scientific), "f")
    return fixed if len(fixed) <= len(scientific) else scientific


class KeyEvent(Event):
    """Base class of events that carry a key code."""

    category_flags = EventCategory.Input | EventCategory.Keyboard

    def __init__(self, key_code: HazelKey) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    """A key went down, or repeated while held."""

    event_type = EventType.KeyPressed

    def __init__(self, key_code: HazelKey, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {key_name(self.key_code)} ({self.repeat_count})"


class KeyReleasedEvent(KeyEvent):
    """A key went up."""

    event_type = EventType.KeyReleased

    def __str__(self) -> str:
        return f"KeyReleasedEvent:{key_name(self.key_code)}"


class KeyTypedEvent(Event):
    """A character was typed."""

    event_type = EventType.KeyTyped
    category_flags = EventCategory.Input | EventCategory.Keyboard

    def __init__(self, code_point: int) -> None:
        super().__init__()
        self.code_point = code_point

    def __str__(self) -> str:
        return chr(self.code_point)


class MouseMoveEvent(Event):
    """The cursor moved; coordinates are kept in single precision."""

    event_type = EventType.MouseMoved
    category_flags = EventCategory.Input | EventCategory.Mouse

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = _to_float32(x)
        self.y = _to_float32(y)

    def __str__(self) -> str:
        return f"MouseMoveEvent: {_format_float32(self.x)}, {_format_float32(self.y)}"


class MouseScrollEvent(Event):
    """The mouse wheel scrolled; offsets are kept in single precision."""

    event_type = EventType.MouseScrolled
    category_flags = EventCategory.Input | EventCategory.Mouse

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = _to_float32(x_offset)
        self.y_offset = _to_float32(y_offset)

    def __str__(self) -> str:
        return (
            f"MouseScrollEvent: {_format_float32(self.x_offset)}, "
            f"{_format_float32(self.y_offset)}"
        )


class MouseButtonEvent(Event):
    """Base class of events that carry a mouse button."""

    category_flags = EventCategory.Input | EventCategory.Mouse

    def __init__(self, mouse_button: HazelKey) -> None:
        super().__init__()
        self.mouse_button = mouse_button


class MouseButtonPressedEvent(MouseButtonEvent):
    """A mouse button went down."""

    event_type = EventType.MouseButtonPressed

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {key_name(self.mouse_button)}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    """A mouse button went up."""

    event_type = EventType.MouseButtonReleased

    def __str__(self) -> str:
        return f"MouseButtonReleasedWvent : {key_name(self.mouse_button)}"