"""Desktop window that turns window-system input into engine events."""

from __future__ import annotations

import abc
import os
from dataclasses import dataclass
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from hazelengine import log  # noqa: E402
from hazelengine.events import Event, WindowCloseEvent, WindowResizeEvent  # noqa: E402
from hazelengine.glfw_keys import (  # noqa: E402
    GLFW_KEY_UNKNOWN,
    GLFW_KEYS,
    Action,
    glfw_key_to_hazel_key,
)
from hazelengine.input_events import (  # noqa: E402
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMoveEvent,
    MouseScrollEvent,
)
from hazelengine.keycodes import HazelKey  # noqa: E402

EventCallback = Callable[[Event], None]

_VSYNC_RATE = 60

_HAZEL_TO_GLFW = {key: code for code, key in GLFW_KEYS.items()}

# pygame mouse buttons 4 and 5 are the wheel, reported separately as MOUSEWHEEL.
_PYGAME_TO_GLFW_BUTTON = {1: 0, 3: 1, 2: 2, 6: 3, 7: 4}


def _pygame_key_table() -> dict[int, int]:
    names: list[tuple[tuple[str, ...], HazelKey]] = []
    names += [((f"K_{d}",), HazelKey(ord(str(d)))) for d in range(10)]
    names += [((f"K_{c.lower()}",), HazelKey(ord(c))) for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"]
    names += [((f"K_F{n}",), HazelKey[f"F{n}"]) for n in range(1, 13)]
    names += [((f"K_KP{d}", f"K_KP_{d}"), HazelKey[f"Numpad{d}"]) for d in range(10)]
    names += [
        (("K_KP_PLUS",), HazelKey.NumpadAdd),
        (("K_KP_MINUS",), HazelKey.NumpadSubtract),
        (("K_KP_MULTIPLY",), HazelKey.NumpadMultiply),
        (("K_KP_DIVIDE",), HazelKey.NumpadDivide),
        (("K_KP_ENTER",), HazelKey.NumpadEnter),
        (("K_KP_PERIOD",), HazelKey.NumpadDecimal),
        (("K_TAB",), HazelKey.Tab),
        (("K_RETURN",), HazelKey.Enter),
        (("K_LSHIFT",), HazelKey.LeftShift),
        (("K_RSHIFT",), HazelKey.RightShift),
        (("K_LCTRL",), HazelKey.LeftControl),
        (("K_RCTRL",), HazelKey.RightControl),
        (("K_LALT",), HazelKey.LeftAlt),
        (("K_RALT",), HazelKey.RightAlt),
        (("K_LSUPER", "K_LMETA"), HazelKey.LeftSuper),
        (("K_RSUPER", "K_RMETA"), HazelKey.RightSuper),
        (("K_SPACE",), HazelKey.Space),
        (("K_CAPSLOCK",), HazelKey.CapsLock),
        (("K_ESCAPE",), HazelKey.Escape),
        (("K_BACKSPACE",), HazelKey.Backspace),
        (("K_PAGEUP",), HazelKey.PageUp),
        (("K_PAGEDOWN",), HazelKey.PageDown),
        (("K_HOME",), HazelKey.Home),
        (("K_END",), HazelKey.End),
        (("K_INSERT",), HazelKey.Insert),
        (("K_DELETE",), HazelKey.Delete),
        (("K_LEFT",), HazelKey.LeftArrow),
        (("K_UP",), HazelKey.UpArrow),
        (("K_RIGHT",), HazelKey.RightArrow),
        (("K_DOWN",), HazelKey.DownArrow),
        (("K_NUMLOCK", "K_NUMLOCKCLEAR"), HazelKey.NumLock),
        (("K_SCROLLOCK", "K_SCROLLLOCK"), HazelKey.ScrollLock),
        (("K_QUOTE",), HazelKey.Apostrophe),
        (("K_COMMA",), HazelKey.Comma),
        (("K_MINUS",), HazelKey.Minus),
        (("K_PERIOD",), HazelKey.Period),
        (("K_SLASH",), HazelKey.Slash),
        (("K_SEMICOLON",), HazelKey.Semicolon),
        (("K_EQUALS",), HazelKey.Equal),
        (("K_LEFTBRACKET",), HazelKey.LeftBracket),
        (("K_BACKSLASH",), HazelKey.Backslash),
        (("K_RIGHTBRACKET",), HazelKey.RightBracket),
        (("K_BACKQUOTE",), HazelKey.GraveAccent),
    ]
    table: dict[int, int] = {}
    for candidates, key in names:
        for name in candidates:
            value = getattr(pygame, name, None)
            if value is not None:
                table[value] = _HAZEL_TO_GLFW[key]
    return table


_PYGAME_TO_GLFW_KEY = _pygame_key_table()


@dataclass
class WindowProps:
    """Title and size a window is created with."""

    title: str = "Hazel Engine"
    width: int = 1600
    height: int = 900


class Window(abc.ABC):
    """Interface of a desktop window."""

    @abc.abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @abc.abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event of this window."""

    @property
    @abc.abstractmethod
    def vsync(self) -> bool:
        """Whether frame presentation is synchronised."""

    @property
    @abc.abstractmethod
    def native_window(self):
        """The underlying window-system object."""


class DesktopWindow(Window):
    """A pygame window translating its input into engine events."""

    def __init__(self, props: WindowProps) -> None:
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._callback: Optional[EventCallback] = None
        self._clock = pygame.time.Clock()

        logger = log.get_core_logger()
        logger.info("Create Window %s (%s, %s) ", props.title, props.width, props.height)

        try:
            if not pygame.display.get_init():
                pygame.display.init()
            self._surface = pygame.display.set_mode(
                (int(props.width), int(props.height)), pygame.RESIZABLE
            )
        except pygame.error as exc:
            logger.error("GLFW Error: %s", exc)
            raise
        pygame.display.set_caption(self.title)
        self.vsync = True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    @property
    def native_window(self):
        return self._surface

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def _emit(self, event: Event) -> None:
        if self._callback is None:
            raise RuntimeError(f"no event callback set for {event.name}")
        self._callback(event)

    def handle_resize(self, width: int, height: int) -> None:
        """Record a new size and report it."""
        self._width = width
        self._height = height
        event = WindowResizeEvent(width, height)
        if self._callback is not None:
            self._callback(event)
        else:
            log.get_core_logger().warning("EventCallback is null! (WindowResizeEvent)")

    def handle_close(self) -> None:
        """Report that the window was asked to close."""
        self._emit(WindowCloseEvent())

    def handle_key(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Report a key going down, repeating or going up."""
        keycode = glfw_key_to_hazel_key(key)
        if action == Action.RELEASE:
            self._emit(KeyReleasedEvent(keycode))
        elif action == Action.PRESS:
            self._emit(KeyPressedEvent(keycode, 0))
        elif action == Action.REPEAT:
            self._emit(KeyPressedEvent(keycode, 1))

    def handle_mouse_button(self, button: int, action: int, mods: int) -> None:
        """Report a mouse button going down or up."""
        keycode = glfw_key_to_hazel_key(button)
        if action == Action.RELEASE:
            self._emit(MouseButtonReleasedEvent(keycode))
        elif action == Action.PRESS:
            self._emit(MouseButtonPressedEvent(keycode))

    def handle_scroll(self, x_offset: float, y_offset: float) -> None:
        """Report a scroll of the mouse wheel."""
        self._emit(MouseScrollEvent(x_offset, y_offset))

    def handle_cursor_pos(self, x_pos: float, y_pos: float) -> None:
        """Report a cursor movement."""
        self._emit(MouseMoveEvent(x_pos, y_pos))

    def _handle_pygame_event(self, event) -> None:
        kind = event.type
        if kind == pygame.QUIT:
            self.handle_close()
        elif kind == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            code = _PYGAME_TO_GLFW_KEY.get(getattr(event, "key", None), GLFW_KEY_UNKNOWN)
            action = Action.PRESS if kind == pygame.KEYDOWN else Action.RELEASE
            self.handle_key(
                code, getattr(event, "scancode", 0), action, getattr(event, "mod", 0)
            )
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _PYGAME_TO_GLFW_BUTTON.get(getattr(event, "button", None))
            if button is not None:
                action = Action.PRESS if kind == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                self.handle_mouse_button(button, action, pygame.key.get_mods())
        elif kind == pygame.MOUSEWHEEL:
            self.handle_scroll(event.x, event.y)
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            self.handle_cursor_pos(x, y)

    def on_update(self) -> None:
        for event in pygame.event.get():
            self._handle_pygame_event(event)
        if self._surface is not None:
            pygame.display.flip()
        if self._vsync:
            self._clock.tick(_VSYNC_RATE)
        else:
            self._clock.tick()

    def close(self) -> None:
        """Destroy the window."""
        if self._surface is not None:
            pygame.display.quit()
            self._surface = None

    def __enter__(self) -> "DesktopWindow":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create the desktop window for this platform."""
    return DesktopWindow(props if props is not None else WindowProps())