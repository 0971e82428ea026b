"""The application base class: owns the window and runs the main loop."""

from __future__ import annotations

from typing import Optional

from hazelengine import log
from hazelengine.events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from hazelengine.window import Window, create_window

CLEAR_COLOR = (1.0, 0.0, 1.0, 1.0)
"""RGBA colour the window is cleared to every frame."""

_STARTUP_SIZE = (1260, 720)


def _to_byte(component: float) -> int:
    return max(0, min(255, round(component * 255)))


class Application:
    """Base class of engine applications.

    Creates the platform window (unless one is given), receives all of its
    events and runs the frame loop until the window is closed.
    """

    def __init__(self, window: Optional[Window] = None) -> None:
        self._window = window if window is not None else create_window()
        self._window.set_event_callback(self.on_event)
        self._running = True

    @property
    def window(self) -> Window:
        """The window this application draws into."""
        return self._window

    @property
    def running(self) -> bool:
        """Whether the main loop keeps going."""
        return self._running

    def on_event(self, event: Event) -> None:
        """Handle one event coming from the window."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self.on_window_close)
        log.get_core_logger().trace("%s", event)

    def on_window_close(self, event: Event) -> bool:
        """Stop the main loop; the event counts as handled."""
        self._running = False
        return True

    def _clear(self) -> None:
        surface = self._window.native_window
        fill = getattr(surface, "fill", None)
        if fill is not None:
            fill(tuple(_to_byte(c) for c in CLEAR_COLOR))

    def run(self) -> None:
        """Run frames until the window asks to close."""
        event = WindowResizeEvent(*_STARTUP_SIZE)
        log.get_client_logger().trace("%s", event)
        while self._running:
            self._clear()
            self._window.on_update()

    def close(self) -> None:
        """Release the window."""
        closer = getattr(self._window, "close", None)
        if closer is not None:
            closer()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()