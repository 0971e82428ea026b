"""Event types, categories, dispatching and application events."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar

from hazelengine.core import bit


class EventType(enum.IntEnum):
    """Kind of an event; each concrete event class has exactly one."""

    NONE = 0
    WindowClose = 1
    WindowResize = 2
    WindowFocus = 3
    WindowLostFocus = 4
    WindowMoved = 5
    AppTick = 6
    AppUpdate = 7
    AppRender = 8
    KeyPressed = 9
    KeyReleased = 10
    KeyTyped = 11
    MouseButtonPressed = 12
    MouseButtonReleased = 13
    MouseMoved = 14
    MouseScrolled = 15


class EventCategory(enum.IntFlag):
    """Bit flags grouping events; an event may belong to several."""

    NONE = 0
    Application = bit(0)
    Input = bit(1)
    Keyboard = bit(2)
    Mouse = bit(3)
    MouseButton = bit(4)


class Event:
    """Base class of every event.

    Subclasses set ``event_type`` and ``category_flags``. ``handled`` becomes
    true once a dispatcher's handler reports that it consumed the event.
    """

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        """The name of the event's type, such as ``'WindowClose'``."""
        return self.event_type.name

    def is_in_category(self, category: EventCategory) -> bool:
        """Return whether the event belongs to any of the given categories."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers registered for its type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result is stored in the event's ``handled`` flag.
        Returns whether the handler was called.
        """
        if self._event.event_type != event_class.event_type:
            return False
        self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
        return True


class WindowResizeEvent(Event):
    """The window changed to a new size."""

    event_type = EventType.WindowResize
    category_flags = EventCategory.Application

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width} x {self.height}"


class WindowCloseEvent(Event):
    """The user asked to close the window."""

    event_type = EventType.WindowClose
    category_flags = EventCategory.Application


class AppTickEvent(Event):
    """A fixed application tick."""

    event_type = EventType.AppTick
    category_flags = EventCategory.Application


class AppUpdateEvent(Event):
    """An application update step."""

    event_type = EventType.AppUpdate
    category_flags = EventCategory.Application


class AppRenderEvent(Event):
    """An application render step."""

    event_type = EventType.AppRender
    category_flags = EventCategory.Application