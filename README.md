# hazelengine

A small application framework built around a desktop window, a typed event
system, engine-wide key codes and a renderer abstraction. Windows and input
are provided by pygame.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running the sandbox

The package ships a minimal sample application, `hazelengine.sandbox.SandBox`.
Start it with:

```
hazel-sandbox
```

It sets up logging, opens a 1600 x 900 window titled "Hazel Engine", clears it
to magenta every frame and runs until the window is closed.

## Writing an application

Subclass `Application` and run it:

```python
from hazelengine import log
from hazelengine.application import Application


class MyApp(Application):
    pass


log.init()
with MyApp() as app:
    app.run()
```

`Application` creates a window with `hazelengine.window.create_window` (or
uses the `Window` passed to it), routes every event the window produces
through `Application.on_event`, and stops the loop when a `WindowCloseEvent`
arrives (`Application.on_window_close`). Used as a context manager it closes
its window on exit.

## Windows

`hazelengine.window` holds `WindowProps` (title, width, height), the abstract
`Window` interface and `DesktopWindow`, a pygame window. `DesktopWindow.on_update`
reads pending pygame events and turns them into engine events through its
`handle_resize`, `handle_close`, `handle_key`, `handle_mouse_button`,
`handle_scroll` and `handle_cursor_pos` methods, which can also be called
directly. Events go to the function given to `set_event_callback`.

## Events

Events live in `hazelengine.events` (`WindowResizeEvent`, `WindowCloseEvent`,
`AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent`) and
`hazelengine.input_events` (`KeyPressedEvent`, `KeyReleasedEvent`,
`KeyTypedEvent`, `MouseMoveEvent`, `MouseScrollEvent`,
`MouseButtonPressedEvent`, `MouseButtonReleasedEvent`).

Each event has an `EventType`, a set of `EventCategory` flags and a readable
string form:

```python
from hazelengine.events import EventCategory, EventDispatcher, WindowResizeEvent

event = WindowResizeEvent(1280, 720)
print(event)                                        # WindowResizeEvent: 1280 x 720
event.is_in_category(EventCategory.Application)     # True

dispatcher = EventDispatcher(event)
dispatcher.dispatch(WindowResizeEvent, lambda e: True)
event.handled                                       # True
```

`EventDispatcher.dispatch` calls the handler only when the event has the
given class's event type, stores the handler's result as the event's
`handled` flag, and returns whether the handler was called.

## Key codes

`hazelengine.keycodes.HazelKey` is the engine's own key enumeration and
`MouseButton` numbers the mouse buttons. `key_name` gives a key's display
name (`"A"`, `"0"`, `"Escape"`), or `"UnknownKey"` for codes it does not know.
`hazelengine.glfw_keys` maps GLFW key and mouse-button codes to `HazelKey`
(`GLFW_KEYS`, `glfw_key_to_hazel_key`); unmapped codes become `HazelKey.NONE`
and a warning is logged. `Action` names release, press and repeat.

## Logging

`hazelengine.log.init()` creates two loggers writing to stdout, the engine's
core logger (`get_core_logger()`, named `Hazel`) and the client logger
(`get_client_logger()`, named `App`), both at the extra `trace` level below
debug. Lines look like `[2025-01-01 12:00:00] [info] Hazel: message` and are
coloured when stdout is a terminal. `hazelengine.core.core_assert` and
`client_assert` log an error and raise `HazelAssertionError` when a check
fails; `bit(x)` returns `1 << x`.

## Renderer

`hazelengine.renderer` defines the selected backend `API` (`get_api()`,
`Renderer.get_api()`), the abstract `RendererAPI`, the `OpenGLRendererAPI`
backend, the `VertexArray` base class, and `create_renderer_api()` to build
the backend for the selected API.

## What it does not do

The renderer issues no real GPU calls. `OpenGLRendererAPI` only keeps its
state (viewport, clear colour, line width) and appends each `clear`,
`draw_indexed` and `draw_line` call to its `commands` list, and `VertexArray`
holds no data. The window's picture is drawn by pygame alone, as a plain fill
with the clear colour.