import pygame
import pytest

from hazelengine.events import WindowCloseEvent, WindowResizeEvent
from hazelengine.glfw_keys import Action, glfw_key_to_hazel_key
from hazelengine.input_events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMoveEvent,
    MouseScrollEvent,
)
from hazelengine.keycodes import HazelKey
from hazelengine.window import DesktopWindow, WindowProps, create_window


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = create_window(WindowProps("Test", 320, 240))
    yield win
    win.close()


@pytest.fixture
def received(window):
    events = []
    window.set_event_callback(events.append)
    return events


def test_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Hazel Engine", 1600, 900)


def test_create_window_uses_props(window):
    assert isinstance(window, DesktopWindow)
    assert (window.title, window.width, window.height) == ("Test", 320, 240)


def test_creation_is_logged(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with create_window(WindowProps("Logged", 64, 48)):
        pass
    assert "Create Window Logged (64, 48)" in capsys.readouterr().out


def test_vsync_on_by_default_and_toggles(window):
    assert window.vsync is True
    window.vsync = False
    assert window.vsync is False


def test_resize_updates_size_and_emits(window, received):
    window.handle_resize(800, 600)
    assert (window.width, window.height) == (800, 600)
    assert len(received) == 1
    event = received[0]
    assert isinstance(event, WindowResizeEvent)
    assert (event.width, event.height) == (800, 600)


def test_resize_without_callback_warns(window, capsys):
    window.handle_resize(100, 50)
    assert window.width == 100
    assert "EventCallback is null! (WindowResizeEvent)" in capsys.readouterr().out


def test_close_emits_close_event(window, received):
    window.handle_close()
    assert [type(e) for e in received] == [WindowCloseEvent]


def test_close_without_callback_raises(window):
    with pytest.raises(RuntimeError):
        window.handle_close()


@pytest.mark.parametrize(
    "action,cls,repeat",
    [
        (Action.PRESS, KeyPressedEvent, 0),
        (Action.REPEAT, KeyPressedEvent, 1),
    ],
)
def test_key_press_and_repeat(window, received, action, cls, repeat):
    code = ord("W")
    window.handle_key(code, 0, action, 0)
    assert len(received) == 1
    assert isinstance(received[0], cls)
    assert received[0].key_code == glfw_key_to_hazel_key(code)
    assert received[0].repeat_count == repeat


def test_key_release(window, received):
    window.handle_key(ord("Q"), 0, Action.RELEASE, 0)
    assert isinstance(received[0], KeyReleasedEvent)
    assert received[0].key_code is HazelKey.Q


def test_unknown_key_action_is_ignored(window, received):
    window.handle_key(ord("Q"), 0, 7, 0)
    assert received == []


def test_mouse_button_press_and_release(window, received):
    window.handle_mouse_button(0, Action.PRESS, 0)
    window.handle_mouse_button(0, Action.RELEASE, 0)
    assert [type(e) for e in received] == [MouseButtonPressedEvent, MouseButtonReleasedEvent]
    assert all(e.mouse_button is HazelKey.MouseLeft for e in received)


def test_mouse_button_repeat_is_ignored(window, received):
    window.handle_mouse_button(1, Action.REPEAT, 0)
    assert received == []


def test_scroll_and_cursor(window, received):
    window.handle_scroll(1.5, -2.0)
    window.handle_cursor_pos(10.0, 20.0)
    scroll, move = received
    assert isinstance(scroll, MouseScrollEvent)
    assert (scroll.x_offset, scroll.y_offset) == (1.5, -2.0)
    assert isinstance(move, MouseMoveEvent)
    assert (move.x, move.y) == (10.0, 20.0)


def test_on_update_turns_quit_into_close_event(window, received):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.on_update()
    closes = [type(e) for e in received if isinstance(e, WindowCloseEvent)]
    assert closes == [WindowCloseEvent]
    assert str(received[received.index(next(e for e in received if isinstance(e, WindowCloseEvent)))]) == "WindowClose"


def test_close_releases_native_window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = create_window(WindowProps("Closing", 32, 32))
    assert win.native_window.get_size() == (32, 32)
    win.close()
    assert win.native_window is None