import pytest

from hazelengine import log
from hazelengine.application import CLEAR_COLOR, Application
from hazelengine.events import AppTickEvent, WindowCloseEvent, WindowResizeEvent
from hazelengine.window import Window


class _Surface:
    def __init__(self):
        self.fills = []

    def fill(self, colour):
        self.fills.append(colour)


class FakeWindow(Window):
    def __init__(self, close_after=1):
        self.callback = None
        self.updates = 0
        self.close_after = close_after
        self.closed = False
        self.surface = _Surface()

    def on_update(self):
        self.updates += 1
        if self.updates >= self.close_after:
            self.callback(WindowCloseEvent())

    @property
    def width(self):
        return 10

    @property
    def height(self):
        return 20

    def set_event_callback(self, callback):
        self.callback = callback

    @property
    def vsync(self):
        return True

    @property
    def native_window(self):
        return self.surface

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _fresh_loggers():
    log.init()


def test_constructor_registers_callback():
    window = FakeWindow()
    app = Application(window=window)
    assert app.window is window
    assert window.callback == app.on_event
    assert app.running is True


def test_close_event_stops_and_is_handled():
    app = Application(window=FakeWindow())
    event = WindowCloseEvent()
    app.on_event(event)
    assert app.running is False
    assert event.handled is True


def test_other_events_leave_loop_running():
    app = Application(window=FakeWindow())
    event = AppTickEvent()
    app.on_event(event)
    assert app.running is True
    assert event.handled is False


def test_on_window_close_returns_true():
    app = Application(window=FakeWindow())
    assert app.on_window_close(WindowCloseEvent()) is True
    assert app.running is False


def test_on_event_traces_to_core_logger(capsys):
    app = Application(window=FakeWindow())
    app.on_event(WindowResizeEvent(3, 4))
    out = capsys.readouterr().out
    assert "[trace] Hazel: WindowResizeEvent: 3 x 4" in out


def test_run_loops_until_window_closes(capsys):
    window = FakeWindow(close_after=3)
    app = Application(window=window)
    app.run()
    assert window.updates == 3
    assert app.running is False
    out = capsys.readouterr().out
    assert "App: WindowResizeEvent: 1260 x 720" in out
    assert "Hazel: WindowClose" in out


def test_run_clears_with_clear_colour_each_frame():
    window = FakeWindow(close_after=2)
    app = Application(window=window)
    app.run()
    assert len(window.surface.fills) == 2
    assert window.surface.fills[0] == (255, 0, 255, 255)
    assert CLEAR_COLOR == (1.0, 0.0, 1.0, 1.0)


def test_context_manager_closes_window():
    window = FakeWindow()
    with Application(window=window) as app:
        assert app.window is window
        assert window.closed is False
    assert window.closed is True