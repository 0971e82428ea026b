import pytest

from hazelengine import log
from hazelengine.application import Application
from hazelengine.events import WindowCloseEvent
from hazelengine.sandbox import SandBox, create_application
from hazelengine.window import Window


class FakeWindow(Window):
    def __init__(self):
        self.callback = None
        self.updates = 0
        self.closed = False

    def on_update(self):
        self.updates += 1
        self.callback(WindowCloseEvent())

    @property
    def width(self):
        return 1

    @property
    def height(self):
        return 1

    def set_event_callback(self, callback):
        self.callback = callback

    @property
    def vsync(self):
        return False

    @property
    def native_window(self):
        return None

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _fresh_loggers():
    log.init()


def test_sandbox_is_an_application():
    app = SandBox(window=FakeWindow())
    assert isinstance(app, Application)
    assert app.running is True


def test_sandbox_runs_until_close():
    window = FakeWindow()
    app = SandBox(window=window)
    app.run()
    assert window.updates == 1
    assert app.running is False


def test_sandbox_close_releases_window():
    window = FakeWindow()
    with SandBox(window=window):
        pass
    assert window.closed is True


def test_create_application_builds_sandbox_with_default_window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    app = create_application()
    try:
        assert isinstance(app, SandBox)
        assert app.window.width == 1600
        assert app.window.height == 900
    finally:
        app.close()