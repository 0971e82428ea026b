"""Sample application and the program entry point."""

from __future__ import annotations

from typing import Optional, Sequence

from hazelengine import log
from hazelengine.application import Application
from hazelengine.window import Window


class SandBox(Application):
    """The sample application: the engine defaults and nothing more."""

    def __init__(self, window: Optional[Window] = None) -> None:
        super().__init__(window=window)


def create_application() -> Application:
    """Build the application the entry point runs."""
    return SandBox()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start logging, build the application and run it until it closes."""
    log.init()
    core = log.get_core_logger()
    core.warning("Hazel Application started")
    core.info("Hazel Application started")
    with create_application() as app:
        app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())