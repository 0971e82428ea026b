"""Renderer backend selection and the rendering command interface."""

from __future__ import annotations

import abc
import enum
from typing import ClassVar

from hazelengine.core import core_assert

_UINT32_MAX = 0xFFFFFFFF


class API(enum.IntEnum):
    """Available rendering backends."""

    NONE = 0
    OpenGL = 1


class VertexArray:
    """Base class of vertex array objects handed to draw calls."""


def _uint32(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} must be an unsigned 32-bit integer, got {value}")
    return value


class RendererAPI(abc.ABC):
    """Interface every rendering backend implements.

    ``api`` names the backend that ``create_renderer_api`` builds.
    """

    api: ClassVar[API] = API.OpenGL

    @abc.abstractmethod
    def init(self) -> None:
        """Prepare the backend for drawing."""

    @abc.abstractmethod
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Set the region of the framebuffer that is drawn to."""

    @abc.abstractmethod
    def set_clear_color(self, color) -> None:
        """Set the RGBA colour used by ``clear``."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Clear the framebuffer."""

    @abc.abstractmethod
    def draw_indexed(self, vertex_array: VertexArray, index_count: int = 0) -> None:
        """Draw triangles from a vertex array's index buffer."""

    @abc.abstractmethod
    def draw_line(self, vertex_array: VertexArray, index_count: int) -> None:
        """Draw lines from a vertex array."""

    @abc.abstractmethod
    def set_line_width(self, width: float) -> None:
        """Set the width of drawn lines."""


class OpenGLRendererAPI(RendererAPI):
    """OpenGL backend that keeps its pipeline state and a log of issued commands."""

    def __init__(self) -> None:
        self.initialized = False
        self.viewport: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.line_width = 1.0
        self.commands: list[tuple] = []

    def init(self) -> None:
        self.initialized = True

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self.viewport = (
            _uint32("x", x),
            _uint32("y", y),
            _uint32("width", width),
            _uint32("height", height),
        )

    def set_clear_color(self, color) -> None:
        components = tuple(float(c) for c in color)
        if len(components) != 4:
            raise ValueError(f"clear colour needs 4 components, got {len(components)}")
        self.clear_color = components  # type: ignore[assignment]

    def clear(self) -> None:
        self.commands.append(("clear", self.clear_color))

    def draw_indexed(self, vertex_array: VertexArray, index_count: int = 0) -> None:
        self.commands.append(
            ("draw_indexed", vertex_array, _uint32("index_count", index_count))
        )

    def draw_line(self, vertex_array: VertexArray, index_count: int) -> None:
        self.commands.append(("draw_line", vertex_array, _uint32("index_count", index_count)))

    def set_line_width(self, width: float) -> None:
        self.line_width = float(width)


def get_api() -> API:
    """Return the selected rendering backend."""
    return RendererAPI.api


def create_renderer_api() -> RendererAPI:
    """Build the backend named by ``RendererAPI.api``."""
    selected = RendererAPI.api
    if selected == API.OpenGL:
        return OpenGLRendererAPI()
    if selected == API.NONE:
        core_assert(False, "RendererAPI::None is not supported!")
    core_assert(False, "Unknown RendererAPI!")
    raise AssertionError("unreachable")


class Renderer:
    """High-level renderer facade."""

    @staticmethod
    def get_api() -> API:
        """Return the selected rendering backend."""
        return get_api()