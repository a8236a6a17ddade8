# MIT License (see LICENSE)
"""
Renderer adapters.

The core produces plain arrays and records; drawing them is the host's job.
RendererAdapter is the boundary a graphics backend implements. Three
implementations ship with the package: a no-op, a text dump and a frame
recorder.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..types import Body, Circle, Box
from ..core.field import FieldLine

if TYPE_CHECKING:
    from ..scene import Scene


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(scene.time)
        for line in scene.field_lines():
            renderer.draw_field_line(line)
        for i, body in enumerate(scene.bodies):
            renderer.draw_body(i, body)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_scene(scene)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        ...

    @abstractmethod
    def draw_field_line(self, line: FieldLine) -> None:
        ...

    @abstractmethod
    def draw_body(self, index: int, body: Body) -> None:
        ...

    @abstractmethod
    def draw_trail(self, index: int, points: np.ndarray, weights: np.ndarray) -> None:
        """
        Draw a motion trail.

        Args:
            index: Index of the body the trail belongs to.
            points: Trail points [N, 3], oldest first.
            weights: Per-point opacity [N] in (0, 1].
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_scene(self, scene: "Scene") -> None:
        """Draw the field lines, trails and bodies of a scene as one frame."""
        self.begin_frame(scene.time)
        for line in scene.field_lines():
            self.draw_field_line(line)
        for i, trail in enumerate(scene.trails):
            if len(trail):
                self.draw_trail(i, trail.points(), trail.fade_weights())
        for i, body in enumerate(scene.bodies):
            self.draw_body(i, body)
        self.end_frame()


def _shape_label(body: Body) -> str:
    shape = body.shape
    if isinstance(shape, Circle):
        return f"Circle r={shape.radius:.2f}"
    if isinstance(shape, Box):
        w, h, d = shape.size
        return f"Box {w:.2f}x{h:.2f}x{d:.2f}"
    raise TypeError(f"Unknown shape type: {type(shape)}")


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=0.0167 ===
        line[0] 146 pts out_of_bounds
        [0] Circle r=0.50 @ (0.02, 0.00, 0.00) v=(1.00, 0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        self.output = output or sys.stdout
        self.verbose = verbose
        self._line_count = 0

    def begin_frame(self, time: float) -> None:
        self._line_count = 0
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_field_line(self, line: FieldLine) -> None:
        self.output.write(
            f"line[{self._line_count}] {len(line)} pts {line.termination.value}\n"
        )
        self._line_count += 1

    def draw_body(self, index: int, body: Body) -> None:
        p = body.position
        text = f"[{index}] {_shape_label(body)} @ ({p[0]:.2f}, {p[1]:.2f}, {p[2]:.2f})"
        if self.verbose:
            v = body.velocity
            text += f" v=({v[0]:.2f}, {v[1]:.2f}, {v[2]:.2f})"
        self.output.write(text + "\n")

    def draw_trail(self, index: int, points: np.ndarray, weights: np.ndarray) -> None:
        if self.verbose:
            self.output.write(f"trail[{index}] {len(points)} pts\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing the core without drawing."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_field_line(self, line: FieldLine) -> None:
        pass

    def draw_body(self, index: int, body: Body) -> None:
        pass

    def draw_trail(self, index: int, points: np.ndarray, weights: np.ndarray) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records each frame as plain lists and dicts.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            scene.step()
            renderer.render_scene(scene)
        for frame in renderer.frames:
            print(frame["time"], len(frame["bodies"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "field_lines": [],
            "trails": [],
            "bodies": [],
        }

    def draw_field_line(self, line: FieldLine) -> None:
        if self._current_frame is None:
            return
        self._current_frame["field_lines"].append({
            "charge_index": line.charge_index,
            "termination": line.termination.value,
            "points": line.points.tolist(),
        })

    def draw_body(self, index: int, body: Body) -> None:
        if self._current_frame is None:
            return
        self._current_frame["bodies"].append({
            "index": index,
            "position": body.position.tolist(),
            "velocity": body.velocity.tolist(),
        })

    def draw_trail(self, index: int, points: np.ndarray, weights: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["trails"].append({
            "index": index,
            "points": points.tolist(),
            "weights": weights.tolist(),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
