# MIT License (see LICENSE)
"""
Rendering boundary.

This subpackage provides:
    - RendererAdapter: Abstract base class a graphics backend implements.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for timing runs.
    - BufferedRenderer: Records frames as plain data.

Typical usage:
    from physics_viz.renderer import DebugRenderer

    DebugRenderer().render_scene(scene)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
