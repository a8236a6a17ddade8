# MIT License (see LICENSE)
"""
physics_viz - numeric core for interactive physics visualizations.

This package computes the plain data a renderer draws: electric field
lines, wave interference surfaces, barrier tunneling probabilities,
Lorentz-boosted spacetime coordinates and collision responses.

Main entry points:
    - Scene: Frame driver with change detection and motion trails.
    - Charge, WaveSource, BarrierConfig, Event: Component inputs.
    - Body, Circle, Box: Collision bodies and shapes.
    - DomainError, DegenerateInputWarning: Error taxonomy.

Submodules:
    - core: Field, wave, quantum and relativity kernels, trails, integration.
    - collision: Broadphase, narrowphase and impulse response.
    - io: Scenario JSON serialization.
    - renderer: Renderer boundary adapters.

Example:
    from physics_viz import Scene, Charge

    scene = Scene(charges=[Charge((-2, 0), 1e-9), Charge((2, 0), -1e-9)])
    for line in scene.field_lines():
        draw(line.points)
"""
from .scene import Scene
from .types import Charge, WaveSource, Body, Circle, Box, BarrierConfig, Event
from .errors import DomainError, DegenerateInputWarning

__all__ = [
    # Frame driver
    "Scene",
    # Component inputs
    "Charge",
    "WaveSource",
    "BarrierConfig",
    "Event",
    # Bodies and shapes
    "Body",
    "Circle",
    "Box",
    # Errors
    "DomainError",
    "DegenerateInputWarning",
]
