# MIT License (see LICENSE)
"""
Position integration for collision bodies.

The collision engine only returns velocities; moving bodies between frames
is the host's job, and this is the integrator Scene uses for it:

    v(t+dt) = v(t) + g dt
    x(t+dt) = x(t) + v(t+dt) dt        (semi-implicit Euler)

Infinite-mass bodies are obstacles and never move.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import math
from dataclasses import replace

import numpy as np

from ..types import Body
from ..util import vec3


def euler_step(body: Body, dt: float, gravity=(0.0, 0.0, 0.0)) -> Body:
    """
    Advance one body by dt.

    Args:
        body: Body to advance (not modified).
        dt: Timestep in seconds.
        gravity: Uniform acceleration [gx, gy, gz].

    Returns:
        A new Body with updated position and velocity.
    """
    if math.isinf(body.mass) or dt == 0.0:
        return body
    g = vec3(gravity)
    velocity = body.velocity + g * dt
    position = body.position + velocity * dt
    return replace(body, position=position, velocity=velocity)


def euler_step_all(bodies: list[Body], dt: float, gravity=(0.0, 0.0, 0.0)) -> list[Body]:
    """euler_step() over a list of bodies."""
    return [euler_step(b, dt, gravity) for b in bodies]


def with_velocities(bodies: list[Body], velocities: list[np.ndarray]) -> list[Body]:
    """Rebuild bodies with the velocities returned by resolve_collisions()."""
    if len(bodies) != len(velocities):
        raise ValueError(f"Got {len(velocities)} velocities for {len(bodies)} bodies")
    return [
        b if np.array_equal(b.velocity, v) else replace(b, velocity=v)
        for b, v in zip(bodies, velocities)
    ]
