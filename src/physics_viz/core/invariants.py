# MIT License (see LICENSE)
"""
Conserved quantities of a set of bodies.

Used to check collision resolution: an elastic collision (e = 1) conserves
both kinetic energy and momentum, an inelastic one conserves only momentum.
Infinite-mass obstacles are excluded from the sums.

The single-particle forms (point_kinetic_energy, potential_energy) back the
energy readouts of the projectile and collision views.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import GRAVITY
from ..types import Body


def kinetic_energy(bodies: list[Body], velocities: list[np.ndarray] | None = None) -> float:
    """
    Total translational kinetic energy.

    T = Σ 0.5 m v²

    Args:
        bodies: Bodies providing the masses.
        velocities: Optional velocities to use instead of the bodies' own,
            e.g. the output of resolve_collisions().

    Returns:
        Kinetic energy in Joules.
    """
    if velocities is None:
        velocities = [b.velocity for b in bodies]
    ke = 0.0
    for b, v in zip(bodies, velocities):
        if math.isinf(b.mass):
            continue
        ke += 0.5 * b.mass * float(np.dot(v, v))
    return ke


def linear_momentum(bodies: list[Body], velocities: list[np.ndarray] | None = None) -> np.ndarray:
    """
    Total linear momentum P = Σ m v, as a vector [Px, Py, Pz].
    """
    if velocities is None:
        velocities = [b.velocity for b in bodies]
    p = np.zeros(3, dtype=np.float64)
    for b, v in zip(bodies, velocities):
        if math.isinf(b.mass):
            continue
        p += b.mass * np.asarray(v, dtype=np.float64)
    return p


def point_kinetic_energy(mass: float, velocity) -> float:
    """0.5 m v² for a speed or a velocity vector."""
    v = np.asarray(velocity, dtype=np.float64)
    return 0.5 * mass * float(np.dot(v.ravel(), v.ravel()))


def potential_energy(mass: float, height: float, gravity: float = GRAVITY) -> float:
    """Gravitational potential energy m g h near the ground."""
    return mass * gravity * height
