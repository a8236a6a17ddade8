# MIT License (see LICENSE)
"""
Closed-form electromagnetism helpers for the field and induction views.

Key concepts:
    - Coulomb force and potential between point charges, k = 8.99e9.
    - Field of a long straight wire, B = μ₀ I / (2π r).
    - Lorentz force F = q (E + v × B) on a moving charge.
    - Faraday induction: flux Φ = B A cos θ and EMF ε = −N dΦ/dt, either
      from a rotating generator coil or from successive flux readings.

All inputs are SI. Distances must be positive; the field-line tracer in
physics_viz.core.field handles the near-charge floor on its own.

Typical usage:
    meter = InductionMeter(turns=100)
    for t in times:
        emf = meter.update(magnetic_flux(0.5, 0.02, omega * t), t)
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import K_COULOMB, MU0
from ..errors import DomainError
from ..util import vec3


def _check_distance(distance: float) -> None:
    if not distance > 0:
        raise DomainError(f"Distance must be positive, got {distance}")


def coulomb_force(q1: float, q2: float, distance: float) -> float:
    """
    Signed magnitude k q1 q2 / r². Positive means repulsion.
    """
    _check_distance(distance)
    return K_COULOMB * q1 * q2 / (distance * distance)


def electric_potential(charge: float, distance: float) -> float:
    """V = k q / r, in volts."""
    _check_distance(distance)
    return K_COULOMB * charge / distance


def magnetic_field_from_current(current: float, distance: float) -> float:
    """B = μ₀ I / (2π r) around a long straight wire, in tesla."""
    _check_distance(distance)
    return MU0 * current / (2.0 * math.pi * distance)


def lorentz_force(charge: float, velocity=None, electric_field=None, magnetic_field=None) -> np.ndarray:
    """
    Total force on a moving point charge.

    F = q (E + v × B)

    Args:
        charge: Charge in coulombs.
        velocity: [vx, vy, vz] in m/s (None means at rest).
        electric_field: [Ex, Ey, Ez] in V/m (None means zero).
        magnetic_field: [Bx, By, Bz] in T (None means zero).

    Returns:
        Force vector [Fx, Fy, Fz] in newtons.
    """
    zero = (0.0, 0.0, 0.0)
    v = vec3(zero if velocity is None else velocity)
    e = vec3(zero if electric_field is None else electric_field)
    b = vec3(zero if magnetic_field is None else magnetic_field)
    return charge * (e + np.cross(v, b))


# =============================================================================
# Faraday induction
# =============================================================================

def magnetic_flux(field_strength: float, area: float, angle: float = 0.0) -> float:
    """
    Flux through a flat coil, Φ = B A cos θ.

    Args:
        field_strength: B in tesla.
        area: Coil area in m².
        angle: Angle between the field and the coil normal, in radians.
    """
    if area < 0:
        raise DomainError(f"Coil area must be non-negative, got {area}")
    return field_strength * area * math.cos(angle)


def induced_emf(turns: int, flux_change: float, dt: float) -> float:
    """ε = −N ΔΦ/Δt over a finite interval."""
    if not dt > 0:
        raise DomainError(f"Time interval must be positive, got {dt}")
    return -turns * flux_change / dt


def generator_emf(
    turns: int,
    field_strength: float,
    area: float,
    angular_speed: float,
    angle: float,
) -> float:
    """
    Instantaneous EMF of a coil rotating at ω in a uniform field.

    With Φ = B A cos(ωt), ε = −N dΦ/dt = N B A ω sin(ωt).
    """
    if area < 0:
        raise DomainError(f"Coil area must be non-negative, got {area}")
    return turns * field_strength * area * angular_speed * math.sin(angle)


class InductionMeter:
    """
    EMF from a stream of flux readings.

    Each update differentiates against the previous reading. The first
    reading (and any reading that does not advance the clock) has no
    interval to differentiate over and reports zero.

    Attributes:
        turns: Number of coil windings N.
        resistance: Circuit resistance in ohms, for the induced current.
        emf: Last computed EMF in volts.
    """

    def __init__(self, turns: int = 1, resistance: float = 1.0) -> None:
        if turns < 1:
            raise DomainError(f"Coil needs at least one turn, got {turns}")
        if not resistance > 0:
            raise DomainError(f"Resistance must be positive, got {resistance}")
        self.turns = turns
        self.resistance = resistance
        self.emf = 0.0
        self._last: tuple[float, float] | None = None

    @property
    def current(self) -> float:
        """Induced current I = ε / R."""
        return self.emf / self.resistance

    def update(self, flux: float, time: float) -> float:
        """Record a flux reading taken at `time` and return the EMF."""
        last = self._last
        self._last = (flux, time)
        if last is None or time <= last[1]:
            self.emf = 0.0
        else:
            self.emf = induced_emf(self.turns, flux - last[0], time - last[1])
        return self.emf

    def reset(self) -> None:
        self._last = None
        self.emf = 0.0
