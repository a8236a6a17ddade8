# MIT License (see LICENSE)
"""
Special-relativity kinematics for a single boost axis.

Key concepts:
    beta = v / c, restricted to the open interval (-1, 1)
    gamma = 1 / sqrt(1 - beta²)

    Lorentz boost of an event (x, t):
        x' = gamma (x - beta c t)
        t' = gamma (t - beta x / c)

The inverse boost is the same transform with -beta.

Unit policy: c is an explicit argument with default 1, which is the natural
unit system of the spacetime diagram (x in light-seconds, t in seconds).
Pass c=SPEED_OF_LIGHT to work in SI.

Typical usage:
    result = lorentz_boost(Event(x=1.0, t=2.0), beta=0.6)
    back = lorentz_boost(result.event, beta=-0.6).event   # ≈ Event(1.0, 2.0)
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from ..errors import DomainError
from ..types import Event
from ..util import is_finite


@dataclass(frozen=True)
class BoostResult:
    """Boosted event plus the gamma factor used."""
    event: Event
    gamma: float


def _check_beta(beta: float) -> float:
    beta = float(beta)
    if not is_finite(beta):
        raise DomainError(f"beta must be finite, got {beta}")
    if abs(beta) >= 1.0:
        raise DomainError(f"|beta| must be < 1, got {beta}")
    return beta


def _check_c(c: float) -> float:
    c = float(c)
    if not (is_finite(c) and c > 0):
        raise DomainError(f"Speed of light must be positive and finite, got {c}")
    return c


def lorentz_factor(beta: float) -> float:
    """
    gamma = 1 / sqrt(1 - beta²).

    Raises:
        DomainError: If |beta| >= 1 or beta is not finite.
    """
    beta = _check_beta(beta)
    return 1.0 / math.sqrt(1.0 - beta * beta)


def velocity_to_beta(velocity: float, c: float = 1.0) -> float:
    """beta = v / c, validated."""
    return _check_beta(velocity / _check_c(c))


def lorentz_boost(event: Event, beta: float, c: float = 1.0) -> BoostResult:
    """
    Boost an event into a frame moving with velocity beta·c along +x.

    Args:
        event: Spacetime coordinate in the original frame.
        beta: Frame velocity as a fraction of c, |beta| < 1.
        c: Speed of light in the event's units.

    Returns:
        BoostResult with the transformed event and gamma.
    """
    c = _check_c(c)
    gamma = lorentz_factor(beta)
    x_prime = gamma * (event.x - beta * c * event.t)
    t_prime = gamma * (event.t - beta * event.x / c)
    return BoostResult(event=Event(x=x_prime, t=t_prime), gamma=gamma)


def time_dilation(proper_time: float, beta: float) -> float:
    """Dilated interval Δt = gamma Δτ."""
    return lorentz_factor(beta) * proper_time


def length_contraction(proper_length: float, beta: float) -> float:
    """Contracted length L = L0 / gamma."""
    return proper_length / lorentz_factor(beta)


def relativistic_momentum(mass: float, beta: float, c: float = 1.0) -> float:
    """p = gamma m v."""
    return lorentz_factor(beta) * mass * beta * _check_c(c)


def relativistic_energy(mass: float, beta: float, c: float = 1.0) -> float:
    """Total energy E = gamma m c²."""
    c = _check_c(c)
    return lorentz_factor(beta) * mass * c * c


# =============================================================================
# Spacetime diagram geometry (c = 1)
# =============================================================================

def worldline(beta: float, half_length: float = 4.0, step: float = 0.1) -> np.ndarray:
    """
    Worldline x = beta t of an object through the origin.

    Returns:
        Array [N, 2] of (x, t) for t in [-half_length, half_length].
    """
    beta = _check_beta(beta)
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    n = int(round(2.0 * half_length / step)) + 1
    t = np.linspace(-half_length, half_length, n)
    return np.column_stack((beta * t, t))


def light_cone(size: float = 5.0, step: float = 0.1) -> tuple[np.ndarray, np.ndarray]:
    """
    The two null lines x = t and x = -t through the origin.

    Returns:
        (future_right, future_left) arrays [N, 2] of (x, t), each spanning
        t in [-size, size].
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    n = int(round(2.0 * size / step)) + 1
    t = np.linspace(-size, size, n)
    return np.column_stack((t, t)), np.column_stack((-t, t))


def boosted_axis_angle(beta: float) -> float:
    """
    Angle (radians) by which the boosted x' and t' axes tilt toward the
    light cone on the diagram: atan(beta).
    """
    return math.atan(_check_beta(beta))
