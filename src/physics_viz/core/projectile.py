# MIT License (see LICENSE)
"""
Closed-form projectile kinematics on flat ground without drag.

Launch angle is in degrees above the horizontal; g defaults to 9.8 m/s².

    R = v² sin(2θ) / g
    H = (v sin θ)² / (2g)
    T = 2 v sin θ / g
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import GRAVITY
from ..errors import DomainError


def _check(speed: float, gravity: float) -> None:
    if speed < 0:
        raise DomainError(f"Launch speed must be non-negative, got {speed}")
    if not gravity > 0:
        raise DomainError(f"Gravity must be positive, got {gravity}")


def projectile_range(speed: float, angle_deg: float, gravity: float = GRAVITY) -> float:
    _check(speed, gravity)
    return speed * speed * math.sin(2.0 * math.radians(angle_deg)) / gravity


def projectile_max_height(speed: float, angle_deg: float, gravity: float = GRAVITY) -> float:
    _check(speed, gravity)
    vy = speed * math.sin(math.radians(angle_deg))
    return vy * vy / (2.0 * gravity)


def projectile_time_of_flight(speed: float, angle_deg: float, gravity: float = GRAVITY) -> float:
    _check(speed, gravity)
    return 2.0 * speed * math.sin(math.radians(angle_deg)) / gravity


def projectile_trajectory(
    speed: float,
    angle_deg: float,
    gravity: float = GRAVITY,
    points: int = 50,
) -> np.ndarray:
    """
    Sample the parabola from launch to landing.

    Returns:
        Array [points, 3] of (x, y, 0). A non-positive time of flight gives
        just the launch point.
    """
    flight = projectile_time_of_flight(speed, angle_deg, gravity)
    if flight <= 0:
        return np.zeros((1, 3), dtype=np.float64)

    theta = math.radians(angle_deg)
    t = np.linspace(0.0, flight, max(int(points), 2))
    out = np.zeros((len(t), 3), dtype=np.float64)
    out[:, 0] = speed * math.cos(theta) * t
    out[:, 1] = speed * math.sin(theta) * t - 0.5 * gravity * t * t
    # Landing point sits on the ground exactly
    out[-1, 1] = 0.0
    return out
