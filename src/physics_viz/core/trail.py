# MIT License (see LICENSE)
"""
Bounded motion trails.

A trail is a fixed-capacity ring buffer of 3-D points. Recording into a full
trail evicts the oldest point in O(1). The buffer is owned by whoever
records into it (usually Scene, one per body) and is passed explicitly
through record(); nothing else holds a reference to it.

Typical usage:
    trail = TrailBuffer(max_length=150)
    for body in bodies_over_time:
        trail = record(trail, body.position)
    renderer.draw_trail(trail.points(), trail.fade_weights())
"""
from __future__ import annotations
from collections import deque

import numpy as np

from ..config import TrailConfig
from ..util import vec3


class TrailBuffer:
    """
    Fixed-capacity ring buffer of points, oldest first.

    Args:
        max_length: Capacity. Defaults to TrailConfig().max_length.
    """

    def __init__(self, max_length: int | None = None) -> None:
        if max_length is None:
            max_length = TrailConfig().max_length
        if max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {max_length}")
        self._points: deque[np.ndarray] = deque(maxlen=int(max_length))

    @property
    def max_length(self) -> int:
        return self._points.maxlen

    def __len__(self) -> int:
        return len(self._points)

    def append(self, point) -> None:
        """Append a point, dropping the oldest one if the buffer is full."""
        self._points.append(vec3(point))

    def clear(self) -> None:
        self._points.clear()

    def points(self) -> np.ndarray:
        """Snapshot of the stored points as an [N, 3] array, oldest first."""
        if not self._points:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    def fade_weights(self) -> np.ndarray:
        """
        Per-point opacity (i / n)² for i = 1..n.

        The oldest point is faintest and the newest has weight 1.
        """
        n = len(self._points)
        if n == 0:
            return np.zeros(0, dtype=np.float64)
        i = np.arange(1, n + 1, dtype=np.float64)
        return (i / n) ** 2


def record(trail: TrailBuffer, point) -> TrailBuffer:
    """Append `point` to `trail` and hand the same buffer back to the caller."""
    trail.append(point)
    return trail
