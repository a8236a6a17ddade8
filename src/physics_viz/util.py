# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Vectors are numpy float64 arrays of shape (3,) (or (2,) for the planar
wave sources). Everything here is dimension-agnostic.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always copies, so records built from caller arrays never alias them.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """
    Convert a 2- or 3-component array-like to a float64 vector of shape (3,).

    Planar inputs get z = 0, which is how the 2-D scenes place their objects.
    """
    v = f64(x).reshape(-1)
    if v.shape == (2,):
        return np.array([v[0], v[1], 0.0], dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected a 2- or 3-component vector, got shape {v.shape}")
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude. Avoids sqrt for performance."""
    return float(np.dot(v, v))


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros_like(v, dtype=np.float64)
    return v / n


def is_finite(*values: float) -> bool:
    """True if every scalar is a finite float (no NaN, no ±inf)."""
    return all(np.isfinite(v) for v in values)
