# MIT License (see LICENSE)
"""
Narrow-phase contact detection.

Dispatch is on the (Circle | Box) shape pair:

- circle–circle: center distance against summed radii. Gives a unit normal
  from a toward b and the overlap depth. Coincident centers use +x.
- circle–box: closest point on the box to the circle center. The normal is
  oriented from a toward b whichever of the two is the circle. A center
  inside the box is pushed out along the axis of least penetration.
- box–box: AABB overlap only. The contact carries no normal and zero
  overlap, so resolution leaves the velocities alone. Boxes are used as
  static obstacles and never need box–box impulses.

All tests are strict: touching surfaces are not in contact.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..types import Body, Circle, Box
from ..util import f64, norm, unit

_FALLBACK_NORMAL = np.array([1.0, 0.0, 0.0], dtype=np.float64)


@dataclass(frozen=True, eq=False)
class Contact:
    """
    Result of a positive narrow-phase test.

    Attributes:
        normal: Unit vector from body a toward body b, or None when the test
            only reports overlap (box–box).
        overlap: Penetration depth (>= 0).
        distance: Center-to-center (circle–circle) or center-to-closest-point
            (circle–box) distance. Zero for box–box.
    """
    normal: np.ndarray | None
    overlap: float
    distance: float

    @property
    def has_normal(self) -> bool:
        return self.normal is not None


def circle_circle_contact(a: Body, b: Body) -> Contact | None:
    """
    Detect contact between two circular bodies.

    Returns:
        Contact if the circles overlap, None otherwise.
    """
    d = b.position - a.position
    dist = norm(d)
    reach = a.shape.radius + b.shape.radius
    if dist >= reach:
        return None

    n = unit(d) if dist > 0.0 else _FALLBACK_NORMAL.copy()
    return Contact(normal=n, overlap=reach - dist, distance=dist)


def box_box_contact(a: Body, b: Body) -> Contact | None:
    """
    Boolean overlap of two axis-aligned boxes.

    Returns:
        A Contact with normal None if the boxes overlap, None otherwise.
    """
    a_min, b_min = a.position, b.position
    a_max = a_min + f64(a.shape.size)
    b_max = b_min + f64(b.shape.size)
    if np.all(a_min < b_max) and np.all(a_max > b_min):
        return Contact(normal=None, overlap=0.0, distance=0.0)
    return None


def _circle_box(circle: Body, box: Body) -> Contact | None:
    """Contact with the normal pointing from the box toward the circle."""
    lo = box.position
    hi = lo + f64(box.shape.size)
    center = circle.position
    radius = circle.shape.radius

    closest = np.clip(center, lo, hi)
    d = center - closest
    dist = norm(d)

    if dist > 0.0:
        if dist >= radius:
            return None
        return Contact(normal=d / dist, overlap=radius - dist, distance=dist)

    # Center inside (or on the surface of) the box
    to_lo = center - lo
    to_hi = hi - center
    depths = np.minimum(to_lo, to_hi)
    axis = int(np.argmin(depths))
    n = np.zeros(3, dtype=np.float64)
    n[axis] = -1.0 if to_lo[axis] < to_hi[axis] else 1.0
    return Contact(normal=n, overlap=radius + float(depths[axis]), distance=0.0)


def circle_box_contact(a: Body, b: Body) -> Contact | None:
    """
    Detect contact between a circle and a box, in either order.

    Returns:
        Contact with the normal oriented from a toward b, or None.
    """
    if isinstance(a.shape, Circle):
        contact = _circle_box(a, b)
        if contact is None:
            return None
        # _circle_box points box -> circle, i.e. b -> a
        return Contact(normal=-contact.normal, overlap=contact.overlap, distance=contact.distance)
    return _circle_box(b, a)


def detect_contact(a: Body, b: Body) -> Contact | None:
    """
    Unified narrow-phase dispatcher.

    Args:
        a: First body.
        b: Second body.

    Returns:
        Contact if the bodies overlap, None otherwise.

    Raises:
        TypeError: If either shape is neither Circle nor Box.
    """
    for body in (a, b):
        if not isinstance(body.shape, (Circle, Box)):
            raise TypeError(f"Unknown shape type: {type(body.shape)}")

    if isinstance(a.shape, Circle) and isinstance(b.shape, Circle):
        return circle_circle_contact(a, b)
    if isinstance(a.shape, Box) and isinstance(b.shape, Box):
        return box_box_contact(a, b)
    return circle_box_contact(a, b)
