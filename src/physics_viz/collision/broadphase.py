# MIT License (see LICENSE)
"""
Broad-phase pair selection.

Scenes hold a handful of bodies, so every unordered pair is considered
(n(n-1)/2 pairs, index order). Pairs are dropped when either body has
collision disabled or when their axis-aligned bounding boxes are disjoint.

Key concepts:
- AABB (Axis-Aligned Bounding Box): (min_x, min_y, min_z, max_x, max_y, max_z).
- Circles are bounded by center ± radius; boxes are already axis-aligned and
  span [position, position + size].
"""
from __future__ import annotations
from typing import Sequence

from ..types import Body, Circle, Box

AABB = tuple[float, float, float, float, float, float]


def aabb_for_body(body: Body) -> AABB:
    """
    Calculate the axis-aligned bounding box of a body.
    """
    p = body.position
    if isinstance(body.shape, Circle):
        r = body.shape.radius
        return (p[0] - r, p[1] - r, p[2] - r, p[0] + r, p[1] + r, p[2] + r)

    if isinstance(body.shape, Box):
        w, h, d = body.shape.size
        return (p[0], p[1], p[2], p[0] + w, p[1] + h, p[2] + d)

    raise TypeError(f"Unknown shape type: {type(body.shape)}")


def aabb_overlap(a: AABB, b: AABB) -> bool:
    """True if the boxes intersect or touch."""
    return (
        a[0] <= b[3] and b[0] <= a[3]
        and a[1] <= b[4] and b[1] <= a[4]
        and a[2] <= b[5] and b[2] <= a[5]
    )


def candidate_pairs(bodies: Sequence[Body]) -> list[tuple[int, int]]:
    """
    Index pairs (i, j), i < j, that may be in contact.

    Args:
        bodies: All bodies in the scene.

    Returns:
        Pairs in ascending (i, j) order, so results are deterministic.
    """
    boxes = [aabb_for_body(b) if b.collision_enabled else None for b in bodies]
    out: list[tuple[int, int]] = []
    for i in range(len(bodies)):
        if boxes[i] is None:
            continue
        for j in range(i + 1, len(bodies)):
            if boxes[j] is None:
                continue
            if aabb_overlap(boxes[i], boxes[j]):
                out.append((i, j))
    return out
