# MIT License (see LICENSE)
"""
Collision detection and response.

This subpackage provides:
    - Broadphase: all-pairs selection with AABB rejection.
    - Narrowphase: circle–circle, circle–box and box–box tests.
    - Impulse: restitution-based velocity response.

Typical usage:
    from physics_viz.collision import resolve_collisions

    velocities = resolve_collisions(bodies)
    bodies = with_velocities(bodies, velocities)
"""
from .broadphase import aabb_for_body, aabb_overlap, candidate_pairs
from .contact import (
    Contact,
    circle_circle_contact,
    circle_box_contact,
    box_box_contact,
    detect_contact,
)
from .impulse import resolve_contact, find_contacts, resolve_collisions

__all__ = [
    # Broadphase
    "aabb_for_body",
    "aabb_overlap",
    "candidate_pairs",
    # Narrowphase
    "Contact",
    "circle_circle_contact",
    "circle_box_contact",
    "box_box_contact",
    "detect_contact",
    # Impulse
    "resolve_contact",
    "find_contacts",
    "resolve_collisions",
]
