# MIT License (see LICENSE)
"""
Impulse-based velocity response.

For a contact with unit normal n (a -> b):

    v_rel = v_b - v_a
    v_n   = v_rel · n
    e     = min(e_a, e_b)
    j     = -(1 + e) v_n / (1/m_a + 1/m_b)
    v_a'  = v_a - j n / m_a
    v_b'  = v_b + j n / m_b

No impulse is applied when v_n > 0 (separating). Positions are never
touched; moving bodies is the integrator's job.
"""
from __future__ import annotations
import logging
import warnings
from typing import Sequence

import numpy as np

from ..errors import DomainError, DegenerateInputWarning
from ..types import Body
from .broadphase import candidate_pairs
from .contact import Contact, detect_contact

logger = logging.getLogger(__name__)


def _apply_impulse(
    va: np.ndarray,
    vb: np.ndarray,
    inv_a: float,
    inv_b: float,
    restitution: float,
    normal: np.ndarray | None,
) -> tuple[np.ndarray, np.ndarray]:
    if normal is None:
        logger.debug("Contact without a normal; velocities unchanged")
        return va.copy(), vb.copy()

    inv_sum = inv_a + inv_b
    if inv_sum == 0.0:
        raise DomainError("Cannot resolve a contact between two infinite-mass bodies")

    vn = float(np.dot(vb - va, normal))
    if vn > 0.0:
        return va.copy(), vb.copy()
    if vn == 0.0:
        warnings.warn(
            "Zero approach velocity along the contact normal; no impulse applied",
            DegenerateInputWarning,
            stacklevel=3,
        )
        return va.copy(), vb.copy()

    j = -(1.0 + restitution) * vn / inv_sum
    impulse = j * normal
    return va - impulse * inv_a, vb + impulse * inv_b


def resolve_contact(a: Body, b: Body, contact: Contact) -> tuple[np.ndarray, np.ndarray]:
    """
    New velocities for a contacting pair.

    Args:
        a: First body (not modified).
        b: Second body (not modified).
        contact: Result of detect_contact(a, b).

    Returns:
        (v_a', v_b') as new arrays.

    Raises:
        DomainError: If both bodies have infinite mass.
    """
    return _apply_impulse(
        np.array(a.velocity, dtype=np.float64),
        np.array(b.velocity, dtype=np.float64),
        a.inv_mass,
        b.inv_mass,
        min(a.restitution, b.restitution),
        contact.normal,
    )


def find_contacts(bodies: Sequence[Body]) -> list[tuple[int, int, Contact]]:
    """
    All contacts among `bodies` as (i, j, contact), in ascending pair order.
    """
    out: list[tuple[int, int, Contact]] = []
    for i, j in candidate_pairs(bodies):
        contact = detect_contact(bodies[i], bodies[j])
        if contact is not None:
            out.append((i, j, contact))
    return out


def resolve_collisions(bodies: Sequence[Body]) -> list[np.ndarray]:
    """
    Detect and resolve every contact for one frame.

    Contacts are detected on the input positions, then resolved one after
    another in pair order against a private velocity table, so a body in
    several contacts sees the velocity left by the previous one.

    Returns:
        One velocity array per body, in input order.
    """
    velocities = [np.array(b.velocity, dtype=np.float64) for b in bodies]
    contacts = find_contacts(bodies)
    for i, j, contact in contacts:
        a, b = bodies[i], bodies[j]
        velocities[i], velocities[j] = _apply_impulse(
            velocities[i],
            velocities[j],
            a.inv_mass,
            b.inv_mass,
            min(a.restitution, b.restitution),
            contact.normal,
        )
    if contacts:
        logger.debug("Resolved %d contacts among %d bodies", len(contacts), len(bodies))
    return velocities
