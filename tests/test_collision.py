import math
import warnings

import numpy as np
import pytest

from physics_viz.collision import (
    aabb_for_body,
    candidate_pairs,
    detect_contact,
    find_contacts,
    resolve_contact,
    resolve_collisions,
)
from physics_viz.core.invariants import kinetic_energy, linear_momentum
from physics_viz.errors import DomainError, DegenerateInputWarning
from physics_viz.types import Body, Box, Circle


def test_equal_mass_headon_swaps_velocities():
    """
    Equal masses, e = 1, head-on:
      v1' = v2, v2' = v1 (exactly), momentum and KE conserved.
    """
    a = Body(Circle(0.5), mass=1.0, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0), restitution=1.0)
    b = Body(Circle(0.5), mass=1.0, position=(0.9, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0), restitution=1.0)

    contact = detect_contact(a, b)
    assert contact is not None
    assert np.allclose(contact.normal, [1.0, 0.0, 0.0])
    assert contact.overlap == pytest.approx(0.1)

    va, vb = resolve_contact(a, b, contact)
    assert np.array_equal(va, [-1.0, 0.0, 0.0])
    assert np.array_equal(vb, [1.0, 0.0, 0.0])

    bodies = [a, b]
    assert np.allclose(linear_momentum(bodies, [va, vb]), linear_momentum(bodies))
    assert kinetic_energy(bodies, [va, vb]) == pytest.approx(kinetic_energy(bodies))


def test_unequal_mass_elastic_matches_analytic():
    """
    1D elastic collision analytic:
      v1' = (m1-m2)/(m1+m2)*v1 + (2m2)/(m1+m2)*v2
      v2' = (2m1)/(m1+m2)*v1 + (m2-m1)/(m1+m2)*v2
    """
    m1, m2 = 1.0, 2.0
    v1, v2 = 3.0, -1.0
    v1p = (m1 - m2) / (m1 + m2) * v1 + (2 * m2) / (m1 + m2) * v2
    v2p = (2 * m1) / (m1 + m2) * v1 + (m2 - m1) / (m1 + m2) * v2

    a = Body(Circle(0.2), mass=m1, position=(-0.15, 0.0, 0.0), velocity=(v1, 0.0, 0.0), restitution=1.0)
    b = Body(Circle(0.2), mass=m2, position=(0.15, 0.0, 0.0), velocity=(v2, 0.0, 0.0), restitution=1.0)
    va, vb = resolve_contact(a, b, detect_contact(a, b))

    print("v1'", va[0], "exp", v1p)
    print("v2'", vb[0], "exp", v2p)
    assert va[0] == pytest.approx(v1p)
    assert vb[0] == pytest.approx(v2p)


def test_inelastic_uses_minimum_restitution():
    """
    m1 = 2, v1 = 1 into resting m2 = 1, e = min(0.5, 0.8) = 0.5:
      j = 1.5 * 1 / (1/2 + 1) = 1,  v1' = 0.5,  v2' = 1.
    Momentum is conserved; kinetic energy is lost.
    """
    a = Body(Circle(0.5), mass=2.0, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0), restitution=0.5)
    b = Body(Circle(0.5), mass=1.0, position=(0.9, 0.0, 0.0), velocity=(0.0, 0.0, 0.0))
    va, vb = resolve_contact(a, b, detect_contact(a, b))

    assert va[0] == pytest.approx(0.5)
    assert vb[0] == pytest.approx(1.0)
    assert np.allclose(linear_momentum([a, b], [va, vb]), [2.0, 0.0, 0.0])
    assert kinetic_energy([a, b], [va, vb]) < kinetic_energy([a, b])


def test_separating_pair_is_untouched():
    a = Body(Circle(0.5), position=(0.0, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0))
    b = Body(Circle(0.5), position=(0.9, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    va, vb = resolve_contact(a, b, detect_contact(a, b))
    assert np.array_equal(va, a.velocity)
    assert np.array_equal(vb, b.velocity)


def test_zero_approach_velocity_warns():
    a = Body(Circle(0.5), position=(0.0, 0.0, 0.0))
    b = Body(Circle(0.5), position=(0.5, 0.0, 0.0))
    with pytest.warns(DegenerateInputWarning):
        va, vb = resolve_contact(a, b, detect_contact(a, b))
    assert np.array_equal(va, [0.0, 0.0, 0.0])
    assert np.array_equal(vb, [0.0, 0.0, 0.0])


def test_two_infinite_masses_rejected():
    a = Body(Circle(0.5), mass=math.inf, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Body(Circle(0.5), mass=math.inf, position=(0.5, 0.0, 0.0))
    with pytest.raises(DomainError):
        resolve_contact(a, b, detect_contact(a, b))


def test_ball_bounces_off_immovable_box():
    """
    Circle moving +x into an infinite-mass box, e = 1:
      normal points from the circle (a) toward the box (b),
      the circle's normal velocity flips and the box stays put.
    """
    ball = Body(Circle(0.5), position=(-0.3, 0.5, 0.5), velocity=(2.0, 0.0, 0.0), restitution=1.0)
    wall = Body(Box((1.0, 1.0, 1.0)), mass=math.inf, position=(0.0, 0.0, 0.0), restitution=1.0)

    contact = detect_contact(ball, wall)
    assert np.allclose(contact.normal, [1.0, 0.0, 0.0])
    assert contact.overlap == pytest.approx(0.2)

    reverse = detect_contact(wall, ball)
    assert np.allclose(reverse.normal, [-1.0, 0.0, 0.0])

    v_ball, v_wall = resolve_contact(ball, wall, contact)
    assert np.allclose(v_ball, [-2.0, 0.0, 0.0])
    assert np.array_equal(v_wall, [0.0, 0.0, 0.0])


def test_circle_center_inside_box_uses_nearest_face():
    ball = Body(Circle(0.5), position=(0.9, 0.5, 0.5))
    box = Body(Box((1.0, 1.0, 1.0)), position=(0.0, 0.0, 0.0))
    contact = detect_contact(box, ball)
    assert np.allclose(contact.normal, [1.0, 0.0, 0.0])
    assert contact.overlap == pytest.approx(0.6)


def test_box_box_detects_without_normal():
    a = Body(Box((1.0, 1.0)), position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Body(Box((1.0, 1.0)), position=(0.5, 0.5, 0.0), velocity=(-1.0, 0.0, 0.0))
    contact = detect_contact(a, b)
    assert contact is not None
    assert contact.normal is None and contact.overlap == 0.0

    va, vb = resolve_contact(a, b, contact)
    assert np.array_equal(va, a.velocity)
    assert np.array_equal(vb, b.velocity)

    far = Body(Box((1.0, 1.0)), position=(1.0, 0.0, 0.0))
    assert detect_contact(a, far) is None


def test_touching_circles_are_not_in_contact():
    a = Body(Circle(0.5), position=(0.0, 0.0, 0.0))
    b = Body(Circle(0.5), position=(1.0, 0.0, 0.0))
    assert detect_contact(a, b) is None


def test_coincident_circles_use_fallback_normal():
    a = Body(Circle(0.5), position=(1.0, 1.0, 0.0))
    b = Body(Circle(0.5), position=(1.0, 1.0, 0.0))
    contact = detect_contact(a, b)
    assert np.allclose(contact.normal, [1.0, 0.0, 0.0])
    assert contact.overlap == pytest.approx(1.0)


def test_broadphase_pairs():
    bodies = [
        Body(Circle(0.5), position=(0.0, 0.0, 0.0)),
        Body(Circle(0.5), position=(0.8, 0.0, 0.0)),
        Body(Circle(0.5), position=(10.0, 0.0, 0.0)),
        Body(Circle(0.5), position=(0.4, 0.0, 0.0), collision_enabled=False),
    ]
    assert candidate_pairs(bodies) == [(0, 1)]
    assert aabb_for_body(bodies[0]) == (-0.5, -0.5, -0.5, 0.5, 0.5, 0.5)
    assert aabb_for_body(Body(Box((2.0, 1.0, 3.0)), position=(1.0, 1.0, 1.0))) == (1.0, 1.0, 1.0, 3.0, 2.0, 4.0)


def test_collision_disabled_bodies_are_skipped():
    a = Body(Circle(0.5), position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Body(Circle(0.5), position=(0.9, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0), collision_enabled=False)
    assert find_contacts([a, b]) == []
    velocities = resolve_collisions([a, b])
    assert np.array_equal(velocities[0], a.velocity)
    assert np.array_equal(velocities[1], b.velocity)


def test_resolution_does_not_mutate_inputs():
    a = Body(Circle(0.5), position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Body(Circle(0.5), position=(0.9, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        velocities = resolve_collisions([a, b])

    assert np.array_equal(a.velocity, [1.0, 0.0, 0.0])
    assert np.array_equal(b.velocity, [-1.0, 0.0, 0.0])
    assert not a.velocity.flags.writeable
    assert velocities[0][0] < 0.0 < velocities[1][0]


def test_body_validation():
    with pytest.raises(DomainError):
        Body(Circle(0.5), mass=0.0)
    with pytest.raises(DomainError):
        Body(Circle(0.5), mass=float("nan"))
    with pytest.raises(DomainError):
        Body(Circle(0.5), restitution=1.5)
    with pytest.raises(DomainError):
        Circle(0.0)
    with pytest.raises(DomainError):
        Box((1.0, -1.0))
    with pytest.raises(TypeError):
        Body(shape="circle")
