import io
import logging
import math

import numpy as np
import pytest

from physics_viz import Scene, Charge, WaveSource, Body, Circle, BarrierConfig
from physics_viz.config import FieldLineConfig, WaveMeshConfig, TrailConfig
from physics_viz.core.field import Termination
from physics_viz.errors import DomainError
from physics_viz.profiler import Profiler
from physics_viz.renderer import BufferedRenderer, DebugRenderer, NullRenderer


def _headon_pair():
    a = Body(Circle(0.5), position=(-1.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0), restitution=1.0)
    b = Body(Circle(0.5), position=(1.0, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0), restitution=1.0)
    return [a, b]


def test_field_lines_cached_until_charges_change():
    scene = Scene(charges=[Charge((-2.0, 0.0), 1e-9), Charge((2.0, 0.0), -1e-9)],
                  field_config=FieldLineConfig(lines_per_charge=4))
    first = scene.field_lines()
    assert scene.field_lines() is first
    assert scene.recomputations["field_lines"] == 1
    assert len(first) > 0

    scene.add_charge(Charge((0.0, 3.0), 1e-9))
    second = scene.field_lines()
    assert second is not first
    assert scene.recomputations["field_lines"] == 2

    scene.field_config = FieldLineConfig(lines_per_charge=2)
    scene.field_lines()
    assert scene.recomputations["field_lines"] == 3


def test_interference_pattern_cached_heights_recomputed():
    scene = Scene(sources=[WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0))],
                  wave_config=WaveMeshConfig(size=4.0, segments=20))
    pattern = scene.interference_pattern()
    assert scene.interference_pattern() is pattern

    h0 = scene.wave_heights(0.0)
    h1 = scene.wave_heights(0.25)
    assert h0.shape == (21, 21)
    assert not np.allclose(h0, h1)
    assert scene.recomputations["mesh_axes"] == 1

    scene.sources[1] = WaveSource((1.0, 0.0), phase=np.pi)
    assert scene.interference_pattern() is not pattern


def test_barrier_views():
    scene = Scene(barrier=BarrierConfig())
    result = scene.transmission()
    assert 0.0 < result.transmission_probability < 1.0
    assert scene.transmission() is result

    samples = scene.wavefunction(0.0)
    assert scene.wavefunction(0.0) is samples
    assert scene.wavefunction(0.5) is not samples

    energies, t, r = scene.transmission_curve()
    assert np.allclose(t + r, 1.0)

    with pytest.raises(ValueError):
        Scene().wavefunction()


def test_step_resolves_headon_collision():
    """
    Equal circles closing at 2 m/s from 2 m apart, dt = 0.15:
      after 3 steps the gap is 1.1 (> 2r), after 4 it is 0.8 and they swap.
    """
    scene = Scene(bodies=_headon_pair(), dt=0.15)
    for _ in range(3):
        scene.step()
    assert scene.bodies[0].velocity[0] == 1.0

    scene.step()
    print("velocities", scene.bodies[0].velocity, scene.bodies[1].velocity)
    assert np.array_equal(scene.bodies[0].velocity, [-1.0, 0.0, 0.0])
    assert np.array_equal(scene.bodies[1].velocity, [1.0, 0.0, 0.0])
    assert scene.time == pytest.approx(0.6)


def test_step_records_trails():
    scene = Scene(trail_config=TrailConfig(max_length=5))
    scene.add_body(Body(Circle(0.2), velocity=(1.0, 0.0, 0.0)))
    for _ in range(8):
        scene.step(0.1)

    trail = scene.trails[0]
    assert len(trail) == 5
    assert trail.points()[-1][0] == pytest.approx(0.8)
    assert np.all(np.diff(trail.points()[:, 0]) > 0)


def test_failed_step_leaves_scene_unchanged():
    """
    Two overlapping immovable circles cannot be resolved (1/m1 + 1/m2 = 0).
    The mover integrated in the same frame must stay where it was.
    """
    mover = Body(Circle(0.2), position=(5.0, 0.0, 0.0), velocity=(6.0, 0.0, 0.0))
    wall_a = Body(Circle(1.0), mass=math.inf, position=(0.0, 0.0, 0.0))
    wall_b = Body(Circle(1.0), mass=math.inf, position=(0.5, 0.0, 0.0))
    scene = Scene(bodies=[mover, wall_a, wall_b])

    with pytest.raises(DomainError):
        scene.step(0.1)

    assert scene.bodies[0] is mover
    assert np.allclose(scene.bodies[0].position, [5.0, 0.0, 0.0])
    assert scene.time == 0.0
    assert all(len(trail) == 0 for trail in scene.trails)


def test_profiler_sections_and_budget_warning(caplog):
    profiler = Profiler(budget_ms=0.0)
    scene = Scene(bodies=_headon_pair(), profiler=profiler)
    with caplog.at_level(logging.WARNING, logger="physics_viz"):
        scene.step()

    summary = profiler.stats.summary()
    for name in ("integrate", "collisions", "trails"):
        assert summary[name]["n"] == 1
    assert any("budget" in rec.message for rec in caplog.records)


def test_profiler_keeps_bounded_window():
    profiler = Profiler(max_samples=3)
    scene = Scene(bodies=_headon_pair(), profiler=profiler)
    for _ in range(10):
        scene.step()

    summary = profiler.stats.summary()
    assert summary["integrate"]["n"] == 3
    assert summary["integrate"]["calls"] == 10
    assert len(profiler.stats.samples["collisions"]) == 3

    profiler.reset()
    assert profiler.stats.summary() == {}


def test_buffered_renderer_records_frame():
    scene = Scene(charges=[Charge((0.0, 0.0), 1e-9)], bodies=_headon_pair(),
                  field_config=FieldLineConfig(lines_per_charge=3))
    scene.step()
    renderer = BufferedRenderer()
    renderer.render_scene(scene)

    frame = renderer.frames[0]
    assert frame["time"] == pytest.approx(scene.dt)
    assert len(frame["field_lines"]) == 3
    assert frame["field_lines"][0]["termination"] == Termination.OUT_OF_BOUNDS.value
    assert [b["index"] for b in frame["bodies"]] == [0, 1]
    assert len(frame["trails"]) == 2


def test_debug_and_null_renderers():
    scene = Scene(bodies=_headon_pair())
    scene.step()

    out = io.StringIO()
    DebugRenderer(output=out).render_scene(scene)
    text = out.getvalue()
    assert text.startswith("=== Frame t=")
    assert "[0] Circle r=0.50" in text

    NullRenderer().render_scene(scene)
