import json
import math

import numpy as np
import pytest

from physics_viz import Scene, Charge, WaveSource, Body, Circle, Box, BarrierConfig, DomainError
from physics_viz.config import WaveMeshConfig, TrailConfig
from physics_viz.io import (
    load_scenario,
    save_scenario,
    scenario_from_json,
    scenario_to_json,
    body_from_json,
)


def _scene():
    return Scene(
        charges=[Charge((-2.0, 0.0), 1e-9), Charge((2.0, 0.0, 1.0), -2e-9)],
        sources=[WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0), amplitude=0.5, phase=0.3)],
        barrier=BarrierConfig(energy=1.5, barrier_height=2.0, barrier_width=0.5),
        bodies=[
            Body(Circle(0.3), mass=2.0, position=(0.0, 1.0, 0.0), velocity=(1.0, 0.0, 0.0)),
            Body(Box((4.0, 0.5)), mass=math.inf, position=(-2.0, -1.0, 0.0), restitution=1.0),
            Body(Circle(0.5), collision_enabled=False),
        ],
        gravity=(0.0, -9.8, 0.0),
        wave_config=WaveMeshConfig(segments=60),
        trail_config=TrailConfig(max_length=40),
        time=1.25,
    )


def test_scenario_round_trip(tmp_path):
    scene = _scene()
    path = tmp_path / "scenario.json"
    save_scenario(scene, str(path))
    loaded = load_scenario(str(path))

    assert scenario_to_json(loaded) == scenario_to_json(scene)
    assert loaded.time == 1.25
    assert loaded.wave_config == WaveMeshConfig(segments=60)
    assert loaded.barrier == scene.barrier
    assert math.isinf(loaded.bodies[1].mass)
    assert loaded.bodies[1].shape == Box((4.0, 0.5, 1.0))
    assert loaded.bodies[2].collision_enabled is False
    assert np.array_equal(loaded.charges[1].position, [2.0, 0.0, 1.0])
    assert len(loaded.trails) == 3 and loaded.trails[0].max_length == 40


def test_defaults_are_omitted():
    data = scenario_to_json(Scene(bodies=[Body()]))
    assert "wave_mesh" not in data
    assert "barrier" not in data
    assert data["bodies"][0] == {
        "shape": {"type": "circle", "radius": 0.5},
        "mass": 1.0,
        "position": [0.0, 0.0, 0.0],
        "velocity": [0.0, 0.0, 0.0],
    }


def test_minimal_body_uses_defaults():
    body = body_from_json({})
    assert body.shape == Circle(0.5)
    assert body.mass == 1.0
    assert body.restitution == 0.8
    assert body.collision_enabled is True


def test_malformed_entries_raise_value_error():
    with pytest.raises(ValueError):
        body_from_json({"shape": {"type": "polygon"}})
    with pytest.raises(ValueError):
        body_from_json({"shape": "circle"})
    with pytest.raises(ValueError):
        scenario_from_json({"bodies": [{"shape": [0.5]}]})
    with pytest.raises(ValueError):
        scenario_from_json({"charges": [{"position": [0, 0]}]})
    with pytest.raises(ValueError):
        scenario_from_json({"wave_mesh": {"resolution": 10}})
    with pytest.raises(ValueError):
        scenario_from_json({"sources": [{"position": [0, 0, 0]}]})
    with pytest.raises(ValueError):
        scenario_from_json([])


def test_physical_violations_raise_domain_error():
    with pytest.raises(DomainError):
        body_from_json({"mass": -1.0})
    with pytest.raises(DomainError):
        scenario_from_json({"barrier": {"barrier_width": 0.0}})


def test_raw_file_is_plain_json(tmp_path):
    path = tmp_path / "s.json"
    save_scenario(Scene(charges=[Charge((0.0, 0.0), 1e-9)]), str(path))
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["charges"] == [{"position": [0.0, 0.0, 0.0], "q": 1e-9}]
