# MIT License (see LICENSE)
"""
JSON serialization of visualization scenarios.

A scenario captures everything a Scene needs to reproduce a view: the
inputs of each component plus the frame and config settings.

JSON Schema Overview:
---------------------
{
  "time": float,                   # Default: 0
  "dt": float,                     # Default: 1/60
  "gravity": [gx, gy, gz],         # Default: [0, 0, 0]
  "charges": [
    {"position": [x, y(, z)], "q": float}
  ],
  "sources": [
    {
      "position": [x, y],
      "amplitude": float,          # Default: 1
      "wavelength": float,         # Default: 1
      "frequency": float,          # Default: 1
      "phase": float               # Default: 0
    }
  ],
  "barrier": {                     # Optional
    "energy": float,               # eV
    "barrier_height": float,       # eV
    "barrier_width": float,        # nm
    "mass": float,                 # kg, default: electron mass
    "barrier_position": float      # nm, default: 0
  },
  "bodies": [
    {
      "shape": {                   # Default: circle of radius 0.5
        "type": "circle" | "box",
        "radius": float,           # If circle
        "size": [w, h(, d)]        # If box, anchored at its min corner
      },
      "mass": float | Infinity,    # Default: 1
      "position": [x, y(, z)],
      "velocity": [vx, vy(, vz)],
      "restitution": float,        # Default: 0.8
      "collision_enabled": bool    # Default: true
    }
  ],
  # Optional config overrides, keyed by dataclass field name
  "field_lines": {...},            # FieldLineConfig
  "wave_mesh": {...},              # WaveMeshConfig
  "wavefunction": {...},           # WavefunctionConfig
  "trail": {...}                   # TrailConfig
}

Malformed entries raise ValueError; physically invalid values raise
DomainError from the record constructors.
"""
from __future__ import annotations
import dataclasses
import json
import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from ..config import FieldLineConfig, WaveMeshConfig, WavefunctionConfig, TrailConfig
from ..types import Body, Box, Charge, Circle, WaveSource, BarrierConfig

if TYPE_CHECKING:
    from ..scene import Scene

logger = logging.getLogger(__name__)

_CONFIG_SECTIONS = {
    "field_lines": ("field_config", FieldLineConfig),
    "wave_mesh": ("wave_config", WaveMeshConfig),
    "wavefunction": ("wavefunction_config", WavefunctionConfig),
    "trail": ("trail_config", TrailConfig),
}


def load_scenario_raw(path: str) -> dict[str, Any]:
    """Load the raw JSON dict of a scenario file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_scenario(path: str) -> "Scene":
    """
    Build a Scene from a scenario file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If an entry is malformed.
        DomainError: If a value violates a physical precondition.
    """
    scene = scenario_from_json(load_scenario_raw(path))
    logger.debug("Loaded scenario %s", path)
    return scene


def scenario_from_json(data: dict[str, Any]) -> "Scene":
    """Build a Scene from an already-parsed scenario dict."""
    # Import locally to avoid a circular import (Scene is the top-level module)
    from ..scene import Scene

    if not isinstance(data, dict):
        raise ValueError(f"Scenario must be a JSON object, got {type(data).__name__}")

    configs = {
        attr: config_from_json(cls, data[section])
        for section, (attr, cls) in _CONFIG_SECTIONS.items()
        if section in data
    }
    barrier = data.get("barrier")

    return Scene(
        charges=[charge_from_json(c) for c in data.get("charges", [])],
        sources=[source_from_json(s) for s in data.get("sources", [])],
        barrier=barrier_from_json(barrier) if barrier is not None else None,
        bodies=[body_from_json(b) for b in data.get("bodies", [])],
        gravity=_vector(data.get("gravity", [0.0, 0.0, 0.0]), "gravity"),
        dt=float(data.get("dt", 1 / 60)),
        time=float(data.get("time", 0.0)),
        **configs,
    )


def _vector(value: Any, name: str) -> tuple[float, ...]:
    if not isinstance(value, (list, tuple)) or len(value) not in (2, 3):
        raise ValueError(f"'{name}' must be a list of 2 or 3 numbers, got {value!r}")
    return tuple(float(v) for v in value)


def _require(d: dict[str, Any], key: str, what: str) -> Any:
    if key not in d:
        raise ValueError(f"{what} definition missing required '{key}' field.")
    return d[key]


def config_from_json(cls, d: dict[str, Any]):
    """Build a config dataclass, rejecting unknown keys."""
    names = {f.name for f in dataclasses.fields(cls)}
    unknown = set(d) - names
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**d)


def charge_from_json(d: dict[str, Any]) -> Charge:
    return Charge(
        position=_vector(_require(d, "position", "Charge"), "position"),
        q=float(_require(d, "q", "Charge")),
    )


def source_from_json(d: dict[str, Any]) -> WaveSource:
    position = _require(d, "position", "Wave source")
    if not isinstance(position, (list, tuple)) or len(position) != 2:
        raise ValueError(f"Wave source position must be [x, y], got {position!r}")
    return WaveSource(
        position=tuple(float(v) for v in position),
        amplitude=float(d.get("amplitude", 1.0)),
        wavelength=float(d.get("wavelength", 1.0)),
        frequency=float(d.get("frequency", 1.0)),
        phase=float(d.get("phase", 0.0)),
    )


def barrier_from_json(d: dict[str, Any]) -> BarrierConfig:
    return config_from_json(BarrierConfig, d)


def body_from_json(d: dict[str, Any]) -> Body:
    """
    Parse a single body definition.

    A missing shape means the default circle (radius 0.5).
    """
    shape_data = d.get("shape", {"type": "circle"})
    if not isinstance(shape_data, dict):
        raise ValueError(f"'shape' must be a JSON object, got {type(shape_data).__name__}")
    shape_type = shape_data.get("type")

    if shape_type == "circle":
        shape = Circle(radius=float(shape_data.get("radius", 0.5)))
    elif shape_type == "box":
        size = shape_data.get("size", [1.0, 1.0, 1.0])
        shape = Box(size=_vector(size, "size"))
    else:
        raise ValueError(f"Unknown shape type: '{shape_type}'")

    return Body(
        shape=shape,
        mass=float(d.get("mass", 1.0)),
        position=_vector(d.get("position", [0.0, 0.0, 0.0]), "position"),
        velocity=_vector(d.get("velocity", [0.0, 0.0, 0.0]), "velocity"),
        restitution=float(d.get("restitution", 0.8)),
        collision_enabled=bool(d.get("collision_enabled", True)),
    )


def body_to_json(body: Body) -> dict[str, Any]:
    """
    Serialize a Body (round-trip compatible).

    Default restitution and collision flag are omitted.
    """
    if isinstance(body.shape, Circle):
        shape_data = {"type": "circle", "radius": body.shape.radius}
    elif isinstance(body.shape, Box):
        shape_data = {"type": "box", "size": list(body.shape.size)}
    else:
        raise TypeError(f"Cannot serialize unknown shape type: {type(body.shape)}")

    result = {
        "shape": shape_data,
        "mass": body.mass,
        "position": _to_list(body.position),
        "velocity": _to_list(body.velocity),
    }
    if body.restitution != 0.8:
        result["restitution"] = body.restitution
    if not body.collision_enabled:
        result["collision_enabled"] = False
    return result


def scenario_to_json(scene: "Scene") -> dict[str, Any]:
    """
    Serialize a Scene to a dict.

    Config sections are written only when they differ from the defaults.
    """
    result: dict[str, Any] = {
        "time": scene.time,
        "dt": scene.dt,
        "gravity": list(scene.gravity),
        "charges": [{"position": _to_list(c.position), "q": c.q} for c in scene.charges],
        "sources": [
            {
                "position": _to_list(s.position),
                "amplitude": s.amplitude,
                "wavelength": s.wavelength,
                "frequency": s.frequency,
                "phase": s.phase,
            }
            for s in scene.sources
        ],
        "bodies": [body_to_json(b) for b in scene.bodies],
    }
    if scene.barrier is not None:
        result["barrier"] = dataclasses.asdict(scene.barrier)

    for section, (attr, cls) in _CONFIG_SECTIONS.items():
        config = getattr(scene, attr)
        if config != cls():
            result[section] = dataclasses.asdict(config)
    return result


def save_scenario(scene: "Scene", path: str, indent: int = 2) -> None:
    """
    Write a Scene to a scenario file.

    Infinite masses are written as the JSON extension `Infinity`, which
    json.load reads back.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scenario_to_json(scene), f, indent=indent)


def _to_list(arr: Any) -> list[float]:
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
