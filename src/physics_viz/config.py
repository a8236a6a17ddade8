# MIT License (see LICENSE)
"""
Tunable parameters for the visualization core.

Each component reads its knobs from one frozen dataclass so that a
visualization's settings are centralized, hashable (used as change-detection
keys by Scene) and easy to serialize. Defaults are the values the interactive
visualizations use.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldLineConfig:
    """
    Field-line tracing parameters.

    Attributes:
        max_steps: Hard cap on Euler steps per line.
        step_size: Distance advanced per step, in scene units.
        absorption_radius: A line ends when it comes this close to a charge.
            Also the floor below which a charge's contribution is skipped.
        min_field: A line ends when |E| falls below this value.
        bound: Half-extent of the cube the line must stay inside.
        lines_per_charge: Seeds placed around each charge.
        seed_radius: Distance of the seeds from their charge.
    """
    max_steps: int = 200
    step_size: float = 0.1
    absorption_radius: float = 0.3
    min_field: float = 0.01
    bound: float = 15.0
    lines_per_charge: int = 16
    seed_radius: float = 0.5

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")
        if self.step_size <= 0:
            raise ValueError(f"step_size must be positive, got {self.step_size}")
        if self.bound <= 0:
            raise ValueError(f"bound must be positive, got {self.bound}")
        if self.lines_per_charge < 1:
            raise ValueError(f"lines_per_charge must be >= 1, got {self.lines_per_charge}")


@dataclass(frozen=True)
class WaveMeshConfig:
    """
    Interference surface parameters.

    The mesh is a square of side `size` centered on the origin with
    `segments` subdivisions per side, i.e. (segments + 1)² vertices.
    """
    size: float = 20.0
    segments: int = 150
    height_scale: float = 0.15
    attenuation: float = 0.1

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.segments < 1:
            raise ValueError(f"segments must be >= 1, got {self.segments}")
        if self.attenuation < 0:
            raise ValueError(f"attenuation must be non-negative, got {self.attenuation}")


@dataclass(frozen=True)
class WavefunctionConfig:
    """Spatial sampling grid for the barrier wavefunction, in nm."""
    x_min: float = -5.0
    x_max: float = 5.0
    points: int = 200

    def __post_init__(self) -> None:
        if self.x_max <= self.x_min:
            raise ValueError(f"x_max must exceed x_min, got [{self.x_min}, {self.x_max}]")
        if self.points < 2:
            raise ValueError(f"points must be >= 2, got {self.points}")


@dataclass(frozen=True)
class TrailConfig:
    """Motion trail capacity (points kept per body)."""
    max_length: int = 150

    def __post_init__(self) -> None:
        if self.max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {self.max_length}")
