# MIT License (see LICENSE)
"""
Electric field evaluation and field-line tracing.

The field of a set of point charges is the superposition of Coulomb fields:

    E(p) = Σ k q_i (p - r_i) / |p - r_i|³

Field lines are traced by explicit Euler steps of fixed length along the unit
field direction E/|E|. A line ends when it is absorbed by a charge, when the
field becomes too weak to define a direction, when it leaves the scene cube,
or after max_steps.

Units: positions in scene units, charges in Coulombs, k = 8.99e9. The scene
unit is not converted to metres; magnitudes are only compared against the
min_field threshold and used for arrow lengths.
"""
from __future__ import annotations
import enum
import logging
import warnings
from dataclasses import dataclass
from typing import Generator, Sequence

import numpy as np

from ..config import FieldLineConfig
from ..constants import K_COULOMB
from ..errors import DegenerateInputWarning
from ..types import Charge, FieldSample
from ..util import vec3, norm

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = FieldLineConfig()


class Termination(enum.Enum):
    """Why a field line stopped."""
    ABSORBED = "absorbed"          # came within absorption_radius of a charge
    WEAK_FIELD = "weak_field"      # |E| below min_field
    OUT_OF_BOUNDS = "out_of_bounds"
    MAX_STEPS = "max_steps"


@dataclass(frozen=True, eq=False)
class FieldLine:
    """
    A traced streamline.

    Attributes:
        points: Array [N, 3] of points, starting with the seed.
        termination: Reason the trace stopped.
        charge_index: Index of the seeding charge, or -1 for a free seed.
    """
    points: np.ndarray
    termination: Termination
    charge_index: int = -1

    def __len__(self) -> int:
        return len(self.points)


def _contributions(
    point: np.ndarray,
    charges: Sequence[Charge],
    min_distance: float,
) -> tuple[np.ndarray, list[int]]:
    """
    Sum Coulomb contributions at `point`.

    Returns the field vector and the indices of charges skipped because they
    were closer than `min_distance`.
    """
    field = np.zeros(3, dtype=np.float64)
    skipped: list[int] = []
    for i, charge in enumerate(charges):
        if charge.q == 0.0:
            continue
        r = point - charge.position
        dist = norm(r)
        if dist < min_distance:
            skipped.append(i)
            continue
        # k q r_hat / r² = k q r / r³
        field += (K_COULOMB * charge.q / (dist * dist * dist)) * r
    return field, skipped


def electric_field(
    point,
    charges: Sequence[Charge],
    min_distance: float = _DEFAULT_CONFIG.absorption_radius,
) -> np.ndarray:
    """
    Superposed electric field at a point.

    Charges closer than `min_distance` are left out of the sum: the field is
    never evaluated at (or near) the singularity.

    Args:
        point: Evaluation point [x, y, z] (2-D input gets z = 0).
        charges: Point charges.
        min_distance: Distance floor below which a charge is skipped.

    Returns:
        Field vector [Ex, Ey, Ez].
    """
    field, _ = _contributions(vec3(point), charges, min_distance)
    return field


def sample_field(
    point,
    charges: Sequence[Charge],
    min_distance: float = _DEFAULT_CONFIG.absorption_radius,
) -> FieldSample:
    """
    Evaluate the field at a point as a FieldSample.

    A point inside the distance floor of some charge is degenerate: those
    charges are skipped and a DegenerateInputWarning is emitted.
    """
    p = vec3(point)
    field, skipped = _contributions(p, charges, min_distance)
    if skipped:
        warnings.warn(
            f"Field sample at {p.tolist()} is within {min_distance} of charge(s) {skipped}; "
            "their contribution was skipped",
            DegenerateInputWarning,
            stacklevel=2,
        )
    return FieldSample(point=p, vector=field, magnitude=norm(field))


def _near_any_charge(point: np.ndarray, charges: Sequence[Charge], radius: float) -> bool:
    # Neutral charges neither absorb lines nor mask grid points
    for charge in charges:
        if charge.q == 0.0:
            continue
        if norm(point - charge.position) < radius:
            return True
    return False


def iter_field_line(
    start,
    charges: Sequence[Charge],
    max_steps: int | None = None,
    step_size: float | None = None,
    config: FieldLineConfig = _DEFAULT_CONFIG,
) -> Generator[np.ndarray, None, Termination]:
    """
    Lazily trace a field line from `start`.

    Yields the start point, then one point per accepted Euler step. The
    generator's return value (StopIteration.value) is the Termination reason.
    Each call returns a fresh generator; an exhausted one cannot be restarted.

    A candidate point that would land inside a charge's absorption radius or
    outside the scene cube is not yielded.

    Args:
        start: Seed point.
        charges: Point charges producing the field.
        max_steps: Step cap (defaults to config.max_steps).
        step_size: Euler step length (defaults to config.step_size).
        config: Remaining tracing thresholds.
    """
    max_steps = config.max_steps if max_steps is None else int(max_steps)
    step_size = config.step_size if step_size is None else float(step_size)
    if step_size <= 0:
        raise ValueError(f"step_size must be positive, got {step_size}")

    current = vec3(start)
    yield current.copy()

    for _ in range(max_steps):
        field, _ = _contributions(current, charges, config.absorption_radius)
        magnitude = norm(field)
        if magnitude < config.min_field:
            return Termination.WEAK_FIELD

        nxt = current + (step_size / magnitude) * field

        if _near_any_charge(nxt, charges, config.absorption_radius):
            return Termination.ABSORBED
        if np.any(np.abs(nxt) > config.bound):
            return Termination.OUT_OF_BOUNDS

        current = nxt
        yield current.copy()

    return Termination.MAX_STEPS


def trace_field_line(
    start,
    charges: Sequence[Charge],
    max_steps: int | None = None,
    step_size: float | None = None,
    config: FieldLineConfig = _DEFAULT_CONFIG,
    charge_index: int = -1,
) -> FieldLine:
    """
    Trace a field line to completion.

    Collects iter_field_line() into an array and records why it stopped.
    If every charge sits on the start point the result is a single point
    with termination WEAK_FIELD; that is a valid result, not an error.
    """
    gen = iter_field_line(start, charges, max_steps, step_size, config)
    points: list[np.ndarray] = []
    while True:
        try:
            points.append(next(gen))
        except StopIteration as stop:
            termination = stop.value
            break
    return FieldLine(
        points=np.array(points, dtype=np.float64).reshape(-1, 3),
        termination=termination,
        charge_index=charge_index,
    )


def seed_points(charge: Charge, count: int, radius: float) -> np.ndarray:
    """
    Seeds evenly spaced by angle on a circle around a charge (xy-plane).

    Returns:
        Array [count, 3].
    """
    angles = 2.0 * np.pi * np.arange(count) / count
    seeds = np.empty((count, 3), dtype=np.float64)
    seeds[:, 0] = charge.position[0] + radius * np.cos(angles)
    seeds[:, 1] = charge.position[1] + radius * np.sin(angles)
    seeds[:, 2] = charge.position[2]
    return seeds


def field_line_bundle(
    charges: Sequence[Charge],
    config: FieldLineConfig = _DEFAULT_CONFIG,
) -> list[FieldLine]:
    """
    Trace the full bundle of field lines for a charge configuration.

    Each charge gets config.lines_per_charge seeds at config.seed_radius.
    Lines are traced independently; lines with fewer than two points carry
    nothing to draw and are dropped.

    Cost grows with charges × lines × steps, so callers should rebuild the
    bundle only when the charges change (see Scene.field_lines).
    """
    lines: list[FieldLine] = []
    for index, charge in enumerate(charges):
        if charge.q == 0.0:
            continue
        for seed in seed_points(charge, config.lines_per_charge, config.seed_radius):
            line = trace_field_line(seed, charges, config=config, charge_index=index)
            if len(line) < 2:
                continue
            lines.append(line)

    logger.debug("Traced %d field lines for %d charges", len(lines), len(charges))
    return lines


def vector_field_grid(
    charges: Sequence[Charge],
    extent: float = 10.0,
    resolution: int = 11,
    min_distance: float = _DEFAULT_CONFIG.absorption_radius,
) -> list[FieldSample]:
    """
    Sample the field on a regular xy grid (z = 0) for an arrow plot.

    Grid points inside the distance floor of any charge are omitted instead
    of being reported with a truncated field.

    Args:
        charges: Point charges.
        extent: Half-width of the sampled square.
        resolution: Points per side (>= 2).
        min_distance: Distance floor.
    """
    if resolution < 2:
        raise ValueError(f"resolution must be >= 2, got {resolution}")

    samples: list[FieldSample] = []
    coords = np.linspace(-extent, extent, resolution)
    for y in coords:
        for x in coords:
            p = np.array([x, y, 0.0], dtype=np.float64)
            if _near_any_charge(p, charges, min_distance):
                continue
            field, _ = _contributions(p, charges, min_distance)
            samples.append(FieldSample(point=p, vector=field, magnitude=norm(field)))
    return samples
