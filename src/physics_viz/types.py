# MIT License (see LICENSE)
"""
Core record types consumed and produced by the visualization core.

Defines:
- Charge, FieldSample: electrostatics input/output.
- WaveSource: a point source of circular waves in the xy-plane.
- Circle, Box and Body: collision participants.
- BarrierConfig: a 1-D rectangular potential barrier scene.
- Event: a spacetime coordinate (x, t).

Records are passed by value into the core each call. Vector fields are
float64 numpy arrays, converted (and copied) in __post_init__ so callers can
pass tuples, and marked read-only so the core cannot mutate them in place.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from .constants import ELECTRON_MASS
from .errors import DomainError
from .util import f64, vec3, is_finite


def _frozen_array(x) -> np.ndarray:
    """Copy to a float64 3-vector and lock the buffer against in-place writes."""
    arr = vec3(x)
    arr.setflags(write=False)
    return arr


# =============================================================================
# Electrostatics
# =============================================================================

@dataclass(frozen=True, eq=False)
class Charge:
    """
    Point charge.

    Attributes:
        position: Location [x, y, z] in scene units (a 2-D tuple gets z = 0).
        q: Charge in Coulombs. Zero is allowed and contributes no field.
    """
    position: np.ndarray | tuple[float, ...]
    q: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _frozen_array(self.position))
        if not is_finite(self.q):
            raise DomainError(f"Charge must be finite, got {self.q}")

    @property
    def sign(self) -> int:
        """+1, -1 or 0. Renderers color lines by it."""
        return (self.q > 0) - (self.q < 0)


@dataclass(frozen=True, eq=False)
class FieldSample:
    """Electric field evaluated at one point."""
    point: np.ndarray
    vector: np.ndarray
    magnitude: float


# =============================================================================
# Waves
# =============================================================================

@dataclass(frozen=True, eq=False)
class WaveSource:
    """
    Point source of circular waves on the xy-plane.

    Attributes:
        position: Source location [x, y].
        amplitude: Peak amplitude at the source (>= 0).
        wavelength: Distance between crests (> 0).
        frequency: Oscillations per unit time (>= 0).
        phase: Phase offset in radians.
    """
    position: np.ndarray | tuple[float, ...]
    amplitude: float = 1.0
    wavelength: float = 1.0
    frequency: float = 1.0
    phase: float = 0.0

    def __post_init__(self) -> None:
        pos = f64(self.position).reshape(-1)
        if pos.shape != (2,):
            raise ValueError(f"Wave source position must be 2-D, got shape {pos.shape}")
        pos.setflags(write=False)
        object.__setattr__(self, "position", pos)

        if not is_finite(self.amplitude, self.wavelength, self.frequency, self.phase):
            raise DomainError("Wave source parameters must be finite")
        if self.amplitude < 0:
            raise DomainError(f"Amplitude must be non-negative, got {self.amplitude}")
        if self.wavelength <= 0:
            raise DomainError(f"Wavelength must be positive, got {self.wavelength}")
        if self.frequency < 0:
            raise DomainError(f"Frequency must be non-negative, got {self.frequency}")

    def key(self) -> tuple:
        """Hashable identity used for change detection."""
        return (tuple(self.position), self.amplitude, self.wavelength, self.frequency, self.phase)


# =============================================================================
# Collision shapes and bodies
# =============================================================================

@dataclass(frozen=True)
class Circle:
    """
    Sphere (circle in the planar scenes) centered on the body position.

    Attributes:
        radius: Distance from center to surface.
    """
    radius: float = 0.5

    def __post_init__(self) -> None:
        if not (self.radius > 0):
            raise DomainError(f"Circle radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned box anchored at its minimum corner.

    The box spans [position, position + size] on each axis. A 2-tuple size
    gets a depth of 1, which is what planar scenes used.

    Attributes:
        size: (width, height, depth).
    """
    size: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        size = tuple(float(s) for s in self.size)
        if len(size) == 2:
            size = (size[0], size[1], 1.0)
        if len(size) != 3 or any(not (s > 0) for s in size):
            raise DomainError(f"Box size must be three positive extents, got {self.size}")
        object.__setattr__(self, "size", size)


# Tagged variant for narrow-phase dispatch
Shape = Circle | Box


@dataclass(frozen=True, eq=False)
class Body:
    """
    A collision participant.

    The host loop owns bodies and replaces them between frames; the
    collision engine reads them and returns new velocities only.

    Attributes:
        shape: Circle or Box.
        mass: Mass in kg, > 0. math.inf marks an immovable obstacle.
        position: Circle center or box minimum corner [x, y, z].
        velocity: Linear velocity [vx, vy, vz].
        restitution: Coefficient of restitution e in [0, 1].
        collision_enabled: False removes the body from broad-phase.
    """
    shape: Shape = field(default_factory=Circle)
    mass: float = 1.0
    position: np.ndarray | tuple[float, ...] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, ...] = (0.0, 0.0, 0.0)
    restitution: float = 0.8
    collision_enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _frozen_array(self.position))
        object.__setattr__(self, "velocity", _frozen_array(self.velocity))

        if not isinstance(self.shape, (Circle, Box)):
            raise TypeError(f"Unknown shape type: {type(self.shape)}")
        if math.isnan(self.mass) or self.mass <= 0:
            raise DomainError(f"Body mass must be positive, got {self.mass}")
        if not (0.0 <= self.restitution <= 1.0):
            raise DomainError(f"Restitution must lie in [0, 1], got {self.restitution}")

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m). Zero for an infinite-mass obstacle."""
        return 0.0 if math.isinf(self.mass) else 1.0 / self.mass

    @property
    def center(self) -> np.ndarray:
        """Geometric center (the position for circles, the box midpoint for boxes)."""
        if isinstance(self.shape, Circle):
            return self.position
        if isinstance(self.shape, Box):
            return self.position + 0.5 * f64(self.shape.size)
        raise TypeError(f"Unknown shape type: {type(self.shape)}")


# =============================================================================
# Quantum barrier
# =============================================================================

@dataclass(frozen=True)
class BarrierConfig:
    """
    1-D rectangular potential barrier scene.

    Units: energies in eV, widths and positions in nm, mass in kg.

    Attributes:
        energy: Particle kinetic energy E (>= 0).
        barrier_height: Potential V0 inside the barrier (>= 0).
        barrier_width: Barrier thickness L (> 0).
        mass: Particle mass (> 0). Defaults to the electron mass.
        barrier_position: Left edge of the barrier.
    """
    energy: float = 1.0
    barrier_height: float = 2.0
    barrier_width: float = 1.0
    mass: float = ELECTRON_MASS
    barrier_position: float = 0.0

    def __post_init__(self) -> None:
        if not is_finite(self.energy, self.barrier_height, self.barrier_width,
                         self.mass, self.barrier_position):
            raise DomainError("Barrier parameters must be finite")
        if self.energy < 0:
            raise DomainError(f"Energy must be non-negative, got {self.energy}")
        if self.barrier_height < 0:
            raise DomainError(f"Barrier height must be non-negative, got {self.barrier_height}")
        if self.barrier_width <= 0:
            raise DomainError(f"Barrier width must be positive, got {self.barrier_width}")
        if self.mass <= 0:
            raise DomainError(f"Mass must be positive, got {self.mass}")


# =============================================================================
# Relativity
# =============================================================================

@dataclass(frozen=True)
class Event:
    """
    Spacetime coordinate.

    Attributes:
        x: Position along the boost axis.
        t: Coordinate time, in units consistent with the c used for the boost.
    """
    x: float
    t: float
