# MIT License (see LICENSE)
"""
Superposition of circular waves from point sources.

Each source i contributes, at distance d_i:

    φ_i = 2π (d_i / λ_i − f_i t) + φ0_i          (phase)
    a_i = A_i / (1 + α d_i)                       (attenuated amplitude, α = 0.1)

The α term is a visual 1/r-like falloff that stays finite at the source; it
is not the physical 1/r (cylindrical waves would be 1/sqrt(r)).

With two or more sources, interference is computed by phasor summation:

    re = Σ a_i cos φ_i,   im = Σ a_i sin φ_i,   I = re² + im²

A lone source has no partner to interfere with, so its intensity is the
square of the instantaneous height, I = (a sin φ)², which draws the
expanding ring fringes. Zero-amplitude sources do not count toward the
number of sources. The traveling surface shown every frame is the
instantaneous displacement z = Σ a_i sin φ_i.

Units: positions and wavelengths in scene units, time in seconds,
frequency in Hz.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..config import WaveMeshConfig
from ..errors import DomainError
from ..types import WaveSource
from ..util import f64

logger = logging.getLogger(__name__)

_DEFAULT_MESH = WaveMeshConfig()
ATTENUATION: float = _DEFAULT_MESH.attenuation


@dataclass(frozen=True)
class Interference:
    """
    Superposed wave at a single point.

    Attributes:
        amplitude: sqrt(intensity) (>= 0). The resultant phasor magnitude
            for several sources, |displacement| for a single one.
        intensity: re² + im² for several sources, displacement² for one.
        displacement: Signed instantaneous height Σ a_i sin φ_i.
    """
    amplitude: float
    intensity: float
    displacement: float


@dataclass(frozen=True, eq=False)
class InterferencePattern:
    """
    Interference intensity sampled on a square mesh.

    Attributes:
        xs: Grid x coordinates [n].
        ys: Grid y coordinates [n].
        intensity: Intensity grid [n, n], indexed [iy, ix].
        normalized: intensity / max(intensity), or zeros if the max is 0.
        time: Time the pattern was evaluated at.
    """
    xs: np.ndarray
    ys: np.ndarray
    intensity: np.ndarray
    normalized: np.ndarray
    time: float

    @property
    def max_intensity(self) -> float:
        return float(self.intensity.max()) if self.intensity.size else 0.0


def attenuated_amplitude(amplitude, distance, attenuation: float = ATTENUATION):
    """A / (1 + α d). Works on scalars and arrays."""
    return amplitude / (1.0 + attenuation * distance)


def source_phase(source: WaveSource, distance, time: float):
    """2π (d/λ − f t) + φ0. Works on scalars and arrays."""
    return 2.0 * np.pi * (distance / source.wavelength - source.frequency * time) + source.phase


def _phasor_sums(
    x: np.ndarray,
    y: np.ndarray,
    sources: Sequence[WaveSource],
    time: float,
    attenuation: float,
) -> tuple[np.ndarray, np.ndarray, int]:
    """
    Accumulate Σ a cos φ and Σ a sin φ over sources, broadcasting over x/y.

    Returns:
        (re, im, live) where live counts the non-silent sources.
    """
    re = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    im = np.zeros_like(re)
    live = 0
    for source in sources:
        if source.amplitude == 0.0:
            continue
        live += 1
        d = np.hypot(x - source.position[0], y - source.position[1])
        a = attenuated_amplitude(source.amplitude, d, attenuation)
        phi = source_phase(source, d, time)
        re += a * np.cos(phi)
        im += a * np.sin(phi)
    return re, im, live


def _intensity(re: np.ndarray, im: np.ndarray, live: int) -> np.ndarray:
    if live == 1:
        return im * im
    return re * re + im * im


def interference_at(
    point,
    sources: Sequence[WaveSource],
    time: float,
    attenuation: float = ATTENUATION,
) -> Interference:
    """
    Superpose all sources at one point.

    A single source gives intensity = displacement², which oscillates in
    time; two or more give the phasor magnitude squared. With no sources
    (or only zero-amplitude ones) everything is zero.

    Args:
        point: [x, y] (a z component, if present, is ignored).
        sources: Wave sources.
        time: Time in seconds.
        attenuation: Distance falloff coefficient α.
    """
    p = f64(point).reshape(-1)
    re, im, live = _phasor_sums(
        np.asarray(p[0]), np.asarray(p[1]), sources, float(time), attenuation
    )
    intensity = float(_intensity(re, im, live))
    return Interference(
        amplitude=float(np.sqrt(intensity)),
        intensity=intensity,
        displacement=float(im),
    )


def mesh_axes(config: WaveMeshConfig = _DEFAULT_MESH) -> tuple[np.ndarray, np.ndarray]:
    """Vertex coordinates of the square mesh: (segments + 1) per side."""
    half = 0.5 * config.size
    coords = np.linspace(-half, half, config.segments + 1)
    return coords, coords.copy()


def interference_pattern(
    sources: Sequence[WaveSource],
    time: float = 0.0,
    config: WaveMeshConfig = _DEFAULT_MESH,
) -> InterferencePattern:
    """
    Evaluate the interference intensity over the whole mesh.

    This is the static fringe pattern; its cost is quadratic in the mesh
    resolution, so hosts rebuild it only when the sources change
    (see Scene.interference_pattern).
    """
    xs, ys = mesh_axes(config)
    gx, gy = np.meshgrid(xs, ys)
    re, im, live = _phasor_sums(gx, gy, sources, float(time), config.attenuation)
    intensity = _intensity(re, im, live)

    peak = float(intensity.max()) if intensity.size else 0.0
    normalized = intensity / peak if peak > 0 else np.zeros_like(intensity)

    logger.debug("Built interference pattern %dx%d for %d sources",
                 len(xs), len(ys), len(sources))
    return InterferencePattern(xs=xs, ys=ys, intensity=intensity, normalized=normalized, time=float(time))


def height_field(
    xs: np.ndarray,
    ys: np.ndarray,
    sources: Sequence[WaveSource],
    time: float,
    scale: float = _DEFAULT_MESH.height_scale,
    attenuation: float = ATTENUATION,
) -> np.ndarray:
    """
    Traveling surface heights z(x, y, t) = scale · Σ a_i sin φ_i.

    The per-frame path: only the displacement is recomputed, never the
    intensity pattern.

    Args:
        xs: Grid x coordinates [nx].
        ys: Grid y coordinates [ny].
        sources: Wave sources.
        time: Time in seconds.
        scale: Vertical exaggeration applied for display.

    Returns:
        Height grid [ny, nx].
    """
    gx, gy = np.meshgrid(f64(xs), f64(ys))
    _, im, _ = _phasor_sums(gx, gy, sources, float(time), attenuation)
    return scale * im


# =============================================================================
# Closed-form helpers
# =============================================================================

def wave_speed(frequency: float, wavelength: float) -> float:
    """v = f λ."""
    return frequency * wavelength


def wave_frequency(speed: float, wavelength: float) -> float:
    """f = v / λ."""
    if not wavelength > 0:
        raise DomainError(f"Wavelength must be positive, got {wavelength}")
    return speed / wavelength


def wave_wavelength(speed: float, frequency: float) -> float:
    """λ = v / f."""
    if not frequency > 0:
        raise DomainError(f"Frequency must be positive, got {frequency}")
    return speed / frequency


def path_difference(distance1: float, distance2: float) -> float:
    """|d1 − d2|."""
    return abs(distance1 - distance2)


def two_source_amplitude(amplitude1: float, amplitude2: float, phase: float) -> float:
    """
    Resultant amplitude of two phasors separated by `phase`.

    A = sqrt(A1² + A2² + 2 A1 A2 cos Δφ)
    """
    value = amplitude1 * amplitude1 + amplitude2 * amplitude2 + 2.0 * amplitude1 * amplitude2 * np.cos(phase)
    # Rounding can push exact cancellation slightly below zero
    return float(np.sqrt(max(value, 0.0)))


def diffraction_angle(wavelength: float, slit_width: float, order: int = 1) -> float | None:
    """
    Single-slit minimum angle in radians: sin θ = m λ / w.

    Returns:
        θ, or None when |m λ / w| > 1 and the order does not exist.
    """
    if not wavelength > 0 or not slit_width > 0:
        raise DomainError(f"Wavelength and slit width must be positive, got {wavelength}, {slit_width}")
    s = order * wavelength / slit_width
    if abs(s) > 1.0:
        return None
    return math.asin(s)


def snells_law(n1: float, n2: float, angle1: float) -> float | None:
    """
    Refraction angle in degrees: n1 sin θ1 = n2 sin θ2.

    Args:
        n1: Refractive index of the incident medium.
        n2: Refractive index of the second medium.
        angle1: Angle of incidence in degrees, from the normal.

    Returns:
        θ2 in degrees, or None under total internal reflection.
    """
    if not n1 > 0 or not n2 > 0:
        raise DomainError(f"Refractive indices must be positive, got {n1}, {n2}")
    s = n1 / n2 * math.sin(math.radians(angle1))
    if abs(s) > 1.0:
        return None
    return math.degrees(math.asin(s))
