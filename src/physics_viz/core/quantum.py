# MIT License (see LICENSE)
"""
Transmission through a 1-D rectangular potential barrier.

Unit policy at this API boundary:
    energy, barrier height    eV
    barrier width, positions  nm
    mass                      kg
    wavefunction time         fs

Model (thick-barrier approximation):
    E >= V0:  T = 1 (classical over-barrier passage), R = 0
    E <  V0:  κ = sqrt(2 m (V0 − E)) / ħ,   T = exp(−2 κ L),   R = 1 − T

The wavefunction sampler is illustrative: an incident plane wave, an
exponentially decaying (E < V0) or oscillating (E >= V0) interior wave, and
a transmitted wave scaled by sqrt(T). Amplitudes are not matched at the
barrier edges; no Schrödinger equation is integrated.
"""
from __future__ import annotations
import enum
import math
from dataclasses import dataclass

import numpy as np

from ..config import WavefunctionConfig
from ..constants import HBAR, PLANCK, ELECTRON_VOLT, NANOMETER, FEMTOSECOND
from ..errors import DomainError
from ..types import BarrierConfig
from ..util import is_finite


@dataclass(frozen=True)
class TunnelingResult:
    """
    Barrier transmission outcome.

    Attributes:
        transmission_probability: T in [0, 1].
        reflection_probability: R = 1 − T.
        tunneling: True when E < V0 (transmission is a tunneling effect).
    """
    transmission_probability: float
    reflection_probability: float
    tunneling: bool


class Region(enum.Enum):
    """Wavefunction regime, with the RGB color the renderer uses for it."""
    INCIDENT = "incident"
    BARRIER = "barrier"
    TRANSMITTED = "transmitted"

    @property
    def color(self) -> tuple[float, float, float]:
        return _REGION_COLORS[self]


_REGION_COLORS = {
    Region.INCIDENT: (0.2, 0.6, 1.0),
    Region.BARRIER: (1.0, 0.2, 0.2),
    Region.TRANSMITTED: (0.2, 1.0, 0.2),
}


@dataclass(frozen=True, eq=False)
class WavefunctionSamples:
    """
    Piecewise wavefunction on a spatial grid.

    Attributes:
        x: Sample positions in nm [N].
        amplitude: Real wave amplitude ψ(x) [N].
        probability: |ψ|² [N].
        region: Region tag per sample [N].
        transmission_probability: The T used to scale the transmitted wave.
    """
    x: np.ndarray
    amplitude: np.ndarray
    probability: np.ndarray
    region: tuple[Region, ...]
    transmission_probability: float

    @property
    def colors(self) -> np.ndarray:
        """Per-sample RGB [N, 3]."""
        return np.array([r.color for r in self.region], dtype=np.float64)


def _validate(energy: float, barrier_height: float, barrier_width: float, mass: float) -> None:
    if not is_finite(energy, barrier_height, barrier_width, mass):
        raise DomainError("Tunneling inputs must be finite")
    if barrier_width <= 0:
        raise DomainError(f"Barrier width must be positive, got {barrier_width}")
    if mass <= 0:
        raise DomainError(f"Mass must be positive, got {mass}")
    if energy < 0:
        raise DomainError(f"Energy must be non-negative, got {energy}")
    if barrier_height < 0:
        raise DomainError(f"Barrier height must be non-negative, got {barrier_height}")


def wave_number(energy_ev: float, mass: float) -> float:
    """
    Wave number k = sqrt(2 m E)/ħ in 1/nm.

    Also gives the decay constant κ when called with V0 − E.
    """
    return math.sqrt(2.0 * mass * energy_ev * ELECTRON_VOLT) / HBAR * NANOMETER


def angular_frequency(energy_ev: float) -> float:
    """ω = E/ħ in rad/fs."""
    return energy_ev * ELECTRON_VOLT / HBAR * FEMTOSECOND


def tunneling(
    energy: float,
    barrier_height: float,
    barrier_width: float,
    mass: float,
) -> TunnelingResult:
    """
    Transmission and reflection probability for a rectangular barrier.

    Args:
        energy: Particle energy E in eV.
        barrier_height: Barrier potential V0 in eV.
        barrier_width: Barrier thickness L in nm.
        mass: Particle mass in kg.

    Returns:
        TunnelingResult with T + R == 1.

    Raises:
        DomainError: If L <= 0, m <= 0, E or V0 negative, or any input is
            not finite.
    """
    _validate(energy, barrier_height, barrier_width, mass)

    if energy >= barrier_height:
        return TunnelingResult(transmission_probability=1.0, reflection_probability=0.0, tunneling=False)

    kappa = wave_number(barrier_height - energy, mass)
    t = math.exp(-2.0 * kappa * barrier_width)
    t = min(max(t, 0.0), 1.0)
    return TunnelingResult(transmission_probability=t, reflection_probability=1.0 - t, tunneling=True)


def tunneling_for(config: BarrierConfig) -> TunnelingResult:
    """tunneling() for a BarrierConfig."""
    return tunneling(config.energy, config.barrier_height, config.barrier_width, config.mass)


def transmission_curve(
    barrier_height: float,
    barrier_width: float,
    mass: float,
    energies=None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    T and R as a function of particle energy, for the chart beside the scene.

    Args:
        barrier_height: V0 in eV.
        barrier_width: L in nm.
        mass: Particle mass in kg.
        energies: Energies in eV. Defaults to 0.1 .. 2 V0 in steps of 0.1.

    Returns:
        (energies, transmission, reflection) arrays.
    """
    if energies is None:
        upper = max(2.0 * barrier_height, 0.1)
        energies = np.arange(1, int(round(upper / 0.1)) + 1) * 0.1
    energies = np.asarray(energies, dtype=np.float64)

    transmission = np.empty_like(energies)
    reflection = np.empty_like(energies)
    for i, e in enumerate(energies):
        result = tunneling(float(e), barrier_height, barrier_width, mass)
        transmission[i] = result.transmission_probability
        reflection[i] = result.reflection_probability
    return energies, transmission, reflection


def wavefunction(
    barrier: BarrierConfig,
    time: float = 0.0,
    config: WavefunctionConfig = WavefunctionConfig(),
) -> WavefunctionSamples:
    """
    Sample the piecewise wavefunction across the scene.

    Regions (x in nm, x0 = barrier_position, L = barrier_width):
        x < x0            ψ = cos(k x − ω t)
        x0 <= x <= x0+L   ψ = exp(−κ (x − x0))            if E < V0
                          ψ = cos(k' (x − x0) − ω t)       otherwise
        x > x0 + L        ψ = sqrt(T) cos(k x − ω t)

    with k = sqrt(2mE)/ħ, k' = sqrt(2m(E − V0))/ħ, κ = sqrt(2m(V0 − E))/ħ,
    ω = E/ħ. Time is in femtoseconds.
    """
    result = tunneling_for(barrier)
    t_prob = result.transmission_probability

    x = config.x_min + (config.x_max - config.x_min) * np.arange(config.points) / config.points
    x0 = barrier.barrier_position
    x1 = x0 + barrier.barrier_width

    k = wave_number(barrier.energy, barrier.mass)
    omega_t = angular_frequency(barrier.energy) * float(time)

    before = x < x0
    inside = (x >= x0) & (x <= x1)
    after = x > x1

    amplitude = np.empty_like(x)
    amplitude[before] = np.cos(k * x[before] - omega_t)
    if barrier.energy < barrier.barrier_height:
        kappa = wave_number(barrier.barrier_height - barrier.energy, barrier.mass)
        amplitude[inside] = np.exp(-kappa * (x[inside] - x0))
    else:
        k_inside = wave_number(barrier.energy - barrier.barrier_height, barrier.mass)
        amplitude[inside] = np.cos(k_inside * (x[inside] - x0) - omega_t)
    amplitude[after] = math.sqrt(t_prob) * np.cos(k * x[after] - omega_t)

    region = tuple(
        Region.INCIDENT if b else Region.BARRIER if i else Region.TRANSMITTED
        for b, i in zip(before, inside)
    )
    return WavefunctionSamples(
        x=x,
        amplitude=amplitude,
        probability=amplitude * amplitude,
        region=region,
        transmission_probability=t_prob,
    )


# =============================================================================
# Closed-form helpers
# =============================================================================

def de_broglie_wavelength(momentum: float) -> float:
    """λ = h/p in metres, momentum in kg·m/s."""
    if not momentum > 0:
        raise DomainError(f"Momentum must be positive, got {momentum}")
    return PLANCK / momentum


def photon_energy(frequency: float) -> float:
    """E = h f in Joules."""
    return PLANCK * frequency


def minimum_momentum_uncertainty(position_uncertainty: float) -> float:
    """Smallest Δp allowed by Δx Δp >= ħ/2, in kg·m/s (Δx in metres)."""
    if not position_uncertainty > 0:
        raise DomainError(f"Position uncertainty must be positive, got {position_uncertainty}")
    return HBAR / (2.0 * position_uncertainty)


def satisfies_uncertainty(position_uncertainty: float, momentum_uncertainty: float) -> bool:
    """True if Δx Δp >= ħ/2 (SI units)."""
    return position_uncertainty * momentum_uncertainty >= HBAR / 2.0
