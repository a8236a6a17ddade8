# MIT License (see LICENSE)
"""
Numeric kernels of the visualization core.

This subpackage provides:
    - Field: Coulomb field evaluation and field-line tracing.
    - Waves: multi-source interference and the traveling surface.
    - Quantum: rectangular-barrier tunneling and wavefunction sampling.
    - Relativity: Lorentz boosts and spacetime-diagram geometry.
    - Electromagnetism: Coulomb, wire field, Lorentz force, induction.
    - Trails, projectile kinematics, body integration and invariants.

Typical usage:
    from physics_viz.core import field_line_bundle, tunneling

    lines = field_line_bundle([Charge((-2, 0), 1e-9), Charge((2, 0), -1e-9)])
    result = tunneling(energy=1.0, barrier_height=2.0, barrier_width=1.0, mass=ELECTRON_MASS)
"""
from .field import (
    Termination,
    FieldLine,
    electric_field,
    sample_field,
    iter_field_line,
    trace_field_line,
    field_line_bundle,
    vector_field_grid,
)
from .waves import (
    Interference,
    InterferencePattern,
    interference_at,
    interference_pattern,
    height_field,
    wave_speed,
    path_difference,
    two_source_amplitude,
    wave_frequency,
    wave_wavelength,
    diffraction_angle,
    snells_law,
)
from .quantum import (
    TunnelingResult,
    Region,
    WavefunctionSamples,
    tunneling,
    tunneling_for,
    transmission_curve,
    wavefunction,
    de_broglie_wavelength,
    photon_energy,
    minimum_momentum_uncertainty,
    satisfies_uncertainty,
)
from .relativity import (
    BoostResult,
    lorentz_factor,
    lorentz_boost,
    velocity_to_beta,
    time_dilation,
    length_contraction,
    relativistic_momentum,
    relativistic_energy,
    worldline,
    light_cone,
    boosted_axis_angle,
)
from .electromagnetism import (
    coulomb_force,
    electric_potential,
    magnetic_field_from_current,
    lorentz_force,
    magnetic_flux,
    induced_emf,
    generator_emf,
    InductionMeter,
)
from .trail import TrailBuffer, record
from .projectile import (
    projectile_range,
    projectile_max_height,
    projectile_time_of_flight,
    projectile_trajectory,
)
from .integrators import euler_step, euler_step_all, with_velocities
from .invariants import kinetic_energy, linear_momentum, point_kinetic_energy, potential_energy

__all__ = [
    # Field
    "Termination",
    "FieldLine",
    "electric_field",
    "sample_field",
    "iter_field_line",
    "trace_field_line",
    "field_line_bundle",
    "vector_field_grid",
    # Waves
    "Interference",
    "InterferencePattern",
    "interference_at",
    "interference_pattern",
    "height_field",
    "wave_speed",
    "path_difference",
    "two_source_amplitude",
    "wave_frequency",
    "wave_wavelength",
    "diffraction_angle",
    "snells_law",
    # Quantum
    "TunnelingResult",
    "Region",
    "WavefunctionSamples",
    "tunneling",
    "tunneling_for",
    "transmission_curve",
    "wavefunction",
    "de_broglie_wavelength",
    "photon_energy",
    "minimum_momentum_uncertainty",
    "satisfies_uncertainty",
    # Relativity
    "BoostResult",
    "lorentz_factor",
    "lorentz_boost",
    "velocity_to_beta",
    "time_dilation",
    "length_contraction",
    "relativistic_momentum",
    "relativistic_energy",
    "worldline",
    "light_cone",
    "boosted_axis_angle",
    # Electromagnetism
    "coulomb_force",
    "electric_potential",
    "magnetic_field_from_current",
    "lorentz_force",
    "magnetic_flux",
    "induced_emf",
    "generator_emf",
    "InductionMeter",
    # Trails
    "TrailBuffer",
    "record",
    # Projectile
    "projectile_range",
    "projectile_max_height",
    "projectile_time_of_flight",
    "projectile_trajectory",
    # Integration and invariants
    "euler_step",
    "euler_step_all",
    "with_velocities",
    "kinetic_energy",
    "linear_momentum",
    "point_kinetic_energy",
    "potential_energy",
]
