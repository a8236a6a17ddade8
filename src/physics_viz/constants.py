# MIT License (see LICENSE)
"""
Physical constants used by the visualization core.

Values match the ones the visualizations were tuned with (three to five
significant figures), not CODATA. Units are SI unless stated otherwise;
see each component module for the unit policy at its API boundary.
"""
from __future__ import annotations
import math

# Coulomb's constant k = 1/(4πε₀) in N·m²/C².
K_COULOMB: float = 8.99e9

# Reduced Planck constant ħ in J·s.
HBAR: float = 1.0545718e-34

# Planck constant h in J·s.
PLANCK: float = 6.626e-34

# Electron rest mass in kg. Default particle for the tunneling scene.
ELECTRON_MASS: float = 9.109e-31

# Speed of light in m/s.
SPEED_OF_LIGHT: float = 3e8

# Unit conversions for the quantum module.
ELECTRON_VOLT: float = 1.602176634e-19   # J per eV
NANOMETER: float = 1e-9                  # m per nm
FEMTOSECOND: float = 1e-15               # s per fs

# Standard gravity used by the projectile formulas (m/s²).
GRAVITY: float = 9.8

# Vacuum permeability μ₀ in T·m/A.
MU0: float = 4e-7 * math.pi
