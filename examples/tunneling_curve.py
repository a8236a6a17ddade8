# examples/tunneling_curve.py
from physics_viz.constants import ELECTRON_MASS
from physics_viz.core.quantum import tunneling, transmission_curve, wavefunction, Region
from physics_viz.types import BarrierConfig

barrier = BarrierConfig(energy=1.0, barrier_height=2.0, barrier_width=1.0, mass=ELECTRON_MASS)

result = tunneling(barrier.energy, barrier.barrier_height, barrier.barrier_width, barrier.mass)
print("T:", result.transmission_probability, "R:", result.reflection_probability)

energies, t, r = transmission_curve(barrier.barrier_height, barrier.barrier_width, barrier.mass)
for e, ti in zip(energies[::5], t[::5]):
    print(f"E={e:4.1f} eV  T={ti:.3e}")

samples = wavefunction(barrier, time=0.0)
for region in Region:
    print(region.value, samples.region.count(region), "samples, color", region.color)
