# examples/dipole_field_lines.py
from physics_viz.scene import Scene
from physics_viz.types import Charge
from physics_viz.renderer import DebugRenderer

scene = Scene(charges=[Charge((-2.0, 0.0), 1e-9), Charge((2.0, 0.0), -1e-9)])

lines = scene.field_lines()
print("lines:", len(lines))
for line in lines[:4]:
    print(" from charge", line.charge_index, "points", len(line), "->", line.termination.value)

DebugRenderer(verbose=False).render_scene(scene)
