from physics_viz.scene import Scene
from physics_viz.types import Body, Circle
from physics_viz.core.invariants import kinetic_energy, linear_momentum

scene = Scene(dt=1/600)

m1, m2 = 1.0, 2.0
scene.add_body(Body(Circle(0.2), mass=m1, position=(-1.0, 0.0), velocity=(+3.0, 0.0), restitution=1.0))
scene.add_body(Body(Circle(0.2), mass=m2, position=(+1.0, 0.0), velocity=(-1.0, 0.0), restitution=1.0))

p0 = linear_momentum(scene.bodies)
ke0 = kinetic_energy(scene.bodies)

for _ in range(1500):
    scene.step()

p1 = linear_momentum(scene.bodies)
ke1 = kinetic_energy(scene.bodies)

print("p0", p0, "p1", p1, "dp", p1 - p0)
print("ke0", ke0, "ke1", ke1, "dke", ke1 - ke0)
print("v_final a,b:", scene.bodies[0].velocity, scene.bodies[1].velocity)
print("trail lengths:", [len(t) for t in scene.trails])
