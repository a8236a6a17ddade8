# examples/spacetime_boost.py
from physics_viz.core.relativity import lorentz_boost, boosted_axis_angle, worldline
from physics_viz.types import Event

beta = 0.6
event = Event(x=1.0, t=2.0)

boosted = lorentz_boost(event, beta)
print("gamma:", boosted.gamma)
print("event:", event, "->", boosted.event)
print("back:", lorentz_boost(boosted.event, -beta).event)
print("axis tilt (rad):", boosted_axis_angle(beta))
print("worldline samples:", len(worldline(beta)))
