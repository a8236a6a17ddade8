"""
Microbenchmark: cost of the per-frame and change-driven work.
Run:
  python benchmarks/bench_frame.py
"""
import time
import numpy as np
from physics_viz.scene import Scene
from physics_viz.types import Body, Circle, Charge, WaveSource
from physics_viz.profiler import Profiler


def run(n: int, frames: int = 120):
    prof = Profiler()
    scene = Scene(
        charges=[Charge((-2.0, 0.0), 1e-9), Charge((2.0, 0.0), -1e-9)],
        sources=[WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0))],
        dt=1/60,
        profiler=prof,
    )

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    for _ in range(n):
        pos = rng.uniform(-5.0, 5.0, size=2)
        vel = rng.normal(size=2)
        scene.add_body(Body(Circle(0.2), position=tuple(pos), velocity=tuple(vel)))

    # change-driven work, traced once
    scene.field_lines()
    scene.interference_pattern()

    t0 = time.perf_counter()
    for _ in range(frames):
        scene.step()
        scene.wave_heights()
        scene.field_lines()
    t1 = time.perf_counter()

    return (t1 - t0) / frames, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100]:
        per_frame, summary = run(n)
        print(f"N={n:4d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["field_lines", "interference_pattern", "wave_heights", "integrate", "collisions", "trails"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
