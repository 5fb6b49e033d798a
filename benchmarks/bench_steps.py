"""
Microbenchmark: time per tick and per prediction vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from nbody_sim import World, Body, Predictor, Profiler


def run(n: int, steps: int = 200):
    prof = Profiler()
    world = World(G=1e6, min_distance=2.0, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    handles = []
    for _ in range(n):
        handles.append(world.add_body(Body(
            position=rng.uniform(-300, 300, 2),
            velocity=rng.uniform(-30, 30, 2),
            mass=float(rng.uniform(1, 10)),
        )))

    # warmup
    for _ in range(10):
        world.advance(1 / 60)

    t0 = time.perf_counter()
    for _ in range(steps):
        world.advance(1 / 60)
    t1 = time.perf_counter()

    Predictor(horizon=100, profiler=prof).predict(world, handles[0])
    return (t1 - t0) / steps, prof.stats.summary()


if __name__ == "__main__":
    for n in [2, 10, 25, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  tick={1e3*per_step:8.3f} ms  ticks/s={1/per_step:8.1f}")
        for k in ["forces", "integrate", "predict"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
