# examples/two_body.py
from nbody_sim import World, Body, Frame, Predictor
import numpy as np

world = World(G=66_700_000.0)
planet = world.add_body(Body(position=(320, 240), velocity=(40, 0), mass=10))
moon = world.add_body(Body(position=(320, 60), velocity=(-400, 0), mass=1))

# screen space is the global space; the view rides on the moon
screen = Frame()
view = Frame(parent=screen)
predictor = Predictor(horizon=120, sampling_distance=8.0)

dt = 0.016
for _ in range(300):
    world.advance(dt)

view.follow(world.body(moon))
path = predictor.predict(world, moon)

print("tick:", world.tick, "t:", round(world.time, 3))
for s in world.snapshot():
    print("body", s.handle, "pos", s.position, "vel", s.velocity)
print("moon +x axis tip on screen:", view.to_global((50, 0)))
print("predicted path spans", round(path.duration, 3), "s over", len(path), "samples")
print("first samples in view space:\n", np.round(view.to_local_points(path.points[:3]), 2))
