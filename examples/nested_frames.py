# examples/nested_frames.py
from nbody_sim import Frame
import numpy as np

# screen -> solar system -> rotating planet frame
screen = Frame(position=(320, 240), scale=(1, -1))
system = Frame(parent=screen, scale=(0.5, 0.5))
planet = Frame(parent=system, position=(200, 0))

for k in range(4):
    planet.set_rotation(k * np.pi / 2)
    p = planet.to_global((10, 0))
    print(f"rotation {k * 90:3d} deg -> screen {p}, back {planet.to_local(p)}")
