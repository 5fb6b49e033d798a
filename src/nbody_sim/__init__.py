# MIT License (see LICENSE)
"""
nbody_sim - 2D point-mass gravity simulation with nested coordinate frames.

The package advances point masses under pairwise inverse-square attraction
and exposes their positions through a tree of affine frames for a renderer.
It does no drawing itself: inputs and outputs are plain numbers and numpy
arrays.

Main entry points:
    - World: Handle-addressed bodies, tick counter, force law and stepping.
    - Body: A point mass with accumulated acceleration.
    - Frame: Node of a transform tree with to_global / to_local.
    - Predictor: Forked forward simulation producing a Trajectory.

Submodules:
    - core: Force law, integrators and conserved-quantity diagnostics.
    - util: 2D vector helpers (Vec2 = float64 ndarray of shape (2,)).
    - profiler: Section timing.

Example:
    from nbody_sim import World, Body, Frame, Predictor

    world = World(G=66_700_000)
    sun = world.add_body(Body(position=(320, 240), velocity=(40, 0), mass=10))
    ship = world.add_body(Body(position=(320, 60), velocity=(-400, 0), mass=1))
    world.advance(0.016)
    path = Predictor(horizon=100).predict(world, ship)
"""
from .world import World
from .types import Body, BodyHandle, BodyState
from .frame import Frame
from .predictor import Predictor, Trajectory, predict_trajectory
from .profiler import Profiler

__all__ = [
    # Simulation
    "World",
    "Body",
    "BodyHandle",
    "BodyState",
    # Frames
    "Frame",
    # Prediction
    "Predictor",
    "Trajectory",
    "predict_trajectory",
    # Diagnostics
    "Profiler",
]
