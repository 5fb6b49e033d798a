# MIT License (see LICENSE)
"""
Forward trajectory prediction.

The predictor forks a World (World.clone) and runs the normal tick pipeline
on the copy, apply_forces() then step(dt), recording where the tracked body
ends up after each step. The live World is never touched.

Step size is a visual-sampling heuristic, not a physical time step:

    dt = sampling_distance / |v|

so consecutive samples are roughly sampling_distance apart in space and the
simulated time between them varies with speed. Trajectory.times exposes the
cumulative simulated time of each sample; callers must not assume it is
uniform. A body at rest falls back to fallback_dt.

Cost is O(horizon · N²) and runs synchronously.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import numpy as np

from .constants import (
    DEFAULT_HORIZON,
    DEFAULT_SAMPLING_DISTANCE,
    DEFAULT_FALLBACK_DT,
    SPEED_EPS,
)
from .core.forces import check_strength
from .profiler import Profiler, maybe_section
from .types import BodyHandle
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Trajectory:
    """
    Predicted path of one body.

    Attributes:
        points: Positions after each predicted step, shape (horizon, 2).
        times: Simulated time elapsed from the start of the prediction to
               each sample, shape (horizon,). Non-decreasing, not uniform.
    """
    points: np.ndarray
    times: np.ndarray

    def __len__(self) -> int:
        return len(self.points)

    @property
    def duration(self) -> float:
        return float(self.times[-1]) if len(self.times) else 0.0


@dataclass
class Predictor:
    """
    Reusable prediction settings.

    Attributes:
        horizon: Number of steps (samples) to predict.
        sampling_distance: Target spacing between samples, in distance units.
        fallback_dt: Step used when the tracked body's speed is ~0.
        max_dt: Optional upper bound on a single step, keeps slow bodies from
                taking huge, inaccurate steps.
        profiler: Optional Profiler; predictions are timed as "predict".
    """
    horizon: int = DEFAULT_HORIZON
    sampling_distance: float = DEFAULT_SAMPLING_DISTANCE
    fallback_dt: float = DEFAULT_FALLBACK_DT
    max_dt: float | None = None
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        if isinstance(self.horizon, bool) or not isinstance(self.horizon, (int, np.integer)) or self.horizon < 0:
            raise ValueError(f"horizon must be a non-negative integer, got {self.horizon!r}")
        _check_positive("sampling_distance", self.sampling_distance)
        _check_positive("fallback_dt", self.fallback_dt)
        if self.max_dt is not None:
            _check_positive("max_dt", self.max_dt)

    def step_size(self, speed: float) -> float:
        """dt for a body moving at `speed`: sampling_distance / speed, guarded."""
        if speed < SPEED_EPS:
            dt = self.fallback_dt
        else:
            dt = self.sampling_distance / speed
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)
        return dt

    def predict(self, world: World, handle: BodyHandle, G: float | None = None) -> Trajectory:
        """
        Forecast the path of the body `handle` in `world`.

        Args:
            G: Strength used for every predicted step instead of world.G.

        Raises:
            KeyError: If the handle is not in the world.
            ValueError: If G is given and not finite.
        """
        world.body(handle)  # KeyError before any cloning work
        if G is not None:
            G = check_strength(G)
        with maybe_section(self.profiler, "predict"):
            sim = world.clone()
            target = sim.body(handle)
            points = np.empty((self.horizon, 2), dtype=np.float64)
            times = np.empty(self.horizon, dtype=np.float64)
            elapsed = 0.0
            fallbacks = 0
            for k in range(self.horizon):
                speed = target.speed
                if speed < SPEED_EPS:
                    fallbacks += 1
                dt = self.step_size(speed)
                sim.apply_forces(G)
                sim.step(dt)
                elapsed += dt
                points[k] = target.position
                times[k] = elapsed
        if fallbacks:
            logger.debug("Predictor used fallback_dt for %d of %d steps", fallbacks, self.horizon)
        return Trajectory(points=points, times=times)


def predict_trajectory(
    world: World,
    handle: BodyHandle,
    horizon: int = DEFAULT_HORIZON,
    sampling_distance: float = DEFAULT_SAMPLING_DISTANCE,
    fallback_dt: float = DEFAULT_FALLBACK_DT,
    max_dt: float | None = None,
    G: float | None = None,
) -> Trajectory:
    """Function form of Predictor(...).predict(world, handle, G)."""
    return Predictor(
        horizon=horizon,
        sampling_distance=sampling_distance,
        fallback_dt=fallback_dt,
        max_dt=max_dt,
    ).predict(world, handle, G)


def _check_positive(name: str, value: float) -> None:
    if not (math.isfinite(value) and value > 0.0):
        raise ValueError(f"{name} must be positive and finite, got {value!r}")
