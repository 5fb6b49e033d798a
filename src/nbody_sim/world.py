# MIT License (see LICENSE)
"""
The simulation world.

The World owns an insertion-ordered set of bodies, each addressed by a stable
handle, plus the tick counter and the force-law configuration. Per tick the
host does:

    world.apply_forces()   # accumulate pairwise gravity (+ uniform field)
    world.step(dt)         # integrate every body, tick += 1

or world.advance(dt), which does both. step() never applies forces itself, so
callers may add their own contributions with Body.apply_force /
Body.apply_acceleration in between.

Cloning produces a fully independent World: same tick, same handles, a copy
of every body and no shared arrays. The Predictor relies on this.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Iterator

from .constants import DEFAULT_G, DEFAULT_MIN_DISTANCE
from .core.forces import (
    apply_gravity_pairwise,
    apply_uniform_field,
    check_min_distance,
    check_strength,
)
from .core.integrators import INTEGRATORS
from .profiler import Profiler, maybe_section
from .types import Body, BodyHandle, BodyState
from .util import Vec2, vec2

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class World:
    """
    Container and stepper for a set of point masses.

    Attributes:
        G: Strength constant of the pairwise inverse-square law.
        min_distance: Separation clamp for the force law (> 0).
        mass_weighted: Use F = G·mᵢ·mⱼ/r² instead of F = G/r².
        uniform_field: Constant acceleration applied to every body by
                       apply_forces() (default: none).
        integrator: "euler" (semi-implicit Euler) or "taylor"
                    (constant-acceleration step).
        profiler: Optional Profiler for timing statistics.
        tick: Number of completed step() calls. Never decreases.
        time: Total simulated time in seconds.

    G, min_distance, uniform_field and integrator are checked on construction
    and again on every assignment.
    """
    G: float = DEFAULT_G
    min_distance: float = DEFAULT_MIN_DISTANCE
    mass_weighted: bool = False
    uniform_field: Vec2 | tuple[float, float] = (0.0, 0.0)
    integrator: str = "euler"
    profiler: Profiler | None = None

    # Internal state
    tick: int = field(default=0, init=False)
    time: float = field(default=0.0, init=False)
    _bodies: dict[BodyHandle, Body] = field(default_factory=dict, init=False, repr=False)
    _next_handle: int = field(default=1, init=False, repr=False)

    def __setattr__(self, name: str, value) -> None:
        if name == "G":
            value = check_strength(value)
        elif name == "min_distance":
            value = check_min_distance(value)
        elif name == "uniform_field":
            value = vec2(value)
        elif name == "integrator" and value not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {value}")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Body management
    # ------------------------------------------------------------------

    def add_body(self, body: Body) -> BodyHandle:
        """
        Take ownership of a body.

        Returns:
            A handle that stays valid until the body is removed. Handles are
            never reused, and clones of this World share the same handles.
        """
        handle = self._next_handle
        self._next_handle += 1
        self._bodies[handle] = body
        logger.debug("Added body %d (mass=%g)", handle, body.mass)
        return handle

    def remove_body(self, handle: BodyHandle) -> None:
        """Remove a body. Unknown or already-removed handles are ignored."""
        if self._bodies.pop(handle, None) is None:
            logger.debug("remove_body: handle %d not present", handle)
        else:
            logger.debug("Removed body %d", handle)

    def body(self, handle: BodyHandle) -> Body:
        """
        Look up a body by handle.

        Raises:
            KeyError: If the handle was never issued or has been removed.
        """
        try:
            return self._bodies[handle]
        except KeyError:
            raise KeyError(f"No body with handle {handle}") from None

    @property
    def bodies(self) -> list[Body]:
        """Bodies in insertion order."""
        return list(self._bodies.values())

    @property
    def handles(self) -> list[BodyHandle]:
        """Handles in insertion order."""
        return list(self._bodies.keys())

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __contains__(self, handle: object) -> bool:
        return handle in self._bodies

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def apply_forces(self, G: float | None = None) -> None:
        """
        Run the force law once across all body pairs, then the uniform field.

        Args:
            G: Override the configured strength for this call only.

        Raises:
            ValueError: If the override is not finite.
        """
        G = self.G if G is None else check_strength(G)
        bodies = self.bodies
        with maybe_section(self.profiler, "forces"):
            apply_gravity_pairwise(bodies, G, self.min_distance, self.mass_weighted)
            apply_uniform_field(bodies, self.uniform_field)

    def step(self, dt: float) -> None:
        """
        Advance one tick: increment the tick, then integrate every body in
        insertion order, consuming its accumulated acceleration.

        Raises:
            ValueError: If dt is negative or not finite.
        """
        dt = float(dt)
        if not math.isfinite(dt) or dt < 0.0:
            raise ValueError(f"dt must be finite and non-negative, got {dt!r}")
        integrate = INTEGRATORS[self.integrator]
        self.tick += 1
        with maybe_section(self.profiler, "integrate"):
            for b in self._bodies.values():
                integrate(b, dt)
        self.time += dt

    def advance(self, dt: float, G: float | None = None) -> None:
        """One full tick: apply_forces() followed by step(dt)."""
        self.apply_forces(G)
        self.step(dt)

    # ------------------------------------------------------------------
    # Copies and views
    # ------------------------------------------------------------------

    def clone(self) -> "World":
        """
        Deep copy: same configuration, tick, time and handles; every body
        copied. The profiler is not carried over.
        """
        world = World(
            G=self.G,
            min_distance=self.min_distance,
            mass_weighted=self.mass_weighted,
            uniform_field=self.uniform_field,
            integrator=self.integrator,
        )
        world.tick = self.tick
        world.time = self.time
        world._next_handle = self._next_handle
        world._bodies = {h: b.clone() for h, b in self._bodies.items()}
        logger.debug("Cloned world at tick %d (%d bodies)", self.tick, len(self))
        return world

    def snapshot(self) -> tuple[BodyState, ...]:
        """Read-only copies of every body's state, in insertion order."""
        return tuple(BodyState.of(h, b) for h, b in self._bodies.items())
