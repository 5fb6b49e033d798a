# MIT License (see LICENSE)
"""
Core type definitions for the point-mass simulation.

Defines the fundamental data structures:
- Body: a point mass with position, velocity, accumulated acceleration and mass.
- BodyHandle: the stable reference a World issues for each body it owns.
- BodyState: a read-only per-tick snapshot of a body for the host.

Equations of motion (Newtonian, 2D):
  dx/dt = v
  dv/dt = a = Σ F/m + Σ a_field
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from .core.integrators import semi_implicit_euler_step
from .util import Vec2, vec2, zero, magnitude

# Issued by World.add_body(); never reused within a World or its clones.
BodyHandle = int

_VECTOR_FIELDS = ("position", "velocity", "acceleration")


def _check_mass(mass) -> float:
    m = float(mass)
    if not math.isfinite(m) or m <= 0.0:
        raise ValueError(f"Body mass must be positive and finite, got {mass!r}")
    return m


@dataclass(eq=False)
class Body:
    """
    A point mass.

    Attributes:
        position: Position [x, y].
        velocity: Velocity [vx, vy] per second.
        mass: Mass, strictly positive. Checked on construction and on every
              assignment, so a body with an invalid mass can never exist.
        acceleration: Acceleration accumulated since the last integration
                      (sum of F/m contributions plus field accelerations).
                      Transient: integration consumes it and resets it to zero.

    Note:
        Vectors are converted to finite float64 arrays on init and on every
        assignment (copies, so the body never aliases caller data).
    """
    position: Vec2 | tuple[float, float] = (0.0, 0.0)
    velocity: Vec2 | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    acceleration: Vec2 = field(default_factory=zero)

    def __setattr__(self, name: str, value) -> None:
        if name == "mass":
            value = _check_mass(value)
        elif name in _VECTOR_FIELDS:
            value = vec2(value)
        super().__setattr__(name, value)

    @property
    def speed(self) -> float:
        return magnitude(self.velocity)

    @property
    def total_force(self) -> Vec2:
        """Net force applied since the last integration (m·a)."""
        return self.acceleration * self.mass

    def apply_force(self, force: Vec2 | tuple[float, float]) -> None:
        """Accumulate a force: a += F/m."""
        self.acceleration += np.asarray(force, dtype=np.float64) / self.mass

    def apply_acceleration(self, accel: Vec2 | tuple[float, float]) -> None:
        """
        Accumulate an acceleration directly, ignoring mass.

        For uniform fields where the caller has already factored out mass.
        """
        self.acceleration += np.asarray(accel, dtype=np.float64)

    def clear_acceleration(self) -> None:
        self.acceleration.fill(0.0)

    def integrate(self, dt: float) -> None:
        """
        Consume the accumulated acceleration over dt (semi-implicit Euler).

        See core.integrators.semi_implicit_euler_step.
        """
        semi_implicit_euler_step(self, dt)

    def clone(self) -> "Body":
        """Copy position, velocity and mass. The accumulator starts at zero."""
        return Body(position=self.position, velocity=self.velocity, mass=self.mass)


@dataclass(frozen=True, eq=False)
class BodyState:
    """
    Read-only view of a body at one instant, handed to the host for drawing.

    Arrays are copies and flagged non-writeable.
    """
    handle: BodyHandle
    position: Vec2
    velocity: Vec2
    mass: float

    @classmethod
    def of(cls, handle: BodyHandle, body: Body) -> "BodyState":
        position = body.position.copy()
        velocity = body.velocity.copy()
        position.flags.writeable = False
        velocity.flags.writeable = False
        return cls(handle=handle, position=position, velocity=velocity, mass=body.mass)
