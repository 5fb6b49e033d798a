# MIT License (see LICENSE)
"""
Numerical integrators for point-mass dynamics.

Both integrators solve dx/dt = v, dv/dt = a, where a is the acceleration the
body accumulated since its last integration (forces held constant over the
step). Both consume the accumulator: it is zero when they return.

Available integrators:
- semi_implicit_euler_step: velocity first, then position with the new
  velocity (symplectic Euler). This is the default body update rule.
- constant_acceleration_step: exact solution for an acceleration held
  constant over the step (second-order Taylor expansion of x).

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..types import Body


def semi_implicit_euler_step(body: "Body", dt: float) -> None:
    """
    Advance body state by dt using semi-implicit Euler.

        v(t+dt) = v(t) + a·dt
        x(t+dt) = x(t) + v(t+dt)·dt

    The velocity update must happen before the position update within the
    same call; swapping them turns this into explicit Euler, which gains
    energy on orbits.

    Args:
        body: Body to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    body.velocity = body.velocity + body.acceleration * dt
    body.position = body.position + body.velocity * dt
    body.acceleration.fill(0.0)


def constant_acceleration_step(body: "Body", dt: float) -> None:
    """
    Advance body state treating the accumulated acceleration as constant
    over the whole step:
        x(t+dt) = x(t) + v(t)·dt + ½·a·dt²
        v(t+dt) = v(t) + a·dt

    Args:
        body: Body to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    a = body.acceleration
    body.position = body.position + body.velocity * dt + 0.5 * a * dt * dt
    body.velocity = body.velocity + a * dt
    body.acceleration.fill(0.0)


INTEGRATORS: dict[str, Callable[["Body", float], None]] = {
    "euler": semi_implicit_euler_step,
    "taylor": constant_acceleration_step,
}
