# MIT License (see LICENSE)
"""
Force generators for the point-mass simulation.

All functions accumulate into Body.acceleration (through apply_force or
apply_acceleration) and are meant to be called once per tick, before the
World steps. Nothing here integrates or clears the accumulator.

Key concepts:
- Pairwise gravity is an inverse-square attraction F = G / r² applied to every
  unordered pair. By default the strength does not depend on the masses
  (mass only enters through a = F/m); mass_weighted=True gives the Newtonian
  F = G·mᵢ·mⱼ / r².
- The separation is clamped to min_distance before squaring, so the force is
  bounded and coincident bodies receive no force at all.
- Pairwise gravity is O(N²).
"""
from __future__ import annotations
import math
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from ..constants import DEFAULT_G, DEFAULT_MIN_DISTANCE
from ..util import Vec2, magnitude, normalized

if TYPE_CHECKING:
    from ..types import Body


def check_strength(G) -> float:
    """Return G as a float, raising ValueError if it is not finite."""
    G = float(G)
    if not math.isfinite(G):
        raise ValueError(f"Gravitational constant must be finite, got {G!r}")
    return G


def check_min_distance(min_distance) -> float:
    """Return min_distance as a float, raising ValueError unless it is > 0."""
    d = float(min_distance)
    if not (math.isfinite(d) and d > 0.0):
        raise ValueError(f"min_distance must be positive, got {min_distance!r}")
    return d


def check_force_params(G: float, min_distance: float) -> None:
    """
    Validate force-law parameters.

    Raises:
        ValueError: If G is not finite or min_distance is not positive.
    """
    check_strength(G)
    check_min_distance(min_distance)


def gravity_force(
    a: "Body",
    b: "Body",
    G: float = DEFAULT_G,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    mass_weighted: bool = False,
) -> Vec2:
    """
    Force exerted on body a by body b.

    d = b.position - a.position, r = max(|d|, min_distance),
    F = G / r² (times mₐ·m_b when mass_weighted), directed along d.

    gravity_force(b, a) is the exact negation of gravity_force(a, b): the
    direction flips sign and the magnitude is computed from the same operands.

    Returns:
        Force vector [Fx, Fy]. Zero if the bodies coincide.
    """
    d = b.position - a.position
    r = max(magnitude(d), min_distance)
    strength = G * (a.mass * b.mass) if mass_weighted else G
    return normalized(d) * (strength / (r * r))


def apply_gravity_pairwise(
    bodies: Sequence["Body"],
    G: float = DEFAULT_G,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    mass_weighted: bool = False,
) -> None:
    """
    Apply the inverse-square attraction between all pairs of bodies.

    Uses Newton's third law: each pair is evaluated once and the opposite
    force is applied to the second body.

    Args:
        bodies: Bodies in a fixed order (the World's insertion order).
        G: Strength constant.
        min_distance: Separation clamp, must be > 0.
        mass_weighted: Multiply the strength by both masses.
    """
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            f = gravity_force(bi, bj, G, min_distance, mass_weighted)
            bi.apply_force(f)
            bj.apply_force(-f)


def apply_uniform_field(bodies: Iterable["Body"], g: Vec2) -> None:
    """
    Apply a constant acceleration field (e.g. surface gravity) to every body.

    Has no effect if g is the zero vector.
    """
    g = np.asarray(g, dtype=np.float64)
    if not g.any():
        return
    for b in bodies:
        b.apply_acceleration(g)
