# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. The pairwise force law satisfies
Newton's third law exactly, so total linear momentum of an isolated World is
conserved up to rounding. Energy is only approximately conserved by the
integrators and is reported for diagnostics, not guaranteed.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..constants import DEFAULT_G, DEFAULT_MIN_DISTANCE
from ..util import magnitude

if TYPE_CHECKING:
    from ..types import Body


def kinetic_energy(bodies: Sequence["Body"]) -> float:
    """
    Total kinetic energy T = Σ ½·m·v².
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def potential_energy(
    bodies: Sequence["Body"],
    G: float = DEFAULT_G,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    mass_weighted: bool = False,
) -> float:
    """
    Potential energy of the pairwise law, U = Σ -G/r (or -G·mᵢ·mⱼ/r).

    Below min_distance the force is constant in magnitude, so the potential
    there continues linearly: U(r) = -G/r₀ - G·(r₀ - r)/r₀².
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            bi, bj = bodies[i], bodies[j]
            strength = G * (bi.mass * bj.mass) if mass_weighted else G
            r = magnitude(bj.position - bi.position)
            if r >= min_distance:
                u -= strength / r
            else:
                u -= strength / min_distance + strength * (min_distance - r) / (min_distance * min_distance)
    return u


def linear_momentum(bodies: Sequence["Body"]) -> np.ndarray:
    """
    Total linear momentum P = Σ m·v.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def center_of_mass(bodies: Sequence["Body"]) -> np.ndarray:
    """Mass-weighted mean position. Raises ValueError for an empty sequence."""
    if not bodies:
        raise ValueError("center_of_mass of an empty set of bodies")
    total = 0.0
    acc = np.zeros(2, dtype=np.float64)
    for b in bodies:
        acc += b.mass * b.position
        total += b.mass
    return acc / total
