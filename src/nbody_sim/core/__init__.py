# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: pairwise inverse-square gravity, uniform fields.
    - Integrators: semi-implicit Euler, constant-acceleration (Taylor) step.
    - Invariants: energy, momentum and centre of mass for diagnostics.

Typical usage:
    from nbody_sim.core import apply_gravity_pairwise, semi_implicit_euler_step

    apply_gravity_pairwise(bodies, G=1e7, min_distance=1.0)
    for b in bodies:
        semi_implicit_euler_step(b, dt=1/60)
"""
from .forces import (
    gravity_force,
    apply_gravity_pairwise,
    apply_uniform_field,
)
from .integrators import semi_implicit_euler_step, constant_acceleration_step, INTEGRATORS
from .invariants import kinetic_energy, potential_energy, linear_momentum, center_of_mass

__all__ = [
    # Forces
    "gravity_force",
    "apply_gravity_pairwise",
    "apply_uniform_field",
    # Integrators
    "semi_implicit_euler_step",
    "constant_acceleration_step",
    "INTEGRATORS",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "linear_momentum",
    "center_of_mass",
]
