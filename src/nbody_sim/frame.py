# MIT License (see LICENSE)
"""
Hierarchical 2D coordinate frames.

A Frame is a node in a tree of affine transforms. Each frame maps points from
its own local space into its parent's space by

    p_parent = position + Rot(rotation) · (scale ⊙ p_local)

i.e. scale first, then rotate (counterclockwise, radians), then translate. A
frame without a parent is a root and its parent space is the global space.
to_global() composes these maps from the leaf up to the root; to_local() is
the exact inverse, applied from the root down.

Frames hold a non-owning reference to their parent. Assigning a parent that
would make a frame its own ancestor raises ValueError immediately, so the
tree is always acyclic and conversions always terminate.

Typical usage (a view that tracks a moving body):
    screen = Frame(position=(320, 240), scale=(1, -1))
    view = Frame(parent=screen)
    view.follow(world.body(ship))
    pixel = view.to_global(local_point)
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from .util import Vec2, f64, vec2, rotate, angle, magnitude

if TYPE_CHECKING:
    from .types import Body


def _check_scale(scale) -> Vec2:
    s = vec2(scale)
    if s[0] == 0.0 or s[1] == 0.0:
        raise ValueError(f"Frame scale components must be non-zero, got {s.tolist()}")
    return s


@dataclass(eq=False)
class Frame:
    """
    One level of a transform hierarchy.

    Attributes:
        parent: Enclosing frame, or None for a root. Not owned.
        position: Origin of this frame in the parent's space.
        rotation: Counterclockwise rotation relative to the parent, radians.
        scale: Per-axis scale [sx, sy] applied before rotation. Both
               components must be non-zero (a negative component mirrors
               that axis, e.g. (1, -1) for y-down screen space).
    """
    parent: "Frame | None" = None
    position: Vec2 | tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vec2 | tuple[float, float] = (1.0, 1.0)

    def __setattr__(self, name: str, value) -> None:
        if name == "parent":
            self._check_parent(value)
        elif name == "position":
            value = vec2(value)
        elif name == "rotation":
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"Frame rotation must be finite, got {value!r}")
        elif name == "scale":
            value = _check_scale(value)
        super().__setattr__(name, value)

    def _check_parent(self, parent: "Frame | None") -> None:
        node = parent
        while node is not None:
            if node is self:
                raise ValueError("Frame parent would create a cycle")
            node = node.parent

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_parent(self, parent: "Frame | None") -> None:
        self.parent = parent

    def set_position(self, position: Vec2 | tuple[float, float]) -> None:
        self.position = position

    def set_rotation(self, rotation: float) -> None:
        self.rotation = rotation

    def follow(self, body: "Body") -> None:
        """
        Move this frame's origin onto the body and turn its +x axis along the
        body's velocity. The heading is left unchanged while the body is at
        rest.

        Rotation is measured from the parent's +x axis toward its +y axis,
        the convention of util.angle and util.rotate, so the heading is
        angle(velocity) with no sign flip whichever way the parent's y axis
        points on screen. A renderer that measures angles the other way
        negates the rotation when drawing, not here.
        """
        self.position = body.position
        if magnitude(body.velocity) > 0.0:
            self.rotation = angle(body.velocity)

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def ancestors(self) -> Iterator["Frame"]:
        """Parent, grandparent, ... up to and including the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def root(self) -> "Frame":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for a root)."""
        return sum(1 for _ in self.ancestors())

    # ------------------------------------------------------------------
    # Single-level transform
    # ------------------------------------------------------------------

    def to_parent(self, point: Vec2 | tuple[float, float]) -> Vec2:
        """Map a point from this frame's local space into its parent's space."""
        p = f64(point)
        return self.position + rotate(self.scale * p, self.rotation)

    def from_parent(self, point: Vec2 | tuple[float, float]) -> Vec2:
        """Inverse of to_parent: translate back, rotate back, unscale."""
        p = f64(point)
        return rotate(p - self.position, -self.rotation) / self.scale

    # ------------------------------------------------------------------
    # Whole-chain transform
    # ------------------------------------------------------------------

    def to_global(self, point: Vec2 | tuple[float, float]) -> Vec2:
        """
        Map a local point into global (root parent) space.

        Applies this frame's transform, then each ancestor's, leaf first.
        """
        p = self.to_parent(point)
        for frame in self.ancestors():
            p = frame.to_parent(p)
        return p

    def to_local(self, point: Vec2 | tuple[float, float]) -> Vec2:
        """
        Map a global point into this frame's local space.

        Undoes each transform from the root down to this frame, so
        to_local(to_global(p)) == p up to rounding for any depth.
        """
        chain = [self, *self.ancestors()]
        p = f64(point)
        for frame in reversed(chain):
            p = frame.from_parent(p)
        return p

    def matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix mapping local points into the parent's space."""
        c, s = math.cos(self.rotation), math.sin(self.rotation)
        sx, sy = self.scale
        return np.array([
            [c * sx, -s * sy, self.position[0]],
            [s * sx,  c * sy, self.position[1]],
            [0.0,     0.0,    1.0],
        ], dtype=np.float64)

    def global_matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix mapping local points into global space."""
        m = self.matrix()
        for frame in self.ancestors():
            m = frame.matrix() @ m
        return m

    def to_global_points(self, points) -> np.ndarray:
        """
        Vectorised to_global for an (N, 2) array, e.g. a predicted trajectory.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        m = self.global_matrix()
        return pts @ m[:2, :2].T + m[:2, 2]

    def to_local_points(self, points) -> np.ndarray:
        """Vectorised to_local for an (N, 2) array."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        m = np.linalg.inv(self.global_matrix())
        return pts @ m[:2, :2].T + m[:2, 2]
