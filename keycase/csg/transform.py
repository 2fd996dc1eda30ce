"""Ordered transform chains.

A ``Transform`` is a sequence of translate and rotate steps applied to a
shape in order, first step innermost.  Composition is associative but not
commutative: ``Transform().rotate(a).translate(t)`` and
``Transform().translate(t).rotate(a)`` place a shape differently.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .nodes import Node, Vec3
from .ops import axis_angles, rotate, translate, vec3


@dataclass(frozen=True)
class Step:
    kind: str       # "translate" | "rotate"
    vector: Vec3


@dataclass(frozen=True)
class Transform:
    steps: tuple[Step, ...] = ()

    # ── building ──────────────────────────────────────────────────

    def translate(self, offset: Sequence[float]) -> Transform:
        return Transform(self.steps + (Step("translate", vec3(offset)),))

    def rotate(self, angles: Sequence[float]) -> Transform:
        return Transform(self.steps + (Step("rotate", vec3(angles)),))

    def rotate_about(self, angle: float, axis: Sequence[float]) -> Transform:
        return self.rotate(axis_angles(angle, axis))

    def then(self, other: Transform) -> Transform:
        """This chain followed by *other*."""
        return Transform(self.steps + other.steps)

    # ── using ─────────────────────────────────────────────────────

    def apply(self, shape: Node) -> Node:
        for step in self.steps:
            if step.kind == "translate":
                shape = translate(step.vector, shape)
            else:
                shape = rotate(step.vector, shape)
        return shape

    def apply_point(self, point: Sequence[float]) -> Vec3:
        p = vec3(point)
        for step in self.steps:
            if step.kind == "translate":
                p = add(p, step.vector)
            else:
                p = rotate_point(p, step.vector)
        return p

    def inverse(self) -> Transform:
        """The chain that undoes this one."""
        steps: list[Step] = []
        for step in reversed(self.steps):
            if step.kind == "translate":
                steps.append(Step("translate", scale(step.vector, -1.0)))
                continue
            # rotate([x, y, z]) is Rz·Ry·Rx, so undo Z first, then Y, then X.
            x, y, z = step.vector
            for angles in ((0.0, 0.0, -z), (0.0, -y, 0.0), (-x, 0.0, 0.0)):
                if any(angles):
                    steps.append(Step("rotate", angles))
        return Transform(tuple(steps))


# ── vector helpers ─────────────────────────────────────────────────


def add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def scale(a: Sequence[float], k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def rotate_point(point: Sequence[float], angles: Sequence[float]) -> Vec3:
    """Rotate *point* about X, then Y, then Z (right-handed, radians)."""
    x, y, z = point
    ax, ay, az = angles
    if ax:
        c, s = math.cos(ax), math.sin(ax)
        y, z = y * c - z * s, y * s + z * c
    if ay:
        c, s = math.cos(ay), math.sin(ay)
        x, z = x * c + z * s, -x * s + z * c
    if az:
        c, s = math.cos(az), math.sin(az)
        x, y = x * c - y * s, x * s + y * c
    return (x, y, z)
