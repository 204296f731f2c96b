"""Quaternions for rotating three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

Vector3 = Tuple[float, float, float]


def _vec(values: Iterable[float]) -> Vector3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vector3, s: float) -> Vector3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with real part ``w`` and imaginary vector ``v``.

    The default value is the unit quaternion (1, 0, 0, 0).
    """

    w: float = 1.0
    v: Vector3 = field(default=(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "v", _vec(self.v))

    @classmethod
    def from_axis_angle(cls, axis: Iterable[float], angle: float) -> "Quaternion":
        """Build a rotation quaternion from an axis and an angle in radians.

        The axis is normalised. The real part is ``cos(angle)`` and the
        imaginary part is the unit axis scaled by ``sin(angle / 2)``.
        """
        a = _vec(axis)
        length = math.sqrt(_dot(a, a))
        if length == 0.0:
            raise ValueError("rotation axis must not be the zero vector")
        unit_axis = _scale(a, 1.0 / length)
        return cls(math.cos(angle), _scale(unit_axis, math.sin(angle / 2)))

    def __add__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(self.w + other.w, _add(self.v, other.v))

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(self.w - other.w, _sub(self.v, other.v))

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        return self.cross(other)

    def __truediv__(self, scalar: float) -> "Quaternion":
        return Quaternion(self.w / scalar, (self.v[0] / scalar, self.v[1] / scalar, self.v[2] / scalar))

    def dot(self, other: "Quaternion") -> float:
        """Four-dimensional dot product."""
        return self.w * other.w + _dot(self.v, other.v)

    def cross(self, other: "Quaternion") -> "Quaternion":
        """Hamilton product of this quaternion and ``other``."""
        w = self.w * other.w - _dot(self.v, other.v)
        v = _add(_add(_scale(other.v, self.w), _scale(self.v, other.w)), _cross(self.v, other.v))
        return Quaternion(w, v)

    def conjugate(self) -> "Quaternion":
        """Complex conjugate: the imaginary part negated."""
        return Quaternion(self.w, _scale(self.v, -1.0))

    def inverse(self) -> "Quaternion":
        """The conjugate divided by the norm."""
        return self.conjugate() / self.norm()

    def norm(self) -> float:
        """Length of the quaternion as a four-dimensional vector."""
        return math.sqrt(self.w * self.w + _dot(self.v, self.v))

    def unit(self) -> "Quaternion":
        """This quaternion scaled to norm one."""
        return self / self.norm()

    def rotate_vector(self, vector: Iterable[float]) -> Vector3:
        """Rotate ``vector`` by this quaternion (q * v * conj(q))."""
        rotated = self.cross(Quaternion(0.0, _vec(vector))).cross(self.conjugate())
        return rotated.v