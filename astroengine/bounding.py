"""Bounding shapes used to test game objects for collisions."""

from __future__ import annotations

import math
import weakref
from typing import Any, Optional


class BoundingShape:
    """A named shape attached to a game object.

    The shape holds only a weak reference to its game object, so it never
    keeps the object alive. The base shape never collides with anything.
    """

    def __init__(self, type_name: str, game_object: Any = None) -> None:
        self.type = type_name
        self._object_ref: Optional[weakref.ReferenceType] = None
        self.game_object = game_object

    @property
    def game_object(self) -> Any:
        """The attached game object, or None if it is unset or gone."""
        return self._object_ref() if self._object_ref is not None else None

    @game_object.setter
    def game_object(self, obj: Any) -> None:
        self._object_ref = weakref.ref(obj) if obj is not None else None

    def collision_test(self, other: "BoundingShape") -> bool:
        """Whether this shape overlaps ``other``."""
        return False


class BoundingSphere(BoundingShape):
    """A sphere of a given radius centred on its game object's position."""

    TYPE_NAME = "BoundingSphere"

    def __init__(self, game_object: Any = None, radius: float = 0.0) -> None:
        super().__init__(self.TYPE_NAME, game_object)
        self.radius = float(radius)

    def _position(self):
        obj = self.game_object
        if obj is None:
            raise ValueError("bounding sphere has no game object")
        return obj.position

    def collision_test(self, other: BoundingShape) -> bool:
        """True when ``other`` is a sphere touching or overlapping this one."""
        if self.type != other.type:
            return False
        p1 = self._position()
        p2 = other._position()
        distance_sqr = sum((b - a) ** 2 for a, b in zip(p1, p2))
        return distance_sqr <= math.pow(self.radius + other.radius, 2)