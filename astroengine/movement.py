"""Steering of a game object by acceleration along its heading."""

from __future__ import annotations

import math
from typing import Any


class MovementController:
    """Drives a game object that has ``angle`` (degrees), ``acceleration`` and ``rotation``."""

    def __init__(self, obj: Any) -> None:
        self.object = obj
        self.acceleration = 0.0

    def accelerate(self, a: float) -> None:
        """Accelerate the object by ``a`` along its current heading."""
        angle = math.radians(self.object.angle)
        self.object.acceleration = (math.cos(angle) * a, math.sin(angle) * a, 0.0)
        self.acceleration = a

    def rotate(self, r: float) -> None:
        """Set the rotation rate and re-apply the current acceleration."""
        self.object.rotation = r
        self.accelerate(self.acceleration)