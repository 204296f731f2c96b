"""The game world: its objects, their collisions and its listeners.

Game objects are duck typed. The world expects each object to have a
``world`` attribute and ``update(t)``, ``collision_test(other)`` and
``on_collision(objects)`` methods, and to be hashable and weakly referable.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Dict, List, Tuple


class GameWorldListener(ABC):
    """Receives notifications about changes to a game world."""

    @abstractmethod
    def on_world_updated(self, world: "GameWorld") -> None:
        """Called at the end of every world update."""

    @abstractmethod
    def on_object_added(self, world: "GameWorld", obj: Any) -> None:
        """Called after an object has been added."""

    @abstractmethod
    def on_object_removed(self, world: "GameWorld", obj: Any) -> None:
        """Called after an object has been removed."""


class GameWorld:
    """A rectangular world centred on the origin that holds game objects."""

    def __init__(self, width: int = 200, height: int = 200) -> None:
        self.width = width
        self.height = height
        self._objects: List[Any] = []
        self._collisions: Dict[Any, List[Any]] = {}
        self._to_remove: deque = deque()
        self._listeners: List[GameWorldListener] = []

    @property
    def objects(self) -> Tuple[Any, ...]:
        """The objects in the world, in the order they were added."""
        return tuple(self._objects)

    def update(self, t: int) -> None:
        """Advance the world by ``t`` milliseconds."""
        for obj in list(self._objects):
            obj.update(t)
        self._update_collisions()
        while self._to_remove:
            obj = self._to_remove.popleft()()
            if obj is not None:
                self.remove_object(obj)
        for listener in list(self._listeners):
            listener.on_world_updated(self)

    def add_object(self, obj: Any) -> None:
        """Add ``obj`` to the world and tell the listeners."""
        self._objects.append(obj)
        self._collisions[obj] = []
        obj.world = self
        for listener in list(self._listeners):
            listener.on_object_added(self, obj)

    def remove_object(self, obj: Any) -> None:
        """Remove ``obj`` from the world and tell the listeners."""
        if obj is None:
            return
        self._objects = [o for o in self._objects if o is not obj]
        self._collisions.pop(obj, None)
        obj.world = None
        for listener in list(self._listeners):
            listener.on_object_removed(self, obj)

    def flag_for_removal(self, obj: Any) -> None:
        """Remove ``obj`` once the current update has finished."""
        self._to_remove.append(weakref.ref(obj))

    def get_collisions(self, obj: Any) -> List[Any]:
        """The objects that ``obj`` collided with in the last update."""
        return list(self._collisions.setdefault(obj, []))

    def add_listener(self, listener: GameWorldListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameWorldListener) -> None:
        self._listeners = [item for item in self._listeners if item is not listener]

    def wrap_xy(self, x: float, y: float) -> Tuple[float, float]:
        """Wrap a position that has left the world back in from the other side."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("world dimensions must be positive to wrap positions")
        half_w = int(self.width / 2)
        half_h = int(self.height / 2)
        while x > half_w:
            x -= self.width
        while y > half_h:
            y -= self.height
        while x < -half_w:
            x += self.width
        while y < -half_h:
            y += self.height
        return x, y

    def _update_collisions(self) -> None:
        for collisions in self._collisions.values():
            collisions.clear()
        for first, collisions in self._collisions.items():
            for second in self._collisions:
                if second is not first and first.collision_test(second):
                    collisions.append(second)
        for obj, collisions in list(self._collisions.items()):
            if collisions:
                obj.on_collision(list(collisions))