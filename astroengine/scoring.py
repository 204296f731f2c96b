"""World listeners that track the player's lives and the score."""

from __future__ import annotations

from typing import Any, List, Optional

from .world import GameWorld, GameWorldListener


class Player(GameWorldListener):
    """Counts lives, losing one whenever a spaceship leaves the world.

    Listeners are objects with an ``on_player_killed(lives_left)`` method.
    """

    def __init__(self) -> None:
        self.lives = 3
        self.world: Optional[GameWorld] = None
        self._listeners: List[Any] = []

    def on_world_updated(self, world: GameWorld) -> None:
        """Remember the world that is being watched."""
        self.world = world

    def on_object_added(self, world: GameWorld, obj: Any) -> None:
        """Remember the world that is being watched."""
        self.world = world

    def on_object_removed(self, world: GameWorld, obj: Any) -> None:
        self.world = world
        if obj.type == "Spaceship":
            self.lives -= 1
            self._fire_player_killed()

    def add_listener(self, listener: Any) -> None:
        self._listeners.append(listener)

    def add_lives(self, count: int) -> None:
        self.lives += count

    def _fire_player_killed(self) -> None:
        for listener in list(self._listeners):
            listener.on_player_killed(self.lives)


class ScoreKeeper(GameWorldListener):
    """Adds ten points whenever an asteroid leaves the world.

    Listeners are objects with an ``on_score_changed(score)`` method.
    """

    POINTS_PER_ASTEROID = 10

    def __init__(self) -> None:
        self.score = 0
        self.world: Optional[GameWorld] = None
        self._listeners: List[Any] = []

    def on_world_updated(self, world: GameWorld) -> None:
        """Remember the world that is being watched."""
        self.world = world

    def on_object_added(self, world: GameWorld, obj: Any) -> None:
        """Remember the world that is being watched."""
        self.world = world

    def on_object_removed(self, world: GameWorld, obj: Any) -> None:
        self.world = world
        if obj.type == "Asteroid":
            self.score += self.POINTS_PER_ASTEROID
            self._fire_score_changed()

    def add_listener(self, listener: Any) -> None:
        self._listeners.append(listener)

    def _fire_score_changed(self) -> None:
        for listener in list(self._listeners):
            listener.on_score_changed(self.score)