"""A small engine for 2D arcade games: world, collisions, scoring, timers, input dispatch, shapes, sprites and images."""

__version__ = "0.1.0"

__all__ = [
    "bounding",
    "image",
    "image_manager",
    "movement",
    "quaternion",
    "scoring",
    "session",
    "shape",
    "sprite",
    "window",
    "world",
]