"""Frame timing for animated sprites."""

from __future__ import annotations

MILLIS_PER_FRAME = 1000 // 12


class Sprite:
    """An animated sprite of a given size that steps through its frames over time."""

    def __init__(self, width: int, height: int, frames: int, loop: bool = True) -> None:
        if frames <= 0:
            raise ValueError("a sprite needs at least one frame")
        self.width = width
        self.height = height
        self.offset_x = width // 2
        self.offset_y = height // 2
        self.frames = frames
        self.loop_animation = loop
        self.animating = True
        self.frame_millis = 0
        self.millis_per_frame = MILLIS_PER_FRAME
        self._current_frame = 0

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @current_frame.setter
    def current_frame(self, frame: int) -> None:
        self._current_frame = frame % self.frames

    def update(self, t: int) -> None:
        """Advance the animation clock by ``t`` milliseconds, at most one frame."""
        self.frame_millis += t
        if self.frame_millis < self.millis_per_frame:
            return
        self.frame_millis %= self.millis_per_frame
        self._current_frame += 1
        if self._current_frame >= self.frames:
            if self.loop_animation:
                self._current_frame %= self.frames
            else:
                self._current_frame = 0
                self.animating = False