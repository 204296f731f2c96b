"""Application windows that route input events to listeners and drive a game world."""

from __future__ import annotations

import itertools
import sys
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

KEY_ESCAPE = 27
KEY_F1 = 1

_window_ids = itertools.count(1)


class KeyboardListener(ABC):
    """Receives key presses and releases from a window."""

    @abstractmethod
    def on_key_pressed(self, key: int, x: int, y: int) -> None:
        """An ordinary key went down."""

    @abstractmethod
    def on_key_released(self, key: int, x: int, y: int) -> None:
        """An ordinary key came up."""

    @abstractmethod
    def on_special_key_pressed(self, key: int, x: int, y: int) -> None:
        """A special key (function or arrow key) went down."""

    @abstractmethod
    def on_special_key_released(self, key: int, x: int, y: int) -> None:
        """A special key came up."""


class MouseListener(ABC):
    """Receives mouse movement and button events from a window."""

    @abstractmethod
    def on_mouse_dragged(self, x: int, y: int) -> None:
        """The mouse moved with a button held."""

    @abstractmethod
    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None:
        """A mouse button changed state."""

    @abstractmethod
    def on_mouse_moved(self, x: int, y: int) -> None:
        """The mouse moved with no button held."""


class WindowListener(ABC):
    """Receives window size and visibility changes."""

    @abstractmethod
    def on_window_reshaped(self, w: int, h: int) -> None:
        """The window was resized."""

    @abstractmethod
    def on_window_visible(self, visible: int) -> None:
        """The window's visibility changed."""


def _without(items: List[Any], item: Any) -> List[Any]:
    return [entry for entry in items if entry is not item]


class Window:
    """A window with a size, a position and a fullscreen mode.

    Pressing Escape stops the session (or the program when there is no
    session); pressing F1 toggles fullscreen. All events are passed on to
    the registered listeners.
    """

    def __init__(
        self,
        width: int,
        height: int,
        x: int = -1,
        y: int = -1,
        title: str = "",
        session: Any = None,
    ) -> None:
        self.window_id = next(_window_ids)
        self.title = title
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.fullscreen = False
        self.session = session
        self.redisplay_pending = False
        self.last_timer_value: Optional[int] = None
        self._saved_geometry: Tuple[int, int, int, int] = (width, height, x, y)
        self._keyboard_listeners: List[KeyboardListener] = []
        self._mouse_listeners: List[MouseListener] = []
        self._window_listeners: List[WindowListener] = []

    def on_display(self) -> None:
        """Redraw the window, clearing any pending redisplay request."""
        self.redisplay_pending = False

    def on_idle(self, elapsed: int) -> None:
        """Called when there are no other events; ``elapsed`` is milliseconds since start."""

    def on_timer(self, value: int) -> None:
        """Record the value of a window timer set with :meth:`set_timer`."""
        self.last_timer_value = value

    def set_timer(self, msecs: int, value: int) -> int:
        """Ask the session to call :meth:`on_timer` with ``value`` after ``msecs``."""
        if self.session is None:
            raise RuntimeError("window has no session to run timers")
        return self.session.set_timer(msecs, self, value)

    def _stop(self) -> None:
        if self.session is not None:
            self.session.stop()
        else:
            sys.exit(0)

    def on_key_pressed(self, key: int, x: int, y: int) -> None:
        if key == KEY_ESCAPE:
            self._stop()
        for listener in list(self._keyboard_listeners):
            listener.on_key_pressed(key, x, y)

    def on_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_key_released(key, x, y)

    def on_special_key_pressed(self, key: int, x: int, y: int) -> None:
        if key == KEY_F1:
            self.set_fullscreen(not self.fullscreen)
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_pressed(key, x, y)

    def on_special_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_released(key, x, y)

    def on_mouse_dragged(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_dragged(x, y)

    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_button(button, state, x, y)

    def on_mouse_moved(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_moved(x, y)

    def on_window_reshaped(self, w: int, h: int) -> None:
        """Record the new size and tell the window listeners."""
        self.width = w
        self.height = h
        for listener in list(self._window_listeners):
            listener.on_window_reshaped(w, h)

    def on_window_visible(self, visible: int) -> None:
        for listener in list(self._window_listeners):
            listener.on_window_visible(visible)

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Enter or leave fullscreen, restoring the saved geometry on leaving."""
        if fullscreen == self.fullscreen:
            return
        self.fullscreen = fullscreen
        if fullscreen:
            self._saved_geometry = (self.width, self.height, self.x, self.y)
        else:
            self.width, self.height, self.x, self.y = self._saved_geometry

    def add_keyboard_listener(self, listener: KeyboardListener) -> None:
        self._keyboard_listeners.append(listener)

    def remove_keyboard_listener(self, listener: KeyboardListener) -> None:
        self._keyboard_listeners = _without(self._keyboard_listeners, listener)

    def add_mouse_listener(self, listener: MouseListener) -> None:
        self._mouse_listeners.append(listener)

    def remove_mouse_listener(self, listener: MouseListener) -> None:
        self._mouse_listeners = _without(self._mouse_listeners, listener)

    def add_window_listener(self, listener: WindowListener) -> None:
        self._window_listeners.append(listener)

    def remove_window_listener(self, listener: WindowListener) -> None:
        self._window_listeners = _without(self._window_listeners, listener)


class GameWindow(Window):
    """A window that updates a game world and a display.

    The world is given the window size divided by the zoom level; the
    display is given the full window size. The display is any object with
    ``update(t)`` and ``reshape(w, h)`` methods.
    """

    ZOOM_LEVEL = 3

    def __init__(
        self,
        width: int,
        height: int,
        x: int = -1,
        y: int = -1,
        title: str = "GameWindow",
        session: Any = None,
    ) -> None:
        super().__init__(width, height, x, y, title, session)
        self._world: Optional[Any] = None
        self._display: Optional[Any] = None
        self._last_time = 0

    @property
    def world(self) -> Optional[Any]:
        return self._world

    @world.setter
    def world(self, world: Optional[Any]) -> None:
        self._world = world
        self.update_world_size()

    @property
    def display(self) -> Optional[Any]:
        return self._display

    @display.setter
    def display(self, display: Optional[Any]) -> None:
        self._display = display
        self.update_display_size()

    def on_idle(self, elapsed: int) -> None:
        """Update the world and display by the time since the previous idle call."""
        super().on_idle(elapsed)
        dt = elapsed - self._last_time
        self._last_time = elapsed
        if self._world is not None:
            self._world.update(dt)
        if self._display is not None:
            self._display.update(dt)
        self.redisplay_pending = True

    def on_window_reshaped(self, w: int, h: int) -> None:
        super().on_window_reshaped(w, h)
        self.update_world_size()
        self.update_display_size()

    def update_world_size(self) -> None:
        """Size the world to the window scaled down by the zoom level."""
        if self._world is not None:
            self._world.width = self.width // self.ZOOM_LEVEL
            self._world.height = self.height // self.ZOOM_LEVEL

    def update_display_size(self) -> None:
        """Size the display to the whole window."""
        if self._display is not None:
            self._display.reshape(self.width, self.height)