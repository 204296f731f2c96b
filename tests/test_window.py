import pytest

from astroengine.session import Session
from astroengine.window import (
    KEY_ESCAPE,
    KEY_F1,
    GameWindow,
    KeyboardListener,
    MouseListener,
    Window,
    WindowListener,
)


class RecordingKeyboard(KeyboardListener):
    def __init__(self):
        self.events = []

    def on_key_pressed(self, key, x, y):
        self.events.append(("pressed", key, x, y))

    def on_key_released(self, key, x, y):
        self.events.append(("released", key, x, y))

    def on_special_key_pressed(self, key, x, y):
        self.events.append(("special_pressed", key, x, y))

    def on_special_key_released(self, key, x, y):
        self.events.append(("special_released", key, x, y))


class RecordingMouse(MouseListener):
    def __init__(self):
        self.events = []

    def on_mouse_dragged(self, x, y):
        self.events.append(("dragged", x, y))

    def on_mouse_button(self, button, state, x, y):
        self.events.append(("button", button, state, x, y))

    def on_mouse_moved(self, x, y):
        self.events.append(("moved", x, y))


class RecordingWindowListener(WindowListener):
    def __init__(self):
        self.events = []

    def on_window_reshaped(self, w, h):
        self.events.append(("reshaped", w, h))

    def on_window_visible(self, visible):
        self.events.append(("visible", visible))


class FakeWorld:
    def __init__(self):
        self.width = 0
        self.height = 0
        self.updates = []

    def update(self, t):
        self.updates.append(t)


class FakeDisplay:
    def __init__(self):
        self.updates = []
        self.sizes = []

    def update(self, t):
        self.updates.append(t)

    def reshape(self, w, h):
        self.sizes.append((w, h))


def test_keyboard_events_reach_listener():
    window = Window(400, 400)
    listener = RecordingKeyboard()
    window.add_keyboard_listener(listener)
    window.on_key_pressed(ord("a"), 1, 2)
    window.on_key_released(ord("a"), 3, 4)
    window.on_special_key_pressed(100, 5, 6)
    window.on_special_key_released(100, 7, 8)
    assert listener.events == [
        ("pressed", ord("a"), 1, 2),
        ("released", ord("a"), 3, 4),
        ("special_pressed", 100, 5, 6),
        ("special_released", 100, 7, 8),
    ]


def test_removed_keyboard_listener_gets_nothing():
    window = Window(400, 400)
    kept, removed = RecordingKeyboard(), RecordingKeyboard()
    window.add_keyboard_listener(kept)
    window.add_keyboard_listener(removed)
    window.remove_keyboard_listener(removed)
    window.on_key_pressed(ord("x"), 0, 0)
    assert removed.events == []
    assert len(kept.events) == 1


def test_mouse_events_and_removal():
    window = Window(400, 400)
    listener = RecordingMouse()
    window.add_mouse_listener(listener)
    window.on_mouse_dragged(1, 2)
    window.on_mouse_button(0, 1, 3, 4)
    window.on_mouse_moved(5, 6)
    assert listener.events == [("dragged", 1, 2), ("button", 0, 1, 3, 4), ("moved", 5, 6)]
    window.remove_mouse_listener(listener)
    window.on_mouse_moved(9, 9)
    assert len(listener.events) == 3


def test_window_events_and_size_tracking():
    window = Window(400, 400)
    listener = RecordingWindowListener()
    window.add_window_listener(listener)
    window.on_window_reshaped(640, 480)
    window.on_window_visible(1)
    assert listener.events == [("reshaped", 640, 480), ("visible", 1)]
    assert (window.width, window.height) == (640, 480)
    window.remove_window_listener(listener)
    window.on_window_visible(0)
    assert len(listener.events) == 2


def test_escape_exits_without_session():
    window = Window(400, 400)
    with pytest.raises(SystemExit) as info:
        window.on_key_pressed(KEY_ESCAPE, 0, 0)
    assert info.value.code == 0


def test_escape_stops_session():
    window = Window(400, 400, session=Session())
    with pytest.raises(SystemExit) as info:
        window.on_key_pressed(KEY_ESCAPE, 0, 0)
    assert info.value.code == 0


def test_f1_toggles_fullscreen_and_restores_geometry():
    window = Window(400, 300, 10, 20)
    listener = RecordingKeyboard()
    window.add_keyboard_listener(listener)
    window.on_special_key_pressed(KEY_F1, 0, 0)
    assert window.fullscreen is True
    window.on_window_reshaped(1920, 1080)
    window.on_special_key_pressed(KEY_F1, 0, 0)
    assert window.fullscreen is False
    assert (window.width, window.height, window.x, window.y) == (400, 300, 10, 20)
    assert [e[0] for e in listener.events] == ["special_pressed", "special_pressed"]


def test_set_fullscreen_same_mode_is_noop():
    window = Window(400, 300, 10, 20)
    window.set_fullscreen(False)
    assert window.fullscreen is False
    assert (window.width, window.height) == (400, 300)


def test_window_ids_are_distinct():
    first = Window(10, 10)
    second = Window(10, 10)
    assert first.window_id != second.window_id


def test_window_timer_fires_through_session():
    class TimedWindow(Window):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.values = []

        def on_timer(self, value):
            self.values.append(value)

    session = Session()
    window = TimedWindow(100, 100, session=session)
    window.set_timer(50, 7)
    session.advance(49)
    assert window.values == []
    session.advance(1)
    assert window.values == [7]


def test_window_timer_without_session_raises():
    window = Window(100, 100)
    with pytest.raises(RuntimeError):
        window.set_timer(10, 1)


def test_game_window_sizes_world_by_zoom_level():
    window = GameWindow(300, 600)
    world = FakeWorld()
    window.world = world
    assert (world.width, world.height) == (100, 200)
    assert GameWindow.ZOOM_LEVEL == 3


def test_game_window_reshape_resizes_world_and_display():
    window = GameWindow(300, 300)
    world, display = FakeWorld(), FakeDisplay()
    window.world = world
    window.display = display
    window.on_window_reshaped(900, 600)
    assert world.width * GameWindow.ZOOM_LEVEL <= 900 < (world.width + 1) * GameWindow.ZOOM_LEVEL
    assert world.height * GameWindow.ZOOM_LEVEL <= 600 < (world.height + 1) * GameWindow.ZOOM_LEVEL
    assert display.sizes == [(300, 300), (900, 600)]


def test_game_window_idle_passes_time_deltas():
    window = GameWindow(300, 300)
    world, display = FakeWorld(), FakeDisplay()
    window.world = world
    window.display = display
    for elapsed in (40, 100, 100):
        window.on_idle(elapsed)
    assert sum(world.updates) == 100
    assert world.updates[0] == 40
    assert world.updates[-1] == 0
    assert display.updates == world.updates


def test_game_window_idle_without_world_or_display():
    window = GameWindow(300, 300)
    window.on_idle(10)
    world = FakeWorld()
    window.world = world
    window.on_idle(25)
    assert world.updates == [15]