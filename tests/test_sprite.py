import pytest

from astroengine.sprite import MILLIS_PER_FRAME, Sprite


def test_initial_state():
    sprite = Sprite(10, 7, 4)
    assert sprite.current_frame == 0
    assert sprite.animating is True
    assert (sprite.offset_x, sprite.offset_y) == (10 // 2, 7 // 2)
    assert sprite.millis_per_frame == 1000 // 12


def test_short_update_does_not_advance():
    sprite = Sprite(8, 8, 4)
    sprite.update(MILLIS_PER_FRAME - 1)
    assert sprite.current_frame == 0
    assert sprite.frame_millis == MILLIS_PER_FRAME - 1


def test_updates_accumulate():
    sprite = Sprite(8, 8, 4)
    sprite.update(MILLIS_PER_FRAME - 1)
    sprite.update(1)
    assert sprite.current_frame == 1
    assert sprite.frame_millis == 0


def test_large_update_advances_one_frame_keeping_remainder():
    sprite = Sprite(8, 8, 4)
    sprite.update(10 * MILLIS_PER_FRAME + 5)
    assert sprite.current_frame == 1
    assert sprite.frame_millis == 5


def test_looping_wraps_around():
    sprite = Sprite(8, 8, 3)
    for _ in range(3):
        sprite.update(MILLIS_PER_FRAME)
    assert sprite.current_frame == 0
    assert sprite.animating is True


def test_non_looping_stops_animating():
    sprite = Sprite(8, 8, 2, loop=False)
    sprite.update(MILLIS_PER_FRAME)
    assert sprite.animating is True
    sprite.update(MILLIS_PER_FRAME)
    assert sprite.current_frame == 0
    assert sprite.animating is False


def test_set_current_frame_wraps():
    sprite = Sprite(8, 8, 5)
    sprite.current_frame = 12
    assert sprite.current_frame == 12 % 5


def test_zero_frames_raises():
    with pytest.raises(ValueError):
        Sprite(8, 8, 0)