import pytest

from quickshapes.touch_area import TouchArea
from quickshapes.touch_event import (
    MOUSE_EVENT_ID,
    PIXEL_PER_WHEEL_STEP,
    MouseEvent,
    TouchPoint,
    TouchPointState,
)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def mouse(x, y, right=False):
    return MouseEvent(global_pos=(x, y), local_pos=(x, y), window_pos=(x, y), right_button=right)


def point(pid, state, pos, start=None, last=None):
    start = start if start is not None else pos
    last = last if last is not None else pos
    return TouchPoint(
        id=pid,
        state=state,
        screen_pos=pos,
        start_screen_pos=start,
        last_screen_pos=last,
        pos=pos,
        start_pos=start,
        scene_pos=pos,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def area(clock):
    return TouchArea(clock=clock)


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_mouse_click_emits_click_and_touch_up(area, clock):
    clicks = record(area.click)
    ups = record(area.touch_up)
    clock.now = 5.0
    assert area.mouse_press(mouse(10, 10)) is True
    assert area.pressed is True
    assert area.first_touch.id == MOUSE_EVENT_ID
    area.mouse_release(mouse(11, 10))
    assert len(clicks) == 1
    assert len(ups) == 1
    assert ups[0][1:] == (False, False)
    assert area.pressed is False
    assert area.first_touch.is_valid is False


def test_mouse_drag_is_not_a_click(area, clock):
    clicks = record(area.click)
    moves = record(area.touch_move)
    clock.now = 5.0
    area.mouse_press(mouse(10, 10))
    area.mouse_move(mouse(15, 20))
    area.mouse_release(mouse(40, 40))
    assert clicks == []
    event = moves[0][0]
    assert (event.delta_x, event.delta_y) == (5, 10)
    assert (event.origin_x, event.origin_y) == (10, 10)


def test_double_click_detected_by_time(area, clock):
    doubles = record(area.double_click)
    clock.now = 1.0
    area.mouse_press(mouse(0, 0))
    area.mouse_release(mouse(0, 0))
    assert doubles == []
    clock.now = 1.2
    area.mouse_press(mouse(0, 0))
    area.mouse_release(mouse(0, 0))
    assert len(doubles) == 1


def test_short_click_when_released_before_timeout(area, clock):
    area.click_duration_enabled = True
    shorts = record(area.short_click)
    clock.now = 10.0
    area.mouse_press(mouse(3, 3))
    clock.now = 10.1
    area.mouse_release(mouse(3, 3))
    assert len(shorts) == 1


def test_long_click_after_timeout(area, clock):
    area.click_duration_enabled = True
    longs = record(area.long_click)
    shorts = record(area.short_click)
    clock.now = 10.0
    area.mouse_press(mouse(3, 3))
    clock.now = 11.0
    area.long_click_timeout()
    area.mouse_release(mouse(3, 3))
    assert len(longs) == 1
    assert shorts == []


def test_right_click(area, clock):
    area.click_duration_enabled = True
    rights = record(area.right_click)
    shorts = record(area.short_click)
    clock.now = 10.0
    area.mouse_press(mouse(3, 3, right=True))
    area.mouse_release(mouse(3, 3, right=True))
    assert len(rights) == 1
    assert rights[0][0].is_right_button is True
    assert shorts == []


def test_second_touch_disabled_is_not_grabbed(area):
    accepted = area.touch_event([
        point(0, TouchPointState.PRESSED, (1, 1)),
        point(1, TouchPointState.PRESSED, (50, 50)),
    ])
    assert accepted is True
    assert area.grabbed_touch_ids == [0]


def test_second_touch_becomes_first_when_first_released(area):
    area.second_touch_enabled = True
    downs = record(area.touch_down)
    area.touch_event([point(0, TouchPointState.PRESSED, (1, 1))])
    area.touch_event([
        point(0, TouchPointState.STATIONARY, (1, 1)),
        point(1, TouchPointState.PRESSED, (50, 50)),
    ])
    assert area.grabbed_touch_ids == [1]
    assert [args[1] for args in downs] == [False, True]
    area.touch_event([
        point(0, TouchPointState.RELEASED, (1, 1)),
        point(1, TouchPointState.STATIONARY, (50, 50)),
    ])
    assert area.first_touch.id == 1
    assert area.second_touch.is_valid is False
    assert area.pressed is True


def test_move_of_unknown_touch_is_rejected(area):
    area.touch_event([point(0, TouchPointState.PRESSED, (1, 1))])
    accepted = area.touch_event([point(7, TouchPointState.MOVED, (9, 9), start=(8, 8))])
    assert accepted is False


def test_touch_tap_clicks(area, clock):
    clicks = record(area.click)
    clock.now = 3.0
    area.touch_event([point(2, TouchPointState.PRESSED, (5, 5))])
    area.touch_event([point(2, TouchPointState.RELEASED, (5, 5))])
    assert len(clicks) == 1
    assert clicks[0][0].is_touch is True


def test_wheel_pixel_delta_and_acceptance(area):
    scrolls = record(area.scroll_event)
    assert area.wheel(pixel_delta=(3, -4)) is False
    assert scrolls == [(3, -4)]
    area.scroll_event.connect(lambda dx, dy: area.scroll_event_was_accepted())
    assert area.wheel(pixel_delta=(1, 1)) is True


def test_wheel_angle_delta_one_step(area):
    scrolls = record(area.scroll_event)
    area.wheel(angle_delta=(0, 120))
    assert scrolls == [(0, PIXEL_PER_WHEEL_STEP)]


def test_hover_enter_and_leave(area):
    changes = record(area.mouse_over_changed)
    area.hover_enter()
    assert area.mouse_over is True
    area.hover_leave()
    assert area.mouse_over is False
    assert len(changes) == 2


def test_mouse_ungrab_cancels(area, clock):
    ups = record(area.touch_up)
    canceled = record(area.touch_canceled)
    clicks = record(area.click)
    area.mouse_press(mouse(1, 1))
    area.mouse_ungrab()
    assert ups[0][2] is True
    assert len(canceled) == 1
    assert clicks == []
    assert area.pressed is False


def test_touch_cancel_does_not_emit_touch_canceled(area):
    canceled = record(area.touch_canceled)
    ups = record(area.touch_up)
    area.touch_event([point(0, TouchPointState.PRESSED, (1, 1))])
    area.touch_cancel()
    assert canceled == []
    assert len(ups) == 1
    assert area.first_touch.is_valid is False


def test_rejected_touch_down_resets_state(area):
    area.touch_down.connect(lambda touch, second: setattr(touch, "accepted", False))
    accepted = area.mouse_press(mouse(1, 1))
    assert accepted is False
    assert area.pressed is False
    assert area.first_touch.is_valid is False


def test_mouse_double_click_event(area):
    doubles = record(area.double_click)
    area.mouse_double_click(mouse(4, 6))
    assert (doubles[0][0].x, doubles[0][0].y) == (4, 6)