"""An input area that turns mouse and touch input into clicks, drags and scrolls."""

from __future__ import annotations

import copy
import math
import time
from typing import Callable, Iterable, Optional

from quickshapes.touch_event import (
    DEFAULT_IS_AT_ORIGIN_TOLERANCE,
    DEFAULT_LONG_CLICK_DURATION,
    DOUBLE_CLICK_DURATION,
    PIXEL_PER_WHEEL_STEP,
    MouseEvent,
    TouchAreaEvent,
    TouchPoint,
    TouchPointState,
)

Clock = Callable[[], float]

_WHEEL_UNITS_PER_STEP = 120.0


class _Signal:
    """A list of callbacks that are called with the emitted arguments."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., object]] = []

    def connect(self, slot: Callable[..., object]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., object]) -> None:
        self._slots.remove(slot)

    def emit(self, *args: object) -> None:
        for slot in list(self._slots):
            slot(*args)


def _round_half_away(value: float) -> int:
    if value >= 0.0:
        return int(math.floor(value + 0.5))
    return int(math.ceil(value - 0.5))


class TouchArea:
    """Tracks up to two touches or a mouse and reports what the user did.

    Callbacks are attached to the signal attributes, for example
    ``area.click.connect(handler)``. Touch events passed to handlers may be
    rejected by setting ``accepted`` to False.
    """

    def __init__(self, *, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._pressed = False
        self.mouse_over = False
        self.mouse_over_enabled = False
        self.click_duration_enabled = False
        self.long_click_duration = DEFAULT_LONG_CLICK_DURATION
        self.second_touch_enabled = False
        self.grabbed_touch_ids: list[int] = []
        self._first_touch = TouchAreaEvent()
        self._second_touch = TouchAreaEvent()
        self._mouse_last = TouchAreaEvent()
        self._last_click_time = clock()
        self._long_click_deadline: Optional[float] = None
        self._scroll_event_accepted = False

        self.touch_down = _Signal()
        self.touch_move = _Signal()
        self.touch_up = _Signal()
        self.touch_canceled = _Signal()
        self.click = _Signal()
        self.short_click = _Signal()
        self.long_click = _Signal()
        self.right_click = _Signal()
        self.double_click = _Signal()
        self.scroll_event = _Signal()
        self.pressed_changed = _Signal()
        self.mouse_over_changed = _Signal()

    # ------------------------------------------------------------ state

    @property
    def pressed(self) -> bool:
        """True while at least one touch or mouse button is down in this area."""
        return self._pressed

    @pressed.setter
    def pressed(self, value: bool) -> None:
        self._pressed = value
        self.pressed_changed.emit()

    @property
    def first_touch(self) -> TouchAreaEvent:
        """The first touch or click; invalid if there is none."""
        return self._first_touch

    @property
    def second_touch(self) -> TouchAreaEvent:
        """The second touch; invalid if there is none."""
        return self._second_touch

    def _long_click_timer_active(self) -> bool:
        return self._long_click_deadline is not None and self._clock() < self._long_click_deadline

    def long_click_timeout(self) -> None:
        """Called when the long click duration has passed since the first touch went down."""
        self._long_click_deadline = None
        if self._first_touch.is_at_origin(DEFAULT_IS_AT_ORIGIN_TOLERANCE * 2):
            self.long_click.emit(self._first_touch)

    # ------------------------------------------------------------ mouse

    def mouse_press(self, event: MouseEvent) -> bool:
        """Handle a mouse press; return whether it was accepted."""
        touch = TouchAreaEvent.from_mouse(event)
        self._mouse_last = copy.copy(touch)
        self._on_touch_down(touch)
        return touch.accepted

    def mouse_move(self, event: MouseEvent) -> bool:
        """Handle a mouse move; return whether it was accepted."""
        touch = TouchAreaEvent.from_mouse(event, self._mouse_last)
        self._mouse_last = copy.copy(touch)
        self._on_touch_move(touch)
        return touch.accepted

    def mouse_release(self, event: MouseEvent) -> bool:
        """Handle a mouse release; return whether it was accepted."""
        touch = TouchAreaEvent.from_mouse(event, self._mouse_last)
        self._on_touch_up(touch)
        return touch.accepted

    def _cancel_active_touches(self) -> None:
        if self._second_touch.is_valid:
            self._on_touch_up(copy.copy(self._second_touch), canceled=True)
        if self._first_touch.is_valid:
            self._on_touch_up(copy.copy(self._first_touch), canceled=True)

    def mouse_ungrab(self) -> None:
        """The mouse grab was taken away, e.g. by a flickable parent."""
        self._cancel_active_touches()
        self.touch_canceled.emit()

    def mouse_double_click(self, event: MouseEvent) -> None:
        """Handle a double click reported by the windowing system."""
        touch = TouchAreaEvent.from_mouse(event)
        self._mouse_last = touch
        self.double_click.emit(self._mouse_last)

    # ------------------------------------------------------------ touch

    def touch_event(self, points: Iterable[TouchPoint], modifiers: int = 0) -> bool:
        """Handle one touch event; return whether any of its points was accepted.

        The ids of newly accepted touch points are stored in ``grabbed_touch_ids``.
        """
        points = list(points)
        grab_ids: list[int] = []
        accepted = False
        for point in points:
            touch = TouchAreaEvent.from_touch_point(point, modifiers)
            if point.state is TouchPointState.PRESSED:
                if (
                    len(points) == 1
                    and self._first_touch.is_valid
                    and self._first_touch.is_touch
                ):
                    # the previous touch ended without notice
                    self._on_touch_up(touch, canceled=True)
                self._on_touch_down(touch)
                if touch.accepted:
                    grab_ids.append(point.id)
            elif point.state is TouchPointState.MOVED:
                self._on_touch_move(touch)
            elif point.state is TouchPointState.RELEASED:
                self._on_touch_up(touch)
            accepted = accepted or touch.accepted
        self.grabbed_touch_ids = grab_ids
        return accepted

    def touch_cancel(self) -> None:
        """The system canceled the touch sequence."""
        self._cancel_active_touches()

    def touch_ungrab(self) -> None:
        """The touch grab was taken away, e.g. by a flickable parent."""
        self._cancel_active_touches()
        self.touch_canceled.emit()

    # ------------------------------------------------------------ combined handling

    def _on_touch_down(self, touch: TouchAreaEvent) -> None:
        if not self._first_touch.is_valid:
            self._first_touch = copy.copy(touch)
            self.pressed = True
            if self.click_duration_enabled and not touch.is_right_button:
                self._long_click_deadline = self._clock() + self.long_click_duration / 1000.0
            self.touch_down.emit(touch, False)
        elif self.second_touch_enabled and not self._second_touch.is_valid:
            self._second_touch = copy.copy(touch)
            self.touch_down.emit(touch, True)
        else:
            touch.accepted = False

        if not touch.accepted:
            # no release will follow for this touch, tidy up now
            if self._second_touch.is_valid:
                self._first_touch = copy.copy(self._second_touch)
                self._second_touch.invalidate()
            else:
                self._first_touch.invalidate()
                self.pressed = False

    def _on_touch_move(self, touch: TouchAreaEvent) -> None:
        if touch.same_touch(self._first_touch):
            self._first_touch = copy.copy(touch)
            self.touch_move.emit(touch, False)
        elif touch.same_touch(self._second_touch):
            self._second_touch = copy.copy(touch)
            self.touch_move.emit(touch, True)
        else:
            touch.accepted = False

    def _on_touch_up(self, touch: TouchAreaEvent, canceled: bool = False) -> None:
        if touch.same_touch(self._first_touch):
            if self._second_touch.is_valid:
                self._first_touch = copy.copy(self._second_touch)
                self._second_touch.invalidate()
                self.touch_up.emit(touch, False, canceled)
                return
            self._first_touch.invalidate()
            self.pressed = False
            if touch.is_at_origin() and not canceled:
                self.click.emit(touch)
                now = self._clock()
                since_last_click = now - self._last_click_time
                self._last_click_time = now
                if since_last_click * 1000 < DOUBLE_CLICK_DURATION:
                    self.double_click.emit(touch)
                if touch.is_right_button:
                    self.right_click.emit(touch)
                elif self._long_click_timer_active():
                    self._long_click_deadline = None
                    self.short_click.emit(touch)
            self.touch_up.emit(touch, False, canceled)
        elif touch.same_touch(self._second_touch):
            self._second_touch.invalidate()
            self.touch_up.emit(touch, True, canceled)
        else:
            touch.accepted = False

    # ------------------------------------------------------------ wheel and hover

    def wheel(
        self,
        pixel_delta: Optional[tuple[int, int]] = None,
        angle_delta: tuple[int, int] = (0, 0),
    ) -> bool:
        """Report a scroll in pixels; return whether a handler accepted it."""
        self._scroll_event_accepted = False
        if pixel_delta is not None and tuple(pixel_delta) != (0, 0):
            self.scroll_event.emit(int(pixel_delta[0]), int(pixel_delta[1]))
        else:
            factor = PIXEL_PER_WHEEL_STEP / _WHEEL_UNITS_PER_STEP
            self.scroll_event.emit(
                _round_half_away(angle_delta[0] * factor),
                _round_half_away(angle_delta[1] * factor),
            )
        return self._scroll_event_accepted

    def scroll_event_was_accepted(self) -> None:
        """Mark the scroll event being handled as accepted."""
        self._scroll_event_accepted = True

    def hover_enter(self) -> None:
        self.mouse_over = True
        self.mouse_over_changed.emit()

    def hover_leave(self) -> None:
        self.mouse_over = False
        self.mouse_over_changed.emit()