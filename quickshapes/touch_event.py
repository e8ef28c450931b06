"""Input events shared by mouse and touch handling in a touch area."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_LONG_CLICK_DURATION = 800  # ms
PIXEL_PER_WHEEL_STEP = 40
MOUSE_EVENT_ID = 9999
DEFAULT_IS_AT_ORIGIN_TOLERANCE = 5.0  # px
DOUBLE_CLICK_DURATION = 400.0  # ms

Point = tuple[float, float]


class TouchPointState(enum.Enum):
    PRESSED = "pressed"
    MOVED = "moved"
    STATIONARY = "stationary"
    RELEASED = "released"


@dataclass(frozen=True)
class TouchPoint:
    """One finger of a touch event, in screen, item and scene coordinates."""

    id: int
    state: TouchPointState
    screen_pos: Point
    start_screen_pos: Point
    last_screen_pos: Point
    pos: Point
    start_pos: Point
    scene_pos: Point


@dataclass(frozen=True)
class MouseEvent:
    """A mouse press, move or release."""

    global_pos: Point
    local_pos: Point
    window_pos: Point
    right_button: bool = False
    modifiers: int = 0


@dataclass(eq=False)
class TouchAreaEvent:
    """A touch or mouse input event as seen by a touch area."""

    is_valid: bool = False
    x: float = 0.0
    y: float = 0.0
    origin_x: float = 0.0
    origin_y: float = 0.0
    item_x: float = 0.0
    item_y: float = 0.0
    item_origin_x: float = 0.0
    item_origin_y: float = 0.0
    scene_x: float = 0.0
    scene_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    is_touch: bool = False
    is_right_button: bool = False
    modifiers: int = 0
    id: int = -1
    accepted: bool = True

    @classmethod
    def from_touch_point(cls, point: TouchPoint, modifiers: int = 0) -> TouchAreaEvent:
        """An event for one touch point."""
        x, y = point.screen_pos
        last_x, last_y = point.last_screen_pos
        return cls(
            is_valid=True,
            x=x,
            y=y,
            origin_x=point.start_screen_pos[0],
            origin_y=point.start_screen_pos[1],
            item_x=point.pos[0],
            item_y=point.pos[1],
            item_origin_x=point.start_pos[0],
            item_origin_y=point.start_pos[1],
            scene_x=point.scene_pos[0],
            scene_y=point.scene_pos[1],
            delta_x=x - last_x,
            delta_y=y - last_y,
            is_touch=True,
            is_right_button=False,
            modifiers=modifiers,
            id=point.id,
        )

    @classmethod
    def from_mouse(
        cls, event: MouseEvent, last: Optional[TouchAreaEvent] = None
    ) -> TouchAreaEvent:
        """An event for a mouse action; origins and deltas come from ``last`` if given."""
        x, y = event.global_pos
        item_x, item_y = event.local_pos
        if last is None:
            origin = (x, y)
            item_origin = (item_x, item_y)
            delta = (0.0, 0.0)
        else:
            origin = (last.origin_x, last.origin_y)
            item_origin = (last.item_origin_x, last.item_origin_y)
            delta = (x - last.x, y - last.y)
        return cls(
            is_valid=True,
            x=x,
            y=y,
            origin_x=origin[0],
            origin_y=origin[1],
            item_x=item_x,
            item_y=item_y,
            item_origin_x=item_origin[0],
            item_origin_y=item_origin[1],
            scene_x=event.window_pos[0],
            scene_y=event.window_pos[1],
            delta_x=delta[0],
            delta_y=delta[1],
            is_touch=False,
            is_right_button=event.right_button,
            modifiers=event.modifiers,
            id=MOUSE_EVENT_ID,
        )

    def invalidate(self) -> None:
        """Mark the event as no longer in use."""
        self.is_valid = False
        self.id = -1

    def is_at_origin(self, tolerance: float = DEFAULT_IS_AT_ORIGIN_TOLERANCE) -> bool:
        """True if the position is closer than ``tolerance`` to the origin."""
        distance = math.hypot(self.x - self.origin_x, self.y - self.origin_y)
        return distance < tolerance

    def same_touch(self, other: TouchAreaEvent) -> bool:
        """True if both events belong to the same finger or to the mouse."""
        return self.id == other.id