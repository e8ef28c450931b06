"""Kinetic scrolling: inertia and friction after a touch movement, in one or two dimensions."""

from __future__ import annotations

import math
import sys
import time
from collections import deque
from typing import Callable, NamedTuple, Optional

HISTORY_SIZE = 5
SHORT_TIME_SEC = 10.0 / 60.0
MIN_DURATION_SEC = 0.0001
MAX_INITIAL_VELOCITY = 8000.0
FRAME_SEC = 1.0 / 50

Vector = tuple[float, float]
Clock = Callable[[], float]


class MoveEvent(NamedTuple):
    value: float
    time: float


class MoveEvent2D(NamedTuple):
    position: Vector
    time: float


def _clamp(low: float, value: float, high: float) -> float:
    return max(low, min(value, high))


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


class _KineticBase:
    """Shared clock, history and animation state."""

    def __init__(self, friction: float, clock: Clock) -> None:
        self.min_velocity = 3.0
        self.friction = friction
        self.is_manual = False
        self.running = False
        self._clock = clock
        self._last_update = clock()
        self._history: deque = deque(maxlen=HISTORY_SIZE)

    def _last_event(self):
        if not self._history:
            raise RuntimeError("no movement has been started")
        return self._history[-1]

    def _elapsed_and_update(self) -> float:
        now = self._clock()
        elapsed = now - self._last_update
        self._last_update = now
        return elapsed

    def _recent_sample(self, newest_time: float):
        """The oldest sample no older than SHORT_TIME_SEC, or the newest one."""
        samples = list(self._history)
        for sample in samples:
            if newest_time - sample.time <= SHORT_TIME_SEC:
                return sample
        return samples[-1]


class KineticEffect(_KineticBase):
    """One-dimensional movement with inertia and friction after a drag."""

    def __init__(
        self,
        *,
        clock: Clock = time.monotonic,
        on_moving: Optional[Callable[[float, float, bool], None]] = None,
        on_velocity_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(friction=0.03, clock=clock)
        self.origin = 0.0
        self.min_value = -sys.float_info.max
        self.max_value = sys.float_info.max
        self.on_moving = on_moving
        self.on_velocity_changed = on_velocity_changed
        self._velocity = 0.0
        self._value = 0.0

    @property
    def velocity(self) -> float:
        """Current velocity in units per second."""
        return self._velocity

    @property
    def value(self) -> float:
        return self._value

    def _emit_moving(self) -> None:
        if self.on_moving is not None:
            self.on_moving(self._value, self.origin, self.is_manual)

    def _apply_distance(self, distance: float) -> None:
        self._value += distance
        if self._value < self.min_value:
            self._value = self.min_value
            self._velocity = 0.0
        elif self._value > self.max_value:
            self._value = self.max_value
            self._velocity = 0.0

    def start(self, value: float) -> None:
        """Begin a new manual movement at the given position."""
        self.is_manual = True
        self._velocity = 0.0
        self.origin = value
        self._history.append(MoveEvent(value, self._clock()))

    def update(self, value: float) -> None:
        """Follow the manual movement to a new position."""
        distance = value - self._last_event().value
        self._apply_distance(distance)
        self._history.append(MoveEvent(value, self._clock()))
        self._emit_moving()

    def stop(self, value: float) -> None:
        """End the manual movement and start the inertia simulation."""
        last = self._last_event()
        self.is_manual = False
        self._apply_distance(value - last.value)
        newest = MoveEvent(value, self._clock())
        oldest = self._recent_sample(newest.time)
        duration = newest.time - oldest.time
        velocity = (newest.value - oldest.value) / max(duration, MIN_DURATION_SEC)
        self._velocity = _clamp(-MAX_INITIAL_VELOCITY, velocity, MAX_INITIAL_VELOCITY)
        self._last_update = newest.time
        self.running = True

    def cancel(self) -> None:
        """End the manual movement without changing the velocity."""
        last = self._last_event()
        self.is_manual = False
        self._last_update = last.time
        self.running = True

    def set_value(self, value: float) -> None:
        """Set the position without a movement."""
        self._value = value

    def step(self) -> bool:
        """Advance the simulation to now; return False once it has come to rest."""
        if abs(self._velocity) <= self.min_velocity:
            self._velocity = 0.0
            self.running = False
            return False
        elapsed = self._elapsed_and_update()
        self._velocity -= self._velocity * self.friction * (elapsed / FRAME_SEC)
        self._apply_distance(self._velocity * elapsed)
        if self.on_velocity_changed is not None:
            self.on_velocity_changed()
        self._emit_moving()
        return True


class KineticEffect2D(_KineticBase):
    """Two-dimensional movement with inertia and friction after a drag."""

    def __init__(
        self,
        *,
        clock: Clock = time.monotonic,
        on_moving: Optional[Callable[[Vector, Vector, bool], None]] = None,
        on_velocity_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(friction=0.05, clock=clock)
        self.origin: Vector = (0.0, 0.0)
        self.on_moving = on_moving
        self.on_velocity_changed = on_velocity_changed
        self._velocity: Vector = (0.0, 0.0)
        self._value: Vector = (0.0, 0.0)

    @property
    def velocity(self) -> Vector:
        """Current velocity in units per second."""
        return self._velocity

    @property
    def value(self) -> Vector:
        return self._value

    def _emit_moving(self) -> None:
        if self.on_moving is not None:
            self.on_moving(self._value, self.origin, self.is_manual)

    def _apply_distance(self, distance: Vector) -> None:
        self._value = (self._value[0] + distance[0], self._value[1] + distance[1])

    def start(self, x: float, y: float) -> None:
        """Begin a new manual movement at the given position."""
        self.is_manual = True
        self._velocity = (0.0, 0.0)
        self.origin = (x, y)
        self._history.append(MoveEvent2D((x, y), self._clock()))

    def update(self, x: float, y: float) -> None:
        """Follow the manual movement to a new position."""
        last_x, last_y = self._last_event().position
        self._apply_distance((x - last_x, y - last_y))
        self._history.append(MoveEvent2D((x, y), self._clock()))
        self._emit_moving()

    def stop(self, x: float, y: float) -> None:
        """End the manual movement and start the inertia simulation."""
        last_x, last_y = self._last_event().position
        self.is_manual = False
        self._apply_distance((x - last_x, y - last_y))
        newest = MoveEvent2D((x, y), self._clock())
        oldest = self._recent_sample(newest.time)
        duration = max(newest.time - oldest.time, MIN_DURATION_SEC)
        vx = (newest.position[0] - oldest.position[0]) / duration
        vy = (newest.position[1] - oldest.position[1]) / duration
        self._velocity = (
            _clamp(-MAX_INITIAL_VELOCITY, vx, MAX_INITIAL_VELOCITY),
            _clamp(-MAX_INITIAL_VELOCITY, vy, MAX_INITIAL_VELOCITY),
        )
        self._last_update = newest.time
        self.running = True

    def cancel(self) -> None:
        """End the manual movement without changing the velocity."""
        last = self._last_event()
        self.is_manual = False
        self._last_update = last.time
        self.running = True

    def set_value(self, x: float, y: float) -> None:
        """Set the position without a movement."""
        self._value = (x, y)

    def stop_movement(self) -> None:
        """Stop the inertia simulation."""
        self.running = False

    def step(self) -> bool:
        """Advance the simulation to now; return False once it has come to rest.

        On coming to rest the position is rounded to whole units.
        """
        if math.hypot(*self._velocity) <= self.min_velocity:
            self._velocity = (0.0, 0.0)
            self._value = (_round_half_up(self._value[0]), _round_half_up(self._value[1]))
            self._emit_moving()
            self.running = False
            return False
        elapsed = self._elapsed_and_update()
        factor = 1.0 - self.friction * (elapsed / FRAME_SEC)
        self._velocity = (self._velocity[0] * factor, self._velocity[1] * factor)
        self._apply_distance((self._velocity[0] * elapsed, self._velocity[1] * elapsed))
        if self.on_velocity_changed is not None:
            self.on_velocity_changed()
        self._emit_moving()
        return True