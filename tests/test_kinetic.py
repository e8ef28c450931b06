import pytest

from quickshapes.kinetic import MAX_INITIAL_VELOCITY, KineticEffect, KineticEffect2D


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_update_moves_value_and_reports(clock):
    moves = []
    effect = KineticEffect(clock=clock, on_moving=lambda *a: moves.append(a))
    effect.set_value(5.0)
    effect.start(10.0)
    clock.now = 0.01
    effect.update(14.0)
    assert effect.value == pytest.approx(9.0)
    assert moves == [(effect.value, 5.0 if False else 10.0, True)]
    assert effect.origin == 10.0


def test_update_without_start_raises(clock):
    effect = KineticEffect(clock=clock)
    with pytest.raises(RuntimeError):
        effect.update(1.0)
    with pytest.raises(RuntimeError):
        effect.cancel()


def test_stop_velocity_from_recent_samples(clock):
    effect = KineticEffect(clock=clock)
    effect.start(0.0)
    clock.now = 1.0
    effect.update(100.0)
    clock.now = 1.1
    effect.stop(110.0)
    assert effect.velocity == pytest.approx((110.0 - 100.0) / 0.1)
    assert effect.running
    assert not effect.is_manual


def test_stop_velocity_is_clamped(clock):
    effect = KineticEffect(clock=clock)
    effect.start(0.0)
    clock.now = 0.01
    effect.stop(1000.0)
    assert effect.velocity == MAX_INITIAL_VELOCITY
    effect.start(0.0)
    clock.now = 0.02
    effect.stop(-1000.0)
    assert effect.velocity == -MAX_INITIAL_VELOCITY


def test_step_slows_down_and_moves_forward(clock):
    effect = KineticEffect(clock=clock)
    effect.start(0.0)
    clock.now = 0.1
    effect.stop(20.0)
    v0 = effect.velocity
    x0 = effect.value
    clock.now = 0.12
    assert effect.step() is True
    assert 0 < effect.velocity < v0
    assert effect.value > x0


def test_comes_to_rest(clock):
    effect = KineticEffect(clock=clock)
    effect.start(0.0)
    clock.now = 0.1
    effect.stop(50.0)
    for _ in range(10000):
        clock.now += 0.02
        if not effect.step():
            break
    assert effect.velocity == 0.0
    assert not effect.running


def test_bounds_stop_movement(clock):
    effect = KineticEffect(clock=clock)
    effect.max_value = 15.0
    effect.start(0.0)
    clock.now = 0.1
    effect.update(30.0)
    assert effect.value == 15.0
    effect.min_value = 0.0
    effect.set_value(0.0)
    effect.update(-10.0)
    assert effect.value == 0.0


def test_cancel_keeps_velocity(clock):
    effect = KineticEffect(clock=clock)
    effect.start(0.0)
    clock.now = 0.1
    effect.stop(20.0)
    velocity = effect.velocity
    effect.start(20.0)
    effect.cancel()
    assert effect.running
    assert not effect.is_manual
    assert effect.velocity == 0.0 or effect.velocity == velocity


def test_2d_update_and_origin(clock):
    moves = []
    effect = KineticEffect2D(clock=clock, on_moving=lambda *a: moves.append(a))
    effect.start(1.0, 2.0)
    clock.now = 0.05
    effect.update(4.0, 6.0)
    assert effect.value == pytest.approx((3.0, 4.0))
    assert moves[-1] == (effect.value, (1.0, 2.0), True)


def test_2d_stop_clamps_each_component(clock):
    effect = KineticEffect2D(clock=clock)
    effect.start(0.0, 0.0)
    clock.now = 0.01
    effect.stop(1000.0, -1000.0)
    assert effect.velocity == (MAX_INITIAL_VELOCITY, -MAX_INITIAL_VELOCITY)


def test_2d_rest_rounds_position(clock):
    moves = []
    effect = KineticEffect2D(clock=clock, on_moving=lambda *a: moves.append(a))
    effect.set_value(1.4, 2.6)
    assert effect.step() is False
    assert effect.value == (1.0, 3.0)
    assert moves == [((1.0, 3.0), (0.0, 0.0), False)]


def test_2d_step_slows_down(clock):
    effect = KineticEffect2D(clock=clock)
    effect.start(0.0, 0.0)
    clock.now = 0.1
    effect.stop(30.0, 40.0)
    vx0, vy0 = effect.velocity
    clock.now = 0.12
    assert effect.step()
    vx1, vy1 = effect.velocity
    assert 0 < vx1 < vx0 and 0 < vy1 < vy0
    assert effect.value[0] > 30.0 and effect.value[1] > 40.0


def test_2d_stop_movement(clock):
    effect = KineticEffect2D(clock=clock)
    effect.start(0.0, 0.0)
    clock.now = 0.1
    effect.stop(30.0, 0.0)
    assert effect.running
    effect.stop_movement()
    assert not effect.running


def test_2d_requires_start(clock):
    effect = KineticEffect2D(clock=clock)
    with pytest.raises(RuntimeError):
        effect.stop(1.0, 1.0)