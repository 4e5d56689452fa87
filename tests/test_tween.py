import pytest

from spanda.tween import Loop, Times, Tween, TweenState, linear


def ease_in_quad(t):
    return t * t


def ease_out_cubic(t):
    return 1 - (1 - t) ** 3


def test_linear_is_identity():
    assert linear(0.25) == 0.25


def test_starts_at_start_value():
    t = Tween(0.0, 100.0, duration=1.0)
    assert t.value() == pytest.approx(0.0)


def test_ends_at_end_value():
    t = Tween(0.0, 100.0, duration=1.0)
    t.update(1.0)
    assert t.value() == pytest.approx(100.0)


def test_complete_after_full_duration():
    t = Tween(0.0, 100.0, duration=0.5)
    assert not t.is_complete()
    t.update(0.5)
    assert t.is_complete()


def test_delay_is_respected():
    t = Tween(0.0, 100.0, duration=1.0, delay=0.5)
    assert t.state is TweenState.WAITING
    t.update(0.3)
    assert t.state is TweenState.WAITING
    assert t.value() == pytest.approx(0.0)
    t.update(0.3)
    assert t.state is TweenState.RUNNING
    assert t.value() > 0.0


def test_reverse_swaps_values():
    t = Tween(0.0, 100.0, duration=1.0)
    t.update(1.0)
    assert t.value() == pytest.approx(100.0)
    t.reverse()
    assert not t.is_complete()
    assert t.value() == pytest.approx(100.0)
    t.update(1.0)
    assert t.value() == pytest.approx(0.0)


def test_seek_jumps_to_value():
    t = Tween(0.0, 100.0, duration=1.0)
    t.seek(0.5)
    assert t.value() == pytest.approx(50.0)


def test_seek_to_end_completes():
    t = Tween(0.0, 100.0, duration=1.0)
    t.seek(1.0)
    assert t.is_complete()


def test_no_overshoot_on_large_dt():
    t = Tween(0.0, 100.0, duration=1.0)
    t.update(999.0)
    assert t.is_complete()
    assert t.value() == pytest.approx(100.0)


def test_zero_duration_immediately_complete():
    t = Tween(0.0, 42.0, duration=0.0)
    t.update(0.0)
    assert t.is_complete()
    assert t.value() == pytest.approx(42.0)
    assert t.progress() == 1.0


def test_with_easing():
    t = Tween(0.0, 100.0, duration=1.0, easing=ease_in_quad)
    t.update(0.5)
    assert t.value() == pytest.approx(25.0, abs=1e-4)


def test_progress_is_raw():
    t = Tween(0.0, 100.0, duration=2.0, easing=ease_in_quad)
    t.update(1.0)
    assert t.progress() == pytest.approx(0.5)


def test_pause_and_resume():
    t = Tween(0.0, 100.0, duration=1.0)
    t.update(0.3)
    before = t.value()
    t.pause()
    assert t.state is TweenState.PAUSED
    t.update(0.5)
    assert t.value() == pytest.approx(before)
    t.resume()
    t.update(0.2)
    assert t.value() > before


def test_negative_dt_treated_as_zero():
    t = Tween(0.0, 100.0, duration=1.0)
    t.update(0.5)
    v = t.value()
    t.update(-0.3)
    assert t.value() == pytest.approx(v)


def test_vec2():
    t = Tween((0.0, 0.0), (100.0, 200.0), duration=1.0)
    t.update(0.5)
    assert t.value() == pytest.approx((50.0, 100.0))


def test_time_scale_double_speed():
    t = Tween(0.0, 100.0, duration=1.0, time_scale=2.0)
    t.update(0.5)
    assert t.is_complete()
    assert t.value() == pytest.approx(100.0)


def test_time_scale_half_speed():
    t = Tween(0.0, 100.0, duration=1.0, time_scale=0.5)
    t.update(1.0)
    assert not t.is_complete()
    assert t.value() == pytest.approx(50.0, abs=1e-4)


def test_time_scale_zero_pauses():
    t = Tween(0.0, 100.0, duration=1.0, time_scale=0.0)
    t.update(10.0)
    assert not t.is_complete()
    assert t.value() == pytest.approx(0.0)


def test_time_scale_changed_at_runtime():
    t = Tween(0.0, 100.0, duration=1.0)
    t.time_scale = 0.5
    t.update(1.0)
    assert t.value() == pytest.approx(50.0)


def test_loop_forever_never_completes():
    t = Tween(0.0, 100.0, duration=1.0, looping=Loop.FOREVER)
    for _ in range(100):
        assert t.update(0.5)
    assert not t.is_complete()


def test_loop_times_completes_after_n():
    t = Tween(0.0, 100.0, duration=1.0, looping=Times(3))
    assert t.update(1.0)
    assert t.update(1.0)
    assert not t.update(1.0)
    assert t.is_complete()


def test_ping_pong_reverses_direction():
    t = Tween(0.0, 100.0, duration=1.0, looping=Loop.PING_PONG)
    t.update(1.0)
    t.update(0.5)
    assert t.value() == pytest.approx(50.0, abs=1e-4)
    assert t.start == 100.0


def test_loop_once_is_default():
    t = Tween(0.0, 100.0, duration=1.0)
    assert t.looping is Loop.ONCE


def test_reset_restores_start():
    t = Tween(0.0, 100.0, duration=1.0, looping=Times(2))
    t.update(1.5)
    t.reset()
    assert t.loop_count == 0
    assert t.value() == pytest.approx(0.0)
    assert t.state is TweenState.RUNNING


def test_negative_duration_and_delay_clamped():
    t = Tween(0.0, 10.0, duration=-1.0, delay=-1.0)
    assert t.duration == 0.0
    assert t.state is TweenState.RUNNING


def test_on_start_fires_once():
    calls = []
    t = Tween(0.0, 100.0, duration=1.0)
    t.on_start(lambda: calls.append(1))
    t.update(0.1)
    t.update(0.1)
    t.update(0.8)
    assert calls == [1]


def test_on_start_fires_per_loop_iteration():
    calls = []
    t = Tween(0.0, 100.0, duration=1.0, looping=Times(3))
    t.on_start(lambda: calls.append(1))
    for _ in range(3):
        t.update(1.0)
    assert len(calls) == 3


def test_on_update_receives_value():
    values = []
    t = Tween(0.0, 100.0, duration=1.0)
    t.on_update(values.append)
    t.update(0.5)
    assert values
    assert values[0] > 0.0


def test_on_complete_fires_once():
    calls = []
    t = Tween(0.0, 100.0, duration=0.5)
    t.on_complete(lambda: calls.append(1))
    t.update(0.5)
    t.update(0.5)
    assert calls == [1]


def test_modifier_snaps_value():
    t = Tween(0.0, 100.0, duration=1.0)
    t.set_modifier(lambda v: round(v / 25.0) * 25.0)
    t.update(0.3)
    assert t.value() % 25.0 == pytest.approx(0.0, abs=1e-4)


def test_callback_registration_chains():
    t = Tween(0.0, 1.0)
    assert t.on_start(lambda: None) is t


# Looping modes over many frames


def test_ping_pong_stays_in_range():
    t = Tween(0.0, 100.0, duration=1.0, looping=Loop.PING_PONG)
    for _ in range(600):
        t.update(1.0 / 60.0)
        assert -1.0 <= t.value() <= 101.0


def test_loop_forever_runs_many_cycles():
    t = Tween(0.0, 100.0, duration=1.0, looping=Loop.FOREVER)
    for _ in range(600):
        assert t.update(1.0 / 60.0)
    assert not t.is_complete()


def test_loop_times_completes_exactly():
    t = Tween(0.0, 100.0, duration=1.0, looping=Times(3))
    dt = 0.1
    total = 0.0
    while t.update(dt):
        total += dt
        assert total <= 10.0
    assert t.is_complete()
    assert 2.8 <= total <= 3.2


def test_ping_pong_returns_to_start():
    t = Tween(0.0, 100.0, duration=1.0, looping=Loop.PING_PONG)
    for _ in range(120):
        t.update(1.0 / 60.0)
    assert t.value() < 10.0


# Full lifecycles with a fixed frame step


def test_lifecycle_with_fixed_step():
    t = Tween(0.0, 100.0, duration=1.0, easing=ease_out_cubic, delay=0.5)
    step = 0.125
    for _ in range(4):
        t.update(step)
    assert abs(t.value() - 0.0) < 1.0
    for _ in range(8):
        t.update(step)
    assert t.is_complete()
    assert t.value() == pytest.approx(100.0, abs=1e-4)


@pytest.mark.parametrize("easing", [linear, ease_in_quad, ease_out_cubic])
def test_completes_with_each_easing(easing):
    t = Tween(0.0, 1.0, duration=1.0, easing=easing)
    for _ in range(105):
        t.update(0.01)
    assert t.is_complete()
    assert t.value() == pytest.approx(1.0, abs=1e-4)