import pytest

from isocube.clock import (
    AnimationState, advance, divide_interval, ease, ease_in_out, there_and_back,
)


def test_zero_dt_is_identity():
    state = AnimationState(0.42, 3.0)
    assert advance(state, 0) == state


def test_advance_wraps_around():
    state = advance(AnimationState(0.9, 3.0), 0.6)
    assert state.anim_amt == pytest.approx(0.1)
    assert state.period == 3.0


def test_advances_compose():
    start = AnimationState(0.25, 4.0)
    twice = advance(advance(start, 0.7), 1.1)
    expected = (0.25 + 0.7 / 4.0 + 1.1 / 4.0) % 1.0
    assert twice.anim_amt == pytest.approx(expected)


def test_large_dt_wraps_silently():
    state = advance(AnimationState(0.0, 3.0), 15.3)
    assert state.anim_amt == pytest.approx(0.1)


def test_anim_amt_stays_in_unit_interval():
    state = AnimationState(0.0, 9.0)
    for _ in range(500):
        state = advance(state, 0.37)
        assert 0.0 <= state.anim_amt < 1.0


def test_advance_returns_new_state():
    state = AnimationState(0.0, 3.0)
    later = advance(state, 1.0)
    assert state.anim_amt == 0.0
    assert later.anim_amt == pytest.approx(1 / 3)


def test_negative_dt_raises():
    with pytest.raises(ValueError):
        advance(AnimationState(), -0.01)


@pytest.mark.parametrize("period", [0, -3, float('nan')])
def test_invalid_period_raises(period):
    with pytest.raises(ValueError):
        AnimationState(0.0, period)


def test_anim_amt_out_of_range_raises():
    with pytest.raises(ValueError):
        AnimationState(1.0, 3.0)


def test_ease_endpoints_and_midpoint():
    assert ease(0) == 0
    assert ease(1) == 1
    assert ease(0.5) == pytest.approx(0.5)
    assert ease(-2) == 0
    assert ease(3) == 1


@pytest.mark.parametrize("fn", [ease, ease_in_out, lambda t: ease_in_out(t, 3)])
def test_easing_is_monotonic(fn):
    samples = [fn(i / 100) for i in range(101)]
    assert samples[0] == 0
    assert samples[-1] == 1
    assert all(a <= b for a, b in zip(samples, samples[1:]))


def test_ease_is_slow_at_the_ends():
    assert ease(0.1) < 0.1
    assert ease(0.9) > 0.9


def test_ease_in_out_rejects_bad_power():
    with pytest.raises(ValueError):
        ease_in_out(0.5, 0)


def test_divide_interval_remaps_and_clamps():
    assert divide_interval(0.25, 0.0, 0.5) == pytest.approx(0.5)
    assert divide_interval(0.75, 0.5, 1.0) == pytest.approx(0.5)
    assert divide_interval(0.1, 0.5, 1.0) == 0.0
    assert divide_interval(0.9, 0.0, 0.5) == 1.0


def test_divide_interval_rejects_empty_interval():
    with pytest.raises(ValueError):
        divide_interval(0.5, 0.5, 0.5)


def test_there_and_back():
    assert there_and_back(0.5, 0.5, 1.0) == 0.0
    assert there_and_back(0.75, 0.5, 1.0) == pytest.approx(1.0)
    assert there_and_back(0.999999, 0.5, 1.0) == pytest.approx(0.0, abs=1e-6)
    assert there_and_back(0.2, 0.5, 1.0) == 0.0
