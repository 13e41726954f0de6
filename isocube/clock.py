#
# PROJECT: isocube
# MODULE: isocube/clock.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AnimationState:
    """Looping progress through one animation period."""
    anim_amt: float = 0.0
    period: float = 3.0

    def __post_init__(self):
        if not math.isfinite(self.period) or self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period!r}")
        if not 0.0 <= self.anim_amt < 1.0:
            raise ValueError(f"anim_amt must be in [0, 1), got {self.anim_amt!r}")


def advance(state: AnimationState, dt: float) -> AnimationState:
    """
    Return the state `dt` seconds later.

    Wraps modulo 1, so a dt longer than the period loops silently.
    A zero dt returns the state unchanged; a negative dt is an error.
    """
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt!r}")
    if dt == 0:
        return state
    amt = (state.anim_amt + dt / state.period) % 1.0
    # float modulo can land on exactly 1.0 for tiny negative remainders
    if amt >= 1.0:
        amt = 0.0
    return AnimationState(amt, state.period)


def ease(t: float) -> float:
    """Cubic smoothstep, clamped to [0, 1]."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return t * t * (3.0 - 2.0 * t)


def ease_in_out(t: float, power: float = 2.0) -> float:
    """Symmetric power ease: slow start and end, fastest at t = 0.5."""
    if power <= 0:
        raise ValueError("power must be positive")
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 0.5:
        return 0.5 * (2.0 * t) ** power
    return 1.0 - 0.5 * (2.0 * (1.0 - t)) ** power


def divide_interval(t: float, start: float, end: float) -> float:
    """Remap [start, end] onto [0, 1], clamping outside the interval."""
    if start >= end:
        raise ValueError(f"interval start must be below end, got [{start}, {end}]")
    if t <= start:
        return 0.0
    if t >= end:
        return 1.0
    return (t - start) / (end - start)


def there_and_back(t: float, start: float, end: float) -> float:
    """0 -> 1 over the first half of [start, end], back to 0 over the second."""
    mid = (start + end) / 2.0
    return ease(divide_interval(t, start, mid)) - ease(divide_interval(t, mid, end))


EASINGS = {
    'smoothstep': ease,
    'quad': lambda t: ease_in_out(t, 2.0),
    'cubic': lambda t: ease_in_out(t, 3.0),
    'linear': lambda t: min(1.0, max(0.0, t)),
}
