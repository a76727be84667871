# easing.py
"""Easing curves for the tween driver. Each maps progress t in [0, 1] to [0, 1]."""
import math

from gwheel.errors import WheelConfigError


def linear(t):
    return t


def _power_in(power):
    def ease(t):
        return t ** (power + 1)
    return ease


def _power_out(power):
    def ease(t):
        return 1 - (1 - t) ** (power + 1)
    return ease


def _power_in_out(power):
    exponent = power + 1

    def ease(t):
        if t < 0.5:
            return (2 ** (exponent - 1)) * t ** exponent
        return 1 - ((-2 * t + 2) ** exponent) / 2
    return ease


def sine_in(t):
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t):
    return math.sin(t * math.pi / 2)


def sine_in_out(t):
    return -(math.cos(math.pi * t) - 1) / 2


EASINGS = {
    "linear": linear,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
}
for _power in range(1, 5):
    EASINGS[f"power{_power}_in"] = _power_in(_power)
    EASINGS[f"power{_power}_out"] = _power_out(_power)
    EASINGS[f"power{_power}_in_out"] = _power_in_out(_power)


def get_easing(easing_id):
    """Returns the easing function registered as ``easing_id``; callables pass through."""
    if callable(easing_id):
        return easing_id
    try:
        return EASINGS[easing_id]
    except KeyError:
        raise WheelConfigError(f"Unknown easing: {easing_id!r}") from None
