import pytest

from gwheel.easing import EASINGS, get_easing, linear
from gwheel.errors import WheelConfigError


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easings_start_at_zero_and_end_at_one(name):
    ease = EASINGS[name]
    assert ease(0) == pytest.approx(0)
    assert ease(1) == pytest.approx(1)


def test_known_values():
    assert get_easing("linear")(0.3) == 0.3
    assert get_easing("power3_out")(0.5) == pytest.approx(0.9375)
    assert get_easing("power2_in_out")(0.25) == pytest.approx(0.0625)
    assert get_easing("power2_in_out")(0.5) == pytest.approx(0.5)


def test_callables_pass_through():
    assert get_easing(linear) is linear


def test_unknown_easing_raises():
    with pytest.raises(WheelConfigError):
        get_easing("bounce_out")
