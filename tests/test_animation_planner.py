import pytest

from gwheel.animation_planner import (ANTI_CLOCKWISE, CLOCKWISE, CUSTOM, ROTATION_PROPERTY, SPIN_AND_BACK,
                                      SPIN_ONGOING, SPIN_TO_STOP, plan_animation)
from gwheel.errors import WheelConfigError


def test_spin_to_stop_clockwise():
    plan = plan_animation({"type": SPIN_TO_STOP, "direction": CLOCKWISE, "spins": 5, "stop_angle": 90},
                          pointer_angle=0)
    assert plan.to_value == 2070
    assert plan.property_name == ROTATION_PROPERTY
    assert plan.repeat == 0
    assert plan.easing == "power3_out"


def test_spin_to_stop_anti_clockwise():
    plan = plan_animation({"type": SPIN_TO_STOP, "direction": ANTI_CLOCKWISE, "spins": 5, "stop_angle": 90},
                          pointer_angle=0)
    assert plan.to_value == -1890


def test_spin_to_stop_adds_pointer_angle():
    plan = plan_animation({"type": SPIN_TO_STOP, "spins": 1, "stop_angle": 90}, pointer_angle=30)
    assert plan.to_value == 360 + (360 - 90 + 30)


def test_spin_to_stop_random_stop(fixed_random):
    plan = plan_animation({"type": SPIN_TO_STOP, "spins": 5}, rng=fixed_random(0.5))
    assert plan.to_value == 1800 + 179


def test_spin_ongoing_repeats_forever():
    plan = plan_animation({"type": SPIN_ONGOING})
    assert plan.to_value == 1800
    assert plan.repeat == -1
    assert plan.easing == "linear"
    assert plan.duration == 10

    backwards = plan_animation({"type": SPIN_ONGOING, "direction": ANTI_CLOCKWISE, "spins": 2})
    assert backwards.to_value == -720


def test_spin_and_back_always_yoyos():
    plan = plan_animation({"type": SPIN_AND_BACK, "yoyo": False, "spins": 1, "stop_angle": 90})
    assert plan.yoyo is True
    assert plan.repeat == 1
    assert plan.easing == "power2_in_out"
    assert plan.to_value == 360 + 270


def test_spin_and_back_ignores_pointer_angle():
    plan = plan_animation({"type": SPIN_AND_BACK, "spins": 1}, pointer_angle=45)
    assert plan.to_value == 360


def test_spin_and_back_without_repeat_warns(caplog):
    plan_animation({"type": SPIN_AND_BACK, "repeat": 0})
    assert "never swings back" in caplog.text


def test_user_options_override_defaults():
    plan = plan_animation({"type": SPIN_TO_STOP, "stop_angle": 0, "duration": 3, "easing": "sine_out",
                           "spins": 2})
    assert plan.duration == 3
    assert plan.easing == "sine_out"
    assert plan.to_value == 720 + 360


def test_custom_animation():
    plan = plan_animation({"type": CUSTOM, "property_name": "inner_radius", "property_value": 50,
                           "duration": 2})
    assert (plan.property_name, plan.to_value, plan.duration) == ("inner_radius", 50, 2)


def test_custom_animation_without_value_raises():
    with pytest.raises(WheelConfigError):
        plan_animation({"type": CUSTOM, "property_name": "inner_radius"})


@pytest.mark.parametrize("options", [{"type": "wobble"}, {"type": SPIN_TO_STOP, "direction": "sideways"}])
def test_unknown_type_or_direction_raises(options):
    with pytest.raises(WheelConfigError):
        plan_animation(options)
