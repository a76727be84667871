# animation_planner.py
import logging
import math
import random
from dataclasses import dataclass

from gwheel.errors import WheelConfigError

logger = logging.getLogger(__name__)

SPIN_ONGOING = "spin_ongoing"
SPIN_TO_STOP = "spin_to_stop"
SPIN_AND_BACK = "spin_and_back"
CUSTOM = "custom"

CLOCKWISE = "clockwise"
ANTI_CLOCKWISE = "anti-clockwise"

ROTATION_PROPERTY = "rotation_angle"

DEFAULT_SPINS = 5
DEFAULT_DURATION = 10


@dataclass
class AnimationPlan:
    """Everything the tween driver needs to run one animation."""

    property_name: str
    to_value: float
    duration: float
    repeat: int
    yoyo: bool
    easing: str


def _default(value, fallback):
    return fallback if value is None else value


def _spin_value(spins, stop_angle, direction):
    value = spins * 360
    if direction == ANTI_CLOCKWISE:
        # rotating backwards, so the stop term is measured the other way round
        return -value - (360 - stop_angle)
    return value + stop_angle


def plan_animation(options, pointer_angle=0, rng=random):
    """
    Turns an animation option bag into an AnimationPlan. ``to_value`` is the
    absolute value the animated property ends on; the tween starts from the
    property's live value.

    User-facing stop angles are stored as ``360 - stop_angle`` because the
    wheel turns under a fixed pointer: the prize at angle A arrives at the
    pointer once the wheel has rotated by 360 - A.
    """
    kind = options.get("type", SPIN_ONGOING)
    direction = options.get("direction", CLOCKWISE)
    if direction not in (CLOCKWISE, ANTI_CLOCKWISE):
        raise WheelConfigError(f"Invalid animation direction: {direction!r}")

    duration = _default(options.get("duration"), DEFAULT_DURATION)
    spins = _default(options.get("spins"), DEFAULT_SPINS)
    stop_angle = options.get("stop_angle")

    if kind == SPIN_ONGOING:
        value = spins * 360
        if direction == ANTI_CLOCKWISE:
            value = -value
        return AnimationPlan(ROTATION_PROPERTY, value, duration,
                             _default(options.get("repeat"), -1),
                             _default(options.get("yoyo"), False),
                             _default(options.get("easing"), "linear"))

    if kind == SPIN_TO_STOP:
        if stop_angle is None:
            resolved_stop = math.floor(rng.random() * 359)
        else:
            resolved_stop = 360 - stop_angle + pointer_angle
        return AnimationPlan(ROTATION_PROPERTY, _spin_value(spins, resolved_stop, direction), duration,
                             _default(options.get("repeat"), 0),
                             _default(options.get("yoyo"), False),
                             _default(options.get("easing"), "power3_out"))

    if kind == SPIN_AND_BACK:
        resolved_stop = 0 if stop_angle is None else 360 - stop_angle
        repeat = _default(options.get("repeat"), 1)
        if repeat == 0:
            logger.warning("spin_and_back with repeat=0 never swings back")
        # always swings back
        return AnimationPlan(ROTATION_PROPERTY, _spin_value(spins, resolved_stop, direction), duration,
                             repeat, True,
                             _default(options.get("easing"), "power2_in_out"))

    if kind == CUSTOM:
        if options.get("property_value") is None:
            raise WheelConfigError("custom animations need a property_value")
        return AnimationPlan(options.get("property_name") or ROTATION_PROPERTY,
                             options["property_value"], duration,
                             _default(options.get("repeat"), 0),
                             _default(options.get("yoyo"), False),
                             _default(options.get("easing"), "linear"))

    raise WheelConfigError(f"Invalid animation type: {kind!r}")
