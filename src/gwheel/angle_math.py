# angle_math.py
import math


def deg_to_rad(deg):
    return deg * math.pi / 180.0


def rad_to_deg(rad):
    return rad * 180.0 / math.pi


def percentage_to_degrees(percent_value):
    """
    Converts a 0-100 percentage into the number of degrees it covers on
    the wheel. Anything outside (0, 100] is treated as zero.
    """
    if 0 < percent_value <= 100:
        return 360 * (percent_value / 100)
    return 0


def normalize_angle(angle):
    """
    Removes every whole turn from an unbounded wheel angle and returns the
    equivalent angle in [0, 360). Rotation accumulates past 360 and below 0
    while spinning, so this is applied on read, never on store.
    """
    if angle >= 0:
        result = angle - 360 * math.floor(angle / 360)
    else:
        result = angle - 360 * math.ceil(angle / 360) + 360
    # -360, -720, ... and tiny negatives land exactly on 360
    if result >= 360:
        result -= 360
    elif result < 0:
        result += 360
    return result
