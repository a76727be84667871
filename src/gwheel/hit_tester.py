# hit_tester.py
import math

from gwheel.angle_math import normalize_angle


def location_angle(x, y, center_x, center_y):
    """
    Returns the bearing of (x, y) seen from the wheel centre, in degrees with
    0 at 12 o'clock increasing clockwise (screen y grows downwards).
    """
    if x > center_x:
        adjacent, left_right = x - center_x, 'R'
    else:
        adjacent, left_right = center_x - x, 'L'

    if y > center_y:
        opposite, top_bottom = y - center_y, 'B'
    else:
        opposite, top_bottom = center_y - y, 'T'

    # atan2 of the two positive sides is atan(opposite / adjacent) without the zero division
    result = math.degrees(math.atan2(opposite, adjacent))

    if top_bottom == 'T' and left_right == 'R':
        return 90 - result
    if top_bottom == 'B' and left_right == 'R':
        return result + 90
    if top_bottom == 'B' and left_right == 'L':
        return (90 - result) + 180
    return result + 270


def find_span_index(angle, spans):
    """
    Linear scan for the first span containing ``angle``. Both ends are
    inclusive, so an angle on a shared boundary resolves to the earlier span.
    """
    for index, (start, end) in enumerate(spans):
        if start <= angle <= end:
            return index
    return None


def _segment_spans(segments):
    return [(segment.start_angle, segment.end_angle) for segment in segments]


def locate(x, y, segments, center_x, center_y, inner_radius, outer_radius, rotation_angle=0):
    """
    Maps a point in drawing-area coordinates to the index of the segment under
    it, or None when the point is outside the ring or no segment matches.
    Centre and radii are expected already multiplied by the scale factor.
    """
    if not segments:
        return None

    angle = location_angle(x, y, center_x, center_y)
    if rotation_angle != 0:
        angle -= normalize_angle(rotation_angle)
        if angle < 0:
            angle = 360 - abs(angle)

    distance = math.hypot(x - center_x, y - center_y)
    if not inner_radius <= distance <= outer_radius:
        return None

    return find_span_index(angle, _segment_spans(segments))


def relative_pointer_angle(pointer_angle, rotation_angle):
    """Angle in wheel space that currently sits under the fixed pointer."""
    relative = math.floor(pointer_angle - normalize_angle(rotation_angle))
    if relative < 0:
        relative = 360 - abs(relative)
    return relative


def indicated_segment_index(segments, pointer_angle, rotation_angle):
    if not segments:
        return None
    relative = relative_pointer_angle(pointer_angle, rotation_angle)
    index = find_span_index(relative, _segment_spans(segments))
    return 0 if index is None else index


def current_pin_index(pointer_angle, rotation_angle, pin_count, clockwise=True):
    """
    Works out which pin is the current one. When spinning clockwise the pin
    that has just passed the pointer is reported, not the one approaching it.
    """
    if not pin_count:
        return 0

    relative = relative_pointer_angle(pointer_angle, rotation_angle)
    spacing = 360 / pin_count
    spans = [(i * spacing, (i + 1) * spacing) for i in range(pin_count)]
    current = find_span_index(relative, spans) or 0

    if clockwise:
        current += 1
        # pin N sits on top of pin 0
        if current >= pin_count:
            current = 0
    return current
