# text_layout.py
"""
Placement of segment text around the wheel.

Every layout is expressed as a list of GlyphPlacement entries. To draw one,
rotate the context by ``angle`` degrees about the wheel centre, then draw
``text`` at ``(x, y)`` anchored by ``align`` and ``baseline``. Horizontal
lines come out as a single entry, vertical and curved text as one entry per
character.

Angles follow the canvas convention used by the painter: 0 degrees points to
3 o'clock, which is why horizontal text subtracts 90 from the wheel-space
mid-angle while vertical and curved text (drawn along the rotated y axis)
do not.
"""
from collections import namedtuple
from dataclasses import dataclass

from gwheel.errors import WheelConfigError

HORIZONTAL = "horizontal"
VERTICAL = "vertical"
CURVED = "curved"
ORIENTATIONS = (HORIZONTAL, VERTICAL, CURVED)

INNER = "inner"
OUTER = "outer"
CENTER = "center"
ALIGNMENTS = (INNER, OUTER, CENTER)

NORMAL = "normal"
REVERSED = "reversed"
DIRECTIONS = (NORMAL, REVERSED)

GlyphPlacement = namedtuple("GlyphPlacement", "text x y angle align baseline")


@dataclass
class TextGeometry:
    """Wheel geometry as seen by the text layout, linear values already scaled."""

    center_x: float
    center_y: float
    inner_radius: float
    outer_radius: float
    font_size: float
    margin: float
    rotation_angle: float = 0


def vertical_increment(font_size):
    return font_size - font_size / 9


def curved_angle_per_char(font_size, radius):
    """
    Angular spacing between characters on an arc. 4 * font_size / 10 degrees
    looks right at a 100px radius; the value shrinks as the radius grows so
    the on-screen spacing stays the same.
    """
    if radius <= 0:
        return 0
    return 4 * (font_size / 10) * (100 / radius)


def _check_enums(orientation, alignment, direction):
    if orientation not in ORIENTATIONS:
        raise WheelConfigError(f"Invalid orientation: {orientation!r}")
    if alignment not in ALIGNMENTS:
        raise WheelConfigError(f"Invalid alignment: {alignment!r}")
    if direction not in DIRECTIONS:
        raise WheelConfigError(f"Invalid text direction: {direction!r}")


def _mid(start_angle, end_angle):
    return end_angle - (end_angle - start_angle) / 2


def _curved_start(start_angle, end_angle, line, angle_per_char):
    if len(line) > 1:
        total_arc = angle_per_char * len(line)
        return start_angle + ((end_angle - start_angle) / 2 - total_arc / 2), "left"
    return start_angle + (end_angle - start_angle) / 2, "center"


def _layout_normal(orientation, alignment, start_angle, end_angle, line, geo, line_offset, line_total):
    cx, cy = geo.center_x, geo.center_y
    inner, outer = geo.inner_radius, geo.outer_radius
    font_size, margin = geo.font_size, geo.margin
    placements = []

    if orientation == HORIZONTAL:
        align = {INNER: "left", OUTER: "right"}.get(alignment, "center")
        angle = _mid(start_angle, end_angle) + geo.rotation_angle - 90
        if alignment == INNER:
            x = cx + inner + margin
        elif alignment == OUTER:
            x = cx + outer - margin
        else:
            x = cx + inner + (outer - inner) / 2 + margin
        placements.append(GlyphPlacement(line, x, cy + line_offset, angle, align, "middle"))

    elif orientation == VERTICAL:
        baseline = {INNER: "bottom", OUTER: "top"}.get(alignment, "middle")
        angle = _mid(start_angle, end_angle) + geo.rotation_angle
        y_inc = vertical_increment(font_size)
        x = cx + line_offset

        if alignment == OUTER:
            y_pos = cy - outer + margin
            for character in line:
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos += y_inc
        elif alignment == INNER:
            # drawn outwards from the inner edge, so walk the text backwards to keep reading order
            y_pos = cy - inner - margin
            for character in reversed(line):
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos -= y_inc
        else:
            center_adjustment = y_inc * (len(line) - 1) / 2 if len(line) > 1 else 0
            y_pos = (cy - inner - (outer - inner) / 2) - center_adjustment - margin
            for character in line:
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos += y_inc

    else:
        if alignment == INNER:
            radius = inner + margin + font_size * (line_total - 1)
            baseline = "bottom"
        elif alignment == OUTER:
            radius = outer - margin
            baseline = "top"
        else:
            radius = inner + margin + (outer - inner) / 2
            baseline = "middle"

        angle_per_char = curved_angle_per_char(font_size, radius) if len(line) > 1 else 0
        draw_angle, align = _curved_start(start_angle, end_angle, line, angle_per_char)
        draw_angle += geo.rotation_angle

        for character in line:
            placements.append(GlyphPlacement(character, cx, cy - radius + line_offset, draw_angle, align, baseline))
            draw_angle += angle_per_char

    return placements


def _layout_reversed(orientation, alignment, start_angle, end_angle, line, geo, line_offset, line_total):
    """
    Reversed text reads correctly when the wheel is viewed upside down: each
    case draws on the opposite side of the centre (180 degrees round) and
    swaps what inner and outer mean.
    """
    cx, cy = geo.center_x, geo.center_y
    inner, outer = geo.inner_radius, geo.outer_radius
    font_size, margin = geo.font_size, geo.margin
    placements = []

    if orientation == HORIZONTAL:
        align = {INNER: "right", OUTER: "left"}.get(alignment, "center")
        angle = (_mid(start_angle, end_angle) + geo.rotation_angle - 90) - 180
        if alignment == INNER:
            x = cx - inner - margin
        elif alignment == OUTER:
            x = cx - outer + margin
        else:
            x = cx - inner - (outer - inner) / 2 - margin
        placements.append(GlyphPlacement(line, x, cy + line_offset, angle, align, "middle"))

    elif orientation == VERTICAL:
        baseline = {INNER: "top", OUTER: "bottom"}.get(alignment, "middle")
        angle = (_mid(start_angle, end_angle) - 180) + geo.rotation_angle
        y_inc = vertical_increment(font_size)
        x = cx + line_offset

        if alignment == OUTER:
            y_pos = cy + outer - margin
            for character in reversed(line):
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos -= y_inc
        elif alignment == INNER:
            y_pos = cy + inner + margin
            for character in line:
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos += y_inc
        else:
            center_adjustment = y_inc * (len(line) - 1) / 2 if len(line) > 1 else 0
            y_pos = cy + inner + (outer - inner) / 2 + center_adjustment + margin
            for character in reversed(line):
                placements.append(GlyphPlacement(character, x, y_pos, angle, "center", baseline))
                y_pos -= y_inc

    else:
        if alignment == INNER:
            radius = inner + margin
            baseline = "top"
        elif alignment == OUTER:
            # later lines move inwards so they stay on the wheel
            radius = outer - margin - font_size * (line_total - 1)
            baseline = "bottom"
        else:
            radius = inner + margin + (outer - inner) / 2
            baseline = "middle"

        angle_per_char = curved_angle_per_char(font_size, radius) if len(line) > 1 else 0
        draw_angle, align = _curved_start(start_angle, end_angle, line, angle_per_char)
        draw_angle += geo.rotation_angle - 180

        for character in reversed(line):
            placements.append(GlyphPlacement(character, cx, cy + radius + line_offset, draw_angle, align, baseline))
            draw_angle += angle_per_char

    return placements


def layout_line(orientation, alignment, direction, start_angle, end_angle, line, geometry,
                line_offset=0, line_total=1):
    """
    Lays out one line of text for the segment spanning ``start_angle`` to
    ``end_angle`` (wheel-space degrees). Raises WheelConfigError for an
    unknown orientation, alignment or direction.
    """
    _check_enums(orientation, alignment, direction)
    if direction == REVERSED:
        return _layout_reversed(orientation, alignment, start_angle, end_angle, line, geometry,
                                line_offset, line_total)
    return _layout_normal(orientation, alignment, start_angle, end_angle, line, geometry,
                          line_offset, line_total)


def first_line_offset(orientation, alignment, font_size, line_total):
    """
    Offset of the first line so a multi-line block is centred on the anchor.
    Curved text aligned inner or outer starts at zero, otherwise part of the
    block would be drawn outside the ring.
    """
    if orientation == CURVED and alignment in (INNER, OUTER):
        return 0
    return 0 - (font_size * (line_total / 2)) + (font_size / 2)


def layout_text(text, orientation, alignment, direction, start_angle, end_angle, geometry):
    """Splits ``text`` on newlines and lays out each line, returning all placements."""
    _check_enums(orientation, alignment, direction)
    if not text:
        return []

    lines = text.split("\n")
    line_offset = first_line_offset(orientation, alignment, geometry.font_size, len(lines))
    placements = []
    for line in lines:
        placements.extend(layout_line(orientation, alignment, direction, start_angle, end_angle,
                                      line, geometry, line_offset, len(lines)))
        line_offset += geometry.font_size
    return placements
