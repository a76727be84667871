# wheel_painter.py
"""
Renders a Wheel onto a cairo context. All geometry is multiplied by the
wheel's scale factor here, so the model keeps its unscaled values.
"""
import logging
import math

import cairo
import gi

gi.require_version("Gdk", "4.0")
gi.require_version("Pango", "1.0")
gi.require_version("PangoCairo", "1.0")
from gi.repository import Gdk, Pango, PangoCairo

from gwheel.angle_math import deg_to_rad
from gwheel.errors import ImageNotLoadedError
from gwheel.text_layout import TextGeometry, layout_text
from gwheel.wheel import DRAW_IMAGE, DRAW_SEGMENT_IMAGE

logger = logging.getLogger(__name__)


def parse_color(color):
    """Parses a CSS colour string into a Gdk.RGBA, or None when unset or unparseable."""
    if not color:
        return None
    rgba = Gdk.RGBA()
    if not rgba.parse(color):
        logger.warning("Could not parse color %r", color)
        return None
    return rgba


def _set_source(ctx, rgba):
    ctx.set_source_rgba(rgba.red, rgba.green, rgba.blue, rgba.alpha)


def _rotate_about(ctx, center_x, center_y, degrees):
    ctx.translate(center_x, center_y)
    ctx.rotate(deg_to_rad(degrees))
    ctx.translate(-center_x, -center_y)


def _fill_and_stroke(ctx, fill, stroke, line_width):
    if fill:
        _set_source(ctx, fill)
        if stroke:
            ctx.fill_preserve()
        else:
            ctx.fill()
    if stroke:
        _set_source(ctx, stroke)
        ctx.set_line_width(line_width)
        ctx.stroke()
    ctx.new_path()


def paint_wheel(ctx, wheel):
    """Draws ``wheel`` according to its draw mode, then its pins and pointer guide."""
    if ctx is None or not wheel.has_geometry:
        return

    if wheel.clear_the_canvas:
        clear_canvas(ctx)

    mode = wheel.draw_mode
    if mode == DRAW_IMAGE:
        draw_wheel_image(ctx, wheel)
    elif mode == DRAW_SEGMENT_IMAGE:
        draw_segment_images(ctx, wheel)
    else:
        draw_segments(ctx, wheel)

    if wheel.config.get("draw_text"):
        draw_segment_text(ctx, wheel)

    # segment outlines drawn over the image
    if mode in (DRAW_IMAGE, DRAW_SEGMENT_IMAGE) and wheel.config.get("image_overlay"):
        draw_segments(ctx, wheel)

    if wheel.pins is not None and wheel.pins.is_visible():
        draw_pins(ctx, wheel)

    if wheel.pointer_guide.is_visible():
        draw_pointer_guide(ctx, wheel)


def clear_canvas(ctx):
    ctx.save()
    ctx.set_operator(cairo.OPERATOR_CLEAR)
    ctx.paint()
    ctx.restore()


# --- Segments ---

def _segment_path(ctx, cx, cy, inner_r, outer_r, start_deg, end_deg, line_width):
    start_a = deg_to_rad(start_deg - 90)
    end_a = deg_to_rad(end_deg - 90)
    ctx.new_path()
    if not inner_r:
        ctx.move_to(cx, cy)
    else:
        # half the line width keeps the stroke inside the inner edge
        corrected = inner_r - line_width / 2
        ctx.move_to(cx + math.cos(start_a) * corrected, cy + math.sin(start_a) * corrected)
    ctx.arc(cx, cy, outer_r, start_a, end_a)
    if inner_r:
        ctx.arc_negative(cx, cy, inner_r, end_a, start_a)
    else:
        ctx.line_to(cx, cy)


def draw_segments(ctx, wheel):
    if not wheel.segments:
        return
    cx = wheel.scaled(wheel.config["center_x"])
    cy = wheel.scaled(wheel.config["center_y"])
    inner_r = wheel.scaled(wheel.config.get("inner_radius"))
    outer_r = wheel.scaled(wheel.config["outer_radius"])
    rotation = wheel.rotation_angle

    for segment in wheel.segments:
        fill = parse_color(segment.resolve("fill_style", wheel.config))
        stroke = parse_color(segment.resolve("stroke_style", wheel.config))
        if not fill and not stroke:
            continue
        line_width = segment.resolve("line_width", wheel.config) or 0

        ctx.save()
        _segment_path(ctx, cx, cy, inner_r, outer_r,
                      segment.start_angle + rotation, segment.end_angle + rotation, line_width)
        _fill_and_stroke(ctx, fill, stroke, line_width)
        ctx.restore()


# --- Text ---

_FONT_WEIGHTS = {"bold": Pango.Weight.BOLD, "normal": Pango.Weight.NORMAL}


def _font_description(family, weight, size):
    font_desc = Pango.FontDescription.from_string(family or "Sans")
    font_desc.set_weight(_FONT_WEIGHTS.get(weight, Pango.Weight.NORMAL))
    font_desc.set_absolute_size(size * Pango.SCALE)
    return font_desc


def _text_origin(layout, x, y, align, baseline):
    """Moves (x, y) from an anchor point to the top-left corner of the layout."""
    _, logical = layout.get_pixel_extents()
    if align == "center":
        x -= logical.width / 2
    elif align == "right":
        x -= logical.width

    if baseline == "middle":
        y -= logical.height / 2
    elif baseline == "bottom":
        y -= logical.height
    elif baseline != "top":
        y -= layout.get_baseline() / Pango.SCALE
    return x, y


def _draw_glyph(ctx, layout, placement, center_x, center_y, fill, stroke, line_width):
    ctx.save()
    _rotate_about(ctx, center_x, center_y, placement.angle)
    PangoCairo.update_layout(ctx, layout)
    layout.set_text(placement.text, -1)
    x, y = _text_origin(layout, placement.x, placement.y, placement.align, placement.baseline)
    ctx.new_path()
    ctx.move_to(x, y)
    PangoCairo.layout_path(ctx, layout)
    _fill_and_stroke(ctx, fill, stroke, line_width)
    ctx.restore()


def draw_segment_text(ctx, wheel):
    defaults = wheel.config
    cx = wheel.scaled(defaults["center_x"])
    cy = wheel.scaled(defaults["center_y"])

    for segment in wheel.segments:
        if not segment.text:
            continue

        font_size = wheel.scaled(segment.resolve("text_font_size", defaults))
        geometry = TextGeometry(
            center_x=cx, center_y=cy,
            inner_radius=wheel.scaled(defaults.get("inner_radius")),
            outer_radius=wheel.scaled(defaults["outer_radius"]),
            font_size=font_size,
            margin=wheel.scaled(segment.resolve("text_margin", defaults)),
            rotation_angle=wheel.rotation_angle)
        placements = layout_text(segment.text,
                                 segment.resolve("text_orientation", defaults),
                                 segment.resolve("text_alignment", defaults),
                                 segment.resolve("text_direction", defaults),
                                 segment.start_angle, segment.end_angle, geometry)

        fill = parse_color(segment.resolve("text_fill_style", defaults))
        stroke = parse_color(segment.resolve("text_stroke_style", defaults))
        line_width = segment.resolve("text_line_width", defaults) or 0

        layout = PangoCairo.create_layout(ctx)
        layout.set_font_description(_font_description(segment.resolve("text_font_family", defaults),
                                                      segment.resolve("text_font_weight", defaults),
                                                      font_size))
        for placement in placements:
            _draw_glyph(ctx, layout, placement, cx, cy, fill, stroke, line_width)


# --- Images ---

def draw_wheel_image(ctx, wheel):
    bitmap = wheel.wheel_image
    if bitmap is None:
        return
    if not bitmap.is_loaded:
        logger.debug("Wheel image %s not loaded yet", bitmap.path)
        return

    cx = wheel.scaled(wheel.config["center_x"])
    cy = wheel.scaled(wheel.config["center_y"])
    width = wheel.scaled(bitmap.width)
    height = wheel.scaled(bitmap.height)

    ctx.save()
    _rotate_about(ctx, cx, cy, wheel.rotation_angle)
    bitmap.paint(ctx, cx - width / 2, cy - height / 2, width, height)
    ctx.restore()


def segment_image_placement(direction, start_angle, end_angle, center_x, center_y, width, height):
    """
    Returns (left, top, angle) for a segment image. The image is drawn with
    its outside edge facing ``direction`` (N, E, S or W) and then rotated so
    that edge sits over the middle of the segment.
    """
    half_span = (end_angle - start_angle) / 2
    if direction == "S":
        return center_x - width / 2, center_y, start_angle + 180 + half_span
    if direction == "E":
        return center_x, center_y - height / 2, start_angle + 270 + half_span
    if direction == "W":
        return center_x - width, center_y - height / 2, start_angle + 90 + half_span
    return center_x - width / 2, center_y - height, start_angle + half_span


def draw_segment_image(ctx, wheel, segment):
    if not segment.config.get("image"):
        return
    bitmap = segment.image_data
    if bitmap is None:
        segment.render_image()
        bitmap = segment.image_data
    if bitmap is None or not bitmap.is_loaded:
        raise ImageNotLoadedError(f"Image {segment.config.get('image')!r} is not loaded")

    cx = wheel.scaled(wheel.config["center_x"])
    cy = wheel.scaled(wheel.config["center_y"])
    width = wheel.scaled(bitmap.width)
    height = wheel.scaled(bitmap.height)
    left, top, angle = segment_image_placement(segment.resolve("image_direction", wheel.config),
                                               segment.start_angle, segment.end_angle,
                                               cx, cy, width, height)
    ctx.save()
    _rotate_about(ctx, cx, cy, wheel.rotation_angle + angle)
    bitmap.paint(ctx, left, top, width, height)
    ctx.restore()


def draw_segment_images(ctx, wheel):
    for index, segment in enumerate(wheel.segments):
        try:
            draw_segment_image(ctx, wheel, segment)
        except ImageNotLoadedError as e:
            logger.error("Segment %d: %s", index, e)


# --- Pins and pointer guide ---

def draw_pins(ctx, wheel):
    pins = wheel.pins
    if not pins.number:
        return

    cx = wheel.scaled(wheel.config["center_x"])
    cy = wheel.scaled(wheel.config["center_y"])
    outer_r = wheel.scaled(wheel.config["outer_radius"])
    pin_radius = pins.config.get("outer_radius") or 0
    margin = pins.config.get("margin") or 0
    if pins.config.get("responsive"):
        pin_radius *= wheel.scale_factor
        margin *= wheel.scale_factor

    fill = parse_color(pins.config.get("fill_style"))
    stroke = parse_color(pins.config.get("stroke_style"))
    line_width = pins.config.get("line_width") or 0

    for i in range(pins.number):
        ctx.save()
        _rotate_about(ctx, cx, cy, i * pins.spacing + wheel.rotation_angle)
        ctx.new_path()
        ctx.arc(cx, (cy - outer_r) + pin_radius + margin, pin_radius, 0, 2 * math.pi)
        _fill_and_stroke(ctx, fill, stroke, line_width)
        ctx.restore()


def draw_pointer_guide(ctx, wheel):
    guide = wheel.pointer_guide
    stroke = parse_color(guide.config.get("stroke_style"))
    if not stroke:
        return

    cx = wheel.scaled(wheel.config["center_x"])
    cy = wheel.scaled(wheel.config["center_y"])
    outer_r = wheel.scaled(wheel.config["outer_radius"])

    ctx.save()
    _rotate_about(ctx, cx, cy, wheel.pointer_angle)
    ctx.new_path()
    ctx.move_to(cx, cy)
    # runs past the rim and off the top of the drawing area
    ctx.line_to(cx, -(outer_r / 4))
    _fill_and_stroke(ctx, None, stroke, guide.config.get("line_width") or 0)
    ctx.restore()
