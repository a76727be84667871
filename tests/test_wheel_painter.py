import logging

import pytest

gi = pytest.importorskip("gi")
cairo = pytest.importorskip("cairo")
try:
    gi.require_version("Gdk", "4.0")
    gi.require_version("GdkPixbuf", "2.0")
    gi.require_version("Pango", "1.0")
    gi.require_version("PangoCairo", "1.0")
except ValueError:
    pytest.skip("GTK 4 introspection data is not installed", allow_module_level=True)

from gwheel.errors import ImageNotLoadedError  # noqa: E402
from gwheel.segment_image import Bitmap, load_bitmap  # noqa: E402
from gwheel.text_layout import ALIGNMENTS, DIRECTIONS, ORIENTATIONS  # noqa: E402
from gwheel.wheel import Wheel  # noqa: E402
from gwheel.wheel_painter import paint_wheel, parse_color, segment_image_placement  # noqa: E402

RED, GREEN, BLUE, YELLOW = (255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (255, 255, 0, 255)


def _canvas(width=200, height=200):
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    return surface, cairo.Context(surface)


def _pixel(surface, x, y):
    surface.flush()
    offset = y * surface.get_stride() + x * 4
    blue, green, red, alpha = surface.get_data()[offset:offset + 4]
    return red, green, blue, alpha


def _quarter_wheel(**options):
    config = {"num_segments": 4, "segments": [
        {"fill_style": "#ff0000"}, {"fill_style": "#00ff00"},
        {"fill_style": "#0000ff"}, {"fill_style": "#ffff00"},
    ]}
    config.update(options)
    wheel = Wheel(config)
    wheel.fit_to_canvas(200, 200)
    return wheel


def _blank_wheel(**options):
    config = {"fill_style": None, "stroke_style": None}
    config.update(options)
    wheel = Wheel(config)
    wheel.fit_to_canvas(200, 200)
    return wheel


def test_segments_are_drawn_clockwise_from_twelve():
    surface, ctx = _canvas()
    paint_wheel(ctx, _quarter_wheel())
    assert _pixel(surface, 150, 50) == RED
    assert _pixel(surface, 150, 150) == GREEN
    assert _pixel(surface, 50, 150) == BLUE
    assert _pixel(surface, 50, 50) == YELLOW


def test_rotation_turns_the_segments():
    surface, ctx = _canvas()
    paint_wheel(ctx, _quarter_wheel(rotation_angle=90))
    assert _pixel(surface, 150, 150) == RED


def test_inner_radius_leaves_a_hole():
    surface, ctx = _canvas()
    paint_wheel(ctx, _quarter_wheel(inner_radius=40))
    assert _pixel(surface, 110, 90)[3] == 0
    assert _pixel(surface, 150, 50) == RED


def test_canvas_is_cleared_unless_told_not_to():
    surface, ctx = _canvas()
    ctx.set_source_rgb(1, 1, 1)
    ctx.paint()
    paint_wheel(ctx, _quarter_wheel())
    assert _pixel(surface, 2, 2)[3] == 0

    surface, ctx = _canvas()
    ctx.set_source_rgb(1, 1, 1)
    ctx.paint()
    paint_wheel(ctx, _quarter_wheel(clear_the_canvas=False))
    assert _pixel(surface, 2, 2) == (255, 255, 255, 255)


def test_every_text_layout_paints():
    for orientation in ORIENTATIONS:
        for alignment in ALIGNMENTS:
            for direction in DIRECTIONS:
                surface, ctx = _canvas()
                wheel = _quarter_wheel(text_orientation=orientation, text_alignment=alignment,
                                       text_direction=direction, text_stroke_style="white")
                for segment in wheel.segments:
                    segment.text = "Prize\nTwo"
                paint_wheel(ctx, wheel)


def test_text_is_drawn_in_the_fill_colour():
    surface, ctx = _canvas()
    wheel = _blank_wheel(num_segments=1, text_font_size=60, text_fill_style="#0000ff",
                         segments=[{"text": "W"}])
    paint_wheel(ctx, wheel)
    surface.flush()
    data = bytes(surface.get_data())
    assert any(data[i + 3] == 255 and data[i] == 255 for i in range(0, len(data), 4))


def test_wheel_default_changes_show_on_the_next_paint():
    wheel = Wheel({"num_segments": 4, "stroke_style": None})
    wheel.fit_to_canvas(200, 200)
    surface, ctx = _canvas()
    paint_wheel(ctx, wheel)
    assert _pixel(surface, 150, 50) == (192, 192, 192, 255)

    wheel.config["fill_style"] = "#ff0000"
    surface, ctx = _canvas()
    paint_wheel(ctx, wheel)
    assert _pixel(surface, 150, 50) == RED
    assert _pixel(surface, 50, 150) == RED


def test_pins_are_drawn_inside_the_rim():
    surface, ctx = _canvas()
    paint_wheel(ctx, _blank_wheel(pins={"number": 4, "stroke_style": None}))
    red, green, blue, alpha = _pixel(surface, 100, 7)
    assert red == green == blue
    assert 100 < red < 160
    assert alpha == 255


def test_pointer_guide_points_at_the_pointer():
    surface, ctx = _canvas()
    paint_wheel(ctx, _blank_wheel(pointer_guide={"display": True}))
    assert _pixel(surface, 100, 30) == RED
    assert _pixel(surface, 150, 100)[3] == 0


def test_unloaded_segment_images_are_logged_not_raised(bitmaps, caplog):
    wheel = Wheel({"draw_mode": "segment_image", "num_segments": 2,
                   "segments": [{"image": "a.png"}, {"image": "b.png"}]}, image_loader=bitmaps)
    wheel.fit_to_canvas(200, 200)
    surface, ctx = _canvas()
    with caplog.at_level(logging.ERROR):
        paint_wheel(ctx, wheel)
    assert "Segment 0" in caplog.text
    assert "Segment 1" in caplog.text


def test_segments_without_an_image_are_skipped(bitmaps, caplog):
    wheel = Wheel({"draw_mode": "segment_image", "num_segments": 2,
                   "segments": [{}, {"image": "b.png"}]}, image_loader=bitmaps)
    wheel.fit_to_canvas(200, 200)
    surface, ctx = _canvas()
    with caplog.at_level(logging.ERROR):
        paint_wheel(ctx, wheel)
    assert "Segment 0" not in caplog.text
    assert "Segment 1" in caplog.text


@pytest.mark.parametrize("direction,expected", [
    ("N", (90, 20, 45)),
    ("S", (90, 100, 225)),
    ("E", (100, 60, 315)),
    ("W", (80, 60, 135)),
])
def test_segment_image_placement(direction, expected):
    assert segment_image_placement(direction, 0, 90, 100, 100, 20, 80) == expected


def test_parse_color():
    assert parse_color(None) is None
    assert parse_color("red").red == 1
    assert parse_color("not-a-colour") is None


def test_paint_without_geometry_is_a_no_op():
    surface, ctx = _canvas()
    paint_wheel(ctx, Wheel({"num_segments": 4}))
    paint_wheel(None, _quarter_wheel())
    assert _pixel(surface, 150, 50)[3] == 0


@pytest.fixture
def red_png(tmp_path):
    surface, ctx = _canvas(20, 20)
    ctx.set_source_rgb(1, 0, 0)
    ctx.paint()
    path = tmp_path / "red.png"
    surface.write_to_png(str(path))
    return str(path)


def test_bitmap_loads_and_paints(red_png):
    bitmap = Bitmap(red_png)
    assert bitmap.width == 0
    assert bitmap.load()
    assert (bitmap.width, bitmap.height) == (20, 20)

    surface, ctx = _canvas(100, 100)
    bitmap.paint(ctx, 10, 10, 40, 40)
    assert _pixel(surface, 45, 45) == RED
    assert _pixel(surface, 60, 60)[3] == 0


def test_bitmap_errors(tmp_path, caplog):
    missing = Bitmap(str(tmp_path / "missing.png"))
    assert not missing.load()
    assert "missing.png" in caplog.text
    with pytest.raises(ImageNotLoadedError):
        missing.paint(_canvas()[1], 0, 0)


def test_load_bitmap_returns_before_the_file_is_read(red_png):
    bitmap = load_bitmap(red_png)
    assert bitmap.height == 0
    assert not bitmap.is_loaded
