# wheel_displayer.py
import logging

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from gwheel.segment_image import load_bitmap
from gwheel.tween import tween_to
from gwheel.wheel import Wheel
from gwheel.wheel_painter import paint_wheel

logger = logging.getLogger(__name__)


class WheelDisplayer:
    """
    Hosts a Wheel in a Gtk.DrawingArea. Clicks are mapped to segments and
    reported through ``on_segment_clicked(index, segment)``. The wheel is
    laid out for ``width`` x ``height``; with the ``responsive`` option it
    shrinks with the drawing area down to ``min_responsive_scale``.
    """
    def __init__(self, wheel_config=None, width=400, height=400, on_segment_clicked=None):
        self.on_segment_clicked = on_segment_clicked
        self.original_width = width
        self.original_height = height
        self.widget = None
        self.wheel = Wheel(wheel_config, image_loader=load_bitmap, tween_driver=tween_to,
                           on_redraw=self.queue_draw)
        self.wheel.fit_to_canvas(width, height)
        self.widget = self._create_widget()

    def _create_widget(self):
        drawing_area = Gtk.DrawingArea(hexpand=True, vexpand=True)
        drawing_area.set_content_width(self.original_width)
        drawing_area.set_content_height(self.original_height)
        drawing_area.set_draw_func(self.on_draw)
        click = Gtk.GestureClick.new()
        click.connect("pressed", self._on_drawing_area_clicked)
        drawing_area.add_controller(click)
        return drawing_area

    def get_widget(self):
        return self.widget

    def queue_draw(self):
        if self.widget is not None:
            self.widget.queue_draw()

    def responsive_scale(self, width, height):
        """Scale factor for a drawing area of width x height, never above 1 or below the configured minimum."""
        if not self.original_width or not self.original_height:
            return 1
        scale = min(width / self.original_width, height / self.original_height)
        minimum = self.wheel.config.get("min_responsive_scale") or 0
        return max(minimum, min(1, scale))

    def on_draw(self, area, ctx, width, height):
        if self.wheel.config.get("responsive"):
            self.wheel.set_scale_factor(self.responsive_scale(width, height))
        paint_wheel(ctx, self.wheel)

    def _on_drawing_area_clicked(self, gesture, n_press, x, y):
        index = self.wheel.get_segment_number_at(x, y)
        if index is None:
            return
        logger.debug("Clicked segment %d at (%.0f, %.0f)", index, x, y)
        if self.on_segment_clicked:
            self.on_segment_clicked(index, self.wheel.segments[index])

    def spin(self):
        """Starts the wheel's configured animation from its current position."""
        return self.wheel.start_animation()

    def close(self):
        self.wheel.stop_animation(can_callback=False)
