# wheel.py
import logging
import random

from gwheel import hit_tester
from gwheel.angle_math import normalize_angle
from gwheel.animation_planner import CUSTOM, ROTATION_PROPERTY
from gwheel.elements.animation import SOUND_TRIGGER_PIN, Animation
from gwheel.elements.pin import Pin
from gwheel.elements.pointer_guide import PointerGuide
from gwheel.elements.segment import IMAGE_DIRECTIONS, Segment
from gwheel.elements.wheel_element import WheelElement
from gwheel.segment_sizer import apply_spans
from gwheel.text_layout import ALIGNMENTS, DIRECTIONS, ORIENTATIONS
from gwheel.wheel_config import ConfigOption, enum_options

logger = logging.getLogger(__name__)

DRAW_CODE = "code"
DRAW_IMAGE = "image"
DRAW_SEGMENT_IMAGE = "segment_image"


class Wheel(WheelElement):
    """
    The prize wheel model: segments, rotation, pins, pointer guide and
    animation state. Nothing here draws; ``gwheel.wheel_painter`` renders a
    Wheel onto a cairo context and ``gwheel.wheel_displayer`` hosts it in a
    widget.

    ``image_loader(path, on_load)`` must return a bitmap object whose
    ``width``/``height`` stay 0 until loaded. ``tween_driver`` has the
    signature of ``gwheel.tween.tween_to``. ``on_redraw`` is called whenever
    the wheel needs painting again.
    """
    def __init__(self, config=None, image_loader=None, tween_driver=None, on_redraw=None, rng=random):
        self._image_loader = image_loader
        self._tween_driver = tween_driver
        self.on_redraw = on_redraw
        self._rng = rng
        self.segments = []
        self.tween = None
        self.wheel_image = None
        self._last_sound_marker = None
        super().__init__(config)

        if self.config.get("draw_text") is None:
            self.config["draw_text"] = self.draw_mode == DRAW_CODE
        if self.config.get("text_margin") is None:
            self.config["text_margin"] = self.config["text_font_size"] / 1.7

        self.animation = Animation(self.config.get("animation"))
        pin_options = self.config.get("pins")
        self.pins = Pin(pin_options) if pin_options is not None else None
        self.pointer_guide = PointerGuide(self.config.get("pointer_guide"))

        segment_options = self.config.get("segments") or []
        for index in range(int(self.config.get("num_segments") or 0)):
            options = segment_options[index] if index < len(segment_options) else None
            self.segments.append(self._new_segment(options))
        self.update_segment_sizes()

        if self.draw_mode == DRAW_IMAGE and self.config.get("wheel_image"):
            self.load_wheel_image(self.config["wheel_image"])
        elif self.draw_mode == DRAW_SEGMENT_IMAGE:
            for segment in self.segments:
                segment.render_image()

    @staticmethod
    def get_config_model():
        return {
            "Wheel": [
                ConfigOption("num_segments", "number", "Segments:", 1, 0, 360, 1, 0),
                ConfigOption("segments", "options", "Segment Options:", None),
                ConfigOption("center_x", "number", "Centre X (px):", None, 0, 10000, 1, 0,
                             tooltip="Leave empty to use the centre of the drawing area."),
                ConfigOption("center_y", "number", "Centre Y (px):", None, 0, 10000, 1, 0),
                ConfigOption("outer_radius", "number", "Outer Radius (px):", None, 0, 10000, 1, 0),
                ConfigOption("inner_radius", "number", "Inner Radius (px):", 0, 0, 10000, 1, 0),
                ConfigOption("rotation_angle", "number", "Rotation (deg):", 0, -3600, 3600, 1, 1),
                ConfigOption("pointer_angle", "number", "Pointer Angle (deg):", 0, 0, 360, 1, 0),
                ConfigOption("draw_mode", "dropdown", "Draw Mode:", DRAW_CODE,
                             options_dict={"Code": DRAW_CODE, "Image": DRAW_IMAGE,
                                           "Segment Images": DRAW_SEGMENT_IMAGE}),
                ConfigOption("clear_the_canvas", "bool", "Clear Canvas Before Drawing:", True),
            ],
            "Wheel Style": [
                ConfigOption("fill_style", "color", "Segment Fill Color:", "silver"),
                ConfigOption("stroke_style", "color", "Segment Line Color:", "black"),
                ConfigOption("line_width", "number", "Segment Line Width:", 1, 0, 20, 0.5, 1),
            ],
            "Text": [
                ConfigOption("draw_text", "bool", "Draw Text:", None,
                             tooltip="Defaults to on in code mode and off in the image modes."),
                ConfigOption("text_font_family", "font", "Font Family:", "Sans"),
                ConfigOption("text_font_size", "number", "Font Size:", 20, 1, 200, 1, 0),
                ConfigOption("text_font_weight", "dropdown", "Font Weight:", "bold",
                             options_dict={"Normal": "normal", "Bold": "bold"}),
                ConfigOption("text_orientation", "dropdown", "Orientation:", "horizontal",
                             options_dict=enum_options(ORIENTATIONS)),
                ConfigOption("text_alignment", "dropdown", "Alignment:", "center",
                             options_dict=enum_options(ALIGNMENTS)),
                ConfigOption("text_direction", "dropdown", "Direction:", "normal",
                             options_dict=enum_options(DIRECTIONS)),
                ConfigOption("text_margin", "number", "Margin (px):", None, 0, 200, 1, 0),
                ConfigOption("text_fill_style", "color", "Text Color:", "black"),
                ConfigOption("text_stroke_style", "color", "Text Outline Color:", None),
                ConfigOption("text_line_width", "number", "Text Outline Width:", 1, 0, 20, 0.5, 1),
            ],
            "Images": [
                ConfigOption("wheel_image", "file", "Wheel Image:", None),
                ConfigOption("image_direction", "dropdown", "Segment Images Face:", "N",
                             options_dict=IMAGE_DIRECTIONS),
                ConfigOption("image_overlay", "bool", "Draw Segment Outlines Over Images:", False),
            ],
            "Scaling": [
                ConfigOption("responsive", "bool", "Scale To Drawing Area:", False),
                ConfigOption("min_responsive_scale", "number", "Minimum Scale:", 0.5, 0.05, 1, 0.05, 2),
                ConfigOption("scale_factor", "number", "Scale Factor:", 1, 0.05, 10, 0.05, 2),
            ],
            "Parts": [
                ConfigOption("animation", "options", "Animation:", None),
                ConfigOption("pins", "options", "Pins:", None),
                ConfigOption("pointer_guide", "options", "Pointer Guide:", None),
            ],
        }

    def _new_segment(self, options=None):
        return Segment(options, image_loader=self._image_loader, on_image_loaded=self._on_segment_image_loaded)

    def _request_redraw(self):
        if self.on_redraw:
            self.on_redraw()

    # --- Simple accessors ---

    @property
    def draw_mode(self):
        return self.config.get("draw_mode")

    @property
    def num_segments(self):
        return len(self.segments)

    @property
    def pointer_angle(self):
        return self.config.get("pointer_angle") or 0

    @property
    def rotation_angle(self):
        return self.config.get("rotation_angle") or 0

    def set_rotation_angle(self, value):
        self.config["rotation_angle"] = value

    def get_rotation_position(self):
        """Rotation folded into [0, 360)."""
        return normalize_angle(self.rotation_angle)

    def get_animated_property(self, name):
        return self.config.get(name) or 0

    def set_animated_property(self, name, value):
        """Setter used by the tween driver, which only knows the property by name."""
        if name == ROTATION_PROPERTY:
            self.set_rotation_angle(value)
        else:
            self.config[name] = value

    @property
    def scale_factor(self):
        return self.config.get("scale_factor") or 1

    def set_scale_factor(self, scale_factor):
        self.config["scale_factor"] = scale_factor

    def scaled(self, value):
        return (value or 0) * self.scale_factor

    def set_center(self, center_x, center_y):
        self.config["center_x"] = center_x
        self.config["center_y"] = center_y

    def fit_to_canvas(self, width, height):
        """
        Fills in any geometry left unset from the size of the drawing area:
        the centre goes to the middle and the outer radius to the largest
        circle that fits, less the line width.
        """
        if self.config.get("center_x") is None:
            self.config["center_x"] = width / 2
        if self.config.get("center_y") is None:
            self.config["center_y"] = height / 2
        if self.config.get("outer_radius") is None:
            self.config["outer_radius"] = min(width, height) / 2 - (self.config.get("line_width") or 0)

    @property
    def has_geometry(self):
        return all(self.config.get(key) is not None for key in ("center_x", "center_y", "outer_radius"))

    @property
    def clear_the_canvas(self):
        """Whether the next paint clears first. A running animation may override the wheel setting."""
        if self.tween is not None:
            animation_clear = self.animation.config.get("clear_the_canvas")
            if animation_clear is not None:
                return animation_clear
        return self.config.get("clear_the_canvas")

    # --- Segments ---

    def update_segment_sizes(self):
        apply_spans(self.segments)

    def add_segment(self, options=None, position=None):
        """Inserts a new segment before ``position`` (appends when None) and re-shares the circle."""
        segment = self._new_segment(options)
        if position is None:
            self.segments.append(segment)
        else:
            self.segments.insert(position, segment)
        self.config["num_segments"] = len(self.segments)
        self.update_segment_sizes()
        if self.draw_mode == DRAW_SEGMENT_IMAGE:
            segment.render_image()
        return segment

    def delete_segment(self, position=None):
        """Removes the segment at ``position`` (the last when None). A wheel always keeps one segment."""
        if len(self.segments) <= 1:
            return None
        removed = self.segments.pop(len(self.segments) - 1 if position is None else position)
        self.config["num_segments"] = len(self.segments)
        self.update_segment_sizes()
        return removed

    def get_segment_number_at(self, x, y):
        """Index of the segment under widget coordinates (x, y), or None."""
        if not self.has_geometry:
            return None
        return hit_tester.locate(x, y, self.segments,
                                 self.scaled(self.config["center_x"]), self.scaled(self.config["center_y"]),
                                 self.scaled(self.config.get("inner_radius")),
                                 self.scaled(self.config["outer_radius"]),
                                 self.rotation_angle)

    def get_segment_at(self, x, y):
        index = self.get_segment_number_at(x, y)
        return None if index is None else self.segments[index]

    def get_indicated_segment_number(self):
        return hit_tester.indicated_segment_index(self.segments, self.pointer_angle, self.rotation_angle)

    def get_indicated_segment(self):
        index = self.get_indicated_segment_number()
        return None if index is None else self.segments[index]

    def get_current_pin_number(self):
        pin_count = self.pins.number if self.pins else 0
        return hit_tester.current_pin_index(self.pointer_angle, self.rotation_angle, pin_count,
                                            clockwise=self.animation.is_clockwise)

    def get_random_for_segment(self, index):
        """A random stop angle inside segment ``index``, for a rigged spin_to_stop."""
        if not 0 <= index < len(self.segments):
            raise IndexError(f"Segment {index} does not exist (wheel has {len(self.segments)})")
        return self.segments[index].get_random_stop_angle(self._rng)

    # --- Animation ---

    def start_animation(self):
        """
        Plans the configured animation and hands it to the tween driver.
        A previous tween is killed first, without its finished callback.
        Spins end relative to the start of the current turn, so the rotation
        keeps its whole turns and a second spin travels as far as the first.
        Returns the plan, or None when there is no driver to run it.
        """
        plan = self.animation.plan(self.pointer_angle, rng=self._rng)
        if self._tween_driver is None:
            logger.warning("Wheel has no tween driver, animation not started")
            return None

        self._kill_tween()
        self._last_sound_marker = self._sound_marker()
        name = plan.property_name
        start_value = self.get_animated_property(name)
        end_value = plan.to_value
        if name == ROTATION_PROPERTY and self.animation.config.get("type") != CUSTOM:
            end_value += start_value - normalize_angle(start_value)
        logger.debug("Starting %s animation from %s=%s to %s",
                     self.animation.config.get("type"), name, start_value, end_value)
        self.tween = self._tween_driver(
            lambda value: self.set_animated_property(name, value),
            start_value, end_value, plan.duration,
            easing=plan.easing, repeat=plan.repeat, yoyo=plan.yoyo,
            on_update=self._animation_loop, on_complete=self._animation_finished)
        return plan

    def pause_animation(self):
        if self.tween is not None:
            self.tween.pause()

    def resume_animation(self):
        if self.tween is not None:
            self.tween.play()

    def stop_animation(self, can_callback=True):
        self._kill_tween()
        if can_callback:
            self.animation.fire("callback_finished", self.get_indicated_segment())

    def _kill_tween(self):
        if self.tween is not None:
            self.tween.kill()
            self.tween = None

    def _animation_loop(self):
        self.animation.fire("callback_before")
        self._request_redraw()
        self.animation.fire("callback_after")
        self._trigger_sound()

    def _animation_finished(self):
        self.tween = None
        self.animation.fire("callback_finished", self.get_indicated_segment())

    def _sound_marker(self):
        if self.animation.config.get("sound_trigger") == SOUND_TRIGGER_PIN:
            return self.get_current_pin_number()
        return self.get_indicated_segment_number()

    def _trigger_sound(self):
        if not self.animation.config.get("callback_sound"):
            return
        marker = self._sound_marker()
        if marker != self._last_sound_marker:
            self._last_sound_marker = marker
            self.animation.fire("callback_sound")

    # --- Images ---

    def load_wheel_image(self, path):
        self.config["wheel_image"] = path
        if self._image_loader is None:
            logger.warning("No image loader set, wheel image %s will not load", path)
            return
        self.wheel_image = self._image_loader(path, self._on_wheel_image_loaded)

    def _on_wheel_image_loaded(self, bitmap=None):
        if bitmap is not None:
            self.wheel_image = bitmap
        self._request_redraw()

    def all_segment_images_loaded(self):
        return all(segment.is_image_loaded for segment in self.segments if segment.config.get("image"))

    def _on_segment_image_loaded(self, segment):
        if self.all_segment_images_loaded():
            self._request_redraw()
