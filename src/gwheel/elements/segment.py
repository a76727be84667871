# elements/segment.py
import logging
import math
import random

from gwheel.elements.wheel_element import WheelElement
from gwheel.text_layout import ALIGNMENTS, DIRECTIONS, ORIENTATIONS
from gwheel.wheel_config import ConfigOption, enum_options, get_inherited_keys, resolve_option

logger = logging.getLogger(__name__)

IMAGE_DIRECTIONS = {"North": "N", "East": "E", "South": "S", "West": "W"}


class Segment(WheelElement):
    """
    One slice of the wheel. Its span is owned by the wheel and set through
    ``set_angle`` whenever the segment list changes; everything else is a
    rendering option that may be changed at any time. Options left at None
    resolve to the wheel default on each draw.
    """
    def __init__(self, config=None, image_loader=None, on_image_loaded=None):
        self._start_angle = 0
        self._end_angle = 0
        self._image_loader = image_loader
        self._on_image_loaded = on_image_loaded
        self.image_data = None
        super().__init__(config)

    @staticmethod
    def get_config_model():
        return {
            "Segment": [
                ConfigOption("size", "number", "Size (deg):", None, 0, 360, 1, 1,
                             tooltip="Leave empty to share the remaining arc evenly."),
                ConfigOption("text", "string", "Text:", ""),
            ],
            "Segment Style": [
                ConfigOption("fill_style", "color", "Fill Color:", None, inherit=True),
                ConfigOption("stroke_style", "color", "Line Color:", None, inherit=True),
                ConfigOption("line_width", "number", "Line Width:", None, 0, 20, 0.5, 1, inherit=True),
            ],
            "Segment Text": [
                ConfigOption("text_font_family", "font", "Font Family:", None, inherit=True),
                ConfigOption("text_font_size", "number", "Font Size:", None, 1, 200, 1, 0, inherit=True),
                ConfigOption("text_font_weight", "dropdown", "Font Weight:", None,
                             options_dict={"Normal": "normal", "Bold": "bold"}, inherit=True),
                ConfigOption("text_orientation", "dropdown", "Orientation:", None,
                             options_dict=enum_options(ORIENTATIONS), inherit=True),
                ConfigOption("text_alignment", "dropdown", "Alignment:", None,
                             options_dict=enum_options(ALIGNMENTS), inherit=True),
                ConfigOption("text_direction", "dropdown", "Direction:", None,
                             options_dict=enum_options(DIRECTIONS), inherit=True),
                ConfigOption("text_margin", "number", "Margin (px):", None, 0, 200, 1, 0, inherit=True),
                ConfigOption("text_fill_style", "color", "Text Color:", None, inherit=True),
                ConfigOption("text_stroke_style", "color", "Text Outline Color:", None, inherit=True),
                ConfigOption("text_line_width", "number", "Text Outline Width:", None, 0, 20, 0.5, 1, inherit=True),
            ],
            "Segment Image": [
                ConfigOption("image", "file", "Image File:", None),
                ConfigOption("image_direction", "dropdown", "Image Faces:", None,
                             options_dict=IMAGE_DIRECTIONS, inherit=True),
            ],
        }

    @property
    def size(self):
        return self.config.get("size")

    @size.setter
    def size(self, value):
        self.config["size"] = value

    @property
    def text(self):
        return self.config.get("text") or ""

    @text.setter
    def text(self, value):
        self.config["text"] = value

    @property
    def start_angle(self):
        return self._start_angle

    @property
    def end_angle(self):
        return self._end_angle

    @property
    def mid_angle(self):
        return self._start_angle + (self._end_angle - self._start_angle) / 2

    def set_angle(self, start_angle=None, end_angle=None):
        if start_angle is not None:
            self._start_angle = start_angle
        if end_angle is not None:
            self._end_angle = end_angle

    def resolve(self, key, defaults):
        """
        Effective value of ``key``: this segment's own, else the wheel's.
        Only options marked ``inherit`` in the config model fall back.
        """
        value = self.config.get(key)
        if key not in get_inherited_keys(self.get_config_model()):
            return value
        return resolve_option(value, defaults.get(key))

    # --- Images ---

    def render_image(self):
        """Starts loading the segment image. The loaded bitmap is polled at draw time."""
        image = self.config.get("image")
        if not image:
            return
        if self._image_loader is None:
            logger.warning("No image loader set, segment image %s will not load", image)
            return
        self.image_data = self._image_loader(image, self._handle_image_loaded)

    def change_image(self, image, image_direction=None):
        self.config["image"] = image
        self.image_data = None
        if image_direction:
            self.config["image_direction"] = image_direction
            self.validate()
        self.render_image()

    @property
    def is_image_loaded(self):
        return self.image_data is not None and bool(getattr(self.image_data, "height", 0))

    def _handle_image_loaded(self, bitmap=None):
        # loaders may call back before returning the bitmap
        if bitmap is not None:
            self.image_data = bitmap
        if self._on_image_loaded:
            self._on_image_loaded(self)

    # --- Stop angles ---

    def get_random_stop_angle(self, rng=random):
        """
        Picks a random whole-degree angle at least 1 degree inside the segment,
        clear of the boundary shared with its neighbours. A segment too small
        for that gets its mid-angle instead.
        """
        angle_range = (self._end_angle - self._start_angle) - 2
        if angle_range > 0:
            return self._start_angle + 1 + math.floor(rng.random() * angle_range)
        logger.warning("Segment size is too small to safely get random angle inside it")
        return self.mid_angle
