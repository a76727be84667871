# elements/pin.py
from gwheel.elements.wheel_element import WheelElement
from gwheel.wheel_config import ConfigOption


class Pin(WheelElement):
    """The ring of small circles drawn just inside the wheel rim."""

    @staticmethod
    def get_config_model():
        return {
            "Pins": [
                ConfigOption("visible", "bool", "Show Pins:", True),
                ConfigOption("number", "number", "Number of Pins:", 36, 0, 360, 1, 0),
                ConfigOption("outer_radius", "number", "Pin Radius (px):", 3, 0, 50, 0.5, 1),
                ConfigOption("margin", "number", "Distance From Rim (px):", 3, 0, 100, 1, 0),
                ConfigOption("responsive", "bool", "Scale With Wheel:", False),
            ],
            "Pin Style": [
                ConfigOption("fill_style", "color", "Fill Color:", "grey"),
                ConfigOption("stroke_style", "color", "Line Color:", "black"),
                ConfigOption("line_width", "number", "Line Width:", 1, 0, 20, 0.5, 1),
            ],
        }

    @property
    def number(self):
        return int(self.config.get("number") or 0)

    @property
    def spacing(self):
        """Degrees between two neighbouring pins."""
        return 360 / self.number if self.number else 0

    def is_visible(self):
        return bool(self.config.get("visible")) and self.number > 0
