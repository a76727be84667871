# elements/pointer_guide.py
from gwheel.elements.wheel_element import WheelElement
from gwheel.wheel_config import ConfigOption


class PointerGuide(WheelElement):
    """A line from the centre out past the rim along the pointer angle, for lining up a pointer image."""

    @staticmethod
    def get_config_model():
        return {
            "Pointer Guide": [
                ConfigOption("display", "bool", "Show Pointer Guide:", False),
                ConfigOption("stroke_style", "color", "Line Color:", "red"),
                ConfigOption("line_width", "number", "Line Width:", 3, 0, 20, 0.5, 1),
            ],
        }

    def is_visible(self):
        return bool(self.config.get("display"))
