# elements/animation.py
import random

from gwheel.animation_planner import (ANTI_CLOCKWISE, CLOCKWISE, CUSTOM, SPIN_AND_BACK,
                                      SPIN_ONGOING, SPIN_TO_STOP, plan_animation)
from gwheel.easing import EASINGS
from gwheel.elements.wheel_element import WheelElement
from gwheel.wheel_config import ConfigOption

SOUND_TRIGGER_SEGMENT = "segment"
SOUND_TRIGGER_PIN = "pin"


class Animation(WheelElement):
    """
    Animation options of a wheel. The callbacks receive the indicated
    segment (``callback_finished``) or nothing (``callback_before``,
    ``callback_after``, ``callback_sound``).
    """

    @staticmethod
    def get_config_model():
        return {
            "Animation": [
                ConfigOption("type", "dropdown", "Type:", SPIN_ONGOING,
                             options_dict={"Spin Ongoing": SPIN_ONGOING, "Spin To Stop": SPIN_TO_STOP,
                                           "Spin And Back": SPIN_AND_BACK, "Custom": CUSTOM}),
                ConfigOption("direction", "dropdown", "Direction:", CLOCKWISE,
                             options_dict={"Clockwise": CLOCKWISE, "Anti-clockwise": ANTI_CLOCKWISE}),
                ConfigOption("duration", "number", "Duration (s):", 10, 0, 600, 0.5, 1),
                ConfigOption("spins", "number", "Spins:", None, 0, 100, 1, 0,
                             tooltip="Leave empty for the default of 5 full turns."),
                ConfigOption("stop_angle", "number", "Stop Angle:", None, 0, 360, 1, 0,
                             tooltip="Leave empty to stop at a random angle."),
                ConfigOption("easing", "dropdown", "Easing:", None,
                             options_dict={name: name for name in EASINGS}),
                ConfigOption("repeat", "number", "Repeat:", None, -1, 100, 1, 0),
                ConfigOption("yoyo", "bool", "Yoyo:", None),
                ConfigOption("clear_the_canvas", "bool", "Clear Canvas Each Frame:", None),
            ],
            "Custom Animation": [
                ConfigOption("property_name", "string", "Property:", None),
                ConfigOption("property_value", "number", "Value:", None),
            ],
            "Callbacks": [
                ConfigOption("callback_finished", "callback", "On Finished:", None),
                ConfigOption("callback_before", "callback", "Before Frame:", None),
                ConfigOption("callback_after", "callback", "After Frame:", None),
                ConfigOption("callback_sound", "callback", "Sound:", None),
                ConfigOption("sound_trigger", "dropdown", "Sound Trigger:", SOUND_TRIGGER_SEGMENT,
                             options_dict={"Segment": SOUND_TRIGGER_SEGMENT, "Pin": SOUND_TRIGGER_PIN}),
            ],
        }

    @property
    def is_clockwise(self):
        return self.config.get("direction") != ANTI_CLOCKWISE

    def plan(self, pointer_angle=0, rng=random):
        return plan_animation(self.config, pointer_angle=pointer_angle, rng=rng)

    def fire(self, key, *args):
        callback = self.config.get(key)
        if callback:
            callback(*args)
