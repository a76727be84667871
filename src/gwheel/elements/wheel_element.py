# elements/wheel_element.py
from abc import ABC, abstractmethod

from gwheel.wheel_config import get_all_keys, populate_defaults_from_model, validate_config


class WheelElement(ABC):
    """
    Base for every option-bag entity of the wheel (segments, pins, pointer
    guide, animation). The flat ``config`` dict is filled from the class's
    config model and validated on construction.
    """
    def __init__(self, config=None):
        self.config = dict(config or {})
        populate_defaults_from_model(self.config, self.get_config_model())
        self.validate()

    @staticmethod
    @abstractmethod
    def get_config_model():
        pass

    def validate(self):
        validate_config(self.config, self.get_config_model())

    def get_all_style_keys(self):
        """
        Returns the set of configuration keys described by the config model.
        Used when copying the style of one element onto another.
        """
        return get_all_keys(self.get_config_model())
