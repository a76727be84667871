# wheel_config.py
from gwheel.errors import WheelConfigError


class ConfigOption:
    """
    A data class to define a single configuration option.
    """
    def __init__(self, key, option_type, label, default,
                 min_val=None, max_val=None, step=None, digits=0,
                 options_dict=None, tooltip=None, inherit=False):
        self.key = key
        # Valid types: "string", "bool", "color", "font", "number", "dropdown", "file", "callback", "options"
        self.type = option_type
        self.label = label
        self.default = default
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.digits = digits
        self.options_dict = options_dict or {}
        self.tooltip = tooltip
        # Inheritable options stay None until draw time and fall back to the wheel default.
        self.inherit = inherit


def populate_defaults_from_model(config, model):
    """
    Helper function to populate a configuration dictionary with default values
    from a given configuration model.
    """
    for section in model.values():
        for option in section:
            config.setdefault(option.key, option.default)
    return config


def validate_config(config, model):
    """
    Checks every dropdown and callback option in ``config`` against ``model``.
    Unknown enum values raise WheelConfigError; None is always accepted.
    """
    for section in model.values():
        for option in section:
            value = config.get(option.key)
            if value is None:
                continue
            if option.type == "dropdown" and value not in option.options_dict.values():
                allowed = ", ".join(str(v) for v in option.options_dict.values())
                raise WheelConfigError(f"Invalid {option.key}: {value!r} (expected one of {allowed})")
            if option.type == "callback" and not callable(value):
                raise WheelConfigError(
                    f"{option.key} must be a callable, got {type(value).__name__}; "
                    "code strings are not evaluated")


def resolve_option(value, default):
    """
    Returns a segment's own option value, or the wheel default when it is unset.
    Called on every draw and never cached, so changing a wheel default shows
    up on undecorated segments at the next redraw.
    """
    return default if value is None else value


def get_all_keys(model):
    return {opt.key for section in model.values() for opt in section}


def get_inherited_keys(model):
    return {opt.key for section in model.values() for opt in section if opt.inherit}


def enum_options(values):
    """Builds a dropdown ``options_dict`` whose labels are the capitalised values."""
    return {value.capitalize(): value for value in values}
