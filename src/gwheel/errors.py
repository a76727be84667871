# errors.py


class WheelConfigError(ValueError):
    """Raised for option values that would otherwise render a plausible but wrong wheel."""


class ImageNotLoadedError(RuntimeError):
    """Raised when a bitmap is drawn before its pixel data has arrived."""
