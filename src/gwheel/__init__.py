"""gWheel: a cairo-drawn prize wheel with segment text layout, hit-testing and spin animation."""

__version__ = "0.1.0"

__all__ = ["__version__"]
