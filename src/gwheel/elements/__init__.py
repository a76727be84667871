from gwheel.elements.animation import Animation
from gwheel.elements.pin import Pin
from gwheel.elements.pointer_guide import PointerGuide
from gwheel.elements.segment import Segment

__all__ = ["Animation", "Pin", "PointerGuide", "Segment"]
