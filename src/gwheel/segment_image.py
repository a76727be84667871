# segment_image.py
import logging

import gi

gi.require_version("Gdk", "4.0")
gi.require_version("GdkPixbuf", "2.0")
from gi.repository import Gdk, GdkPixbuf, GLib

from gwheel.errors import ImageNotLoadedError

logger = logging.getLogger(__name__)


class Bitmap:
    """
    A wheel or segment image. Width and height read 0 until the pixbuf has
    been read; the painter polls them rather than waiting.
    """
    def __init__(self, path):
        self.path = path
        self.pixbuf = None

    @property
    def width(self):
        return self.pixbuf.get_width() if self.pixbuf else 0

    @property
    def height(self):
        return self.pixbuf.get_height() if self.pixbuf else 0

    @property
    def is_loaded(self):
        return self.height > 0

    def load(self):
        try:
            self.pixbuf = GdkPixbuf.Pixbuf.new_from_file(self.path)
        except GLib.Error as e:
            logger.error("Error loading image %s: %s", self.path, e)
            self.pixbuf = None
        return self.is_loaded

    def paint(self, ctx, x, y, width=None, height=None):
        """Draws the image with its top-left at (x, y), scaled into width x height when given."""
        if not self.is_loaded:
            raise ImageNotLoadedError(f"Image {self.path} has not loaded yet")
        width = self.width if width is None else width
        height = self.height if height is None else height

        ctx.save()
        ctx.translate(x, y)
        ctx.scale(width / self.width, height / self.height)
        Gdk.cairo_set_source_pixbuf(ctx, self.pixbuf, 0, 0)
        ctx.rectangle(0, 0, self.width, self.height)
        ctx.fill()
        ctx.restore()


def load_bitmap(path, on_load=None):
    """
    Returns a Bitmap straight away and reads the file from the main loop when
    it is next idle. ``on_load(bitmap)`` runs only if the read succeeds.
    """
    bitmap = Bitmap(path)

    def _load():
        if bitmap.load() and on_load:
            on_load(bitmap)
        return GLib.SOURCE_REMOVE

    GLib.idle_add(_load)
    return bitmap
