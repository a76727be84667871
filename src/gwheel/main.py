# main.py
import logging
import sys

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from gwheel.wheel_displayer import WheelDisplayer

logger = logging.getLogger(__name__)

DEMO_SEGMENTS = [
    {"fill_style": "#eae56f", "text": "Prize 1"},
    {"fill_style": "#89f26e", "text": "Prize 2"},
    {"fill_style": "#7de6ef", "text": "Prize 3"},
    {"fill_style": "#e7706f", "text": "Prize 4"},
    {"fill_style": "#eae56f", "text": "Prize 5"},
    {"fill_style": "#89f26e", "text": "Prize 6"},
    {"fill_style": "#7de6ef", "text": "Prize 7"},
    {"fill_style": "#e7706f", "text": "Lose\nTurn", "text_fill_style": "white"},
]


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app):
        super().__init__(title="gWheel", application=app)
        self.set_default_size(440, 520)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6,
                      margin_top=12, margin_bottom=12, margin_start=12, margin_end=12)
        self.set_child(box)

        self.displayer = WheelDisplayer({
            "num_segments": len(DEMO_SEGMENTS),
            "segments": DEMO_SEGMENTS,
            "text_font_size": 16,
            "text_orientation": "curved",
            "inner_radius": 40,
            "responsive": True,
            "pins": {"number": 16},
            "animation": {
                "type": "spin_to_stop",
                "duration": 5,
                "spins": 8,
                "callback_finished": self._on_spin_finished,
            },
        }, on_segment_clicked=self._on_segment_clicked)
        box.append(self.displayer.get_widget())

        self.result_label = Gtk.Label(label="Press Spin to play")
        box.append(self.result_label)

        self.spin_button = Gtk.Button(label="Spin")
        self.spin_button.connect("clicked", self._on_spin_clicked)
        box.append(self.spin_button)

        self.connect("close-request", self._on_close_request)

    def _on_spin_clicked(self, button):
        button.set_sensitive(False)
        self.result_label.set_text("Spinning...")
        self.displayer.spin()

    def _on_spin_finished(self, segment):
        text = segment.text.replace("\n", " ") if segment else "nothing"
        logger.info("Wheel stopped on %s", text)
        self.result_label.set_text(f"You won: {text}")
        self.spin_button.set_sensitive(True)

    def _on_segment_clicked(self, index, segment):
        self.result_label.set_text(f"Segment {index + 1}: {segment.text.replace(chr(10), ' ')}")

    def _on_close_request(self, window):
        self.displayer.close()
        return False


class WheelApplication(Gtk.Application):
    def __init__(self):
        super().__init__(application_id="io.github.gwheel.Demo")

    def do_activate(self):
        window = self.get_active_window() or MainWindow(self)
        window.present()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = WheelApplication()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
