# tween.py
import logging
import math

from gi.repository import GLib

from gwheel.easing import get_easing

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16


class Tween:
    """
    Animates one numeric value from ``start_value`` to ``end_value`` on the
    GLib main loop. The value is pushed through ``setter`` on every frame,
    followed by ``on_update``; ``on_complete`` fires once at the natural end.

    ``repeat`` is the number of extra iterations (-1 repeats forever). With
    ``yoyo`` every other iteration plays backwards.
    """
    def __init__(self, setter, start_value, end_value, duration, easing="linear",
                 repeat=0, yoyo=False, on_update=None, on_complete=None, clock=None):
        self._setter = setter
        self.start_value = start_value
        self.end_value = end_value
        self.duration = float(duration)
        self._ease = get_easing(easing)
        self.repeat = repeat
        self.yoyo = yoyo
        self._on_update = on_update
        self._on_complete = on_complete
        self._clock = clock or (lambda: GLib.get_monotonic_time() / 1_000_000)

        self._timer_id = None
        self._elapsed = 0.0
        self._last_time = None
        self.finished = False

    @property
    def is_playing(self):
        return self._timer_id is not None

    def play(self):
        if self.finished or self._timer_id is not None:
            return
        self._last_time = self._clock()
        self._timer_id = GLib.timeout_add(FRAME_INTERVAL_MS, self._tick)

    def pause(self):
        self._stop_timer()

    def kill(self):
        """Stops immediately without calling on_complete."""
        self._stop_timer()
        self.finished = True

    def _stop_timer(self):
        if self._timer_id is not None:
            GLib.source_remove(self._timer_id)
            self._timer_id = None

    def _tick(self):
        if self.finished:
            self._timer_id = None
            return GLib.SOURCE_REMOVE

        now = self._clock()
        self._elapsed += now - self._last_time
        self._last_time = now

        if self.advance(self._elapsed):
            return GLib.SOURCE_CONTINUE
        self._timer_id = None
        return GLib.SOURCE_REMOVE

    def value_at(self, elapsed):
        """Eased value after ``elapsed`` seconds, ignoring completion."""
        if self.duration <= 0:
            return self._final_value()
        iteration = math.floor(elapsed / self.duration)
        progress = (elapsed - iteration * self.duration) / self.duration
        if self.yoyo and iteration % 2 == 1:
            progress = 1 - progress
        eased = self._ease(progress)
        return self.start_value + (self.end_value - self.start_value) * eased

    def _final_value(self):
        if self.yoyo and self.repeat > 0 and self.repeat % 2 == 1:
            return self.start_value
        return self.end_value

    def advance(self, elapsed):
        """
        Moves the tween to ``elapsed`` seconds since it started. Returns False
        once the last iteration has completed.
        """
        if self.finished:
            return False

        total = None if self.repeat < 0 else self.duration * (self.repeat + 1)
        if total is not None and elapsed >= total:
            self._setter(self._final_value())
            self.finished = True
            if self._on_update:
                self._on_update()
            if self._on_complete:
                self._on_complete()
            return False

        self._setter(self.value_at(elapsed))
        if self._on_update:
            self._on_update()
        return True


def tween_to(setter, start_value, end_value, duration, easing="linear", repeat=0, yoyo=False,
             on_update=None, on_complete=None):
    """Creates a Tween and starts it straight away."""
    tween = Tween(setter, start_value, end_value, duration, easing=easing, repeat=repeat, yoyo=yoyo,
                  on_update=on_update, on_complete=on_complete)
    logger.debug("Tween %s -> %s over %ss (repeat=%s, yoyo=%s)", start_value, end_value, duration, repeat, yoyo)
    tween.play()
    return tween
