import pytest


class FixedRandom:
    """Stands in for the random module; always returns the same fraction."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class FakeTween:
    def __init__(self, setter, start_value, end_value, duration, easing="linear", repeat=0, yoyo=False,
                 on_update=None, on_complete=None):
        self.setter = setter
        self.start_value = start_value
        self.end_value = end_value
        self.duration = duration
        self.easing = easing
        self.repeat = repeat
        self.yoyo = yoyo
        self.on_update = on_update
        self.on_complete = on_complete
        self.killed = False
        self.paused = False

    def kill(self):
        self.killed = True

    def pause(self):
        self.paused = True

    def play(self):
        self.paused = False

    def step(self, value):
        self.setter(value)
        self.on_update()

    def finish(self):
        self.step(self.end_value)
        self.on_complete()


class FakeBitmap:
    def __init__(self, path):
        self.path = path
        self.width = 0
        self.height = 0

    @property
    def is_loaded(self):
        return self.height > 0


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def tweens():
    """A tween driver that records the tweens it is asked to start instead of running them."""
    started = []

    def driver(*args, **kwargs):
        tween = FakeTween(*args, **kwargs)
        started.append(tween)
        return tween

    driver.started = started
    return driver


@pytest.fixture
def bitmaps():
    """An image loader whose bitmaps are completed by calling ``driver.complete(path)``."""
    pending = {}

    def loader(path, on_load=None):
        bitmap = FakeBitmap(path)
        pending[path] = (bitmap, on_load)
        return bitmap

    def complete(path, width=40, height=80):
        bitmap, on_load = pending.pop(path)
        bitmap.width, bitmap.height = width, height
        if on_load:
            on_load(bitmap)
        return bitmap

    loader.pending = pending
    loader.complete = complete
    return loader

