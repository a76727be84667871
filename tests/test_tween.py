import pytest

pytest.importorskip("gi")

from gwheel.tween import Tween  # noqa: E402


def test_linear_progress_and_updates():
    values, updates = [], []
    tween = Tween(values.append, 0, 100, 2, on_update=lambda: updates.append(1))
    assert tween.advance(0.5)
    assert tween.advance(1)
    assert values == [25, 50]
    assert len(updates) == 2


def test_easing_is_applied():
    values = []
    Tween(values.append, 0, 100, 1, easing="power3_out").advance(0.5)
    assert values[-1] == pytest.approx(93.75)


def test_completes_exactly_once_on_the_end_value():
    values, done = [], []
    tween = Tween(values.append, 0, 100, 1, on_complete=lambda: done.append(1))
    assert not tween.advance(1.5)
    assert values[-1] == 100
    assert not tween.advance(2)
    assert done == [1]
    assert tween.finished


def test_yoyo_plays_back_and_returns_to_start():
    values = []
    tween = Tween(values.append, 0, 360, 1, repeat=1, yoyo=True)
    tween.advance(0.5)
    tween.advance(1.5)
    assert values == [180, 180]
    tween.advance(2)
    assert values[-1] == 0


def test_repeat_forever_never_finishes():
    values = []
    tween = Tween(values.append, 0, 100, 1, repeat=-1)
    assert tween.advance(1000.25)
    assert values[-1] == pytest.approx(25)


def test_kill_skips_the_completion_callback():
    done = []
    tween = Tween(lambda value: None, 0, 100, 1, on_complete=lambda: done.append(1))
    tween.kill()
    assert not tween.advance(0.5)
    assert done == []


def test_zero_duration_jumps_to_the_end():
    values = []
    assert not Tween(values.append, 5, 10, 0).advance(0)
    assert values == [10]
