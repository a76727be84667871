import pytest

from gwheel.segment_sizer import apply_spans, compute_spans


def test_all_automatic_sizes_share_the_circle():
    assert compute_spans([None] * 4) == [(0, 90), (90, 180), (180, 270), (270, 360)]


def test_explicit_sizes_leave_the_rest_to_automatic_segments():
    assert compute_spans([None, 180, None, None]) == [(0, 60), (60, 240), (240, 300), (300, 360)]


@pytest.mark.parametrize("sizes", [
    [None], [10, None], [None, 0, None], [90, 90, 90, 90], [45, None, 45, None, None], [359, None],
])
def test_spans_are_contiguous_from_zero_to_360(sizes):
    spans = compute_spans(sizes)
    assert spans[0][0] == 0
    assert spans[-1][1] == pytest.approx(360)
    for (_, previous_end), (start, end) in zip(spans, spans[1:]):
        assert start == previous_end
        assert end >= start


def test_explicit_zero_size_is_a_real_size():
    assert compute_spans([0, None]) == [(0, 0), (0, 360)]


def test_no_automatic_segments_uses_sizes_as_given():
    assert compute_spans([100, 100]) == [(0, 100), (100, 200)]


def test_empty_input():
    assert compute_spans([]) == []
    apply_spans([])


class _Slice:
    def __init__(self, size):
        self.size = size
        self.start_angle = self.end_angle = None

    def set_angle(self, start_angle=None, end_angle=None):
        self.start_angle, self.end_angle = start_angle, end_angle


def test_apply_spans_writes_into_segments():
    slices = [_Slice(None), _Slice(120)]
    apply_spans(slices)
    assert [(s.start_angle, s.end_angle) for s in slices] == [(0, 240), (240, 360)]
