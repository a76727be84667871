# segment_sizer.py


def compute_spans(sizes):
    """
    Shares the 360 degree circle between segments. Explicit sizes are used as
    given; whatever arc is left is split evenly between the segments whose
    size is None. Spans are laid out clockwise from 0 in list order.

    Explicit sizes totalling 360 or more leave the automatic segments with a
    zero or negative share; that is a caller error and is not corrected.
    """
    used = 0
    auto_count = 0
    for size in sizes:
        if size is None:
            auto_count += 1
        else:
            used += size

    degrees_each = (360 - used) / auto_count if auto_count else 0

    spans = []
    current = 0
    for size in sizes:
        start = current
        current += degrees_each if size is None else size
        spans.append((start, current))
    return spans


def apply_spans(segments):
    """Recomputes the spans of ``segments`` in place from their ``size`` option."""
    if not segments:
        return
    spans = compute_spans([segment.size for segment in segments])
    for segment, (start, end) in zip(segments, spans):
        segment.set_angle(start_angle=start, end_angle=end)
