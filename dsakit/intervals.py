"""Interval merging, insertion, grid cuts and capacity checks."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate

_LAST_STOP = 1000


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals, returned in sorted order."""
    ordered = sorted([start, end] for start, end in intervals)
    if not ordered:
        return []
    merged = [ordered[0]]
    for start, end in ordered[1:]:
        last = merged[-1]
        if start <= last[1]:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted disjoint intervals, merging as needed."""
    new_start, new_end = new_interval
    result: list[list[int]] = []
    for start, end in intervals:
        if end < new_start:
            result.append([start, end])
        elif start > new_end:
            result.append([new_start, new_end])
            new_start, new_end = start, end
        else:
            new_start = min(start, new_start)
            new_end = max(end, new_end)
    result.append([new_start, new_end])
    return result


def _band_count(spans: list[tuple[int, int]]) -> int:
    spans.sort()
    bands = 1
    end = spans[0][1]
    for start, stop in spans[1:]:
        if start < end:
            end = max(end, stop)
        else:
            bands += 1
            end = stop
    return bands


def check_valid_cuts(n: int, rectangles: Iterable[Sequence[int]]) -> bool:
    """Tell whether two parallel cuts split the ``n`` x ``n`` grid into three non-empty sections.

    Each rectangle is ``(x1, y1, x2, y2)`` and no cut may pass through one.
    """
    xs: list[tuple[int, int]] = []
    ys: list[tuple[int, int]] = []
    for x1, y1, x2, y2 in rectangles:
        xs.append((x1, x2))
        ys.append((y1, y2))
    if not xs:
        return False
    return _band_count(xs) - 1 >= 2 or _band_count(ys) - 1 >= 2


def car_pooling(trips: Iterable[Sequence[int]], capacity: int) -> bool:
    """Tell whether every trip ``(passengers, from, to)`` fits within ``capacity``.

    Stops are numbered 0 to 1000; passengers leave before others board at the same stop.
    """
    changes: defaultdict[int, int] = defaultdict(int)
    for passengers, start, end in trips:
        for stop in (start, end):
            if not 0 <= stop <= _LAST_STOP:
                raise ValueError(f"stop {stop} outside 0..{_LAST_STOP}")
        changes[start] += passengers
        changes[end] -= passengers
    loads = accumulate(changes[stop] for stop in sorted(changes))
    return all(load <= capacity for load in loads)