import pytest

from dsakit.intervals import (
    car_pooling,
    check_valid_cuts,
    insert_interval,
    merge_intervals,
)


def _disjoint_sorted(intervals):
    return all(a[1] < b[0] for a, b in zip(intervals, intervals[1:]))


def test_merge_intervals_example():
    result = merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
    assert result == [[1, 6], [8, 10], [15, 18]]


def test_merge_intervals_touching_are_joined():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_intervals_output_is_disjoint_and_covers_input():
    data = [[5, 7], [1, 2], [6, 9], [3, 3], [11, 12], [0, 1]]
    merged = merge_intervals(data)
    assert _disjoint_sorted(merged)
    for start, end in data:
        assert any(m[0] <= start and end <= m[1] for m in merged)


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_merge_intervals_does_not_alter_input():
    data = [[2, 3], [1, 2]]
    merge_intervals(data)
    assert data == [[2, 3], [1, 2]]


@pytest.mark.parametrize(
    "new", [[0, 0], [2, 5], [4, 8], [13, 14], [20, 25], [3, 16], [10, 10]]
)
def test_insert_interval_matches_merge(new):
    base = [[1, 2], [3, 5], [6, 7], [8, 10], [12, 16]]
    assert insert_interval(base, new) == merge_intervals(base + [new])


def test_insert_interval_into_empty():
    assert insert_interval([], [4, 9]) == [[4, 9]]


def test_check_valid_cuts_horizontal_bands():
    rectangles = [[0, 0, 4, 1], [0, 1, 2, 2], [2, 1, 4, 2], [0, 2, 4, 4]]
    assert check_valid_cuts(4, rectangles) is True


def test_check_valid_cuts_vertical_bands():
    rectangles = [[0, 0, 1, 4], [1, 0, 2, 4], [2, 0, 4, 4]]
    assert check_valid_cuts(4, rectangles) is True


def test_check_valid_cuts_not_enough_sections():
    rectangles = [[0, 0, 2, 2], [1, 1, 4, 4], [0, 3, 1, 4]]
    assert check_valid_cuts(4, rectangles) is False


def test_check_valid_cuts_empty():
    assert check_valid_cuts(4, []) is False


def test_car_pooling_exact_capacity():
    assert car_pooling([[2, 1, 5], [3, 3, 7]], 5) is True


def test_car_pooling_over_capacity():
    assert car_pooling([[2, 1, 5], [3, 3, 7]], 4) is False


def test_car_pooling_drop_before_pickup_at_same_stop():
    assert car_pooling([[3, 0, 5], [3, 5, 9]], 3) is True


def test_car_pooling_stop_out_of_range():
    with pytest.raises(ValueError):
        car_pooling([[1, 0, 1001]], 5)