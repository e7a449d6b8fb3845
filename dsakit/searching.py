"""Binary search over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from collections.abc import Sequence


def _bisect(nums: Sequence[int], target: int, lo: int, hi: int) -> int:
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    return _bisect(nums, target, 0, len(nums) - 1)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours."""
    if not nums:
        raise ValueError("nums is empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] > nums[mid + 1]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the summit of a list that rises and then falls."""
    if not arr:
        raise ValueError("arr is empty")
    lo, hi = 0, len(arr) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if arr[mid] < arr[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def _search_from_pivot(nums: Sequence[int], target: int, pivot: int) -> int:
    last = len(nums) - 1
    if nums[pivot] <= target <= nums[last]:
        return _bisect(nums, target, pivot, last)
    return _bisect(nums, target, 0, pivot - 1)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted list of distinct values, or -1."""
    if not nums:
        return -1
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return _search_from_pivot(nums, target, lo)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted list that may repeat values."""
    if not nums:
        return False
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        while lo < hi and nums[lo] == nums[lo + 1]:
            lo += 1
        while lo < hi and nums[hi] == nums[hi - 1]:
            hi -= 1
        mid = lo + (hi - lo) // 2
        if nums[mid] == nums[hi]:
            hi -= 1
        elif nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return _search_from_pivot(nums, target, lo) != -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in turn, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    lo, hi = 0, len(matrix) * cols - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return False