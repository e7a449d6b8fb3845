"""Array and string problems solved with two pointers and sliding windows."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    if len(height) < 2:
        raise ValueError("at least two heights are needed")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Count the subarrays holding exactly ``k`` odd numbers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    left = 0
    odd = 0
    run = 0
    total = 0
    for value in nums:
        if value % 2:
            odd += 1
            run = 0
        while odd == k:
            run += 1
            if nums[left] % 2:
                odd -= 1
            left += 1
        total += run
    return total


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return 1-based positions of two elements of a sorted list adding to ``target``.

    Raises ValueError when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total > target:
            right -= 1
        else:
            left += 1
    raise ValueError(f"no two elements add up to {target}")


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet, in ascending order, that sums to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            lo, hi = j + 1, n - 1
            while lo < hi:
                total = values[i] + values[j] + values[lo] + values[hi]
                if total == target:
                    result.append([values[i], values[j], values[lo], values[hi]])
                    lo += 1
                    hi -= 1
                    while lo < hi and values[lo] == values[lo - 1]:
                        lo += 1
                    while lo < hi and values[hi] == values[hi + 1]:
                        hi -= 1
                elif total < target:
                    lo += 1
                else:
                    hi -= 1
    return result


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest subarray summing to at least ``target``.

    Returns 0 when no subarray reaches it.
    """
    left = 0
    total = 0
    shortest: int | None = None
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            length = right - left + 1
            shortest = length if shortest is None else min(shortest, length)
            total -= nums[left]
            left += 1
    return 0 if shortest is None else shortest


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return the largest sum of a length-``k`` window of distinct values, or 0."""
    window: set[int] = set()
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(nums):
        while value in window:
            total -= nums[left]
            window.discard(nums[left])
            left += 1
        window.add(value)
        total += value
        if right - left + 1 == k:
            best = max(best, total)
            window.discard(nums[left])
            total -= nums[left]
            left += 1
    return best


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its unique values lead it; return how many there are."""
    if not nums:
        return 0
    slow = 0
    for fast in range(1, len(nums)):
        if nums[slow] != nums[fast]:
            slow += 1
            nums[slow] = nums[fast]
    return slow + 1


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    slow = 0
    for fast, value in enumerate(nums):
        if value != 0:
            nums[slow], nums[fast] = nums[fast], nums[slow]
            slow += 1


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list of n + 1 values drawn from 1..n."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window: set[str] = set()
    left = 0
    best = 0
    for char in s:
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, len(window))
    return best


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average of ``k`` contiguous elements."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the length of nums")
    left = 0
    total = 0.0
    best = float("-inf")
    for right, value in enumerate(nums):
        total += value
        if right - left + 1 == k:
            best = max(best, total / k)
            total -= nums[left]
            left += 1
    return best


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place.

    ``nums1`` must have room for ``m + n`` elements.
    """
    i, j, k = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    while j >= 0:
        nums1[k] = nums2[j]
        j -= 1
        k -= 1


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, counting only ASCII letters and digits."""
    clean = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return clean == clean[::-1]