import random
from collections import Counter

import pytest

from dsakit.hashing import (
    check_subarray_sum,
    contains_duplicate,
    find_middle_index,
    group_anagrams,
    is_anagram,
    is_valid_sudoku,
    longest_consecutive,
    num_odd_sum_subarrays,
    pivot_index,
    subarray_sum,
    top_k_frequent,
    two_sum,
    word_pattern,
)


def _solved_board():
    return [
        [str((r * 3 + r // 3 + c) % 9 + 1) for c in range(9)] for r in range(9)
    ]


def _empty_board():
    return [["."] * 9 for _ in range(9)]


def test_two_sum_finds_pair_summing_to_target():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i < j
    assert nums[i] + nums[j] == 9


def test_two_sum_uses_distinct_indices_for_equal_values():
    nums = [3, 3]
    i, j = two_sum(nums, 6)
    assert {i, j} == {0, 1}


def test_two_sum_without_pair_raises():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


def test_longest_consecutive_finds_run_among_noise():
    run = list(range(10, 20))
    nums = run + [100, 200, -50]
    random.Random(1).shuffle(nums)
    assert longest_consecutive(nums) == len(run)


def test_longest_consecutive_ignores_duplicates():
    nums = [5, 1, 2, 3, 9, 10]
    assert longest_consecutive(nums * 2) == longest_consecutive(nums)


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


def test_contains_duplicate():
    distinct = list(range(8))
    assert contains_duplicate(distinct) is False
    assert contains_duplicate(distinct + [distinct[3]]) is True


def test_is_anagram_on_permutations():
    word = "listen"
    assert is_anagram(word, "".join(sorted(word))) is True
    assert is_anagram(word, word[::-1]) is True


def test_is_anagram_rejects_other_counts_and_lengths():
    assert is_anagram("aab", "abb") is False
    assert is_anagram("abc", "abcc") is False


def test_word_pattern_matches_bijection():
    assert word_pattern("abba", "dog cat cat dog") is True


def test_word_pattern_rejects_non_bijection():
    assert word_pattern("abba", "dog dog dog dog") is False
    assert word_pattern("aaaa", "dog cat cat dog") is False


def test_word_pattern_rejects_length_mismatch():
    assert word_pattern("ab", "dog cat fish") is False


def test_top_k_frequent_keeps_most_frequent():
    nums = [1] * 3 + [2] * 2 + [3] + [4] * 5
    counts = Counter(nums)
    k = 2
    result = top_k_frequent(nums, k)
    assert len(result) == k
    freqs = [counts[v] for v in result]
    assert freqs == sorted(freqs)
    left_out = set(counts) - set(result)
    assert all(counts[v] <= min(freqs) for v in left_out)


def test_top_k_frequent_all_values():
    nums = [7, 7, 8]
    assert sorted(top_k_frequent(nums, 2)) == sorted(set(nums))


def test_sudoku_empty_and_solved_boards_are_valid():
    assert is_valid_sudoku(_empty_board()) is True
    assert is_valid_sudoku(_solved_board()) is True


@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0), (0, 8)],
        [(0, 4), (8, 4)],
        [(3, 3), (5, 5)],
    ],
)
def test_sudoku_duplicate_in_row_column_or_box_is_invalid(cells):
    board = _empty_board()
    for r, c in cells:
        board[r][c] = "5"
    assert is_valid_sudoku(board) is False


def test_sudoku_solved_board_with_swap_is_invalid():
    board = _solved_board()
    board[0][0], board[0][1] = board[0][1], board[0][1]
    assert is_valid_sudoku(board) is False


def test_group_anagrams_partitions_input():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    keys = ["".join(sorted(g[0])) for g in groups]
    assert len(keys) == len(set(keys))
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1


def test_group_anagrams_keeps_first_appearance_order():
    words = ["eat", "tea", "tan"]
    assert group_anagrams(words) == [["eat", "tea"], ["tan"]]


def test_subarray_sum_counts_single_elements():
    ones = [1] * 6
    assert subarray_sum(ones, 1) == len(ones)


def test_subarray_sum_whole_array_counts():
    nums = [3, 4, 5]
    assert subarray_sum(nums, sum(nums)) >= 1
    assert subarray_sum(nums, sum(nums) + 1) == 0


def test_check_subarray_sum():
    assert check_subarray_sum([23, 2, 4, 6, 7], 6) is True
    assert check_subarray_sum([6], 6) is False
    assert check_subarray_sum([0, 0], 0) is True
    assert check_subarray_sum([1, 2], 0) is False


def test_num_odd_sum_subarrays_even_only_is_zero():
    assert num_odd_sum_subarrays([2, 4, 6, 8]) == 0


def test_num_odd_sum_subarrays_example():
    assert num_odd_sum_subarrays([1, 3, 5]) == 4


def test_num_odd_sum_subarrays_is_reduced_modulo():
    result = num_odd_sum_subarrays([1, 2] * 50_000)
    assert 0 <= result < 1_000_000_007


@pytest.mark.parametrize("func", [pivot_index, find_middle_index])
def test_balance_index_satisfies_definition(func):
    nums = [1, 7, 3, 6, 5, 6]
    index = func(nums)
    assert sum(nums[:index]) == sum(nums[index + 1:])
    assert all(sum(nums[:j]) != sum(nums[j + 1:]) for j in range(index))


@pytest.mark.parametrize("func", [pivot_index, find_middle_index])
def test_balance_index_missing(func):
    assert func([1, 2, 3]) == -1