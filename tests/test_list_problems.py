import pytest

from dsakit.list_problems import (
    ListNode,
    build_list,
    detect_cycle,
    has_cycle,
    list_values,
    middle_node,
    pair_sum,
    reverse_list,
)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _make_cycle(values, entry_index):
    head = build_list(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[entry_index]
    return head, nodes[entry_index]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [4, 4, 0, -2]])
def test_build_and_read_round_trip(values):
    assert list_values(build_list(values)) == values


def test_build_empty_gives_none():
    assert build_list([]) is None


def test_list_node_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


def test_has_cycle_false_for_acyclic():
    assert has_cycle(None) is False
    assert has_cycle(build_list([1])) is False
    assert has_cycle(build_list([1, 2, 3, 4])) is False


@pytest.mark.parametrize("entry", [0, 1, 3])
def test_has_cycle_true(entry):
    head, _ = _make_cycle([3, 2, 0, -4], entry)
    assert has_cycle(head) is True


def test_self_loop_single_node():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True
    assert detect_cycle(node) is node


@pytest.mark.parametrize("entry", [0, 1, 2, 4])
def test_detect_cycle_returns_entry(entry):
    head, expected = _make_cycle([3, 2, 0, -4, 7], entry)
    assert detect_cycle(head) is expected


def test_detect_cycle_none():
    assert detect_cycle(build_list([1, 2, 3])) is None
    assert detect_cycle(None) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node_is_second_middle(values):
    node = middle_node(build_list(values))
    assert node.val == values[len(values) // 2]


def test_middle_node_empty():
    assert middle_node(None) is None


def test_pair_sum_worked_example():
    assert pair_sum(build_list([5, 4, 2, 1])) == 6


def test_pair_sum_matches_twin_definition():
    values = [4, 2, 2, 3, 9, 1, 7, 5]
    n = len(values)
    twins = [values[i] + values[n - 1 - i] for i in range(n // 2)]
    assert pair_sum(build_list(values)) == max(twins)


def test_pair_sum_leaves_list_intact():
    values = [1, 100000, 3, 8]
    head = build_list(values)
    pair_sum(head)
    assert list_values(head) == values


def test_pair_sum_empty_raises():
    with pytest.raises(ValueError):
        pair_sum(None)