"""Linked lists, trees, hashing, two-pointer, search, stack, queue, interval and recursion routines."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "intervals",
    "linked_lists",
    "list_problems",
    "recursion",
    "searching",
    "stacks_queues",
    "trees",
    "two_pointers",
]