"""Prefix-sum, two-pointer, sliding-window and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["prefix_sums", "two_pointers", "sliding_window", "linked_list"]