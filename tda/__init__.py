"""Stacks, queues, singly and doubly linked lists, and binary search trees."""

__version__ = "0.1.0"
__all__ = ["errors", "nodes", "stacks", "queues", "linked_list", "doubly_linked_list", "tree"]