"""Classic algorithms and data structures: sorting, number theory, matrices,
string search, dynamic programming, graphs, backtracking, queues, stacks,
linked lists, segment trees, binary trees and a keypad calculator."""

__version__ = "0.1.0"