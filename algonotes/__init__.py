"""Classic algorithms and data structures in plain Python: combinatorics, arrays, sequences,
linked lists, trees, graphs, a keypad calculator and small exercises."""

__version__ = "0.1.0"