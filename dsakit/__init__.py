"""Classic algorithm routines for arrays, searching, bits, hashing, heaps,
linked lists, maths, matrices, prefix sums, two pointers, cyclic sort, stacks
and strings."""

__version__ = "0.1.0"