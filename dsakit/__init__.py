"""Classic sorting, searching, counting and merging algorithms on lists, matrices and strings."""

__version__ = "0.1.0"
__all__ = [
    "combinatorics",
    "counting",
    "extremes",
    "inversions",
    "matrix",
    "merging",
    "sorting",
    "subarrays",
]