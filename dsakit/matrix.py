"""Matrix utilities: zeroing rows and columns, rotation and sorted search."""

from collections.abc import Sequence
from typing import Any

__all__ = ["set_zeroes", "rotate", "search_matrix"]


def set_zeroes(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return a copy in which every row and column holding a zero is all zeros."""
    rows = [list(row) for row in matrix]
    zero_rows = {i for i, row in enumerate(rows) if 0 in row}
    zero_cols = {j for row in rows for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(rows)
    ]


def rotate(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return a square matrix rotated 90 degrees clockwise.

    Raises ValueError when the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate() needs a square matrix")
    return [list(column) for column in zip(*reversed(matrix))]


def search_matrix(matrix: Sequence[Sequence[Any]], target: Any) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False