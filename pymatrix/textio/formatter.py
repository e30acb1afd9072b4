"""
Matrix text formatter.

Renders a Matrix as aligned text for display. Every entry is centred in
its column's width with one space of padding on each side, and every row
ends with a newline:

    >>> format_matrix(Matrix.from_rows([[1, -0.5], [10, 2]]))
    ' 1   -0.5 \\n 10   2   \\n'

The output is meant for people, not as a canonical serialisation, but
parse() reads it back to an equal matrix.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix


def format_number(value: float) -> str:
    """
    Default text form of one entry.

    Shortest positional decimal that round-trips, without a trailing
    '.0' for integral values: 1.0 -> '1', -0.5 -> '-0.5', 1e20 ->
    '100000000000000000000'.
    """
    return np.format_float_positional(np.float64(value), trim='-')


def format_matrix(matrix: MatrixLike) -> str:
    """
    Format a matrix as column-aligned text.

    Args:
        matrix: Matrix (or anything as_matrix accepts)

    Returns:
        One line per row, each terminated by '\\n'
    """
    m = as_matrix(matrix)
    cells = [[format_number(value) for value in row] for row in m.data]
    widths = [max(len(row[j]) for row in cells) for j in range(m.cols)]

    lines = []
    for row in cells:
        lines.append(''.join(
            f" {_center(cell, width)} " for cell, width in zip(row, widths)
        ))
        lines.append('\n')
    return ''.join(lines)


def _center(text: str, width: int) -> str:
    # odd padding goes to the right
    pad = width - len(text)
    left = pad // 2
    return ' ' * left + text + ' ' * (pad - left)
