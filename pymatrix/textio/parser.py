"""
Matrix text parser.

Text format: one row per line, entries separated by arbitrary whitespace,
each entry a standard floating point literal. No header, delimiter or
metadata. The first row fixes the column count.

    >>> parse("1 2\\n3 4").to_list()
    [[1.0, 2.0], [3.0, 4.0]]
"""

from __future__ import annotations

from pymatrix.core.exceptions import (
    ValidationError,
    EmptyInputError,
    EmptyRowError,
    InvalidNumberError,
    InconsistentColumnsError,
)
from pymatrix.core.matrix import Matrix


def parse(text: str) -> Matrix:
    """
    Parse matrix text into a Matrix.

    Surrounding whitespace is ignored; every row is stripped before it
    is split into tokens.

    Args:
        text: Matrix text

    Returns:
        Matrix with one row per line

    Raises:
        EmptyInputError: If the text contains no rows
        EmptyRowError: If the first row has no entries
        InvalidNumberError: If a token is not a floating point literal
        InconsistentColumnsError: If a row's entry count differs from the first row's
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"text: expected str, got {type(text).__name__}"
        )

    body = text.strip()
    if not body:
        raise EmptyInputError("Empty matrix string")

    lines = [line.strip() for line in body.split('\n')]

    n_cols = len(lines[0].split())
    if n_cols == 0:
        raise EmptyRowError("Empty matrix row")

    rows = []
    for i, line in enumerate(lines):
        tokens = line.split()
        row = [_parse_token(token, i, j) for j, token in enumerate(tokens)]
        if len(row) != n_cols:
            raise InconsistentColumnsError(
                f"Inconsistent number of columns in row {i + 1}: "
                f"expected {n_cols}, got {len(row)}",
                row=i,
                expected=n_cols,
                actual=len(row),
            )
        rows.append(row)

    return Matrix.from_rows(rows)


def _parse_token(token: str, row: int, col: int) -> float:
    """Parse one entry; digit-group underscores are not a float literal."""
    if '_' not in token:
        try:
            return float(token)
        except ValueError:
            pass
    raise InvalidNumberError(
        f"Invalid number in matrix at row {row + 1}, column {col + 1}: {token!r}",
        row=row,
        col=col,
        token=token,
    )
