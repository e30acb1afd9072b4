"""
Text input and output for matrices.

Public API:
    parse(text) -> Matrix
    format_matrix(matrix) -> str
    format_number(value) -> str

Example:
    >>> from pymatrix.textio import parse, format_matrix
    >>> m = parse("1 2\\n3 4")
    >>> format_matrix(m)
    ' 1  2 \\n 3  4 \\n'
"""

from pymatrix.textio.parser import parse
from pymatrix.textio.formatter import format_matrix, format_number

__all__ = [
    "parse",
    "format_matrix",
    "format_number",
]
