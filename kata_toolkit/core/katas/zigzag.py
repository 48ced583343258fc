from __future__ import annotations

from kata_toolkit.core.errors import KataValidationError


def get_zigzag_matrix(n: int) -> list[list[int]]:
    """Return the n x n matrix numbered along the JPEG zigzag path.

    Cells on the same anti-diagonal (row + col) are visited together; odd
    diagonals run top-down, even diagonals bottom-up.
    """
    if n < 1:
        raise KataValidationError(
            code="E_INVALID_SIZE",
            message=f"matrix size must be a positive integer, got {n}",
            path="n",
        )

    cells = sorted(
        ((row, col) for row in range(n) for col in range(n)),
        key=lambda rc: (rc[0] + rc[1], rc[0] if (rc[0] + rc[1]) % 2 else rc[1]),
    )
    matrix = [[0] * n for _ in range(n)]
    for value, (row, col) in enumerate(cells):
        matrix[row][col] = value
    return matrix
