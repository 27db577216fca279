"""In-place matrix manipulation and searching."""


def _require_square(matrix):
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")


def interchange_rows(matrix):
    """Reverse the order of the rows of ``matrix`` in place."""
    matrix.reverse()


def reverse_columns(matrix):
    """Reverse the order of the columns of ``matrix`` in place."""
    for row in matrix:
        row.reverse()


def rotate(matrix):
    """Rotate a square matrix 90 degrees clockwise in place."""
    _require_square(matrix)
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def search_matrix(matrix, target):
    """Return True if ``target`` is in a matrix whose rows and columns are sorted."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def sum_triangles(matrix, n):
    """Return ``[upper, lower]``: the sums of the upper and lower triangles of the n x n matrix.

    The diagonal belongs to both triangles.
    """
    upper = sum(matrix[i][j] for i in range(n) for j in range(i, n))
    lower = sum(matrix[i][j] for i in range(n) for j in range(i + 1))
    return [upper, lower]


def transpose(mat):
    """Transpose a square matrix in place."""
    _require_square(mat)
    mat[:] = [list(column) for column in zip(*mat)]