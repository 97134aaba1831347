"""A small fixed-size 3x3 matrix of floats."""

from __future__ import annotations

from typing import Iterator


class Matrix3x3:
    """A 3x3 matrix, indexed as ``m[row, col]``.

    Built from nine values, either flat or as three rows; with no values
    it is the zero matrix.
    """

    __slots__ = ("_rows",)

    def __init__(self, values=None):
        if values is None:
            self._rows = ((0.0,) * 3,) * 3
            return
        items = list(values)
        if len(items) == 9 and not any(isinstance(v, (list, tuple)) for v in items):
            flat = [float(v) for v in items]
        elif len(items) == 3:
            rows = [list(r) for r in items]
            if any(len(r) != 3 for r in rows):
                raise ValueError("Matrix3x3 needs three rows of three values")
            flat = [float(v) for r in rows for v in r]
        else:
            raise ValueError("Matrix3x3 needs nine values")
        self._rows = tuple(tuple(flat[i:i + 3]) for i in (0, 3, 6))

    @classmethod
    def identity(cls) -> "Matrix3x3":
        return cls([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._rows[row][col]

    def __iter__(self) -> Iterator[tuple[float, float, float]]:
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def det(self) -> float:
        """Return the determinant."""
        v = self._rows
        return (v[0][0] * (v[1][1] * v[2][2] - v[2][1] * v[1][2])
                - v[0][1] * (v[1][0] * v[2][2] - v[1][2] * v[2][0])
                + v[0][2] * (v[1][0] * v[2][1] - v[1][1] * v[2][0]))

    def inverse(self) -> "Matrix3x3":
        """Return the inverse matrix.

        Raises ValueError when the determinant is zero.
        """
        d = self.det()
        if d == 0.0:
            raise ValueError("Matrix is singular")
        v = self._rows
        r = [[0.0] * 3 for _ in range(3)]
        r[0][0] = (v[1][1] * v[2][2] - v[1][2] * v[2][1]) / d
        r[1][0] = (-v[1][0] * v[2][2] + v[2][0] * v[1][2]) / d
        r[2][0] = (v[1][0] * v[2][1] - v[2][0] * v[1][1]) / d
        r[0][1] = (-v[0][1] * v[2][2] + v[2][1] * v[0][2]) / d
        r[1][1] = (v[0][0] * v[2][2] - v[2][0] * v[0][2]) / d
        r[2][1] = (-v[0][0] * v[2][1] + v[2][0] * v[0][1]) / d
        r[0][2] = (v[0][1] * v[1][2] - v[1][1] * v[0][2]) / d
        r[1][2] = (-v[0][0] * v[1][2] + v[1][0] * v[0][2]) / d
        r[2][2] = (v[0][0] * v[1][1] - v[1][0] * v[0][1]) / d
        return Matrix3x3(r)

    def transposed(self) -> "Matrix3x3":
        """Return the transpose."""
        return Matrix3x3([list(col) for col in zip(*self._rows)])

    def __matmul__(self, other) -> "Matrix3x3":
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        cols = list(zip(*other._rows))
        return Matrix3x3([[sum(a * b for a, b in zip(row, col)) for col in cols]
                          for row in self._rows])

    def __str__(self) -> str:
        return " ".join(f"r{i}=(" + ",".join(f"{v:g}" for v in row) + ")"
                        for i, row in enumerate(self._rows, start=1))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(r) for r in self._rows]!r})"