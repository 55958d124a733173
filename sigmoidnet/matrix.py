"""Dense row-major matrix of floats."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sigmoidnet.initializers import xavier_vector


class Matrix:
    """A ``rows`` x ``cols`` matrix, randomly initialised when no data is given."""

    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int = 0, cols: int = 0, data: Iterable[float] | None = None):
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid matrix shape ({rows}, {cols})")
        if data is None:
            values = xavier_vector(rows, cols)
        else:
            values = [float(v) for v in data]
            if len(values) != rows * cols:
                raise ValueError(
                    f"expected {rows * cols} values for a {rows}x{cols} matrix, got {len(values)}"
                )
        self.rows = rows
        self.cols = cols
        self._data = values

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range for shape {self.shape}")
        return i * self.cols + j

    def _row(self, i: int) -> list[float]:
        return self._data[i * self.cols:(i + 1) * self.cols]

    def _column(self, j: int) -> list[float]:
        return self._data[j::self.cols]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._data[self._offset(index)] = float(value)

    def matvec(self, vector: Iterable[float]) -> list[float]:
        """Return the product of this matrix with a vector."""
        values = list(vector)
        if len(values) != self.cols:
            raise ValueError("vector size does not match the number of columns")
        return [sum(w * v for w, v in zip(self._row(i), values)) for i in range(self.rows)]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("matrices of incompatible shapes for addition")
        return Matrix(self.rows, self.cols, (a + b for a, b in zip(self._data, other._data)))

    def __mul__(self, other: Matrix | Sequence[float]) -> Matrix | list[float]:
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError("incompatible shapes for matrix multiplication")
            columns = [other._column(j) for j in range(other.cols)]
            data = [
                sum(a * b for a, b in zip(self._row(i), column))
                for i in range(self.rows)
                for column in columns
            ]
            return Matrix(self.rows, other.cols, data)
        if isinstance(other, (int, float)):
            return NotImplemented
        return self.matvec(other)

    def scale(self, alpha: float) -> Matrix:
        """Return a copy with every coefficient multiplied by ``alpha``."""
        return Matrix(self.rows, self.cols, (v * alpha for v in self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{v:g} " for v in self._row(i)) + "\n" for i in range(self.rows)
        )

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._data!r})"