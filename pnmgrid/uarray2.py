"""A fixed-size two-dimensional array of values."""

from __future__ import annotations

from typing import Any, Callable

CellVisitor = Callable[[int, int, "UArray2", Any], None]


class UArray2:
    """A width x height grid of values, each cell starting at 0.

    Cells are addressed by ``(col, row)`` with ``0 <= col < width`` and
    ``0 <= row < height``.  ``size`` records the nominal size of one element
    and must be positive.
    """

    __slots__ = ("_width", "_height", "_size", "_cells")

    def __init__(self, width: int, height: int, size: int = 1) -> None:
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if height < 0:
            raise ValueError(f"height must be non-negative, got {height}")
        if size <= 0:
            raise ValueError(f"element size must be positive, got {size}")
        self._width = width
        self._height = height
        self._size = size
        self._cells: list[Any] = [0] * (width * height)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def size(self) -> int:
        """Nominal size of one element."""
        return self._size

    def __repr__(self) -> str:
        return (
            f"UArray2(width={self._width}, height={self._height}, "
            f"size={self._size})"
        )

    def _index(self, col: int, row: int) -> int:
        if not 0 <= col < self._width:
            raise IndexError(
                f"column {col} out of range for width {self._width}"
            )
        if not 0 <= row < self._height:
            raise IndexError(
                f"row {row} out of range for height {self._height}"
            )
        # Column-major layout: each column occupies `height` consecutive cells.
        return col * self._height + row

    def get(self, col: int, row: int) -> Any:
        """Return the value at ``(col, row)``."""
        return self._cells[self._index(col, row)]

    def put(self, col: int, row: int, value: Any) -> None:
        """Store ``value`` at ``(col, row)``."""
        self._cells[self._index(col, row)] = value

    def map_col_major(self, apply: CellVisitor) -> None:
        """Call ``apply(col, row, self, value)`` for every cell, column by column."""
        for col in range(self._width):
            for row in range(self._height):
                apply(col, row, self, self.get(col, row))

    def map_row_major(self, apply: CellVisitor) -> None:
        """Call ``apply(col, row, self, value)`` for every cell, row by row."""
        for row in range(self._height):
            for col in range(self._width):
                apply(col, row, self, self.get(col, row))