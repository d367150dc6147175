"""A fixed-size two-dimensional array of bits."""

from __future__ import annotations

from typing import Callable

BitVisitor = Callable[[int, int, "Bit2", int], None]


class Bit2:
    """A width x height grid of bits, all 0 when created.

    Cells are addressed by ``(col, row)`` with ``0 <= col < width`` and
    ``0 <= row < height``.
    """

    __slots__ = ("_width", "_height", "_bits")

    def __init__(self, width: int, height: int) -> None:
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if height < 0:
            raise ValueError(f"height must be non-negative, got {height}")
        self._width = width
        self._height = height
        self._bits = bytearray(width * height)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def __repr__(self) -> str:
        return f"Bit2(width={self._width}, height={self._height})"

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

    def get(self, col: int, row: int) -> int:
        """Return the bit at ``(col, row)``."""
        return self._bits[self._index(col, row)]

    def put(self, col: int, row: int, bit: int) -> int:
        """Set the bit at ``(col, row)`` and return its previous value."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        index = self._index(col, row)
        previous = self._bits[index]
        self._bits[index] = bit
        return previous

    def map_col_major(self, apply: BitVisitor) -> None:
        """Call ``apply(col, row, self, value)`` for every cell, column by column."""
        for col in range(self._width):
            for row in range(self._height):
                apply(col, row, self, self.get(col, row))

    def map_row_major(self, apply: BitVisitor) -> None:
        """Call ``apply(col, row, self, value)`` for every cell, row by row."""
        for row in range(self._height):
            for col in range(self._width):
                apply(col, row, self, self.get(col, row))