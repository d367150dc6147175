"""Check whether a 9x9 graymap holds a solved sudoku."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pnmgrid.pnm import PnmFormatError, PnmImage, PnmKind, read_pnm
from pnmgrid.uarray2 import UArray2

SIDE = 9
BOX = 3
_DIGITS = range(1, SIDE + 1)


def check_pgm_header(image: PnmImage) -> None:
    """Raise PnmFormatError unless ``image`` is a 9x9 graymap with maximum 9."""
    if image.kind is not PnmKind.GRAYMAP:
        raise PnmFormatError(f"expected a graymap, got {image.kind.name.lower()}")
    if image.width != SIDE or image.height != SIDE:
        raise PnmFormatError(
            f"expected a {SIDE}x{SIDE} image, got {image.width}x{image.height}"
        )
    if image.denominator != SIDE:
        raise PnmFormatError(
            f"expected maximum value {SIDE}, got {image.denominator}"
        )


def load_grid(image: PnmImage) -> UArray2:
    """Copy the samples of ``image`` into a grid indexed by ``(col, row)``."""
    grid = UArray2(image.width, image.height, 4)
    for row, samples in enumerate(image.rows()):
        for col, value in enumerate(samples):
            grid.put(col, row, value)
    return grid


def _group_valid(values: Iterable[int]) -> bool:
    seen: set[int] = set()
    for value in values:
        if value not in _DIGITS or value in seen:
            return False
        seen.add(value)
    return True


def columns_valid(grid: UArray2) -> bool:
    """True if every column holds digits 1-9 with no repeats."""
    return all(
        _group_valid(grid.get(col, row) for row in range(grid.height))
        for col in range(grid.width)
    )


def rows_valid(grid: UArray2) -> bool:
    """True if every row holds digits 1-9 with no repeats."""
    return all(
        _group_valid(grid.get(col, row) for col in range(grid.width))
        for row in range(grid.height)
    )


def box_valid(grid: UArray2, start_col: int, start_row: int) -> bool:
    """True if the 3x3 box whose top-left cell is given has no repeats."""
    return _group_valid(
        grid.get(col, row)
        for row in range(start_row, start_row + BOX)
        for col in range(start_col, start_col + BOX)
    )


def boxes_valid(grid: UArray2) -> bool:
    """True if each of the nine 3x3 boxes holds digits 1-9 with no repeats."""
    return all(
        box_valid(grid, box_col * BOX, box_row * BOX)
        for box_row in range(BOX)
        for box_col in range(BOX)
    )


def is_solved(grid: UArray2) -> bool:
    """True if rows, columns and boxes all satisfy the sudoku rules."""
    return columns_valid(grid) and rows_valid(grid) and boxes_valid(grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Return 0 if the graymap (file or standard input) is a solved sudoku, else 1.

    Malformed input or bad usage is reported on standard error and yields 2.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("usage: sudoku [file.pgm]", file=sys.stderr)
        return 2
    try:
        if args:
            with open(args[0], "rb") as stream:
                image = read_pnm(stream)
        else:
            image = read_pnm(sys.stdin.buffer)
        check_pgm_header(image)
    except (OSError, PnmFormatError) as exc:
        print(f"sudoku: {exc}", file=sys.stderr)
        return 2
    return 0 if is_solved(load_grid(image)) else 1


if __name__ == "__main__":
    raise SystemExit(main())