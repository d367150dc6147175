# pnmgrid

Two-dimensional grid types and two small command-line tools for
portable anymap (PNM) images.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

Both commands read the file named as their single argument, or standard
input when no argument is given. More than one argument prints a usage
line. Bad usage, a file that cannot be opened, or malformed input is
reported on standard error with exit status 2.

### pnmgrid-sudoku

Checks whether a 9x9 greyscale map (PGM, plain `P2` or raw `P5`) with a
maximum value of 9 holds a solved sudoku: every row, every column and
every 3x3 box must contain each of the digits 1 to 9 exactly once.

    pnmgrid-sudoku puzzle.pgm
    pnmgrid-sudoku < puzzle.pgm

It prints nothing for a readable grid. The exit status is 0 for a
solved grid and 1 otherwise. An image that is not a 9x9 graymap with
maximum value 9 is an error (status 2).

### pnmgrid-unblackedges

Reads a bitmap (PBM, plain `P1` or raw `P4`) of non-zero width and
height and turns white every black pixel that is connected to the
border of the image through other black pixels (up, down, left or
right). The cleaned image is written to standard output as a plain `P1`
bitmap: a `P1` line, a `width height` line, then one line per row with
each pixel followed by a space.

    pnmgrid-unblackedges scan.pbm > clean.pbm
    pnmgrid-unblackedges < scan.pbm > clean.pbm

## Library

`pnmgrid.bit2.Bit2` is a fixed-size grid of bits (all 0 when created)
and `pnmgrid.uarray2.UArray2` is a fixed-size grid of arbitrary values
(all 0 when created, with a nominal positive element `size`, default 1).
Both are indexed by `(col, row)`, raise `IndexError` outside their
bounds and `ValueError` for negative dimensions, and can be walked in
column-major or row-major order with a callback taking
`(col, row, grid, value)`:

```python
from pnmgrid.bit2 import Bit2

grid = Bit2(5, 7)
previous = grid.put(4, 6, 1)     # returns the bit that was there before
assert grid.get(4, 6) == 1

grid.map_row_major(lambda col, row, g, bit: print(col, row, bit))
```

`Bit2.put` accepts only 0 or 1 and raises `ValueError` otherwise.
`UArray2.put` stores any value and returns nothing.

`pnmgrid.pnm.read_pnm` reads one image in any of the formats `P1` to
`P6` from a binary or text stream into a `PnmImage` (fields `kind`,
`width`, `height`, `denominator`, `pixels`, and a `rows()` iterator),
raising `PnmFormatError` (a `ValueError`) on malformed input.

The steps used by the commands are available as functions:

- `pnmgrid.sudoku`: `check_pgm_header`, `load_grid`, `rows_valid`,
  `columns_valid`, `box_valid`, `boxes_valid`, `is_solved`, `main`.
- `pnmgrid.unblackedges`: `check_pbm_header`, `load_bitmap`,
  `clear_from`, `remove_black_edges` (returns how many pixels changed),
  `format_pbm`, `main`.

## Limits

The package only reads PNM images; the one thing it writes is the plain
`P1` text produced by `format_pbm`. The sudoku command checks a
completed grid and does not solve puzzles.