import io
import sys

import pytest

from pnmgrid.pnm import PnmFormatError, PnmImage, PnmKind, read_pnm
from pnmgrid.sudoku import (
    box_valid,
    boxes_valid,
    check_pgm_header,
    columns_valid,
    is_solved,
    load_grid,
    main,
    rows_valid,
)

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Every row and column is a permutation of 1-9, but the boxes repeat digits.
LATIN = [[(r + c) % 9 + 1 for c in range(9)] for r in range(9)]


def pgm_text(rows, maxval=9):
    lines = [f"P2\n{len(rows[0])} {len(rows)}\n{maxval}\n"]
    lines.extend(" ".join(str(v) for v in row) + "\n" for row in rows)
    return "".join(lines).encode("ascii")


def image_of(rows):
    return read_pnm(io.BytesIO(pgm_text(rows)))


def grid_of(rows):
    return load_grid(image_of(rows))


def test_load_grid_places_samples_by_col_and_row():
    grid = grid_of(SOLVED)
    assert grid.width == 9 and grid.height == 9
    for r, row in enumerate(SOLVED):
        for c, value in enumerate(row):
            assert grid.get(c, r) == value


def test_solved_grid_passes_every_check():
    grid = grid_of(SOLVED)
    assert rows_valid(grid)
    assert columns_valid(grid)
    assert boxes_valid(grid)
    assert is_solved(grid)


def test_transposed_solution_is_still_solved():
    transposed = [list(col) for col in zip(*SOLVED)]
    assert is_solved(grid_of(transposed))


def test_swapping_cells_in_a_row_breaks_columns_only_for_rows():
    rows = [list(row) for row in SOLVED]
    rows[0][0], rows[0][1] = rows[0][1], rows[0][0]
    grid = grid_of(rows)
    assert rows_valid(grid)
    assert not columns_valid(grid)
    assert not is_solved(grid)


def test_latin_square_fails_boxes():
    grid = grid_of(LATIN)
    assert rows_valid(grid)
    assert columns_valid(grid)
    assert not box_valid(grid, 0, 0)
    assert not boxes_valid(grid)
    assert not is_solved(grid)


def test_each_box_of_solution_is_valid():
    grid = grid_of(SOLVED)
    for start_row in (0, 3, 6):
        for start_col in (0, 3, 6):
            assert box_valid(grid, start_col, start_row)


def test_zero_sample_is_rejected():
    rows = [list(row) for row in SOLVED]
    rows[4][4] = 0
    grid = grid_of(rows)
    assert not rows_valid(grid)
    assert not columns_valid(grid)
    assert not box_valid(grid, 3, 3)
    assert not is_solved(grid)


def test_out_of_range_value_is_rejected():
    grid = grid_of(SOLVED)
    grid.put(8, 8, 10)
    assert not rows_valid(grid)
    assert not columns_valid(grid)
    assert not boxes_valid(grid)


def test_header_accepts_binary_graymap():
    data = b"P5\n9 9\n9\n" + bytes(v for row in SOLVED for v in row)
    image = read_pnm(io.BytesIO(data))
    check_pgm_header(image)
    assert is_solved(load_grid(image))


def test_header_rejects_wrong_maxval():
    with pytest.raises(PnmFormatError):
        check_pgm_header(read_pnm(io.BytesIO(pgm_text(SOLVED, maxval=255))))


def test_header_rejects_wrong_size():
    rows = [row[:8] for row in SOLVED]
    with pytest.raises(PnmFormatError):
        check_pgm_header(image_of(rows))


def test_header_rejects_bitmap():
    image = PnmImage(PnmKind.BITMAP, 9, 9, 1, tuple([0] * 81))
    with pytest.raises(PnmFormatError):
        check_pgm_header(image)


def test_main_with_solved_file(tmp_path):
    path = tmp_path / "solved.pgm"
    path.write_bytes(pgm_text(SOLVED))
    assert main([str(path)]) == 0


def test_main_with_unsolved_file(tmp_path):
    path = tmp_path / "latin.pgm"
    path.write_bytes(pgm_text(LATIN))
    assert main([str(path)]) == 1


def test_main_reads_standard_input(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(pgm_text(SOLVED)), encoding="ascii")
    monkeypatch.setattr(sys, "stdin", stdin)
    assert main([]) == 0


def test_main_rejects_too_many_arguments(tmp_path):
    path = tmp_path / "solved.pgm"
    path.write_bytes(pgm_text(SOLVED))
    status = main([str(path), str(path)])
    assert status > 1


def test_main_rejects_missing_file(tmp_path):
    status = main([str(tmp_path / "absent.pgm")])
    assert status > 1


def test_main_rejects_bad_header(tmp_path):
    path = tmp_path / "wide.pgm"
    path.write_bytes(pgm_text(SOLVED, maxval=255))
    status = main([str(path)])
    assert status > 1