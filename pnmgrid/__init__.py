"""Two-dimensional grids, a PNM reader, a sudoku checker and a black-edge remover."""

__version__ = "0.1.0"
__all__ = ["bit2", "uarray2", "pnm", "sudoku", "unblackedges"]