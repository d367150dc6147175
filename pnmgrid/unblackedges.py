"""Remove black edge pixels from a portable bitmap."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

from pnmgrid.bit2 import Bit2
from pnmgrid.pnm import PnmFormatError, PnmImage, PnmKind, read_pnm

BLACK = 1
WHITE = 0


def check_pbm_header(image: PnmImage) -> tuple[int, int]:
    """Return ``(width, height)``; raise PnmFormatError unless a non-empty bitmap."""
    if image.kind is not PnmKind.BITMAP:
        raise PnmFormatError(f"expected a bitmap, got {image.kind.name.lower()}")
    if image.width <= 0:
        raise PnmFormatError(f"width must be positive, got {image.width}")
    if image.height <= 0:
        raise PnmFormatError(f"height must be positive, got {image.height}")
    return image.width, image.height


def load_bitmap(image: PnmImage) -> Bit2:
    """Copy the samples of a bitmap image into a Bit2 indexed by ``(col, row)``."""
    bitmap = Bit2(image.width, image.height)
    for row, samples in enumerate(image.rows()):
        for col, value in enumerate(samples):
            if value not in (WHITE, BLACK):
                raise PnmFormatError(
                    f"bitmap sample must be 0 or 1, got {value} at ({col}, {row})"
                )
            bitmap.put(col, row, value)
    return bitmap


def _on_edge(bitmap: Bit2, col: int, row: int) -> bool:
    return (
        col == 0
        or row == 0
        or col == bitmap.width - 1
        or row == bitmap.height - 1
    )


def _neighbours(bitmap: Bit2, col: int, row: int) -> Iterator[tuple[int, int]]:
    # Right, left, below, above: the order cells are pushed onto the stack.
    if col + 1 < bitmap.width:
        yield col + 1, row
    if col - 1 >= 0:
        yield col - 1, row
    if row + 1 < bitmap.height:
        yield col, row + 1
    if row - 1 >= 0:
        yield col, row - 1


def clear_from(bitmap: Bit2, col: int, row: int) -> int:
    """Whiten the black region touching the edge at ``(col, row)``.

    Nothing happens unless the pixel is black and lies on the image's edge.
    Returns the number of pixels turned white.
    """
    if bitmap.get(col, row) == WHITE or not _on_edge(bitmap, col, row):
        return 0
    bitmap.put(col, row, WHITE)
    cleared = 1
    stack = [(col, row)]
    while stack:
        current_col, current_row = stack.pop()
        for next_col, next_row in _neighbours(bitmap, current_col, current_row):
            if bitmap.get(next_col, next_row) == BLACK:
                bitmap.put(next_col, next_row, WHITE)
                cleared += 1
                stack.append((next_col, next_row))
    return cleared


def remove_black_edges(bitmap: Bit2) -> int:
    """Whiten every black pixel connected to the edge; return how many changed."""
    return sum(
        clear_from(bitmap, col, row)
        for row in range(bitmap.height)
        for col in range(bitmap.width)
    )


def format_pbm(bitmap: Bit2) -> str:
    """Render ``bitmap`` as a plain (P1) bitmap."""
    lines = [f"P1\n{bitmap.width} {bitmap.height}\n"]
    for row in range(bitmap.height):
        lines.append(
            "".join(f"{bitmap.get(col, row)} " for col in range(bitmap.width))
            + "\n"
        )
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a bitmap (file or standard input) and print it without black edges.

    Malformed input or bad usage is reported on standard error and yields 2.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("usage: unblackedges [file.pbm]", file=sys.stderr)
        return 2
    try:
        if args:
            with open(args[0], "rb") as stream:
                image = read_pnm(stream)
        else:
            image = read_pnm(sys.stdin.buffer)
        check_pbm_header(image)
        bitmap = load_bitmap(image)
    except (OSError, PnmFormatError) as exc:
        print(f"unblackedges: {exc}", file=sys.stderr)
        return 2
    remove_black_edges(bitmap)
    sys.stdout.write(format_pbm(bitmap))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())