"""Reading portable anymap (PBM, PGM, PPM) images."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Iterator, TextIO, Union


class PnmFormatError(ValueError):
    """Raised when input is not a well-formed portable anymap."""


class PnmKind(IntEnum):
    """The family an image belongs to."""

    BITMAP = 1
    GRAYMAP = 2
    PIXMAP = 3


@dataclass(frozen=True)
class PnmImage:
    """A decoded image: its header and its samples in reading order.

    For bitmaps a sample of 1 is black and ``denominator`` is 1.  Pixmaps
    hold three samples (red, green, blue) per pixel.
    """

    kind: PnmKind
    width: int
    height: int
    denominator: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        expected = self.width * self.height * self.samples_per_pixel
        if len(self.pixels) != expected:
            raise PnmFormatError(
                f"expected {expected} samples, got {len(self.pixels)}"
            )

    @property
    def samples_per_pixel(self) -> int:
        """Samples that make up one pixel."""
        return 3 if self.kind is PnmKind.PIXMAP else 1

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the samples of each row, top to bottom."""
        stride = self.width * self.samples_per_pixel
        for start in range(0, len(self.pixels), stride or 1):
            yield self.pixels[start:start + stride]


# magic number -> (kind, raster is binary)
_FORMATS = {
    b"P1": (PnmKind.BITMAP, False),
    b"P2": (PnmKind.GRAYMAP, False),
    b"P3": (PnmKind.PIXMAP, False),
    b"P4": (PnmKind.BITMAP, True),
    b"P5": (PnmKind.GRAYMAP, True),
    b"P6": (PnmKind.PIXMAP, True),
}

_WHITESPACE = b" \t\r\n\v\f"
_DIGITS = re.compile(rb"[0-9]+")


class _Scanner:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def skip_space(self) -> None:
        data = self.data
        while self.pos < len(data):
            char = data[self.pos]
            if char in _WHITESPACE:
                self.pos += 1
            elif char == ord("#"):
                end = data.find(b"\n", self.pos)
                self.pos = len(data) if end < 0 else end + 1
            else:
                break

    def integer(self, what: str) -> int:
        self.skip_space()
        match = _DIGITS.match(self.data, self.pos)
        if match is None:
            raise PnmFormatError(f"expected {what} at offset {self.pos}")
        self.pos = match.end()
        return int(match.group())

    def bit(self) -> int:
        self.skip_space()
        if self.pos >= len(self.data):
            raise PnmFormatError("bitmap data ends early")
        char = self.data[self.pos]
        if char not in b"01":
            raise PnmFormatError(
                f"bitmap sample must be 0 or 1 at offset {self.pos}"
            )
        self.pos += 1
        return char - ord("0")

    def single_whitespace(self) -> None:
        if self.pos >= len(self.data) or self.data[self.pos] not in _WHITESPACE:
            raise PnmFormatError("header must end with one whitespace byte")
        self.pos += 1

    def rest(self) -> bytes:
        return self.data[self.pos:]


def _unpack_bits(raw: bytes, width: int, height: int) -> list[int]:
    row_bytes = (width + 7) // 8
    if len(raw) < row_bytes * height:
        raise PnmFormatError("bitmap data ends early")
    samples: list[int] = []
    for start in range(0, row_bytes * height, row_bytes or 1):
        chunk = raw[start:start + row_bytes]
        bits = "".join(f"{byte:08b}" for byte in chunk)[:width]
        samples.extend(int(bit) for bit in bits)
    return samples


def _unpack_samples(raw: bytes, count: int, maxval: int) -> list[int]:
    width = 1 if maxval < 256 else 2
    if len(raw) < count * width:
        raise PnmFormatError("image data ends early")
    if width == 1:
        return list(raw[:count])
    return list(struct.unpack(f">{count}H", raw[:count * 2]))


def _parse(data: bytes) -> PnmImage:
    magic = data[:2]
    if magic not in _FORMATS:
        raise PnmFormatError(f"unknown magic number {magic!r}")
    kind, binary = _FORMATS[magic]
    scanner = _Scanner(data)
    scanner.pos = 2

    width = scanner.integer("width")
    height = scanner.integer("height")
    if kind is PnmKind.BITMAP:
        maxval = 1
    else:
        maxval = scanner.integer("maximum value")
        if not 0 < maxval < 65536:
            raise PnmFormatError(f"maximum value {maxval} out of range")

    per_pixel = 3 if kind is PnmKind.PIXMAP else 1
    count = width * height * per_pixel

    if binary:
        scanner.single_whitespace()
        if kind is PnmKind.BITMAP:
            samples = _unpack_bits(scanner.rest(), width, height)
        else:
            samples = _unpack_samples(scanner.rest(), count, maxval)
    elif kind is PnmKind.BITMAP:
        samples = [scanner.bit() for _ in range(count)]
    else:
        try:
            samples = [scanner.integer("sample") for _ in range(count)]
        except PnmFormatError as exc:
            raise PnmFormatError(f"image data ends early: {exc}") from None

    for sample in samples:
        if sample > maxval:
            raise PnmFormatError(
                f"sample {sample} exceeds maximum value {maxval}"
            )

    return PnmImage(kind, width, height, maxval, tuple(samples))


def read_pnm(stream: Union[BinaryIO, TextIO]) -> PnmImage:
    """Read one image from ``stream``, which may be binary or text."""
    data = stream.read()
    if isinstance(data, str):
        data = data.encode("latin-1")
    return _parse(data)