from __future__ import annotations

from typing import Tuple

from PIL import Image

from ..errors import PixelIndexError

Pixel = Tuple[int, int, int]


class PixelBuffer:
    """Row/column view over an RGB Pillow image with bounds-checked access.

    Coordinates are ``(row, col)``, i.e. ``(y, x)`` in Pillow terms. The
    wrapped image is shared, not copied; use :meth:`clone` before mutating a
    buffer the caller still needs.
    """

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGB":
            raise ValueError(f"PixelBuffer requires an RGB image, got {image.mode!r}")
        self._image = image
        self._pixels = None

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        return cls(image if image.mode == "RGB" else image.convert("RGB"))

    @classmethod
    def new(cls, rows: int, cols: int, color: Pixel = (0, 0, 0)) -> "PixelBuffer":
        return cls(Image.new("RGB", (cols, rows), color))

    @property
    def rows(self) -> int:
        return self._image.height

    @property
    def cols(self) -> int:
        return self._image.width

    @property
    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def to_image(self) -> Image.Image:
        return self._image

    def clone(self) -> "PixelBuffer":
        return PixelBuffer(self._image.copy())

    def _access(self):
        # Loaded lazily so that empty images never touch pixel access.
        if self._pixels is None:
            self._pixels = self._image.load()
        return self._pixels

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise PixelIndexError(
                f"pixel ({row}, {col}) outside {self.rows}x{self.cols} buffer"
            )

    def get(self, row: int, col: int) -> Pixel:
        self._check(row, col)
        r, g, b = self._access()[col, row]
        return r, g, b

    def set(self, row: int, col: int, r: int, g: int, b: int) -> None:
        self._check(row, col)
        for value in (r, g, b):
            if not 0 <= value <= 255:
                raise ValueError(f"channel value {value} outside 0..255")
        self._access()[col, row] = (r, g, b)

    def __repr__(self) -> str:
        return f"PixelBuffer(rows={self.rows}, cols={self.cols})"
