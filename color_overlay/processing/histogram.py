from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Tuple

from .buffer import PixelBuffer
from ..config import DEFAULT_HISTOGRAM, HistogramConfig

LOGGER = logging.getLogger(__name__)

Bucket = Tuple[int, int, int]


def bucket_index(value: int, config: HistogramConfig = DEFAULT_HISTOGRAM) -> int:
    return value // config.bucket_size


class ColorHistogram:
    """Occupancy counts over ``size**3`` quantized RGB buckets."""

    def __init__(self, config: HistogramConfig = DEFAULT_HISTOGRAM) -> None:
        self.config = config
        self._counts: List[int] = [0] * config.buckets_per_channel ** 3

    @classmethod
    def from_counts(
        cls,
        counts: Mapping[Bucket, int],
        config: HistogramConfig = DEFAULT_HISTOGRAM,
    ) -> "ColorHistogram":
        hist = cls(config)
        for bucket, count in counts.items():
            if count < 0:
                raise ValueError(f"negative count {count} for bucket {bucket}")
            hist._counts[hist._offset(*bucket)] = count
        return hist

    @property
    def size(self) -> int:
        return self.config.buckets_per_channel

    def _offset(self, r: int, g: int, b: int) -> int:
        size = self.size
        for index in (r, g, b):
            if not 0 <= index < size:
                raise IndexError(f"bucket {(r, g, b)} outside {size}x{size}x{size} histogram")
        return (r * size + g) * size + b

    def count(self, r: int, g: int, b: int) -> int:
        return self._counts[self._offset(r, g, b)]

    def increment(self, r: int, g: int, b: int) -> None:
        self._counts[self._offset(r, g, b)] += 1

    def total(self) -> int:
        return sum(self._counts)

    def __iter__(self) -> Iterator[Tuple[Bucket, int]]:
        """Yield ``((r, g, b), count)`` with r slowest and b fastest."""
        size = self.size
        for r in range(size):
            for g in range(size):
                for b in range(size):
                    yield (r, g, b), self._counts[(r * size + g) * size + b]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorHistogram):
            return NotImplemented
        return self.config == other.config and self._counts == other._counts

    def __repr__(self) -> str:
        return f"ColorHistogram(size={self.size}, total={self.total()})"


def build_histogram(
    image: PixelBuffer, config: HistogramConfig = DEFAULT_HISTOGRAM
) -> ColorHistogram:
    hist = ColorHistogram(config)
    # NOTE: the last row and last column are deliberately left out of the scan.
    # Existing outputs depend on these bounds; do not widen them to the full
    # image without also changing substitute_color.
    for row in range(image.rows - 1):
        for col in range(image.cols - 1):
            r, g, b = image.get(row, col)
            hist.increment(
                bucket_index(r, config),
                bucket_index(g, config),
                bucket_index(b, config),
            )
    LOGGER.debug("Histogram of %r holds %d pixels", image, hist.total())
    return hist
