from __future__ import annotations

from typing import NamedTuple, Tuple

from .histogram import ColorHistogram
from ..config import DEFAULT_HISTOGRAM, HistogramConfig


class DominantColor(NamedTuple):
    r: int
    g: int
    b: int
    bucket: Tuple[int, int, int] = (0, 0, 0)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


def bucket_midpoint(index: int, config: HistogramConfig = DEFAULT_HISTOGRAM) -> int:
    return index * config.bucket_size + config.bucket_size // 2


def find_dominant_color(histogram: ColorHistogram) -> DominantColor:
    """Return the midpoint color of the most populated bucket.

    Buckets are visited with red slowest and blue fastest. Only a strictly
    greater count displaces the current best, so ties resolve to the bucket
    visited first and an all-zero histogram yields bucket ``(0, 0, 0)``.
    """

    best_bucket = (0, 0, 0)
    highest = histogram.count(0, 0, 0)
    for bucket, count in histogram:
        if count > highest:
            best_bucket = bucket
            highest = count

    config = histogram.config
    r, g, b = (bucket_midpoint(index, config) for index in best_bucket)
    return DominantColor(r, g, b, best_bucket)
