from __future__ import annotations

import logging
from typing import Tuple

from .buffer import Pixel, PixelBuffer
from ..config import DEFAULT_HISTOGRAM, HistogramConfig
from ..errors import InvalidReplacementSizeError

LOGGER = logging.getLogger(__name__)


def matches_tolerance(
    pixel: Pixel,
    dominant: Tuple[int, int, int],
    config: HistogramConfig = DEFAULT_HISTOGRAM,
) -> bool:
    """True when every channel is within one bucket width of ``dominant``.

    Both ends of the window are inclusive, so it spans ``2 * bucket_size + 1``
    values per channel.
    """
    window = config.bucket_size
    return all(
        target - window <= value <= target + window
        for value, target in zip(pixel, dominant)
    )


def substitute_color(
    dominant: Tuple[int, int, int],
    target: PixelBuffer,
    replacement: PixelBuffer,
    config: HistogramConfig = DEFAULT_HISTOGRAM,
) -> int:
    """Replace pixels near ``dominant`` in ``target`` with tiled ``replacement`` pixels.

    ``target`` is modified in place. Replacement coordinates wrap with
    ``row % replacement.rows`` and ``col % replacement.cols``, so a smaller
    replacement repeats across the target. Returns the number of pixels
    replaced.
    """

    if replacement.rows < 1 or replacement.cols < 1:
        raise InvalidReplacementSizeError(
            f"replacement must be at least 1x1, got {replacement.rows}x{replacement.cols}"
        )

    dominant_rgb = tuple(dominant[:3])
    replaced = 0
    # NOTE: scan bounds match build_histogram; the last row and column are
    # never examined or replaced.
    for row in range(target.rows - 1):
        for col in range(target.cols - 1):
            if not matches_tolerance(target.get(row, col), dominant_rgb, config):
                continue
            r, g, b = replacement.get(row % replacement.rows, col % replacement.cols)
            target.set(row, col, r, g, b)
            replaced += 1

    LOGGER.debug("Replaced %d pixels near %s in %r", replaced, dominant_rgb, target)
    return replaced
