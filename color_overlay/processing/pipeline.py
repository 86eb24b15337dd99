from __future__ import annotations

import logging
from typing import NamedTuple

from PIL import Image

from .buffer import PixelBuffer
from .dominant import DominantColor, find_dominant_color
from .filters import detect_edges, flip_horizontal, gaussian_blur, to_grayscale
from .histogram import build_histogram
from .substitute import substitute_color
from ..config import DEFAULT_HISTOGRAM, SETTINGS, HistogramConfig, OverlaySettings

LOGGER = logging.getLogger(__name__)


class OverlayResult(NamedTuple):
    image: PixelBuffer
    dominant: DominantColor
    replaced: int


def compose_overlay(
    foreground: PixelBuffer,
    background: PixelBuffer,
    config: HistogramConfig = DEFAULT_HISTOGRAM,
) -> OverlayResult:
    """Swap the dominant color of a copy of ``foreground`` for ``background`` pixels.

    The histogram is taken from the untouched foreground; only the clone is
    modified. A background smaller than the foreground is tiled.
    """
    output = foreground.clone()
    dominant = find_dominant_color(build_histogram(foreground, config))
    replaced = substitute_color(dominant, output, background, config)
    LOGGER.info(
        "Dominant color %s (bucket %s); replaced %d of %dx%d pixels",
        dominant.rgb,
        dominant.bucket,
        replaced,
        output.rows,
        output.cols,
    )
    return OverlayResult(output, dominant, replaced)


def create_overlay_image(
    foreground: PixelBuffer,
    background: PixelBuffer,
    config: HistogramConfig = DEFAULT_HISTOGRAM,
) -> PixelBuffer:
    return compose_overlay(foreground, background, config).image


def overlay_images(
    foreground: Image.Image,
    background: Image.Image,
    config: HistogramConfig = DEFAULT_HISTOGRAM,
) -> Image.Image:
    fg = PixelBuffer.from_image(foreground)
    bg = PixelBuffer.from_image(background)
    return create_overlay_image(fg, bg, config).to_image()


def build_edge_image(background: Image.Image, settings: OverlaySettings = SETTINGS) -> Image.Image:
    img = flip_horizontal(background)
    img = to_grayscale(img)
    img = gaussian_blur(img, settings.blur_kernel, settings.blur_sigma)
    return detect_edges(img, settings.edge_low, settings.edge_high)
