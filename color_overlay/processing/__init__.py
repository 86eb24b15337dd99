"""Histogram, color substitution and filter components of the overlay pipeline."""

from .buffer import Pixel, PixelBuffer
from .dominant import DominantColor, bucket_midpoint, find_dominant_color
from .filters import (
    detect_edges,
    flip_horizontal,
    gaussian_blur,
    hysteresis_threshold,
    to_grayscale,
)
from .histogram import ColorHistogram, bucket_index, build_histogram
from .pipeline import (
    OverlayResult,
    build_edge_image,
    compose_overlay,
    create_overlay_image,
    overlay_images,
)
from .substitute import matches_tolerance, substitute_color

__all__ = [
    "Pixel",
    "PixelBuffer",
    "DominantColor",
    "bucket_midpoint",
    "find_dominant_color",
    "detect_edges",
    "flip_horizontal",
    "gaussian_blur",
    "hysteresis_threshold",
    "to_grayscale",
    "ColorHistogram",
    "bucket_index",
    "build_histogram",
    "OverlayResult",
    "build_edge_image",
    "compose_overlay",
    "create_overlay_image",
    "overlay_images",
    "matches_tolerance",
    "substitute_color",
]
