"""Dominant color replacement and edge rendering built on Pillow."""

from . import infrastructure, processing
from .config import SETTINGS, HistogramConfig, OverlaySettings
from .errors import (
    DecodeError,
    EncodeError,
    InvalidReplacementSizeError,
    OverlayError,
    PixelIndexError,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "infrastructure",
    "processing",
    "SETTINGS",
    "HistogramConfig",
    "OverlaySettings",
    "DecodeError",
    "EncodeError",
    "InvalidReplacementSizeError",
    "OverlayError",
    "PixelIndexError",
]
