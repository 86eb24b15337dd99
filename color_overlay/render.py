"""Batch rendering of the overlay and edge images from files on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SETTINGS, OverlaySettings
from .infrastructure.imageio import decode_image, encode_image
from .processing.dominant import DominantColor
from .processing.pipeline import build_edge_image, compose_overlay

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    overlay_path: str
    output_path: str
    dominant: DominantColor
    replaced: int


def render_files(settings: OverlaySettings = SETTINGS) -> RenderResult:
    foreground = decode_image(settings.foreground_path)
    background = decode_image(settings.background_path)

    overlay = compose_overlay(foreground, background, settings.histogram_config())
    encode_image(overlay.image, settings.overlay_path)
    LOGGER.info("Wrote %s", settings.overlay_path)

    edges = build_edge_image(background.to_image(), settings)
    encode_image(edges, settings.output_path)
    LOGGER.info("Wrote %s", settings.output_path)

    return RenderResult(
        settings.overlay_path, settings.output_path, overlay.dominant, overlay.replaced
    )
