from __future__ import annotations

import logging
import os
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError, EncodeError
from ..processing.buffer import PixelBuffer

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def decode_image(path: PathLike) -> PixelBuffer:
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
    except FileNotFoundError as exc:
        raise DecodeError(f"image not found: {path}") from exc
    except UnidentifiedImageError as exc:
        raise DecodeError(f"unsupported image format: {path}") from exc
    except OSError as exc:
        raise DecodeError(f"could not read image {path}: {exc}") from exc
    LOGGER.debug("Decoded %s as %dx%d", path, rgb.height, rgb.width)
    return PixelBuffer(rgb)


def encode_image(image: Union[PixelBuffer, Image.Image], path: PathLike) -> None:
    img = image.to_image() if isinstance(image, PixelBuffer) else image
    try:
        img.save(path)
    except (OSError, ValueError, KeyError) as exc:
        # Pillow raises ValueError for an unknown extension and KeyError for an
        # unknown explicit format.
        raise EncodeError(f"could not write image {path}: {exc}") from exc
    LOGGER.debug("Wrote %s", path)
