"""Image file decoding and encoding."""

from .imageio import decode_image, encode_image

__all__ = ["decode_image", "encode_image"]
