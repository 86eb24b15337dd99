"""Exception types raised by the overlay pipeline and its collaborators."""


class OverlayError(Exception):
    """Base class for every error raised by :mod:`color_overlay`."""


class InvalidReplacementSizeError(OverlayError, ValueError):
    """The replacement buffer has no rows or no columns to tile from."""


class PixelIndexError(OverlayError, IndexError):
    """A pixel coordinate fell outside the buffer."""


class DecodeError(OverlayError):
    """An image file could not be read or is not a supported format."""


class EncodeError(OverlayError):
    """An image could not be written to disk."""
