from __future__ import annotations

from PIL import Image, ImageChops, ImageFilter, ImageOps


def flip_horizontal(img: Image.Image) -> Image.Image:
    return ImageOps.mirror(img)


def to_grayscale(img: Image.Image) -> Image.Image:
    return img.convert("L")


def threshold_channel(channel: Image.Image, threshold: int) -> Image.Image:
    lut = [255 if value >= threshold else 0 for value in range(256)]
    return channel.point(lut)


def gaussian_blur(img: Image.Image, kernel_size: int, sigma: float) -> Image.Image:
    """Blur with a Gaussian of standard deviation ``sigma``.

    ``kernel_size`` must be a positive odd number. It only matters when
    ``sigma`` is 0, in which case the deviation is derived from it the same
    way common imaging toolkits do.
    """
    if kernel_size < 1 or kernel_size % 2 == 0:
        raise ValueError(f"kernel_size must be a positive odd integer, got {kernel_size}")
    if sigma < 0:
        raise ValueError(f"sigma must be >= 0, got {sigma}")
    if sigma == 0:
        sigma = 0.3 * ((kernel_size - 1) * 0.5 - 1) + 0.8
    return img.filter(ImageFilter.GaussianBlur(sigma))


def hysteresis_threshold(magnitude: Image.Image, low_threshold: int, high_threshold: int) -> Image.Image:
    """
    Keep strong responses plus weak responses connected to them.

    Pixels >= ``high_threshold`` seed the result. Pixels >= ``low_threshold``
    join it when 8-connected, directly or through other weak pixels, to a seed.
    Returns a binary ``L`` mask.
    """
    if low_threshold > high_threshold:
        raise ValueError(
            f"low_threshold ({low_threshold}) must not exceed high_threshold ({high_threshold})"
        )
    magnitude = magnitude.convert("L")
    weak = threshold_channel(magnitude, low_threshold)
    edges = threshold_channel(magnitude, high_threshold)

    # Grow the seeds one pixel per pass, never leaving the weak mask. Each pass
    # filters the whole image, so cost scales with the longest weak chain.
    while True:
        grown = ImageChops.multiply(edges.filter(ImageFilter.MaxFilter(3)), weak)
        if ImageChops.difference(grown, edges).getbbox() is None:
            return grown
        edges = grown


def pad_replicate(img: Image.Image) -> Image.Image:
    """Add a one pixel border that repeats the outermost rows and columns."""
    width, height = img.size
    out = Image.new(img.mode, (width + 2, height + 2))
    out.paste(img, (1, 1))
    out.paste(img.crop((0, 0, width, 1)), (1, 0))
    out.paste(img.crop((0, height - 1, width, height)), (1, height + 1))
    out.paste(out.crop((1, 0, 2, height + 2)), (0, 0))
    out.paste(out.crop((width, 0, width + 1, height + 2)), (width + 1, 0))
    return out


def detect_edges(img: Image.Image, low_threshold: int, high_threshold: int) -> Image.Image:
    """Binary edge mask from a Laplacian response with hysteresis thresholds.

    There is no non-maximum suppression, so edges come out two or three pixels
    wide rather than the one-pixel lines of a Canny detector.
    """
    gray = to_grayscale(img)
    width, height = gray.size
    if not width or not height:
        return gray
    # Pillow copies the outermost pixels through 3x3 kernels unfiltered, so
    # filter a padded copy and crop back to the original frame.
    response = pad_replicate(gray).filter(ImageFilter.FIND_EDGES)
    response = response.crop((1, 1, width + 1, height + 1))
    return hysteresis_threshold(response, low_threshold, high_threshold)
