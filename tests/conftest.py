import pytest

from color_overlay.processing.buffer import PixelBuffer


@pytest.fixture
def make_buffer():
    def _make(rows, cols, color=(0, 0, 0)):
        return PixelBuffer.new(rows, cols, color)

    return _make
