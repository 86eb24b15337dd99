from dataclasses import replace

import pytest
from PIL import Image

from color_overlay.__main__ import main
from color_overlay.config import SETTINGS
from color_overlay.errors import DecodeError
from color_overlay.render import render_files


@pytest.fixture
def sources(tmp_path):
    foreground = Image.new("RGB", (8, 8), (240, 240, 240))
    foreground.paste((0, 0, 255), (0, 0, 2, 2))
    foreground.save(tmp_path / "foreground.png")

    background = Image.new("RGB", (3, 3), (0, 0, 0))
    background.paste((255, 255, 255), (0, 0, 1, 3))
    background.save(tmp_path / "background.png")
    return tmp_path


def _settings(root):
    return replace(
        SETTINGS,
        foreground_path=str(root / "foreground.png"),
        background_path=str(root / "background.png"),
        overlay_path=str(root / "overlay.png"),
        output_path=str(root / "output.png"),
        buckets_per_channel=4,
        blur_kernel=7,
        blur_sigma=2.0,
        edge_low=20,
        edge_high=60,
    )


def test_render_files_writes_both_outputs(sources):
    result = render_files(_settings(sources))

    assert result.dominant.rgb == (224, 224, 224)
    assert result.replaced == 7 * 7 - 4
    with Image.open(result.overlay_path) as overlay:
        assert overlay.size == (8, 8)
        assert overlay.getpixel((0, 0)) == (0, 0, 255)
        assert overlay.getpixel((3, 4)) == (255, 255, 255)
        assert overlay.getpixel((4, 4)) == (0, 0, 0)
        assert overlay.getpixel((7, 7)) == (240, 240, 240)
    with Image.open(result.output_path) as output:
        assert output.mode == "L"
        assert output.size == (3, 3)


def test_render_files_missing_source_raises(tmp_path):
    with pytest.raises(DecodeError):
        render_files(_settings(tmp_path))


def test_main_render_command(sources):
    status = main(
        [
            "--foreground", str(sources / "foreground.png"),
            "--background", str(sources / "background.png"),
            "--overlay", str(sources / "overlay.png"),
            "--output", str(sources / "output.png"),
        ]
    )

    assert status == 0
    assert (sources / "overlay.png").exists()
    assert (sources / "output.png").exists()


def test_main_reports_missing_input(tmp_path):
    status = main(
        [
            "--foreground", str(tmp_path / "missing.png"),
            "--background", str(tmp_path / "missing.png"),
            "--overlay", str(tmp_path / "overlay.png"),
            "--output", str(tmp_path / "output.png"),
        ]
    )

    assert status == 1
    assert not (tmp_path / "overlay.png").exists()


def test_main_rejects_bad_bucket_count(sources):
    status = main(
        [
            "--foreground", str(sources / "foreground.png"),
            "--background", str(sources / "background.png"),
            "--overlay", str(sources / "overlay.png"),
            "--output", str(sources / "output.png"),
            "--buckets", "3",
        ]
    )

    assert status == 1
    assert not (sources / "overlay.png").exists()


def test_edge_output_is_not_the_overlay(sources):
    result = render_files(_settings(sources))

    with Image.open(result.overlay_path) as overlay, Image.open(result.output_path) as edges:
        assert overlay.mode == "RGB"
        assert edges.mode == "L"
        assert set(edges.getdata()) <= {0, 255}
