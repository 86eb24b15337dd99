from dataclasses import FrozenInstanceError, replace

import pytest

from color_overlay.config import OverlaySettings


@pytest.fixture
def settings():
    return OverlaySettings.from_env()


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("BLUR_KERNEL", "5")
    monkeypatch.setenv("EDGE_HIGH", "90")
    monkeypatch.setenv("OVERLAY_PATH", "composite.png")

    settings = OverlaySettings.from_env()

    assert settings.blur_kernel == 5
    assert settings.edge_high == 90
    assert settings.overlay_path == "composite.png"


@pytest.mark.parametrize("kernel", [0, 4, -3])
def test_rejects_even_or_non_positive_blur_kernel(settings, kernel):
    with pytest.raises(ValueError, match="blur_kernel"):
        replace(settings, blur_kernel=kernel)


def test_rejects_negative_blur_sigma(settings):
    with pytest.raises(ValueError, match="blur_sigma"):
        replace(settings, blur_sigma=-0.5)


def test_rejects_low_threshold_above_high(settings):
    with pytest.raises(ValueError, match="edge_low"):
        replace(settings, edge_low=70, edge_high=60)


def test_accepts_equal_thresholds(settings):
    assert replace(settings, edge_low=40, edge_high=40).edge_low == 40


def test_rejects_bucket_count_not_dividing_256(settings):
    with pytest.raises(ValueError):
        replace(settings, buckets_per_channel=5)


def test_invalid_environment_fails_at_load(monkeypatch):
    monkeypatch.setenv("BLUR_KERNEL", "4")

    with pytest.raises(ValueError):
        OverlaySettings.from_env()


def test_settings_are_immutable(settings):
    with pytest.raises(FrozenInstanceError):
        settings.blur_kernel = 9
