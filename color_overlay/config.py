import logging
import os
from dataclasses import dataclass


CHANNEL_LEVELS = 256


@dataclass(frozen=True)
class HistogramConfig:
    """Quantization used by the histogram, selector and substitutor."""

    buckets_per_channel: int = 4

    def __post_init__(self) -> None:
        buckets = self.buckets_per_channel
        if not 1 <= buckets <= CHANNEL_LEVELS or CHANNEL_LEVELS % buckets:
            raise ValueError(
                f"buckets_per_channel must divide {CHANNEL_LEVELS}, got {buckets}"
            )

    @property
    def bucket_size(self) -> int:
        return CHANNEL_LEVELS // self.buckets_per_channel


DEFAULT_HISTOGRAM = HistogramConfig()


@dataclass(frozen=True)
class OverlaySettings:
    foreground_path: str
    background_path: str
    overlay_path: str
    output_path: str
    buckets_per_channel: int
    blur_kernel: int
    blur_sigma: float
    edge_low: int
    edge_high: int
    log_level: str

    def __post_init__(self) -> None:
        self.histogram_config()
        if self.blur_kernel < 1 or self.blur_kernel % 2 == 0:
            raise ValueError(f"blur_kernel must be a positive odd integer, got {self.blur_kernel}")
        if self.blur_sigma < 0:
            raise ValueError(f"blur_sigma must be >= 0, got {self.blur_sigma}")
        if self.edge_low > self.edge_high:
            raise ValueError(
                f"edge_low ({self.edge_low}) must not exceed edge_high ({self.edge_high})"
            )

    @classmethod
    def from_env(cls) -> "OverlaySettings":
        return cls(
            foreground_path=os.getenv("FOREGROUND_PATH", "foreground.jpg"),
            background_path=os.getenv("BACKGROUND_PATH", "background.jpg"),
            overlay_path=os.getenv("OVERLAY_PATH", "overlay.jpg"),
            output_path=os.getenv("OUTPUT_PATH", "output.jpg"),
            buckets_per_channel=int(os.getenv("BUCKETS_PER_CHANNEL", "4")),
            blur_kernel=int(os.getenv("BLUR_KERNEL", "7")),
            blur_sigma=float(os.getenv("BLUR_SIGMA", "2.0")),
            edge_low=int(os.getenv("EDGE_LOW", "20")),
            edge_high=int(os.getenv("EDGE_HIGH", "60")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def histogram_config(self) -> HistogramConfig:
        return HistogramConfig(buckets_per_channel=self.buckets_per_channel)


SETTINGS = OverlaySettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("color-overlay")
