"""Full-screen fitting: scale a fixed-size stage to the window without cropping."""

from __future__ import annotations

from typing import Tuple

from webpresents.infra.exceptions import ConfigurationError


def scale_to_fill(content_width: float, content_height: float, avail_width: float, avail_height: float) -> float:
    """Largest uniform scale at which the content still fits inside the available area."""
    if content_width <= 0 or content_height <= 0:
        raise ConfigurationError(f"Stage size must be positive, got {content_width}x{content_height}")
    return min(avail_width / content_width, avail_height / content_height)


def fit_rect(
    content_width: int,
    content_height: int,
    avail_width: int,
    avail_height: int,
) -> Tuple[int, int, int, int]:
    """Return ``(x, y, width, height)`` of the scaled stage, centred horizontally and pinned to the top."""
    scale = scale_to_fill(content_width, content_height, avail_width, avail_height)
    width = int(round(content_width * scale))
    height = int(round(content_height * scale))
    x = (avail_width - width) // 2
    return x, 0, width, height
