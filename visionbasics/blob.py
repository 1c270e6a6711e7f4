"""Colour statistics for picking out a blob of one colour in HSV images."""

from __future__ import annotations

import numpy as np

HUE_MARGIN = 5
SATURATION_MARGIN = 50
VALUE_MARGIN = 50
CHANNEL_MAX = 255


def median(values) -> float:
    """Median of a sequence of numbers; an empty sequence gives 0."""
    ordered = sorted(float(value) for value in values)
    size = len(ordered)
    if size == 0:
        return 0.0
    middle = size // 2
    if size % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def median_pixel_values(image) -> tuple[float, float, float]:
    """Median of each of the three channels of an image, as (c0, c1, c2)."""
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("image must have shape (rows, cols, 3)")
    channels = array.reshape(-1, 3)
    first, second, third = (median(channels[:, index].tolist()) for index in range(3))
    return first, second, third


def hsv_bounds(h, s, v) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Lower and upper HSV limits around a reference colour.

    The reference values are truncated to integers. Hue is widened by 5 either
    way without clamping; saturation and value by 50, clamped to 0..255.
    """
    hue, saturation, value = int(h), int(s), int(v)
    lower = (
        hue - HUE_MARGIN,
        max(0, saturation - SATURATION_MARGIN),
        max(0, value - VALUE_MARGIN),
    )
    upper = (
        hue + HUE_MARGIN,
        min(saturation + SATURATION_MARGIN, CHANNEL_MAX),
        min(value + VALUE_MARGIN, CHANNEL_MAX),
    )
    return lower, upper