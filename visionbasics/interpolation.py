"""Resizing images by nearest-neighbour and bilinear interpolation."""

from __future__ import annotations

import numpy as np


def _prepare(image, width: int, height: int) -> tuple[np.ndarray, bool]:
    """Validate the request and return the image as (rows, cols, channels)."""
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D or 3-D array")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError("image must not be empty")
    if width < 2 or height < 2:
        raise ValueError("target width and height must both be at least 2")
    if array.ndim == 2:
        return array[:, :, np.newaxis], True
    return array, False


def _ratios(array: np.ndarray, width: int, height: int) -> tuple[float, float]:
    """Scale factors mapping target coordinates back onto the source grid."""
    rows, cols = array.shape[:2]
    return (cols - 1) / (width - 1), (rows - 1) / (height - 1)


def bilinear_interpolate(image, width: int, height: int) -> np.ndarray:
    """Resize an image to ``width`` x ``height`` using bilinear interpolation.

    Target pixel (i, j) maps to source position (i * y_ratio, j * x_ratio);
    its value is the weighted mean of the four surrounding source pixels,
    truncated to an 8-bit integer.
    """
    array, was_flat = _prepare(image, width, height)
    rows, cols = array.shape[:2]
    x_ratio, y_ratio = _ratios(array, width, height)

    xs = np.arange(width) * x_ratio
    ys = np.arange(height) * y_ratio
    x_low = np.clip(np.floor(xs).astype(np.intp), 0, cols - 1)
    y_low = np.clip(np.floor(ys).astype(np.intp), 0, rows - 1)
    x_high = np.clip(np.ceil(xs).astype(np.intp), 0, cols - 1)
    y_high = np.clip(np.ceil(ys).astype(np.intp), 0, rows - 1)

    x_weight = (xs - np.floor(xs)).astype(np.float32)[np.newaxis, :, np.newaxis]
    y_weight = (ys - np.floor(ys)).astype(np.float32)[:, np.newaxis, np.newaxis]

    source = array.astype(np.float32)
    top = source[y_low]
    bottom = source[y_high]
    a = top[:, x_low]
    b = top[:, x_high]
    c = bottom[:, x_low]
    d = bottom[:, x_high]

    one = np.float32(1.0)
    value = (
        a * (one - x_weight) * (one - y_weight)
        + b * x_weight * (one - y_weight)
        + c * (one - x_weight) * y_weight
        + d * x_weight * y_weight
    )
    result = np.clip(np.floor(value), 0, 255).astype(np.uint8)
    return result[:, :, 0] if was_flat else result


def nearest_neighbour_interpolate(image, width: int, height: int) -> np.ndarray:
    """Resize an image to ``width`` x ``height`` by copying the nearest pixel.

    Mapped coordinates are rounded half away from zero, as the nearest
    integral source position.
    """
    array, was_flat = _prepare(image, width, height)
    rows, cols = array.shape[:2]
    x_ratio, y_ratio = _ratios(array, width, height)

    row_index = np.clip(
        np.floor(np.arange(height) * y_ratio + 0.5).astype(np.intp), 0, rows - 1
    )
    col_index = np.clip(
        np.floor(np.arange(width) * x_ratio + 0.5).astype(np.intp), 0, cols - 1
    )
    result = array[row_index][:, col_index]
    return result[:, :, 0] if was_flat else result