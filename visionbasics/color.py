"""Colour-space conversion, thresholding and blending of 8-bit BGR images."""

from __future__ import annotations

import numpy as np

# Fixed-point luminance weights (scaled by 2**14) for B, G and R.
_GRAY_SHIFT = 14
_GRAY_WEIGHTS = np.array([1868, 9617, 4899], dtype=np.int64)


def _as_bgr(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("image must have shape (rows, cols, 3)")
    return array


def bgr_to_gray(image) -> np.ndarray:
    """Convert a BGR image to one luminance channel (0.114 B + 0.587 G + 0.299 R)."""
    array = _as_bgr(image).astype(np.int64)
    total = array @ _GRAY_WEIGHTS
    gray = (total + (1 << (_GRAY_SHIFT - 1))) >> _GRAY_SHIFT
    return np.clip(gray, 0, 255).astype(np.uint8)


def bgr_to_hsv(image) -> np.ndarray:
    """Convert a BGR image to HSV with hue in 0..179 and S, V in 0..255."""
    array = _as_bgr(image).astype(np.float64)
    blue, green, red = array[..., 0], array[..., 1], array[..., 2]
    value = array.max(axis=2)
    low = array.min(axis=2)
    diff = value - low

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(value > 0, diff * 255.0 / value, 0.0)
        safe = np.where(diff > 0, diff, 1.0)
        red_max = value == red
        green_max = ~red_max & (value == green)
        scaled = np.where(
            red_max,
            green - blue,
            np.where(green_max, blue - red + 2 * diff, red - green + 4 * diff),
        )
        hue = np.where(diff > 0, scaled * 30.0 / safe, 0.0)

    hue = np.floor(hue + 0.5)
    hue = np.where(hue < 0, hue + 180, hue)
    saturation = np.floor(saturation + 0.5)

    result = np.stack([hue, saturation, value], axis=2)
    return np.clip(result, 0, 255).astype(np.uint8)


def threshold(image, thresh: float, max_value: float) -> np.ndarray:
    """Binary threshold: pixels above ``thresh`` become ``max_value``, others 0."""
    array = np.asarray(image)
    fill = np.clip(np.rint(max_value), 0, 255)
    return np.where(array > thresh, fill, 0).astype(np.uint8)


def blend(first, alpha: float, second, beta: float, gamma: float = 0.0) -> np.ndarray:
    """Weighted sum ``first * alpha + second * beta + gamma``, saturated to 8 bits."""
    a = np.asarray(first)
    b = np.asarray(second)
    if a.shape != b.shape:
        raise ValueError("images to blend must have the same shape")
    total = a.astype(np.float64) * alpha + b.astype(np.float64) * beta + gamma
    return np.clip(np.rint(total), 0, 255).astype(np.uint8)