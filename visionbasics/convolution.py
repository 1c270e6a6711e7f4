"""Naive 2-D convolution over 8-bit images with replicated borders."""

from __future__ import annotations

import numpy as np

SOBEL_X = np.array(
    [
        [-1.0, 0.0, 1.0],
        [-2.0, 0.0, 2.0],
        [-1.0, 0.0, 1.0],
    ]
)

GAUSSIAN_3X3 = np.array(
    [
        [1.0, 2.0, 1.0],
        [2.0, 4.0, 2.0],
        [1.0, 2.0, 1.0],
    ]
) / 16.0

GAUSSIAN_1D = np.array([0.25, 0.5, 0.25])


def _with_channel_axis(image) -> tuple[np.ndarray, bool]:
    """Return the image as (rows, cols, channels) and whether it was 2-D."""
    array = np.asarray(image)
    if array.ndim == 2:
        return array[:, :, np.newaxis], True
    if array.ndim == 3:
        return array, False
    raise ValueError("image must be a 2-D or 3-D array")


def pad_replicate(image, border: int) -> np.ndarray:
    """Pad the spatial axes of an image by repeating its edge pixels."""
    if border < 0:
        raise ValueError("border must not be negative")
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D or 3-D array")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError("image must not be empty")
    widths = [(border, border), (border, border)] + [(0, 0)] * (array.ndim - 2)
    return np.pad(array, widths, mode="edge")


def convolve(image, kernel) -> np.ndarray:
    """Apply a kernel to every channel of an image.

    The image is padded by one replicated pixel on each side; the kernel's
    top-left entry is aligned with the pixel one up and one left of the
    output position, and taps falling outside the padded image contribute
    nothing. Results are rounded and saturated to the 0..255 range.
    """
    channels, was_flat = _with_channel_axis(image)
    weights = np.asarray(kernel, dtype=np.float64)
    if weights.ndim != 2 or weights.size == 0:
        raise ValueError("kernel must be a non-empty 2-D array")

    rows, cols, depth = channels.shape
    padded = pad_replicate(channels, 1).astype(np.float64)
    k_rows, k_cols = weights.shape

    # Zero-extend so taps beyond the padded image read as nothing.
    window = np.zeros((rows + k_rows - 1, cols + k_cols - 1, depth))
    keep_rows = min(padded.shape[0], window.shape[0])
    keep_cols = min(padded.shape[1], window.shape[1])
    window[:keep_rows, :keep_cols] = padded[:keep_rows, :keep_cols]

    total = np.zeros((rows, cols, depth))
    for (k, l), weight in np.ndenumerate(weights):
        if weight:
            total += weight * window[k : k + rows, l : l + cols]

    result = np.clip(np.rint(total), 0, 255).astype(np.uint8)
    return result[:, :, 0] if was_flat else result


def separable_convolve(image, vertical, horizontal) -> np.ndarray:
    """Convolve with a column kernel, then with a row kernel."""
    column = np.asarray(vertical, dtype=np.float64).reshape(-1, 1)
    row = np.asarray(horizontal, dtype=np.float64).reshape(1, -1)
    intermediate = convolve(image, column)
    return convolve(intermediate, row)