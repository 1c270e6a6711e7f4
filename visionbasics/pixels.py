"""Pixel access, drawing, cropping, translation and rotation of 8-bit images."""

from __future__ import annotations

import math

import numpy as np

WHITE = (255, 255, 255)

CANVAS_HEIGHT = 480
CANVAS_WIDTH = 720


def _as_image(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D or 3-D array")
    return array


def _as_bgr(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] < 1:
        raise ValueError("image must have shape (rows, cols, channels)")
    return array


def black_out_rows(image) -> np.ndarray:
    """Return a copy with every even-numbered row of pixels set to black."""
    result = _as_image(image).copy()
    result[::2] = 0
    return result


def change_blue(image) -> np.ndarray:
    """Return a copy whose blue channel is saturated on every even-numbered row."""
    result = _as_bgr(image).copy()
    result[::2, :, 0] = 255
    return result


def drawing_canvas() -> np.ndarray:
    """A black 480x720 BGR canvas with a horizontal, a vertical and a 45° line."""
    canvas = np.zeros((CANVAS_HEIGHT, CANVAS_WIDTH, 3), dtype=np.uint8)
    canvas[200, 100:621] = WHITE
    canvas[80:401, 300] = WHITE
    diagonal = np.arange(100, 301)
    canvas[diagonal, diagonal] = WHITE
    return canvas


def crop(image, rows: int, cols: int) -> np.ndarray:
    """The top-left ``rows`` x ``cols`` region of an image, as a copy."""
    array = _as_image(image)
    if rows < 0 or cols < 0:
        raise ValueError("crop size must not be negative")
    if rows > array.shape[0] or cols > array.shape[1]:
        raise ValueError("crop region lies outside the image")
    return array[:rows, :cols].copy()


def _span(offset: int, length: int) -> tuple[slice, slice] | None:
    """Destination and source slices for reading ``source[i + offset]``."""
    start = max(0, -offset)
    stop = min(length, length - offset)
    if stop <= start:
        return None
    return slice(start, stop), slice(start + offset, stop + offset)


def translate(image, tx: float, ty: float) -> np.ndarray:
    """Shift an image so that output[y, x] is input[y + ty, x + tx].

    Fractional offsets are floored; pixels with no source are black.
    """
    array = _as_image(image)
    result = np.zeros_like(array)
    rows = _span(math.floor(ty), array.shape[0])
    cols = _span(math.floor(tx), array.shape[1])
    if rows is not None and cols is not None:
        (dst_rows, src_rows), (dst_cols, src_cols) = rows, cols
        result[dst_rows, dst_cols] = array[src_rows, src_cols]
    return result


def rotation_matrix(center, angle: float, scale: float = 1.0) -> np.ndarray:
    """2x3 affine matrix rotating by ``angle`` degrees about ``center`` (x, y).

    Positive angles turn counter-clockwise as the image is displayed.
    """
    cx, cy = center
    radians = math.radians(angle)
    alpha = scale * math.cos(radians)
    beta = scale * math.sin(radians)
    return np.array(
        [
            [alpha, beta, (1 - alpha) * cx - beta * cy],
            [-beta, alpha, beta * cx + (1 - alpha) * cy],
        ]
    )


def warp_affine(image, matrix, size) -> np.ndarray:
    """Apply a forward 2x3 affine transform, producing an image of ``size`` (width, height).

    Each output pixel is sampled bilinearly from the inversely mapped source
    position; samples outside the source count as black.
    """
    array = _as_image(image)
    forward = np.asarray(matrix, dtype=np.float64)
    if forward.shape != (2, 3):
        raise ValueError("matrix must have shape (2, 3)")
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError("output size must be positive")

    full = np.vstack([forward, [0.0, 0.0, 1.0]])
    try:
        inverse = np.linalg.inv(full)
    except np.linalg.LinAlgError:
        raise ValueError("matrix is not invertible") from None

    was_flat = array.ndim == 2
    source = (array[:, :, np.newaxis] if was_flat else array).astype(np.float64)
    rows, cols, depth = source.shape

    xs, ys = np.meshgrid(np.arange(width), np.arange(height))
    sx = inverse[0, 0] * xs + inverse[0, 1] * ys + inverse[0, 2]
    sy = inverse[1, 0] * xs + inverse[1, 1] * ys + inverse[1, 2]
    x0 = np.floor(sx).astype(np.intp)
    y0 = np.floor(sy).astype(np.intp)
    fx = sx - x0
    fy = sy - y0

    total = np.zeros((height, width, depth))
    for dy, wy in ((0, 1.0 - fy), (1, fy)):
        for dx, wx in ((0, 1.0 - fx), (1, fx)):
            yi = y0 + dy
            xi = x0 + dx
            inside = (yi >= 0) & (yi < rows) & (xi >= 0) & (xi < cols)
            sample = source[np.clip(yi, 0, rows - 1), np.clip(xi, 0, cols - 1)]
            total += (wy * wx * inside)[:, :, np.newaxis] * sample

    result = np.clip(np.rint(total), 0, 255).astype(np.uint8)
    return result[:, :, 0] if was_flat else result


def rotate(image, angle: float) -> np.ndarray:
    """Rotate an image by ``angle`` degrees about its centre, keeping its size."""
    array = _as_image(image)
    rows, cols = array.shape[:2]
    matrix = rotation_matrix((cols / 2.0, rows / 2.0), angle, 1.0)
    return warp_affine(array, matrix, (cols, rows))