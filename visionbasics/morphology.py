"""Binary morphology on 8-bit grayscale images using square kernels."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from PIL import Image, UnidentifiedImageError

WHITE = 255
BLACK = 0


def _check_kernel_size(kernel_size: int) -> None:
    if kernel_size % 2 != 1 or kernel_size < 3:
        raise ValueError("Kernel size should be of odd and greater than or equal to 3")


def _as_gray(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 2:
        raise ValueError("image must be a 2-D grayscale array")
    return array


def kernel_sum(image, row: int, col: int, kernel_size: int) -> int:
    """Sum the pixels of a square window centred on (row, col).

    Positions of the window that fall outside the image are skipped.
    """
    _check_kernel_size(kernel_size)
    array = _as_gray(image)
    reach = (kernel_size - 1) // 2
    rows, cols = array.shape
    top = max(row - reach, 0)
    bottom = min(row + reach + 1, rows)
    left = max(col - reach, 0)
    right = min(col + reach + 1, cols)
    if top >= bottom or left >= right:
        return 0
    return int(array[top:bottom, left:right].astype(np.int64).sum())


def _window_sums(image, kernel_size: int) -> np.ndarray:
    """Every pixel's kernel_sum, computed at once."""
    _check_kernel_size(kernel_size)
    array = _as_gray(image).astype(np.int64)
    reach = (kernel_size - 1) // 2
    padded = np.pad(array, reach, mode="constant", constant_values=0)
    windows = sliding_window_view(padded, (kernel_size, kernel_size))
    return windows.sum(axis=(-2, -1))


def erosion(image, kernel_size: int) -> np.ndarray:
    """White only where the whole window lies inside the image and is white."""
    sums = _window_sums(image, kernel_size)
    full = WHITE * kernel_size * kernel_size
    return np.where(sums == full, WHITE, BLACK).astype(np.uint8)


def dilation(image, kernel_size: int) -> np.ndarray:
    """White wherever any pixel of the window is non-zero."""
    sums = _window_sums(image, kernel_size)
    return np.where(sums > 0, WHITE, BLACK).astype(np.uint8)


def opening(image, kernel_size: int) -> np.ndarray:
    """Erosion followed by dilation."""
    return dilation(erosion(image, kernel_size), kernel_size)


def closing(image, kernel_size: int) -> np.ndarray:
    """Dilation followed by erosion."""
    return erosion(dilation(image, kernel_size), kernel_size)


def difference(first, second) -> np.ndarray:
    """Absolute per-pixel difference of two images of the same size."""
    a = np.asarray(first)
    b = np.asarray(second)
    if a.shape != b.shape:
        raise ValueError("Images are of different sizes.")
    diff = np.abs(a.astype(np.int64) - b.astype(np.int64))
    return np.clip(diff, 0, 255).astype(np.uint8)


def gradient(image, kernel_size: int) -> np.ndarray:
    """Difference between the dilated and the eroded image."""
    return difference(dilation(image, kernel_size), erosion(image, kernel_size))


_OPERATIONS = {
    "erosion": erosion,
    "dilation": dilation,
    "opening": opening,
    "closing": closing,
    "gradient": gradient,
}

_KERNEL_SIZE = 3


def main(argv=None) -> int:
    """Apply a morphological operation to a grayscale image file."""
    args = sys.argv[1:] if argv is None else list(argv)
    names = "|".join(_OPERATIONS)
    if len(args) != 3 or args[0] not in _OPERATIONS:
        print(f"usage: {Path(sys.argv[0]).name} <{names}> <Image_Path> <Output_Path>")
        return 1

    operation, source, output = args
    try:
        with Image.open(source) as picture:
            pixels = np.asarray(picture.convert("L"))
    except (OSError, UnidentifiedImageError):
        print("Could not open or find the image")
        return 0

    result = _OPERATIONS[operation](pixels, _KERNEL_SIZE)
    Image.fromarray(result, mode="L").save(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())