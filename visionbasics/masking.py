"""Colour masks: removing colours, range thresholds and applying masks."""

from __future__ import annotations

import numpy as np

BACKGROUND_COLOURS = ((230, 230, 230), (255, 255, 255))

YELLOW_HSV = ((15, 30, 150), (36, 255, 255))
BLUE_HSV = ((33, 52, 80), (150, 200, 255))


def remove_colours(image, colours=BACKGROUND_COLOURS) -> np.ndarray:
    """Black out every pixel that exactly matches one of ``colours``."""
    array = np.asarray(image)
    if array.ndim != 3:
        raise ValueError("image must have shape (rows, cols, channels)")
    matches = np.zeros(array.shape[:2], dtype=bool)
    for colour in colours:
        target = np.asarray(colour)
        if target.shape != (array.shape[2],):
            raise ValueError("each colour needs one value per channel")
        matches |= np.all(array == target, axis=-1)
    return np.where(matches[:, :, np.newaxis], 0, array).astype(array.dtype)


def in_range(image, lower, upper) -> np.ndarray:
    """Mask of 255 where every channel lies within [lower, upper], else 0."""
    array = np.asarray(image)
    low = np.asarray(lower, dtype=np.float64)
    high = np.asarray(upper, dtype=np.float64)
    if array.ndim == 2:
        if low.size != 1 or high.size != 1:
            raise ValueError("a single-channel image needs scalar bounds")
        inside = (array >= low.item()) & (array <= high.item())
    elif array.ndim == 3:
        depth = array.shape[2]
        try:
            low = np.broadcast_to(low, (depth,))
            high = np.broadcast_to(high, (depth,))
        except ValueError:
            raise ValueError("bounds need one value per channel") from None
        inside = np.all((array >= low) & (array <= high), axis=-1)
    else:
        raise ValueError("image must be a 2-D or 3-D array")
    return np.where(inside, 255, 0).astype(np.uint8)


def apply_mask(image, mask) -> np.ndarray:
    """Keep the pixels where ``mask`` is non-zero and black out the rest."""
    array = np.asarray(image)
    selector = np.asarray(mask)
    if selector.ndim != 2 or selector.shape != array.shape[:2]:
        raise ValueError("mask must be 2-D and match the image size")
    keep = selector != 0
    if array.ndim == 3:
        keep = keep[:, :, np.newaxis]
    return np.where(keep, array, 0).astype(array.dtype)


def combine_masks(*args) -> np.ndarray:
    """Bitwise OR of one or more masks of the same shape."""
    if not args:
        raise ValueError("at least one mask is required")
    masks = [np.asarray(mask) for mask in args]
    shape = masks[0].shape
    if any(mask.shape != shape for mask in masks):
        raise ValueError("masks must all have the same shape")
    return np.bitwise_or.reduce([mask.astype(np.uint8) for mask in masks])