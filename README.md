# visionbasics

Small, readable implementations of classic image-processing building
blocks, written directly on NumPy arrays. Images are `uint8` arrays of shape
`(rows, cols)` for grayscale or `(rows, cols, 3)` for colour in BGR order.
Functions return new arrays and leave their inputs unchanged.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Modules

- `visionbasics.convolution`
  - `pad_replicate(image, border)` pads the two spatial axes by repeating
    edge pixels.
  - `convolve(image, kernel)` applies a kernel to every channel. The image is
    padded by one replicated pixel on each side and the kernel's top-left
    entry sits one row up and one column left of the output pixel, so a 3×3
    kernel is centred. Results are rounded and saturated to 0..255.
  - `separable_convolve(image, vertical, horizontal)` convolves with a column
    kernel, then with a row kernel.
  - Constants `SOBEL_X`, `GAUSSIAN_3X3` and `GAUSSIAN_1D`.
- `visionbasics.interpolation`
  - `bilinear_interpolate(image, width, height)` resizes using the four
    neighbouring source pixels; values are truncated to integers.
  - `nearest_neighbour_interpolate(image, width, height)` copies the nearest
    source pixel (rounding half away from zero).
  - Both map the corner pixels onto each other and require a target width
    and height of at least 2.
- `visionbasics.color`
  - `bgr_to_gray(image)`: luminance 0.114 B + 0.587 G + 0.299 R.
  - `bgr_to_hsv(image)`: hue in 0..179, saturation and value in 0..255.
  - `threshold(image, thresh, max_value)`: pixels above `thresh` become
    `max_value`, others 0.
  - `blend(first, alpha, second, beta, gamma=0.0)`: saturated weighted sum
    of two images of the same shape.
- `visionbasics.morphology` (grayscale images, square kernels of odd size
  ≥ 3)
  - `kernel_sum(image, row, col, kernel_size)`: sum of the window around a
    pixel, ignoring positions outside the image.
  - `erosion` gives white only where the whole window lies inside the image
    and is white (255); `dilation` gives white wherever any window pixel is
    non-zero.
  - `opening`, `closing`, `gradient` (dilation minus erosion) and
    `difference(first, second)` (absolute per-pixel difference).
- `visionbasics.pixels`
  - `black_out_rows(image)` blacks out every even-numbered row;
    `change_blue(image)` sets the blue channel to 255 on those rows.
  - `drawing_canvas()` returns a black 480×720 BGR canvas with a white
    horizontal, vertical and 45° line.
  - `crop(image, rows, cols)` copies the top-left region.
  - `translate(image, tx, ty)` gives `output[y, x] = input[y + ty, x + tx]`
    (offsets floored, uncovered pixels black).
  - `rotation_matrix(center, angle, scale=1.0)`, `warp_affine(image, matrix,
    size)` with bilinear sampling, and `rotate(image, angle)` about the
    image centre keeping its size.
- `visionbasics.masking`
  - `remove_colours(image, colours=BACKGROUND_COLOURS)` blacks out pixels
    exactly matching any of the colours (by default light grey 230 and
    white).
  - `in_range(image, lower, upper)` returns a 0/255 mask;
    `apply_mask(image, mask)` keeps pixels where the mask is non-zero;
    `combine_masks(*masks)` ORs masks together.
  - Sample HSV ranges `YELLOW_HSV` and `BLUE_HSV`.
- `visionbasics.blob`
  - `median(values)` (0 for an empty sequence),
    `median_pixel_values(image)` for the three channels, and
    `hsv_bounds(h, s, v)`, which widens hue by 5 (unclamped) and saturation
    and value by 50 (clamped to 0..255).
- `visionbasics.bmp`
  - `parse_bmp(data)` and `read_bmp(path)` return a `BmpImage` holding a
    `FileHeader`, an `InfoHeader` and the raw pixel bytes; only 8-bit
    images are accepted, anything else raises `BmpError`.
  - `BmpImage.rows()` lists pixel rows top to bottom; `format_report(image)`
    describes both headers as text.

## Example

```python
import numpy as np
from visionbasics.convolution import SOBEL_X, GAUSSIAN_1D, convolve, separable_convolve
from visionbasics.morphology import opening

image = np.random.default_rng(0).integers(0, 256, (64, 64, 3), dtype=np.uint8)

edges = convolve(image, SOBEL_X)
blurred = separable_convolve(image, GAUSSIAN_1D, GAUSSIAN_1D)

binary = np.where(image[..., 0] > 127, 255, 0).astype(np.uint8)
cleaned = opening(binary, 3)
```

## Command-line tools

Print the headers of an 8-bit BMP file, and optionally save its pixels as a
PNG:

```
visionbasics-bmp picture.bmp
visionbasics-bmp picture.bmp picture.png
```

Apply a morphological operation with a 3×3 kernel to an image (converted to
grayscale first) and save the result:

```
visionbasics-morphology opening input.png output.png
```

The operation is one of `erosion`, `dilation`, `opening`, `closing` or
`gradient`.

## What it does not do

The package works on arrays and files only. It does not open windows to
display images, read from cameras or video, or find and draw contours; the
`blob` module supplies the colour statistics and bounds for picking out a
blob, and `masking.in_range` turns them into a mask, but tracking over live
frames is left to the caller.