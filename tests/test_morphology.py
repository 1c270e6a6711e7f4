import numpy as np
import pytest
from PIL import Image

from visionbasics.morphology import (
    closing,
    difference,
    dilation,
    erosion,
    gradient,
    kernel_sum,
    main,
    opening,
)


def _white(rows, cols):
    return np.full((rows, cols), 255, dtype=np.uint8)


def _dot(rows=7, cols=7, at=(3, 3)):
    image = np.zeros((rows, cols), dtype=np.uint8)
    image[at] = 255
    return image


def test_kernel_sum_centre_of_white_image():
    assert kernel_sum(_white(5, 5), 2, 2, 3) == 255 * 3 * 3


def test_kernel_sum_corner_skips_outside_pixels():
    image = np.arange(25, dtype=np.uint8).reshape(5, 5)
    assert kernel_sum(image, 0, 0, 3) == int(image[0:2, 0:2].sum())


def test_kernel_sum_larger_kernel_covers_whole_image():
    image = np.arange(25, dtype=np.uint8).reshape(5, 5)
    assert kernel_sum(image, 2, 2, 5) == int(image.astype(np.int64).sum())


@pytest.mark.parametrize("size", [1, 2, 4, -3])
def test_kernel_sum_rejects_bad_kernel_size(size):
    with pytest.raises(ValueError):
        kernel_sum(_white(5, 5), 2, 2, size)


@pytest.mark.parametrize("operation", [erosion, dilation, opening, closing, gradient])
def test_operations_reject_even_kernel(operation):
    with pytest.raises(ValueError):
        operation(_white(5, 5), 4)


def test_erosion_blackens_border_keeps_interior():
    result = erosion(_white(6, 6), 3)
    assert (result[1:-1, 1:-1] == 255).all()
    assert (result[0, :] == 0).all()
    assert (result[-1, :] == 0).all()
    assert (result[:, 0] == 0).all()
    assert (result[:, -1] == 0).all()


def test_erosion_requires_exact_white():
    image = np.full((5, 5), 254, dtype=np.uint8)
    assert (erosion(image, 3) == 0).all()


def test_dilation_grows_single_pixel_to_block():
    result = dilation(_dot(), 3)
    expected = np.zeros((7, 7), dtype=np.uint8)
    expected[2:5, 2:5] = 255
    np.testing.assert_array_equal(result, expected)


def test_dilation_of_black_image_stays_black():
    assert (dilation(np.zeros((4, 4), dtype=np.uint8), 3) == 0).all()


def test_dilation_matches_kernel_sum_everywhere():
    rng = np.random.default_rng(1)
    image = rng.choice([0, 255], size=(6, 8)).astype(np.uint8)
    result = dilation(image, 3)
    for (row, col), value in np.ndenumerate(result):
        assert (value == 255) == (kernel_sum(image, row, col, 3) > 0)


def test_opening_removes_isolated_pixel():
    assert (opening(_dot(), 3) == 0).all()


def test_closing_fills_hole():
    image = _white(9, 9)
    image[4, 4] = 0
    result = closing(image, 3)
    assert result[4, 4] == 255
    assert (result[1:-1, 1:-1] == 255).all()


def test_outputs_are_binary_uint8():
    rng = np.random.default_rng(7)
    image = rng.integers(0, 256, size=(8, 8), dtype=np.uint8)
    for operation in (erosion, dilation, opening, closing, gradient):
        result = operation(image, 3)
        assert result.dtype == np.uint8
        assert result.shape == image.shape
        assert set(np.unique(result)) <= {0, 255}


def test_difference_is_absolute_and_symmetric():
    first = np.array([[10, 200]], dtype=np.uint8)
    second = np.array([[50, 100]], dtype=np.uint8)
    np.testing.assert_array_equal(difference(first, second), [[40, 100]])
    np.testing.assert_array_equal(difference(first, second), difference(second, first))


def test_difference_with_itself_is_zero():
    image = np.arange(16, dtype=np.uint8).reshape(4, 4)
    assert (difference(image, image) == 0).all()


def test_difference_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        difference(np.zeros((3, 3), dtype=np.uint8), np.zeros((3, 4), dtype=np.uint8))


def test_gradient_is_dilation_minus_erosion():
    image = np.zeros((9, 9), dtype=np.uint8)
    image[2:7, 2:7] = 255
    np.testing.assert_array_equal(
        gradient(image, 3), difference(dilation(image, 3), erosion(image, 3))
    )
    assert gradient(image, 3)[4, 4] == 0


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_main_unknown_operation(tmp_path, capsys):
    assert main(["blur", str(tmp_path / "a.png"), str(tmp_path / "b.png")]) == 1
    assert "usage" in capsys.readouterr().out


def test_main_missing_image(tmp_path, capsys):
    assert main(["erosion", str(tmp_path / "none.png"), str(tmp_path / "out.png")]) == 0
    assert "Could not open or find the image" in capsys.readouterr().out


@pytest.mark.parametrize(
    "name, operation",
    [("erosion", erosion), ("dilation", dilation), ("gradient", gradient)],
)
def test_main_writes_result(tmp_path, name, operation):
    image = np.zeros((10, 10), dtype=np.uint8)
    image[3:8, 2:9] = 255
    source = tmp_path / "in.png"
    target = tmp_path / "out.png"
    Image.fromarray(image, mode="L").save(source)
    assert main([name, str(source), str(target)]) == 0
    with Image.open(target) as written:
        np.testing.assert_array_equal(np.asarray(written), operation(image, 3))