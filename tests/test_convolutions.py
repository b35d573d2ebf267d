import math

import numpy as np
import pytest

from mlpp.convolutions import (
    PREWITT_HORIZONTAL,
    ROBERTS_VERTICAL,
    SOBEL_VERTICAL,
    PoolKind,
    compute_m,
    convolve,
    dx,
    dy,
    gaussian_2d,
    gaussian_filter_2d,
    global_pool,
    grad_magnitude,
    grad_orientation,
    harris_corner_detection,
    pool,
)


@pytest.fixture
def grid4():
    return np.arange(1, 17, dtype=float).reshape(4, 4)


def test_prewitt_horizontal_on_row_ramp():
    image = np.repeat(np.arange(4, dtype=float)[:, None], 4, axis=1)
    out = convolve(image, PREWITT_HORIZONTAL, 1)
    np.testing.assert_allclose(out, np.full((2, 2), -6.0))


def test_sobel_vertical_on_column_ramp():
    image = np.repeat(np.arange(4, dtype=float)[None, :], 4, axis=0)
    out = convolve(image, SOBEL_VERTICAL, 1)
    np.testing.assert_allclose(out, np.full((2, 2), 8.0))


def test_roberts_vertical_on_grid(grid4):
    out = convolve(grid4, ROBERTS_VERTICAL, 1)
    np.testing.assert_allclose(out, np.full((3, 3), -5.0))


def test_convolve_identity_kernel_returns_input(grid4):
    out = convolve(grid4, [[1.0]], 1)
    np.testing.assert_allclose(out, grid4)


def test_convolve_ones_kernel_sums_window():
    image = np.arange(9, dtype=float).reshape(3, 3)
    out = convolve(image, np.ones((3, 3)), 1)
    assert out.shape == (1, 1)
    assert out[0, 0] == pytest.approx(image.sum())


def test_convolve_padding_keeps_size(grid4):
    out = convolve(grid4, np.ones((3, 3)), 1, 1)
    assert out.shape == (4, 4)
    # Corner window covers the top-left 2x2 block only.
    assert out[0, 0] == pytest.approx(grid4[:2, :2].sum())


def test_convolve_stride_window_placement():
    image = np.arange(25, dtype=float).reshape(5, 5)
    out = convolve(image, [[1.0]], 2)
    idx = [0, 2, 3]
    np.testing.assert_allclose(out, image[np.ix_(idx, idx)])


def test_convolve_multichannel_sums_channels(grid4):
    image = np.stack([grid4, 2 * grid4])
    out = convolve(image, [[[1.0]], [[1.0]]], 1)
    assert out.shape == (1, 4, 4)
    np.testing.assert_allclose(out[0], 3 * grid4)


def test_convolve_rejects_zero_stride(grid4):
    with pytest.raises(ValueError):
        convolve(grid4, [[1.0]], 0)


def test_convolve_rejects_mismatched_dimensions(grid4):
    with pytest.raises(ValueError):
        convolve(grid4, [[[1.0]]], 1)


def test_max_pool(grid4):
    out = pool(grid4, 2, 2, "Max")
    np.testing.assert_allclose(out, [[6, 8], [14, 16]])


def test_min_pool(grid4):
    out = pool(grid4, 2, 2, PoolKind.MIN)
    np.testing.assert_allclose(out, [[1, 3], [9, 11]])


def test_average_pool(grid4):
    avg = pool(grid4, 2, 2, "Average")
    np.testing.assert_allclose(avg, [[3.5, 5.5], [11.5, 13.5]])


def test_unknown_pool_kind_means_max(grid4):
    np.testing.assert_allclose(pool(grid4, 2, 2, "Other"), pool(grid4, 2, 2, "Max"))


def test_pool_multichannel(grid4):
    out = pool(np.stack([grid4, grid4]), 2, 2, "Max")
    assert out.shape == (2, 2, 2)
    np.testing.assert_allclose(out[1], [[6, 8], [14, 16]])


def test_global_pool(grid4):
    assert global_pool(grid4, "Max") == 16
    assert global_pool(grid4, "Min") == 1
    assert global_pool(grid4, "Average") == pytest.approx(np.mean(grid4))


def test_global_pool_multichannel(grid4):
    out = global_pool(np.stack([grid4, -grid4]), "Max")
    np.testing.assert_allclose(out, [16, -1])


def test_gaussian_2d_centre():
    assert gaussian_2d(0, 0, 1) == pytest.approx(1 / (2 * math.pi))


def test_gaussian_filter_symmetric_with_peak_in_centre():
    filt = gaussian_filter_2d(5, 1.0)
    assert filt.shape == (5, 5)
    np.testing.assert_allclose(filt, filt.T)
    np.testing.assert_allclose(filt, filt[::-1, ::-1])
    assert filt[2, 2] == filt.max()


def test_dx_is_transposed_dy(grid4):
    np.testing.assert_allclose(dx(grid4), -dy(grid4.T).T)


def test_dx_constant_image_interior_zero():
    image = np.ones((4, 4))
    d = dx(image)
    np.testing.assert_allclose(d[:, 1:-1], 0)
    np.testing.assert_allclose(d[:, 0], 1)
    np.testing.assert_allclose(d[:, -1], -1)


def test_dy_edges_use_zero_padding(grid4):
    d = dy(grid4)
    np.testing.assert_allclose(d[0], -grid4[1])
    np.testing.assert_allclose(d[-1], grid4[-2])


def test_grad_magnitude_values(grid4):
    mag = grad_magnitude(grid4)
    assert mag.shape == (4, 4)
    # Interior: dx = 2, dy = -8.
    assert mag[1, 1] == pytest.approx(math.sqrt(68.0))
    # Top-left corner: dx = 2, dy = -5.
    assert mag[0, 0] == pytest.approx(math.sqrt(29.0))


def test_grad_orientation_horizontal_gradient():
    image = np.ones((3, 3))
    orient = grad_orientation(image)
    # Middle row, left column: dx positive, dy zero.
    assert orient[1, 0] == pytest.approx(0.0)


def test_compute_m_zero_image():
    xx, yy, xy = compute_m(np.zeros((4, 4)))
    for part in (xx, yy, xy):
        assert part.shape == (4, 4)
        np.testing.assert_allclose(part, 0)


def test_compute_m_is_smoothed_derivative_products(grid4):
    xx, yy, xy = compute_m(grid4)
    kernel = gaussian_filter_2d(3, 1.0)
    gx = dx(grid4)
    gy = dy(grid4)
    np.testing.assert_allclose(xx, convolve(gx * gx, kernel, 1, 1))
    np.testing.assert_allclose(yy, convolve(gy * gy, kernel, 1, 1))
    np.testing.assert_allclose(xy, convolve(gx * gy, kernel, 1, 1))


def test_harris_zero_image_is_all_neither():
    labels = harris_corner_detection(np.zeros((3, 3)))
    assert labels == [["N"] * 3 for _ in range(3)]


def test_harris_labels_shape_and_alphabet(grid4):
    labels = harris_corner_detection(grid4)
    assert len(labels) == 4
    assert all(len(row) == 4 for row in labels)
    assert {label for row in labels for label in row} <= {"C", "E", "N"}