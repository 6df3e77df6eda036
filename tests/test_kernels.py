from __future__ import annotations

import pytest

from edge_convolution.kernels import (
    KERNEL_NAMES,
    KERNELS,
    ROBERTS,
    SOBEL,
    ConvolutionKernel,
    KernelType,
    get_kernel,
    kernel_type,
    max_output,
)


def test_kernel_labels():
    assert [KERNEL_NAMES[k] for k in KernelType] == [
        "Sobel (3x3)",
        "Prewitt (3x3)",
        "Roberts (2x2)",
        "Scharr (3x3)",
    ]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        KERNELS[KernelType.SOBEL] = ROBERTS
    with pytest.raises(TypeError):
        KERNEL_NAMES[KernelType.SOBEL] = "x"


def test_kernels_are_immutable():
    with pytest.raises(AttributeError):
        SOBEL.width = 2


def test_roberts_is_padded_to_fixed_capacity():
    assert (ROBERTS.width, ROBERTS.height) == (2, 2)
    assert ROBERTS.x_kernel == ((1, 0, 0), (0, -1, 0), (0, 0, 0))
    assert ROBERTS.weights() == (((1, 0), (0, -1)), ((0, 1), (-1, 0)))


def test_all_kernel_weights_are_distinct():
    weights = {kernel.weights() for kernel in KERNELS.values()}
    assert len(weights) == 4


@pytest.mark.parametrize("kind", list(KernelType))
def test_kernels_have_zero_sum(kind):
    x_weights, y_weights = get_kernel(kind).weights()
    assert sum(map(sum, x_weights)) == 0
    assert sum(map(sum, y_weights)) == 0


@pytest.mark.parametrize(
    "selector,expected",
    [
        (KernelType.SCHARR, KernelType.SCHARR),
        (2, KernelType.ROBERTS),
        ("prewitt", KernelType.PREWITT),
        (" Sobel ", KernelType.SOBEL),
    ],
)
def test_kernel_selectors(selector, expected):
    assert kernel_type(selector) is expected
    assert get_kernel(selector) is KERNELS[expected]


@pytest.mark.parametrize("selector", [4, -1, "canny"])
def test_unknown_kernel_is_a_programming_error(selector):
    with pytest.raises(ValueError):
        get_kernel(selector)


def test_oversized_kernel_is_rejected():
    with pytest.raises(ValueError):
        ConvolutionKernel("5x5", 5, 5, ((0,),), ((0,),))


@pytest.mark.parametrize(
    "matrix",
    [
        ((1, 0, 0, -1),),
        ((1,), (0,), (0,), (-1,)),
    ],
)
def test_matrix_larger_than_capacity_is_rejected(matrix):
    with pytest.raises(ValueError):
        ConvolutionKernel("grande", 3, 3, matrix, ((0,),))
    with pytest.raises(ValueError):
        ConvolutionKernel("grande", 3, 3, ((0,),), matrix)


@pytest.mark.parametrize(
    "kind,expected",
    [
        (KernelType.SOBEL, 1442),
        (KernelType.PREWITT, 1081),
        (KernelType.ROBERTS, 360),
        (KernelType.SCHARR, 5769),
    ],
)
def test_max_output_full_contrast(kind, expected):
    assert max_output(get_kernel(kind), 255) == expected


@pytest.mark.parametrize("kind", list(KernelType))
def test_max_output_of_zero_input_is_zero(kind):
    assert max_output(get_kernel(kind), 0) == 0


@pytest.mark.parametrize("kind", list(KernelType))
def test_max_output_is_monotonic(kind):
    kernel = get_kernel(kind)
    outputs = [max_output(kernel, value) for value in range(0, 256, 15)]
    assert outputs == sorted(outputs)
