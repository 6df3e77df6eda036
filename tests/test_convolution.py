from __future__ import annotations

import pytest

from conftest import grey_buffer
from edge_convolution.convolution import BoundaryPolicy, anchor, convolve, gradient_rows
from edge_convolution.kernels import PREWITT, ROBERTS, SOBEL, KERNELS
from edge_convolution.pixels import RGBA8888, PixelBuffer, compose

SOBEL_CENTER_DOT = [
    [360, 510, 360],
    [510, 0, 510],
    [360, 510, 360],
]


def magnitudes(kernel, image, boundary=BoundaryPolicy.LEGACY):
    return [
        [convolve(kernel, image, x, y, boundary) for x in range(image.width)]
        for y in range(image.height)
    ]


@pytest.mark.parametrize("boundary", list(BoundaryPolicy))
def test_sobel_on_single_bright_pixel(center_dot, boundary):
    assert magnitudes(SOBEL, center_dot, boundary) == SOBEL_CENTER_DOT


@pytest.mark.parametrize("kernel", list(KERNELS.values()))
def test_flat_image_has_no_gradient(black_3x3, kernel):
    assert magnitudes(kernel, black_3x3) == [[0, 0, 0]] * 3


def test_step_edge_2x1(step_2x1):
    # (0, 0): só a linha central da máscara cai dentro da imagem, peso -2 sobre o branco
    assert convolve(SOBEL, step_2x1, 0, 0) == 510
    assert convolve(SOBEL, step_2x1, 1, 0) == 0


def test_colour_is_reduced_to_grey_before_convolution():
    red = compose(RGBA8888, 255, 0, 0, 255)
    image = PixelBuffer(2, 1, RGBA8888, [0, red])
    # cinza do vermelho puro = 85; 85 * 2 = 170
    assert convolve(SOBEL, image, 0, 0) == 170


def test_alpha_is_ignored():
    opaque = grey_buffer([[0, 255]], alpha=255)
    transparent = grey_buffer([[0, 255]], alpha=0)
    assert magnitudes(SOBEL, opaque) == magnitudes(SOBEL, transparent)


def test_anchor_policies():
    assert anchor(SOBEL, 5, 5, BoundaryPolicy.LEGACY) == (4, 4)
    assert anchor(SOBEL, 5, 5, BoundaryPolicy.STRICT) == (4, 4)
    # Roberts: 2 // 3 == 0 no modo legado, 2 // 2 == 1 no estrito
    assert anchor(ROBERTS, 5, 5, BoundaryPolicy.LEGACY) == (5, 5)
    assert anchor(ROBERTS, 5, 5, BoundaryPolicy.STRICT) == (4, 4)


def test_roberts_anchor_differs_between_policies():
    image = grey_buffer([[0, 0], [0, 255]])
    # legado: vizinhança (0..1, 0..1), o branco cai no peso x[1][1] = -1
    assert convolve(ROBERTS, image, 0, 0, BoundaryPolicy.LEGACY) == 255
    # estrito: vizinhança (-1..0, -1..0), só o pixel preto (0, 0) é lido
    assert convolve(ROBERTS, image, 0, 0, BoundaryPolicy.STRICT) == 0


def test_legacy_reads_one_column_past_the_right_edge():
    image = grey_buffer([[0, 0], [255, 0]])
    # Em (1, 0) o modo legado lê x == 2 na linha 0, que é o pixel (0, 1) branco.
    # legado: Gx = -255 (lido além da borda) + 255 = 0, Gy = -255
    assert convolve(PREWITT, image, 1, 0, BoundaryPolicy.LEGACY) == 255
    # estrito: Gx = 255, Gy = -255
    assert convolve(PREWITT, image, 1, 0, BoundaryPolicy.STRICT) == 360


def test_legacy_read_past_last_row_hits_guard():
    image = grey_buffer([[255, 255]])
    # última linha: a coluna extra é o guarda (zero) e não contribui
    assert convolve(PREWITT, image, 1, 0, BoundaryPolicy.LEGACY) == 255
    assert convolve(PREWITT, image, 1, 0, BoundaryPolicy.STRICT) == 255


def test_gradient_rows_is_row_major(center_dot):
    assert gradient_rows(SOBEL, center_dot, 1, 3) == SOBEL_CENTER_DOT[1] + SOBEL_CENTER_DOT[2]
    assert gradient_rows(SOBEL, center_dot, 0, 0) == []
