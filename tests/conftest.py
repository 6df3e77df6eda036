from __future__ import annotations

from typing import List

import pytest

from edge_convolution.pixels import RGBA8888, PixelBuffer, compose, decompose


def grey_buffer(rows: List[List[int]], alpha: int = 255) -> PixelBuffer:
    """Buffer RGBA8888 com R = G = B = valor de cada célula."""
    height = len(rows)
    width = len(rows[0])
    pixels = [compose(RGBA8888, v, v, v, alpha) for row in rows for v in row]
    return PixelBuffer(width, height, RGBA8888, pixels)


def grey_values(buffer: PixelBuffer) -> List[List[int]]:
    """Canal vermelho de cada pixel (nas saídas do detector R = G = B)."""
    return [[decompose(buffer.layout, p)[0] for p in row] for row in buffer.rows()]


@pytest.fixture
def center_dot() -> PixelBuffer:
    # 3x3 preto com um único pixel branco no centro
    return grey_buffer([[0, 0, 0], [0, 255, 0], [0, 0, 0]])


@pytest.fixture
def black_3x3() -> PixelBuffer:
    return grey_buffer([[0, 0, 0], [0, 0, 0], [0, 0, 0]])


@pytest.fixture
def step_2x1() -> PixelBuffer:
    return grey_buffer([[0, 255]])


