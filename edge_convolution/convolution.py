"""
REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 3.6: Sharpening Spatial Filters - o gradiente para realce de bordas).

RESUMO:
Aplica um par de máscaras (x, y) sobre a vizinhança de um pixel e devolve a magnitude do gradiente:
    M(x,y) = sqrt(Gx^2 + Gy^2)
A imagem é convertida para tons de cinza amostra a amostra; amostras fora da imagem são ignoradas
(equivale a um preenchimento com zeros).
"""
from __future__ import annotations

from enum import Enum
from typing import List
import math

from .kernels import ConvolutionKernel
from .pixels import PixelBuffer, decompose, to_greyscale


class BoundaryPolicy(Enum):
    """
    Como a vizinhança é ancorada e limitada.

    LEGACY mantém a saída bit a bit igual à das versões anteriores, com seus dois defeitos conhecidos:
      - âncora em (x0 - width // 3, y0 - height // 3) em vez do centro (// 2).
        Para máscaras 3x3 dá no mesmo; o Roberts 2x2 fica ancorado no próprio pixel;
      - teste de limite x <= largura, que lê uma coluna além da borda direita
        (o primeiro pixel da linha seguinte, ou o guarda na última linha).
    STRICT é o modo corrigido: máscara centrada e x < largura.
    """

    LEGACY = "legacy"
    STRICT = "strict"


def anchor(kernel: ConvolutionKernel, x0: int, y0: int, boundary: BoundaryPolicy) -> tuple:
    """Canto superior esquerdo da vizinhança de (x0, y0)."""
    divisor = 3 if boundary is BoundaryPolicy.LEGACY else 2
    return x0 - kernel.width // divisor, y0 - kernel.height // divisor


def convolve(
    kernel: ConvolutionKernel,
    image: PixelBuffer,
    x0: int,
    y0: int,
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY,
) -> int:
    """
    Magnitude do gradiente em (x0, y0).

    Para cada deslocamento (dx, dy) da máscara:
        Gx += wx[dy][dx] * cinza(x, y)
        Gy += wy[dy][dx] * cinza(x, y)
    O resultado é truncado para inteiro (conversão double -> inteiro sem sinal).
    """
    min_x, min_y = anchor(kernel, x0, y0, boundary)
    # Limite (exclusivo) do eixo X: uma coluna a mais no modo legado
    x_limit = image.width + 1 if boundary is BoundaryPolicy.LEGACY else image.width
    layout = image.layout

    grad_x = 0
    grad_y = 0
    for dy in range(kernel.height):
        y = min_y + dy
        if y < 0 or y >= image.height:
            continue
        row_x = kernel.x_kernel[dy]
        row_y = kernel.y_kernel[dy]
        for dx in range(kernel.width):
            x = min_x + dx
            if x < 0 or x >= x_limit:
                continue
            grey = to_greyscale(*decompose(layout, image.get_pixel(x, y)))
            grad_x += row_x[dx] * grey
            grad_y += row_y[dx] * grey

    return int(math.sqrt(grad_x * grad_x + grad_y * grad_y))


def gradient_rows(
    kernel: ConvolutionKernel,
    image: PixelBuffer,
    start: int,
    stop: int,
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY,
) -> List[int]:
    """Magnitudes das linhas [start, stop), em ordem de linhas. Unidade de trabalho das threads."""
    gradients: List[int] = []
    for y in range(start, stop):
        for x in range(image.width):
            gradients.append(convolve(kernel, image, x, y, boundary))
    return gradients
