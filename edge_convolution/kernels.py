"""
REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 10.2: Point, Line, and Edge Detection - operadores de gradiente).
[2] Sobel, I., & Feldman, G. (1968). "A 3x3 Isotropic Gradient Operator for Image Processing".
[3] Prewitt, J. M. S. (1970). "Object Enhancement and Extraction".
[4] Roberts, L. G. (1963). "Machine Perception of Three-Dimensional Solids".
[5] Scharr, H. (2000). "Optimal Operators in Digital Image Processing".

RESUMO:
Cada operador é um par de máscaras (x, y) que aproxima as derivadas parciais df/dx e df/dy.
Todas as máscaras ficam em uma matriz de capacidade fixa 3x3; a largura e altura declaradas
dizem quais células valem (o Roberts usa só o canto 2x2 superior esquerdo).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Tuple, Union
import math

MATRIX_MAX_WIDTH = 3
MATRIX_MAX_HEIGHT = 3

Matrix = Tuple[Tuple[int, ...], ...]


class KernelType(IntEnum):
    SOBEL = 0
    PREWITT = 1
    ROBERTS = 2
    SCHARR = 3


@dataclass(frozen=True)
class ConvolutionKernel:
    name: str
    width: int
    height: int
    x_kernel: Matrix
    y_kernel: Matrix

    def __post_init__(self) -> None:
        if not (0 < self.width <= MATRIX_MAX_WIDTH and 0 < self.height <= MATRIX_MAX_HEIGHT):
            raise ValueError(f"Máscara {self.name}: tamanho {self.width}x{self.height} fora do limite 3x3")
        object.__setattr__(self, "x_kernel", _pad(self.x_kernel))
        object.__setattr__(self, "y_kernel", _pad(self.y_kernel))

    def weights(self) -> Tuple[Matrix, Matrix]:
        """As duas máscaras recortadas para width x height."""
        return (
            tuple(row[: self.width] for row in self.x_kernel[: self.height]),
            tuple(row[: self.width] for row in self.y_kernel[: self.height]),
        )


def _pad(matrix) -> Matrix:
    # Completa com zeros até a capacidade fixa 3x3
    if len(matrix) > MATRIX_MAX_HEIGHT or any(len(row) > MATRIX_MAX_WIDTH for row in matrix):
        raise ValueError(f"Matriz maior que a capacidade {MATRIX_MAX_WIDTH}x{MATRIX_MAX_HEIGHT}")
    rows = [tuple(int(v) for v in row) + (0,) * (MATRIX_MAX_WIDTH - len(row)) for row in matrix]
    while len(rows) < MATRIX_MAX_HEIGHT:
        rows.append((0,) * MATRIX_MAX_WIDTH)
    return tuple(rows)


SOBEL = ConvolutionKernel(
    name="Sobel (3x3)",
    width=3,
    height=3,
    x_kernel=(
        (1, 0, -1),
        (2, 0, -2),
        (1, 0, -1),
    ),
    y_kernel=(
        (1, 2, 1),
        (0, 0, 0),
        (-1, -2, -1),
    ),
)

PREWITT = ConvolutionKernel(
    name="Prewitt (3x3)",
    width=3,
    height=3,
    x_kernel=(
        (1, 0, -1),
        (1, 0, -1),
        (1, 0, -1),
    ),
    y_kernel=(
        (1, 1, 1),
        (0, 0, 0),
        (-1, -1, -1),
    ),
)

ROBERTS = ConvolutionKernel(
    name="Roberts (2x2)",
    width=2,
    height=2,
    x_kernel=(
        (1, 0),
        (0, -1),
    ),
    y_kernel=(
        (0, 1),
        (-1, 0),
    ),
)

SCHARR = ConvolutionKernel(
    name="Scharr (3x3)",
    width=3,
    height=3,
    x_kernel=(
        (3, 0, -3),
        (10, 0, -10),
        (3, 0, -3),
    ),
    y_kernel=(
        (3, 10, 3),
        (0, 0, 0),
        (-3, -10, -3),
    ),
)

KERNELS: Mapping[KernelType, ConvolutionKernel] = MappingProxyType(
    {
        KernelType.SOBEL: SOBEL,
        KernelType.PREWITT: PREWITT,
        KernelType.ROBERTS: ROBERTS,
        KernelType.SCHARR: SCHARR,
    }
)

KERNEL_NAMES: Mapping[KernelType, str] = MappingProxyType(
    {kind: kernel.name for kind, kernel in KERNELS.items()}
)


def kernel_type(kind: Union[KernelType, int, str]) -> KernelType:
    """Aceita o enum, o valor inteiro ou o nome ('sobel', 'ROBERTS'...)."""
    if isinstance(kind, KernelType):
        return kind
    if isinstance(kind, str):
        try:
            return KernelType[kind.strip().upper()]
        except KeyError:
            raise ValueError(f"Máscara desconhecida: {kind!r}") from None
    return KernelType(kind)


def get_kernel(kind: Union[KernelType, int, str]) -> ConvolutionKernel:
    return KERNELS[kernel_type(kind)]


def max_output(kernel: ConvolutionKernel, max_input: int) -> int:
    """
    Maior magnitude que a máscara consegue produzir (entrada em xadrez de contraste máximo).

    EXPLICAÇÃO:
    Para cada eixo somamos separadamente as contribuições dos pesos positivos e o valor
    absoluto das contribuições dos pesos negativos, ambas multiplicadas por max_input.
    O pior caso do eixo é a maior das duas somas (o vizinho "claro" cai todo de um lado
    da máscara). Os dois eixos se combinam pela mesma norma euclidiana da convolução:
        |G| = sqrt(Gx^2 + Gy^2)

    Não depende da imagem; serve apenas para dimensionar a normalização global.
    """
    pos_x = neg_x = pos_y = neg_y = 0
    x_weights, y_weights = kernel.weights()

    for row_x, row_y in zip(x_weights, y_weights):
        for wx, wy in zip(row_x, row_y):
            if wx > 0:
                pos_x += max_input * wx
            else:
                neg_x += max_input * abs(wx)
            if wy > 0:
                pos_y += max_input * wy
            else:
                neg_y += max_input * abs(wy)

    grad_x = max(pos_x, neg_x)
    grad_y = max(pos_y, neg_y)
    return int(math.sqrt(grad_x * grad_x + grad_y * grad_y))
