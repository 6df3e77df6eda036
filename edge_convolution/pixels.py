"""
REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 2: Digital Image Fundamentals - representação de pixels).
[2] Documentação do SDL_PixelFormat (máscaras e deslocamentos de canal).

RESUMO:
Este módulo é a camada de acesso aos pixels:
1. Layout de canais: onde cada canal (R, G, B, A) está dentro de um pixel empacotado de 32 bits.
2. Decomposição / composição entre o valor empacotado e os quatro canais.
3. Redução para tons de cinza pela média simples (R + G + B) / 3.
4. PixelBuffer: grade 2D de pixels empacotados, armazenada linha a linha.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

PIXEL_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class ChannelLayout:
    r_mask: int
    g_mask: int
    b_mask: int
    a_mask: int
    r_shift: int
    g_shift: int
    b_shift: int
    a_shift: int

    @property
    def alpha_max(self) -> int:
        """Valor de alfa totalmente opaco (0 se o layout não tiver canal alfa)."""
        return self.a_mask >> self.a_shift


# Bytes RGBA lidos como inteiros little-endian de 32 bits: R no byte baixo, A no alto.
RGBA8888 = ChannelLayout(
    r_mask=0x000000FF,
    g_mask=0x0000FF00,
    b_mask=0x00FF0000,
    a_mask=0xFF000000,
    r_shift=0,
    g_shift=8,
    b_shift=16,
    a_shift=24,
)


def decompose(layout: ChannelLayout, packed: int) -> Tuple[int, int, int, int]:
    """Separa um pixel empacotado em (r, g, b, a): (pixel & máscara) >> deslocamento."""
    r = (packed & layout.r_mask) >> layout.r_shift
    g = (packed & layout.g_mask) >> layout.g_shift
    b = (packed & layout.b_mask) >> layout.b_shift
    a = (packed & layout.a_mask) >> layout.a_shift
    return r, g, b, a


def compose(layout: ChannelLayout, r: int, g: int, b: int, a: int) -> int:
    """
    Operação inversa de decompose: desloca cada canal e junta tudo com OR.

    Não há validação de faixa. Um valor maior que a largura do canal invade os
    bits do canal vizinho; cabe a quem chama entregar valores já escalados.
    """
    pixel = 0
    pixel |= r << layout.r_shift
    pixel |= g << layout.g_shift
    pixel |= b << layout.b_shift
    pixel |= a << layout.a_shift
    return pixel & PIXEL_MASK


def to_greyscale(r: int, g: int, b: int, a: int = 0) -> int:
    """
    Luminância simplificada: média aritmética dos três canais de cor (divisão inteira).

    Não é a fórmula perceptual (0.299R + 0.587G + 0.114B). A média simples é
    mantida para que a saída não mude entre versões. Alfa é ignorado.
    """
    return (r + g + b) // 3


class PixelBuffer:
    """
    Grade width x height de pixels empacotados (32 bits), em ordem de linhas.

    O armazenamento tem um pixel de guarda extra no final, sempre zero. Ele
    existe para a leitura da coluna x == width feita pelo modo de borda legado
    (ver convolution.BoundaryPolicy): com o endereço calculado como y * width + x,
    essa leitura cai no primeiro pixel da linha seguinte ou, na última linha, no guarda.
    """

    def __init__(
        self,
        width: int,
        height: int,
        layout: ChannelLayout = RGBA8888,
        pixels: Optional[List[int]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Dimensões inválidas para o buffer: {width}x{height}")
        self.width = width
        self.height = height
        self.layout = layout
        if pixels is None:
            self._pixels = [0] * (width * height + 1)
        else:
            if len(pixels) != width * height:
                raise ValueError(
                    f"Esperados {width * height} pixels, recebidos {len(pixels)}"
                )
            self._pixels = [int(p) & PIXEL_MASK for p in pixels]
            self._pixels.append(0)

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[y * self.width + x]

    def set_pixel(self, x: int, y: int, pixel: int) -> None:
        self._pixels[y * self.width + x] = pixel & PIXEL_MASK

    def clear(self, pixel: int = 0) -> None:
        """Preenche a imagem inteira (o guarda continua zero)."""
        value = pixel & PIXEL_MASK
        for i in range(self.width * self.height):
            self._pixels[i] = value

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.layout, self.pixels())

    def same_size(self, other: "PixelBuffer") -> bool:
        return self.width == other.width and self.height == other.height

    def pixels(self) -> List[int]:
        """Cópia plana dos pixels, sem o guarda."""
        return self._pixels[: self.width * self.height]

    def rows(self) -> Iterator[List[int]]:
        for y in range(self.height):
            start = y * self.width
            yield self._pixels[start : start + self.width]

    def channels(self, x: int, y: int) -> Tuple[int, int, int, int]:
        return decompose(self.layout, self.get_pixel(x, y))

    def greyscale(self) -> List[List[int]]:
        """Matriz de tons de cinza (útil para inspeção e testes)."""
        return [
            [to_greyscale(*decompose(self.layout, pixel)) for pixel in row]
            for row in self.rows()
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.same_size(other)
            and self.layout == other.layout
            and self.pixels() == other.pixels()
        )

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
