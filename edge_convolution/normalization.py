"""
REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 3.2: Contrast stretching / Capítulo 10.2: Gradient images).

RESUMO:
As magnitudes do gradiente não cabem naturalmente em 0-255. Três estratégias de exibição:
1. Local: estica [min, max] observado nesta imagem para [0, 255] (duas passadas).
2. Global: estica [0, max teórico da máscara] para [0, 255] (uma passada, sem buffer intermediário).
3. Nenhuma: escreve a magnitude crua, truncada à largura do canal de 8 bits.

Todas limpam a imagem de saída (preto) antes de escrever e gravam pixels em tons de cinza
(R = G = B) com alfa totalmente opaco.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from enum import IntEnum
from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple, Union
import logging

from .convolution import BoundaryPolicy, convolve, gradient_rows
from .errors import GradientAllocationError
from .kernels import ConvolutionKernel, max_output
from .pixels import PixelBuffer, compose

logger = logging.getLogger(__name__)

MAX_INTENSITY = 255
CHANNEL_MASK = 0xFF


class NormalizationMode(IntEnum):
    LOCAL = 0
    GLOBAL = 1
    NONE = 2


NORMALIZATION_NAMES: Mapping[NormalizationMode, str] = MappingProxyType(
    {
        NormalizationMode.LOCAL: "Local Normalization",
        NormalizationMode.GLOBAL: "Global Normalization",
        NormalizationMode.NONE: "No Normalization",
    }
)


def get_normalization(mode: Union[NormalizationMode, int, str]) -> NormalizationMode:
    if isinstance(mode, NormalizationMode):
        return mode
    if isinstance(mode, str):
        try:
            return NormalizationMode[mode.strip().upper()]
        except KeyError:
            raise ValueError(f"Normalização desconhecida: {mode!r}") from None
    return NormalizationMode(mode)


def row_ranges(height: int, workers: int) -> List[Tuple[int, int]]:
    """Divide as linhas em faixas disjuntas, uma por thread."""
    workers = max(1, min(workers, height))
    step, extra = divmod(height, workers)
    ranges = []
    start = 0
    for i in range(workers):
        stop = start + step + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def _run_rows(task: Callable[[int, int], None], height: int, workers: int) -> None:
    ranges = row_ranges(height, workers)
    if len(ranges) == 1:
        task(*ranges[0])
        return
    # Sair do bloco 'with' espera todas as faixas: é a barreira entre as passadas
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(task, start, stop) for start, stop in ranges]
    for future in futures:
        future.result()


def _allocate_field(size: int) -> List[int]:
    try:
        return [0] * size
    except MemoryError as exc:
        raise GradientAllocationError(
            f"Sem memória para o campo de gradientes ({size} pixels)"
        ) from exc


def _write_grey(output: PixelBuffer, x: int, y: int, value: int) -> None:
    layout = output.layout
    output.set_pixel(x, y, compose(layout, value, value, value, layout.alpha_max))


def normalize_local(
    kernel: ConvolutionKernel,
    source: PixelBuffer,
    output: PixelBuffer,
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY,
    workers: int = 1,
) -> None:
    """
    Normalização local (contrast stretching pela faixa observada).

    Passada 1: gradiente de todos os pixels, guardados num campo temporário.
    Passada 2: g' = round((g - min) / (max - min) * 255).

    Imagem sem variação de gradiente (max == min): todos os pixels ficam 0.
    Se o campo temporário não puder ser alocado, GradientAllocationError é lançada
    e a saída anterior fica intacta.
    """
    width = source.width
    gradients = _allocate_field(width * source.height)

    # 1. Passada de gradientes (faixas de linhas disjuntas)
    def fill(start: int, stop: int) -> None:
        gradients[start * width : stop * width] = gradient_rows(kernel, source, start, stop, boundary)

    _run_rows(fill, source.height, workers)

    low = min(gradients)
    high = max(gradients)
    logger.debug("Gradiente local: min=%d max=%d", low, high)

    output.clear()
    span = high - low

    # 2. Esticamento e escrita
    def write(start: int, stop: int) -> None:
        for y in range(start, stop):
            for x in range(width):
                if span == 0:
                    value = 0
                else:
                    value = round((gradients[y * width + x] - low) / span * MAX_INTENSITY)
                _write_grey(output, x, y, value)

    _run_rows(write, source.height, workers)


def normalize_global(
    kernel: ConvolutionKernel,
    source: PixelBuffer,
    output: PixelBuffer,
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY,
    workers: int = 1,
) -> None:
    """
    Normalização global: g' = round(g / max_output(máscara, 255) * 255), limitado a [0, 255].

    A escala não depende da imagem, então imagens diferentes ficam comparáveis entre si.
    """
    limit = max_output(kernel, MAX_INTENSITY)
    output.clear()

    def write(start: int, stop: int) -> None:
        for y in range(start, stop):
            for x in range(source.width):
                gradient = convolve(kernel, source, x, y, boundary)
                value = round(gradient / limit * MAX_INTENSITY) if limit else 0
                _write_grey(output, x, y, max(0, min(MAX_INTENSITY, value)))

    _run_rows(write, source.height, workers)


def normalize_none(
    kernel: ConvolutionKernel,
    source: PixelBuffer,
    output: PixelBuffer,
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY,
    workers: int = 1,
) -> None:
    """Sem normalização: magnitudes acima de 255 dão a volta (só os 8 bits baixos ficam)."""
    output.clear()

    def write(start: int, stop: int) -> None:
        for y in range(start, stop):
            for x in range(source.width):
                gradient = convolve(kernel, source, x, y, boundary)
                _write_grey(output, x, y, gradient & CHANNEL_MASK)

    _run_rows(write, source.height, workers)


Normalizer = Callable[..., None]

NORMALIZERS: Mapping[NormalizationMode, Normalizer] = MappingProxyType(
    {
        NormalizationMode.LOCAL: normalize_local,
        NormalizationMode.GLOBAL: normalize_global,
        NormalizationMode.NONE: normalize_none,
    }
)
