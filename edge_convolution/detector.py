"""
Orquestrador: guarda a imagem de origem, a imagem de bordas, a máscara e a normalização ativas.

Estados:
    uninitialized --load()--> ready
    ready --set_kernel() / set_normalization() / set_boundary() / detect()--> ready
A cada troca de seleção a imagem de bordas é recalculada inteira a partir da origem.
"""
from __future__ import annotations

from typing import Optional, Tuple, Union
import logging
import time

from .config import DISPLAY_NAMES, DetectorConfig, DisplayMode
from .convolution import BoundaryPolicy
from .errors import DetectorNotReadyError
from .kernels import KERNEL_NAMES, ConvolutionKernel, KernelType, get_kernel, kernel_type
from .normalization import (
    NORMALIZATION_NAMES,
    NORMALIZERS,
    NormalizationMode,
    get_normalization,
)
from .pixels import PixelBuffer

logger = logging.getLogger(__name__)

UNINITIALIZED = "uninitialized"
READY = "ready"


class EdgeDetector:
    def __init__(self, config: Optional[DetectorConfig] = None) -> None:
        self.config = config or DetectorConfig()
        self.source: Optional[PixelBuffer] = None
        self.edges: Optional[PixelBuffer] = None
        self.kernel_type: KernelType = self.config.kernel
        self.kernel: ConvolutionKernel = get_kernel(self.kernel_type)
        self.normalization: NormalizationMode = self.config.normalization
        self.boundary: BoundaryPolicy = self.config.boundary
        self.display_mode = self.config.display

    @property
    def state(self) -> str:
        return READY if self.source is not None else UNINITIALIZED

    @property
    def ready(self) -> bool:
        return self.source is not None

    def load(self, source: PixelBuffer) -> PixelBuffer:
        """
        Associa a imagem de origem e aloca a imagem de bordas (mesmo tamanho e layout).

        Restaura as seleções iniciais da configuração e já executa a primeira detecção.
        """
        self.source = source
        self.edges = PixelBuffer(source.width, source.height, source.layout)
        self.display_mode = self.config.display
        self.kernel_type = self.config.kernel
        self.kernel = get_kernel(self.kernel_type)
        self.normalization = self.config.normalization
        self.boundary = self.config.boundary
        logger.info("Imagem carregada: %dx%d", source.width, source.height)
        return self.detect()

    def release(self) -> None:
        self.source = None
        self.edges = None

    def detect(self) -> PixelBuffer:
        """Recalcula a imagem de bordas inteira com a máscara e a normalização atuais."""
        if self.source is None or self.edges is None:
            raise DetectorNotReadyError("Nenhuma imagem carregada no detector")

        normalizer = NORMALIZERS[self.normalization]
        started = time.perf_counter()
        normalizer(
            self.kernel,
            self.source,
            self.edges,
            boundary=self.boundary,
            workers=self.config.workers,
        )
        logger.info(
            "Detecção %s / %s (%s) em %.3fs",
            self.kernel.name,
            NORMALIZATION_NAMES[self.normalization],
            self.boundary.value,
            time.perf_counter() - started,
        )
        return self.edges

    def _redetect(self) -> None:
        if self.ready:
            self.detect()

    def set_kernel(self, kind: Union[KernelType, int, str]) -> None:
        self.kernel_type = kernel_type(kind)
        self.kernel = get_kernel(self.kernel_type)
        self._redetect()

    def set_normalization(self, mode: Union[NormalizationMode, int, str]) -> None:
        self.normalization = get_normalization(mode)
        self._redetect()

    def set_boundary(self, policy: Union[BoundaryPolicy, str]) -> None:
        self.boundary = BoundaryPolicy(policy)
        self._redetect()

    def set_display_mode(self, mode: Union[DisplayMode, int]) -> None:
        # Só muda o que é exibido, não recalcula
        self.display_mode = DisplayMode(mode)

    def displayed(self) -> PixelBuffer:
        if self.source is None or self.edges is None:
            raise DetectorNotReadyError("Nenhuma imagem carregada no detector")
        return self.source if self.display_mode is DisplayMode.ORIGINAL else self.edges

    def labels(self) -> Tuple[str, str, str]:
        return (
            DISPLAY_NAMES[self.display_mode],
            KERNEL_NAMES[self.kernel_type],
            NORMALIZATION_NAMES[self.normalization],
        )

    def caption(self) -> str:
        return " - ".join(self.labels())
