"""Configuração do detector (valores iniciais ao carregar uma imagem)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from .convolution import BoundaryPolicy
from .kernels import KernelType, kernel_type
from .normalization import NormalizationMode, get_normalization

# Limite de tamanho da imagem carregada, para acelerar o processamento em Python puro
MAX_DIMENSION = 600


class DisplayMode(IntEnum):
    ORIGINAL = 0
    EDGES = 1


DISPLAY_NAMES: Mapping[DisplayMode, str] = MappingProxyType(
    {
        DisplayMode.ORIGINAL: "Original",
        DisplayMode.EDGES: "Edges",
    }
)


@dataclass
class DetectorConfig:
    kernel: KernelType = KernelType.SOBEL
    normalization: NormalizationMode = NormalizationMode.LOCAL
    display: DisplayMode = DisplayMode.EDGES
    boundary: BoundaryPolicy = BoundaryPolicy.LEGACY
    workers: int = 1
    max_dimension: int = MAX_DIMENSION

    def __post_init__(self) -> None:
        self.kernel = kernel_type(self.kernel)
        self.normalization = get_normalization(self.normalization)
        self.display = DisplayMode(self.display)
        self.boundary = BoundaryPolicy(self.boundary)
        if self.workers < 1:
            raise ValueError(f"workers deve ser >= 1, recebido {self.workers}")

    @classmethod
    def from_args(cls, args) -> "DetectorConfig":
        """Monta a configuração a partir do namespace do argparse (ver cli.py)."""
        return cls(
            kernel=args.kernel,
            normalization=args.normalization,
            boundary=BoundaryPolicy.STRICT if args.strict else BoundaryPolicy.LEGACY,
            workers=args.workers,
            max_dimension=args.max_dimension,
        )
