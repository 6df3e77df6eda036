"""Exceções do detector de bordas."""
from __future__ import annotations


class EdgeConvolutionError(Exception):
    """Erro base de todo o pacote."""


class DetectorNotReadyError(EdgeConvolutionError):
    """O detector ainda não recebeu uma imagem de origem (estado 'uninitialized')."""


class GradientAllocationError(EdgeConvolutionError):
    """Não foi possível alocar o campo de gradientes da normalização local."""


class ImageLoadError(EdgeConvolutionError):
    """Arquivo de imagem inexistente ou em formato não suportado."""
