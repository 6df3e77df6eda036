"""Detecção de bordas por convolução pixel a pixel (Sobel, Prewitt, Roberts, Scharr)."""
from __future__ import annotations

from .config import DISPLAY_NAMES, DetectorConfig, DisplayMode
from .convolution import BoundaryPolicy, convolve
from .detector import EdgeDetector
from .errors import (
    DetectorNotReadyError,
    EdgeConvolutionError,
    GradientAllocationError,
    ImageLoadError,
)
from .kernels import KERNEL_NAMES, KERNELS, ConvolutionKernel, KernelType, get_kernel, max_output
from .normalization import (
    NORMALIZATION_NAMES,
    NormalizationMode,
    normalize_global,
    normalize_local,
    normalize_none,
)
from .pixels import RGBA8888, ChannelLayout, PixelBuffer, compose, decompose, to_greyscale

__all__ = [
    "BoundaryPolicy",
    "ChannelLayout",
    "ConvolutionKernel",
    "DISPLAY_NAMES",
    "DetectorConfig",
    "DetectorNotReadyError",
    "DisplayMode",
    "EdgeConvolutionError",
    "EdgeDetector",
    "GradientAllocationError",
    "ImageLoadError",
    "KERNELS",
    "KERNEL_NAMES",
    "KernelType",
    "NORMALIZATION_NAMES",
    "NormalizationMode",
    "PixelBuffer",
    "RGBA8888",
    "compose",
    "convolve",
    "decompose",
    "get_kernel",
    "max_output",
    "normalize_global",
    "normalize_local",
    "normalize_none",
    "to_greyscale",
]
