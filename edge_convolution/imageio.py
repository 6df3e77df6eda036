"""Fronteira com arquivos de imagem: OpenCV para ler, numpy para empacotar, Pillow para salvar/exibir."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np
from PIL import Image

from .errors import ImageLoadError
from .pixels import RGBA8888, ChannelLayout, PixelBuffer, decompose

PathLike = Union[str, Path]


def resize_if_needed(image: np.ndarray, max_dimension: Optional[int]) -> np.ndarray:
    h, w = image.shape[:2]
    if max_dimension and max(h, w) > max_dimension:
        scale = max_dimension / max(h, w)
        new_w, new_h = max(1, int(w * scale)), max(1, int(h * scale))
        return cv2.resize(image, (new_w, new_h), interpolation=cv2.INTER_AREA)
    return image


def to_rgba(image: np.ndarray) -> np.ndarray:
    """Converte a matriz lida pelo OpenCV (cinza, BGR ou BGRA) para RGBA uint8."""
    if image.dtype == np.uint16:
        # PNG de 16 bits: mantém os 8 bits mais significativos
        image = (image >> 8).astype(np.uint8)
    elif np.issubdtype(image.dtype, np.floating):
        # TIFF/EXR em ponto flutuante: convenção do OpenCV, intensidade em [0, 1]
        image = np.rint(np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise ImageLoadError(f"Tipo de pixel não suportado: {image.dtype}")
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    channels = image.shape[2]
    if channels == 1:
        return cv2.cvtColor(image[:, :, 0], cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    raise ImageLoadError(f"Número de canais não suportado: {channels}")


def load_image(path: PathLike, max_dimension: Optional[int] = None) -> PixelBuffer:
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Arquivo não encontrado: {path}")

    # Carrega com OpenCV
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageLoadError(f"Não foi possível ler a imagem: {path}")

    # Reduz tamanho para performance
    image = resize_if_needed(image, max_dimension)
    return buffer_from_array(to_rgba(image))


def buffer_from_array(array: np.ndarray, layout: ChannelLayout = RGBA8888) -> PixelBuffer:
    """Matriz (H, W, 4) uint8 em ordem RGBA -> PixelBuffer empacotado no layout dado."""
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError(f"Esperada matriz (H, W, 4), recebida {array.shape}")
    height, width = array.shape[:2]
    channels = array.astype(np.uint32)
    packed = (
        (channels[:, :, 0] << layout.r_shift)
        | (channels[:, :, 1] << layout.g_shift)
        | (channels[:, :, 2] << layout.b_shift)
        | (channels[:, :, 3] << layout.a_shift)
    )
    return PixelBuffer(width, height, layout, packed.ravel().tolist())


def buffer_to_array(buffer: PixelBuffer) -> np.ndarray:
    """PixelBuffer -> matriz (H, W, 4) uint8 em ordem RGBA."""
    data = [
        [decompose(buffer.layout, pixel) for pixel in row]
        for row in buffer.rows()
    ]
    return np.array(data, dtype=np.uint32).clip(0, 255).astype(np.uint8).reshape(
        buffer.height, buffer.width, 4
    )


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer_to_array(buffer))


def save_image(buffer: PixelBuffer, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    buffer_to_image(buffer).save(path)
    return path
