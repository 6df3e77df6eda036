"""
Linha de comando.

Exemplos:
  python -m edge_convolution foto.png
  python -m edge_convolution foto.png -o bordas.png --kernel scharr --normalization global
  python -m edge_convolution foto.png --gui
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from .config import MAX_DIMENSION, DetectorConfig
from .detector import EdgeDetector
from .errors import EdgeConvolutionError
from .imageio import load_image, save_image
from .kernels import KernelType
from .log import setup_logging
from .normalization import NormalizationMode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edge-convolution",
        description="Detecção de bordas por convolução (Sobel, Prewitt, Roberts, Scharr).",
    )
    parser.add_argument("image", type=Path, help="Imagem de entrada")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Imagem de saída (padrão: <nome>_edges.png)")
    parser.add_argument("--kernel", choices=[k.name.lower() for k in KernelType], default="sobel")
    parser.add_argument("--normalization", choices=[n.name.lower() for n in NormalizationMode],
                        default="local")
    parser.add_argument("--strict", action="store_true",
                        help="Máscara centrada e sem leitura além da borda direita")
    parser.add_argument("--workers", type=int, default=1, help="Threads para o cálculo do gradiente")
    parser.add_argument("--max-dimension", type=int, default=MAX_DIMENSION,
                        help="Reduz a imagem se o maior lado passar disso (0 desativa)")
    parser.add_argument("--gui", action="store_true", help="Abre o visualizador interativo")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def default_output(image: Path) -> Path:
    return image.with_name(f"{image.stem}_edges.png")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = DetectorConfig.from_args(args)
        detector = EdgeDetector(config)
        detector.load(load_image(args.image, config.max_dimension))

        if args.gui:
            from .app import run

            run(detector)
            return 0

        output = save_image(detector.edges, args.output or default_output(args.image))
        print(detector.caption())
        logger.info("Bordas salvas em %s", output)
    except (EdgeConvolutionError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
