"""Configuração de logging da linha de comando e do visualizador."""
from __future__ import annotations

from logging.handlers import RotatingFileHandler
from typing import List, Optional
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Console sempre; arquivo rotativo (5 MB x 3) se log_file for dado."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        )
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    logger = logging.getLogger("edge_convolution")
    logger.debug("Logging inicializado%s", f" (arquivo: {log_file})" if log_file else "")
    return logger
