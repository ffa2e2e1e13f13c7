# vitrine/infrastructure/logging_config.py
from __future__ import annotations

import sys

from loguru import logger

from .config import get_settings


def configurar_logging() -> None:
    """Um unico sink em stderr, nivel vindo de LOG_LEVEL. Idempotente."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
        backtrace=False,
        diagnose=False,
    )
