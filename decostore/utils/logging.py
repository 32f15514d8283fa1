"""loguru 기반 로깅 설정 모듈.

Centralized logging configuration using loguru.
The repositories never log; services and scripts import `logger` from here.

Usage:
    from decostore.utils.logging import logger
    logger.info("Sticker placed")
"""

import sys

from loguru import logger

from decostore.config import settings

# 사람이 읽기 쉬운 포맷 — Human-readable format
_HUMAN_FORMAT: str = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str | None = None, json_mode: bool | None = None) -> int:
    """기본 핸들러를 교체하고 stderr 싱크를 등록합니다.

    Replace loguru's default handler with a single stderr sink.

    Args:
        level: 로그 레벨, None이면 설정값 (Sink level; defaults to settings.LOG_LEVEL)
        json_mode: JSON 직렬화 여부, None이면 설정값 (Serialize records; defaults to settings.LOG_JSON)

    Returns:
        int: 등록된 핸들러 ID (Handler id returned by logger.add)
    """
    logger.remove()
    use_json: bool = settings.LOG_JSON if json_mode is None else json_mode
    sink_level: str = (level or settings.LOG_LEVEL).upper()

    if use_json:
        return logger.add(sys.stderr, level=sink_level, serialize=True)
    return logger.add(sys.stderr, level=sink_level, format=_HUMAN_FORMAT, colorize=None)


configure_logging()

__all__ = ["logger", "configure_logging"]
