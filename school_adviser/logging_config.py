"""
structlog 설정
라이브러리는 import 시점에 로깅을 설정하지 않는다. 애플리케이션이 필요할 때 호출한다.
"""

import logging

import structlog

from school_adviser.config import settings


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """structlog 프로세서 체인과 표준 logging 레벨을 설정한다.

    Args:
        level: 로그 레벨 이름 (기본값: settings.log_level)
        fmt: "json" 또는 "console" (기본값: settings.log_format)
    """
    level_name = (level or settings.log_level).upper()
    log_format = (fmt or settings.log_format).lower()

    if log_format not in ("json", "console"):
        raise ValueError(f"Unknown log format '{log_format}'. Available: console, json")

    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level_name}'")

    logging.basicConfig(format="%(message)s", level=numeric_level)

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
