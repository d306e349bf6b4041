"""Logging Configuration.

ECS 호환 JSON 로그를 stderr로 출력합니다 (stdout은 명령 출력 전용).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.auth_cli.setup.config import Settings, get_settings

NOISY_LOGGERS = ("httpx", "httpcore", "keyring")


def setup_logging(settings: Settings | None = None) -> None:
    """로깅 설정."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
