"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
``extra`` 로 전달한 필드(stage, kind, detail 등)도 JSON 필드로 함께 기록됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.federation.setup.config import Settings

# create_app 이 여러 번 호출되어도 팩토리가 중첩되지 않도록 최초 팩토리를 기준으로 감쌉니다.
_base_record_factory = logging.getLogRecordFactory()


def setup_logging(settings: "Settings") -> None:
    """로깅 설정."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    # 프로바이더 호출 로그는 sign-in 로그와 중복
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
