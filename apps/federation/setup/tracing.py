"""OpenTelemetry Distributed Tracing Configuration for Federation API.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Kakao/Naver 사용자 정보 API 호출)
- Redis 자동 계측 (프로필 upsert)

opentelemetry 패키지는 선택 의존성(extra: tracing)입니다.
설치되어 있지 않으면 트레이싱만 비활성화됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

    from apps.federation.setup.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_EXPORTER_ENDPOINT = "http://localhost:4318"

_tracer_provider = None


def configure_tracing(settings: "Settings") -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 성공 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (FEDERATION_OTEL_ENABLED=false)")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    endpoint = settings.otel_exporter_endpoint or DEFAULT_EXPORTER_ENDPOINT
    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )
    trace.set_tracer_provider(_tracer_provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": settings.otel_service_name,
            "endpoint": endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_app(app: "FastAPI") -> None:
    """FastAPI, HTTPX, Redis 자동 계측."""
    if _tracer_provider is None:
        return

    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
        from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
        from opentelemetry.instrumentation.redis import RedisInstrumentor
    except ImportError as e:
        logger.warning(f"OpenTelemetry instrumentation not available: {e}")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    HTTPXClientInstrumentor().instrument()
    RedisInstrumentor().instrument()
    logger.info("FastAPI/HTTPX/Redis instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown complete")
