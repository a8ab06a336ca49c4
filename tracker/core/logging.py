"""Log and span output for the ``tracker`` package.

Only the ``tracker`` logger hierarchy is configured here; the root logger
belongs to whatever application embeds the store.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from tracker.core.config import Settings

LOGGER_NAME = "tracker"

_installed_provider: TracerProvider | None = None


def parse_otlp_headers(raw: str | None) -> dict[str, str]:
    """Turn ``"key=value,key2=value2"`` into exporter headers.

    Entries without ``=`` or with an empty key are ignored.
    """

    pairs = (item.partition("=") for item in (raw or "").split(","))
    return {key.strip(): value.strip() for key, sep, value in pairs if sep and key.strip()}


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> logging.Logger:
    """Send records from ``tracker.*`` loggers to stderr.

    The ``tracker`` logger gets its own handler and stops propagating, so
    store records are not printed twice by an application's root handler.
    """

    level = _resolve_level(settings.log_level)
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"tracker": {"format": settings.log_format}},
            "handlers": {
                "tracker": {
                    "class": "logging.StreamHandler",
                    "formatter": "tracker",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["tracker"],
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )
    return logging.getLogger(LOGGER_NAME)


def init_tracer(settings: Settings, exporter: SpanExporter | None = None) -> TracerProvider | None:
    """Install the global tracer provider used by the store's spans.

    Returns ``None`` when tracing is disabled or a provider is already
    installed. Without an explicit ``exporter`` spans go to the OTLP/HTTP
    endpoint from settings.
    """

    global _installed_provider

    if not settings.otel_enabled or _installed_provider is not None:
        return None

    if exporter is None:
        exporter = OTLPSpanExporter(
            endpoint=settings.otel_exporter_otlp_endpoint,
            headers=parse_otlp_headers(settings.otel_exporter_otlp_headers) or None,
        )

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": settings.otel_service_name,
                "deployment.environment": settings.environment,
            }
        )
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _installed_provider = provider
    return provider


def shutdown_tracer(provider: TracerProvider | None) -> None:
    """Flush and stop ``provider`` so a later :func:`init_tracer` can run again."""

    global _installed_provider

    if provider is None:
        return
    provider.shutdown()
    if provider is _installed_provider:
        _installed_provider = None
