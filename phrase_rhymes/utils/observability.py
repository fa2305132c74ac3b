"""Logging, metrics and tracing helpers used across the project.

Loggers render bound context inline as JSON so dictionary loads and lookups
remain greppable in plain text logs. Metrics go to the default Prometheus
registry and spans to the globally configured OpenTelemetry tracer provider,
which is a no-op until an application installs an SDK.
"""

from __future__ import annotations

import json
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Simple adapter that renders structured context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({k: str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, context)


LOG_LEVEL_ENV_VAR = "PHRASE_RHYMES_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LOGGING_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    text = (level or "").strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper()) if text else None
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Set up root handlers once and return the package log level.

    ``level`` wins over the ``PHRASE_RHYMES_LOG_LEVEL`` environment variable;
    unknown names fall back to ``INFO``. Repeat calls are no-ops unless
    ``force`` is set.
    """

    global _LOGGING_CONFIGURED

    package_logger = logging.getLogger("phrase_rhymes")
    if _LOGGING_CONFIGURED and not force:
        return package_logger.getEffectiveLevel()

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    resolved = _resolve_level(level if level is not None else env_level)
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    package_logger.setLevel(resolved)
    _LOGGING_CONFIGURED = True
    return resolved


def _registered_collector(name: str) -> Any:
    # prometheus_client registers counters under both ``name`` and
    # ``name_total``; either key resolves to the same collector.
    names = getattr(REGISTRY, "_names_to_collectors", {})
    return names.get(name) or names.get(f"{name}_total")


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Counter:
    """Create a counter, reusing an existing one registered under ``name``."""

    try:
        return Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered_collector(name)
        if existing is None:
            raise
        return existing


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Histogram:
    """Create a histogram, reusing an existing one registered under ``name``."""

    try:
        return Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered_collector(name)
        if existing is None:
            raise
        return existing


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None) -> Iterator[Any]:
    """Start an OpenTelemetry span named ``name`` under the project tracer."""

    tracer = trace.get_tracer("phrase_rhymes")
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``, skipping non-string keys."""

    if span is None:
        return
    for key, value in attributes.items():
        if not isinstance(key, str):
            continue
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Log an exception to an active span."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "StructuredLoggerAdapter",
    "configure_logging",
    "get_logger",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
