"""Utility helpers shared across the :mod:`phrase_rhymes` package."""

from __future__ import annotations

from .syllables import estimate_syllable_count
from .observability import (
    LOG_LEVEL_ENV_VAR,
    StructuredLoggerAdapter,
    add_span_attributes,
    configure_logging,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "configure_logging",
    "estimate_syllable_count",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
