"""Shared helpers."""

from .logging import ROOT_LOGGER, JsonLogFormatter, configure_from_settings, configure_json_logger, flush_handlers, log_event

__all__ = [
    "ROOT_LOGGER",
    "JsonLogFormatter",
    "configure_from_settings",
    "configure_json_logger",
    "flush_handlers",
    "log_event",
]
