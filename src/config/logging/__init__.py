"""Logging estruturado do yt-initial-data.

Uso:
    from config.logging import configure_logging, extraction_context, get_logger

    configure_logging(level="INFO")
    with extraction_context("pagina.html"):
        ...
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    log_skipped_renderer,
)
from config.logging.context import current_source, extraction_context
from config.logging.filters import ExtractionContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_formatter,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ExtractionContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_formatter",
    "create_json_formatter",
    "current_source",
    "extraction_context",
    "get_logger",
    "log_skipped_renderer",
]
