"""Formatters de log: JSON estruturado (padrão) ou texto para terminal."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para saída estável
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "source",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(source)s] %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON; atributos de `extra` entram como chaves extras.

    Exemplo:
        {"asctime": "...", "level": "WARNING",
         "logger": "api.normalizers.youtube.normalizer",
         "message": "youtube_renderer_skipped", "source": "community.html",
         "service": "yt-initial-data", "component": "backstagePostRenderer"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def create_formatter(log_format: str) -> logging.Formatter:
    """Escolhe o formatter por nome ("json" ou "text")."""
    if log_format == "text":
        return logging.Formatter(TEXT_FORMAT)
    if log_format == "json":
        return create_json_formatter()
    raise ValueError(f"Formato de log inválido: {log_format}. Válidos: json, text")
