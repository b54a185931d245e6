"""Configuração de logging do processo.

A biblioteca só obtém loggers (`logging.getLogger(__name__)`); quem instala
handler e formatter é o ponto de entrada, via configure_logging.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", log_format="json")
    logger = get_logger(__name__)
    logger.info("youtube_posts_extracted", extra={"count": 8})
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import ExtractionContextFilter
from config.logging.formatters import create_formatter
from config.settings.runtime import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS

if TYPE_CHECKING:
    from config.settings.runtime import RuntimeSettings


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    *,
    log_format: str = "json",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Instala um único handler no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service`.
        log_format: "json" ou "text".
        stream: Destino do handler (padrão: stderr, deixando stdout livre
            para a saída do CLI).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Nível ou formato inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_formatter(log_format))
    handler.addFilter(ExtractionContextFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar logs duplicados
    root.handlers = [handler]
    return handler


def configure_logging_from_settings(
    settings: RuntimeSettings,
    stream: IO[str] | None = None,
) -> logging.Handler:
    return configure_logging(
        settings.log_level,
        settings.service_name,
        log_format=settings.log_format,
        stream=stream,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_skipped_renderer(
    logger: logging.Logger,
    component: str,
    error: Exception,
) -> None:
    """Registra um renderer descartado pelo modo tolerante.

    O fragmento bruto não vai para o log, só o nome do renderer e o
    motivo; o fragmento continua disponível na exceção.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
        "error_type": type(error).__name__,
    }
    renderer = getattr(error, "renderer", None)
    if renderer:
        extra["renderer"] = renderer
    reason = getattr(error, "reason", None)
    if reason:
        extra["reason"] = reason

    logger.warning("youtube_renderer_skipped", extra=extra)
