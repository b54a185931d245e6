"""Filter que injeta `service` e `source` em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.context import current_source

if TYPE_CHECKING:
    from collections.abc import Callable


class ExtractionContextFilter(logging.Filter):
    """Enriquece records com o serviço e a origem em processamento.

    Um `source` passado explicitamente via `extra` prevalece sobre o
    contexto. Nunca descarta records.
    """

    def __init__(
        self,
        service_name: str,
        source_getter: Callable[[], str] = current_source,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._source_getter = source_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "source", None):
            record.source = self._source_getter()
        record.service = self._service_name
        return True
