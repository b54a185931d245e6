"""Exceções de domínio para falhas de extração dos payloads YouTube.

Nenhuma delas é recuperável automaticamente: sinalizam página sem dados,
JSON corrompido ou mudança de formato no lado do YouTube.
"""

from __future__ import annotations

import json
from typing import Any

DEFAULT_FRAGMENT_MAX_CHARS = 500


def _render_fragment(fragment: Any, max_chars: int) -> str:
    try:
        text = json.dumps(fragment, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = repr(fragment)
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text


class YouTubeExtractionError(ValueError):
    """Base para falhas de extração/normalização de dados YouTube."""


class MissingPayloadError(YouTubeExtractionError):
    """Variável embutida (ytInitialData/ytInitialPlayerResponse) ausente."""

    def __init__(self, variable: str, message: str | None = None) -> None:
        self.variable = variable
        super().__init__(message or f"{variable} não encontrado na página")


class NoPayloadError(MissingPayloadError):
    """Nenhuma árvore disponível para o pipeline após a extração."""


class MalformedPayloadError(YouTubeExtractionError):
    """Variável encontrada, mas o conteúdo capturado não é JSON válido."""

    def __init__(self, variable: str, detail: str) -> None:
        self.variable = variable
        self.detail = detail
        super().__init__(f"{variable} malformado: {detail}")


class UnrecognizedRendererError(YouTubeExtractionError):
    """Renderer com formato desconhecido (provável mudança upstream).

    Carrega o fragmento bruto serializado para diagnóstico.
    """

    def __init__(
        self,
        renderer: str,
        fragment: Any,
        missing_key: str | None = None,
        reason: str | None = None,
        max_fragment_chars: int = DEFAULT_FRAGMENT_MAX_CHARS,
    ) -> None:
        self.renderer = renderer
        self.missing_key = missing_key
        self.fragment = _render_fragment(fragment, max_fragment_chars)
        if reason is None:
            reason = (
                f"campo '{missing_key}' ausente ou inválido" if missing_key else "formato desconhecido"
            )
        self.reason = reason
        super().__init__(f"{renderer}: {reason} em {self.fragment}")


class UnresolvedLinkError(YouTubeExtractionError):
    """Run com navigationEndpoint que não resolve para nenhuma URL."""

    def __init__(
        self,
        fragment: Any,
        max_fragment_chars: int = DEFAULT_FRAGMENT_MAX_CHARS,
    ) -> None:
        self.fragment = _render_fragment(fragment, max_fragment_chars)
        super().__init__(f"Não foi possível resolver URL em {self.fragment}")
