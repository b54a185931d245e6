"""Extrator dos payloads JSON embutidos em páginas YouTube.

Responsabilidades:
- Localizar `var ytInitialData = ...;</script>` e
  `var ytInitialPlayerResponse = ...;</script>` no HTML
- Parsear o trecho capturado como JSON
- Localizar a aba selecionada de um ytInitialData de canal

Não executa nenhum script da página: a captura é por delimitadores.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from utils.errors import MalformedPayloadError, MissingPayloadError

logger = logging.getLogger(__name__)

INITIAL_DATA_VAR = "ytInitialData"
PLAYER_RESPONSE_VAR = "ytInitialPlayerResponse"

# Captura do primeiro caractere após "=" até antes de ";</script>".
INITIAL_DATA_RE = re.compile(r"(?<=var ytInitialData =).*?(?=;</script>)")
PLAYER_RESPONSE_RE = re.compile(r"(?<=var ytInitialPlayerResponse =).*?(?=;</script>)")

_PATTERNS: dict[str, re.Pattern[str]] = {
    INITIAL_DATA_VAR: INITIAL_DATA_RE,
    PLAYER_RESPONSE_VAR: PLAYER_RESPONSE_RE,
}


@dataclass(frozen=True, slots=True)
class RawPageData:
    """Árvores extraídas de uma página.

    Atributos:
        initial_data: ytInitialData parseado (None se ausente ou não pedido)
        player_response: ytInitialPlayerResponse parseado (idem)
    """

    initial_data: dict[str, Any] | None = None
    player_response: dict[str, Any] | None = None


def _extract_variable(source: str, variable: str) -> dict[str, Any] | None:
    """JSON atribuído a `variable` na página, ou None se a variável não existir."""
    match = _PATTERNS[variable].search(source)
    if match is None:
        logger.info("youtube_payload_missing", extra={"variable": variable})
        return None
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(variable, str(exc)) from exc
    if not isinstance(data, dict):
        raise MalformedPayloadError(variable, f"esperado objeto JSON, obtido {type(data).__name__}")
    return data


def parse_raw_data(
    source: str,
    *,
    initial_data: bool = False,
    player_response: bool = False,
) -> RawPageData:
    """Extrai as árvores brutas de uma página YouTube.

    Args:
        source: Corpo HTML da página.
        initial_data: Se deve extrair ytInitialData.
        player_response: Se deve extrair ytInitialPlayerResponse (só existe
            em páginas /watch e youtu.be).

    Returns:
        RawPageData com as árvores pedidas; variáveis ausentes ficam None.

    Raises:
        ValueError: Se `source` for vazio ou nenhuma variável for pedida.
        MalformedPayloadError: Se a variável existir mas não for JSON válido.
    """
    if not source:
        raise ValueError("Nenhuma página fornecida para busca")
    if not initial_data and not player_response:
        raise ValueError("Pelo menos um de initial_data e player_response deve ser pedido")

    return RawPageData(
        initial_data=_extract_variable(source, INITIAL_DATA_VAR) if initial_data else None,
        player_response=_extract_variable(source, PLAYER_RESPONSE_VAR) if player_response else None,
    )


def require_initial_data(source: str) -> dict[str, Any]:
    """Como parse_raw_data, mas falha com MissingPayloadError se ausente."""
    data = parse_raw_data(source, initial_data=True).initial_data
    if data is None:
        raise MissingPayloadError(INITIAL_DATA_VAR)
    return data


def require_player_response(source: str) -> dict[str, Any]:
    """Como parse_raw_data, mas falha com MissingPayloadError se ausente."""
    data = parse_raw_data(source, player_response=True).player_response
    if data is None:
        raise MissingPayloadError(PLAYER_RESPONSE_VAR)
    return data


def find_active_tab(initial_data: dict[str, Any]) -> dict[str, Any]:
    """Retorna a aba selecionada de um ytInitialData de canal.

    Raises:
        MalformedPayloadError: Se o caminho das abas não existir.
        MissingPayloadError: Se nenhuma aba estiver selecionada.
    """
    try:
        tabs = initial_data["contents"]["twoColumnBrowseResultsRenderer"]["tabs"]
    except (KeyError, TypeError) as exc:
        raise MalformedPayloadError(INITIAL_DATA_VAR, f"abas inacessíveis: {exc!r}") from exc
    if not isinstance(tabs, list):
        raise MalformedPayloadError(INITIAL_DATA_VAR, "tabs não é uma lista")

    for tab in tabs:
        if not isinstance(tab, dict):
            continue
        tab_renderer = tab.get("tabRenderer")
        if isinstance(tab_renderer, dict) and tab_renderer.get("selected"):
            return tab
    raise MissingPayloadError(INITIAL_DATA_VAR, "nenhuma aba selecionada em ytInitialData")
