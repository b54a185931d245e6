"""Helpers de extração de campos comuns aos renderers YouTube.

Separado dos normalizers para manter SRP.
Runs de texto, links, thumbnails, datas e acessores checados.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from urllib.parse import parse_qs, urljoin, urlsplit

from config.settings.youtube import YOUTUBE_BASE_URL
from utils.errors import UnrecognizedRendererError, UnresolvedLinkError

# Query param de /redirect com o destino real do link
REDIRECT_TARGET_PARAM = "q"


def require_mapping(node: Any, key: str, renderer: str) -> dict[str, Any]:
    """Retorna node[key] se for um objeto; senão UnrecognizedRendererError."""
    value = node.get(key) if isinstance(node, dict) else None
    if not isinstance(value, dict):
        raise UnrecognizedRendererError(renderer, node, key)
    return value


def require_list(node: Any, key: str, renderer: str) -> list[Any]:
    """Retorna node[key] se for uma lista; senão UnrecognizedRendererError."""
    value = node.get(key) if isinstance(node, dict) else None
    if not isinstance(value, list):
        raise UnrecognizedRendererError(renderer, node, key)
    return value


def require_str(node: Any, key: str, renderer: str) -> str:
    """Retorna node[key] se for string; senão UnrecognizedRendererError."""
    value = node.get(key) if isinstance(node, dict) else None
    if not isinstance(value, str):
        raise UnrecognizedRendererError(renderer, node, key)
    return value


def optional_mapping(node: Any, key: str) -> dict[str, Any] | None:
    """Retorna node[key] se for um objeto; senão None (nunca levanta)."""
    value = node.get(key) if isinstance(node, dict) else None
    return value if isinstance(value, dict) else None


def merge_runs(runs: list[dict[str, Any]]) -> str:
    """Concatena o `text` de cada run, sem separador."""
    return "".join(str(run.get("text", "")) for run in runs if isinstance(run, dict))


def get_text_or_merged_runs(node: Any) -> str | None:
    """Texto de um campo formatado: `simpleText` ou runs concatenados."""
    if not isinstance(node, dict):
        return None
    simple_text = node.get("simpleText")
    if isinstance(simple_text, str):
        return simple_text
    runs = node.get("runs")
    if isinstance(runs, list):
        return merge_runs(runs)
    return None


def require_text(node: Any, key: str, renderer: str) -> str:
    """Como get_text_or_merged_runs(node[key]), falhando se ausente."""
    text = get_text_or_merged_runs(node.get(key) if isinstance(node, dict) else None)
    if text is None:
        raise UnrecognizedRendererError(renderer, node, key)
    return text


def resolve_run_url(run: dict[str, Any], base_url: str = YOUTUBE_BASE_URL) -> str | None:
    """Resolve a URL de destino de um run, ou None se não for link.

    Links externos passam por /redirect?q=<destino>; nesse caso o destino
    é retornado. Links internos são relativos e viram absolutos.

    Raises:
        UnresolvedLinkError: Se há navigationEndpoint mas nenhuma URL.
    """
    endpoint = run.get("navigationEndpoint")
    if endpoint is None:
        return None

    raw_url = None
    if isinstance(endpoint, dict):
        metadata = optional_mapping(optional_mapping(endpoint, "commandMetadata"), "webCommandMetadata")
        raw_url = (metadata or {}).get("url") or (optional_mapping(endpoint, "urlEndpoint") or {}).get("url")
    if not isinstance(raw_url, str) or not raw_url:
        raise UnresolvedLinkError(endpoint)

    absolute_url = urljoin(base_url, raw_url)
    redirect_targets = parse_qs(urlsplit(absolute_url).query).get(REDIRECT_TARGET_PARAM)
    if redirect_targets and redirect_targets[0]:
        return redirect_targets[0]
    return absolute_url


def sanitize_url(url: str, offset: int = 0) -> str:
    """Remove parâmetros não-padrão que o YouTube cola após `=` na URL.

    Mantém os `offset + 1` primeiros segmentos, com os `=` entre eles.
    """
    return "=".join(url.split("=")[: offset + 1])


def get_thumbnail(thumbnails: list[dict[str, Any]], offset: int = 0) -> str:
    """URL da maior thumbnail (a última; a lista vem em resolução crescente).

    Raises:
        UnrecognizedRendererError: Se a lista estiver vazia ou sem URL.
    """
    if not thumbnails or not isinstance(thumbnails[-1], dict):
        raise UnrecognizedRendererError("thumbnails", thumbnails)
    url = thumbnails[-1].get("url")
    if not isinstance(url, str) or not url:
        raise UnrecognizedRendererError("thumbnails", thumbnails, "url")
    if url.startswith("//"):
        url = "https:" + url
    return sanitize_url(url, offset)


def get_optional_thumbnail(block: Any, offset: int = 0) -> str | None:
    """Thumbnail de um bloco `{thumbnails: [...]}`, ou None se não existir."""
    if not isinstance(block, dict) or not isinstance(block.get("thumbnails"), list):
        return None
    return get_thumbnail(block["thumbnails"], offset)


def try_parse_date(value: Any) -> datetime | None:
    """Parseia timestamp ISO-8601; None se ausente ou inválido. Nunca levanta."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def to_int(value: Any) -> int | None:
    """Converte contadores (o YouTube manda a maioria como string)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
