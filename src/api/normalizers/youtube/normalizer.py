"""Normalizer YouTube — pipeline página/árvore -> registros tipados.

Fluxo: fonte (HTML ou árvore já parseada) -> extractor (se HTML) ->
busca por chave -> normalizer por renderer -> lista ordenada.

Por padrão falha no primeiro renderer não reconhecido. Com
`skip_invalid=True` o item é descartado e o descarte é logado.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import partial
from typing import TYPE_CHECKING, Any, TypeVar

from config.logging import log_skipped_renderer
from config.settings.youtube import get_youtube_settings
from utils.errors import (
    MalformedPayloadError,
    MissingPayloadError,
    NoPayloadError,
    UnrecognizedRendererError,
    UnresolvedLinkError,
)

from .channel import extract_channel_metadata
from .community_post import COMMUNITY_POST_KEYS, extract_post
from .extractor import INITIAL_DATA_VAR, PLAYER_RESPONSE_VAR, find_active_tab, parse_raw_data
from .player import extract_player_response
from .tree_search import find_values_by_keys
from .video_renderer import (
    GRID_VIDEO_KEYS,
    REEL_ITEM_KEYS,
    extract_grid_video_renderer,
    extract_reel_item_renderer,
)

if TYPE_CHECKING:
    from app.domain.channel_info import ChannelInfo
    from app.domain.community_post import CommunityPost
    from app.domain.player_info import PlayerInfo
    from app.domain.video_renderer import VideoRenderer
    from app.protocols.normalizer import RendererNormalizerProtocol
    from config.settings.youtube import YouTubeSettings

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

# Página HTML crua ou árvore JSON já parseada
PageSource = str | dict[str, Any]


def _resolve_tree(source: PageSource, variable: str) -> dict[str, Any]:
    """Árvore pedida a partir de dict (passa direto) ou HTML."""
    if isinstance(source, dict):
        return source
    if not isinstance(source, str):
        raise TypeError(f"Fonte deve ser str ou dict, obtido {type(source).__name__}")
    if not source:
        raise NoPayloadError(variable, f"Página vazia: sem {variable}")

    raw = parse_raw_data(
        source,
        initial_data=variable == INITIAL_DATA_VAR,
        player_response=variable == PLAYER_RESPONSE_VAR,
    )
    tree = raw.initial_data if variable == INITIAL_DATA_VAR else raw.player_response
    if tree is None:
        raise NoPayloadError(variable, f"Sem {variable} na página fornecida")
    return tree


def resolve_initial_data(source: PageSource) -> dict[str, Any]:
    """Resolve a fonte para ytInitialData (parseando HTML se preciso)."""
    return _resolve_tree(source, INITIAL_DATA_VAR)


def resolve_player_response(source: PageSource) -> dict[str, Any]:
    """Resolve a fonte para ytInitialPlayerResponse (parseando HTML se preciso)."""
    return _resolve_tree(source, PLAYER_RESPONSE_VAR)


def active_tab_or_root(initial_data: dict[str, Any]) -> dict[str, Any]:
    """Restringe a busca à aba selecionada quando a página tem abas.

    Pula abas não usadas e metadados; páginas sem abas são buscadas inteiras.
    """
    try:
        return find_active_tab(initial_data)
    except (MalformedPayloadError, MissingPayloadError):
        logger.debug("youtube_active_tab_not_found")
        return initial_data


def normalize_all(
    raw_renderers: Iterable[Any],
    normalizer: RendererNormalizerProtocol[RecordT] | Callable[[Any], RecordT],
    *,
    component: str,
    skip_invalid: bool = False,
) -> list[RecordT]:
    """Aplica o normalizer a cada renderer, em ordem.

    Args:
        raw_renderers: Renderers brutos encontrados pela busca.
        normalizer: Função renderer bruto -> registro.
        component: Nome usado nos logs (ex: "community_posts").
        skip_invalid: Se True, descarta (e loga) itens não reconhecidos.

    Raises:
        UnrecognizedRendererError, UnresolvedLinkError: No modo padrão.
    """
    records: list[RecordT] = []
    skipped = 0
    for raw in raw_renderers:
        try:
            records.append(normalizer(raw))
        except (UnrecognizedRendererError, UnresolvedLinkError) as exc:
            if not skip_invalid:
                raise
            skipped += 1
            log_skipped_renderer(logger, component, exc)
    logger.debug(
        "youtube_renderers_normalized",
        extra={"component": component, "count": len(records), "skipped": skipped},
    )
    return records


def transform_initial_data(
    source: PageSource,
    keys: tuple[str, ...],
    normalizer: RendererNormalizerProtocol[RecordT] | Callable[[Any], RecordT],
    *,
    skip_invalid: bool = False,
    scope: Callable[[dict[str, Any]], Any] | None = None,
) -> list[RecordT]:
    """Busca `keys` em ytInitialData e normaliza cada resultado.

    Args:
        source: Página HTML ou ytInitialData já parseado.
        keys: Chaves de renderer, em ordem de prioridade.
        normalizer: Função renderer bruto -> registro.
        skip_invalid: Modo tolerante (descarta itens não reconhecidos).
        scope: Recorte da árvore antes da busca (padrão: árvore inteira).

    Raises:
        NoPayloadError: Se a página não trouxer ytInitialData.
    """
    initial_data = resolve_initial_data(source)
    root = scope(initial_data) if scope is not None else initial_data
    raw_renderers = find_values_by_keys(root, keys)
    return normalize_all(
        raw_renderers,
        normalizer,
        component=keys[0],
        skip_invalid=skip_invalid,
    )


def extract_channel_info(
    source: PageSource,
    settings: YouTubeSettings | None = None,
) -> ChannelInfo:
    """Metadados do canal de qualquer página com ytInitialData."""
    return extract_channel_metadata(resolve_initial_data(source), settings)


def extract_community_posts(
    source: PageSource,
    *,
    skip_invalid: bool | None = None,
    settings: YouTubeSettings | None = None,
) -> list[CommunityPost]:
    """Posts da aba Comunidade (ou de uma página de post único).

    Um post que cita outro gera um único resultado, com o original em
    `shared_post`.
    """
    settings = settings or get_youtube_settings()
    return transform_initial_data(
        source,
        COMMUNITY_POST_KEYS,
        partial(extract_post, settings=settings),
        skip_invalid=settings.skip_invalid_renderers if skip_invalid is None else skip_invalid,
        scope=active_tab_or_root,
    )


def extract_grid_video_renderers(
    source: PageSource,
    *,
    skip_invalid: bool | None = None,
    settings: YouTubeSettings | None = None,
) -> list[VideoRenderer]:
    """Vídeos listados em grid. Não inclui shorts (ver extract_reel_item_renderers)."""
    settings = settings or get_youtube_settings()
    return transform_initial_data(
        source,
        GRID_VIDEO_KEYS,
        extract_grid_video_renderer,
        skip_invalid=settings.skip_invalid_renderers if skip_invalid is None else skip_invalid,
    )


def extract_reel_item_renderers(
    source: PageSource,
    *,
    skip_invalid: bool | None = None,
    settings: YouTubeSettings | None = None,
) -> list[VideoRenderer]:
    """Shorts listados (reelItemRenderer)."""
    settings = settings or get_youtube_settings()
    return transform_initial_data(
        source,
        REEL_ITEM_KEYS,
        extract_reel_item_renderer,
        skip_invalid=settings.skip_invalid_renderers if skip_invalid is None else skip_invalid,
    )


def extract_player_info(
    source: PageSource,
    settings: YouTubeSettings | None = None,
) -> PlayerInfo:
    """Dados do player de uma página /watch ou youtu.be."""
    return extract_player_response(resolve_player_response(source), settings)
