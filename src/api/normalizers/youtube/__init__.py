"""Normalizer YouTube — extração e normalização de ytInitialData/ytInitialPlayerResponse.

Responsabilidades:
- Extrair os JSONs embutidos no HTML das páginas
- Buscar renderers por chave em qualquer ponto da árvore
- Normalizar para modelos internos (ChannelInfo, CommunityPost,
  VideoRenderer, PlayerInfo)

Renderers suportados: channelMetadataRenderer, backstagePostRenderer,
sharedPostRenderer, gridVideoRenderer, reelItemRenderer e o player response.
"""

from .channel import extract_channel_metadata
from .community_post import COMMUNITY_POST_KEYS, classify_post, extract_post
from .extractor import (
    INITIAL_DATA_RE,
    PLAYER_RESPONSE_RE,
    RawPageData,
    find_active_tab,
    parse_raw_data,
    require_initial_data,
    require_player_response,
)
from .normalizer import (
    PageSource,
    extract_channel_info,
    extract_community_posts,
    extract_grid_video_renderers,
    extract_player_info,
    extract_reel_item_renderers,
    transform_initial_data,
)
from .player import extract_player_response
from .tree_search import find_values_by_keys, iter_values_by_keys
from .video_renderer import extract_grid_video_renderer, extract_reel_item_renderer

__all__ = [
    "COMMUNITY_POST_KEYS",
    "INITIAL_DATA_RE",
    "PLAYER_RESPONSE_RE",
    "PageSource",
    "RawPageData",
    "classify_post",
    "extract_channel_info",
    "extract_channel_metadata",
    "extract_community_posts",
    "extract_grid_video_renderer",
    "extract_grid_video_renderers",
    "extract_player_info",
    "extract_player_response",
    "extract_post",
    "extract_reel_item_renderer",
    "extract_reel_item_renderers",
    "find_active_tab",
    "find_values_by_keys",
    "iter_values_by_keys",
    "parse_raw_data",
    "require_initial_data",
    "require_player_response",
    "transform_initial_data",
]
