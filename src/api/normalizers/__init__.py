"""Normalizers por fonte — conversão de payloads externos para modelos internos.

Estrutura:
- youtube/: ytInitialData e ytInitialPlayerResponse embutidos em páginas

Cada fonte tem seu próprio extractor e normalizers, mantendo SRP.
"""

from .youtube import (
    extract_channel_info,
    extract_community_posts,
    extract_grid_video_renderers,
    extract_player_info,
    extract_reel_item_renderers,
)

__all__ = [
    "extract_channel_info",
    "extract_community_posts",
    "extract_grid_video_renderers",
    "extract_player_info",
    "extract_reel_item_renderers",
]
