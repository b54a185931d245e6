"""Normalizer de metadados de canal.

Usa `metadata.channelMetadataRenderer` e, quando presente,
`microformat.microformatDataRenderer` para as tags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from app.domain.channel_info import ChannelInfo
from config.settings.youtube import get_youtube_settings

from ._extraction_helpers import (
    get_thumbnail,
    optional_mapping,
    require_list,
    require_mapping,
    require_str,
)

if TYPE_CHECKING:
    from config.settings.youtube import YouTubeSettings

CHANNEL_METADATA_RENDERER = "channelMetadataRenderer"

# /channel/<id>, /c/<nome> e /user/<nome>: o segmento após o prefixo
_PREFIXED_PATHS = frozenset({"channel", "c", "user"})


def _extract_tags(initial_data: dict[str, Any], metadata: dict[str, Any]) -> tuple[str, ...]:
    """Tags do microformat; sem microformat, keywords separadas por espaço."""
    microformat = optional_mapping(optional_mapping(initial_data, "microformat"), "microformatDataRenderer")
    if microformat is not None and isinstance(microformat.get("tags"), list):
        return tuple(str(tag) for tag in microformat["tags"])
    keywords = metadata.get("keywords")
    if not isinstance(keywords, str):
        return ()
    # Parsing ingênuo: tags com espaço são quebradas.
    return tuple(keywords.split())


def _extract_vanity_id(vanity_url: Any, channel_id: str) -> str | None:
    """Segmento do vanity URL que identifica o canal, ou None se igual ao id."""
    if not isinstance(vanity_url, str):
        return None
    segments = [segment for segment in urlsplit(vanity_url).path.split("/") if segment]
    if not segments:
        return None
    if segments[0] in _PREFIXED_PATHS:
        vanity_id = segments[1] if len(segments) > 1 else ""
    else:
        vanity_id = segments[0]
    if not vanity_id or vanity_id == channel_id:
        return None
    return vanity_id


def extract_channel_metadata(
    initial_data: dict[str, Any],
    settings: YouTubeSettings | None = None,
) -> ChannelInfo:
    """Normaliza os metadados do canal de um ytInitialData já parseado.

    Raises:
        UnrecognizedRendererError: Se channelMetadataRenderer não existir ou
            estiver sem campos obrigatórios.
    """
    settings = settings or get_youtube_settings()
    metadata = require_mapping(
        require_mapping(initial_data, "metadata", "ytInitialData"),
        CHANNEL_METADATA_RENDERER,
        "ytInitialData.metadata",
    )
    channel_id = require_str(metadata, "externalId", CHANNEL_METADATA_RENDERER)
    avatar = require_mapping(metadata, "avatar", CHANNEL_METADATA_RENDERER)

    return ChannelInfo(
        id=channel_id,
        name=require_str(metadata, "title", CHANNEL_METADATA_RENDERER),
        description=str(metadata.get("description") or ""),
        vanity_id=_extract_vanity_id(metadata.get("vanityChannelUrl"), channel_id),
        is_family_safe=bool(metadata.get("isFamilySafe", False)),
        avatar_url=get_thumbnail(
            require_list(avatar, "thumbnails", CHANNEL_METADATA_RENDERER),
            settings.thumbnail_sanitize_offset,
        ),
        tags=_extract_tags(initial_data, metadata),
    )
