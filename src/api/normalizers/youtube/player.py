"""Normalizer do ytInitialPlayerResponse (páginas /watch e youtu.be).

Combina videoDetails, playabilityStatus, microformat e streamingData em
um único PlayerInfo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.youtube import Playability
from app.domain.player_info import (
    FormatAudio,
    FormatVideo,
    Manifests,
    PlayerInfo,
    VideoFormat,
)
from config.settings.youtube import get_youtube_settings

from ._extraction_helpers import (
    get_text_or_merged_runs,
    get_thumbnail,
    optional_mapping,
    require_list,
    require_mapping,
    require_str,
    require_text,
    to_int,
    try_parse_date,
)

if TYPE_CHECKING:
    from config.settings.youtube import YouTubeSettings

PLAYER_RESPONSE = "ytInitialPlayerResponse"
VIDEO_DETAILS = "videoDetails"
PLAYER_MICROFORMAT_RENDERER = "playerMicroformatRenderer"

# offerId da tela de erro de vídeos exclusivos para membros
MEMBERS_ONLY_OFFER_ID = "sponsors_only_video"


def _extract_format(raw_format: dict[str, Any]) -> VideoFormat:
    """Um item de formats ou adaptiveFormats."""
    url = raw_format.get("url")
    label = raw_format.get("qualityLabel")
    return VideoFormat(
        url=url if isinstance(url, str) else None,
        mime_type=require_str(raw_format, "mimeType", "streamingData.formats"),
        label=label if isinstance(label, str) else None,
        bitrate=to_int(raw_format.get("bitrate")) or 0,
        video=FormatVideo(
            width=to_int(raw_format.get("width")),
            height=to_int(raw_format.get("height")),
            fps=to_int(raw_format.get("fps")),
        ),
        audio=FormatAudio(
            sample_rate=to_int(raw_format.get("audioSampleRate")),
            channels=to_int(raw_format.get("audioChannels")),
        ),
    )


def _extract_formats(streaming_data: dict[str, Any]) -> tuple[VideoFormat, ...] | None:
    """Formatos progressivos seguidos dos adaptativos; None se não houver nenhum."""
    raw_formats = [
        raw_format
        for key in ("formats", "adaptiveFormats")
        if isinstance(streaming_data.get(key), list)
        for raw_format in streaming_data[key]
        if isinstance(raw_format, dict)
    ]
    if not raw_formats:
        return None
    return tuple(_extract_format(raw_format) for raw_format in raw_formats)


def _is_members_only(playability_status: dict[str, Any]) -> bool:
    """True se a tela de erro oferece assinatura de membros."""
    offer = optional_mapping(
        optional_mapping(playability_status, "errorScreen"),
        "playerLegacyDesktopYpcOfferRenderer",
    )
    return offer is not None and offer.get("offerId") == MEMBERS_ONLY_OFFER_ID


def _extract_manifests(streaming_data: dict[str, Any]) -> Manifests:
    """URLs DASH e HLS presentes em streamingData."""
    dash = streaming_data.get("dashManifestUrl")
    hls = streaming_data.get("hlsManifestUrl")
    return Manifests(
        dash=dash if isinstance(dash, str) and dash else None,
        hls=hls if isinstance(hls, str) and hls else None,
    )


def extract_player_response(
    player_response: dict[str, Any],
    settings: YouTubeSettings | None = None,
) -> PlayerInfo:
    """Normaliza um ytInitialPlayerResponse já parseado.

    Regras derivadas:
    - members_only: offerId da tela de erro == "sponsors_only_video"
    - has_ended: endTimestamp presente e parseável
    - manifests: só para lives (liveBroadcastDetails) reproduzíveis com
      streamingData
    - formats: só quando streamingData traz formatos

    Raises:
        UnrecognizedRendererError: Se um bloco obrigatório estiver ausente.
    """
    settings = settings or get_youtube_settings()
    details = require_mapping(player_response, VIDEO_DETAILS, PLAYER_RESPONSE)
    playability_status = require_mapping(player_response, "playabilityStatus", PLAYER_RESPONSE)
    microformat = require_mapping(
        require_mapping(player_response, "microformat", PLAYER_RESPONSE),
        PLAYER_MICROFORMAT_RENDERER,
        "microformat",
    )
    streaming_data = optional_mapping(player_response, "streamingData")

    playability = (
        Playability.OK if playability_status.get("status") == "OK" else Playability.UNPLAYABLE
    )
    keywords = details.get("keywords")
    thumbnails = require_list(
        require_mapping(details, "thumbnail", VIDEO_DETAILS), "thumbnails", VIDEO_DETAILS
    )

    fields: dict[str, Any] = {
        "video_id": require_str(details, "videoId", VIDEO_DETAILS),
        "channel_id": require_str(details, "channelId", VIDEO_DETAILS),
        "channel_name": str(details.get("author") or ""),
        "title": require_text(microformat, "title", PLAYER_MICROFORMAT_RENDERER),
        "description": get_text_or_merged_runs(microformat.get("description")) or "",
        "thumbnail": get_thumbnail(thumbnails, settings.thumbnail_sanitize_offset),
        "viewers": to_int(details.get("viewCount")) or 0,
        "length": to_int(details.get("lengthSeconds")) or 0,
        "keywords": tuple(str(keyword) for keyword in keywords) if isinstance(keywords, list) else (),
        "ratable": bool(details.get("allowRatings", False)),
        "playability": playability,
        "unlisted": bool(microformat.get("isUnlisted", False)),
        "family_safe": bool(microformat.get("isFamilySafe", False)),
        "embeddable": bool(playability_status.get("playableInEmbed", False)),
        "is_stream": bool(details.get("isLiveContent", False)),
        "members_only": _is_members_only(playability_status),
    }

    if streaming_data is not None:
        fields["formats"] = _extract_formats(streaming_data)

    broadcast = optional_mapping(microformat, "liveBroadcastDetails")
    if broadcast is not None:
        fields["live"] = bool(broadcast.get("isLiveNow", False))
        fields["start_time"] = try_parse_date(broadcast.get("startTimestamp"))
        fields["end_time"] = try_parse_date(broadcast.get("endTimestamp"))
        fields["has_ended"] = fields["end_time"] is not None
        if streaming_data is not None and playability is Playability.OK:
            fields["manifests"] = _extract_manifests(streaming_data)

    return PlayerInfo(**fields)
