"""PlayerInfo - dados do player de uma página /watch ou youtu.be.

Montado a partir de ytInitialPlayerResponse (videoDetails,
playabilityStatus, microformat e streamingData).
"""

from __future__ import annotations

from datetime import datetime

from app.constants.youtube import Playability
from app.domain._youtube_record import YouTubeRecord


class FormatVideo(YouTubeRecord):
    width: int | None = None
    height: int | None = None
    fps: int | None = None


class FormatAudio(YouTubeRecord):
    sample_rate: int | None = None
    channels: int | None = None


class VideoFormat(YouTubeRecord):
    """Formato de streamingData. `url` ausente em formatos com signatureCipher."""

    url: str | None = None
    mime_type: str
    label: str | None = None
    bitrate: int
    video: FormatVideo
    audio: FormatAudio


class Manifests(YouTubeRecord):
    dash: str | None = None
    hls: str | None = None


class PlayerInfo(YouTubeRecord):
    """Registro do player.

    Attributes:
        viewers: Espectadores simultâneos em lives; total de views nos demais
        embeddable: Reproduzível fora do YouTube
        is_stream: É ou foi uma live/estreia
        live: Live acontecendo agora
        has_ended: Live encerrada (endTimestamp presente e válido)
        manifests: Só presente para lives com streamingData
        formats: Só presente quando streamingData traz formatos
        members_only: Derivado do offerId da tela de erro
    """

    video_id: str
    channel_id: str
    channel_name: str
    title: str
    description: str
    thumbnail: str
    viewers: int
    length: int
    keywords: tuple[str, ...] = ()
    ratable: bool
    playability: Playability
    unlisted: bool
    family_safe: bool
    embeddable: bool
    is_stream: bool
    live: bool = False
    has_ended: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None
    manifests: Manifests | None = None
    formats: tuple[VideoFormat, ...] | None = None
    members_only: bool = False
