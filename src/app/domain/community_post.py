"""CommunityPost - post da aba Comunidade, união rotulada por AttachmentType.

Cada variante popula exatamente um campo de payload:

    IMAGE       -> images
    POLL        -> choices
    VIDEO       -> video
    PLAYLIST    -> playlist
    SHARED_POST -> shared_post
    NONE        -> nenhum

`content` pode aparecer em qualquer variante.
"""

from __future__ import annotations

from pydantic import model_validator

from app.constants.youtube import AttachmentType
from app.domain._youtube_record import YouTubeRecord

PAYLOAD_FIELD_BY_TYPE: dict[AttachmentType, str | None] = {
    AttachmentType.NONE: None,
    AttachmentType.IMAGE: "images",
    AttachmentType.POLL: "choices",
    AttachmentType.VIDEO: "video",
    AttachmentType.PLAYLIST: "playlist",
    AttachmentType.SHARED_POST: "shared_post",
}


class ContentRun(YouTubeRecord):
    """Trecho de texto rico; `url` presente quando o trecho é um link."""

    text: str
    url: str | None = None


class PollChoice(YouTubeRecord):
    text: str
    image_url: str | None = None


class PostVideo(YouTubeRecord):
    """Vídeo anexado. Vídeos removidos não têm `id`."""

    id: str | None = None
    title: str
    description_snippet: str | None = None
    thumbnail: str | None = None


class PostPlaylist(YouTubeRecord):
    """Playlist anexada. Playlists removidas não têm `id`."""

    id: str | None = None
    title: str
    video_count: str | None = None
    thumbnail: str | None = None


class CommunityPost(YouTubeRecord):
    """Post normalizado (backstagePostRenderer ou sharedPostRenderer)."""

    id: str
    attachment_type: AttachmentType
    content: tuple[ContentRun, ...] | None = None

    images: tuple[str, ...] | None = None
    choices: tuple[PollChoice, ...] | None = None
    video: PostVideo | None = None
    playlist: PostPlaylist | None = None
    shared_post: CommunityPost | None = None

    @model_validator(mode="after")
    def _single_payload_matches_tag(self) -> CommunityPost:
        expected = PAYLOAD_FIELD_BY_TYPE[self.attachment_type]
        for field_name in PAYLOAD_FIELD_BY_TYPE.values():
            if field_name is None:
                continue
            populated = getattr(self, field_name) is not None
            if populated != (field_name == expected):
                raise ValueError(
                    f"attachment_type {self.attachment_type} incompatível com campo {field_name}"
                )
        return self

    @property
    def text(self) -> str:
        """Texto puro do post (runs concatenados)."""
        return "".join(run.text for run in self.content or ())
