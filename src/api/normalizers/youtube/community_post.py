"""Normalizer de posts da aba Comunidade.

Responsabilidades:
- Classificar o post (backstagePostRenderer ou sharedPostRenderer) em uma
  única variante de AttachmentType
- Extrair apenas o payload da variante escolhida
- Normalizar recursivamente o post citado de um sharedPostRenderer

O YouTube não manda discriminante: a variante é deduzida de qual campo
irmão está presente em `backstageAttachment`. A regra fica centralizada em
classify_post (primeira regra que casa vence).

Posts citados: a plataforma só permite citar um post original (um nível).
Isso é premissa sobre o upstream, não garantia; a recursão é limitada por
`max_shared_post_depth`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from app.constants.youtube import AttachmentType
from app.domain.community_post import (
    CommunityPost,
    ContentRun,
    PollChoice,
    PostPlaylist,
    PostVideo,
)
from config.settings.youtube import get_youtube_settings
from utils.errors import UnrecognizedRendererError

from ._extraction_helpers import (
    get_optional_thumbnail,
    get_text_or_merged_runs,
    get_thumbnail,
    optional_mapping,
    require_list,
    require_mapping,
    require_str,
    require_text,
    resolve_run_url,
)

if TYPE_CHECKING:
    from config.settings.youtube import YouTubeSettings

BACKSTAGE_POST_RENDERER = "backstagePostRenderer"
SHARED_POST_RENDERER = "sharedPostRenderer"
ATTACHMENT_KEY = "backstageAttachment"

# A ordem importa: sharedPostRenderer antes, senão o post citado sairia
# como resultado separado.
COMMUNITY_POST_KEYS: tuple[str, ...] = (SHARED_POST_RENDERER, BACKSTAGE_POST_RENDERER)

# Regras ordenadas: (marcadores em backstageAttachment, variante)
ATTACHMENT_MARKERS: tuple[tuple[tuple[str, ...], AttachmentType], ...] = (
    (("backstageImageRenderer", "postMultiImageRenderer"), AttachmentType.IMAGE),
    (("pollRenderer",), AttachmentType.POLL),
    (("videoRenderer",), AttachmentType.VIDEO),
    (("playlistRenderer",), AttachmentType.PLAYLIST),
)


def classify_post(raw: dict[str, Any]) -> AttachmentType:
    """Decide a variante do post.

    Raises:
        UnrecognizedRendererError: Se o anexo não casar com nenhum marcador.
    """
    if raw.get("originalPost"):
        return AttachmentType.SHARED_POST
    attachment = raw.get(ATTACHMENT_KEY)
    if not attachment:
        return AttachmentType.NONE
    if isinstance(attachment, dict):
        for markers, attachment_type in ATTACHMENT_MARKERS:
            if any(attachment.get(marker) is not None for marker in markers):
                return attachment_type
    raise UnrecognizedRendererError(ATTACHMENT_KEY, attachment)


def _extract_images(attachment: dict[str, Any], offset: int) -> tuple[str, ...]:
    """URLs das imagens (uma ou várias), na ordem do post."""
    single = optional_mapping(attachment, "backstageImageRenderer")
    if single is not None:
        image_renderers = [single]
    else:
        multi = require_mapping(attachment, "postMultiImageRenderer", ATTACHMENT_KEY)
        image_renderers = [
            require_mapping(item, "backstageImageRenderer", "postMultiImageRenderer")
            for item in require_list(multi, "images", "postMultiImageRenderer")
        ]
    return tuple(
        get_thumbnail(
            require_list(require_mapping(renderer, "image", "backstageImageRenderer"), "thumbnails", "image"),
            offset,
        )
        for renderer in image_renderers
    )


def _extract_choices(attachment: dict[str, Any], offset: int) -> tuple[PollChoice, ...]:
    """Alternativas da enquete em ordem; imagem só quando a alternativa tem uma."""
    poll = require_mapping(attachment, "pollRenderer", ATTACHMENT_KEY)
    choices: list[PollChoice] = []
    for raw_choice in require_list(poll, "choices", "pollRenderer"):
        choices.append(
            PollChoice(
                text=require_text(raw_choice, "text", "pollRenderer.choices"),
                image_url=get_optional_thumbnail(raw_choice.get("image"), offset),
            )
        )
    return tuple(choices)


def _extract_video(attachment: dict[str, Any], offset: int) -> PostVideo:
    """Vídeo anexado; vídeo removido sai sem id."""
    renderer = require_mapping(attachment, "videoRenderer", ATTACHMENT_KEY)
    video_id = renderer.get("videoId")
    return PostVideo(
        # Vídeo removido: sem videoId, mas com título
        id=video_id if isinstance(video_id, str) else None,
        title=require_text(renderer, "title", "videoRenderer"),
        description_snippet=get_text_or_merged_runs(renderer.get("descriptionSnippet")),
        thumbnail=get_optional_thumbnail(renderer.get("thumbnail"), offset),
    )


def _extract_playlist(attachment: dict[str, Any], offset: int) -> PostPlaylist:
    """Playlist anexada; videoCount ou videoCountText, o que vier."""
    renderer = require_mapping(attachment, "playlistRenderer", ATTACHMENT_KEY)
    playlist_id = renderer.get("playlistId")
    video_count = renderer.get("videoCount")
    if video_count is None:
        video_count = get_text_or_merged_runs(renderer.get("videoCountText"))

    thumbnails = renderer.get("thumbnails")
    first_block = thumbnails[0] if isinstance(thumbnails, list) and thumbnails else None

    return PostPlaylist(
        id=playlist_id if isinstance(playlist_id, str) else None,
        title=require_text(renderer, "title", "playlistRenderer"),
        video_count=str(video_count) if video_count is not None else None,
        thumbnail=get_optional_thumbnail(first_block, offset),
    )


_PAYLOAD_EXTRACTORS: dict[AttachmentType, tuple[str, Callable[[dict[str, Any], int], Any]]] = {
    AttachmentType.IMAGE: ("images", _extract_images),
    AttachmentType.POLL: ("choices", _extract_choices),
    AttachmentType.VIDEO: ("video", _extract_video),
    AttachmentType.PLAYLIST: ("playlist", _extract_playlist),
}


def _extract_content(raw: dict[str, Any], base_url: str) -> tuple[ContentRun, ...] | None:
    """Runs do texto do post com URLs resolvidas, ou None se não houver texto."""
    # backstagePostRenderer usa contentText; sharedPostRenderer usa content
    text_node = raw.get("contentText") or raw.get("content")
    if not isinstance(text_node, dict):
        return None
    runs = text_node.get("runs")
    if not isinstance(runs, list):
        simple_text = text_node.get("simpleText")
        return (ContentRun(text=simple_text),) if isinstance(simple_text, str) else None
    return tuple(
        ContentRun(text=str(run.get("text", "")), url=resolve_run_url(run, base_url))
        for run in runs
        if isinstance(run, dict)
    )


def _unwrap_original_post(raw: dict[str, Any]) -> dict[str, Any]:
    """Renderer interno de originalPost (backstage ou shared)."""
    original = require_mapping(raw, "originalPost", SHARED_POST_RENDERER)
    for key in (BACKSTAGE_POST_RENDERER, SHARED_POST_RENDERER):
        inner = optional_mapping(original, key)
        if inner is not None:
            return inner
    raise UnrecognizedRendererError(SHARED_POST_RENDERER, original, BACKSTAGE_POST_RENDERER)


def _extract_post(raw: dict[str, Any], settings: YouTubeSettings, depth: int) -> CommunityPost:
    """Normaliza um post que está a `depth` níveis de citação do post do topo."""
    attachment_type = classify_post(raw)
    fields: dict[str, Any] = {
        "id": require_str(raw, "postId", BACKSTAGE_POST_RENDERER),
        "attachment_type": attachment_type,
        "content": _extract_content(raw, settings.base_url),
    }

    if attachment_type is AttachmentType.SHARED_POST:
        if depth >= settings.max_shared_post_depth:
            raise UnrecognizedRendererError(
                SHARED_POST_RENDERER,
                {"postId": fields["id"]},
                reason=f"posts citados além da profundidade {settings.max_shared_post_depth}",
            )
        fields["shared_post"] = _extract_post(_unwrap_original_post(raw), settings, depth + 1)
    elif attachment_type in _PAYLOAD_EXTRACTORS:
        field_name, extractor = _PAYLOAD_EXTRACTORS[attachment_type]
        fields[field_name] = extractor(raw[ATTACHMENT_KEY], settings.thumbnail_sanitize_offset)

    return CommunityPost(**fields)


def extract_post(raw: dict[str, Any], settings: YouTubeSettings | None = None) -> CommunityPost:
    """Normaliza um backstagePostRenderer ou sharedPostRenderer.

    O conteúdo de um post compartilhado é só o texto de quem citou; o post
    original vai inteiro em `shared_post`.

    Raises:
        UnrecognizedRendererError: Variante desconhecida, campo obrigatório
            ausente ou citação além da profundidade máxima.
        UnresolvedLinkError: Run com link sem URL.
    """
    if not isinstance(raw, dict):
        raise UnrecognizedRendererError(BACKSTAGE_POST_RENDERER, raw)
    return _extract_post(raw, settings or get_youtube_settings(), depth=0)
