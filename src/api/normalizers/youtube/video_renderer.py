"""Normalizers de itens de listagem: gridVideoRenderer e reelItemRenderer (shorts).

Ambos produzem VideoRenderer. O status de um item de grid vem do
overlay de tempo; shorts são sempre offline (não podem ser agendados).
"""

from __future__ import annotations

from typing import Any

from app.constants.youtube import VideoRendererStatus
from app.domain.video_renderer import VideoRenderer
from utils.errors import UnrecognizedRendererError

from ._extraction_helpers import require_list, require_str, require_text

GRID_VIDEO_RENDERER = "gridVideoRenderer"
REEL_ITEM_RENDERER = "reelItemRenderer"

GRID_VIDEO_KEYS: tuple[str, ...] = (GRID_VIDEO_RENDERER,)
REEL_ITEM_KEYS: tuple[str, ...] = (REEL_ITEM_RENDERER,)

TIME_STATUS_OVERLAY = "thumbnailOverlayTimeStatusRenderer"

STATUS_LOOKUP_TABLE: dict[str, VideoRendererStatus] = {
    "DEFAULT": VideoRendererStatus.OFFLINE,
    "SHORTS": VideoRendererStatus.OFFLINE,
    "UPCOMING": VideoRendererStatus.UPCOMING,
    "LIVE": VideoRendererStatus.LIVE,
}


def _extract_status(raw: dict[str, Any]) -> VideoRendererStatus:
    """Status pelo estilo do thumbnailOverlayTimeStatusRenderer."""
    overlays = require_list(raw, "thumbnailOverlays", GRID_VIDEO_RENDERER)
    style = next(
        (
            overlay[TIME_STATUS_OVERLAY].get("style")
            for overlay in overlays
            if isinstance(overlay, dict) and isinstance(overlay.get(TIME_STATUS_OVERLAY), dict)
        ),
        None,
    )
    status = STATUS_LOOKUP_TABLE.get(style) if isinstance(style, str) else None
    if status is None:
        raise UnrecognizedRendererError(
            GRID_VIDEO_RENDERER,
            overlays,
            reason=f"status desconhecido em {TIME_STATUS_OVERLAY}: {style!r}",
        )
    return status


def extract_grid_video_renderer(raw: dict[str, Any]) -> VideoRenderer:
    """Normaliza um gridVideoRenderer.

    Raises:
        UnrecognizedRendererError: Campo obrigatório ausente ou estilo de
            overlay fora de STATUS_LOOKUP_TABLE.
    """
    return VideoRenderer(
        id=require_str(raw, "videoId", GRID_VIDEO_RENDERER),
        title=require_text(raw, "title", GRID_VIDEO_RENDERER),
        status=_extract_status(raw),
    )


def extract_reel_item_renderer(raw: dict[str, Any]) -> VideoRenderer:
    """Normaliza um reelItemRenderer (shorts); status é sempre offline."""
    return VideoRenderer(
        id=require_str(raw, "videoId", REEL_ITEM_RENDERER),
        title=require_text(raw, "headline", REEL_ITEM_RENDERER),
        status=VideoRendererStatus.OFFLINE,
    )
