"""VideoRenderer - item de listagem (gridVideoRenderer ou reelItemRenderer)."""

from __future__ import annotations

from app.constants.youtube import VideoRendererStatus
from app.domain._youtube_record import YouTubeRecord


class VideoRenderer(YouTubeRecord):
    id: str
    title: str
    status: VideoRendererStatus
