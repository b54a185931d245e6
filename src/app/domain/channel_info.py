"""ChannelInfo - metadados do canal exibido em qualquer página com ytInitialData."""

from __future__ import annotations

from pydantic import model_validator

from app.domain._youtube_record import YouTubeRecord


class ChannelInfo(YouTubeRecord):
    """Metadados de canal (channelMetadataRenderer + microformat)."""

    id: str
    name: str
    description: str
    vanity_id: str | None = None
    is_family_safe: bool
    avatar_url: str
    tags: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _vanity_differs_from_id(self) -> ChannelInfo:
        if self.vanity_id is not None and self.vanity_id == self.id:
            raise ValueError("vanity_id só existe quando difere de id")
        return self
