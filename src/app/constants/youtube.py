"""Enums de domínio para os renderers YouTube normalizados."""

from __future__ import annotations

from enum import StrEnum


class AttachmentType(StrEnum):
    """Variante de um post da aba Comunidade."""

    NONE = "NONE"
    IMAGE = "IMAGE"
    POLL = "POLL"
    VIDEO = "VIDEO"
    PLAYLIST = "PLAYLIST"
    SHARED_POST = "SHARED_POST"


class VideoRendererStatus(StrEnum):
    """Status de um item de listagem (grid ou shorts)."""

    OFFLINE = "offline"
    UPCOMING = "upcoming"
    LIVE = "live"


class Playability(StrEnum):
    """Status de reprodução do player."""

    OK = "OK"
    UNPLAYABLE = "UNPLAYABLE"
