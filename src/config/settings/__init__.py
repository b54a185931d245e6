"""Settings do yt-initial-data (frozen dataclasses lidas do ambiente)."""

from __future__ import annotations

from config.settings.runtime import (
    DEFAULT_SERVICE_NAME,
    Environment,
    LogFormat,
    RuntimeSettings,
    get_runtime_settings,
)
from config.settings.youtube import (
    DEFAULT_MAX_SHARED_POST_DEPTH,
    YOUTUBE_BASE_URL,
    YouTubeSettings,
    get_youtube_settings,
)

__all__ = [
    "DEFAULT_MAX_SHARED_POST_DEPTH",
    "DEFAULT_SERVICE_NAME",
    "YOUTUBE_BASE_URL",
    "Environment",
    "LogFormat",
    "RuntimeSettings",
    "YouTubeSettings",
    "get_runtime_settings",
    "get_youtube_settings",
]
