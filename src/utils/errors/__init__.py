"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MalformedPayloadError,
    MissingPayloadError,
    NoPayloadError,
    UnrecognizedRendererError,
    UnresolvedLinkError,
    YouTubeExtractionError,
)

__all__ = [
    "MalformedPayloadError",
    "MissingPayloadError",
    "NoPayloadError",
    "UnrecognizedRendererError",
    "UnresolvedLinkError",
    "YouTubeExtractionError",
]
