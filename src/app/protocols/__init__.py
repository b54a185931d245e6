"""Protocolos e contratos do core da aplicação."""

from .normalizer import RendererNormalizerProtocol

__all__ = [
    "RendererNormalizerProtocol",
]
