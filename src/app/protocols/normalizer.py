"""Protocolos de normalização de renderers."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

RecordT_co = TypeVar("RecordT_co", covariant=True)


class RendererNormalizerProtocol(Protocol[RecordT_co]):
    """Contrato mínimo: um renderer bruto vira um registro tipado."""

    def __call__(self, raw: Any, /) -> RecordT_co: ...
