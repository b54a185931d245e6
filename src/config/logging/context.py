"""Contexto de extração propagado para os logs.

Guarda em ContextVar qual página/arquivo está sendo processado, para que
todo log emitido durante a extração carregue o campo `source`.

Uso:
    with extraction_context("community.html"):
        extract_community_posts(page)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_current_source: ContextVar[str] = ContextVar("extraction_source", default="")


def current_source() -> str:
    """Origem em processamento no contexto atual (vazia se nenhuma)."""
    return _current_source.get()


@contextmanager
def extraction_context(source: str) -> Iterator[str]:
    """Define a origem durante o bloco e restaura a anterior ao sair."""
    token = _current_source.set(source)
    try:
        yield source
    finally:
        _current_source.reset(token)
