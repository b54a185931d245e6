"""Base comum dos registros YouTube normalizados."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class YouTubeRecord(BaseModel):
    """Snapshot imutável; campos None não fazem parte da saída."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        """Converte para dict JSON-compatível (sem None)."""
        return self.model_dump(mode="json", exclude_none=True)
