"""Settings da extração YouTube.

Parâmetros de ytInitialData/ytInitialPlayerResponse. Nada aqui envolve
credenciais: a biblioteca não faz requisições.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from config.settings._env import env_bool, env_int, env_str

YOUTUBE_BASE_URL: str = "https://www.youtube.com"

# A plataforma só permite citar um nível; 4 é folga.
DEFAULT_MAX_SHARED_POST_DEPTH: int = 4


@dataclass(frozen=True)
class YouTubeSettings:
    """Configurações da extração YouTube.

    Attributes:
        base_url: Base para resolver URLs relativas de navigationEndpoint
        max_shared_post_depth: Profundidade máxima de posts citados
        thumbnail_sanitize_offset: Quantos segmentos `=` manter em sanitize_url
        skip_invalid_renderers: Descarta renderers desconhecidos em vez de falhar
    """

    base_url: str = YOUTUBE_BASE_URL
    max_shared_post_depth: int = DEFAULT_MAX_SHARED_POST_DEPTH
    thumbnail_sanitize_offset: int = 0
    skip_invalid_renderers: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> YouTubeSettings:
        """Monta a partir das variáveis YOUTUBE_*.

        Raises:
            ValueError: Se uma variável numérica não for inteira.
        """
        environ = os.environ if environ is None else environ
        return cls(
            base_url=env_str(environ, "YOUTUBE_BASE_URL", YOUTUBE_BASE_URL),
            max_shared_post_depth=env_int(
                environ, "YOUTUBE_MAX_SHARED_POST_DEPTH", DEFAULT_MAX_SHARED_POST_DEPTH
            ),
            thumbnail_sanitize_offset=env_int(environ, "YOUTUBE_THUMBNAIL_SANITIZE_OFFSET", 0),
            skip_invalid_renderers=env_bool(environ, "YOUTUBE_SKIP_INVALID_RENDERERS"),
        )

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"YOUTUBE_BASE_URL inválida: {self.base_url}")
        if self.max_shared_post_depth < 1:
            errors.append("YOUTUBE_MAX_SHARED_POST_DEPTH deve ser >= 1")
        if self.thumbnail_sanitize_offset < 0:
            errors.append("YOUTUBE_THUMBNAIL_SANITIZE_OFFSET deve ser >= 0")
        return errors


@lru_cache(maxsize=1)
def get_youtube_settings() -> YouTubeSettings:
    """Instância cacheada lida do ambiente do processo."""
    return YouTubeSettings.from_env()
