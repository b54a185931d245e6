"""Configuração do pytest para o projeto yt-initial-data."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_settings_cache():
    """Evita que settings cacheadas vazem entre testes que mexem em env vars."""
    from config.settings import get_runtime_settings, get_youtube_settings

    get_runtime_settings.cache_clear()
    get_youtube_settings.cache_clear()
    yield
    get_runtime_settings.cache_clear()
    get_youtube_settings.cache_clear()
