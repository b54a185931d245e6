"""Leitura tipada de variáveis de ambiente para as settings."""

from __future__ import annotations

from collections.abc import Mapping

_TRUTHY = frozenset({"true", "1", "yes", "on"})


def env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name, "").strip()
    return value or default


def env_bool(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    """Inteiro da env var `name`.

    Raises:
        ValueError: Se o valor não for um inteiro (mensagem cita a variável).
    """
    value = environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} deve ser inteiro, obtido {value!r}") from None
