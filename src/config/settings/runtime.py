"""Settings de execução: ambiente, nome do serviço e logging.

Só o ponto de entrada (CLI ou aplicação consumidora) lê estas settings;
os normalizers nunca configuram logging.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings._env import env_bool, env_str

Environment = Literal["development", "staging", "production"]
LogFormat = Literal["json", "text"]

DEFAULT_SERVICE_NAME = "yt-initial-data"
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}


def parse_environment(raw: str) -> Environment:
    """Normaliza aliases de ambiente; desconhecidos viram development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@dataclass(frozen=True)
class RuntimeSettings:
    """Configurações de execução.

    Attributes:
        environment: development|staging|production
        service_name: Campo `service` de cada log
        debug: Liga DEBUG quando LOG_LEVEL não foi informado
        log_level: Nível aplicado em configure_logging
        log_format: "json" (padrão) ou "text" para leitura no terminal
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = "INFO"
    log_format: LogFormat = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuntimeSettings:
        """Monta a partir de ENVIRONMENT, SERVICE_NAME, DEBUG, LOG_LEVEL e LOG_FORMAT."""
        environ = os.environ if environ is None else environ
        debug = env_bool(environ, "DEBUG")
        log_format = env_str(environ, "LOG_FORMAT", "json").lower()
        return cls(
            environment=parse_environment(environ.get("ENVIRONMENT", "")),
            service_name=env_str(environ, "SERVICE_NAME", DEFAULT_SERVICE_NAME),
            debug=debug,
            log_level=env_str(environ, "LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
            log_format="text" if log_format == "text" else "json",
        )

    def validate(self) -> list[str]:
        """Retorna a lista de erros (vazia = OK)."""
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if self.log_format not in ("json", "text"):
            errors.append(f"LOG_FORMAT inválido: {self.log_format}")
        return errors


@lru_cache(maxsize=1)
def get_runtime_settings() -> RuntimeSettings:
    """Instância cacheada lida do ambiente do processo."""
    return RuntimeSettings.from_env()
