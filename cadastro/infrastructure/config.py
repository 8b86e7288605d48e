# cadastro/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int
    debug: bool
    cors_origins: tuple[str, ...]
    log_rejeicoes: bool


def _flag(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origens = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=_flag("API_DEBUG", "false"),
        cors_origins=tuple(o.strip() for o in origens.split(",") if o.strip()),
        log_rejeicoes=_flag("API_LOG_REJEICOES", "true"),
    )
