from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_DB_PATH = './stardict.db'
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8000
DEFAULT_POOL_SIZE = 16

@dataclass(frozen=True)
class Settings:
    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    pool_size: int = DEFAULT_POOL_SIZE
    log_level: str = 'INFO'
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ('*',))

    @classmethod
    def from_env(cls) -> Settings:
        pool_size = _int_env('ECDICT_POOL_SIZE', DEFAULT_POOL_SIZE)
        if pool_size < 1:
            raise ValueError(f"ECDICT_POOL_SIZE must be at least 1, got {pool_size}")
        origins = os.getenv('ECDICT_CORS_ORIGINS', '*')
        return cls(
            db_path=os.getenv('ECDICT_DB_PATH', DEFAULT_DB_PATH),
            host=os.getenv('ECDICT_HOST', DEFAULT_HOST),
            port=_int_env('ECDICT_PORT', DEFAULT_PORT),
            pool_size=pool_size,
            log_level=os.getenv('ECDICT_LOG_LEVEL', 'INFO').upper(),
            cors_origins=tuple(o.strip() for o in origins.split(',') if o.strip()),
        )

def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
