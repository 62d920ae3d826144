from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .fingerprint import DEFAULT_CHUNK_SIZE


ENV_CAPACITY = "DUPFINDER_CAPACITY"
ENV_CHUNK_SIZE = "DUPFINDER_CHUNK_SIZE"


@dataclass
class DupfinderConfig:
    capacity: Optional[int] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE


def load_env_file(path: str | os.PathLike[str] | None = None) -> bool:
    """Load a .env file (default ./.env) without overriding the environment."""
    env_path = Path(path) if path else Path(".env")
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)


def _positive_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def config_from_env(environ: Mapping[str, str] | None = None) -> DupfinderConfig:
    env = os.environ if environ is None else environ
    chunk_size = _positive_int(env, ENV_CHUNK_SIZE)
    return DupfinderConfig(
        capacity=_positive_int(env, ENV_CAPACITY),
        chunk_size=chunk_size or DEFAULT_CHUNK_SIZE,
    )
