from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    database_url: str
    log_level: str = "INFO"
    log_dir: str = "logs"
    server_host: str = "0.0.0.0"
    server_port: int = 5000


load_env()

DEFAULT_DATABASE_URL = f"sqlite:///{(PROJECT_ROOT / 'beavertask.db').as_posix()}"

SETTINGS = Settings(
    api_base_url=os.getenv("API_BASE_URL", "http://127.0.0.1:5000").strip().rstrip("/"),
    database_url=os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    server_host=os.getenv("SERVER_HOST", "0.0.0.0"),
    server_port=int(os.getenv("SERVER_PORT", "5000")),
)
