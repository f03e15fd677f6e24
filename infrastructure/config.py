"""
Configuración leída de variables de entorno (y de un `.env` opcional).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def env_list(name: str, default: str = "*") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",")]


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    reload: bool
    log_level: str
    task_store: str
    mongodb_uri: str
    mongo_db_name: str
    database_url: str
    cors_origins: list[str]
    cors_allow_credentials: bool
    cors_allow_methods: list[str]
    cors_allow_headers: list[str]

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=os.getenv("HOST", "127.0.0.1"),
            port=env_int("PORT", 5000),
            reload=env_bool("RELOAD", False),
            log_level=os.getenv("LOG_LEVEL", "info"),
            task_store=os.getenv("TASK_STORE", "mongo").lower(),
            mongodb_uri=os.getenv(
                "MONGODB_URI", "mongodb://localhost:27017/task-management"
            ),
            mongo_db_name=os.getenv("MONGO_DB_NAME", "task-management"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///tasks.db"),
            cors_origins=env_list("CORS_ORIGINS"),
            cors_allow_credentials=env_bool("CORS_ALLOW_CREDENTIALS", True),
            cors_allow_methods=env_list("CORS_ALLOW_METHODS"),
            cors_allow_headers=env_list("CORS_ALLOW_HEADERS"),
        )


@dataclass(frozen=True, slots=True)
class ClientSettings:
    api_url: str
    api_timeout: float
    local_db: str
    offline_fallback: bool
    page_size: int
    log_level: str

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_url=os.getenv("TASKS_API_URL", "http://localhost:5000").rstrip("/"),
            api_timeout=env_float("TASKS_API_TIMEOUT", 10.0),
            local_db=os.getenv("TASKS_LOCAL_DB", "sqlite:///tasks_local.db"),
            offline_fallback=env_bool("TASKS_OFFLINE_FALLBACK", True),
            page_size=env_int("TASKS_PAGE_SIZE", 6),
            log_level=os.getenv("LOG_LEVEL", "warning"),
        )
