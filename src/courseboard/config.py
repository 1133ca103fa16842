"""Application settings, read from the environment and an optional ``.env`` file."""
from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from courseboard.domain.entities import EntityKind


def _default_store_paths() -> dict[str, str]:
    return {kind.value: f"/{kind.value}" for kind in EntityKind}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Record store the loader reads from
    STORE_BASE_URL: str = "http://127.0.0.1:8080"
    STORE_API_KEY: SecretStr | None = None
    STORE_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    STORE_PATHS: dict[str, str] = Field(default_factory=_default_store_paths)

    UPCOMING_LIMIT: int = Field(default=5, ge=1)

    # FastAPI backend the Streamlit UI talks to
    DASHBOARD_API_URL: str = "http://127.0.0.1:8000"

    LOG_LEVEL: str = "INFO"

    def store_path(self, kind: EntityKind | str) -> str:
        key = kind.value if isinstance(kind, EntityKind) else kind
        return self.STORE_PATHS.get(key, f"/{key}")


settings = Settings()
