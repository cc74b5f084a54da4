from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Stack Manager API", alias="APP_NAME")
    api_v1_prefix: str = "/api/v1"

    database_url: str = Field(default="sqlite:///./stackmgr.db", alias="DATABASE_URL")

    docker_binary_dir: str = Field(default="/usr/local/bin", alias="DOCKER_BINARY_PATH")

    @property
    def docker_binary_path(self) -> Path:
        return Path(self.docker_binary_dir)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
