"""Server manager configuration via environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerManagerSettings(BaseSettings):
    model_config = {"env_prefix": "SERVER_MANAGER_"}

    log_dir: str = Field(default="backend/logs/servermanager", min_length=1)
    config_path: Path | None = None  # YAML list of servers to seed the registry with
