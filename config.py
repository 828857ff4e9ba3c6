"""
Server settings, read from the environment (and an optional .env file).
"""

from functools import lru_cache
from pathlib import Path

import environ
from pydantic import BaseModel, ConfigDict

env = environ.Env(
    COLOR_TOOLS_HOST=(str, "0.0.0.0"),
    COLOR_TOOLS_PORT=(int, 8973),
    COLOR_TOOLS_LOG_LEVEL=(str, "INFO"),
    COLOR_TOOLS_MOUNT_MCP=(bool, True),
)

BASE_DIR = Path(__file__).resolve().parent
env_file = BASE_DIR / ".env"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    log_level: str
    mount_mcp: bool


@lru_cache
def get_settings() -> Settings:
    if env_file.exists():
        environ.Env.read_env(env_file)
    return Settings(
        host=env("COLOR_TOOLS_HOST"),
        port=env("COLOR_TOOLS_PORT"),
        log_level=env("COLOR_TOOLS_LOG_LEVEL").upper(),
        mount_mcp=env("COLOR_TOOLS_MOUNT_MCP"),
    )
