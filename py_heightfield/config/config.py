from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Heightfield Defaults
    default_width: int = Field(default=64, description="Default heightfield width")
    default_height: int = Field(default=64, description="Default heightfield height")
    default_min_height: float = Field(default=0.0, description="Default minimum height")
    default_max_height: float = Field(default=100.0, description="Default maximum height")
    default_octave_count: int = Field(default=3, description="Default refinement octaves")
    max_map_width: int = Field(default=2048, description="Max allowed heightfield width")
    max_map_height: int = Field(default=2048, description="Max allowed heightfield height")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
