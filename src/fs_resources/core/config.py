"""Configuration management for fs-resources."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    otel_enabled: bool = False
    otel_service_name: str = "fs-resources"

    # Chunk size used when streaming content through a digest or into a new file
    hash_chunk_size: int = Field(default=8192, gt=0)
    # Leading bytes handed to the content-type detector
    sniff_bytes: int = Field(default=8192, gt=0)

    model_config = {
        "env_prefix": "FS_RESOURCES_",
        "case_sensitive": False,
    }


settings = Settings()
