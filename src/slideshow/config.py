"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slideshow.datasets import default_dataset_names

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_WINDOW_CAP = 20001


class Settings(BaseSettings):
    """Run settings loaded from environment variables."""

    window_cap: int = DEFAULT_WINDOW_CAP
    input_dir: Path = Path("src")
    output_dir: Path = Path(".")
    datasets: list[str] = Field(default_factory=default_dataset_names)
    max_workers: int | None = None
    executor: Literal["process", "thread"] = "process"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="SLIDESHOW_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
