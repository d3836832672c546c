"""Runtime configuration for Worldle Core."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WORLDLE_", env_file=".env", extra="ignore")

    app_name: str = "worldle-core"
    log_level: str = "INFO"
    language: str = "en"
    distance_unit: Literal["km", "miles"] = "km"
    theme: Literal["light", "dark"] = "light"
    auto_continue: bool = False
    no_image_mode: bool = False
    rotation_mode: bool = False
    catalog_path: str | None = Field(
        default=None,
        description="Directory holding countries.json and names/<language>.json; defaults to the packaged data.",
    )


settings = Settings()
