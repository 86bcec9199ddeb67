from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from riichi_hand.numeric import NumericBase


class Settings(BaseSettings):
    numeric_base: NumericBase = NumericBase.int32
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    tile_gap: float = Field(default=0.0, ge=0.0)
    group_gap: float = Field(default=1 / 3, ge=0.0)

    model_config = SettingsConfigDict(env_prefix="RIICHI_HAND_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
