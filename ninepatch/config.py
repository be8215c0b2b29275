"""Настройки масштабирования и приложения из переменных окружения."""
from __future__ import annotations

from typing import Tuple

from pydantic_settings import BaseSettings

# dp -> px для значений, пришедших не из редактора nine-patch
LOGICAL_UNIT_PIXEL_FACTOR = 4

# Маркер растяжения: строго непрозрачный чёрный
MARKER_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 255)


class Settings(BaseSettings):
    log_level: str = "info"

    # Design resolution -> target resolution
    design_width: float = 1440
    design_height: float = 2560
    target_design_width: float = 1080
    target_design_height: float = 1920

    model_config = {"env_prefix": "NINEPATCH_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
