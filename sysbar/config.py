from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- output ---
    mode: Literal["bar", "console"] = "bar"
    light_background: bool = False

    # --- collectors ---
    disk_path: str = "/"
    core_sample_interval: float = 0.0  # seconds, 0 = non-blocking sample

    # --- logging ---
    log_level: str = "WARNING"

    model_config = {"env_file": ".env", "env_prefix": "SYSBAR_"}
