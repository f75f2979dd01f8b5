import os
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Pydantic v2 settings config (do NOT also declare inner Config)
    model_config = SettingsConfigDict(
        env_prefix="FAKECHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra='ignore',  # ignore unknown keys in .env to prevent startup crashes
    )

    # browser launch
    headless: bool = Field(default=True)
    executable_path: Optional[str] = Field(default=None)  # override the bundled Chromium
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/124.0.0.0 Safari/537.36"
        )
    )
    chromium_args: List[str] = Field(
        default_factory=lambda: [
            "--disable-blink-features=AutomationControlled",
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-dev-shm-usage",
            "--disable-gpu",
        ]
    )
    viewport_width: int = Field(default=1280)
    viewport_height: int = Field(default=800)

    # timeouts
    navigation_timeout_ms: int = Field(default=30000)
    analysis_timeout_ms: int = Field(default=60000)
    settle_ms: int = Field(default=5000)         # wait after domcontentloaded
    overlay_wait_ms: int = Field(default=1000)   # wait after dismissing a login overlay

    # temp files for downloaded profile pictures
    staging_dir: str = Field(default="data/tmp")

    # api server bind
    api_host: str = Field(default_factory=lambda: os.getenv("API_HOST", "127.0.0.1"))
    api_port: int = Field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))


settings = Settings()
