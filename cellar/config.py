from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CELLAR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Data source: filesystem path or http(s) URL
    source: str = Field(
        default_factory=lambda: str(Path(__file__).parent / "data" / "wines.csv"),
    )
    request_timeout: float = Field(default=10.0, gt=0)

    # Expand state keyed by bare varietal, shared between red and white
    shared_expand_keys: bool = Field(default=False)

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)


settings = Settings()
