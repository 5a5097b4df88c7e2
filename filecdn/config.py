import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    database_url: str = Field(default_factory=lambda: os.getenv("DATABASE", "sqlite:///file_cdn.db"))
    storage_dir: str = Field(default_factory=lambda: os.getenv("STORAGE_DIR", "files"))
    public_url_prefix: str = Field(default_factory=lambda: os.getenv("PUBLIC_URL_PREFIX", "/public"))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
