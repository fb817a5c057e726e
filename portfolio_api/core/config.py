"""
Configuration helpers for the portfolio backend.

Settings are read once from the environment (ledger path, catalog directory,
CORS origins, pagination limits) and cached; tests reset them with
``get_settings.cache_clear()``.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
SUPPORTED_LANGS = ("en", "it")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    likes_file: Path
    data_dir: Path
    site_dir: Path | None
    cors_origins: tuple[str, ...]
    default_lang: str
    page_size: int
    max_page_size: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path | None) -> Path | None:
        value = (value or "").strip()
        if not value:
            return default
        return Path(value).expanduser()

    def _origins(value: str | None) -> tuple[str, ...]:
        items = [item.strip().rstrip("/") for item in (value or "*").split(",")]
        return tuple(item for item in items if item) or ("*",)

    default_lang = (os.getenv("DEFAULT_LANG") or "en").strip().lower()
    if default_lang not in SUPPORTED_LANGS:
        default_lang = "en"
    max_page_size = max(_int(os.getenv("MAX_PAGE_SIZE"), 50), 1)
    page_size = min(max(_int(os.getenv("PAGE_SIZE"), 6), 1), max_page_size)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3030"), 3030),
        likes_file=_path(os.getenv("LIKES_FILE"), ROOT_DIR / "likes.json"),
        data_dir=_path(os.getenv("DATA_DIR"), ROOT_DIR / "projects"),
        site_dir=_path(os.getenv("SITE_DIR"), None),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        default_lang=default_lang,
        page_size=page_size,
        max_page_size=max_page_size,
    )
