from functools import lru_cache
from pathlib import Path
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    _PROJECT_DIR / ".env.local",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Mini_Cini API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]

    # Store — either a full URL, or the discrete DB_* variables of a MySQL deployment
    database_url: str = "sqlite:///mini_cini.db"
    db_host: str | None = None
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "mini_cini_db"
    db_pool_size: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Build the store URL from DB_HOST & co. when they are provided."""
        if self.db_host:
            url = (
                f"mysql://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
            object.__setattr__(self, "database_url", url)

    @property
    def sql_echo(self) -> bool:
        """Echo SQL only when developing with the SQL log category at DEBUG."""
        return self.app_env == "development" and self.log_level_sql.strip().upper() == "DEBUG"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
