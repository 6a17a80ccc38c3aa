from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """
    Application settings.

    Values are read from environment variables (or a local .env file).
    The PG* names match the ones libpq and psql understand, so the same
    environment can drive both the service and a shell session.
    """

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 80

    # PostgreSQL connection
    PGHOST: str = "localhost"
    PGPORT: int = 5432
    PGDATABASE: str = "mydb"
    PGUSER: str = "postgres"
    PGPASSWORD: str = "password"

    # Full SQLAlchemy URL, takes precedence over the PG* settings
    DATABASE_URL: Optional[str] = None

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Startup
    SEED_SAMPLE_DATA: bool = True
    INIT_DB_FAIL_FAST: bool = True

    STATIC_DIR: Path = PACKAGE_DIR / "static"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the products database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg2",
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )
        return url.render_as_string(hide_password=False)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
