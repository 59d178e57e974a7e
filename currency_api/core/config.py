"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings exposed via dependency injection throughout the app."""

    # Read .env with BOM tolerance; case-sensitive keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=True,
    )

    APP_NAME: str = "Currency API"
    ENV: str = "dev"  # dev | staging | prod
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # plain text lines when False, handy for local runs

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = Field(default_factory=list)

    # DB
    DB_URL: str | None = None  # full SQLAlchemy URL, wins over the DB_* parts
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""  # set via env/.env
    DB_NAME: str = "currency"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # NBP exchange rates API (table C carries bid/ask quotes)
    NBP_API_BASE_URL: str = "https://api.nbp.pl/api/exchangerates/rates/c"
    # Quotes are pinned to a historical table date; the live endpoints do not
    # follow the calendar.
    NBP_RATES_DATE: str = "2024-07-26"
    NBP_TIMEOUT_SEC: float = 10.0

    # Rate limit for the endpoint that hits the NBP API and writes rates.
    # See currency_api.core.rate_limit.limiter for syntax.
    FX_REFRESH_RATE: str = "10/minute"

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
