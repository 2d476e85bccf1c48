"""Application settings loaded from the environment and .env."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Benchmark & risk-free rate used when a caller does not supply them
    benchmark_ticker: str = "^GSPC"
    risk_free_rate: float = Field(default=0.02, gt=-1.0)

    # Yahoo chart price provider
    yahoo_base_url: str = "https://query1.finance.yahoo.com"
    http_timeout_seconds: float = Field(default=20.0, gt=0.0)
    history_cache_ttl_seconds: float = Field(default=900.0, ge=0.0)
    max_attempts: int = Field(default=3, ge=1)
    retry_delay_seconds: float = Field(default=0.3, ge=0.0)
    user_agent: str = _DEFAULT_USER_AGENT


settings = Settings()
