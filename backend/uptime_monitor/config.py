"""Application configuration from environment variables."""
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WebsiteSeed(BaseModel):
    """A website registered at startup."""
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


DEFAULT_WEBSITES = [
    WebsiteSeed(name="eGuardian", url="https://eguardian.com"),
    WebsiteSeed(name="KTI Sri Lanka", url="https://kti.lk"),
    WebsiteSeed(name="KTI India", url="https://ktiindia.com"),
    WebsiteSeed(name="DCS Asia", url="https://dcsasia.net"),
    WebsiteSeed(name="Kiddoz", url="https://kiddoz.lk"),
    WebsiteSeed(name="DeltaSpike", url="https://deltaspike.io"),
    WebsiteSeed(name="AlphaSpike", url="https://alphaspike.io"),
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Web server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, gt=0, lt=65536)

    # Polling
    check_interval_ms: int = Field(default=5000, gt=0)
    response_threshold_ms: int = Field(default=5000, gt=0)
    probe_timeout_ms: int = Field(default=10000, gt=0)
    max_concurrent_checks: int = Field(default=10, gt=0)

    # History retention
    history_limit: int = Field(default=1000, gt=0)
    combined_history_limit: int = Field(default=1000, gt=0)
    feed_limit: int = Field(default=50, gt=0)

    # Initial targets, JSON encoded when set through the environment:
    # WEBSITES='[{"name": "Example", "url": "https://example.com"}]'
    websites: List[WebsiteSeed] = Field(default_factory=lambda: list(DEFAULT_WEBSITES))

    # SecurityScorecard passthrough
    scorecard_url: str = (
        "https://api.securityscorecard.io/companies/eguardian.com/history/events"
    )
    scorecard_token: Optional[str] = None
    scorecard_timeout_ms: int = Field(default=10000, gt=0)

    log_level: str = "INFO"


settings = Settings()
