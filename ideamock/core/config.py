from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Runtime environment
    environment: str = Field("development", validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT"))
    allow_test_mode_in_production: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Mock mode flags
    ff_use_mock_api: bool = False
    ff_mock_scenario: str = "success"
    ff_mock_variability: bool = False
    ff_simulate_latency: bool = False
    ff_min_latency: int = 500  # milliseconds
    ff_max_latency: int = 2000  # milliseconds
    ff_log_mock_requests: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
