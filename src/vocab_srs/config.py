"""Configuration management for vocab_srs.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from vocab_srs.scheduler.parameters import SM2Parameters

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "MongoSettings",
    "SchedulerSettings",
    "VocabSRSConfig",
]


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LoggingSettings(BaseSettings):
    """Log output settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_SRS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    json_output: bool = False
    driver_level: LogLevel = "WARNING"


class MongoSettings(BaseSettings):
    """MongoDB connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_SRS_MONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    uri: SecretStr = SecretStr("mongodb://localhost:27017")
    database: str = "vocab_srs"
    collection_prefix: str = ""
    # Bounds how long a review waits for a primary before failing
    server_selection_timeout_ms: int = Field(default=5000, ge=1)


class SchedulerSettings(BaseSettings):
    """SM-2 tuning knobs.

    The defaults are the production scheduling policy; override them only
    when re-scoring data that was generated under different constants.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_SRS_SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_ease_factor: float = 2.5
    min_ease_factor: float = 1.3
    failure_ease_penalty: float = 0.2
    first_interval_days: int = 1
    second_interval_days: int = 6
    hard_interval_multiplier: float = 0.7
    easy_interval_multiplier: float = 1.3
    max_interval_days: int = 365

    def to_parameters(self) -> SM2Parameters:
        """Build scheduler parameters from these settings."""
        return SM2Parameters(**self.model_dump())


class VocabSRSConfig(BaseSettings):
    """Main configuration aggregating all settings.

    Example usage:
        config = VocabSRSConfig()
        mongo_uri = config.mongo.uri.get_secret_value()
        params = config.scheduler.to_parameters()
    """

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_SRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    scheduler: SchedulerSettings = Field(default_factory=SchedulerSettings)

    # Review queue
    due_words_limit: int = Field(default=20, ge=1)
    update_max_retries: int = Field(default=3, ge=0)
