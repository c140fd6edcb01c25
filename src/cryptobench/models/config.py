"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cryptobench.utils.validators import is_valid_url

SUPPORTED_RSA_KEY_SIZES = (1024, 2048, 3072, 4096)
SUPPORTED_ECC_KEY_SIZES = (256, 384, 521)
MAX_BATCH_SIZE = 200
MIN_DATA_SIZE = 1
MAX_DATA_SIZE = 100_000


class Config(BaseSettings):
    """Benchmark configuration loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = "http://localhost:8080/api"
    api_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    rsa_key_size: int = 2048
    ecc_key_size: int = 256
    default_data_size: int = 150
    default_batch_size: int = 20
    leg_delay_seconds: float = 0.5
    iteration_delay_seconds: float = 0.2
    comparison_delay_seconds: float = 1.0
    history_size: int = 5
    max_retry_attempts: int = 2
    exclude_key_generation: bool = False
    use_rsa_hybrid: bool = False

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, value: str) -> str:
        """Base URL must be an http(s) URL; trailing slashes are dropped."""
        if not is_valid_url(value):
            msg = "api_base_url must be a valid http or https URL"
            raise ValueError(msg)
        return value.rstrip("/")

    @field_validator("api_timeout_seconds")
    @classmethod
    def validate_api_timeout(cls, value: float) -> float:
        if value <= 0:
            msg = "api_timeout_seconds must be greater than 0"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("rsa_key_size")
    @classmethod
    def validate_rsa_key_size(cls, value: int) -> int:
        if value not in SUPPORTED_RSA_KEY_SIZES:
            msg = f"rsa_key_size must be one of {SUPPORTED_RSA_KEY_SIZES}"
            raise ValueError(msg)
        return value

    @field_validator("ecc_key_size")
    @classmethod
    def validate_ecc_key_size(cls, value: int) -> int:
        if value not in SUPPORTED_ECC_KEY_SIZES:
            msg = f"ecc_key_size must be one of {SUPPORTED_ECC_KEY_SIZES}"
            raise ValueError(msg)
        return value

    @field_validator("default_data_size")
    @classmethod
    def validate_default_data_size(cls, value: int) -> int:
        """Data size must be between 1 and 100000 characters."""
        if not MIN_DATA_SIZE <= value <= MAX_DATA_SIZE:
            msg = "default_data_size must be between 1 and 100000"
            raise ValueError(msg)
        return value

    @field_validator("default_batch_size")
    @classmethod
    def validate_default_batch_size(cls, value: int) -> int:
        if value < 1 or value > MAX_BATCH_SIZE:
            msg = f"default_batch_size must be between 1 and {MAX_BATCH_SIZE}"
            raise ValueError(msg)
        return value

    @field_validator("leg_delay_seconds", "iteration_delay_seconds", "comparison_delay_seconds")
    @classmethod
    def validate_delay(cls, value: float) -> float:
        """Delays must be non-negative."""
        if value < 0:
            msg = "delays must be non-negative"
            raise ValueError(msg)
        return value

    @field_validator("history_size")
    @classmethod
    def validate_history_size(cls, value: int) -> int:
        if value < 1:
            msg = "history_size must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("max_retry_attempts")
    @classmethod
    def validate_max_retry_attempts(cls, value: int) -> int:
        """Max retry attempts must be between 0 and 5."""
        if value < 0 or value > 5:
            msg = "max_retry_attempts must be between 0 and 5"
            raise ValueError(msg)
        return value
