"""Settings model for smb_mkdirp.

This module defines the retry and creation defaults used when building a
RemoteShare, separate from the connection's own configuration.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..models.paths import DEFAULT_MODE
from ..models.paths import parse_mode
from ..models.retry import RetryPolicy


class MkdirpSettings(BaseSettings):
    """Configuration for recursive directory creation.

    Attributes:
        max_retries: Retries per step on STATUS_PENDING (default: 5)
        base_delay_ms: First backoff delay (default: 100)
        multiplier: Backoff growth factor (default: 2)
        max_delay_ms: Backoff cap (default: 1000)
        default_mode: Creation mode when none is given (default: 0o777)
        log_level: Logging level for the CLI (default: info)

    Example:
        >>> settings = MkdirpSettings()
        >>> assert settings.max_retries == 5
        >>> assert settings.default_mode == 0o777
    """

    model_config = SettingsConfigDict(
        env_prefix="SMB_MKDIRP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_retries: int = 5
    base_delay_ms: int = 100
    multiplier: int = 2
    max_delay_ms: int = 1000
    default_mode: int = DEFAULT_MODE
    log_level: str = "info"

    @field_validator("default_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: int | str) -> int:
        """Accept modes written as octal strings ("0777", "0o755", "755")."""
        return parse_mode(v)

    @field_validator("max_retries")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_retries must be >= 0")
        return v

    @field_validator("base_delay_ms", "max_delay_ms", "multiplier")
    @classmethod
    def positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_retries=self.max_retries,
            base_delay_ms=self.base_delay_ms,
            multiplier=self.multiplier,
            max_delay_ms=self.max_delay_ms,
        )
