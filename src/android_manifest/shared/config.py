"""Environment-aware configuration with validation.

This module provides centralized configuration management using Pydantic Settings.
All environment variables are validated on first access to fail fast on misconfigurations.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ANDROID_NAMESPACE = "http://schemas.android.com/apk/res/android"


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Every setting has a default, so the library works without any
    environment configuration. Settings are cached to avoid repeated parsing.

    Example:
        >>> settings = get_settings()
        >>> print(settings.whitespace_mode)
        'strip_all'
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Attribute list wire format
    whitespace_mode: Literal["strip_all", "trim"] = Field(
        default="strip_all",
        alias="ATTRIBUTE_LIST_WHITESPACE_MODE",
        description=(
            "How whitespace in a delimited value list is handled before splitting: "
            "'strip_all' removes every whitespace character (wire compatible), "
            "'trim' only removes whitespace around delimiters and at the ends"
        ),
    )

    # XML event stream
    skip_whitespace_events: bool = Field(
        default=True,
        alias="XML_SKIP_WHITESPACE_EVENTS",
        description="Drop whitespace-only text between elements when reading XML",
    )
    android_namespace: str = Field(
        default=ANDROID_NAMESPACE,
        alias="ANDROID_NAMESPACE",
        description="Namespace URI bound to the 'android' prefix",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("android_namespace", mode="before")
    @classmethod
    def validate_android_namespace(cls, v: str) -> str:
        """Ensure the namespace is an absolute URI."""
        if not v or "://" not in v:
            raise ValueError("Android namespace must be an absolute URI")
        return v

    @property
    def strips_all_whitespace(self) -> bool:
        """Check if the wire-compatible whitespace handling is active."""
        return self.whitespace_mode == "strip_all"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached library settings.

    Settings are loaded once and cached for the lifetime of the process.

    Returns:
        Validated Settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when environment variables change.
    """
    get_settings.cache_clear()
