"""Global configuration for staticreflect.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class StaticReflectConfig(BaseSettings):
    """staticreflect configuration settings.

    Values can be overridden via environment variables with STATICREFLECT_ prefix.
    Example: STATICREFLECT_STRICT_PARSING=false tolerates syntax errors.
    """

    # Parsing
    strict_parsing: bool = Field(
        default=True,
        description="Raise ParseError when the source contains syntax errors",
    )
    php_only: bool = Field(
        default=False,
        description="Parse source as bare PHP code without a leading <?php tag",
    )

    # Reflection naming
    anonymous_class_prefix: str = Field(
        default="class@anonymous",
        min_length=1,
        description="Name prefix given to reflections of anonymous classes",
    )

    model_config = {
        "env_prefix": "STATICREFLECT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> StaticReflectConfig:
    """Get cached configuration instance.

    Returns:
        StaticReflectConfig singleton instance.
    """
    return StaticReflectConfig()


def reload_config() -> StaticReflectConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh StaticReflectConfig instance.
    """
    get_config.cache_clear()
    return get_config()
