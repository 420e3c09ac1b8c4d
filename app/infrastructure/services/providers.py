"""Process-wide providers.

Components take their settings as constructor arguments; these providers
supply the defaults when a caller passes none.
"""

from functools import lru_cache

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """Settings singleton, built from the environment on first call.

    Tests that change the environment call get_settings.cache_clear().

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
