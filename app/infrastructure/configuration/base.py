"""Base class for feature settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Settings section read from the process environment and `.env`.

    Keys are matched case-sensitively against each field's alias, so a
    section declares its environment variable names explicitly. Unrelated
    variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
