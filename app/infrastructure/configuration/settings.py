"""Top-level settings for the alert language engine."""

from typing import ClassVar, Dict, Type

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.base import FeatureSettings
from infrastructure.configuration.features import LanguageFeatureSettings


class Settings(BaseSettings):
    """Process settings: deployment values plus one section per feature.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production (e.g., "dev-")
        LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Commit deployed, reported in logs

    Sections are built from the environment unless passed in, which lets
    tests inject a LanguageFeatureSettings without touching os.environ.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        override_key = settings.language.override_storage_key
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    language: LanguageFeatureSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    feature_sections: ClassVar[Dict[str, Type[FeatureSettings]]] = {
        "language": LanguageFeatureSettings,
    }

    def __init__(self, **kwargs):
        for name, section in self.feature_sections.items():
            kwargs.setdefault(name, section())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX
