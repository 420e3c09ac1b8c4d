"""Feature settings sections."""

from infrastructure.configuration.features.language import LanguageFeatureSettings

__all__ = ["LanguageFeatureSettings"]
