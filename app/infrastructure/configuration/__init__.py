"""Settings for the alert language engine.

Settings aggregates deployment values (PREFIX, LOG_LEVEL, GIT_SHA) and one
section per feature; LanguageFeatureSettings holds the LANGUAGE_* variables.
Read them through infrastructure.services.get_settings().
"""

from infrastructure.configuration.features import LanguageFeatureSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "LanguageFeatureSettings"]
