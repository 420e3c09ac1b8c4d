"""i18n system - supported languages and locale mapping.

Provides the closed set of alert languages and the pure functions that map
raw locale tokens (browser tags, numeric locale ids, host cultures) onto it.

Main components:
- models: TargetLanguage, SupportedLanguage, SUPPORTED_LANGUAGES
- mapping: map_token, map_lcid, map_culture
"""

from infrastructure.i18n.mapping import (
    LANGUAGE_TAGS,
    LOCALE_IDS,
    map_culture,
    map_lcid,
    map_token,
)
from infrastructure.i18n.models import (
    SUPPORTED_LANGUAGES,
    SupportedLanguage,
    TargetLanguage,
    get_supported_language,
)

__all__ = [
    "TargetLanguage",
    "SupportedLanguage",
    "SUPPORTED_LANGUAGES",
    "get_supported_language",
    "LANGUAGE_TAGS",
    "LOCALE_IDS",
    "map_token",
    "map_lcid",
    "map_culture",
]
