"""Locale token mapping.

Maps raw locale tokens reported by browsers, user profiles and the hosting
platform onto the closed set of TargetLanguage codes. All functions are pure
and total: unknown input yields None and the caller decides the fallback.
"""

from typing import Dict, Optional, Union

from infrastructure.i18n.models import TargetLanguage

# Regional variants without their own content are merged into the closest
# supported language.
LANGUAGE_TAGS: Dict[str, TargetLanguage] = {
    "en": TargetLanguage.EN_US,
    "en-us": TargetLanguage.EN_US,
    "en-gb": TargetLanguage.EN_US,
    "fr": TargetLanguage.FR_FR,
    "fr-fr": TargetLanguage.FR_FR,
    "fr-ca": TargetLanguage.FR_FR,
    "de": TargetLanguage.DE_DE,
    "de-de": TargetLanguage.DE_DE,
    "es": TargetLanguage.ES_ES,
    "es-es": TargetLanguage.ES_ES,
    "sv": TargetLanguage.SV_SE,
    "sv-se": TargetLanguage.SV_SE,
    "fi": TargetLanguage.FI_FI,
    "fi-fi": TargetLanguage.FI_FI,
    "da": TargetLanguage.DA_DK,
    "da-dk": TargetLanguage.DA_DK,
    "nb": TargetLanguage.NB_NO,
    "nb-no": TargetLanguage.NB_NO,
    "no": TargetLanguage.NB_NO,
}

# Legacy numeric locale identifiers (LCIDs) used by host culture settings.
LOCALE_IDS: Dict[int, TargetLanguage] = {
    1033: TargetLanguage.EN_US,
    2057: TargetLanguage.EN_US,
    1036: TargetLanguage.FR_FR,
    3084: TargetLanguage.FR_FR,
    1031: TargetLanguage.DE_DE,
    1034: TargetLanguage.ES_ES,
    1053: TargetLanguage.SV_SE,
    1035: TargetLanguage.FI_FI,
    1030: TargetLanguage.DA_DK,
    1044: TargetLanguage.NB_NO,
}


def normalize_tag(token: str) -> str:
    """Normalize a language tag for table lookup ("en_US " -> "en-us")."""
    return token.strip().lower().replace("_", "-")


def map_token(token: Optional[str]) -> Optional[TargetLanguage]:
    """Map a BCP 47 like language tag to a supported language.

    Exact tags are looked up first. A tag missing from the table falls back
    to its primary subtag, so "de-lu" resolves through "de".

    Args:
        token: Raw language tag (e.g., "en-US", "fr_CA", "nb").

    Returns:
        Matching TargetLanguage, or None if the token is unknown.
    """
    if not isinstance(token, str):
        return None

    tag = normalize_tag(token)
    if not tag:
        return None

    language = LANGUAGE_TAGS.get(tag)
    if language is not None:
        return language

    primary = tag.split("-")[0]
    return LANGUAGE_TAGS.get(primary)


def map_lcid(lcid: Optional[int]) -> Optional[TargetLanguage]:
    """Map a legacy numeric locale identifier to a supported language.

    Args:
        lcid: Numeric locale id (e.g., 1033).

    Returns:
        Matching TargetLanguage, or None if the id is unknown.
    """
    if isinstance(lcid, bool) or not isinstance(lcid, int):
        return None
    return LOCALE_IDS.get(lcid)


def map_culture(value: Union[str, int, None]) -> Optional[TargetLanguage]:
    """Map a host culture value that may be numeric or a tag.

    Digit-only strings are treated as numeric locale identifiers.

    Args:
        value: Host culture (e.g., 1036, "1036", "fr-FR").

    Returns:
        Matching TargetLanguage, or None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return map_lcid(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit():
            return map_lcid(int(stripped))
        return map_token(stripped)
    return None
