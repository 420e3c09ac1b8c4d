"""Language models for the i18n system.

Defines the closed set of languages alert content can target and the
display metadata used by authoring surfaces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class TargetLanguage(str, Enum):
    """Supported alert language codes.

    Codes are lower-cased BCP 47 style tags (e.g., en-us, fr-fr). ALL is a
    sentinel for content that targets every viewer language.
    """

    EN_US = "en-us"
    FR_FR = "fr-fr"
    DE_DE = "de-de"
    ES_ES = "es-es"
    SV_SE = "sv-se"
    FI_FI = "fi-fi"
    DA_DK = "da-dk"
    NB_NO = "nb-no"
    ALL = "all"

    @classmethod
    def from_string(cls, language_str: str) -> "TargetLanguage":
        """Convert string to TargetLanguage enum.

        Args:
            language_str: Language code (e.g., "en-us", "FR-FR").

        Returns:
            Matching TargetLanguage enum value.

        Raises:
            ValueError: If language string is not supported.
        """
        if isinstance(language_str, cls):
            return language_str
        try:
            return cls(str(language_str).strip().lower())
        except ValueError as e:
            raise ValueError(f"Unsupported language: {language_str}") from e

    @classmethod
    def concrete(cls) -> List["TargetLanguage"]:
        """Return every real language, excluding the ALL sentinel."""
        return [language for language in cls if language is not cls.ALL]

    @property
    def is_concrete(self) -> bool:
        return self is not TargetLanguage.ALL

    @property
    def language(self) -> str:
        """Get language part of the code (e.g., "en" from "en-us").

        Returns:
            Language code.
        """
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        """Get region part of the code (e.g., "us" from "en-us").

        Returns:
            Region code, or empty string for the ALL sentinel.
        """
        parts = self.value.split("-")
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class SupportedLanguage:
    """Display metadata for a supported language.

    Attributes:
        code: The TargetLanguage this entry describes.
        name: English display name.
        native_name: Name of the language in the language itself.
        flag: Flag emoji shown next to the language in pickers.
    """

    code: TargetLanguage
    name: str
    native_name: str
    flag: str


SUPPORTED_LANGUAGES: List[SupportedLanguage] = [
    SupportedLanguage(TargetLanguage.EN_US, "English", "English", "🇺🇸"),
    SupportedLanguage(TargetLanguage.FR_FR, "French", "Français", "🇫🇷"),
    SupportedLanguage(TargetLanguage.DE_DE, "German", "Deutsch", "🇩🇪"),
    SupportedLanguage(TargetLanguage.ES_ES, "Spanish", "Español", "🇪🇸"),
    SupportedLanguage(TargetLanguage.SV_SE, "Swedish", "Svenska", "🇸🇪"),
    SupportedLanguage(TargetLanguage.FI_FI, "Finnish", "Suomi", "🇫🇮"),
    SupportedLanguage(TargetLanguage.DA_DK, "Danish", "Dansk", "🇩🇰"),
    SupportedLanguage(TargetLanguage.NB_NO, "Norwegian", "Norsk", "🇳🇴"),
]


def get_supported_language(code: TargetLanguage) -> SupportedLanguage:
    """Look up display metadata for a concrete language.

    Raises:
        KeyError: If code is the ALL sentinel.
    """
    catalog: Dict[TargetLanguage, SupportedLanguage] = {
        entry.code: entry for entry in SUPPORTED_LANGUAGES
    }
    return catalog[code]
