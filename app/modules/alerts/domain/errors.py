"""Errors for the alerts module."""

from typing import Any, List, Optional


class UnsupportedLanguageError(ValueError):
    """Raised when a language code outside the supported set is given.

    Attributes:
        value: the rejected input
    """

    def __init__(self, value: Any):
        super().__init__(f"Unsupported language: {value!r}")
        self.value = value


class DuplicateLanguageError(ValueError):
    """Raised when an authoring set names the same language more than once.

    Attributes:
        languages: the duplicated language codes
    """

    def __init__(self, languages: List[str]):
        super().__init__(
            f"Duplicate languages in multi-language alert: {', '.join(languages)}"
        )
        self.languages = languages


class PolicyStorageError(Exception):
    """Raised by policy storage when a policy document cannot be persisted.

    Attributes:
        message: human-friendly message
        cause: the original exception, if any
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
