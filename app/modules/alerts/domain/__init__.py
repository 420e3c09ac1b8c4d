"""Domain layer - data models, collaborator protocols, and errors."""

from modules.alerts.domain.errors import (
    DuplicateLanguageError,
    PolicyStorageError,
    UnsupportedLanguageError,
)
from modules.alerts.domain.models import (
    ContentVariant,
    LanguageContent,
    MissingField,
    PreferenceResult,
    PreferenceSource,
    PublishReadiness,
    ValidationResult,
    VariantTemplate,
    WorkflowStatus,
    variant_from_dict,
    variant_to_dict,
)

__all__ = [
    "ContentVariant",
    "LanguageContent",
    "MissingField",
    "PreferenceResult",
    "PreferenceSource",
    "PublishReadiness",
    "ValidationResult",
    "VariantTemplate",
    "WorkflowStatus",
    "variant_from_dict",
    "variant_to_dict",
    "DuplicateLanguageError",
    "PolicyStorageError",
    "UnsupportedLanguageError",
]
