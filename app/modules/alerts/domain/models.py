"""Internal data models for multi-language alerts.

This module defines lightweight dataclass models used by the resolution
engine. These are NOT Pydantic models and do NOT provide runtime validation;
the storage collaborator hands records in through variant_from_dict(), which
normalizes them into these structures.

Key distinctions:
  - models.py: Content records and engine results (frozen dataclasses)
  - modules.alerts.policy: Governance policy (Pydantic, validated and defaulted)
  - types.py: Collaborator protocols (no implementation)

All models are frozen. Transformations return new instances through
dataclasses.replace() and never mutate a variant in place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.models import TargetLanguage


class WorkflowStatus(str, Enum):
    """Translation workflow status of a content variant.

    Draft -> InReview -> Approved, with Draft|InReview -> Rejected also
    possible. Approved and Rejected are terminal for a given edit, but a new
    edit may reset a variant back to Draft.
    """

    DRAFT = "Draft"
    IN_REVIEW = "InReview"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def from_value(cls, value: Any) -> Optional["WorkflowStatus"]:
        """Parse a stored status, returning None for absent or unknown values."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        for status in cls:
            if status.value.lower() == value.strip().lower():
                return status
        return None

    def can_transition_to(self, target: "WorkflowStatus") -> bool:
        """Check whether an author or approver action may move to target."""
        if target is WorkflowStatus.DRAFT:
            return True
        return target in _WORKFLOW_TRANSITIONS[self]


_WORKFLOW_TRANSITIONS = {
    WorkflowStatus.DRAFT: {WorkflowStatus.IN_REVIEW, WorkflowStatus.REJECTED},
    WorkflowStatus.IN_REVIEW: {WorkflowStatus.APPROVED, WorkflowStatus.REJECTED},
    WorkflowStatus.APPROVED: set(),
    WorkflowStatus.REJECTED: set(),
}


class PreferenceSource(str, Enum):
    """Where a resolved viewer language came from."""

    OVERRIDE = "override"
    BROWSER = "browser"
    HOST_PROFILE = "host_profile"
    HOST_CONTEXT = "host_context"
    TENANT_DEFAULT = "tenant_default"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ContentVariant:
    """One language-specific rendering of an alert.

    Attributes:
        id: Storage identifier, None until persisted.
        language_group: Key shared by translations of the same alert. None
            marks a standalone alert.
        target_language: Language of this rendering, or TargetLanguage.ALL.
        title: Alert title.
        body: Alert body (rich text is opaque to the engine).
        link_url: Optional link shown with the alert.
        link_description: Optional text for the link.
        available_for_all: Whether this rendering may substitute for any
            viewer language.
        workflow_status: Translation status. None is treated as Approved.
        attributes: Remaining storage fields (alert type, priority, target
            sites, schedule) carried through untouched.
    """

    target_language: TargetLanguage
    title: str = ""
    body: str = ""
    id: Optional[str] = None
    language_group: Optional[str] = None
    link_url: Optional[str] = None
    link_description: Optional[str] = None
    available_for_all: bool = False
    workflow_status: Optional[WorkflowStatus] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def effective_status(self) -> WorkflowStatus:
        """Workflow status with the legacy absent value read as Approved."""
        return self.workflow_status or WorkflowStatus.APPROVED

    @property
    def is_grouped(self) -> bool:
        return bool(self.language_group)


@dataclass(frozen=True)
class VariantTemplate:
    """Language-independent part of an authored multi-language alert.

    Everything except title, body, link description, target language and
    workflow status, which come from each LanguageContent entry.
    """

    id: Optional[str] = None
    language_group: Optional[str] = None
    link_url: Optional[str] = None
    available_for_all: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LanguageContent:
    """Authored content for one language of a multi-language alert.

    Attributes:
        language: Language the content is written in.
        title: Title text.
        body: Body text.
        link_description: Optional link text.
        available_for_all: Optional per-language override of the template flag.
        workflow_status: Optional initial status; the policy default applies
            when omitted.
    """

    language: TargetLanguage
    title: str = ""
    body: str = ""
    link_description: Optional[str] = None
    available_for_all: Optional[bool] = None
    workflow_status: Optional[WorkflowStatus] = None

    @property
    def has_any_content(self) -> bool:
        return any(
            (value or "").strip()
            for value in (self.title, self.body, self.link_description)
        )


@dataclass(frozen=True)
class PreferenceResult:
    """Resolved viewer language and the source it came from."""

    language: TargetLanguage
    source: PreferenceSource


@dataclass
class ValidationResult:
    """Outcome of the universal completeness floor check.

    Attributes:
        is_valid: True when the content set may be considered for publishing.
        errors: Human-readable error messages, empty when valid.
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MissingField:
    """A field that keeps an entry from being complete.

    Attributes:
        language: Language of the offending entry.
        index: Position of the entry in the authoring set.
        field: One of "title", "body", "link_description".
        reason: "required" when empty, "too_short" when below the minimum length.
    """

    language: TargetLanguage
    index: int
    field: str
    reason: str

    @property
    def key(self) -> str:
        """Form error key, e.g. "title_fr-fr_1"."""
        return f"{self.field}_{self.language.value}_{self.index}"


@dataclass
class PublishReadiness:
    """Outcome of the policy-aware publish check.

    Attributes:
        is_publishable: True when the set satisfies the floor check and the
            active completeness rule.
        errors: Set-level error messages.
        missing_fields: Per-entry field problems for enforced entries.
    """

    is_publishable: bool
    errors: List[str] = field(default_factory=list)
    missing_fields: List[MissingField] = field(default_factory=list)

    def missing_for(self, language: TargetLanguage) -> List[str]:
        """Names of the missing fields for one language."""
        return [m.field for m in self.missing_fields if m.language == language]


# Storage record keys (camelCase) mapped to ContentVariant fields.
_RECORD_FIELDS = {
    "id": "id",
    "languageGroup": "language_group",
    "targetLanguage": "target_language",
    "title": "title",
    "body": "body",
    "linkUrl": "link_url",
    "linkDescription": "link_description",
    "availableForAll": "available_for_all",
    "workflowStatus": "workflow_status",
}

# Legacy record keys still written by older list schemas.
_LEGACY_RECORD_FIELDS = {
    "description": "body",
    "translationStatus": "workflow_status",
}


def variant_from_dict(data: Mapping[str, Any]) -> ContentVariant:
    """Normalize a storage record into a ContentVariant.

    Unknown keys are kept in attributes. A missing or unknown target
    language is read as TargetLanguage.ALL, matching how standalone alerts
    without a language are displayed to everyone.

    Args:
        data: Storage record with camelCase keys.

    Returns:
        ContentVariant instance.
    """
    values: Dict[str, Any] = {}
    attributes: Dict[str, Any] = {}
    for key, value in data.items():
        name = _RECORD_FIELDS.get(key) or _LEGACY_RECORD_FIELDS.get(key)
        if name is None:
            attributes[key] = value
        elif name not in values:
            values[name] = value

    try:
        target_language = TargetLanguage.from_string(values.get("target_language") or "all")
    except ValueError:
        target_language = TargetLanguage.ALL

    record_id = values.get("id")
    return ContentVariant(
        id=str(record_id) if record_id not in (None, "", "0") else None,
        language_group=values.get("language_group") or None,
        target_language=target_language,
        title=values.get("title") or "",
        body=values.get("body") or "",
        link_url=values.get("link_url") or None,
        link_description=values.get("link_description"),
        available_for_all=bool(values.get("available_for_all", False)),
        workflow_status=WorkflowStatus.from_value(values.get("workflow_status")),
        attributes=attributes,
    )


def variant_to_dict(variant: ContentVariant) -> Dict[str, Any]:
    """Convert a ContentVariant into a camelCase storage record."""
    record: Dict[str, Any] = dict(variant.attributes)
    record.update(
        {
            "id": variant.id,
            "languageGroup": variant.language_group,
            "targetLanguage": variant.target_language.value,
            "title": variant.title,
            "body": variant.body,
            "linkUrl": variant.link_url or "",
            "linkDescription": variant.link_description or "",
            "availableForAll": variant.available_for_all,
            "workflowStatus": (
                variant.workflow_status.value if variant.workflow_status else None
            ),
        }
    )
    return record
