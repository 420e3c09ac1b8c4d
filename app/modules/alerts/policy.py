"""Governance policy for multi-language alerts.

The policy document is edited by hand or by older versions of the authoring
UI, so it may be partial, carry legacy keys, or hold invalid values. It is
normalized at the boundary into one fully populated, immutable
GovernancePolicy; nothing past PolicyStoreAdapter consumes the raw shape.

Stored documents use camelCase keys (fallbackLanguage, completenessRule, ...).
Snake_case keys are accepted too.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from infrastructure.i18n.models import TargetLanguage
from infrastructure.logging import get_module_logger
from modules.alerts.domain.models import WorkflowStatus
from modules.alerts.domain.types import PolicyStorage

logger = get_module_logger()

TENANT_DEFAULT = "tenant-default"

PolicyInput = Union["GovernancePolicy", Mapping[str, Any], None]

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# Keys written by earlier document versions, by field name.
_LEGACY_KEYS = {
    "body": ("description",),
}


class CompletenessRule(str, Enum):
    """How strict the publish check is across a multi-language set."""

    ALL_SELECTED_COMPLETE = "allSelectedComplete"
    AT_LEAST_ONE_COMPLETE = "atLeastOneComplete"
    REQUIRE_DEFAULT_LANGUAGE_COMPLETE = "requireDefaultLanguageComplete"


class PolicyModel(BaseModel):
    """Base model for policy sections.

    Frozen so a policy snapshot cannot change during a resolution pass.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )


class InheritanceFields(PolicyModel):
    """Which fields a selected variant may inherit when blank."""

    title: bool = True
    body: bool = True
    link_description: bool = True


class InheritancePolicy(PolicyModel):
    """Field inheritance from the fallback variant of a group."""

    enabled: bool = False
    inheritable: InheritanceFields = Field(
        default_factory=InheritanceFields, alias="fields"
    )

    def inherits(self, field_name: str) -> bool:
        """Check whether field_name is inherited under this policy."""
        return self.enabled and bool(getattr(self.inheritable, field_name, False))


class WorkflowPolicy(PolicyModel):
    """Translation approval workflow."""

    enabled: bool = False
    default_status: WorkflowStatus = WorkflowStatus.DRAFT
    require_approved_for_display: bool = True

    @property
    def gates_display(self) -> bool:
        """True when unapproved variants must be hidden from viewers."""
        return self.enabled and self.require_approved_for_display


class GovernancePolicy(PolicyModel):
    """Organization governance rules for multi-language alerts.

    Attributes:
        version: Document schema version.
        fallback_language: Concrete language code, or "tenant-default".
        completeness_rule: Publish strictness rule.
        require_link_description_when_url: Link text required when a link is set.
        prevent_duplicate_languages: Reject authoring sets that repeat a language.
        inheritance: Field inheritance settings.
        workflow: Approval workflow settings.
    """

    version: int = 1
    fallback_language: str = TENANT_DEFAULT
    completeness_rule: CompletenessRule = CompletenessRule.ALL_SELECTED_COMPLETE
    require_link_description_when_url: bool = True
    prevent_duplicate_languages: bool = True
    inheritance: InheritancePolicy = Field(default_factory=InheritancePolicy)
    workflow: WorkflowPolicy = Field(default_factory=WorkflowPolicy)

    @field_validator("fallback_language", mode="before")
    @classmethod
    def _check_fallback_language(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("fallbackLanguage must be a language code")
        candidate = value.strip().lower()
        if candidate == TENANT_DEFAULT:
            return candidate
        language = TargetLanguage.from_string(candidate)
        if not language.is_concrete:
            raise ValueError("fallbackLanguage cannot be 'all'")
        return language.value

    def resolve_fallback_language(self, tenant_default: TargetLanguage) -> TargetLanguage:
        """Resolve the tenant-default sentinel against the tenant language."""
        if self.fallback_language == TENANT_DEFAULT:
            return tenant_default
        return TargetLanguage(self.fallback_language)

    def to_document(self) -> dict:
        """Serialize to the camelCase document written to policy storage."""
        return self.model_dump(by_alias=True, mode="json")


DEFAULT_POLICY = GovernancePolicy()


def _lookup(raw: Mapping[str, Any], name: str, alias: Optional[str]) -> Tuple[Any, bool]:
    for key in (alias, name, *_LEGACY_KEYS.get(name, ())):
        if key is not None and key in raw:
            return raw[key], True
    return None, False


def _merge_section(model_cls: Type[_ModelT], default: _ModelT, raw: Mapping[str, Any]) -> _ModelT:
    """Merge raw over default one field at a time.

    A value that fails validation keeps its default. A nested section that
    is not a mapping is replaced wholesale by its default.
    """
    values = {}
    for name, info in model_cls.model_fields.items():
        current = getattr(default, name)
        supplied, present = _lookup(raw, name, info.alias)
        if not present:
            values[name] = current
            continue

        if isinstance(current, BaseModel):
            if isinstance(supplied, Mapping):
                values[name] = _merge_section(type(current), current, supplied)
            else:
                logger.warning("policy_section_defaulted", section=name)
                values[name] = current
            continue

        try:
            candidate = model_cls.model_validate({name: supplied})
            values[name] = getattr(candidate, name)
        except ValidationError:
            logger.warning("policy_field_defaulted", field=name, value=repr(supplied))
            values[name] = current

    return model_cls.model_validate(values)


def normalize_policy(raw: PolicyInput = None) -> GovernancePolicy:
    """Normalize a stored or partial policy document into a GovernancePolicy.

    Deep-merges raw over DEFAULT_POLICY. Never raises: absent or malformed
    values resolve to their defaults.

    Args:
        raw: Policy document, an existing GovernancePolicy, or None.

    Returns:
        Fully populated GovernancePolicy.
    """
    if isinstance(raw, GovernancePolicy):
        return raw
    if raw is None:
        return DEFAULT_POLICY
    if not isinstance(raw, Mapping):
        logger.warning("policy_document_invalid", type=type(raw).__name__)
        return DEFAULT_POLICY
    return _merge_section(GovernancePolicy, DEFAULT_POLICY, raw)


class PolicyStoreAdapter:
    """Loads and saves the governance policy through a PolicyStorage.

    Loading never fails: a storage error yields the default policy so that
    viewers still see alerts. Saving is an author action and propagates
    storage errors.
    """

    def __init__(self, storage: PolicyStorage):
        self._storage = storage

    async def load(self) -> GovernancePolicy:
        """Load and normalize the current policy."""
        try:
            raw = await self._storage.load_policy()
        except Exception as e:
            logger.warning("policy_load_failed", error=str(e))
            return DEFAULT_POLICY

        policy = normalize_policy(raw)
        logger.info(
            "policy_loaded",
            version=policy.version,
            completeness_rule=policy.completeness_rule.value,
            inheritance_enabled=policy.inheritance.enabled,
            workflow_enabled=policy.workflow.enabled,
        )
        return policy

    async def save(self, policy: PolicyInput) -> GovernancePolicy:
        """Normalize and persist a policy.

        Args:
            policy: Policy or partial policy document to store.

        Returns:
            The normalized policy that was written.
        """
        normalized = normalize_policy(policy)
        await self._storage.save_policy(normalized.to_document())
        logger.info("policy_saved", version=normalized.version)
        return normalized
