"""Fan-out of an authored multi-language alert into per-language records."""

import uuid
from typing import List, Optional, Sequence

from infrastructure.logging import get_module_logger
from modules.alerts.domain.errors import DuplicateLanguageError
from modules.alerts.domain.models import ContentVariant, LanguageContent, VariantTemplate
from modules.alerts.policy import PolicyInput, normalize_policy

logger = get_module_logger()


def new_language_group_key(prefix: Optional[str] = None) -> str:
    """Generate a fresh language group key, e.g. "lang-group-<uuid4>"."""
    if prefix is None:
        from infrastructure.services.providers import get_settings

        prefix = get_settings().language.group_prefix
    return f"{prefix}{uuid.uuid4()}"


def expand(
    template: VariantTemplate,
    content: Sequence[LanguageContent],
    policy: PolicyInput = None,
    group_prefix: Optional[str] = None,
) -> List[ContentVariant]:
    """Expand one authored alert into one ContentVariant per language.

    The group key is generated once for the call and shared by every
    produced record. A template that already carries a group key (editing an
    existing alert) keeps it.

    Args:
        template: Language-independent alert fields.
        content: Authored entries, one per language.
        policy: Governance policy; supplies the initial workflow status and
            the duplicate-language rule.
        group_prefix: Prefix for a generated group key. Defaults to the
            configured LANGUAGE_GROUP_PREFIX.

    Returns:
        Records ready for the storage collaborator, ids unset.

    Raises:
        DuplicateLanguageError: If the policy prevents duplicate languages and
            content names a language twice.
    """
    effective_policy = normalize_policy(policy)

    if effective_policy.prevent_duplicate_languages:
        seen = set()
        duplicates: List[str] = []
        for entry in content:
            if entry.language in seen and entry.language.value not in duplicates:
                duplicates.append(entry.language.value)
            seen.add(entry.language)
        if duplicates:
            logger.warning("duplicate_languages_rejected", languages=duplicates)
            raise DuplicateLanguageError(duplicates)

    language_group = template.language_group or new_language_group_key(group_prefix)
    default_status = effective_policy.workflow.default_status

    records = [
        ContentVariant(
            id=None,
            language_group=language_group,
            target_language=entry.language,
            title=entry.title,
            body=entry.body,
            link_url=template.link_url,
            link_description=entry.link_description or "",
            available_for_all=(
                entry.available_for_all
                if entry.available_for_all is not None
                else template.available_for_all
            ),
            workflow_status=entry.workflow_status or default_status,
            attributes=dict(template.attributes),
        )
        for entry in content
    ]

    logger.info(
        "variants_expanded",
        language_group=language_group,
        languages=[record.target_language.value for record in records],
    )
    return records
