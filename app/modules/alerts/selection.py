"""Group resolution engine.

Picks, for one viewer, which language variant of each alert to display.

Variants sharing a language group are translations of one alert; exactly one
of them is shown per group. Selection order inside a group:

1. Workflow gate: with approval required for display, only Approved
   variants are candidates; a group with none is dropped. Among the
   remaining candidates the first variant per language is kept.
2. First candidate matching the viewer's preferences, earliest preference
   first.
3. First candidate marked available for all languages.
4. First candidate in document order.

The chosen variant may then inherit blank fields from the group's fallback
variant. Standalone variants (no group) are shown when they target all
languages, the viewer's best language, or the tenant default.

All functions here are pure: inputs are never mutated and the result order is
stable (selected group variants in group-encounter order, then standalone
variants in input order).
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from infrastructure.i18n.models import TargetLanguage
from infrastructure.logging import get_module_logger
from modules.alerts.domain.models import (
    ContentVariant,
    LanguageContent,
    WorkflowStatus,
)
from modules.alerts.policy import GovernancePolicy, PolicyInput, normalize_policy

logger = get_module_logger()

INHERITABLE_FIELDS = ("title", "body", "link_description")


def select_for_viewer(
    variants: Iterable[ContentVariant],
    policy: PolicyInput,
    viewer_preferences: Sequence[TargetLanguage],
    tenant_default: TargetLanguage,
) -> List[ContentVariant]:
    """Select the variants to display to one viewer.

    Args:
        variants: Flat collection of content variants from storage.
        policy: Active governance policy (raw documents are normalized).
        viewer_preferences: Viewer languages, most preferred first.
        tenant_default: Tenant default language.

    Returns:
        One variant per displayable group, followed by the kept standalone
        variants.
    """
    effective_policy = normalize_policy(policy)
    best_preference = viewer_preferences[0] if viewer_preferences else tenant_default

    groups: Dict[str, List[ContentVariant]] = {}
    standalone: List[ContentVariant] = []

    for variant in variants:
        if variant.language_group:
            groups.setdefault(variant.language_group, []).append(variant)
        elif variant.target_language in (
            TargetLanguage.ALL,
            best_preference,
            tenant_default,
        ):
            standalone.append(variant)

    selected: List[ContentVariant] = []
    for members in groups.values():
        choice = select_group_variant(
            members,
            effective_policy,
            viewer_preferences,
            tenant_default,
        )
        if choice is not None:
            selected.append(choice)

    logger.debug(
        "variants_selected",
        group_count=len(groups),
        selected_count=len(selected),
        standalone_count=len(standalone),
    )
    return selected + standalone


def select_group_variant(
    members: Sequence[ContentVariant],
    policy: GovernancePolicy,
    viewer_preferences: Sequence[TargetLanguage],
    tenant_default: TargetLanguage,
) -> Optional[ContentVariant]:
    """Select the representative variant of one language group.

    Args:
        members: Variants of the group in document order.
        policy: Normalized governance policy.
        viewer_preferences: Viewer languages, most preferred first.
        tenant_default: Tenant default language.

    Returns:
        The selected variant with inherited fields applied, or None when the
        group is empty after workflow gating.
    """
    candidates = list(members)
    if policy.workflow.gates_display:
        candidates = [
            member
            for member in candidates
            if member.effective_status is WorkflowStatus.APPROVED
        ]
        if not candidates:
            logger.info(
                "group_dropped_by_workflow",
                language_group=members[0].language_group if members else None,
            )
            return None

    if not candidates:
        return None

    candidates = _first_per_language(candidates[0].language_group, candidates)
    selected = _match_preferences(candidates, viewer_preferences)
    if selected is None:
        selected = next(
            (member for member in candidates if member.available_for_all), None
        )
    if selected is None:
        selected = candidates[0]

    return apply_field_inheritance(selected, candidates, policy, tenant_default)


def apply_field_inheritance(
    selected: ContentVariant,
    candidates: Sequence[ContentVariant],
    policy: GovernancePolicy,
    tenant_default: TargetLanguage,
) -> ContentVariant:
    """Fill blank fields of the selected variant from the group's fallback.

    The fallback source is the first candidate in the policy fallback
    language, else the first available-for-all candidate, else the first
    candidate. Non-blank values of the selected variant are never replaced.

    Returns:
        A new variant when something was inherited, otherwise selected.
    """
    if not policy.inheritance.enabled or not candidates:
        return selected

    fallback_language = policy.resolve_fallback_language(tenant_default)
    source = (
        next((c for c in candidates if c.target_language == fallback_language), None)
        or next((c for c in candidates if c.available_for_all), None)
        or candidates[0]
    )
    if source is selected:
        return selected

    updates = {}
    for field_name in INHERITABLE_FIELDS:
        if not policy.inheritance.inherits(field_name):
            continue
        if not _is_blank(getattr(selected, field_name)):
            continue
        inherited = getattr(source, field_name)
        if not _is_blank(inherited):
            updates[field_name] = inherited

    if not updates:
        return selected

    logger.debug(
        "fields_inherited",
        language_group=selected.language_group,
        target_language=selected.target_language.value,
        source_language=source.target_language.value,
        fields=sorted(updates),
    )
    return replace(selected, **updates)


def get_language_content(
    variants: Iterable[ContentVariant], language_group: str
) -> List[LanguageContent]:
    """Editable content of one language group, one entry per language.

    The first variant per language wins. A missing workflow status is read
    as Approved.
    """
    members = [v for v in variants if v.language_group == language_group]
    return [
        LanguageContent(
            language=variant.target_language,
            title=variant.title,
            body=variant.body,
            link_description=variant.link_description,
            available_for_all=variant.available_for_all,
            workflow_status=variant.effective_status,
        )
        for variant in _first_per_language(language_group, members)
    ]


def detect_duplicate_languages(
    variants: Iterable[ContentVariant], language_group: str
) -> List[TargetLanguage]:
    """Languages that appear more than once in a language group."""
    seen = set()
    duplicates: List[TargetLanguage] = []
    for variant in variants:
        if variant.language_group != language_group:
            continue
        language = variant.target_language
        if language in seen and language not in duplicates:
            duplicates.append(language)
        seen.add(language)
    return duplicates


def _match_preferences(
    candidates: Sequence[ContentVariant],
    viewer_preferences: Sequence[TargetLanguage],
) -> Optional[ContentVariant]:
    for preference in viewer_preferences:
        for candidate in candidates:
            if candidate.target_language == preference:
                return candidate
    return None


def _first_per_language(
    language_group: str, members: Sequence[ContentVariant]
) -> List[ContentVariant]:
    seen = set()
    unique: List[ContentVariant] = []
    for member in members:
        if member.target_language in seen:
            logger.debug(
                "duplicate_language_ignored",
                language_group=language_group,
                target_language=member.target_language.value,
            )
            continue
        seen.add(member.target_language)
        unique.append(member)
    return unique


def _is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()
