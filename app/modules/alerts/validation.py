"""Completeness checks for multi-language authoring sets.

Two layers:

- validate_language_content(): a cheap, policy-agnostic floor. The set must
  be non-empty and at least one entry must be complete on its own.
- check_publish_readiness(): the floor plus the policy's completeness rule,
  inheritance-aware field checks, and link description requirements. It
  reports which fields keep which entries from being complete.

Neither function raises on invalid content; callers decide whether to block.
"""

from typing import Callable, List, Optional, Sequence

from infrastructure.i18n.models import TargetLanguage
from infrastructure.logging import get_module_logger
from modules.alerts.domain.models import (
    LanguageContent,
    MissingField,
    PublishReadiness,
    ValidationResult,
)
from modules.alerts.policy import CompletenessRule, PolicyInput, normalize_policy

logger = get_module_logger()

MIN_TITLE_LENGTH = 3
MIN_BODY_LENGTH = 10

LANGUAGE_REQUIRED = "at least one language required"
COMPLETE_LANGUAGE_REQUIRED = "at least one complete language required"
DEFAULT_LANGUAGE_INCOMPLETE = "default language {language} must be complete"

_MIN_LENGTHS = {
    "title": MIN_TITLE_LENGTH,
    "body": MIN_BODY_LENGTH,
}


def is_content_complete(content: LanguageContent) -> bool:
    """Check whether one entry has a long enough title and body of its own."""
    return (
        len((content.title or "").strip()) >= MIN_TITLE_LENGTH
        and len((content.body or "").strip()) >= MIN_BODY_LENGTH
    )


def validate_language_content(
    language_content: Sequence[LanguageContent],
) -> ValidationResult:
    """Universal publish floor for a multi-language authoring set.

    Args:
        language_content: Authored entries, one per language.

    Returns:
        ValidationResult; invalid with "at least one language required" for
        an empty set, or "at least one complete language required" when no
        entry is complete.
    """
    if not language_content:
        return ValidationResult(is_valid=False, errors=[LANGUAGE_REQUIRED])

    if not any(is_content_complete(content) for content in language_content):
        return ValidationResult(is_valid=False, errors=[COMPLETE_LANGUAGE_REQUIRED])

    return ValidationResult(is_valid=True)


def check_publish_readiness(
    language_content: Sequence[LanguageContent],
    policy: PolicyInput,
    tenant_default: TargetLanguage,
    link_url: Optional[str] = None,
) -> PublishReadiness:
    """Policy-aware publish check for a multi-language authoring set.

    A field is satisfied when it is non-blank, or when inheritance covers it
    and the fallback-language entry has a value. Which entries are enforced
    depends on the completeness rule:

    - allSelectedComplete: every entry
    - requireDefaultLanguageComplete: only the fallback-language entry
    - atLeastOneComplete: every entry that has any content

    Args:
        language_content: Authored entries, one per language.
        policy: Governance policy (raw documents are normalized).
        tenant_default: Tenant default language, resolves the
            "tenant-default" fallback sentinel.
        link_url: Link shared by all languages, if any.

    Returns:
        PublishReadiness with set-level errors and per-entry missing fields.
    """
    effective_policy = normalize_policy(policy)
    floor = validate_language_content(language_content)
    if not language_content:
        return PublishReadiness(is_publishable=False, errors=list(floor.errors))

    fallback_language = effective_policy.resolve_fallback_language(tenant_default)
    fallback_content = next(
        (c for c in language_content if c.language == fallback_language), None
    )
    link_required = effective_policy.require_link_description_when_url and bool(
        (link_url or "").strip()
    )
    rule = effective_policy.completeness_rule

    def satisfied(content: LanguageContent, field_name: str) -> bool:
        if not _is_blank(getattr(content, field_name)):
            return True
        if not effective_policy.inheritance.inherits(field_name):
            return False
        return fallback_content is not None and not _is_blank(
            getattr(fallback_content, field_name)
        )

    errors: List[str] = list(floor.errors)
    missing: List[MissingField] = []
    any_complete = False

    for index, content in enumerate(language_content):
        problems = _field_problems(content, index, satisfied, link_required)
        if not problems:
            any_complete = True

        enforce = (
            rule is CompletenessRule.ALL_SELECTED_COMPLETE
            or (
                rule is CompletenessRule.REQUIRE_DEFAULT_LANGUAGE_COMPLETE
                and content.language == fallback_language
            )
            or (
                rule is CompletenessRule.AT_LEAST_ONE_COMPLETE
                and content.has_any_content
            )
        )
        if enforce:
            missing.extend(problems)

    if (
        rule is CompletenessRule.AT_LEAST_ONE_COMPLETE
        and not any_complete
        and COMPLETE_LANGUAGE_REQUIRED not in errors
    ):
        errors.append(COMPLETE_LANGUAGE_REQUIRED)

    if rule is CompletenessRule.REQUIRE_DEFAULT_LANGUAGE_COMPLETE:
        default_index = next(
            (i for i, c in enumerate(language_content) if c.language == fallback_language),
            None,
        )
        if default_index is None or _field_problems(
            language_content[default_index], default_index, satisfied, link_required
        ):
            errors.append(
                DEFAULT_LANGUAGE_INCOMPLETE.format(language=fallback_language.value)
            )

    readiness = PublishReadiness(
        is_publishable=not errors and not missing,
        errors=errors,
        missing_fields=missing,
    )
    logger.info(
        "publish_readiness_checked",
        completeness_rule=rule.value,
        language_count=len(language_content),
        is_publishable=readiness.is_publishable,
        missing_count=len(missing),
    )
    return readiness


def _field_problems(
    content: LanguageContent,
    index: int,
    satisfied: Callable[[LanguageContent, str], bool],
    link_required: bool,
) -> List[MissingField]:
    problems: List[MissingField] = []
    for field_name, min_length in _MIN_LENGTHS.items():
        value = (getattr(content, field_name) or "").strip()
        if not value:
            if not satisfied(content, field_name):
                problems.append(
                    MissingField(content.language, index, field_name, "required")
                )
        elif len(value) < min_length:
            problems.append(
                MissingField(content.language, index, field_name, "too_short")
            )

    if link_required and not satisfied(content, "link_description"):
        problems.append(
            MissingField(content.language, index, "link_description", "required")
        )
    return problems


def _is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()
