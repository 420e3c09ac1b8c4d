"""Unit tests for alert domain models and record conversion."""

import pytest

from infrastructure.i18n import TargetLanguage
from modules.alerts.domain.errors import (
    DuplicateLanguageError,
    PolicyStorageError,
    UnsupportedLanguageError,
)
from modules.alerts.domain.models import (
    ContentVariant,
    LanguageContent,
    MissingField,
    PublishReadiness,
    WorkflowStatus,
    variant_from_dict,
    variant_to_dict,
)


@pytest.mark.unit
class TestWorkflowStatus:
    """Tests for WorkflowStatus parsing and transitions."""

    def test_from_value_is_case_insensitive(self):
        """Stored statuses parse regardless of case."""
        assert WorkflowStatus.from_value("approved") is WorkflowStatus.APPROVED
        assert WorkflowStatus.from_value("InReview") is WorkflowStatus.IN_REVIEW

    @pytest.mark.parametrize("value", [None, "", "  ", "Published", 3])
    def test_from_value_unknown_returns_none(self, value):
        """Absent or unknown statuses parse as None."""
        assert WorkflowStatus.from_value(value) is None

    def test_forward_transitions(self):
        """Draft moves to review, review moves to approval."""
        assert WorkflowStatus.DRAFT.can_transition_to(WorkflowStatus.IN_REVIEW)
        assert WorkflowStatus.IN_REVIEW.can_transition_to(WorkflowStatus.APPROVED)
        assert WorkflowStatus.IN_REVIEW.can_transition_to(WorkflowStatus.REJECTED)

    def test_draft_cannot_skip_review(self):
        """Draft cannot be approved directly."""
        assert not WorkflowStatus.DRAFT.can_transition_to(WorkflowStatus.APPROVED)

    def test_new_edit_resets_to_draft(self):
        """Any status may be reset to Draft by a new edit."""
        assert WorkflowStatus.APPROVED.can_transition_to(WorkflowStatus.DRAFT)
        assert WorkflowStatus.REJECTED.can_transition_to(WorkflowStatus.DRAFT)

    def test_terminal_statuses(self):
        """Approved and Rejected do not move anywhere but Draft."""
        assert not WorkflowStatus.APPROVED.can_transition_to(WorkflowStatus.IN_REVIEW)
        assert not WorkflowStatus.REJECTED.can_transition_to(WorkflowStatus.APPROVED)


@pytest.mark.unit
class TestContentVariant:
    """Tests for ContentVariant properties."""

    def test_missing_status_reads_as_approved(self):
        """Legacy variants without a status are treated as Approved."""
        variant = ContentVariant(target_language=TargetLanguage.EN_US)
        assert variant.effective_status is WorkflowStatus.APPROVED

    def test_explicit_status_is_kept(self):
        variant = ContentVariant(
            target_language=TargetLanguage.EN_US,
            workflow_status=WorkflowStatus.DRAFT,
        )
        assert variant.effective_status is WorkflowStatus.DRAFT

    def test_is_grouped(self):
        assert ContentVariant(TargetLanguage.EN_US, language_group="g").is_grouped
        assert not ContentVariant(TargetLanguage.EN_US).is_grouped
        assert not ContentVariant(TargetLanguage.EN_US, language_group="").is_grouped

    def test_is_immutable(self):
        """Variants cannot be mutated in place."""
        variant = ContentVariant(target_language=TargetLanguage.EN_US)
        with pytest.raises(AttributeError):
            variant.title = "changed"


@pytest.mark.unit
class TestLanguageContent:
    """Tests for LanguageContent."""

    def test_has_any_content(self):
        assert LanguageContent(TargetLanguage.FR_FR, title="Bonjour").has_any_content
        assert LanguageContent(
            TargetLanguage.FR_FR, link_description="Lien"
        ).has_any_content

    def test_whitespace_only_is_not_content(self):
        content = LanguageContent(TargetLanguage.FR_FR, title="  ", body="\n")
        assert not content.has_any_content


@pytest.mark.unit
class TestResults:
    """Tests for validation result models."""

    def test_missing_field_key(self):
        missing = MissingField(TargetLanguage.FR_FR, 1, "title", "required")
        assert missing.key == "title_fr-fr_1"

    def test_missing_for_language(self):
        readiness = PublishReadiness(
            is_publishable=False,
            missing_fields=[
                MissingField(TargetLanguage.FR_FR, 1, "title", "required"),
                MissingField(TargetLanguage.FR_FR, 1, "body", "too_short"),
                MissingField(TargetLanguage.DE_DE, 2, "body", "required"),
            ],
        )
        assert readiness.missing_for(TargetLanguage.FR_FR) == ["title", "body"]
        assert readiness.missing_for(TargetLanguage.EN_US) == []


@pytest.mark.unit
class TestVariantFromDict:
    """Tests for storage record normalization."""

    def test_camel_case_record(self):
        """A full record maps onto every variant field."""
        variant = variant_from_dict(
            {
                "id": 12,
                "languageGroup": "lang-group-1",
                "targetLanguage": "FR-FR",
                "title": "Maintenance",
                "body": "Ce soir.",
                "linkUrl": "https://example.com",
                "linkDescription": "Détails",
                "availableForAll": True,
                "workflowStatus": "Approved",
            }
        )

        assert variant.id == "12"
        assert variant.language_group == "lang-group-1"
        assert variant.target_language is TargetLanguage.FR_FR
        assert variant.body == "Ce soir."
        assert variant.link_url == "https://example.com"
        assert variant.available_for_all is True
        assert variant.workflow_status is WorkflowStatus.APPROVED

    def test_legacy_keys(self):
        """Older records store the body as description."""
        variant = variant_from_dict(
            {
                "targetLanguage": "en-us",
                "description": "Legacy body text",
                "translationStatus": "InReview",
            }
        )
        assert variant.body == "Legacy body text"
        assert variant.workflow_status is WorkflowStatus.IN_REVIEW

    def test_current_key_wins_over_legacy_key(self):
        variant = variant_from_dict({"body": "current", "description": "legacy"})
        assert variant.body == "current"

    @pytest.mark.parametrize("language", [None, "", "klingon"])
    def test_missing_or_unknown_language_targets_all(self, language):
        """Records without a usable language are shown to everyone."""
        variant = variant_from_dict({"targetLanguage": language})
        assert variant.target_language is TargetLanguage.ALL

    def test_unknown_keys_kept_as_attributes(self):
        variant = variant_from_dict({"AlertType": "Outage", "priority": "high"})
        assert variant.attributes == {"AlertType": "Outage", "priority": "high"}

    def test_placeholder_ids_are_unset(self):
        assert variant_from_dict({"id": "0"}).id is None
        assert variant_from_dict({"id": ""}).id is None

    def test_empty_group_is_standalone(self):
        assert variant_from_dict({"languageGroup": ""}).language_group is None

    def test_to_dict_restores_record(self):
        """Converting back keeps attributes and uses storage keys."""
        record = {
            "id": "5",
            "languageGroup": "lang-group-1",
            "targetLanguage": "de-de",
            "title": "Wartung",
            "body": "Heute Abend.",
            "AlertType": "Maintenance",
        }

        result = variant_to_dict(variant_from_dict(record))

        assert result["targetLanguage"] == "de-de"
        assert result["AlertType"] == "Maintenance"
        assert result["workflowStatus"] is None
        assert result["linkUrl"] == ""
        assert result["availableForAll"] is False


@pytest.mark.unit
class TestErrors:
    """Tests for alerts module errors."""

    def test_unsupported_language_keeps_value(self):
        error = UnsupportedLanguageError("xx-yy")
        assert error.value == "xx-yy"
        assert isinstance(error, ValueError)

    def test_duplicate_language_lists_languages(self):
        error = DuplicateLanguageError(["fr-fr", "de-de"])
        assert error.languages == ["fr-fr", "de-de"]
        assert "fr-fr, de-de" in str(error)

    def test_policy_storage_error_keeps_cause(self):
        cause = OSError("disk full")
        error = PolicyStorageError("write failed", cause=cause)
        assert error.cause is cause
