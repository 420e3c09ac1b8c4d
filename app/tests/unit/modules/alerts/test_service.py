"""Unit tests for AlertLanguageService and its factory."""

import pytest

from infrastructure.configuration import LanguageFeatureSettings
from infrastructure.i18n import TargetLanguage
from modules.alerts.domain.errors import DuplicateLanguageError
from modules.alerts.domain.models import VariantTemplate, WorkflowStatus
from modules.alerts.factory import create_alert_language_service, create_policy_storage
from modules.alerts.policy import DEFAULT_POLICY, CompletenessRule
from modules.alerts.service import AlertLanguageService
from modules.alerts.storage import InMemoryPolicyStorage, YAMLPolicyStorage
from tests.factories.alerts import make_content, make_variant
from tests.fixtures.alert_sources import FakeEnvironment, FakeHostContext

EN = TargetLanguage.EN_US
FR = TargetLanguage.FR_FR
DE = TargetLanguage.DE_DE


class CountingPolicyStorage(InMemoryPolicyStorage):
    """In-memory policy storage that counts loads."""

    def __init__(self, document=None):
        super().__init__(document)
        self.loads = 0

    async def load_policy(self):
        self.loads += 1
        return await super().load_policy()


@pytest.fixture
def make_service(language_settings):
    def _make(environment=None, host_context=None, policy_storage=None):
        return create_alert_language_service(
            environment=environment,
            host_context=host_context,
            policy_storage=policy_storage or InMemoryPolicyStorage(),
            settings=language_settings,
        )

    return _make


@pytest.mark.unit
class TestPolicySnapshot:
    """Tests for the session policy snapshot."""

    @pytest.mark.asyncio
    async def test_policy_loaded_once(self, make_service):
        storage = CountingPolicyStorage({"completenessRule": "atLeastOneComplete"})
        service = make_service(policy_storage=storage)

        first = await service.get_policy()
        second = await service.get_policy()

        assert first is second
        assert first.completeness_rule is CompletenessRule.AT_LEAST_ONE_COMPLETE
        assert storage.loads == 1

    @pytest.mark.asyncio
    async def test_reload_policy(self, make_service):
        storage = CountingPolicyStorage()
        service = make_service(policy_storage=storage)
        await service.get_policy()

        await storage.save_policy({"inheritance": {"enabled": True}})
        policy = await service.reload_policy()

        assert policy.inheritance.enabled is True
        assert storage.loads == 2

    @pytest.mark.asyncio
    async def test_save_policy_replaces_snapshot(self, make_service):
        service = make_service()
        assert await service.get_policy() == DEFAULT_POLICY

        saved = await service.save_policy({"workflow": {"enabled": True}})

        assert await service.get_policy() is saved


@pytest.mark.unit
class TestAlertsForViewer:
    """Tests for alerts_for_viewer."""

    @pytest.mark.asyncio
    async def test_viewer_preferences(self, make_service):
        service = make_service(
            environment=FakeEnvironment(["fr-CA", "de"]),
            host_context=FakeHostContext(tenant_culture=1033),
        )

        assert await service.get_viewer_preferences() == [FR, DE, EN]

    @pytest.mark.asyncio
    async def test_second_choice_matches_before_fallback(self, make_service):
        """The full preference list lets a second browser language match."""
        service = make_service(environment=FakeEnvironment(["sv-SE", "de-DE"]))
        variants = [
            make_variant(EN, available_for_all=True),
            make_variant(DE),
        ]

        result = await service.alerts_for_viewer(variants)

        assert [v.target_language for v in result] == [DE]

    @pytest.mark.asyncio
    async def test_override_changes_selection(self, make_service):
        service = make_service(environment=FakeEnvironment(["en-US"]))
        variants = [make_variant(EN), make_variant(FR)]
        assert (await service.alerts_for_viewer(variants))[0].target_language is EN

        service.resolver.set_override("fr-fr")

        assert (await service.alerts_for_viewer(variants))[0].target_language is FR

    @pytest.mark.asyncio
    async def test_workflow_policy_applied(self, make_service):
        service = make_service(
            policy_storage=InMemoryPolicyStorage({"workflow": {"enabled": True}}),
            environment=FakeEnvironment(["fr-FR"]),
        )
        variants = [
            make_variant(EN, workflow_status=WorkflowStatus.APPROVED),
            make_variant(FR, workflow_status=WorkflowStatus.DRAFT),
        ]

        result = await service.alerts_for_viewer(variants)

        assert [v.target_language for v in result] == [EN]


@pytest.mark.unit
class TestPreparePublication:
    """Tests for prepare_publication."""

    @pytest.mark.asyncio
    async def test_publishable(self, make_service):
        service = make_service()
        template = VariantTemplate(link_url="https://example.com/status")

        readiness, records = await service.prepare_publication(
            template,
            [
                make_content(EN, link_description="Status page"),
                make_content(FR, link_description="Page d'état"),
            ],
        )

        assert readiness.is_publishable is True
        assert len(records) == 2
        assert records[0].language_group == records[1].language_group
        assert records[0].language_group.startswith("lang-group-")

    @pytest.mark.asyncio
    async def test_blocked(self, make_service):
        service = make_service()
        template = VariantTemplate(link_url="https://example.com/status")

        readiness, records = await service.prepare_publication(
            template, [make_content(EN)]
        )

        assert readiness.is_publishable is False
        assert readiness.missing_for(EN) == ["link_description"]
        assert records == []

    @pytest.mark.asyncio
    async def test_explicit_link_url(self, make_service):
        service = make_service()

        readiness, records = await service.prepare_publication(
            VariantTemplate(), [make_content(EN)], link_url="https://example.com"
        )

        assert readiness.is_publishable is False

    @pytest.mark.asyncio
    async def test_duplicate_languages(self, make_service):
        service = make_service()

        with pytest.raises(DuplicateLanguageError):
            await service.prepare_publication(
                VariantTemplate(), [make_content(EN), make_content(EN)]
            )


@pytest.mark.unit
class TestFactory:
    """Tests for the factory helpers."""

    def test_in_memory_policy_storage_by_default(self, language_settings):
        assert isinstance(create_policy_storage(language_settings), InMemoryPolicyStorage)

    def test_yaml_policy_storage_when_configured(self, tmp_path):
        settings = LanguageFeatureSettings(
            LANGUAGE_POLICY_FILE=str(tmp_path / "policy.yml")
        )

        storage = create_policy_storage(settings)

        assert isinstance(storage, YAMLPolicyStorage)
        assert storage.path == tmp_path / "policy.yml"

    def test_service_wiring(self, language_settings):
        service = create_alert_language_service(settings=language_settings)

        assert isinstance(service, AlertLanguageService)
        assert service.resolver.override_key == "test-language-override"

    def test_session_id(self, language_settings):
        service = create_alert_language_service(
            settings=language_settings, session_id="viewer-42"
        )
        generated = create_alert_language_service(settings=language_settings)

        assert service.session_id == "viewer-42"
        assert generated.session_id
