"""Alert language service for dependency injection.

Provides a class-based interface over the resolution engine: one instance
per viewer or author session, composing the preference resolver, the policy
store adapter and the pure selection, validation and fan-out functions.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from infrastructure.i18n.models import TargetLanguage
from infrastructure.logging import bind_session_context, get_module_logger, new_session_id
from modules.alerts.domain.models import (
    ContentVariant,
    LanguageContent,
    PublishReadiness,
    VariantTemplate,
)
from modules.alerts.fanout import expand
from modules.alerts.policy import GovernancePolicy, PolicyInput, PolicyStoreAdapter
from modules.alerts.preferences import PreferenceResolver
from modules.alerts.selection import select_for_viewer
from modules.alerts.validation import check_publish_readiness

logger = get_module_logger()


class AlertLanguageService:
    """Session-scoped facade for multi-language alert resolution.

    The policy is loaded once per session and treated as a read-only
    snapshot; reload_policy() or save_policy() replace the snapshot. Events
    logged by alerts_for_viewer() and prepare_publication() carry the
    session id.

    Usage:
        service = create_alert_language_service(environment=browser)

        visible = await service.alerts_for_viewer(variants)

        readiness, records = await service.prepare_publication(template, content)
        if readiness.is_publishable:
            storage.create_items(records)

    Attributes:
        session_id: Log correlation id of the session.
    """

    def __init__(
        self,
        resolver: PreferenceResolver,
        policy_store: PolicyStoreAdapter,
        group_prefix: Optional[str] = None,
        session_id: Optional[str] = None,
    ):
        """Initialize the service.

        Args:
            resolver: Preference resolver for the session's viewer.
            policy_store: Adapter over the governance policy storage.
            group_prefix: Prefix for generated language group keys.
            session_id: Log correlation id. Generated when omitted.
        """
        self._resolver = resolver
        self._policy_store = policy_store
        self._group_prefix = group_prefix
        self._policy: Optional[GovernancePolicy] = None
        self.session_id = session_id or new_session_id()

    @property
    def resolver(self) -> PreferenceResolver:
        """Access the underlying PreferenceResolver."""
        return self._resolver

    async def get_policy(self) -> GovernancePolicy:
        """Return the session policy snapshot, loading it on first use."""
        if self._policy is None:
            self._policy = await self._policy_store.load()
        return self._policy

    async def reload_policy(self) -> GovernancePolicy:
        """Discard the snapshot and load the policy again."""
        self._policy = await self._policy_store.load()
        return self._policy

    async def save_policy(self, policy: PolicyInput) -> GovernancePolicy:
        """Persist a policy and make it the session snapshot."""
        self._policy = await self._policy_store.save(policy)
        return self._policy

    async def get_viewer_preferences(self) -> List[TargetLanguage]:
        """Resolved best language first, then the full preference list."""
        best = await self._resolver.resolve_preference()
        preferences = [best.language]
        for language in self._resolver.get_full_preference_list():
            if language not in preferences:
                preferences.append(language)
        return preferences

    async def alerts_for_viewer(
        self, variants: Iterable[ContentVariant]
    ) -> List[ContentVariant]:
        """Select the variants the current viewer should see.

        Args:
            variants: Flat collection of variants from content storage.

        Returns:
            Selected variants in stable display order.
        """
        with bind_session_context(self.session_id):
            policy = await self.get_policy()
            preferences = await self.get_viewer_preferences()
            tenant_default = self._resolver.get_tenant_default_language()
            return select_for_viewer(variants, policy, preferences, tenant_default)

    async def prepare_publication(
        self,
        template: VariantTemplate,
        content: Sequence[LanguageContent],
        link_url: Optional[str] = None,
    ) -> Tuple[PublishReadiness, List[ContentVariant]]:
        """Check an authoring set and fan it out when publishable.

        Args:
            template: Language-independent alert fields.
            content: Authored entries, one per language.
            link_url: Link shared by all languages. Defaults to template.link_url.

        Returns:
            (readiness, records); records is empty unless publishable.

        Raises:
            DuplicateLanguageError: If the policy prevents duplicate languages
                and content repeats a language.
        """
        with bind_session_context(self.session_id):
            policy = await self.get_policy()
            tenant_default = self._resolver.get_tenant_default_language()
            readiness = check_publish_readiness(
                content,
                policy,
                tenant_default,
                link_url=link_url if link_url is not None else template.link_url,
            )
            if not readiness.is_publishable:
                logger.info("publication_blocked", errors=readiness.errors)
                return readiness, []

            records = expand(template, content, policy, group_prefix=self._group_prefix)
            return readiness, records
