"""Factory functions for creating alert language components.

Provides convenience functions for wiring a session's service from
application settings.
"""

from typing import Optional

from infrastructure.configuration import LanguageFeatureSettings
from infrastructure.logging import get_module_logger
from modules.alerts.domain.types import (
    EnvironmentLanguageSource,
    HostContextSource,
    OverrideStore,
    PolicyStorage,
    ProfileLanguageSource,
)
from modules.alerts.policy import PolicyStoreAdapter
from modules.alerts.preferences import PreferenceResolver
from modules.alerts.service import AlertLanguageService
from modules.alerts.storage import (
    InMemoryOverrideStore,
    InMemoryPolicyStorage,
    YAMLPolicyStorage,
)

logger = get_module_logger()


def create_policy_storage(settings: LanguageFeatureSettings) -> PolicyStorage:
    """Create the policy storage configured by LANGUAGE_POLICY_FILE.

    Falls back to in-memory storage (default policy) when no file is set.
    """
    if settings.policy_file:
        return YAMLPolicyStorage(settings.policy_file)
    return InMemoryPolicyStorage()


def create_alert_language_service(
    environment: Optional[EnvironmentLanguageSource] = None,
    profile: Optional[ProfileLanguageSource] = None,
    host_context: Optional[HostContextSource] = None,
    override_store: Optional[OverrideStore] = None,
    policy_storage: Optional[PolicyStorage] = None,
    settings: Optional[LanguageFeatureSettings] = None,
    session_id: Optional[str] = None,
) -> AlertLanguageService:
    """Create and configure an AlertLanguageService for one session.

    Args:
        environment: Source of the viewer's environment languages.
        profile: Remote profile lookup.
        host_context: Host culture settings.
        override_store: Durable override store (default: in-memory).
        policy_storage: Policy storage (default: from settings).
        settings: Language feature settings (default: application settings).
        session_id: Log correlation id (default: generated).

    Returns:
        AlertLanguageService: Configured service instance

    Usage:
        # Viewer session with a browser language source
        service = create_alert_language_service(environment=browser)

        # Author session against a specific policy file
        service = create_alert_language_service(
            policy_storage=YAMLPolicyStorage("/etc/alerts/policy.yml"),
        )
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings().language

    resolver = PreferenceResolver(
        environment=environment,
        profile=profile,
        host_context=host_context,
        override_store=override_store or InMemoryOverrideStore(),
        settings=settings,
    )
    storage = policy_storage or create_policy_storage(settings)

    logger.info(
        "alert_language_service_created",
        policy_storage=type(storage).__name__,
        has_profile_source=profile is not None,
    )
    return AlertLanguageService(
        resolver=resolver,
        policy_store=PolicyStoreAdapter(storage),
        group_prefix=settings.group_prefix,
        session_id=session_id,
    )
