"""Viewer language preference resolution.

Determines which language a viewer should see by cascading through sources,
first success wins:

1. Manual override from the durable override store
2. Environment (browser) languages, in the environment's order
3. Remote profile preferred language
4. Host context UI culture
5. Tenant default language
6. Hard default (en-us), tagged as fallback

Every source failure is logged and treated as "no result"; resolution never
raises. The resolved value is cached for the session and concurrent callers
share one in-flight resolution, so the remote profile is looked up at most
once until the cache is invalidated by setting or clearing the override.
"""

import asyncio
from typing import Callable, List, Optional, TypeVar, Union

from infrastructure.configuration import LanguageFeatureSettings
from infrastructure.i18n.mapping import map_culture, map_token
from infrastructure.i18n.models import TargetLanguage
from infrastructure.logging import get_module_logger
from modules.alerts.domain.errors import UnsupportedLanguageError
from modules.alerts.domain.models import PreferenceResult, PreferenceSource
from modules.alerts.domain.types import (
    EnvironmentLanguageSource,
    HostContextSource,
    OverrideStore,
    ProfileLanguageSource,
)

logger = get_module_logger()

HARD_DEFAULT_LANGUAGE = TargetLanguage.EN_US

_T = TypeVar("_T")


class PreferenceResolver:
    """Session-scoped resolver for the viewer's preferred language.

    One instance per viewer session. The cache lives on the instance and is
    only invalidated explicitly through set_override(), clear_override() or
    invalidate(); it never expires by time.

    Attributes:
        override_key: Key of the manual override in the override store.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentLanguageSource] = None,
        profile: Optional[ProfileLanguageSource] = None,
        host_context: Optional[HostContextSource] = None,
        override_store: Optional[OverrideStore] = None,
        settings: Optional[LanguageFeatureSettings] = None,
    ):
        """Initialize the resolver.

        Args:
            environment: Source of the viewer's environment languages.
            profile: Remote profile lookup.
            host_context: Host culture settings.
            override_store: Durable store for the manual override.
            settings: Language feature settings. Loaded from the settings
                provider when not given.
        """
        if settings is None:
            from infrastructure.services.providers import get_settings

            settings = get_settings().language

        self._environment = environment
        self._profile = profile
        self._host_context = host_context
        self._override_store = override_store
        self._configured_default = settings.tenant_default
        self.override_key = settings.override_storage_key

        self._cached: Optional[PreferenceResult] = None
        self._pending: Optional["asyncio.Task[PreferenceResult]"] = None
        self._generation = 0

    @property
    def cached_preference(self) -> Optional[PreferenceResult]:
        """The session-cached resolution, if any."""
        return self._cached

    async def resolve_preference(self) -> PreferenceResult:
        """Resolve the viewer's single best language.

        Returns the cached value when present. Otherwise joins the in-flight
        resolution, starting one if none is running. A caller that is
        cancelled while waiting does not cancel the shared resolution.

        Returns:
            PreferenceResult with language and source.
        """
        if self._cached is not None:
            return self._cached

        if self._pending is None:
            generation = self._generation
            task = asyncio.ensure_future(self._resolve())
            task.add_done_callback(
                lambda done: self._on_resolved(done, generation)
            )
            self._pending = task

        return await asyncio.shield(self._pending)

    def _on_resolved(self, task: "asyncio.Task[PreferenceResult]", generation: int) -> None:
        if self._pending is task:
            self._pending = None
        if task.cancelled() or task.exception() is not None:
            return
        if generation != self._generation:
            logger.debug("stale_preference_discarded", generation=generation)
            return
        self._cached = task.result()

    async def _resolve(self) -> PreferenceResult:
        override = self.get_override()
        if override is not None:
            return self._resolved(override, PreferenceSource.OVERRIDE)

        environment_languages = self.get_environment_languages()
        if environment_languages:
            return self._resolved(environment_languages[0], PreferenceSource.BROWSER)

        profile_language = await self._get_profile_language()
        if profile_language is not None:
            return self._resolved(profile_language, PreferenceSource.HOST_PROFILE)

        host_language = self._get_host_language()
        if host_language is not None:
            return self._resolved(host_language, PreferenceSource.HOST_CONTEXT)

        tenant_default = self._derive_tenant_default()
        if tenant_default is not None:
            return self._resolved(tenant_default, PreferenceSource.TENANT_DEFAULT)

        return self._resolved(HARD_DEFAULT_LANGUAGE, PreferenceSource.FALLBACK)

    def _resolved(self, language: TargetLanguage, source: PreferenceSource) -> PreferenceResult:
        logger.info("preference_resolved", language=language.value, source=source.value)
        return PreferenceResult(language=language, source=source)

    def get_full_preference_list(self) -> List[TargetLanguage]:
        """Ordered, de-duplicated list of every acceptable viewer language.

        Override (if set), then every mapped environment language in order,
        then the tenant default. Lets a viewer's second choice match before
        selection falls back further.

        Returns:
            List of TargetLanguage, never empty.
        """
        preferences: List[TargetLanguage] = []
        override = self.get_override()
        if override is not None:
            preferences.append(override)
        for language in self.get_environment_languages():
            if language not in preferences:
                preferences.append(language)
        tenant_default = self.get_tenant_default_language()
        if tenant_default not in preferences:
            preferences.append(tenant_default)
        return preferences

    def get_override(self) -> Optional[TargetLanguage]:
        """Read the manual override, ignoring unavailable storage or bad values."""
        if self._override_store is None:
            return None
        raw = self._call_source("override", lambda: self._override_store.get(self.override_key))
        if not raw:
            return None
        try:
            language = TargetLanguage.from_string(raw)
        except ValueError:
            language = None
        if language is None or not language.is_concrete:
            logger.warning("override_ignored", value=raw)
            return None
        return language

    def set_override(self, language: Union[TargetLanguage, str]) -> TargetLanguage:
        """Persist a manual language override and invalidate the cache.

        Args:
            language: Concrete supported language code.

        Returns:
            The stored TargetLanguage.

        Raises:
            UnsupportedLanguageError: If language is not a concrete supported code.
        """
        try:
            parsed = TargetLanguage.from_string(language)
        except ValueError as e:
            raise UnsupportedLanguageError(language) from e
        if not parsed.is_concrete:
            raise UnsupportedLanguageError(language)

        if self._override_store is not None:
            self._call_source(
                "override", lambda: self._override_store.set(self.override_key, parsed.value)
            )
        logger.info("override_set", language=parsed.value)
        self.invalidate()
        return parsed

    def clear_override(self) -> None:
        """Remove the manual override and invalidate the cache."""
        if self._override_store is not None:
            self._call_source("override", lambda: self._override_store.remove(self.override_key))
        logger.info("override_cleared")
        self.invalidate()

    def invalidate(self) -> None:
        """Drop the cached preference and detach any in-flight resolution.

        A resolution already running keeps serving the callers awaiting it,
        but its result is not cached.
        """
        self._generation += 1
        self._cached = None
        self._pending = None

    def get_environment_languages(self) -> List[TargetLanguage]:
        """Mapped environment languages in preference order, without duplicates."""
        if self._environment is None:
            return []
        tokens = self._call_source("browser", self._environment.get_environment_languages)
        if tokens is None:
            return []
        if not isinstance(tokens, (list, tuple)):
            logger.warning(
                "preference_source_failed",
                source="browser",
                error=f"expected a list of tags, got {type(tokens).__name__}",
            )
            return []
        languages: List[TargetLanguage] = []
        for token in tokens:
            language = map_token(token)
            if language is not None and language not in languages:
                languages.append(language)
        return languages

    def get_tenant_default_language(self) -> TargetLanguage:
        """Tenant default language, or the hard default when none is known."""
        return self._derive_tenant_default() or HARD_DEFAULT_LANGUAGE

    def _derive_tenant_default(self) -> Optional[TargetLanguage]:
        if self._host_context is not None:
            culture = self._call_source("tenant_default", self._host_context.get_tenant_culture)
            language = map_culture(culture)
            if language is not None:
                return language
        return map_culture(self._configured_default)

    async def _get_profile_language(self) -> Optional[TargetLanguage]:
        if self._profile is None:
            return None
        try:
            preferred = await self._profile.get_preferred_language()
        except Exception as e:
            logger.warning("preference_source_failed", source="host_profile", error=str(e))
            return None
        return map_token(preferred)

    def _get_host_language(self) -> Optional[TargetLanguage]:
        if self._host_context is None:
            return None
        culture = self._call_source("host_context", self._host_context.get_host_culture)
        return map_culture(culture)

    def _call_source(self, source: str, call: Callable[[], _T]) -> Optional[_T]:
        try:
            return call()
        except Exception as e:
            logger.warning("preference_source_failed", source=source, error=str(e))
            return None
