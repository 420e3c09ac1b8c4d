"""Collaborator protocols for the alerts module.

The resolution engine never talks to a browser, a directory service or a
list backend directly. These Protocols describe what it consumes; any object
with matching methods can be injected. They are purely type hints.
"""

from typing import Any, Awaitable, List, Mapping, Optional, Protocol, Union

HostCulture = Union[str, int, None]


class EnvironmentLanguageSource(Protocol):
    """Languages reported by the viewer's environment, most preferred first."""

    def get_environment_languages(self) -> List[str]: ...


class ProfileLanguageSource(Protocol):
    """Remote user profile exposing a single preferred-language field."""

    def get_preferred_language(self) -> Awaitable[Optional[str]]: ...


class HostContextSource(Protocol):
    """Rendering host culture settings.

    get_host_culture returns the current UI culture of the page.
    get_tenant_culture returns the site/tenant culture, usually a numeric
    locale id.
    """

    def get_host_culture(self) -> HostCulture: ...

    def get_tenant_culture(self) -> HostCulture: ...


class OverrideStore(Protocol):
    """Durable key/value store for the viewer's manual language override.

    Implementations may raise or return None when storage is unavailable.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class PolicyStorage(Protocol):
    """Persistence of the governance policy document."""

    def load_policy(self) -> Awaitable[Optional[Mapping[str, Any]]]: ...

    def save_policy(self, document: Mapping[str, Any]) -> Awaitable[None]: ...
