"""Multi-language alert feature settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class LanguageFeatureSettings(FeatureSettings):
    """Configuration for multi-language alert resolution.

    Environment Variables:
        LANGUAGE_TENANT_DEFAULT: Tenant default language used when the host
            exposes no tenant culture (code, tag or numeric locale id)
        LANGUAGE_OVERRIDE_STORAGE_KEY: Key of the viewer's manual language
            override in the durable override store
        LANGUAGE_GROUP_PREFIX: Prefix of generated language group keys
        LANGUAGE_POLICY_FILE: Path to a YAML governance policy document

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        key = settings.language.override_storage_key
        if settings.language.policy_file:
            storage = YAMLPolicyStorage(settings.language.policy_file)
        ```
    """

    tenant_default: Optional[str] = Field(
        default=None,
        alias="LANGUAGE_TENANT_DEFAULT",
        description="Tenant default language when the host culture is unknown",
    )
    override_storage_key: str = Field(
        default="alert-banner-language-override",
        alias="LANGUAGE_OVERRIDE_STORAGE_KEY",
        description="Override store key for the viewer's manual language choice",
    )
    group_prefix: str = Field(
        default="lang-group-",
        alias="LANGUAGE_GROUP_PREFIX",
        description="Prefix for generated language group keys",
    )
    policy_file: Optional[str] = Field(
        default=None,
        alias="LANGUAGE_POLICY_FILE",
        description="Path to a YAML governance policy document",
    )
