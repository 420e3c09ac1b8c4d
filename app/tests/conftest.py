"""Shared fixtures for the alert language engine test suite."""

import pytest

from infrastructure.configuration import LanguageFeatureSettings


@pytest.fixture
def language_settings():
    """Language feature settings isolated from the process environment."""
    return LanguageFeatureSettings(
        LANGUAGE_TENANT_DEFAULT=None,
        LANGUAGE_OVERRIDE_STORAGE_KEY="test-language-override",
        LANGUAGE_GROUP_PREFIX="lang-group-",
        LANGUAGE_POLICY_FILE=None,
    )
