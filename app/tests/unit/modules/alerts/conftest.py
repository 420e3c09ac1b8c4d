"""Fixtures for modules.alerts tests."""

import pytest

from infrastructure.i18n import TargetLanguage
from modules.alerts.domain.models import VariantTemplate
from modules.alerts.policy import DEFAULT_POLICY, normalize_policy
from modules.alerts.storage import InMemoryOverrideStore


@pytest.fixture
def override_store():
    return InMemoryOverrideStore()


@pytest.fixture
def tenant_default():
    return TargetLanguage.EN_US


@pytest.fixture
def default_policy():
    return DEFAULT_POLICY


@pytest.fixture
def inheritance_policy():
    """Policy with field inheritance enabled for every field."""
    return normalize_policy({"inheritance": {"enabled": True}})


@pytest.fixture
def workflow_policy():
    """Policy hiding unapproved variants from viewers."""
    return normalize_policy({"workflow": {"enabled": True}})


@pytest.fixture
def template():
    """Variant template with storage attributes."""
    return VariantTemplate(
        link_url="https://intranet.example.com/status",
        attributes={"AlertType": "Maintenance", "priority": "high"},
    )
