"""Multi-language alert resolution module.

Decides which language variant of each alert a viewer sees, and whether an
author's multi-language alert is complete enough to publish, under the
organization's governance policy (fallback language, field inheritance,
approval workflow).

Components:
- preferences: PreferenceResolver (viewer language cascade, session cache)
- policy: GovernancePolicy, normalize_policy, PolicyStoreAdapter
- selection: select_for_viewer and group authoring helpers
- validation: validate_language_content, check_publish_readiness
- fanout: expand an authored alert into per-language records
- service: AlertLanguageService facade, built by factory helpers
"""

from modules.alerts.factory import create_alert_language_service
from modules.alerts.fanout import expand, new_language_group_key
from modules.alerts.policy import (
    DEFAULT_POLICY,
    TENANT_DEFAULT,
    CompletenessRule,
    GovernancePolicy,
    PolicyStoreAdapter,
    normalize_policy,
)
from modules.alerts.preferences import PreferenceResolver
from modules.alerts.selection import (
    detect_duplicate_languages,
    get_language_content,
    select_for_viewer,
)
from modules.alerts.service import AlertLanguageService
from modules.alerts.validation import check_publish_readiness, validate_language_content

__all__ = [
    "AlertLanguageService",
    "create_alert_language_service",
    "PreferenceResolver",
    "GovernancePolicy",
    "CompletenessRule",
    "DEFAULT_POLICY",
    "TENANT_DEFAULT",
    "PolicyStoreAdapter",
    "normalize_policy",
    "select_for_viewer",
    "get_language_content",
    "detect_duplicate_languages",
    "validate_language_content",
    "check_publish_readiness",
    "expand",
    "new_language_group_key",
]
