"""Feature-level fixtures for i18n system tests.

Provides collections of raw locale tokens for mapping scenarios.
"""

import pytest


@pytest.fixture
def browser_tags():
    """Language tags as browsers report them."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "british": "en-GB",
        "canadian_french": "fr-CA",
        "underscore": "fr_FR",
        "padded": "  de-DE ",
        "norwegian_macro": "no",
        "unknown_region": "de-LU",
        "unsupported": "ja-JP",
    }


@pytest.fixture
def host_cultures():
    """Host culture values, numeric and textual."""
    return {
        "lcid_en": 1033,
        "lcid_fr_string": "1036",
        "lcid_unknown": 1041,
        "tag": "sv-SE",
        "empty": "",
    }
