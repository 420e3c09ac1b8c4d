"""Test data factories for deterministic test data generation."""

from tests.factories.alerts import (
    make_content,
    make_grouped_variants,
    make_variant,
)

__all__ = [
    "make_content",
    "make_grouped_variants",
    "make_variant",
]
