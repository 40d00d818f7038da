"""Shared test fixtures."""

from tests.shared.fixtures.factories import (
    TestAccountFactory,
    TestSecurityFactory,
    TestTaxonomyFactory,
    utc,
)

__all__ = [
    "TestAccountFactory",
    "TestSecurityFactory",
    "TestTaxonomyFactory",
    "utc",
]
