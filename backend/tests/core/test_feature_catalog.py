"""Feature Catalog - membership tests against the registry-supplied set.

Tests cover:
    - default() exposes every Feature member
    - from_names() parses registry strings, rejects unknown identifiers
    - is_known() is total: never raises, False for junk
    - catalogs are immutable
"""

import dataclasses

import pytest

from inputguard.core.domain_types import Feature
from inputguard.core.errors import ConfigurationError
from inputguard.core.feature_catalog import FeatureCatalog


def test_default_catalog_contains_every_feature():
    catalog = FeatureCatalog.default()
    assert len(catalog) == len(Feature)
    assert all(catalog.is_known(f) for f in Feature)


def test_from_names_builds_restricted_catalog():
    catalog = FeatureCatalog.from_names(["create:user", " ban:user "])
    assert catalog.features == frozenset({Feature.CREATE_USER, Feature.BAN_USER})
    assert catalog.is_known("create:user")
    assert catalog.is_known(Feature.BAN_USER)
    assert not catalog.is_known("update:user")


def test_from_names_rejects_unknown_identifiers():
    with pytest.raises(ConfigurationError) as exc_info:
        FeatureCatalog.from_names(["create:user", "read:everything", "fly"])
    assert exc_info.value.unknown == ["read:everything", "fly"]


def test_from_names_empty_is_empty_catalog():
    catalog = FeatureCatalog.from_names([])
    assert len(catalog) == 0
    assert not catalog.is_known("create:user")


def test_is_known_never_raises():
    catalog = FeatureCatalog.default()
    assert not catalog.is_known(None)
    assert not catalog.is_known(123)
    assert not catalog.is_known({"feature": "create:user"})
    assert not catalog.is_known("feature_inexistente")


def test_contains_delegates_to_is_known():
    catalog = FeatureCatalog.from_names(["ban:user"])
    assert "ban:user" in catalog
    assert "create:user" not in catalog


def test_catalog_is_frozen():
    catalog = FeatureCatalog.default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.features = frozenset()
