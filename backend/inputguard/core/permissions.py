"""Permission Evaluator - decides whether a user may exercise a feature on a resource.

Invariants:
    - can() is PURE: no IO, no side effects, never raises, returns a bool
    - A feature not held by the user is always denied
    - Only features listed in OWNERSHIP_OVERRIDES are resource-scoped
    - A scoped feature on a foreign resource needs the matching override feature
    - Without a resource, ownership is not evaluated

Design Decisions:
    - Explicit override table over parsing ":others" suffixes (ADR: no string convention)
    - OWNER_ATTRIBUTE per feature: users own themselves by id, content is owned
      through owner_id
"""

from types import MappingProxyType
from typing import Mapping

from inputguard.core.boundary_protocols import (
    MISSING, Resource, User, read_attribute, read_features,
)
from inputguard.core.domain_types import Feature


OWNERSHIP_OVERRIDES: Mapping[Feature, Feature] = MappingProxyType({
    Feature.UPDATE_USER: Feature.UPDATE_USER_OTHERS,
    Feature.UPDATE_CONTENT: Feature.UPDATE_CONTENT_OTHERS,
})

OWNER_ATTRIBUTE: Mapping[Feature, str] = MappingProxyType({
    Feature.UPDATE_USER: "id",
    Feature.UPDATE_CONTENT: "owner_id",
})


def holds_feature(user: User, feature: Feature) -> bool:
    """True when the user's feature collection contains `feature`."""
    features = read_features(user)
    return features is not None and feature in features


def is_owner(user: User, feature: Feature, resource: Resource) -> bool:
    """Compare the acting user's id with the resource owner for `feature`."""
    attribute = OWNER_ATTRIBUTE.get(feature, "id")
    owner = read_attribute(resource, attribute)
    if (owner is MISSING or owner is None) and attribute != "id":
        owner = read_attribute(resource, "id")
    user_id = read_attribute(user, "id")
    if owner is MISSING or owner is None or user_id is MISSING:
        return False
    return user_id == owner


def can(user: User, feature: Feature, resource: Resource | None = None) -> bool:
    """Decide whether `user` may exercise `feature`, optionally on `resource`."""
    if not holds_feature(user, feature):
        return False

    override = OWNERSHIP_OVERRIDES.get(feature)
    if override is None or resource is None:
        return True

    return is_owner(user, feature, resource) or holds_feature(user, override)
