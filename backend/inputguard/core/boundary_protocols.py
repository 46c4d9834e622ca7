"""Boundary Protocols - structural contracts for objects supplied by collaborators.

Invariants:
    - Core NEVER imports the session/auth layer that produces users
    - Users and resources are read, never written
    - Mappings and attribute objects are both accepted through read_attribute()
    - A feature set is a non-string Collection; anything else counts as absent

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - MISSING distinguishes "attribute absent" from "attribute is None"
"""

from collections.abc import Collection, Mapping
from typing import Any, Protocol, Union


class UserLike(Protocol):
    """Acting user as produced by the authentication collaborator."""
    id: Any
    features: Collection[str]


class ResourceLike(Protocol):
    """Target entity of an action. Only identity fields are read."""
    id: Any


User = Union[UserLike, Mapping[str, Any]]
Resource = Union[ResourceLike, Mapping[str, Any]]

MISSING = object()


def read_attribute(obj: object, name: str) -> Any:
    """Read `name` from a mapping key or an attribute. Returns MISSING if absent."""
    if isinstance(obj, Mapping):
        return obj.get(name, MISSING)
    return getattr(obj, name, MISSING)


def read_features(user: object) -> Collection[str] | None:
    """The user's feature set, or None when it is absent or not a collection."""
    features = read_attribute(user, "features")
    if isinstance(features, (str, bytes)) or not isinstance(features, Collection):
        return None
    return features
