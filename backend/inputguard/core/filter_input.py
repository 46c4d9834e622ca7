"""Input Filter - strips an untrusted payload down to what a feature may set.

Invariants:
    - Validation runs in fixed order (user, features, feature, catalog, input);
      first failure raises ArgumentError and nothing else runs
    - Authorization denial returns {} silently; it is never raised
    - Output keys are a subset of fields_for(feature), in whitelist order
    - Output never contains a key whose value is UNSET
    - Inputs (user, input, resource) are never mutated

Design Decisions:
    - Phases as separate pure functions: each is testable on its own
      (ADR: Functional Core)
    - Explicit UNSET cleanup pass instead of a serialization round-trip, so None
      and other JSON-incompatible values survive untouched
"""

from collections.abc import Mapping
from typing import Any

from inputguard.core.boundary_protocols import Resource, User, read_features
from inputguard.core.domain_types import UNSET, Feature
from inputguard.core.errors import ArgumentError, ErrorContext
from inputguard.core.feature_catalog import FeatureCatalog
from inputguard.core.field_whitelist import fields_for
from inputguard.core.permissions import can


_DEFAULT_CATALOG = FeatureCatalog.default()


# ─── Validation ──────────────────────────────────────────────────

def validate_user(user: User | None) -> None:
    if user is None:
        raise ArgumentError('No "user" was specified.', "user")
    if read_features(user) is None:
        raise ArgumentError('"user" has no "features".', "user")


def validate_feature(feature: Any, catalog: FeatureCatalog) -> Feature:
    """Resolve `feature` to a catalog member or raise ArgumentError."""
    if feature is None:
        raise ArgumentError('No "feature" was specified.', "feature")
    parsed = Feature.parse(feature)
    if parsed is None or not catalog.is_known(parsed):
        raise ArgumentError(
            "The requested feature is not available.", "feature",
            ErrorContext(feature=str(feature)),
        )
    return parsed


def validate_input(input_values: Any, feature: Feature) -> None:
    if input_values is None or not isinstance(input_values, Mapping):
        raise ArgumentError(
            'No "input" was specified.', "input",
            ErrorContext(feature=feature.value),
        )


# ─── Projection & Cleanup ────────────────────────────────────────

def project(input_values: Mapping[str, Any], feature: Feature) -> dict[str, Any]:
    """Copy whitelisted keys present in `input_values`, in whitelist order."""
    return {
        name: input_values[name]
        for name in fields_for(feature)
        if name in input_values
    }


def strip_unset(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is the UNSET marker."""
    return {key: value for key, value in values.items() if value is not UNSET}


# ─── Entry Point ─────────────────────────────────────────────────

def filter_input(
    user: User | None,
    feature: Feature | str | None,
    input_values: Mapping[str, Any] | None,
    resource: Resource | None = None,
    *,
    catalog: FeatureCatalog | None = None,
) -> dict[str, Any]:
    """Return the subset of `input_values` that `user` may set through `feature`.

    Raises ArgumentError for malformed calls. Returns {} when the user is not
    authorized; callers treat that as "nothing to change".

    `catalog` is the set of features the registry made available. When omitted,
    every Feature member is available: core never reads settings, so callers
    that honor AVAILABLE_FEATURES must pass
    infrastructure.feature_registry.get_feature_catalog() explicitly (the HTTP
    route does this through Depends).
    """
    validate_user(user)
    parsed = validate_feature(
        feature, _DEFAULT_CATALOG if catalog is None else catalog,
    )
    validate_input(input_values, parsed)

    if not can(user, parsed, resource):
        return {}

    return strip_unset(project(input_values, parsed))
