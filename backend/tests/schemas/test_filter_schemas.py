"""Filter Schemas - boundary models stay permissive so core decides validity.

Invariants:
    - Empty body parses (all fields None); core raises the precise ArgumentError
    - UserPayload without features parses with features=None
    - input values are passed through without coercion
"""

import pytest
from pydantic import ValidationError

from inputguard.schemas.filter import (
    FilterRequest,
    FilterResponse,
    ResourcePayload,
    UserPayload,
)


def test_empty_request_parses_to_nones():
    req = FilterRequest()
    assert req.user is None
    assert req.feature is None
    assert req.input is None
    assert req.resource is None


def test_user_features_optional():
    user = UserPayload(id=1)
    assert user.features is None


def test_user_payload_fields_optional():
    user = UserPayload()
    assert user.id is None
    assert user.features is None


def test_input_values_pass_through():
    req = FilterRequest.model_validate({
        "user": {"id": 1, "features": ["create:user"]},
        "feature": "create:user",
        "input": {"username": "a", "notifications": False, "extra": {"nested": [1]}},
    })
    assert req.input == {"username": "a", "notifications": False, "extra": {"nested": [1]}}
    assert req.user.features == ["create:user"]


def test_resource_owner_optional():
    assert ResourcePayload(id="abc").owner_id is None
    assert ResourcePayload(id=1, owner_id=2).owner_id == 2


def test_feature_length_bounded():
    with pytest.raises(ValidationError):
        FilterRequest(feature="x" * 129)


def test_response_wraps_data():
    assert FilterResponse(data={}).model_dump() == {"data": {}}
