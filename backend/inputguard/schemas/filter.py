"""Filter Schemas - Pydantic models for the filter endpoint boundary.

Invariants:
    - Every request field is nullable: core.filter_input owns argument validation,
      so a missing user/feature/input yields the same ArgumentError as in-process calls
    - UserPayload.id and .features are optional for the same reason: {"user": {}}
      reaches core and fails as "user has no features"
    - A resource without id never matches an owner (denied unless overridden)
    - input values are passed through untouched (Any)

Design Decisions:
    - Schemas carry shape only; whitelist and ownership rules stay in core/
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Acting user as resolved by the session layer."""
    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    features: list[str] | None = None


class ResourcePayload(BaseModel):
    """Target resource. owner_id is only read for content features."""
    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    owner_id: int | str | None = None


class FilterRequest(BaseModel):
    """POST /api/v1/filter body."""
    user: UserPayload | None = None
    feature: str | None = Field(None, max_length=128)
    input: dict[str, Any] | None = None
    resource: ResourcePayload | None = None


class FilterResponse(BaseModel):
    """Filtered payload. Empty data means nothing is authorized to change."""
    data: dict[str, Any]
