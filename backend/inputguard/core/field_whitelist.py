"""Field Whitelist - per-feature ordered list of input fields an action may set.

Invariants:
    - Every Feature member has an entry (possibly empty)
    - Order is significant: filter_input projects fields in whitelist order
    - Override features carry no fields; they only bypass ownership
    - Tables are read-only (MappingProxyType over tuples)

Design Decisions:
    - Whitelist is independent of ownership: an override holder is still limited
      to the base feature's fields (ADR: least privilege)
    - Privileged attributes (features, tabcoins, is_admin, ...) never appear here
"""

from types import MappingProxyType
from typing import Mapping

from inputguard.core.domain_types import Feature


_CONTENT_CREATE_FIELDS = ("parent_id", "slug", "title", "body", "status", "source_url")

FIELD_WHITELIST: Mapping[Feature, tuple[str, ...]] = MappingProxyType({
    Feature.CREATE_SESSION: ("email", "password"),
    Feature.CREATE_USER: ("username", "email", "password"),
    Feature.UPDATE_USER: ("username", "email", "password", "description", "notifications"),
    Feature.UPDATE_USER_OTHERS: (),
    Feature.BAN_USER: ("ban_type",),
    Feature.CREATE_CONTENT: _CONTENT_CREATE_FIELDS,
    Feature.CREATE_CONTENT_TEXT_ROOT: _CONTENT_CREATE_FIELDS,
    Feature.CREATE_CONTENT_TEXT_CHILD: _CONTENT_CREATE_FIELDS,
    Feature.UPDATE_CONTENT: ("slug", "title", "body", "status", "source_url"),
    Feature.UPDATE_CONTENT_OTHERS: (),
    Feature.CREATE_RECOVERY_TOKEN_USERNAME: ("username", "email"),
    Feature.UPDATE_RECOVERY_TOKEN: ("token_id", "password"),
    Feature.CREATE_VOTE: ("transaction_type",),
})


def fields_for(feature: object) -> tuple[str, ...]:
    """Whitelisted input fields for `feature`. Unknown features get ()."""
    parsed = Feature.parse(feature)
    if parsed is None:
        return ()
    return FIELD_WHITELIST.get(parsed, ())
