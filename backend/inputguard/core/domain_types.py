"""Domain Types - closed vocabulary of feature identifiers and call-scoped markers.

Invariants:
    - Every feature identifier the core understands is a Feature member
    - Feature values are the wire strings (e.g. "update:user:others")
    - UNSET is the only "absent" marker; None is a regular, defined value

Design Decisions:
    - str Enum over bare strings: Feature.CREATE_USER == "create:user", so user
      feature sets holding plain strings still match by membership (ADR: wire compat)
    - Override scopes are separate members, never derived by splitting on ":"
"""

from enum import Enum
from typing import Any


# ─── Enums ───────────────────────────────────────────────────────

class Feature(str, Enum):
    """Authorizable actions. Values match the external feature registry."""
    CREATE_SESSION = "create:session"
    CREATE_USER = "create:user"
    UPDATE_USER = "update:user"
    UPDATE_USER_OTHERS = "update:user:others"
    BAN_USER = "ban:user"
    CREATE_CONTENT = "create:content"
    CREATE_CONTENT_TEXT_ROOT = "create:content:text_root"
    CREATE_CONTENT_TEXT_CHILD = "create:content:text_child"
    UPDATE_CONTENT = "update:content"
    UPDATE_CONTENT_OTHERS = "update:content:others"
    CREATE_RECOVERY_TOKEN_USERNAME = "create:recovery_token:username"
    UPDATE_RECOVERY_TOKEN = "update:recovery_token"
    CREATE_VOTE = "create:vote"

    @classmethod
    def parse(cls, value: object) -> "Feature | None":
        """Return the member for a raw identifier, or None if it is not one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# ─── Sentinels ───────────────────────────────────────────────────

class _UnsetType:
    """Marker for a field that is present as a key but carries no value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_UnsetType, ())


UNSET: Any = _UnsetType()
