"""Feature Catalog - read-only set of feature identifiers available in this process.

Invariants:
    - Immutable after construction (frozen dataclass over frozenset)
    - is_known() never raises: non-strings and unknown strings are simply False
    - from_names() rejects identifiers outside the Feature enum at load time

Design Decisions:
    - Catalog is a value passed into filter_input, not a module global
      (ADR: config loaded once by the shell, shared by reference)
"""

from dataclasses import dataclass
from typing import Iterable

from inputguard.core.domain_types import Feature
from inputguard.core.errors import ConfigurationError


@dataclass(frozen=True)
class FeatureCatalog:
    """Closed set of features the external registry has made available."""
    features: frozenset[Feature]

    @classmethod
    def default(cls) -> "FeatureCatalog":
        return cls(frozenset(Feature))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "FeatureCatalog":
        """Build a catalog from registry strings. Unknown names are a config error."""
        parsed: set[Feature] = set()
        unknown: list[str] = []
        for name in names:
            feature = Feature.parse(name.strip() if isinstance(name, str) else name)
            if feature is None:
                unknown.append(str(name))
            else:
                parsed.add(feature)
        if unknown:
            raise ConfigurationError(
                f"Unknown feature identifiers in registry: {', '.join(unknown)}",
                unknown=unknown,
            )
        return cls(frozenset(parsed))

    def is_known(self, feature: object) -> bool:
        parsed = Feature.parse(feature)
        return parsed is not None and parsed in self.features

    def __len__(self) -> int:
        return len(self.features)

    def __contains__(self, feature: object) -> bool:
        return self.is_known(feature)
