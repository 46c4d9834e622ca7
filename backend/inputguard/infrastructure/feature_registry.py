"""Feature Registry - loads the process-wide FeatureCatalog from settings, once.

Invariants:
    - get_feature_catalog() is cached: one catalog instance per process
    - Unknown identifiers in AVAILABLE_FEATURES fail startup (ConfigurationError)

Design Decisions:
    - Accept both CSV ("create:user,ban:user") and JSON list: ConfigMap friendly
"""

import json
import logging
from functools import lru_cache

from inputguard.config import Settings, get_settings
from inputguard.core.errors import ConfigurationError
from inputguard.core.feature_catalog import FeatureCatalog

logger = logging.getLogger(__name__)


def parse_feature_names(raw: str) -> list[str]:
    """Split a CSV or JSON-list string into stripped, non-empty names."""
    text = raw.strip()
    if text.startswith("["):
        try:
            items = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"AVAILABLE_FEATURES is not a valid JSON list: {e.msg}",
            ) from e
    else:
        items = text.split(",")
    return [str(x).strip() for x in items if str(x).strip()]


def load_feature_catalog(settings: Settings) -> FeatureCatalog:
    if settings.available_features is None:
        catalog = FeatureCatalog.default()
    else:
        catalog = FeatureCatalog.from_names(
            parse_feature_names(settings.available_features),
        )
    logger.info(f"Feature catalog loaded ({len(catalog)} features)")
    return catalog


@lru_cache
def get_feature_catalog() -> FeatureCatalog:
    return load_feature_catalog(get_settings())
