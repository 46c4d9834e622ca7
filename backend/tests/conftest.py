"""Root conftest - shared test configuration."""

import os

# Ensure tests never pick up a restricted registry from the developer's shell
os.environ.pop("AVAILABLE_FEATURES", None)
os.environ.setdefault("LOG_FORMAT", "text")
